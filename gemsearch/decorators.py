import functools
import click
import sys
from .cli_logger import logger

def handle_exceptions(func):
    """
    Keep a search command from dying with a traceback.

    The wrapped function takes the search terms as its first argument; they
    are quoted in the error message and the traceback goes to the log file.
    """
    @functools.wraps(func)
    def wrapper(terms, *args, **kwargs):
        query = " ".join(terms)
        try:
            return func(terms, *args, **kwargs)
        except click.Abort:
            logger.warning(f"\nSearch for '{query}' aborted by user.")
        except click.ClickException as e:
            logger.error(f"Search for '{query}' failed: {e.format_message()}")
            logger.exception(*sys.exc_info())
        except Exception as e:
            logger.error(f"\nSearch for '{query}' failed unexpectedly: {e}")
            logger.info(f"Run 'sg search --verbose {query}' to see the traceback.")
            logger.exception(*sys.exc_info())
    return wrapper
