import click
from .. import config as config_module
from ..cli_logger import logger
from ..decorators import handle_exceptions
from ..utils import build_search_url, search_gems, render_results
from ..usage import show_usage

@click.command()
@click.argument('terms', nargs=-1)
@click.option('--path', '-p', default=".", help="Directory holding gemsearch.toml.")
@click.option('--include-last', is_flag=True,
              help="Also keep the last result on the page.")
@click.option('--long', 'long_format', is_flag=True, help="Print gem descriptions.")
@click.option('--verbose', '-v', is_flag=True, help="Echo debug messages.")
@click.pass_context
def search(ctx, terms, path, include_last, long_format, verbose):
    """Search RubyGems and print matching gems in ranking order."""
    if not terms:
        show_usage(ctx.find_root())
        ctx.exit(1)
    run_search(terms, path, include_last, long_format, verbose)

@handle_exceptions
def run_search(terms, path, include_last, long_format, verbose):
    logger.verbose = verbose
    settings = config_module.get_search_settings(config_module.load_config(path=path))
    if include_last:
        settings["finalize_trailing"] = True

    url = build_search_url(terms, settings["search_url"])
    gems = search_gems(
        url,
        root_url=settings["root_url"],
        finalize_trailing=settings["finalize_trailing"],
        user_agent=settings["user_agent"],
        timeout=settings["timeout"],
    )
    for line in render_results(gems, long=long_format):
        click.echo(line)
