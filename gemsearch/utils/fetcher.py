import codecs
import re
import click
import requests

from ..cli_logger import logger
from ..config import RUBYGEMS_ROOT, RUBYGEMS_SEARCH
from .search_parser import extract_gems

CHUNK_SIZE = 8192
FETCH_FAILED = "ERROR: Failed to reach RubyGems"

_CHARSET_RE = re.compile(r"charset=[\"']?([a-zA-Z0-9._-]+)", re.IGNORECASE)


def build_search_url(terms, search_url=RUBYGEMS_SEARCH):
    # terms are joined verbatim, no escaping
    return search_url + "+".join(terms)


def _response_encoding(response):
    # requests reports ISO-8859-1 for text/* without a charset; only an explicit charset is trusted
    match = _CHARSET_RE.search(response.headers.get("content-type", ""))
    if not match:
        return "utf-8"
    encoding = match.group(1)
    try:
        codecs.lookup(encoding)
    except LookupError:
        logger.warning(f"Unknown response encoding '{encoding}', decoding as utf-8")
        return "utf-8"
    return encoding


def search_gems(url, root_url=RUBYGEMS_ROOT, finalize_trailing=False, user_agent=None, timeout=None):
    """
    Fetch a search page and extract its gems, keyed by name.

    A transport failure is reported on stdout and yields an empty result
    instead of an exception.
    """
    headers = {"User-Agent": user_agent} if user_agent else {}
    logger.debug(f"Fetching {url}")
    try:
        with requests.get(url, headers=headers, stream=True, timeout=timeout) as response:
            if response.status_code >= 400:
                logger.warning(f"RubyGems answered with HTTP {response.status_code}")
            return extract_gems(
                response.iter_content(chunk_size=CHUNK_SIZE),
                root_url=root_url,
                finalize_trailing=finalize_trailing,
                encoding=_response_encoding(response),
            )
    except requests.RequestException as e:
        click.echo(FETCH_FAILED)
        logger.debug(f"Request to {url} failed: {e}")
        return {}
