import logging
import os
import pathlib

import httpx

from opmlkit.exceptions import NetworkError, ReadError
from opmlkit.http_client import Client, get_client
from opmlkit.models import Document
from opmlkit.opml_parser import parse_opml

logger = logging.getLogger(__name__)


def fetch_opml(url: str, *, client: Client | None = None) -> Document:
    """Fetches OPML document from a URL and parses it.

    The status code is not checked: whatever body the server returns is parsed.

    Raises NetworkError if the request fails, ReadError if the response body
    cannot be read, and ParseError if the body is not well-formed XML.
    """
    client = client or get_client()
    try:
        with client.stream(url) as response:
            try:
                content = response.read()
            except httpx.HTTPError as exc:
                raise ReadError(
                    f"Failed to read response from {url}: {exc}", url=url
                ) from exc
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise NetworkError(f"Failed to fetch {url}: {exc}", url=url) from exc

    logger.debug("Fetched %s: %d bytes", url, len(content))
    return parse_opml(content)


def read_opml(path: str | os.PathLike) -> Document:
    """Reads OPML document from a file and parses it.

    Raises ReadError if the file cannot be read and ParseError if the content
    is not well-formed XML.
    """
    try:
        content = pathlib.Path(path).read_bytes()
    except OSError as exc:
        raise ReadError(f"Failed to read {path}: {exc}", path=str(path)) from exc

    logger.debug("Read %s: %d bytes", path, len(content))
    return parse_opml(content)
