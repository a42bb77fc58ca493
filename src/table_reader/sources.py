"""Loading documents from files, URLs, streams and HTML text."""

from pathlib import Path
from typing import IO
from urllib.parse import unquote, urlparse

import requests
import structlog
from bs4 import BeautifulSoup

from table_reader.config.settings import SourceSettings
from table_reader.exceptions import SourceReadError

logger = structlog.get_logger(__name__)

REMOTE_SCHEMES = {"http", "https"}


def load_document(
    source: str | Path | IO,
    settings: SourceSettings | None = None,
) -> BeautifulSoup:
    """Parse a document from any supported source.

    Supported sources:
    - ``pathlib.Path`` or a filesystem path string
    - ``file://`` URLs
    - ``http://`` and ``https://`` URLs, fetched with requests
    - binary or text file-like objects
    - HTML text (a string starting with ``<``)

    Args:
        source: The document source.
        settings: Parser, encoding and timeout settings.

    Returns:
        The parsed document.

    Raises:
        SourceReadError: If the source cannot be read or its URL scheme is
            not supported.
    """
    settings = settings or SourceSettings()

    try:
        markup = _read(source, settings)
    except (OSError, requests.RequestException) as e:
        raise SourceReadError(f"Cannot read {source}") from e

    if isinstance(markup, bytes):
        return BeautifulSoup(markup, settings.parser, from_encoding=settings.encoding)
    return BeautifulSoup(markup, settings.parser)


def _read(source: str | Path | IO, settings: SourceSettings) -> str | bytes:
    if isinstance(source, Path):
        return _read_file(source)

    if isinstance(source, str):
        if source.lstrip().startswith("<"):
            return source

        parsed = urlparse(source)
        if parsed.scheme in REMOTE_SCHEMES:
            return _fetch(source, settings)
        if parsed.scheme == "file":
            return _read_file(Path(unquote(parsed.path)))
        # single letters are Windows drive prefixes, not schemes
        if len(parsed.scheme) > 1:
            raise SourceReadError(f"Unsupported scheme {parsed.scheme!r} in {source}")
        return _read_file(Path(source))

    if hasattr(source, "read"):
        logger.debug("Reading document from stream")
        return source.read()

    raise SourceReadError(f"Unsupported source type: {type(source).__name__}")


def _read_file(path: Path) -> bytes:
    logger.debug("Reading document from file", path=str(path))
    return path.read_bytes()


def _fetch(url: str, settings: SourceSettings) -> bytes:
    logger.info("Fetching document", url=url, timeout=settings.timeout_seconds)
    response = requests.get(
        url,
        timeout=settings.timeout_seconds,
        headers={"User-Agent": settings.user_agent},
    )
    response.raise_for_status()
    return response.content
