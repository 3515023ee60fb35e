"""Status page retrieval — one HTTP GET, Latin-1 body decoded to text."""

from __future__ import annotations

import codecs
import logging

import httpx

from fbxmon.device.models import RawPage
from fbxmon.errors import ConfigError, FetchError

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "iso-8859-1"


def build_url(host: str, path: str) -> str:
    """Compose the page URL from a bare host and an absolute path."""
    host = host.strip().rstrip("/")
    if not host.startswith(("http://", "https://")):
        host = f"http://{host}"
    if not path.startswith("/"):
        path = f"/{path}"
    return f"{host}{path}"


def fetch_page(url: str, encoding: str = DEFAULT_ENCODING) -> RawPage:
    """Fetch the status page and return its decoded lines.

    The Freebox serves the page as ISO-8859-1 whatever its headers say, so
    the body is decoded from raw bytes rather than through ``response.text``.
    Raises :class:`FetchError` on any transport failure or non-2xx status,
    and :class:`ConfigError` for an unknown *encoding* before any request.
    """
    try:
        codecs.lookup(encoding)
    except LookupError:
        raise ConfigError(f"Unknown page encoding: {encoding}") from None

    logger.debug("GET %s", url)
    try:
        response = httpx.get(url)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise FetchError(url, f"HTTP {exc.response.status_code}") from exc
    except httpx.HTTPError as exc:
        raise FetchError(url, str(exc) or type(exc).__name__) from exc

    text = response.content.decode(encoding, errors="replace")
    page = RawPage.from_text(text, url=url)
    logger.debug("Fetched %d lines from %s", len(page), url)
    return page
