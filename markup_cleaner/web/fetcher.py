"""Web page fetcher for URL input."""

from typing import Optional
from urllib.parse import urlparse

import httpx

from markup_cleaner.utils.config import settings
from markup_cleaner.utils.logger import get_logger

log = get_logger(__name__)


def is_url(source: str) -> bool:
    """True for http(s) URLs, False for file paths and ``-``."""
    parsed = urlparse(source)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def fetch_page(url: str, timeout: Optional[float] = None) -> Optional[str]:
    """GET a URL and return the body text, or None on any error."""
    try:
        with httpx.Client(timeout=timeout or settings.fetch_timeout, follow_redirects=True) as client:
            resp = client.get(url)
            resp.raise_for_status()
            return resp.text
    except httpx.HTTPError:
        log.warning("Failed to fetch %s", url)
        return None
