"""Web module -- page fetching for URL input."""

from markup_cleaner.web.fetcher import fetch_page, is_url

__all__ = ["fetch_page", "is_url"]
