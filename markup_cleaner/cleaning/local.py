"""Local, deterministic cleaner (no network, no model)."""

from markup_cleaner.cleaning.base import CleanerResponse, ContentCleaner
from markup_cleaner.converter import clean_and_convert


class LocalCleaner(ContentCleaner):
    """Denylist sanitizer followed by the Markdown transducer."""

    def clean(self, raw: str) -> CleanerResponse:
        return CleanerResponse(cleaned_html=clean_and_convert(raw))
