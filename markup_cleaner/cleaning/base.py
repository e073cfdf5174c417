"""Abstract cleaner interface and shared CleanerResponse dataclass."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class CleanerResponse:
    """Result of one cleaning call."""

    cleaned_html: str  # Markdown for the local cleaner, an HTML fragment for the remote one


class ContentCleaner(ABC):
    """Abstract interface -- swap strategies without touching callers."""

    @abstractmethod
    def clean(self, raw: str) -> CleanerResponse:
        """Return the main content of *raw* markup."""
        ...
