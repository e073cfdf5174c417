"""Cleaning module -- interchangeable local and remote cleaning strategies."""

from markup_cleaner.cleaning.base import CleanerResponse, ContentCleaner
from markup_cleaner.cleaning.local import LocalCleaner

STRATEGIES = ("local", "remote")


def get_cleaner(strategy: str = "local", **kwargs) -> ContentCleaner:
    """Return the cleaner registered under *strategy*."""
    if strategy == "local":
        return LocalCleaner()
    if strategy == "remote":
        # the local path must not import openai
        from markup_cleaner.llm.remote_cleaner import RemoteCleaner

        return RemoteCleaner(**kwargs)
    raise ValueError(f"Unknown cleaning strategy: {strategy!r} (expected one of {STRATEGIES})")


__all__ = ["CleanerResponse", "ContentCleaner", "LocalCleaner", "STRATEGIES", "get_cleaner"]
