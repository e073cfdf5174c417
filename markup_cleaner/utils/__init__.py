"""Utils module -- config, logging."""

from markup_cleaner.utils.config import settings
from markup_cleaner.utils.logger import get_logger

__all__ = ["settings", "get_logger"]
