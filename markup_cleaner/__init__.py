"""Markup cleaner -- turns HTML mixed with CSS/JS into clean Markdown or HTML."""

from markup_cleaner.converter import (
    clean_and_convert,
    clean_to_html,
    convert_markup_to_markdown,
    looks_like_html,
    to_markdown_output,
)
from markup_cleaner.errors import (
    EmptyInputError,
    MarkupCleanerError,
    ParseError,
    RemoteCleanError,
    TooDeepError,
)

__all__ = [
    "clean_and_convert",
    "clean_to_html",
    "convert_markup_to_markdown",
    "looks_like_html",
    "to_markdown_output",
    "EmptyInputError",
    "MarkupCleanerError",
    "ParseError",
    "RemoteCleanError",
    "TooDeepError",
]
