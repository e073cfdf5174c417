"""HTML to Markdown conversion entry points."""

from markup_cleaner.core.parser import parse
from markup_cleaner.core.sanitizer import DENYLIST, sanitize
from markup_cleaner.core.serializer import to_html
from markup_cleaner.core.transducer import to_markdown
from markup_cleaner.errors import EmptyInputError


def convert_markup_to_markdown(raw: str) -> str:
    """Convert markup to Markdown as-is, without removing any tags."""
    if not raw:
        return ""
    doc = parse(raw)
    return to_markdown(doc.root)


def clean_and_convert(raw: str) -> str:
    """Strip denylisted tags (scripts, styles, navigation, forms, ...) and convert to Markdown.

    Raises ``EmptyInputError`` for blank input.
    """
    if not raw or not raw.strip():
        raise EmptyInputError()
    doc = sanitize(parse(raw), DENYLIST)
    return to_markdown(doc.root)


def clean_to_html(raw: str) -> str:
    """Strip denylisted tags and return a reduced HTML fragment."""
    if not raw or not raw.strip():
        raise EmptyInputError()
    doc = sanitize(parse(raw), DENYLIST)
    return to_html(doc.root)


def looks_like_html(text: str) -> bool:
    stripped = text.strip()
    return stripped.startswith("<") and not stripped.upper().startswith("<!DOCTYPE")


def to_markdown_output(text: str) -> str:
    """Return *text* as Markdown, converting it first if it is still HTML."""
    if looks_like_html(text):
        return convert_markup_to_markdown(text)
    return text
