"""Core module -- parser, sanitizer, Markdown transducer, HTML serializer."""

from markup_cleaner.core.node import Document, Element, Node, Text
from markup_cleaner.core.parser import parse
from markup_cleaner.core.sanitizer import DENYLIST, is_denied, sanitize
from markup_cleaner.core.transducer import normalize, render, to_markdown

__all__ = [
    "Document",
    "Element",
    "Node",
    "Text",
    "parse",
    "DENYLIST",
    "is_denied",
    "sanitize",
    "normalize",
    "render",
    "to_markdown",
]
