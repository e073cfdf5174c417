"""Parse raw markup with BeautifulSoup and lift it into the node model.

Everything that would end up in ``<body>`` after an HTML5 parse becomes the
children of the content root. ``<head>`` subtrees, comments, doctypes and
processing instructions never reach the node model. The BeautifulSoup tree
is walked with an explicit stack, so nesting depth is bounded only by
``max_depth``.
"""

import warnings
from typing import Iterable, Iterator, List, Optional, Tuple

from bs4 import (
    BeautifulSoup,
    CData,
    Comment,
    Declaration,
    Doctype,
    FeatureNotFound,
    NavigableString,
    PageElement,
    ProcessingInstruction,
    Tag,
)
from bs4.builder import ParserRejectedMarkup

from markup_cleaner.core.node import Document, Element, Text
from markup_cleaner.errors import ParseError, TooDeepError
from markup_cleaner.utils.config import settings

_NON_CONTENT_STRINGS = (Comment, CData, Declaration, Doctype, ProcessingInstruction)
_DOCUMENT_WRAPPERS = frozenset(["html", "body"])
_HEAD_LEVEL = frozenset(["title", "base", "meta", "link", "style", "script", "noscript", "template"])


def parse(
    raw: str,
    parser: Optional[str] = None,
    max_depth: Optional[int] = None,
) -> Document:
    """Parse *raw* into a fresh ``Document``.

    ``parser`` is the BeautifulSoup backend (``settings.html_parser`` by
    default). ``max_depth`` of 0 disables the nesting check.
    """
    backend = parser or settings.html_parser
    limit = settings.max_nesting_depth if max_depth is None else max_depth
    try:
        with warnings.catch_warnings():
            # bs4 warns when markup looks like a filename or URL
            warnings.simplefilter("ignore")
            soup = BeautifulSoup(raw, backend, multi_valued_attributes=None)
    except FeatureNotFound as exc:
        raise ParseError(f"HTML parser backend {backend!r} is not installed.") from exc
    except ParserRejectedMarkup as exc:
        raise ParseError(f"Markup could not be parsed: {exc}") from exc

    root_attrs = _attrs(soup.body) if soup.body is not None else ()
    return Document(root=_lift(soup, root_attrs, limit))


def _attrs(tag: Tag) -> Tuple[Tuple[str, str], ...]:
    pairs: List[Tuple[str, str]] = []
    for key, value in tag.attrs.items():
        if isinstance(value, (list, tuple)):
            value = " ".join(value)
        pairs.append((key.lower(), "" if value is None else str(value)))
    return tuple(pairs)


def _body_children(soup: BeautifulSoup) -> Iterator[PageElement]:
    """Top-level nodes in the order an HTML5 parser places them in ``<body>``.

    ``<html>`` and ``<body>`` wrappers are flattened, so content html.parser
    leaves after ``</body>`` is kept. Head-level elements and blank text that
    come before any content belong to ``<head>`` and are skipped.
    """
    in_head = True
    pending: List[Iterator[PageElement]] = [iter(soup.children)]
    while pending:
        for child in pending[-1]:
            if isinstance(child, Tag):
                name = child.name.lower()
                if name in _DOCUMENT_WRAPPERS:
                    if name == "body":
                        in_head = False
                    pending.append(iter(child.children))
                    break
                if name == "head" or (in_head and name in _HEAD_LEVEL):
                    continue
                in_head = False
            elif isinstance(child, NavigableString) and not isinstance(child, _NON_CONTENT_STRINGS):
                if in_head and not child.strip():
                    continue
                in_head = False
            yield child
        else:
            pending.pop()


def _lift(soup: BeautifulSoup, root_attrs: Tuple[Tuple[str, str], ...], limit: int) -> Element:
    root = Element("body", root_attrs)
    stack: List[Tuple[Iterable[PageElement], Element, int]] = [(_body_children(soup), root, 0)]
    while stack:
        children, target, depth = stack.pop()
        for child in children:
            if isinstance(child, Tag):
                name = child.name.lower()
                if name == "head":
                    continue
                if limit and depth >= limit:
                    raise TooDeepError(limit)
                element = Element(name, _attrs(child))
                target.children.append(element)
                stack.append((child.children, element, depth + 1))
            elif isinstance(child, _NON_CONTENT_STRINGS):
                continue
            elif isinstance(child, NavigableString):
                target.children.append(Text(str(child)))
    return root
