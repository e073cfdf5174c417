"""Serialize a sanitized tree back to a reduced HTML fragment.

Elements with a Markdown rule are kept, everything else is unwrapped. Only
link and image attributes survive.
"""

from html import escape
from typing import List, Union

from markup_cleaner.core.node import Element, Text
from markup_cleaner.core.rules import TAG_RULES

KEPT_ATTRIBUTES = ("href", "title", "src", "alt")
VOID_TAGS = frozenset(["br", "hr", "img"])


def _start_tag(element: Element) -> str:
    parts = [element.tag]
    for key, value in element.attrs:
        if key in KEPT_ATTRIBUTES:
            parts.append(f'{key}="{escape(value, quote=True)}"')
    return "<" + " ".join(parts) + ">"


def to_html(root: Element) -> str:
    """Serialize the children of *root* (the root tag itself is omitted)."""
    out: List[str] = []
    # Strings on the stack are end tags waiting for their element's children.
    stack: List[Union[Element, Text, str]] = list(reversed(root.children))
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            out.append(item)
        elif isinstance(item, Text):
            out.append(escape(item.data, quote=False))
        elif item.tag not in TAG_RULES:
            stack.extend(reversed(item.children))
        elif item.tag in VOID_TAGS:
            out.append(_start_tag(item))
        elif item.tag == "pre":
            out.append(f"{_start_tag(item)}{escape(item.text_content(), quote=False)}</pre>")
        else:
            out.append(_start_tag(item))
            stack.append(f"</{item.tag}>")
            stack.extend(reversed(item.children))
    return "".join(out).strip()
