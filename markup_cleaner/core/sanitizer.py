"""Denylist filter: drops non-content subtrees before rendering."""

from typing import Collection, Iterable

from markup_cleaner.core.node import Document, Element

DENYLIST = frozenset(
    [
        "script", "style", "link", "meta", "noscript", "iframe", "svg",
        "nav", "footer", "aside", "form", "button", "input", "select", "textarea",
        "object", "embed", "applet", "canvas", "map", "area",
    ]
)


def is_denied(tag: str, denylist: Collection[str] = DENYLIST) -> bool:
    """Return True if elements named *tag* are removed; *denylist* holds lowercase names."""
    return tag.lower() in denylist


def sanitize(doc: Document, denylist: Iterable[str] = DENYLIST) -> Document:
    """Return a copy of *doc* without any denylisted element or its subtree.

    The input document is left untouched. Text nodes are immutable and are
    shared between the two trees.
    """
    blocked = frozenset(name.lower() for name in denylist)
    source = doc.root
    root = Element(source.tag, source.attrs)
    if is_denied(source.tag, blocked):
        return Document(root=root)

    stack = [(source, root)]
    while stack:
        original, copy = stack.pop()
        for child in original.children:
            if isinstance(child, Element):
                if is_denied(child.tag, blocked):
                    continue
                kept = Element(child.tag, child.attrs)
                copy.children.append(kept)
                stack.append((child, kept))
            else:
                copy.children.append(child)
    return Document(root=root)
