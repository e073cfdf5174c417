"""Markdown transducer: post-order rendering plus the final normalization pass."""

import re
from typing import List, Tuple

from markup_cleaner.core.node import Element, Node, Text
from markup_cleaner.core.rules import rule_for

_FORMATTING_WS = re.compile(r"[\n\r\t]+")
_EXCESS_NEWLINES = re.compile(r"\n{3,}")
_LINE_INDENT = re.compile(r"^[ \t]+", re.MULTILINE)
# Code fences and backtick spans are matched first and kept as they are.
_INNER_SPACES = re.compile(r"(```.*?```|`[^`]*`)|(?<=\S) {2,}(?=\S)", re.DOTALL)


def render_text(text: Text) -> str:
    return _FORMATTING_WS.sub(" ", text.data)


def render(node: Node) -> str:
    """Render *node* and its subtree to un-normalized Markdown.

    Children are rendered before their parent. The walk keeps two stacks:
    pending nodes (a node is pushed a second time, marked expanded, once its
    children are queued) and finished fragments, where every child leaves
    exactly one entry.
    """
    if isinstance(node, Text):
        return render_text(node)

    done: List[str] = []
    pending: List[Tuple[Node, bool]] = [(node, False)]
    while pending:
        current, expanded = pending.pop()
        if isinstance(current, Text):
            done.append(render_text(current))
            continue

        rule = rule_for(current.tag)
        if not rule.needs_content:
            done.append(rule.apply(current, ""))
        elif expanded:
            count = len(current.children)
            content = "".join(done[len(done) - count:]) if count else ""
            if count:
                del done[len(done) - count:]
            done.append(rule.apply(current, content))
        else:
            pending.append((current, True))
            pending.extend((child, False) for child in reversed(current.children))
    return done[0]


def normalize(markdown: str) -> str:
    """Whitespace clean-up applied once to a complete render.

    Leading indentation is stripped on every line, fenced ``pre`` blocks
    included. Indentation goes first so that whitespace-only lines cannot
    leave three or more newlines behind. Runs of spaces between words
    collapse to one, except inside code fences and inline code.
    """
    markdown = _LINE_INDENT.sub("", markdown)
    markdown = _EXCESS_NEWLINES.sub("\n\n", markdown)
    markdown = _INNER_SPACES.sub(lambda m: m.group(1) or " ", markdown)
    return markdown.strip()


def to_markdown(element: Element) -> str:
    return normalize(render(element))
