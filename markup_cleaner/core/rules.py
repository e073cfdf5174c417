"""Declarative tag -> Markdown rule table.

Each rule turns an element plus its already-rendered ``content`` into a
string. Rules with ``needs_content = False`` ignore their children, so the
traversal does not render them at all.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import ClassVar, Dict, Mapping, Union

from markup_cleaner.core.node import Element


@dataclass(frozen=True)
class Wrap:
    """``prefix + content + suffix``; ``content`` is stripped when ``trim``."""

    prefix: str
    suffix: str = ""
    trim: bool = True
    needs_content: ClassVar[bool] = True

    def apply(self, element: Element, content: str) -> str:
        body = content.strip() if self.trim else content
        return f"{self.prefix}{body}{self.suffix}"


@dataclass(frozen=True)
class Link:
    needs_content: ClassVar[bool] = True

    def apply(self, element: Element, content: str) -> str:
        href = element.get("href") or "#"
        title = element.get("title")
        title_clause = f' "{title}"' if title else ""
        return f" [{content.strip()}]({href}{title_clause}) "


@dataclass(frozen=True)
class Image:
    needs_content: ClassVar[bool] = False

    def apply(self, element: Element, content: str) -> str:
        src = element.get("src") or ""
        alt = element.get("alt") or "image"
        return f"\n\n![{alt}]({src})\n\n"


@dataclass(frozen=True)
class Verbatim:
    """Fenced block over the raw text of the subtree; nested tags are not rendered."""

    fence: str = "```"
    needs_content: ClassVar[bool] = False

    def apply(self, element: Element, content: str) -> str:
        return f"\n\n{self.fence}\n{element.text_content().strip()}\n{self.fence}\n\n"


@dataclass(frozen=True)
class Literal:
    text: str
    needs_content: ClassVar[bool] = False

    def apply(self, element: Element, content: str) -> str:
        return self.text


@dataclass(frozen=True)
class Transparent:
    needs_content: ClassVar[bool] = True

    def apply(self, element: Element, content: str) -> str:
        return content


Rule = Union[Wrap, Link, Image, Verbatim, Literal, Transparent]

TRANSPARENT = Transparent()


def _build_rules() -> Dict[str, Rule]:
    rules: Dict[str, Rule] = {}
    for level in range(1, 7):
        rules[f"h{level}"] = Wrap("\n\n" + "#" * level + " ", "\n\n")
    rules["p"] = Wrap("\n\n", "\n\n")
    for tag in ("div", "section", "article", "main", "header"):
        rules[tag] = Wrap("\n", "\n")
    for tag in ("ul", "ol"):
        rules[tag] = Wrap("\n", "\n", trim=False)
    rules["li"] = Wrap("\n- ")
    for tag in ("b", "strong"):
        rules[tag] = Wrap(" **", "** ")
    for tag in ("i", "em"):
        rules[tag] = Wrap(" *", "* ")
    rules["u"] = Wrap(" _", "_ ")
    for tag in ("s", "strike", "del"):
        rules[tag] = Wrap(" ~~", "~~ ")
    rules["a"] = Link()
    rules["img"] = Image()
    rules["blockquote"] = Wrap("\n\n> ", "\n\n")
    rules["code"] = Wrap("`", "`", trim=False)
    rules["pre"] = Verbatim()
    rules["br"] = Literal("  \n")
    rules["hr"] = Literal("\n\n---\n\n")
    return rules


TAG_RULES: Mapping[str, Rule] = MappingProxyType(_build_rules())


def rule_for(tag: str) -> Rule:
    """Look up the rule for *tag*; unmapped tags pass their content through."""
    return TAG_RULES.get(tag, TRANSPARENT)
