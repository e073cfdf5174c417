"""Unit tests for the tag rule table."""

import pytest

from markup_cleaner.core.node import Element, Text
from markup_cleaner.core.rules import (
    TAG_RULES,
    TRANSPARENT,
    Image,
    Link,
    Literal,
    Verbatim,
    Wrap,
    rule_for,
)


def test_unmapped_tags_are_transparent():
    assert rule_for("span") is TRANSPARENT
    assert rule_for("table") is TRANSPARENT
    assert TRANSPARENT.apply(Element("span"), " a ") == " a "


def test_heading_levels():
    for level in range(1, 7):
        out = rule_for(f"h{level}").apply(Element(f"h{level}"), "  Title ")
        assert out == "\n\n" + "#" * level + " Title\n\n"


def test_lists_keep_untrimmed_content():
    assert rule_for("ul").apply(Element("ul"), "\n- A ") == "\n\n- A \n"
    assert rule_for("li").apply(Element("li"), " A ") == "\n- A"


def test_inline_formatting():
    el = Element("x")
    assert rule_for("strong").apply(el, " w ") == " **w** "
    assert rule_for("em").apply(el, "w") == " *w* "
    assert rule_for("u").apply(el, "w") == " _w_ "
    assert rule_for("del").apply(el, "w") == " ~~w~~ "
    assert rule_for("code").apply(el, " x ") == "` x `"


def test_link_defaults_and_title():
    link = Link()
    assert link.apply(Element("a"), "text") == " [text](#) "
    assert link.apply(Element("a", (("href", ""),)), "text") == " [text](#) "
    a = Element("a", (("title", "T"), ("href", "/x"), ("class", "c")))
    assert link.apply(a, " text ") == ' [text](/x "T") '


def test_image_defaults():
    image = Image()
    assert image.apply(Element("img"), "") == "\n\n![image]()\n\n"
    img = Element("img", (("src", "/p.png"), ("alt", "A cat")))
    assert image.apply(img, "") == "\n\n![A cat](/p.png)\n\n"


def test_verbatim_uses_raw_text():
    pre = Element("pre", (), [Element("b", (), [Text("x\n")]), Text("  y  ")])
    assert Verbatim().apply(pre, "ignored") == "\n\n```\nx\n  y\n```\n\n"


def test_rules_without_content():
    assert not Image.needs_content
    assert not Verbatim.needs_content
    assert not Literal.needs_content
    assert Wrap.needs_content
    assert rule_for("br").apply(Element("br"), "") == "  \n"
    assert rule_for("hr").apply(Element("hr"), "") == "\n\n---\n\n"


def test_table_is_read_only():
    with pytest.raises(TypeError):
        TAG_RULES["span"] = TRANSPARENT
