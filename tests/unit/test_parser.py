"""Unit tests for parsing markup into the node model."""

import pytest

from markup_cleaner.core.node import Element, Text
from markup_cleaner.core.parser import parse
from markup_cleaner.errors import ParseError, TooDeepError


def test_fragment_is_wrapped_in_body_root():
    doc = parse("<p>Hi</p>")
    assert doc.root.tag == "body"
    assert doc.root.children == [Element("p", (), [Text("Hi")])]


def test_full_document_uses_body_and_drops_head():
    doc = parse("<html><head><title>T</title></head><body><p>x</p></body></html>")
    assert doc.root.children == [Element("p", (), [Text("x")])]
    assert "T" not in doc.root.text_content()


def test_comments_are_not_text():
    doc = parse("<p>a<!-- hidden -->b</p>")
    assert doc.root.children[0].children == [Text("a"), Text("b")]


def test_attributes_keep_order_and_join_multi_values():
    doc = parse('<a href="/x" class="one two" title="T">t</a>')
    link = doc.root.children[0]
    assert link.attrs == (("href", "/x"), ("class", "one two"), ("title", "T"))
    assert link.get("title") == "T"
    assert link.get("alt") is None


def test_tag_names_are_lowercase():
    doc = parse("<P>x</P>")
    assert doc.root.children[0].tag == "p"


def test_entities_are_decoded():
    doc = parse("<p>a &amp; b</p>")
    assert doc.root.text_content() == "a & b"


def test_nesting_limit():
    at_limit = "<div>" * 5 + "x" + "</div>" * 5
    assert parse(at_limit, max_depth=5).root.text_content() == "x"

    too_deep = "<div>" * 6 + "x" + "</div>" * 6
    with pytest.raises(TooDeepError) as exc_info:
        parse(too_deep, max_depth=5)
    assert exc_info.value.limit == 5


def test_zero_limit_disables_check():
    deep = "<span>" * 1500 + "x" + "</span>" * 1500
    assert parse(deep, max_depth=0).root.text_content() == "x"


def test_unknown_backend_is_parse_error():
    with pytest.raises(ParseError):
        parse("<p>x</p>", parser="no-such-parser")


def test_content_after_body_is_kept():
    doc = parse('<body class="page"><p>a</p></body><p>after</p>')
    assert doc.root.attrs == (("class", "page"),)
    assert doc.root.children == [
        Element("p", (), [Text("a")]),
        Element("p", (), [Text("after")]),
    ]


def test_leading_head_elements_are_skipped():
    doc = parse("<title>T</title><style>p{}</style>\n<p>x</p>")
    assert doc.root.children == [Element("p", (), [Text("x")])]


def test_head_level_elements_after_content_stay_in_body():
    doc = parse("<p>x</p><script>s()</script>")
    assert [child.tag for child in doc.root.children] == ["p", "script"]


def test_script_at_start_of_explicit_body_is_kept():
    doc = parse("<html><head></head><body><script>s()</script><p>x</p></body></html>")
    assert [child.tag for child in doc.root.children] == ["script", "p"]
