import pytest

from soupwalk.dom import Attr, Comment, Element, Text
from soupwalk.matcher import attribute_contains, attribute_equals, matches


@pytest.fixture
def div():
    return Element("div", [("id", "main"), ("class", "first second")])


def test_tag_only(div):
    assert matches(div, ("div",))
    assert not matches(div, ("span",))


def test_empty_tag_is_wildcard(div):
    assert matches(div, ("",))
    assert matches(Element("section"), ("",))


def test_wildcard_never_matches_non_elements():
    assert not matches(Text("div"), ("",))
    assert not matches(Comment("div"), ("",))


def test_loose_is_token_containment(div):
    assert matches(div, ("div", "class", "first"))
    assert matches(div, ("div", "class", "second"))
    assert not matches(div, ("div", "class", "fir"))
    assert not matches(div, ("div", "class", "first second"))


def test_strict_is_exact_value(div):
    assert not matches(div, ("div", "class", "first"), strict=True)
    assert matches(div, ("div", "class", "first second"), strict=True)
    assert not matches(div, ("div", "class", "second first"), strict=True)


def test_attribute_name_must_match(div):
    assert not matches(div, ("div", "title", "main"))
    assert matches(div, ("div", "id", "main"))


def test_tag_checked_before_attributes(div):
    assert not matches(div, ("span", "id", "main"))
    assert matches(div, ("", "id", "main"))


@pytest.mark.parametrize("args", [
    (),
    ("div", "id"),
    ("div", "id", "main", "x"),
])
def test_other_query_lengths_never_match(div, args):
    assert not matches(div, args)
    assert not matches(div, args, strict=True)


def test_any_repeated_attribute_can_match():
    element = Element("div", [("class", "a"), ("class", "b")])
    assert matches(element, ("div", "class", "b"))
    assert matches(element, ("div", "class", "a"), strict=True)


def test_attribute_helpers():
    attr = Attr("class", "x  y\tz")
    assert attribute_contains(attr, "class", "y")
    assert attribute_contains(attr, "class", "z")
    assert not attribute_contains(attr, "id", "y")
    assert attribute_equals(attr, "class", "x  y\tz")
    assert not attribute_equals(attr, "class", "x y z")
