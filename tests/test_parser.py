import sys

import pytest

from kusabi import parse
from kusabi.cursor import Cursor
from kusabi.errors import (
    MalformedAttribute,
    NestingTooDeep,
    ParseError,
    TagMismatch,
    UnexpectedEndOfInput,
    UnexpectedToken,
)
from kusabi.node import Element, Node, Text
from kusabi.parser import parse_closing_tag, parse_element, parse_node_sequence, parse_text


####
# Element Tests
####

@pytest.mark.ci
def test_parse_element_with_attribute_and_text():
    root = parse('<tag attr="v">text</tag>')
    assert root == Node.element("tag", {"attr": "v"}, Node.text("text"))
    assert isinstance(root.node_type, Element)
    assert root.node_type.tag_name == "tag"
    assert root.node_type.attributes == {"attr": "v"}
    assert len(root.children) == 1
    assert isinstance(root.children[0].node_type, Text)
    assert root.children[0].node_type.data == "text"


@pytest.mark.ci
def test_parse_empty_element():
    root = parse("<body></body>")
    assert root == Node(node_type=Element(tag_name="body", attributes={}), children=())


@pytest.mark.ci
def test_parse_multiple_attributes():
    root = parse('<div id="nyan" class="aaa"></div>')
    assert root.node_type == Element(tag_name="div", attributes={"class": "aaa", "id": "nyan"})


@pytest.mark.ci
def test_parse_nested_elements():
    root = parse("<a><b></b></a>")
    assert root == Node.element("a", {}, Node.element("b"))
    assert root.children[0].children == ()


@pytest.mark.ci
def test_parse_document():
    content = '<body><div class="aa" id="aaa">nyan</div></body>'
    root = parse(content)
    assert root == Node.element(
        "body",
        {},
        Node.element("div", {"class": "aa", "id": "aaa"}, Node.text("nyan")),
    )


@pytest.mark.ci
def test_parse_mixed_children_keep_every_character():
    root = parse("<p>Hello <b>bold</b> world<i>x</i></p>")
    assert root == Node.element(
        "p",
        {},
        Node.text("Hello "),
        Node.element("b", {}, Node.text("bold")),
        Node.text(" world"),
        Node.element("i", {}, Node.text("x")),
    )


@pytest.mark.ci
def test_parse_sibling_elements():
    root = parse("<ul><li>1</li><li>2</li></ul>")
    assert [child.node_type.tag_name for child in root.children] == ["li", "li"]
    assert root.children[1].children == (Node.text("2"),)


@pytest.mark.ci
def test_text_is_kept_raw():
    root = parse("<p>  a &amp; b\n  </p>")
    assert root.children == (Node.text("  a &amp; b\n  "),)


@pytest.mark.ci
def test_closing_tag_tolerates_spaces():
    assert parse("<a></a   >") == Node.element("a")


@pytest.mark.ci
def test_quotes_elided_inside_value():
    root = parse('<a title=ab"c"d></a>')
    assert root.node_type.attributes == {"title": "abcd"}


@pytest.mark.ci
def test_parse_is_deterministic():
    content = '<body><div id="x">a<b>c</b></div>tail</body>'
    assert parse(content) == parse(content)


@pytest.mark.ci
def test_trailing_input_is_ignored():
    assert parse("<a></a>rest") == Node.element("a")


@pytest.mark.ci
def test_deep_nesting():
    depth = 200
    content = "<d>" * depth + "</d>" * depth
    node = parse(content)
    for _ in range(depth - 1):
        assert len(node.children) == 1
        node = node.children[0]
    assert node.children == ()


@pytest.mark.ci
def test_nesting_past_recursion_limit():
    depth = sys.getrecursionlimit()
    content = "<d>" * depth + "</d>" * depth
    with pytest.raises(NestingTooDeep) as e:
        parse(content)
    assert e.value.line == 1


@pytest.mark.ci
def test_deep_nesting_with_raised_recursion_limit():
    depth = 600
    content = "<d>" * depth + "</d>" * depth
    previous_limit = sys.getrecursionlimit()
    sys.setrecursionlimit(5000)
    try:
        node = parse(content)
    finally:
        sys.setrecursionlimit(previous_limit)
    for _ in range(depth - 1):
        node = node.children[0]
    assert node == Node.element("d")


####
# Error Tests
####

@pytest.mark.ci
def test_mismatched_closing_tag():
    with pytest.raises(TagMismatch) as e:
        parse("<a></b>")
    assert e.value.names == ("a", "b")
    assert e.value.opening == "a"
    assert e.value.closing == "b"


@pytest.mark.ci
def test_closing_tag_is_case_sensitive():
    with pytest.raises(TagMismatch):
        parse("<a></A>")


@pytest.mark.ci
def test_space_before_closing_tag_name():
    with pytest.raises(UnexpectedToken) as e:
        parse("<a></ a>")
    assert e.value.token == " "


@pytest.mark.ci
def test_truncated_opening_tag():
    with pytest.raises(UnexpectedEndOfInput):
        parse('<div id="x"')


@pytest.mark.ci
def test_unclosed_element():
    with pytest.raises(UnexpectedEndOfInput):
        parse("<a>")
    with pytest.raises(UnexpectedEndOfInput):
        parse("<a>text")
    with pytest.raises(UnexpectedEndOfInput):
        parse("<a><")
    with pytest.raises(UnexpectedEndOfInput):
        parse("<a></a")


@pytest.mark.ci
def test_empty_tag_name():
    with pytest.raises(UnexpectedToken):
        parse("<></>")


@pytest.mark.ci
def test_garbage_in_closing_tag():
    with pytest.raises(UnexpectedToken) as e:
        parse("<a></a x>")
    assert e.value.token == "x"


@pytest.mark.ci
def test_attribute_without_value():
    with pytest.raises(MalformedAttribute):
        parse("<input disabled></input>")


@pytest.mark.ci
def test_empty_and_text_only_documents():
    with pytest.raises(UnexpectedEndOfInput):
        parse("")
    with pytest.raises(UnexpectedEndOfInput):
        parse("just text")


@pytest.mark.ci
def test_error_position():
    with pytest.raises(ParseError) as e:
        parse("<a>\n  </b>")
    assert e.value.line == 2
    assert e.value.column == 5
    assert str(e.value).startswith("(2,5): tag-mismatch")


####
# Routine Tests
####

@pytest.mark.ci
def test_parse_element_requires_lt():
    with pytest.raises(UnexpectedToken):
        parse_element(Cursor("a></a>"))


@pytest.mark.ci
def test_parse_node_sequence_stops_on_closing_slash():
    cursor = Cursor("x<b></b></a>")
    nodes = parse_node_sequence(cursor)
    assert nodes == (Node.text("x"), Node.element("b"))
    assert cursor.peek() == "/"


@pytest.mark.ci
def test_parse_closing_tag_requires_slash():
    with pytest.raises(UnexpectedToken):
        parse_closing_tag(Cursor("a>"), "a")
    parse_closing_tag(Cursor("/a>"), "a")


@pytest.mark.ci
def test_parse_text_stops_before_lt():
    cursor = Cursor("hello<")
    assert parse_text(cursor) == Node.text("hello")
    assert cursor.peek() == "<"


@pytest.mark.ci
def test_parse_text_to_end_of_input_yields_nothing():
    assert parse_text(Cursor("hello")) is None
