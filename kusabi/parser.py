import logging

from kusabi.cursor import Cursor
from kusabi.errors import NestingTooDeep, TagMismatch, UnexpectedEndOfInput, UnexpectedToken
from kusabi.lexer import read_attribute_list, read_tag_name
from kusabi.node import Element, Node, Text


logger = logging.getLogger(__name__)


def parse(source: str) -> Node:
    """
    Parse one node from ``source``.

    Raises a ``ParseError`` subclass on any grammar violation, and
    ``NestingTooDeep`` when the document is nested past the interpreter's
    recursion limit; no partial tree is ever returned. Input following the
    root node is left unread.
    """
    cursor = Cursor(source)
    try:
        node = parse_node(cursor)
    except RecursionError as e:
        raise NestingTooDeep(cursor.position) from e
    if node is None:
        raise UnexpectedEndOfInput("'<' after text", cursor.position)
    if not cursor.exhausted:
        logger.debug("ignoring %d trailing characters at %s", cursor.remaining, cursor.position)
    return node


def parse_node(cursor: Cursor) -> Node | None:
    c = cursor.peek()
    if c is None:
        raise UnexpectedEndOfInput("node", cursor.position)
    if c == "<":
        return parse_element(cursor)
    return parse_text(cursor)


def parse_element(cursor: Cursor) -> Node:
    position = cursor.position
    c = cursor.advance()
    if c is None:
        raise UnexpectedEndOfInput("'<'", position)
    if c != "<":
        raise UnexpectedToken(c, "'<'", position)
    return parse_element_after_open(cursor)


def parse_element_after_open(cursor: Cursor) -> Node:
    """Parse the rest of an element whose ``<`` has already been consumed."""
    tag_name = read_tag_name(cursor)
    attributes = read_attribute_list(cursor)
    logger.debug("open <%s> at %s", tag_name, cursor.position)

    children = parse_node_sequence(cursor)
    parse_closing_tag(cursor, tag_name)
    logger.debug("close </%s> with %d children", tag_name, len(children))

    return Node(
        node_type=Element(tag_name=tag_name, attributes=attributes),
        children=children,
    )


def parse_node_sequence(cursor: Cursor) -> tuple[Node, ...]:
    """
    Parse child nodes until a closing tag begins.

    Text is dispatched on a peek. A ``<`` is consumed before dispatch: it
    starts the closing tag when followed by ``/``, a child element otherwise.
    On return the cursor sits on the ``/`` of the closing tag.
    """
    nodes: list[Node] = []
    while True:
        c = cursor.peek()
        if c is None:
            raise UnexpectedEndOfInput("closing tag", cursor.position)

        if c != "<":
            text = parse_text(cursor)
            if text is None:
                raise UnexpectedEndOfInput("closing tag", cursor.position)
            nodes.append(text)
            continue

        cursor.advance()
        c = cursor.peek()
        if c is None:
            raise UnexpectedEndOfInput("tag after '<'", cursor.position)
        if c == "/":
            return tuple(nodes)
        nodes.append(parse_element_after_open(cursor))


def parse_closing_tag(cursor: Cursor, tag_name: str) -> None:
    """Consume ``/name >`` once the ``<`` of a closing tag has been consumed."""
    position = cursor.position
    c = cursor.advance()
    if c is None:
        raise UnexpectedEndOfInput("'/' of closing tag", position)
    if c != "/":
        raise UnexpectedToken(c, "'/' of closing tag", position)

    position = cursor.position
    closing = read_tag_name(cursor)
    if closing != tag_name:
        raise TagMismatch(tag_name, closing, position)

    while True:
        position = cursor.position
        c = cursor.advance()
        if c == " ":
            continue
        elif c == ">":
            return
        elif c is None:
            raise UnexpectedEndOfInput(f"'>' of </{tag_name}>", position)
        else:
            raise UnexpectedToken(c, f"'>' of </{tag_name}>", position)


def parse_text(cursor: Cursor) -> Node | None:
    result: list[str] = []
    position = cursor.position
    while True:
        c = cursor.peek()
        if c is None:
            logger.debug("text at %s runs to end of input", position)
            return None
        if c == "<":
            break
        cursor.advance()
        result.append(c)

    data = "".join(result)
    logger.debug("text %r at %s", data, position)
    return Node(node_type=Text(data=data))
