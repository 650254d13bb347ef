from kusabi.cursor import Cursor
from kusabi.errors import MalformedAttribute, UnexpectedEndOfInput, UnexpectedToken
from kusabi.node import AttrMap


TAG_NAME_TERMINATORS = frozenset(" >")
ATTRIBUTE_KEY_TERMINATORS = frozenset(" >=")
ATTRIBUTE_VALUE_TERMINATORS = frozenset(" >")

# Quote characters are dropped wherever they appear inside a value.
ELIDED_VALUE_CHARS = frozenset('"')


def _read_until(
    cursor: Cursor,
    terminators: frozenset[str],
    expected: str,
    elided: frozenset[str] = frozenset(),
) -> str:
    result: list[str] = []
    while True:
        c = cursor.peek()
        if c is None:
            raise UnexpectedEndOfInput(expected, cursor.position)
        if c in terminators:
            return "".join(result)
        cursor.advance()
        if c not in elided:
            result.append(c)


def read_tag_name(cursor: Cursor) -> str:
    c = cursor.peek()
    if c is None:
        raise UnexpectedEndOfInput("tag name", cursor.position)
    if c in TAG_NAME_TERMINATORS:
        raise UnexpectedToken(c, "tag name", cursor.position)
    return _read_until(cursor, TAG_NAME_TERMINATORS, "tag name")


def read_attribute_key(cursor: Cursor) -> str:
    return _read_until(cursor, ATTRIBUTE_KEY_TERMINATORS, "attribute key")


def read_attribute_value(cursor: Cursor) -> str:
    """
    Read an attribute value such as ``"nyan"`` in ``<div id="nyan">``.

    The value stops at a space or ``>``, so quoted values can not contain
    spaces.
    """
    return _read_until(
        cursor,
        ATTRIBUTE_VALUE_TERMINATORS,
        "attribute value",
        elided=ELIDED_VALUE_CHARS,
    )


def read_attribute_list(cursor: Cursor) -> AttrMap:
    """
    Read ``key=value`` pairs up to and including the ``>`` that ends an
    opening tag. Later duplicates of a key overwrite earlier ones.
    """
    attributes: AttrMap = {}
    while True:
        c = cursor.peek()
        if c is None:
            raise UnexpectedEndOfInput("attribute list", cursor.position)
        if c == ">":
            cursor.advance()
            return attributes
        if c == " ":
            cursor.advance()
            continue

        key = read_attribute_key(cursor)
        position = cursor.position
        separator = cursor.advance()
        assert separator is not None
        if separator != "=":
            raise MalformedAttribute(key, separator, position)
        attributes[key] = read_attribute_value(cursor)
