from kusabi.cursor import Cursor, Position
from kusabi.errors import (
    MalformedAttribute,
    NestingTooDeep,
    ParseError,
    TagMismatch,
    UnexpectedEndOfInput,
    UnexpectedToken,
)
from kusabi.node import AttrMap, Element, Node, Text, print_tree
from kusabi.parser import parse

__version__ = "0.1.0"

__all__ = [
    "AttrMap",
    "Cursor",
    "Element",
    "MalformedAttribute",
    "NestingTooDeep",
    "Node",
    "ParseError",
    "Position",
    "TagMismatch",
    "Text",
    "UnexpectedEndOfInput",
    "UnexpectedToken",
    "parse",
    "print_tree",
]
