from kusabi.cursor import Position


class ParseError(ValueError):
    """Base class for every grammar violation raised while parsing."""

    code: str = "parse-error"

    def __init__(self, message: str, position: Position | None = None):
        super().__init__(message)
        self.message = message
        self.position = position

    @property
    def line(self) -> int | None:
        return self.position.line if self.position else None

    @property
    def column(self) -> int | None:
        return self.position.column if self.position else None

    @property
    def offset(self) -> int | None:
        return self.position.offset if self.position else None

    def __str__(self) -> str:
        if self.position is not None:
            return f"({self.line},{self.column}): {self.code} - {self.message}"
        return f"{self.code} - {self.message}"

    def __repr__(self) -> str:
        if self.position is not None:
            return f"{type(self).__name__}({self.code!r}, line={self.line}, column={self.column})"
        return f"{type(self).__name__}({self.code!r})"


class UnexpectedEndOfInput(ParseError):
    code = "unexpected-end-of-input"

    def __init__(self, expected: str, position: Position | None = None):
        super().__init__(f"input ended while reading {expected}", position)
        self.expected = expected


class UnexpectedToken(ParseError):
    code = "unexpected-token"

    def __init__(self, token: str, expected: str, position: Position | None = None):
        super().__init__(f"unexpected {token!r} while reading {expected}", position)
        self.token = token
        self.expected = expected


class TagMismatch(ParseError):
    code = "tag-mismatch"

    def __init__(self, opening: str, closing: str, position: Position | None = None):
        super().__init__(
            f"unmatched tag name, head: {opening!r}, tail: {closing!r}", position
        )
        self.opening = opening
        self.closing = closing

    @property
    def names(self) -> tuple[str, str]:
        return (self.opening, self.closing)


class MalformedAttribute(ParseError):
    code = "malformed-attribute"

    def __init__(self, key: str, token: str, position: Position | None = None):
        super().__init__(f"attribute {key!r} must be followed by '=', got {token!r}", position)
        self.key = key
        self.token = token


class NestingTooDeep(ParseError):
    code = "nesting-too-deep"

    def __init__(self, position: Position | None = None):
        super().__init__("elements are nested deeper than the recursion limit allows", position)
