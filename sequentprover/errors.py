class SequentParseError(Exception):
    """Raised when sequent text cannot be parsed.

    ``position`` is the 0-based offset in the input where the problem was
    found (the input length for a premature end of input).
    """

    def __init__(self, message, position=None):
        super().__init__(message if position is None else f"{message} ({position})")
        self.message = message
        self.position = position


class LexError(SequentParseError):
    """A character that starts no token."""

    def __init__(self, character, position):
        super().__init__(f"unexpected character: '{character}'", position)
        self.character = character


class SequentSyntaxError(SequentParseError):
    """A well-formed token in the wrong place, or input that ends too early."""

    UNEXPECTED_TOKEN = "unexpected token"
    UNEXPECTED_END = "unexpected end of input"
    TOO_DEEP = "formula nested too deeply"
