from collections import namedtuple
from enum import Enum

from .errors import LexError


class TokenType(Enum):
    VARIABLE = "variable"
    AND = "&&"
    OR = "||"
    IMPLY = "->"
    NOT = "!"
    COMMA = ","
    PAREN_OPEN = "("
    PAREN_CLOSE = ")"
    TEE = "|-"
    END = "end of input"


# ``identifier`` is only set for VARIABLE tokens.
Token = namedtuple("Token", "type position identifier", defaults=(None,))

WHITESPACE = " \t\n\v\f\r"

_DOUBLE = {
    "&&": TokenType.AND,
    "||": TokenType.OR,
    "->": TokenType.IMPLY,
    "|-": TokenType.TEE,
}

_SINGLE = {
    "!": TokenType.NOT,
    ",": TokenType.COMMA,
    "(": TokenType.PAREN_OPEN,
    ")": TokenType.PAREN_CLOSE,
}


def is_alpha(c):
    return ("A" <= c <= "Z") or ("a" <= c <= "z")


def tokenize(text):
    """Split sequent text into tokens, always ending with an END token."""
    tokens = []
    p = 0
    n = len(text)
    while p < n:
        c = text[p]
        if c in WHITESPACE:
            p += 1
            continue
        kind = _DOUBLE.get(text[p:p + 2])
        if kind is not None:
            tokens.append(Token(kind, p))
            p += 2
            continue
        if is_alpha(c):
            start = p
            while p < n and is_alpha(text[p]):
                p += 1
            tokens.append(Token(TokenType.VARIABLE, start, text[start:p]))
            continue
        kind = _SINGLE.get(c)
        if kind is None:
            raise LexError(c, p)
        tokens.append(Token(kind, p))
        p += 1
    tokens.append(Token(TokenType.END, n))
    return tokens
