"""Recursive-descent parser for sequent text.

Grammar (all binary connectives share one precedence level and associate
to the left; ``!`` binds tighter than any of them):

    sequent      := formula-list? '|-' formula-list?
    formula-list := binary (',' binary)*
    binary       := unary (('&&' | '||' | '->') unary)*
    unary        := '!'* term
    term         := VARIABLE | '(' binary ')'
"""
import logging

from .errors import SequentSyntaxError
from .formula import And, Imply, Not, Or, variable
from .sequent import Sequent
from .tokens import TokenType, tokenize

logger = logging.getLogger(__name__)

_CONNECTIVES = {
    TokenType.AND: And,
    TokenType.OR: Or,
    TokenType.IMPLY: Imply,
}


class SequentParser:
    """Holds the token list and cursor for one parse at a time."""

    def __init__(self, pool=None):
        self.pool = pool
        self.tokens = []
        self.pos = 0

    def parse(self, text):
        self.tokens = tokenize(text)
        self.pos = 0

        try:
            antecedents = []
            if self.peek().type is not TokenType.TEE:
                antecedents = self.parse_formula_list()
            self.expect(TokenType.TEE)

            succedents = []
            if self.peek().type is not TokenType.END:
                succedents = self.parse_formula_list()
            self.expect(TokenType.END)
        except RecursionError:
            # Only parentheses recurse.
            raise SequentSyntaxError(SequentSyntaxError.TOO_DEEP, self.peek().position) from None

        sequent = Sequent(antecedents, succedents)
        logger.debug("parsed %r as %s", text, sequent)
        return sequent

    def peek(self):
        return self.tokens[self.pos]

    def advance(self):
        token = self.tokens[self.pos]
        self.pos += 1
        return token

    def expect(self, kind):
        token = self.peek()
        if token.type is not kind:
            raise self.unexpected(token)
        return self.advance()

    def unexpected(self, token):
        if token.type is TokenType.END:
            return SequentSyntaxError(SequentSyntaxError.UNEXPECTED_END, token.position)
        return SequentSyntaxError(SequentSyntaxError.UNEXPECTED_TOKEN, token.position)

    def parse_formula_list(self):
        formulas = [self.parse_binary()]
        while self.peek().type is TokenType.COMMA:
            self.advance()
            formulas.append(self.parse_binary())
        return formulas

    def parse_binary(self):
        left = self.parse_unary()
        while self.peek().type in _CONNECTIVES:
            connective = _CONNECTIVES[self.advance().type]
            left = connective(left, self.parse_unary())
        return left

    def parse_unary(self):
        negations = 0
        while self.peek().type is TokenType.NOT:
            self.advance()
            negations += 1
        formula = self.parse_term()
        for _ in range(negations):
            formula = Not(formula)
        return formula

    def parse_term(self):
        token = self.peek()
        if token.type is TokenType.VARIABLE:
            self.advance()
            return variable(token.identifier, self.pool)
        if token.type is TokenType.PAREN_OPEN:
            self.advance()
            expr = self.parse_binary()
            self.expect(TokenType.PAREN_CLOSE)
            return expr
        raise self.unexpected(token)


def parse(text, pool=None):
    """Parse ``text`` into a Sequent; raises SequentParseError on bad input."""
    return SequentParser(pool).parse(text)
