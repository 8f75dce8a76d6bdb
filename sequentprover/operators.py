from enum import Enum


class Operator(Enum):
    """Logical connectives. The value is the display symbol."""
    AND = "&&"
    OR = "||"
    IMPLY = "->"
    NOT = "!"

    @property
    def symbol(self):
        return self.value

    @property
    def latex(self):
        return _LATEX[self]

    def __str__(self):
        return self.value


_LATEX = {
    Operator.AND: "\\land",
    Operator.OR: "\\lor",
    Operator.IMPLY: "\\to",
    Operator.NOT: "\\lnot",
}


def is_unary(op):
    return op is Operator.NOT


def is_binary(op):
    return op is not Operator.NOT
