"""
Sequent Prover: decides propositional sequents with a two-sided Gentzen
calculus and draws the resulting proof figure.

    from sequentprover import parse, prove
    print(prove(parse("|- A || !A")).figure)
"""

__version__ = "0.1.0"

from .errors import LexError, SequentParseError, SequentSyntaxError
from .formula import (
    And,
    Formula,
    Imply,
    Not,
    Or,
    Variable,
    VariablePool,
    compare,
    equal,
    variable,
)
from .operators import Operator, is_binary, is_unary
from .parser import parse
from .proof import Proof, ProofTree, ProofTreeNode, prove, render_figure
from .sequent import Sequent
from .tokens import Token, TokenType, tokenize
