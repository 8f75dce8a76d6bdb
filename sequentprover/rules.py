"""Left and right sequent-calculus rules for each connective.

Every rule takes a sequent and the position of its principal formula on
the rule's side and returns the premises, one or two sequents, exactly as
the rule writes them. ``decompose`` picks the principal formula, applies
the matching rule and canonicalizes the premises.
"""
from collections import namedtuple
from enum import Enum

from .operators import Operator
from .sequent import Sequent


class Side(Enum):
    ANTECEDENT = "L"
    SUCCEDENT = "R"


Rule = namedtuple("Rule", "name side operator apply")

Decomposition = namedtuple("Decomposition", "rule side index premises")


def _split(seq, side, index):
    formulas = seq.antecedents if side is Side.ANTECEDENT else seq.succedents
    return formulas[index], formulas[:index] + formulas[index + 1:]


# --- And ---

def and_l(seq, index):
    """A && B, G |- D  --->  G, A, B |- D"""
    f, rest = _split(seq, Side.ANTECEDENT, index)
    return (Sequent(rest + (f.left, f.right), seq.succedents),)


def and_r(seq, index):
    """G |- A && B, D  --->  G |- D, A  and  G |- D, B"""
    f, rest = _split(seq, Side.SUCCEDENT, index)
    return (
        Sequent(seq.antecedents, rest + (f.left,)),
        Sequent(seq.antecedents, rest + (f.right,)),
    )


# --- Or ---

def or_l(seq, index):
    """A || B, G |- D  --->  G, A |- D  and  G, B |- D"""
    f, rest = _split(seq, Side.ANTECEDENT, index)
    return (
        Sequent(rest + (f.left,), seq.succedents),
        Sequent(rest + (f.right,), seq.succedents),
    )


def or_r(seq, index):
    f, rest = _split(seq, Side.SUCCEDENT, index)
    return (Sequent(seq.antecedents, rest + (f.left, f.right)),)


# --- Imply ---

def imply_l(seq, index):
    """A -> B, G |- D  --->  G |- D, A  and  G, B |- D"""
    f, rest = _split(seq, Side.ANTECEDENT, index)
    return (
        Sequent(rest, seq.succedents + (f.left,)),
        Sequent(rest + (f.right,), seq.succedents),
    )


def imply_r(seq, index):
    f, rest = _split(seq, Side.SUCCEDENT, index)
    return (Sequent((f.left,) + seq.antecedents, rest + (f.right,)),)


# --- Not ---

def not_l(seq, index):
    f, rest = _split(seq, Side.ANTECEDENT, index)
    return (Sequent(rest, seq.succedents + (f.inner,)),)


def not_r(seq, index):
    f, rest = _split(seq, Side.SUCCEDENT, index)
    return (Sequent((f.inner,) + seq.antecedents, rest),)


RULES = {
    (Side.ANTECEDENT, Operator.AND): Rule("&&L", Side.ANTECEDENT, Operator.AND, and_l),
    (Side.SUCCEDENT, Operator.AND): Rule("&&R", Side.SUCCEDENT, Operator.AND, and_r),
    (Side.ANTECEDENT, Operator.OR): Rule("||L", Side.ANTECEDENT, Operator.OR, or_l),
    (Side.SUCCEDENT, Operator.OR): Rule("||R", Side.SUCCEDENT, Operator.OR, or_r),
    (Side.ANTECEDENT, Operator.IMPLY): Rule("->L", Side.ANTECEDENT, Operator.IMPLY, imply_l),
    (Side.SUCCEDENT, Operator.IMPLY): Rule("->R", Side.SUCCEDENT, Operator.IMPLY, imply_r),
    (Side.ANTECEDENT, Operator.NOT): Rule("!L", Side.ANTECEDENT, Operator.NOT, not_l),
    (Side.SUCCEDENT, Operator.NOT): Rule("!R", Side.SUCCEDENT, Operator.NOT, not_r),
}

_missing = {(side, op) for side in Side for op in Operator} - RULES.keys()
if _missing:
    raise RuntimeError(f"no rule for {sorted((s.name, o.name) for s, o in _missing)}")


def rule_for(side, operator):
    return RULES[(side, operator)]


def _last_compound(formulas):
    for i in range(len(formulas) - 1, -1, -1):
        if not formulas[i].atomic:
            return i
    return -1


def principal(seq):
    """Locate the principal formula as ``(side, index)``, or None for a leaf.

    The rightmost compound antecedent wins; failing that, the rightmost
    compound succedent.
    """
    index = _last_compound(seq.antecedents)
    if index >= 0:
        return Side.ANTECEDENT, index
    index = _last_compound(seq.succedents)
    if index >= 0:
        return Side.SUCCEDENT, index
    return None


def decompose(seq):
    """Apply one rule to ``seq``; None if it contains no compound formula."""
    found = principal(seq)
    if found is None:
        return None
    side, index = found
    formulas = seq.antecedents if side is Side.ANTECEDENT else seq.succedents
    rule = rule_for(side, formulas[index].operator)
    premises = tuple(p.canonicalize() for p in rule.apply(seq, index))
    return Decomposition(rule, side, index, premises)
