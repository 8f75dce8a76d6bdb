"""Propositional formulas.

Formulas are immutable trees. A variable is a leaf holding an identifier;
``Not`` and the binary connectives ``And``, ``Or`` and ``Imply`` hold their
operands. Sub-formulas are shared, never copied, so the same object may
appear under several parents.

Equality is always structural. Variables are interned through a
``VariablePool`` so that the common ``a is b`` case is a fast path, but two
distinct objects with the same shape still compare equal.
"""
import re
import threading
from functools import cmp_to_key

from .operators import Operator, is_binary

_IDENTIFIER = re.compile(r"[A-Za-z]+")


class Formula:
    __slots__ = ()

    operator = None
    atomic = False

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self):
        return f"{type(self).__name__}({str(self)!r})"

    def __str__(self):
        return _render(self)

    def __eq__(self, other):
        if not isinstance(other, Formula):
            return NotImplemented
        return equal(self, other)

    def __hash__(self):
        return self._hash

    @property
    def operands(self):
        return ()

    def to_latex(self):
        return _render(self, latex=True)


class Variable(Formula):
    """A propositional variable. Prefer ``variable()`` to share instances."""
    __slots__ = ("name", "_hash")

    atomic = True
    size = 1

    def __init__(self, name):
        if not isinstance(name, str) or not _IDENTIFIER.fullmatch(name):
            raise ValueError(f"invalid variable identifier: {name!r}")
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "_hash", hash(("var", name)))

    @property
    def identifier(self):
        return self.name

    def __str__(self):
        return self.name

    def to_latex(self):
        return self.name


class Not(Formula):
    __slots__ = ("inner", "size", "_hash")

    operator = Operator.NOT

    def __init__(self, inner):
        _check_operand(inner)
        object.__setattr__(self, "inner", inner)
        object.__setattr__(self, "size", inner.size + 1)
        object.__setattr__(self, "_hash", hash((self.operator, inner)))

    @property
    def operands(self):
        return (self.inner,)


class BinaryFormula(Formula):
    __slots__ = ("left", "right", "size", "_hash")

    def __init__(self, left, right):
        _check_operand(left)
        _check_operand(right)
        object.__setattr__(self, "left", left)
        object.__setattr__(self, "right", right)
        object.__setattr__(self, "size", left.size + right.size + 1)
        object.__setattr__(self, "_hash", hash((self.operator, left, right)))

    @property
    def operands(self):
        return (self.left, self.right)


class And(BinaryFormula):
    __slots__ = ()
    operator = Operator.AND


class Or(BinaryFormula):
    __slots__ = ()
    operator = Operator.OR


class Imply(BinaryFormula):
    __slots__ = ()
    operator = Operator.IMPLY


def _check_operand(operand):
    if not isinstance(operand, Formula):
        raise TypeError(f"operand must be a Formula, not {type(operand).__name__}")


def _paren(formula, text):
    # Operand of a binary connective: only atoms and negations go bare.
    if formula.atomic or formula.operator is Operator.NOT:
        return text
    return f"({text})"


def _paren_negated(formula, text):
    if not formula.atomic and is_binary(formula.operator):
        return f"({text})"
    return text


def _render(formula, latex=False):
    """Text of ``formula``, built bottom-up with an explicit stack."""
    done = []
    stack = [(formula, False)]
    while stack:
        f, expanded = stack.pop()
        if f.atomic:
            done.append(f.name)
        elif not expanded:
            stack.append((f, True))
            stack.extend((op, False) for op in reversed(f.operands))
        elif f.operator is Operator.NOT:
            inner = _paren_negated(f.inner, done.pop())
            done.append(f"{f.operator.latex} {inner}" if latex else f"{f.operator.symbol}{inner}")
        else:
            right = _paren(f.right, done.pop())
            left = _paren(f.left, done.pop())
            symbol = f.operator.latex if latex else f.operator.symbol
            done.append(f"{left} {symbol} {right}")
    return done.pop()


class VariablePool:
    """Interning context mapping identifiers to shared ``Variable`` objects.

    The pool only grows. Lookups and inserts are serialized with a lock so
    concurrent callers always get the same instance for an identifier.
    """

    def __init__(self):
        self._variables = {}
        self._lock = threading.Lock()

    def variable(self, name):
        with self._lock:
            var = self._variables.get(name)
            if var is None:
                var = Variable(name)
                self._variables[name] = var
            return var

    def __contains__(self, name):
        return name in self._variables

    def __len__(self):
        return len(self._variables)


DEFAULT_POOL = VariablePool()


def variable(name, pool=None):
    """Return the shared variable for ``name`` from ``pool`` (default: process-wide)."""
    if pool is None:
        pool = DEFAULT_POOL
    return pool.variable(name)


def equal(a, b):
    """Structural equality."""
    pending = [(a, b)]
    while pending:
        x, y = pending.pop()
        if x is y:
            continue
        if x._hash != y._hash:
            return False
        if x.atomic and y.atomic:
            if x.name != y.name:
                return False
        elif x.atomic or y.atomic or x.operator is not y.operator:
            return False
        else:
            pending.extend(zip(x.operands, y.operands))
    return True


def _cmp(x, y):
    return (x > y) - (x < y)


def compare(a, b):
    """Total order used for canonical sorting.

    Smaller formulas come first. Ties are broken by identifier for two
    variables, otherwise by operator symbol and finally by rendered text.
    """
    if a is b:
        return 0
    if a.size != b.size:
        return _cmp(a.size, b.size)
    if a.atomic and b.atomic:
        return _cmp(a.name, b.name)
    symbol_a = "" if a.atomic else a.operator.symbol
    symbol_b = "" if b.atomic else b.operator.symbol
    if symbol_a != symbol_b:
        return _cmp(symbol_a, symbol_b)
    return _cmp(str(a), str(b))


formula_key = cmp_to_key(compare)
