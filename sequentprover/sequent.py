from .formula import Formula, compare, equal, formula_key


def _dedupe(formulas):
    """Sort ``formulas`` by the canonical order and drop adjacent duplicates."""
    result = []
    for f in sorted(formulas, key=formula_key):
        if result and compare(result[-1], f) == 0:
            continue
        result.append(f)
    return tuple(result)


class Sequent:
    """``antecedents |- succedents``; both sides are tuples of formulas."""
    __slots__ = ("antecedents", "succedents")

    def __init__(self, antecedents=(), succedents=()):
        antecedents = tuple(antecedents)
        succedents = tuple(succedents)
        for f in antecedents + succedents:
            if not isinstance(f, Formula):
                raise TypeError(f"sequent members must be Formulas, not {type(f).__name__}")
        object.__setattr__(self, "antecedents", antecedents)
        object.__setattr__(self, "succedents", succedents)

    def __setattr__(self, name, value):
        raise AttributeError("Sequent is immutable")

    def __delattr__(self, name):
        raise AttributeError("Sequent is immutable")

    def __str__(self):
        left = "|-" if not self.antecedents else f"{', '.join(map(str, self.antecedents))} |-"
        if not self.succedents:
            return left
        return f"{left} {', '.join(map(str, self.succedents))}"

    def __repr__(self):
        return f"Sequent({str(self)!r})"

    def __eq__(self, other):
        if not isinstance(other, Sequent):
            return NotImplemented
        return self.antecedents == other.antecedents and self.succedents == other.succedents

    def __hash__(self):
        return hash((self.antecedents, self.succedents))

    @property
    def size(self):
        """Total size of all formulas on both sides."""
        return sum(f.size for f in self.antecedents + self.succedents)

    def is_initial(self):
        """True if some formula occurs on both sides."""
        return any(equal(a, s) for a in self.antecedents for s in self.succedents)

    def canonicalize(self):
        return Sequent(_dedupe(self.antecedents), _dedupe(self.succedents))

    def to_latex(self):
        # An empty side is written as a dot.
        l = ", ".join(f.to_latex() for f in self.antecedents) or "\\cdot"
        r = ", ".join(f.to_latex() for f in self.succedents) or "\\cdot"
        return f"{l} \\vdash {r}"
