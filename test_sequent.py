import unittest

from sequentprover.formula import And, Imply, Not, Or, variable
from sequentprover.parser import parse
from sequentprover.sequent import Sequent

a = variable("A")
b = variable("B")
c = variable("C")


class TestSequentRendering(unittest.TestCase):

    def test_both_sides(self):
        self.assertEqual(str(Sequent([a], [a])), "A |- A")

    def test_empty_antecedents(self):
        self.assertEqual(str(Sequent([], [a])), "|- A")

    def test_empty_succedents(self):
        self.assertEqual(str(Sequent([a], [])), "A |-")

    def test_empty(self):
        self.assertEqual(str(Sequent()), "|-")

    def test_several_formulas(self):
        s = Sequent([a, And(b, c)], [Or(a, b), c])
        self.assertEqual(str(s), "A, B && C |- A || B, C")

    def test_latex(self):
        self.assertEqual(Sequent([a, Not(b)], [c]).to_latex(), "A, \\lnot B \\vdash C")
        self.assertEqual(Sequent([], []).to_latex(), "\\cdot \\vdash \\cdot")


class TestSequentModel(unittest.TestCase):

    def test_sides_are_tuples(self):
        ants = [a, b]
        s = Sequent(ants, [c])
        ants.append(c)
        self.assertEqual(s.antecedents, (a, b))
        self.assertEqual(s.succedents, (c,))

    def test_rejects_non_formulas(self):
        with self.assertRaises(TypeError):
            Sequent(["A"], [])

    def test_immutable(self):
        s = Sequent([a], [b])
        with self.assertRaises(AttributeError):
            s.antecedents = (b,)
        with self.assertRaises(AttributeError):
            s.extra = 1
        with self.assertRaises(AttributeError):
            del s.succedents
        self.assertEqual(s, Sequent([a], [b]))

    def test_structural_equality(self):
        self.assertEqual(Sequent([And(a, b)], [c]), parse("A && B |- C"))
        self.assertNotEqual(Sequent([a, b], []), Sequent([b, a], []))

    def test_size(self):
        self.assertEqual(parse("A && B, !C |- A -> B").size, 8)


class TestInitialSequent(unittest.TestCase):

    def test_shared_variable(self):
        self.assertTrue(parse("p, q |- p").is_initial())

    def test_shared_compound(self):
        self.assertTrue(parse("A && B |- C, A && B").is_initial())

    def test_no_shared_formula(self):
        self.assertFalse(parse("p, q |- r").is_initial())
        self.assertFalse(parse("A |-").is_initial())
        self.assertFalse(parse("|-").is_initial())


class TestCanonicalize(unittest.TestCase):

    def test_sorts_each_side(self):
        s = parse("A || B, !C, B, A |- C -> A, C").canonicalize()
        self.assertEqual(str(s), "A, B, !C, A || B |- C, C -> A")

    def test_dedupes(self):
        s = Sequent([a, And(a, b), a, And(a, b)], [Not(a), Not(a)]).canonicalize()
        self.assertEqual(str(s), "A, A && B |- !A")

    def test_sides_are_independent(self):
        s = parse("A, A |- A").canonicalize()
        self.assertEqual(str(s), "A |- A")

    def test_idempotent(self):
        for text in [
            "B, A, B |- C, A",
            "!A, A -> B, A && B, A, !A |- B || C, !B, B",
            "(A -> B) -> C, A -> (B -> C), C |-",
            "|-",
        ]:
            with self.subTest(sequent=text):
                once = parse(text).canonicalize()
                twice = once.canonicalize()
                self.assertEqual(once, twice)

    def test_leaves_original_untouched(self):
        s = parse("B, A |- A")
        s.canonicalize()
        self.assertEqual(str(s), "B, A |- A")

    def test_same_size_different_operators(self):
        s = Sequent([Or(a, b), Imply(a, b), And(a, b), Not(Not(a))], []).canonicalize()
        self.assertEqual(str(s), "!!A, A && B, A -> B, A || B |-")


if __name__ == '__main__':
    unittest.main()
