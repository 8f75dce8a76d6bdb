import unittest

from sequentprover.formula import And, Imply, Not, Or, variable
from sequentprover.parser import parse
from sequentprover.proof import ProofTree, ProofTreeNode, prove, render_figure
from sequentprover.sequent import Sequent

a = variable("A")
b = variable("B")


class TestProve(unittest.TestCase):

    def test_identity(self):
        """A |- A: provable, height 1"""
        s = Sequent([a], [a])
        p = prove(s)

        self.assertTrue(p.provable)
        self.assertEqual(p.figure.height, 1)
        self.assertEqual(p.figure.root.level, 0)
        self.assertIs(p.figure.root.sequent, s)
        self.assertTrue(p.figure.root.is_leaf)
        self.assertEqual(p.figure.root.rule, "id")

    def test_excluded_middle(self):
        """|- A || !A: provable, height 3"""
        s = Sequent([], [Or(a, Not(a))])
        p = prove(s)

        self.assertTrue(p.provable)
        self.assertEqual(p.figure.height, 3)
        root = p.figure.root
        self.assertIs(root.sequent, s)
        self.assertEqual(root.rule, "||R")
        self.assertIsNone(root.right)

        child = root.left
        self.assertEqual(child.level, 1)
        self.assertEqual(child.sequent, Sequent([], [a, Not(a)]))
        self.assertEqual(child.rule, "!R")

        leaf = child.left
        self.assertEqual(leaf.level, 2)
        self.assertEqual(leaf.sequent, Sequent([a], [a]))
        self.assertEqual(leaf.children, ())

    def test_contraposition(self):
        """A -> B |- !(A && !B)"""
        s = Sequent([Imply(a, b)], [Not(And(a, Not(b)))])
        self.assertTrue(prove(s).provable)

    def test_two_implications(self):
        """A -> B, A -> !B |- !A"""
        s = Sequent([Imply(a, b), Imply(a, Not(b))], [Not(a)])
        self.assertTrue(prove(s).provable)

    def test_peirce(self):
        self.assertTrue(prove(parse("|- ((A -> B) -> A) -> A")).provable)

    def test_empty_succedent_is_unprovable(self):
        """A |- (nothing to prove)"""
        p = prove(Sequent([a], []))
        self.assertFalse(p.provable)
        self.assertIsNone(p.figure)

    def test_de_morgan_wrong_way_is_unprovable(self):
        """!(A && B) |- !A && !B"""
        s = Sequent([Not(And(a, b))], [And(Not(a), Not(b))])
        self.assertFalse(prove(s).provable)

    def test_empty_sequent_is_unprovable(self):
        self.assertFalse(prove(parse("|-")).provable)

    def test_root_keeps_input_order(self):
        p = prove(parse("B, A, B |- A"))
        self.assertEqual(str(p.figure.root.sequent), "B, A, B |- A")

    def test_levels_and_height(self):
        p = prove(parse("A || (B && C) |- A, B"))

        self.assertEqual(p.figure.height, 3)
        left, right = p.figure.root.children
        self.assertEqual((left.level, right.level), (1, 1))
        self.assertTrue(left.is_leaf)
        self.assertEqual(right.left.level, 2)

    def test_large_sequent_terminates(self):
        f = variable("A")
        for name in "BCDEFGH":
            f = Imply(f, variable(name))
        seq = Sequent([f, And(f, f)], [f, Not(Not(f))])

        p = prove(seq)

        self.assertTrue(p.provable)
        self.assertLessEqual(p.figure.height, seq.size + 1)

    def test_long_conjunction_chain(self):
        p = prove(parse(" && ".join(["A"] * 1500) + " |- A"))

        self.assertTrue(p.provable)
        self.assertEqual(p.figure.height, 1500)
        self.assertEqual(p.figure.root.rule, "&&L")

    def test_long_negation_chain(self):
        p = prove(parse("!" * 1500 + "A |- A"))

        self.assertTrue(p.provable)
        self.assertEqual(p.figure.height, 1501)
        lines = str(p.figure).split("\n")
        self.assertEqual(len(lines), 2 * 1501 - 1)
        self.assertEqual(lines[0].strip(), "A |- A")
        self.assertEqual(lines[-1], "!" * 1500 + "A |- A")
        latex = p.figure.to_latex()
        self.assertEqual(latex.count("\\infer["), 1501)

    def test_odd_negation_chain_is_unprovable(self):
        self.assertFalse(prove(parse("!" * 1501 + "A |- A")).provable)


class TestFigure(unittest.TestCase):

    def test_single_line(self):
        self.assertEqual(str(prove(parse("A |- A")).figure), "A |- A")

    def test_one_child_chain(self):
        figure = str(prove(parse("|- A || !A")).figure)
        self.assertEqual(figure, "\n".join([
            "  A |- A  ",
            " -------- ",
            " |- A, !A ",
            "----------",
            "|- A || !A",
        ]))

    def test_two_children(self):
        figure = str(prove(parse("A && B |- A && B")).figure)
        self.assertEqual(figure, "\n".join([
            "A, B |- A  A, B |- B",
            "--------------------",
            "   A, B |- A && B   ",
            "--------------------",
            "  A && B |- A && B  ",
        ]))

    def test_uneven_branches(self):
        figure = str(prove(parse("A || (B && C) |- A, B")).figure)
        self.assertEqual(figure, "\n".join([
            "            B, C |- A, B ",
            "           --------------",
            "A |- A, B  B && C |- A, B",
            "-------------------------",
            "  A || (B && C) |- A, B  ",
        ]))

    def test_lines_share_one_width(self):
        figure = str(prove(parse("A -> B, B -> C |- A -> C")).figure)
        widths = {len(line) for line in figure.split("\n")}
        self.assertEqual(len(widths), 1)

    def test_odd_padding_goes_right(self):
        leaf = ProofTreeNode(1, parse("A |- A"))
        root = ProofTreeNode(0, parse("|- !A, A"), leaf, rule="!R")
        # "A |- A" is 6 wide, the conclusion 8; one space each side.
        self.assertEqual(render_figure(ProofTree(root, 2)), " A |- A \n--------\n|- !A, A")

        leaf = ProofTreeNode(1, parse("A |- A"))
        root = ProofTreeNode(0, parse("B |- A, A"), leaf)
        self.assertEqual(render_figure(ProofTree(root, 2)).split("\n")[0], " A |- A  ")


class TestLatexExport(unittest.TestCase):

    def test_axiom(self):
        latex = prove(parse("A |- A")).figure.to_latex()
        self.assertEqual(latex, "\\begin{rules}\n\\infer[\\ms{id}]\n  {A \\vdash A}\n  {}\n\\end{rules}")

    def test_nested_rules(self):
        latex = prove(parse("|- A || !A")).figure.to_latex()
        lines = latex.split("\n")

        self.assertEqual(lines[0], "\\begin{rules}")
        self.assertEqual(lines[1], "\\infer[\\lor R]")
        self.assertEqual(lines[2], "  {\\cdot \\vdash A \\lor \\lnot A}")
        self.assertIn("  \\infer[\\lnot R]", lines)
        self.assertIn("    \\infer[\\ms{id}]", lines)
        self.assertEqual(lines[-1], "\\end{rules}")

    def test_branches_joined_with_ampersand(self):
        latex = prove(parse("A && B |- A && B")).figure.to_latex()
        self.assertIn("\\infer[\\land R]", latex)
        self.assertIn("\n    &\n", latex)


if __name__ == '__main__':
    unittest.main()
