"""Proof search and proof figures.

``prove`` decomposes a sequent until only atomic formulas remain and checks
that every leaf is initial. There is never a choice to make: the principal
formula is fixed by ``rules.principal`` and each rule is invertible, so a
single pass decides provability.
"""
import logging
from collections import namedtuple

from .config import LATEX_ENV
from .rules import RULES, decompose

logger = logging.getLogger(__name__)

AXIOM = "id"

Proof = namedtuple("Proof", "provable figure")

_RULE_LATEX = {rule.name: f"{rule.operator.latex} {rule.side.value}" for rule in RULES.values()}


class ProofTreeNode:
    __slots__ = ("level", "sequent", "left", "right", "rule")

    def __init__(self, level, sequent, left=None, right=None, rule=None):
        self.level = level
        self.sequent = sequent
        self.left = left
        self.right = right
        self.rule = rule

    def __repr__(self):
        return f"ProofTreeNode(level={self.level}, sequent={str(self.sequent)!r}, rule={self.rule!r})"

    @property
    def children(self):
        return tuple(c for c in (self.left, self.right) if c is not None)

    @property
    def is_leaf(self):
        return self.left is None


class ProofTree:
    def __init__(self, root, height):
        self.root = root
        self.height = height

    def __str__(self):
        return render_figure(self)

    def __repr__(self):
        return f"ProofTree(height={self.height}, root={str(self.root.sequent)!r})"

    def to_latex(self):
        return to_latex(self)


def prove(sequent):
    """Decide ``sequent``. The figure is only returned when it is provable."""
    root = ProofTreeNode(0, sequent)
    height = 0
    pending = [root]
    while pending:
        node = pending.pop()
        step = decompose(node.sequent)
        if step is None:
            height = max(height, node.level + 1)
            if not node.sequent.is_initial():
                # The tree is thrown away once a leaf fails; stop expanding.
                logger.debug("leaf at level %d: %s (not initial)", node.level, node.sequent)
                logger.debug("%s is unprovable", sequent)
                return Proof(False, None)
            logger.debug("leaf at level %d: %s (initial)", node.level, node.sequent)
            node.rule = AXIOM
            continue

        logger.debug("level %d: %s by %s", node.level, node.sequent, step.rule.name)
        node.rule = step.rule.name
        children = [ProofTreeNode(node.level + 1, p) for p in step.premises]
        node.left = children[0]
        if len(children) > 1:
            node.right = children[1]
        # Left subtree first.
        pending.extend(reversed(children))

    logger.debug("%s is provable, height %d", sequent, height)
    return Proof(True, ProofTree(root, height))


def _measure(root):
    """Rendered sequent and block width of every node below ``root``.

    A leaf's block is as wide as its sequent. An inner node's block is as
    wide as the wider of its sequent and its children's blocks, the latter
    set side by side two spaces apart.
    """
    texts, widths = {}, {}
    stack = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        children = node.children
        if children and not expanded:
            stack.append((node, True))
            stack.extend((child, False) for child in children)
            continue
        text = texts[node] = str(node.sequent)
        span = sum(widths[c] for c in children) + 2 * (len(children) - 1)
        widths[node] = max(len(text), span)
    return texts, widths


def render_figure(tree):
    """ASCII derivation with the conclusion on the bottom line.

    Every line is as wide as the root's block. A sequent is centered in its
    node's block, an odd leftover space going to the right, and the
    children's blocks are centered under it the same way.
    """
    texts, widths = _measure(tree.root)
    width = widths[tree.root]

    # Row 2*level holds the sequents of that level, the row above their bars.
    rows = [[] for _ in range(2 * tree.height - 1)]
    stack = [(tree.root, 0)]
    while stack:
        node, x = stack.pop()
        text, node_width = texts[node], widths[node]
        row = 2 * node.level
        rows[row].append((x + (node_width - len(text)) // 2, text))

        children = node.children
        if not children:
            continue
        rows[row + 1].append((x, "-" * node_width))
        span = sum(widths[c] for c in children) + 2 * (len(children) - 1)
        child_x = x + (node_width - span) // 2
        for child in children:
            stack.append((child, child_x))
            child_x += widths[child] + 2

    lines = []
    for segments in reversed(rows):
        parts, column = [], 0
        for x, text in sorted(segments):
            parts.append(" " * (x - column) + text)
            column = x + len(text)
        parts.append(" " * (width - column))
        lines.append("".join(parts))
    return "\n".join(lines)


def to_latex(tree):
    lines = []
    stack = [(tree.root, 0)]
    while stack:
        item, depth = stack.pop()
        if isinstance(item, str):
            lines.append(item)
            continue

        indent = "  " * depth
        sequent_tex = item.sequent.to_latex()
        if item.is_leaf:
            lines += [
                f"{indent}\\infer[\\ms{{{AXIOM}}}]",
                f"{indent}  {{{sequent_tex}}}",
                f"{indent}  {{}}",
            ]
            continue

        lines += [
            f"{indent}\\infer[{_RULE_LATEX[item.rule]}]",
            f"{indent}  {{{sequent_tex}}}",
            f"{indent}  {{",
        ]
        # Premises separated by "&", then the closing brace.
        queued = []
        for i, child in enumerate(item.children):
            if i:
                queued.append((f"{indent}  &", depth))
            queued.append((child, depth + 1))
        queued.append((f"{indent}  }}", depth))
        stack.extend(reversed(queued))

    body = "\n".join(lines)
    return f"\\begin{{{LATEX_ENV}}}\n{body}\n\\end{{{LATEX_ENV}}}"
