"""Tests for proof tree construction."""

import unittest

from gentzen.core.logic import Atom, Sequent, And, Implies
from gentzen.fileformats.parser import parse
from gentzen.proofs.builder import build_proof, build_tree, expand
from gentzen.rules import RULES, right_imp, right_not


TAUTOLOGIES = [
    "p -> p",
    "p || !p",
    "p || (!p)",
    "!!p -> p",
    "p -> !!p",
    "p && q -> p",
    "p -> p || q",
    "p -> (q -> p)",
    "(p -> q) -> (!q -> !p)",
    "((p -> q) -> p) -> p",
    "(p -> q) && (q -> r) -> (p -> r)",
    "!(p && q) -> !p || !q",
    "!p && !q -> !(p || q)",
    "p && (q || r) -> (p && q) || (p && r)",
    "(p -> (q -> r)) -> ((p -> q) -> (p -> r))",
]

NON_TAUTOLOGIES = [
    "p",
    "!p",
    "p -> q",
    "p && !p",
    "p || q -> p && q",
    "(p -> q) -> (q -> p)",
    "p -> q -> r",
    "!(p && q) -> !p && !q",
]


def structure(node):
    """Pre-order list of (sequent, rule) pairs for comparing trees."""
    return [(str(n.sequent), n.rule_name, len(n.children)) for n in node.walk()]


class TestScenarios(unittest.TestCase):
    """Worked examples, checked node by node."""

    def test_identity(self):
        proof = build_proof(parse("p -> p"))
        root = proof.root

        self.assertEqual(str(proof.formula), "(p->p)")
        self.assertEqual(str(root.sequent), "{ []; [(p->p)] }")
        self.assertEqual(root.rule_name, "right-imp")
        self.assertEqual(len(root.children), 1)

        leaf = root.children[0]
        self.assertEqual(str(leaf.sequent), "{ [p]; [p] }")
        self.assertTrue(leaf.axiom)
        self.assertTrue(leaf.is_leaf)
        self.assertEqual(proof.depth, 1)
        self.assertEqual(len(proof.leaves()), 1)
        self.assertTrue(proof.is_tautology)

    def test_contradiction(self):
        proof = build_proof(parse("p && !p"))
        root = proof.root

        self.assertEqual(str(root.sequent), "{ []; [(p&&!p)] }")
        self.assertEqual(root.rule_name, "right-and")
        first, second = root.children
        self.assertEqual(str(first.sequent), "{ []; [p] }")
        self.assertTrue(first.falsifiable)
        self.assertEqual(str(second.sequent), "{ []; [!p] }")
        self.assertEqual(second.rule_name, "right-not")
        self.assertEqual(str(second.children[0].sequent), "{ [p]; [] }")
        self.assertTrue(second.children[0].falsifiable)

        self.assertFalse(proof.is_tautology)
        self.assertEqual(len(proof.falsifiable_leaves()), 2)
        self.assertEqual([m.assignment for m in proof.counter_models()], [{"p": False}, {"p": True}])

    def test_excluded_middle(self):
        proof = build_proof(parse("p || (!p)"))
        root = proof.root

        self.assertEqual(root.rule_name, "right-or")
        middle = root.children[0]
        self.assertEqual(str(middle.sequent), "{ []; [p, !p] }")
        self.assertEqual(middle.rule_name, "right-not")
        leaf = middle.children[0]
        self.assertEqual(str(leaf.sequent), "{ [p]; [p] }")
        self.assertTrue(leaf.axiom)
        self.assertEqual(proof.depth, 2)
        self.assertTrue(proof.is_tautology)

    def test_branching_waits_for_single_premise_rules(self):
        """right-and on the root is deferred until the implication is gone."""
        proof = build_proof(parse("(p -> q) -> (p -> q) && p"))
        self.assertEqual(proof.root.rule_name, "right-imp")
        self.assertEqual(proof.root.children[0].rule_name, "left-imp")


class TestBuilder(unittest.TestCase):
    """General properties of the builder."""

    def test_tautologies(self):
        for text in TAUTOLOGIES:
            proof = build_proof(parse(text))
            self.assertTrue(proof.is_tautology, text)
            self.assertIsNone(proof.counter_model(), text)
            self.assertEqual(proof.falsifiable_leaves(), [], text)

    def test_non_tautologies(self):
        for text in NON_TAUTOLOGIES:
            formula = parse(text)
            proof = build_proof(formula)
            self.assertFalse(proof.is_tautology, text)
            models = proof.counter_models()
            self.assertGreater(len(models), 0, text)
            for model in models:
                self.assertTrue(model.falsifies(formula), f"{text}: {model}")

    def test_leaves_are_finished(self):
        for text in TAUTOLOGIES + NON_TAUTOLOGIES:
            proof = build_proof(parse(text))
            for node in proof.nodes():
                if node.is_leaf:
                    self.assertTrue(node.finished)
                else:
                    self.assertFalse(node.finished)
                    self.assertIn(len(node.children), (1, 2))

    def test_depth_bounded_by_connectives(self):
        for text in TAUTOLOGIES + NON_TAUTOLOGIES:
            formula = parse(text)
            proof = build_proof(formula)
            self.assertLessEqual(proof.depth, formula.size, text)

    def test_deterministic(self):
        for text in TAUTOLOGIES + NON_TAUTOLOGIES:
            first = build_proof(parse(text))
            second = build_proof(parse(text))
            self.assertEqual(structure(first.root), structure(second.root), text)

    def test_deep_formula(self):
        """Long chains are built without recursion."""
        text = " -> ".join(["p"] * 150)
        proof = build_proof(parse(text, max_depth=200))
        self.assertLessEqual(proof.depth, 149)
        self.assertGreater(proof.size, 1)

    def test_build_from_sequent(self):
        p, q = Atom("p"), Atom("q")
        proof = build_proof(Sequent([And(p, q)], [q]))
        self.assertIsNone(proof.formula)
        self.assertEqual(proof.root.rule_name, "left-and")
        self.assertTrue(proof.is_tautology)

    def test_build_rejects_other_types(self):
        with self.assertRaises(TypeError):
            build_proof("p -> p")

    def test_finished_root_is_a_leaf(self):
        node = build_tree(Sequent([Atom("p")], [Atom("p")]))
        self.assertTrue(node.is_leaf)
        self.assertIsNone(node.rule_name)
        self.assertEqual(node.depth, 0)

    def test_custom_rule_list(self):
        p = Atom("p")
        node = build_tree(Sequent.from_formula(Implies(p, p)), rules=(right_not, right_imp))
        self.assertEqual(node.rule_name, "right-imp")

    def test_uncovered_sequent_is_an_invariant_failure(self):
        seq = Sequent([], [And(Atom("p"), Atom("q"))])
        with self.assertRaises(AssertionError):
            build_tree(seq, rules=(right_imp,))
        with self.assertRaises(AssertionError):
            expand(seq, rules=())

    def test_expand_uses_priority(self):
        p, q = Atom("p"), Atom("q")
        seq = Sequent([Implies(p, q), And(p, q)], [q])
        self.assertEqual(expand(seq, RULES).rule_name, "left-and")

    def test_rule_applications_are_logged(self):
        with self.assertLogs("gentzen.proofs.builder", level="DEBUG") as cm:
            build_proof(parse("p -> p"))
        self.assertTrue(any("right-imp" in line for line in cm.output))
        self.assertTrue(any("tautology" in line for line in cm.output))


if __name__ == '__main__':
    unittest.main()
