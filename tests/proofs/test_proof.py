"""Tests for proof trees and counter-models."""

import unittest

from gentzen.core.logic import Atom, Sequent, Implies
from gentzen.fileformats.parser import parse
from gentzen.proofs import (
    Proof, ProofNode, CounterModel, AXIOM, FALSIFIABLE, INTERNAL, build_proof
)


class TestProofNode(unittest.TestCase):
    """Test hand-built proof nodes."""

    def setUp(self):
        self.p = Atom("p")
        self.q = Atom("q")
        self.axiom_leaf = ProofNode(Sequent([self.p], [self.p]))
        self.open_leaf = ProofNode(Sequent([], [self.q]))
        self.root = ProofNode(
            Sequent([Implies(self.p, self.p)], [self.p, self.q]),
            "left-imp",
            (self.axiom_leaf, self.open_leaf)
        )

    def test_status(self):
        self.assertEqual(self.axiom_leaf.status, AXIOM)
        self.assertEqual(self.open_leaf.status, FALSIFIABLE)
        self.assertEqual(self.root.status, INTERNAL)

    def test_leaf_predicates(self):
        self.assertTrue(self.axiom_leaf.is_leaf)
        self.assertTrue(self.axiom_leaf.axiom)
        self.assertTrue(self.open_leaf.falsifiable)
        self.assertFalse(self.root.is_leaf)
        self.assertFalse(self.root.finished)

    def test_depth_and_size(self):
        self.assertEqual(self.axiom_leaf.depth, 0)
        self.assertEqual(self.root.depth, 1)
        self.assertEqual(self.root.size, 3)
        parent = ProofNode(Sequent(), "right-not", (self.root,))
        self.assertEqual(parent.depth, 2)
        self.assertEqual(parent.size, 4)

    def test_walk_is_preorder(self):
        self.assertEqual(list(self.root.walk()), [self.root, self.axiom_leaf, self.open_leaf])
        self.assertEqual(list(self.root.leaves()), [self.axiom_leaf, self.open_leaf])

    def test_children_are_a_tuple(self):
        children = [self.axiom_leaf]
        node = ProofNode(Sequent(), "x", children)
        children.append(self.open_leaf)
        self.assertEqual(node.children, (self.axiom_leaf,))

    def test_repr(self):
        self.assertEqual(repr(self.axiom_leaf), "ProofNode({ [p]; [p] }, status=axiom)")


class TestCounterModel(unittest.TestCase):
    """Test reading assignments off open leaves."""

    def test_assignment(self):
        leaf = Sequent([Atom("p"), Atom("r")], [Atom("q")])
        model = CounterModel(leaf, {"p", "q", "r", "s"})
        self.assertEqual(model.assignment, {"p": True, "q": False, "r": True, "s": False})
        self.assertEqual(str(model), "p=T, q=F, r=T, s=F")

    def test_falsifies(self):
        formula = parse("p -> q")
        self.assertTrue(CounterModel(Sequent([Atom("p")], [Atom("q")])).falsifies(formula))
        self.assertFalse(CounterModel(Sequent([Atom("q")], [Atom("p")])).falsifies(formula))

    def test_equality(self):
        a = CounterModel(Sequent([Atom("p")], []), {"p", "q"})
        b = CounterModel(Sequent([Atom("p")], [Atom("q")]))
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))


class TestProof(unittest.TestCase):
    """Test the Proof wrapper."""

    def test_tautology(self):
        proof = build_proof(parse("(p -> q) -> (!q -> !p)"))
        self.assertTrue(proof.is_tautology)
        self.assertIsNone(proof.counter_model())
        self.assertEqual(proof.counter_models(), [])
        self.assertTrue(all(leaf.axiom for leaf in proof.leaves()))
        self.assertEqual(proof.sequent, Sequent.from_formula(proof.formula))

    def test_counter_model_from_first_open_leaf(self):
        proof = build_proof(parse("p -> q"))
        model = proof.counter_model()
        self.assertEqual(str(model), "p=T, q=F")
        self.assertEqual(model.leaf, Sequent([Atom("p")], [Atom("q")]))

    def test_vanished_variables_default_to_false(self):
        proof = build_proof(parse("p || (q && r)"))
        model = proof.counter_model()
        self.assertEqual(str(model.leaf), "{ []; [p, q] }")
        self.assertEqual(model.assignment, {"p": False, "q": False, "r": False})

    def test_rules_used(self):
        proof = build_proof(parse("p && !p"))
        self.assertEqual(dict(proof.rules_used()), {"right-and": 1, "right-not": 1})
        self.assertEqual(proof.size, 4)
        self.assertEqual(len(list(proof.nodes())), 4)

    def test_repr(self):
        proof = build_proof(parse("p -> p"))
        self.assertEqual(repr(proof), "Proof({ []; [(p->p)] }, nodes=2, tautology=True)")

    def test_wraps_existing_tree(self):
        leaf = ProofNode(Sequent([Atom("p")], []))
        proof = Proof(leaf)
        self.assertIsNone(proof.formula)
        self.assertFalse(proof.is_tautology)
        self.assertEqual(proof.counter_model().assignment, {"p": True})


if __name__ == '__main__':
    unittest.main()
