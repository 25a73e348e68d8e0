"""Proof trees and the counter-models read off their open leaves."""

from collections import Counter
from typing import Dict, Iterator, List, Optional, Tuple

from gentzen.core.logic import Formula, Sequent


AXIOM = "axiom"
FALSIFIABLE = "falsifiable"
INTERNAL = "internal"


class ProofNode:
    """One sequent in a proof tree.

    A node is a leaf when its sequent is finished. Otherwise ``rule_name``
    names the rule that produced ``children``, which hold one or two nodes.
    Nodes are built children first and never change afterwards.
    """

    __slots__ = ('sequent', 'rule_name', 'children', 'depth', 'size')

    def __init__(self, sequent: Sequent, rule_name: Optional[str] = None,
                 children: Tuple['ProofNode', ...] = ()):
        self.sequent = sequent
        self.rule_name = rule_name
        self.children = tuple(children)
        # Longest path to a leaf and number of nodes in this subtree
        self.depth = 1 + max(child.depth for child in self.children) if self.children else 0
        self.size = 1 + sum(child.size for child in self.children)

    @property
    def axiom(self) -> bool:
        return self.sequent.axiom

    @property
    def finished(self) -> bool:
        return self.sequent.finished

    @property
    def falsifiable(self) -> bool:
        return self.sequent.falsifiable

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def status(self) -> str:
        if self.children:
            return INTERNAL
        return AXIOM if self.axiom else FALSIFIABLE

    def walk(self) -> Iterator['ProofNode']:
        """Yield every node of the subtree in pre-order, left to right."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def leaves(self) -> Iterator['ProofNode']:
        return (node for node in self.walk() if node.is_leaf)

    def __repr__(self):
        return f"ProofNode({self.sequent}, status={self.status})"


class CounterModel:
    """A truth assignment that falsifies the proved formula.

    Read off a falsifiable leaf: its assumptions are made true and its
    conclusions false. Variables that vanished along the branch are false.
    """

    def __init__(self, leaf: Sequent, variables=()):
        assignment = {name: False for name in variables}
        for formula in leaf.conclusions:
            assignment[formula.name] = False
        for formula in leaf.assumptions:
            assignment[formula.name] = True
        self.leaf = leaf
        self.assignment: Dict[str, bool] = assignment

    def falsifies(self, formula: Formula) -> bool:
        return formula.evaluate(self.assignment) is False

    def __eq__(self, other):
        if not isinstance(other, CounterModel):
            return NotImplemented
        return self.assignment == other.assignment

    def __hash__(self):
        return hash(tuple(sorted(self.assignment.items())))

    def __str__(self):
        return ", ".join(f"{name}={'T' if value else 'F'}"
                         for name, value in sorted(self.assignment.items()))

    def __repr__(self):
        return f"CounterModel({self})"


class Proof:
    """A complete proof tree for a formula or a sequent."""

    def __init__(self, root: ProofNode, formula: Optional[Formula] = None):
        self.root = root
        self.formula = formula

    @property
    def sequent(self) -> Sequent:
        return self.root.sequent

    @property
    def is_tautology(self) -> bool:
        """Every branch closes in an axiom."""
        return all(leaf.axiom for leaf in self.root.leaves())

    @property
    def depth(self) -> int:
        return self.root.depth

    @property
    def size(self) -> int:
        return self.root.size

    def nodes(self) -> Iterator[ProofNode]:
        return self.root.walk()

    def leaves(self) -> List[ProofNode]:
        return list(self.root.leaves())

    def falsifiable_leaves(self) -> List[ProofNode]:
        return [leaf for leaf in self.root.leaves() if leaf.falsifiable]

    def counter_models(self) -> List[CounterModel]:
        variables = self.root.sequent.variables()
        return [CounterModel(leaf.sequent, variables) for leaf in self.falsifiable_leaves()]

    def counter_model(self) -> Optional[CounterModel]:
        """Counter-model from the leftmost falsifiable leaf, if there is one."""
        for leaf in self.root.leaves():
            if leaf.falsifiable:
                return CounterModel(leaf.sequent, self.root.sequent.variables())
        return None

    def rules_used(self) -> Counter:
        return Counter(node.rule_name for node in self.root.walk() if node.rule_name)

    def __repr__(self) -> str:
        return f"Proof({self.sequent}, nodes={self.size}, tautology={self.is_tautology})"
