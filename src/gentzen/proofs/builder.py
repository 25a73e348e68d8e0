"""Backward proof search in the sequent calculus.

Starting from the sequent to prove, each unfinished sequent is reduced by the
first rule in priority order that applies to it, until every branch ends in
a finished sequent. Every rule removes at least one connective, so a branch
is never longer than the number of connectives in the root.
"""

import logging
from typing import List, Optional, Sequence, Union

from gentzen.core.logic import Formula, Sequent
from gentzen.rules import RULES, Rule, RuleApplication, apply_rule
from .proof import Proof, ProofNode

logger = logging.getLogger(__name__)


def expand(sequent: Sequent, rules: Sequence[Rule] = RULES) -> RuleApplication:
    """Apply the first matching rule to an unfinished sequent."""
    for function in rules:
        application = apply_rule(function, sequent)
        if application is not None:
            logger.debug("%s", application)
            return application
    raise AssertionError(f"No inference rule applies to unfinished sequent {sequent}")


def build_tree(sequent: Sequent, rules: Sequence[Rule] = RULES) -> ProofNode:
    """Fully expand ``sequent`` and return the root of its proof tree.

    Works with an explicit stack rather than recursion. Sequents are first
    expanded top-down into a flat table; children always sit after their
    parent in it, so the nodes can then be assembled bottom-up by walking
    the table backwards.
    """
    sequents: List[Sequent] = [sequent]
    rule_names: List[Optional[str]] = [None]
    child_ids: List[List[int]] = [[]]

    stack = [0]
    while stack:
        index = stack.pop()
        current = sequents[index]
        if current.finished:
            continue
        application = expand(current, rules)
        rule_names[index] = application.rule_name
        for premise in application.premises:
            child_ids[index].append(len(sequents))
            sequents.append(premise)
            rule_names.append(None)
            child_ids.append([])
        stack.extend(reversed(child_ids[index]))

    nodes: List[ProofNode] = [None] * len(sequents)
    for index in reversed(range(len(sequents))):
        children = tuple(nodes[child] for child in child_ids[index])
        nodes[index] = ProofNode(sequents[index], rule_names[index], children)
    return nodes[0]


def build_proof(target: Union[Formula, Sequent], rules: Sequence[Rule] = RULES) -> Proof:
    """
    Build the proof tree for a formula or a sequent.

    Args:
        target: A formula (proved as the sequent ``{ []; [formula] }``) or
            an arbitrary sequent
        rules: Rules in priority order

    Returns:
        Proof whose leaves are all finished
    """
    if isinstance(target, Formula):
        formula, sequent = target, Sequent.from_formula(target)
    elif isinstance(target, Sequent):
        formula, sequent = None, target
    else:
        raise TypeError(f"Expected Formula or Sequent, got {target!r}")

    proof = Proof(build_tree(sequent, rules), formula)
    logger.info("Built proof of %s: %d nodes, depth %d, %s",
                sequent, proof.size, proof.depth,
                "tautology" if proof.is_tautology else "falsifiable")
    return proof
