"""Single-premise rules.

Each of these rewrites every matching formula on its side of the sequent in
one pass, keeping the order of everything else, and yields exactly one
premise.
"""

from typing import List

from gentzen.core.logic import Operator, Sequent, has_operator
from .base import any_with, rule


@rule("left-and")
def left_and(seq: Sequent) -> List[Sequent]:
    """``A && B`` on the left becomes ``A, B`` on the left."""
    if not any_with(seq.assumptions, Operator.AND):
        return []
    assumptions = []
    for formula in seq.assumptions:
        if has_operator(formula, Operator.AND):
            assumptions.extend(formula.operands)
        else:
            assumptions.append(formula)
    return [Sequent(assumptions, seq.conclusions)]


@rule("right-or")
def right_or(seq: Sequent) -> List[Sequent]:
    """``A || B`` on the right becomes ``A, B`` on the right."""
    if not any_with(seq.conclusions, Operator.OR):
        return []
    conclusions = []
    for formula in seq.conclusions:
        if has_operator(formula, Operator.OR):
            conclusions.extend(formula.operands)
        else:
            conclusions.append(formula)
    return [Sequent(seq.assumptions, conclusions)]


@rule("right-imp")
def right_imp(seq: Sequent) -> List[Sequent]:
    """``A -> B`` on the right: ``A`` is assumed, ``B`` stays a conclusion."""
    if not any_with(seq.conclusions, Operator.IMPLIES):
        return []
    assumptions = list(seq.assumptions)
    conclusions = []
    for formula in seq.conclusions:
        if has_operator(formula, Operator.IMPLIES):
            assumptions.append(formula.left)
            conclusions.append(formula.right)
        else:
            conclusions.append(formula)
    return [Sequent(assumptions, conclusions)]


@rule("left-not")
def left_not(seq: Sequent) -> List[Sequent]:
    """``!A`` on the left moves ``A`` to the right."""
    if not any_with(seq.assumptions, Operator.NOT):
        return []
    assumptions = []
    conclusions = list(seq.conclusions)
    for formula in seq.assumptions:
        if has_operator(formula, Operator.NOT):
            conclusions.append(formula.operands[0])
        else:
            assumptions.append(formula)
    return [Sequent(assumptions, conclusions)]


@rule("right-not")
def right_not(seq: Sequent) -> List[Sequent]:
    """``!A`` on the right moves ``A`` to the left."""
    if not any_with(seq.conclusions, Operator.NOT):
        return []
    assumptions = list(seq.assumptions)
    conclusions = []
    for formula in seq.conclusions:
        if has_operator(formula, Operator.NOT):
            assumptions.append(formula.operands[0])
        else:
            conclusions.append(formula)
    return [Sequent(assumptions, conclusions)]
