"""Double-premise rules.

These only act on the first matching formula. Any later match is left for
a subsequent expansion of each branch.
"""

from typing import List

from gentzen.core.logic import Operator, Sequent
from .base import first_index, rule


@rule("left-imp")
def left_imp(seq: Sequent) -> List[Sequent]:
    index = first_index(seq.assumptions, Operator.IMPLIES)
    if index is None:
        return []
    formula = seq.assumptions[index]
    before, after = seq.assumptions[:index], seq.assumptions[index + 1:]
    return [
        Sequent(before + (formula.right,) + after, seq.conclusions),
        Sequent(before + after, seq.conclusions + (formula.left,)),
    ]


@rule("left-or")
def left_or(seq: Sequent) -> List[Sequent]:
    index = first_index(seq.assumptions, Operator.OR)
    if index is None:
        return []
    formula = seq.assumptions[index]
    before, after = seq.assumptions[:index], seq.assumptions[index + 1:]
    return [
        Sequent(before + (formula.left,) + after, seq.conclusions),
        Sequent(before + (formula.right,) + after, seq.conclusions),
    ]


@rule("right-and")
def right_and(seq: Sequent) -> List[Sequent]:
    index = first_index(seq.conclusions, Operator.AND)
    if index is None:
        return []
    formula = seq.conclusions[index]
    before, after = seq.conclusions[:index], seq.conclusions[index + 1:]
    return [
        Sequent(seq.assumptions, before + (formula.left,) + after),
        Sequent(seq.assumptions, before + (formula.right,) + after),
    ]
