"""Inference rules of the sequent calculus.

RULES lists them in the order the proof builder tries them: all
single-premise rules first, so branching happens as late as possible.
"""

from typing import Dict, List, Tuple

from .base import Rule, RuleApplication, apply_rule, first_index, rule_name
from .single import left_and, right_or, right_imp, left_not, right_not
from .branching import left_imp, left_or, right_and


RULES: Tuple[Rule, ...] = (
    left_and,
    right_or,
    right_imp,
    left_not,
    right_not,
    left_imp,
    left_or,
    right_and,
)

_BY_NAME: Dict[str, Rule] = {rule_name(r): r for r in RULES}


def get_rule(name: str) -> Rule:
    """Look up a rule by name, e.g. ``"left-imp"`` (``left_imp`` also works)."""
    key = name.lower().replace("_", "-")
    if key not in _BY_NAME:
        raise ValueError(f"Unknown rule: {name}")
    return _BY_NAME[key]


def list_rules() -> List[str]:
    """Rule names in priority order."""
    return [rule_name(r) for r in RULES]


__all__ = [
    'Rule', 'RuleApplication', 'apply_rule', 'first_index', 'rule_name',
    'left_and', 'right_or', 'right_imp', 'left_not', 'right_not',
    'left_imp', 'left_or', 'right_and',
    'RULES', 'get_rule', 'list_rules'
]
