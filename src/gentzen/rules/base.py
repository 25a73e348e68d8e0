"""Shared pieces of the inference rules."""

from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Sequence

from gentzen.core.logic import Formula, Operator, Sequent, has_operator


# A rule maps a sequent to the premises it reduces to; an empty list means
# the rule does not apply.
Rule = Callable[[Sequent], List[Sequent]]


@dataclass
class RuleApplication:
    """Result of applying an inference rule."""
    rule_name: str
    sequent: Sequent
    premises: List[Sequent] = field(default_factory=list)

    def __str__(self):
        premises = "  |  ".join(map(str, self.premises))
        return f"{self.rule_name}: {self.sequent}  =>  {premises}"


def rule(name: str) -> Callable[[Rule], Rule]:
    """Tag a rule function with its display name."""
    def decorate(function: Rule) -> Rule:
        function.rule_name = name
        return function
    return decorate


def rule_name(function: Rule) -> str:
    return getattr(function, 'rule_name', function.__name__)


def first_index(formulas: Sequence[Formula], operator: Operator) -> Optional[int]:
    """Index of the first formula whose main connective is ``operator``."""
    for i, formula in enumerate(formulas):
        if has_operator(formula, operator):
            return i
    return None


def any_with(formulas: Iterable[Formula], operator: Operator) -> bool:
    return any(has_operator(formula, operator) for formula in formulas)


def apply_rule(function: Rule, sequent: Sequent) -> Optional[RuleApplication]:
    """Apply one rule, returning None if it does not match."""
    premises = function(sequent)
    if not premises:
        return None
    return RuleApplication(rule_name(function), sequent, list(premises))
