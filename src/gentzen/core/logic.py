import re
from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, Iterable, Iterator, Set, Tuple, Union

from .exceptions import MalformedExpression


_NAME = re.compile(r"[A-Za-z][A-Za-z0-9]*\Z")


class Operator(Enum):
    """The four connectives, with their infix symbol and arity."""

    NOT = ("!", 1)
    AND = ("&&", 2)
    OR = ("||", 2)
    IMPLIES = ("->", 2)

    def __init__(self, symbol, arity):
        self.symbol = symbol
        self.arity = arity

    @classmethod
    def from_symbol(cls, symbol: str) -> 'Operator':
        for operator in cls:
            if operator.symbol == symbol:
                return operator
        raise ValueError(f"Unknown operator: {symbol!r}")

    def __repr__(self):
        return f"Operator.{self.name}"


class Formula(ABC):
    """A propositional formula.

    Formulas compare and hash by their canonical, fully parenthesized
    rendering, so two formulas are the same proposition exactly when they
    print the same. The rendering is built once at construction.
    """

    __slots__ = ('_key', '_size', '_depth')

    def __init__(self, key, size, depth):
        self._key = key
        self._size = size
        self._depth = depth

    @classmethod
    def parse(cls, text: str, **kwargs) -> 'Formula':
        """Parse an infix string such as ``"p -> (q || !r)"``."""
        from gentzen.fileformats.parser import parse
        return parse(text, **kwargs)

    @property
    def key(self) -> str:
        return self._key

    @property
    def size(self) -> int:
        """Number of operator occurrences."""
        return self._size

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def atomic(self) -> bool:
        return False

    def variables(self) -> Set[str]:
        names = set()
        stack = [self]
        while stack:
            formula = stack.pop()
            if formula.atomic:
                names.add(formula.name)
            else:
                stack.extend(formula.operands)
        return names

    @abstractmethod
    def evaluate(self, assignment: Dict[str, bool]) -> bool:
        """Truth value under an assignment of every variable."""

    def __eq__(self, other):
        if not isinstance(other, Formula):
            return NotImplemented
        return self._key == other._key

    def __hash__(self):
        return hash(self._key)

    def __str__(self):
        return self._key

    def __repr__(self):
        return f"{type(self).__name__}({self._key!r})"


class Atom(Formula):
    __slots__ = ('name',)

    def __init__(self, name: str):
        if not isinstance(name, str) or not _NAME.match(name):
            raise MalformedExpression(f"invalid variable name {name!r}")
        super().__init__(name, 0, 0)
        self.name = name

    @property
    def atomic(self) -> bool:
        return True

    def evaluate(self, assignment: Dict[str, bool]) -> bool:
        return bool(assignment[self.name])


class Compound(Formula):
    __slots__ = ('operator', 'operands')

    def __init__(self, operator: Union[Operator, str], *operands: Formula):
        if not isinstance(operator, Operator):
            operator = Operator.from_symbol(operator)
        for operand in operands:
            if not isinstance(operand, Formula):
                raise TypeError(f"Expected Formula, got {operand!r}")
        if len(operands) != operator.arity:
            raise MalformedExpression(
                f"operator {operator.symbol!r} expects {operator.arity} "
                f"operand{'s' if operator.arity > 1 else ''}, got {len(operands)}"
            )

        if operator.arity == 1:
            key = operator.symbol + operands[0].key
        else:
            key = f"({operands[0].key}{operator.symbol}{operands[1].key})"
        super().__init__(
            key,
            1 + sum(operand.size for operand in operands),
            1 + max(operand.depth for operand in operands),
        )
        self.operator = operator
        self.operands = tuple(operands)

    @property
    def left(self) -> Formula:
        return self.operands[0]

    @property
    def right(self) -> Formula:
        return self.operands[-1]

    def evaluate(self, assignment: Dict[str, bool]) -> bool:
        if self.operator is Operator.NOT:
            return not self.operands[0].evaluate(assignment)
        left = self.left.evaluate(assignment)
        right = self.right.evaluate(assignment)
        if self.operator is Operator.AND:
            return left and right
        if self.operator is Operator.OR:
            return left or right
        return (not left) or right


def Not(operand: Formula) -> Compound:
    return Compound(Operator.NOT, operand)


def And(left: Formula, right: Formula) -> Compound:
    return Compound(Operator.AND, left, right)


def Or(left: Formula, right: Formula) -> Compound:
    return Compound(Operator.OR, left, right)


def Implies(left: Formula, right: Formula) -> Compound:
    return Compound(Operator.IMPLIES, left, right)


def has_operator(formula: Formula, operator: Operator) -> bool:
    return not formula.atomic and formula.operator is operator


class Sequent:
    """Assumptions on the left, conclusions on the right.

    Read as "the conjunction of the assumptions implies the disjunction of
    the conclusions". Both sides are kept in order because rules scan them
    left to right; the predicates treat them as sets.
    """

    __slots__ = ('assumptions', 'conclusions')

    def __init__(self, assumptions: Iterable[Formula] = (), conclusions: Iterable[Formula] = ()):
        self.assumptions: Tuple[Formula, ...] = tuple(assumptions)
        self.conclusions: Tuple[Formula, ...] = tuple(conclusions)

    @classmethod
    def from_formula(cls, formula: Formula) -> 'Sequent':
        return cls((), (formula,))

    @property
    def axiom(self) -> bool:
        """Some formula appears on both sides."""
        left = {formula.key for formula in self.assumptions}
        return any(formula.key in left for formula in self.conclusions)

    @property
    def finished(self) -> bool:
        return self.axiom or all(formula.atomic for formula in self.formulas())

    @property
    def falsifiable(self) -> bool:
        return self.finished and not self.axiom

    @property
    def size(self) -> int:
        return sum(formula.size for formula in self.formulas())

    def formulas(self) -> Iterator[Formula]:
        yield from self.assumptions
        yield from self.conclusions

    def variables(self) -> Set[str]:
        names = set()
        for formula in self.formulas():
            names |= formula.variables()
        return names

    def __eq__(self, other):
        if not isinstance(other, Sequent):
            return NotImplemented
        return self.assumptions == other.assumptions and self.conclusions == other.conclusions

    def __hash__(self):
        return hash((self.assumptions, self.conclusions))

    def __str__(self):
        assumptions = ", ".join(map(str, self.assumptions))
        conclusions = ", ".join(map(str, self.conclusions))
        return f"{{ [{assumptions}]; [{conclusions}] }}"

    def __repr__(self):
        return f"Sequent({self})"
