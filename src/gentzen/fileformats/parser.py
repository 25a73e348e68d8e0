"""Operator-precedence parser for infix propositions.

Precedence from tightest to loosest is ``!``, ``&&``, ``||``, ``->``. All
binary operators associate to the left, so ``p -> q -> r`` reads as
``((p->q)->r)``.
"""

import logging
from typing import Iterable, List, Optional, Union

from gentzen.core.exceptions import FormulaTooLargeError, MalformedExpression, UnbalancedParens
from gentzen.core.logic import Atom, Compound, Formula, Operator
from gentzen.utils.config import get_config
from .lexer import Token, tokenize, NOT, AND, OR, IMPLIES, LPAREN, RPAREN, VARIABLE

logger = logging.getLogger(__name__)

# Used when the configuration leaves a limit unset
MAX_LENGTH = 10000
MAX_DEPTH = 200


_OPERATORS = {
    NOT: Operator.NOT,
    AND: Operator.AND,
    OR: Operator.OR,
    IMPLIES: Operator.IMPLIES,
}

# Operators already on the stack that must be reduced before pushing a new one
_REDUCE_BEFORE = {
    NOT: {NOT},
    AND: {NOT, AND},
    OR: {NOT, AND, OR},
    IMPLIES: {NOT, AND, OR, IMPLIES},
}


class Parser:
    """Shunting-yard parser over a token sequence.

    Keeps an operator stack of tokens and an operand stack of formulas. A
    reduction pops one operator and one or two operands and pushes the
    combined formula back.
    """

    def __init__(self, max_depth: Optional[int] = None):
        self.max_depth = max_depth
        self.operators: List[Token] = []
        self.operands: List[Formula] = []

    def parse(self, tokens: Iterable[Token]) -> Formula:
        self.operators = []
        self.operands = []
        # True when the previous token completed an operand
        after_operand = False

        for token in tokens:
            if token.kind == LPAREN:
                self.operators.append(token)
                after_operand = False
            elif token.kind == RPAREN:
                while not self.operators or self.operators[-1].kind != LPAREN:
                    if not self.operators:
                        raise UnbalancedParens(token.value)
                    self._reduce()
                self.operators.pop()
                after_operand = True
            elif token.kind == VARIABLE:
                self.operands.append(Atom(token.value))
                after_operand = True
            elif token.kind in _OPERATORS:
                # A prefix "!" has no operand yet, so there is nothing to reduce
                if token.kind != NOT or after_operand:
                    self._reduce_while(_REDUCE_BEFORE[token.kind])
                self.operators.append(token)
                after_operand = False
            else:
                raise MalformedExpression(f"unexpected token {token.value!r}")

        while self.operators:
            self._reduce()

        if len(self.operands) != 1:
            raise MalformedExpression(
                f"expected a single formula, found {len(self.operands)} operands after parsing"
            )
        return self.operands.pop()

    def _reduce_while(self, kinds):
        while self.operators and self.operators[-1].kind in kinds:
            self._reduce()

    def _reduce(self):
        """Pop an operator and its operands and push the combined formula."""
        token = self.operators.pop()
        if token.kind in (LPAREN, RPAREN):
            raise UnbalancedParens(token.value)

        operator = _OPERATORS[token.kind]
        if len(self.operands) < operator.arity:
            raise MalformedExpression(
                f"operator {operator.symbol!r} at position {token.position} is missing an operand"
            )
        if operator.arity == 2:
            right = self.operands.pop()
            left = self.operands.pop()
            formula = Compound(operator, left, right)
        else:
            formula = Compound(operator, self.operands.pop())

        if self.max_depth is not None and formula.depth > self.max_depth:
            raise FormulaTooLargeError("depth", self.max_depth, formula.depth)

        self.operands.append(formula)
        logger.debug("Pushed new proposition: %s", formula)


def parse(source: Union[str, Iterable[Token]],
          max_length: Optional[int] = None,
          max_depth: Optional[int] = None) -> Formula:
    """Parse an infix string (or an already scanned token sequence).

    Args:
        source: Text such as ``"p && q -> p"``, or tokens from tokenize()
        max_length: Longest accepted input in characters, defaults to the
            ``parser.max_length`` setting
        max_depth: Deepest accepted nesting, defaults to ``parser.max_depth``

    Returns:
        The parsed formula

    Raises:
        LexError, UnbalancedParens, MalformedExpression, FormulaTooLargeError
    """
    config = get_config()
    if max_length is None:
        max_length = config.get('parser.max_length', MAX_LENGTH)
    if max_depth is None:
        max_depth = config.get('parser.max_depth', MAX_DEPTH)

    if isinstance(source, str):
        if max_length is not None and len(source) > max_length:
            raise FormulaTooLargeError("length", max_length, len(source))
        tokens = tokenize(source)
    else:
        tokens = list(source)

    return Parser(max_depth=max_depth).parse(tokens)
