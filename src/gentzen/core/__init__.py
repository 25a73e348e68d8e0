"""Formulas, sequents and the errors raised while building them."""

from .logic import (
    Operator, Formula, Atom, Compound, Sequent,
    Not, And, Or, Implies, has_operator
)
from .exceptions import (
    ParseError, LexError, UnbalancedParens, MalformedExpression,
    FormulaTooLargeError
)
from .serialization import (
    CoreJSONEncoder, decode_core_object,
    to_json, from_json,
    save_sequent, load_sequent
)

__all__ = [
    # Logic
    'Operator', 'Formula', 'Atom', 'Compound', 'Sequent',
    'Not', 'And', 'Or', 'Implies', 'has_operator',
    # Errors
    'ParseError', 'LexError', 'UnbalancedParens', 'MalformedExpression',
    'FormulaTooLargeError',
    # Serialization
    'CoreJSONEncoder', 'decode_core_object',
    'to_json', 'from_json',
    'save_sequent', 'load_sequent'
]
