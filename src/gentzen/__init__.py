"""
gentzen: propositional tautology checking with the sequent calculus.

A formula over ``!``, ``&&``, ``||`` and ``->`` is parsed into a tree, put
on the right of an empty sequent, and reduced by the Gentzen rules until
every branch is finished. It is a tautology when every branch closes in an
axiom; otherwise each open leaf gives a falsifying assignment.

Basic usage:
    >>> from gentzen import prove
    >>> proof = prove("p || !p")
    >>> proof.is_tautology
    True
    >>> str(prove("p -> q").counter_model())
    'p=T, q=F'
"""

__version__ = "0.1.0"

# Core logic structures
from gentzen.core import (
    Operator, Formula, Atom, Compound, Sequent,
    Not, And, Or, Implies,
    ParseError, LexError, UnbalancedParens, MalformedExpression,
    FormulaTooLargeError
)

# Parsing
from gentzen.fileformats import (
    tokenize, parse, get_format_handler
)

# Inference rules
from gentzen.rules import (
    RULES, RuleApplication, get_rule, list_rules
)

# Proof structures
from gentzen.proofs import (
    Proof, ProofNode, CounterModel,
    build_proof, save_proof, load_proof
)

# Configuration
from gentzen.utils.config import get_config


def prove(formula, **kwargs) -> Proof:
    """
    Parse a formula if needed and build its proof tree.

    Args:
        formula: Infix text such as ``"p && q -> p"``, or a Formula
        **kwargs: Passed to the parser (``max_length``, ``max_depth``)

    Returns:
        The complete Proof
    """
    if isinstance(formula, str):
        formula = parse(formula, **kwargs)
    return build_proof(formula)


def is_tautology(formula, **kwargs) -> bool:
    return prove(formula, **kwargs).is_tautology


__all__ = [
    # Version
    "__version__",

    # Core logic
    "Operator", "Formula", "Atom", "Compound", "Sequent",
    "Not", "And", "Or", "Implies",

    # Errors
    "ParseError", "LexError", "UnbalancedParens", "MalformedExpression",
    "FormulaTooLargeError",

    # Parsing
    "tokenize", "parse", "get_format_handler",

    # Rules
    "RULES", "RuleApplication", "get_rule", "list_rules",

    # Proofs
    "Proof", "ProofNode", "CounterModel",
    "build_proof", "save_proof", "load_proof",

    # Configuration
    "get_config",

    # High-level API
    "prove", "is_tautology"
]
