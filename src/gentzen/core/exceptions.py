"""Errors raised while turning text into formulas."""


class ParseError(Exception):
    """Base class for every error raised by the lexer and the parser."""


class LexError(ParseError):
    def __init__(self, character, position, context, expected=None):
        if expected is not None:
            found = repr(character) if character else "end of input"
            message = f"Unexpected token: {found} after {context!r} at position {position} (expected {expected!r})."
        else:
            message = f"Unexpected token: {character!r} at position {position} in {context!r}"
        super().__init__(message)
        self.character = character
        self.position = position
        self.context = context
        self.expected = expected


class UnbalancedParens(ParseError):
    def __init__(self, parenthesis):
        super().__init__(f"Found unbalanced parentheses: {parenthesis!r}.")
        self.parenthesis = parenthesis


class MalformedExpression(ParseError):
    def __init__(self, reason):
        super().__init__(f"Malformed expression: {reason}")
        self.reason = reason


class FormulaTooLargeError(ParseError):
    def __init__(self, what, limit, actual):
        super().__init__(f"Formula {what} {actual} exceeds the limit of {limit}")
        self.what = what
        self.limit = limit
        self.actual = actual
