"""Lexical analysis of infix propositions."""

from dataclasses import dataclass
from typing import List

from gentzen.core.exceptions import LexError


NOT = "NOT"
AND = "AND"
OR = "OR"
IMPLIES = "IMPLIES"
LPAREN = "LPAREN"
RPAREN = "RPAREN"
VARIABLE = "VARIABLE"

# Two-character operators, keyed by their first character
_DOUBLE = {
    "&": ("&", AND),
    "|": ("|", OR),
    "-": (">", IMPLIES),
}

_SINGLE = {
    "!": NOT,
    "(": LPAREN,
    ")": RPAREN,
}


@dataclass(frozen=True)
class Token:
    kind: str
    value: str
    position: int

    def __str__(self):
        return self.value


def _is_letter(char: str) -> bool:
    return char.isascii() and char.isalpha()


def _is_alnum(char: str) -> bool:
    return char.isascii() and char.isalnum()


def tokenize(text: str) -> List[Token]:
    """Split ``text`` into tokens.

    Raises LexError on the first character that cannot start a token, or on
    an incomplete ``&&``, ``||`` or ``->``. Whitespace separates tokens and
    is otherwise ignored.
    """
    tokens = []
    i = 0
    n = len(text)
    while i < n:
        char = text[i]
        if char in _DOUBLE:
            second, kind = _DOUBLE[char]
            following = text[i + 1] if i + 1 < n else ""
            if following != second:
                raise LexError(following, i + 1, char, expected=second)
            tokens.append(Token(kind, char + second, i))
            i += 2
        elif char in _SINGLE:
            tokens.append(Token(_SINGLE[char], char, i))
            i += 1
        elif _is_letter(char):
            start = i
            i += 1
            while i < n and _is_alnum(text[i]):
                i += 1
            tokens.append(Token(VARIABLE, text[start:i], start))
        elif char.isspace():
            i += 1
        else:
            raise LexError(char, i, text)
    return tokens
