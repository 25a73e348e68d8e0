"""Plain-text format: one infix formula per line."""

from typing import List, Optional

from gentzen.core.exceptions import ParseError
from gentzen.core.logic import Formula
from .base import FileFormat
from .parser import parse
from .registry import register_format


COMMENT = "#"


@register_format
class InfixFormat(FileFormat):
    """Handler for files holding one infix formula per line.

    Blank lines are skipped and ``#`` starts a comment that runs to the end
    of the line.
    """

    def parse_string(self, content: str, max_length: Optional[int] = None,
                     max_depth: Optional[int] = None) -> List[Formula]:
        formulas = []
        for lineno, line in enumerate(content.splitlines(), start=1):
            text = line.split(COMMENT, 1)[0].strip()
            if not text:
                continue
            try:
                formulas.append(parse(text, max_length=max_length, max_depth=max_depth))
            except ParseError as e:
                e.args = (f"line {lineno}: {e}",)
                e.lineno = lineno
                raise
        return formulas

    def format_formulas(self, formulas: List[Formula]) -> str:
        return "".join(f"{formula}\n" for formula in formulas)

    @property
    def name(self) -> str:
        return "infix"

    @property
    def extensions(self) -> List[str]:
        return ['.txt', '.prop', '.infix']
