"""Reading formulas from text."""

from .lexer import Token, tokenize
from .parser import Parser, parse
from .base import FileFormat
from .registry import get_format_handler, format_for_file, list_formats, register_format
from .infix import InfixFormat

__all__ = [
    'Token', 'tokenize',
    'Parser', 'parse',
    'FileFormat', 'InfixFormat',
    'get_format_handler', 'format_for_file', 'list_formats', 'register_format'
]
