"""Lookup of formula file formats by name or file extension.

Formats register themselves with the ``@register_format`` class decorator.
Files without an extension are read as ``DEFAULT_FORMAT``.
"""

from pathlib import Path
from typing import Dict, List, Optional, Type, Union

from .base import FileFormat

DEFAULT_FORMAT = "infix"

_FORMATS: Dict[str, Type[FileFormat]] = {}


def register_format(format_class: Type[FileFormat]) -> Type[FileFormat]:
    """Class decorator adding a format under its ``name``."""
    _FORMATS[format_class().name.lower()] = format_class
    return format_class


def list_formats() -> List[str]:
    return sorted(_FORMATS)


def format_for_file(file_path: Union[str, Path]) -> str:
    """Name of the format whose extensions include the file's suffix."""
    suffix = Path(file_path).suffix.lower()
    if not suffix:
        return DEFAULT_FORMAT
    for name, format_class in _FORMATS.items():
        if suffix in format_class().extensions:
            return name
    known = sorted(ext for cls in _FORMATS.values() for ext in cls().extensions)
    raise ValueError(f"No format reads {suffix!r} files (known extensions: {', '.join(known)})")


def get_format_handler(format_name: Optional[str] = None,
                       file_path: Optional[Union[str, Path]] = None) -> FileFormat:
    """Handler chosen by ``format_name``, or else by the extension of ``file_path``."""
    if format_name is None:
        if file_path is None:
            raise ValueError("Either format_name or file_path must be provided")
        format_name = format_for_file(file_path)
    try:
        return _FORMATS[format_name.lower()]()
    except KeyError:
        raise ValueError(
            f"Unknown file format: {format_name} (available: {', '.join(list_formats())})"
        ) from None
