"""Base class for file format handlers."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List

from gentzen.core.logic import Formula


class FileFormat(ABC):
    """Abstract base class for file format handlers.

    File format handlers are responsible for:
    1. Reading formulas from files or strings in a specific syntax
    2. Writing formulas back out in that syntax
    """

    @abstractmethod
    def parse_string(self, content: str, **kwargs) -> List[Formula]:
        """Parse a string and return the formulas it contains.

        Raises:
            ParseError: If any formula is invalid
        """
        pass

    def parse_file(self, file_path: Path, **kwargs) -> List[Formula]:
        """Parse a file and return the formulas it contains.

        Raises:
            FileNotFoundError: If file doesn't exist
            ParseError: If any formula is invalid
        """
        with open(file_path, 'r') as f:
            return self.parse_string(f.read(), **kwargs)

    @abstractmethod
    def format_formulas(self, formulas: List[Formula], **kwargs) -> str:
        """Format formulas as a string in this syntax."""
        pass

    def write_file(self, formulas: List[Formula], file_path: Path, **kwargs) -> None:
        with open(file_path, 'w') as f:
            f.write(self.format_formulas(formulas, **kwargs))

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this file format."""
        pass

    @property
    @abstractmethod
    def extensions(self) -> List[str]:
        """Return list of file extensions this format handles."""
        pass
