"""
Source File representation
"""

from dataclasses import dataclass
from pathlib import Path

from sitter_parse.exceptions import SourceNotFoundError


@dataclass
class SourceFile:
    """
    A source file queued for parsing.

    Attributes:
        file_path: Path exactly as the user gave it
        content: Decoded file content
        grammar: Grammar identifier used to parse it
        encoding: File encoding (default: utf-8)
    """

    file_path: str
    content: str
    grammar: str
    encoding: str = "utf-8"

    @classmethod
    def from_file(cls, file_path: str | Path, grammar: str, encoding: str = "utf-8") -> "SourceFile":
        """
        Load source file from disk.

        Undecodable bytes are replaced with U+FFFD rather than rejected.

        Args:
            file_path: Path to the file
            grammar: Grammar identifier
            encoding: File encoding

        Returns:
            SourceFile instance

        Raises:
            SourceNotFoundError: If the path is missing, not a file, or unreadable
        """
        try:
            content = Path(file_path).read_bytes().decode(encoding, errors="replace")
        except OSError as e:
            raise SourceNotFoundError(str(file_path)) from e

        return cls(file_path=str(file_path), content=content, grammar=grammar, encoding=encoding)

    @classmethod
    def from_content(cls, file_path: str, content: str, grammar: str, encoding: str = "utf-8") -> "SourceFile":
        """Create source file from a content string"""
        return cls(file_path=file_path, content=content, grammar=grammar, encoding=encoding)

    @property
    def line_count(self) -> int:
        """Get total number of lines"""
        return len(self.content.splitlines())

    @property
    def data(self) -> bytes:
        """Content as the UTF-8 bytes handed to the parser"""
        return self.content.encode("utf-8", errors="replace")
