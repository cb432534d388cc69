"""
Extension Registry

Static, read-only mapping from file extension to grammar identifier.
"""

from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

from sitter_parse.exceptions import UnsupportedLanguageError

# Grammar identifiers are tree-sitter-language-pack names.
BUILTIN_EXTENSIONS: Mapping[str, str] = MappingProxyType(
    {
        "js": "javascript",
        "jsx": "javascript",
        "mjs": "javascript",
        "cjs": "javascript",
        "ts": "typescript",
        "tsx": "tsx",
        "json": "json",
        "py": "python",
        "pyi": "python",
        "rs": "rust",
    }
)


def normalize_extension(extension: str) -> str:
    """Lowercase and strip the leading dot: ".PY" -> "py"."""
    return extension.lower().lstrip(".")


class ExtensionRegistry:
    """
    Maps file extensions to grammar identifiers.

    The table is fixed at construction. Extra mappings override built-in
    ones, so each extension still resolves to exactly one identifier.
    """

    def __init__(self, extra: Mapping[str, str] | None = None):
        table = dict(BUILTIN_EXTENSIONS)
        for ext, identifier in (extra or {}).items():
            table[normalize_extension(ext)] = identifier
        self._table: Mapping[str, str] = MappingProxyType(table)

    def lookup(self, extension: str) -> str:
        """
        Resolve an extension to its grammar identifier.

        Args:
            extension: Extension with or without the leading dot, any case

        Returns:
            Grammar identifier

        Raises:
            UnsupportedLanguageError: If no grammar is configured for the extension
        """
        key = normalize_extension(extension)
        identifier = self._table.get(key)
        if identifier is None:
            raise UnsupportedLanguageError(key)
        return identifier

    def lookup_path(self, path: str | Path) -> str:
        """Resolve a file path by its suffix"""
        return self.lookup(Path(path).suffix)

    def supports(self, extension: str) -> bool:
        return normalize_extension(extension) in self._table

    def entries(self) -> list[tuple[str, str]]:
        """(extension, identifier) pairs sorted by extension"""
        return sorted(self._table.items())

    @property
    def identifiers(self) -> list[str]:
        """Distinct grammar identifiers, sorted"""
        return sorted(set(self._table.values()))
