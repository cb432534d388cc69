"""
Grammar Loader

Resolves grammar identifiers to loaded tree-sitter languages, once per
identifier per process.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

try:
    from tree_sitter_language_pack import get_language
except ImportError as e:
    raise ImportError(
        "tree-sitter-language-pack is required. " "Install with: pip install tree-sitter tree-sitter-language-pack"
    ) from e

from sitter_parse.exceptions import GrammarLoadError
from sitter_parse.observability import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class GrammarHandle:
    """
    A loaded grammar.

    Attributes:
        identifier: Grammar identifier (e.g., "json", "python")
        language: tree-sitter Language object
    """

    identifier: str
    language: Any


@dataclass(frozen=True)
class GrammarStatus:
    """Outcome of trying to load one grammar"""

    identifier: str
    ok: bool
    error: str | None = None


def _load_language(identifier: str) -> Any:
    return get_language(identifier)


class GrammarLoader:
    """
    Memoizing grammar loader.

    The cache is keyed by identifier, so every extension that maps to the
    same identifier shares one handle. Failed loads are not cached.
    """

    def __init__(self, loader: Callable[[str], Any] | None = None):
        """
        Args:
            loader: Callable returning a tree-sitter Language for an identifier
                (defaults to tree_sitter_language_pack.get_language)
        """
        self._loader = loader or _load_language
        self._handles: dict[str, GrammarHandle] = {}

    def load(self, identifier: str) -> GrammarHandle:
        """
        Get the handle for a grammar, loading it on first use.

        Raises:
            GrammarLoadError: If the underlying loader fails
        """
        handle = self._handles.get(identifier)
        if handle is not None:
            return handle

        try:
            language = self._loader(identifier)
        except Exception as e:
            logger.warning("grammar_load_failed", identifier=identifier, error=str(e))
            raise GrammarLoadError(identifier, str(e) or type(e).__name__) from e

        if language is None:
            raise GrammarLoadError(identifier, "loader returned no language")

        handle = GrammarHandle(identifier=identifier, language=language)
        self._handles[identifier] = handle
        logger.debug("grammar_loaded", identifier=identifier)
        return handle

    def is_loaded(self, identifier: str) -> bool:
        return identifier in self._handles

    @property
    def loaded(self) -> list[str]:
        """Identifiers currently cached"""
        return sorted(self._handles)

    def check(self, identifiers: Iterable[str]) -> list[GrammarStatus]:
        """
        Try to load each grammar and report the outcome.

        Args:
            identifiers: Grammar identifiers to check

        Returns:
            One GrammarStatus per distinct identifier, in sorted order
        """
        statuses = []
        for identifier in sorted(set(identifiers)):
            try:
                self.load(identifier)
            except GrammarLoadError as e:
                statuses.append(GrammarStatus(identifier=identifier, ok=False, error=e.reason))
            else:
                statuses.append(GrammarStatus(identifier=identifier, ok=True))
        return statuses


# Global loader instance
_loader: GrammarLoader | None = None


def get_loader() -> GrammarLoader:
    """Get global grammar loader instance"""
    global _loader
    if _loader is None:
        _loader = GrammarLoader()
    return _loader
