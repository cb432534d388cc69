"""
sitter-parse Exception Hierarchy

Every failure the pipeline can report is a SitterParseError subclass.
Each subclass carries the process exit status the CLI maps it to, so
automation can tell "unsupported language" apart from "file not found".

Usage:
    1. Raise inside the pipeline, never print there.
    2. Wrap third-party failures and chain them (``raise ... from e``).
    3. Handle only at the CLI boundary.

Example:
    try:
        language = get_language(identifier)
    except Exception as e:
        raise GrammarLoadError(identifier, str(e)) from e
"""

from typing import Any

EXIT_OK = 0
EXIT_USAGE = 2
EXIT_NOT_FOUND = 3
EXIT_UNSUPPORTED_LANGUAGE = 4
EXIT_GRAMMAR_LOAD = 5
EXIT_PARSE_FATAL = 6


class SitterParseError(Exception):
    """Base exception for all sitter-parse errors."""

    exit_code: int = 1

    def __init__(self, message: str, details: dict[str, Any] | None = None, hint: str | None = None):
        """
        Initialize error.

        Args:
            message: Human-readable error message
            details: Optional additional details for debugging
            hint: Optional remediation shown under the message
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.hint = hint

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (details: {self.details})"
        return self.message


class UsageError(SitterParseError):
    """Bad or missing command-line arguments."""

    exit_code = EXIT_USAGE


class SourceNotFoundError(SitterParseError):
    """Source file missing or not a regular file."""

    exit_code = EXIT_NOT_FOUND

    def __init__(self, path: str):
        super().__init__(f"File not found: {path}")
        self.path = path


class UnsupportedLanguageError(SitterParseError):
    """No grammar is configured for the file extension."""

    exit_code = EXIT_UNSUPPORTED_LANGUAGE

    def __init__(self, extension: str):
        shown = f".{extension}" if extension else "(none)"
        super().__init__(
            f"No language configured for extension: {shown}",
            hint=(
                "Add an entry to BUILTIN_EXTENSIONS in sitter_parse/parsing/extension_registry.py "
                "or set SITTER_PARSE_EXTRA_EXTENSIONS."
            ),
        )
        self.extension = extension


class GrammarLoadError(SitterParseError):
    """Grammar identifier is known but the grammar could not be loaded."""

    exit_code = EXIT_GRAMMAR_LOAD

    def __init__(self, identifier: str, reason: str):
        super().__init__(
            f"Failed to load grammar '{identifier}': {reason}",
            hint="Is tree-sitter-language-pack installed? Try: pip install tree-sitter-language-pack",
        )
        self.identifier = identifier
        self.reason = reason


class ParseFatalError(SitterParseError):
    """The parser itself failed, as opposed to producing error nodes."""

    exit_code = EXIT_PARSE_FATAL
