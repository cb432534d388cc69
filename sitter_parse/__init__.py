"""
sitter-parse

Dispatch a source file to its tree-sitter grammar and render the parse tree
as an S-expression, a capped breadth-first JSON dump, or a short summary.
"""

from sitter_parse.dispatch import Dispatcher
from sitter_parse.exceptions import (
    GrammarLoadError,
    ParseFatalError,
    SitterParseError,
    SourceNotFoundError,
    UnsupportedLanguageError,
    UsageError,
)

__version__ = "0.1.0"

__all__ = [
    "Dispatcher",
    "GrammarLoadError",
    "ParseFatalError",
    "SitterParseError",
    "SourceNotFoundError",
    "UnsupportedLanguageError",
    "UsageError",
]
