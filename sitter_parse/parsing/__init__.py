"""
Parsing Layer

Dispatch from file extension to a loaded tree-sitter grammar, then parse.

Components:
- extension_registry: extension -> grammar identifier table
- grammar_loader: memoized grammar loading
- source_file: source file representation
- ast_tree: parse invocation and syntax tree wrapper
"""

from .ast_tree import SyntaxTree
from .extension_registry import BUILTIN_EXTENSIONS, ExtensionRegistry
from .grammar_loader import GrammarHandle, GrammarLoader, GrammarStatus, get_loader
from .source_file import SourceFile

__all__ = [
    "BUILTIN_EXTENSIONS",
    "ExtensionRegistry",
    "GrammarHandle",
    "GrammarLoader",
    "GrammarStatus",
    "get_loader",
    "SourceFile",
    "SyntaxTree",
]
