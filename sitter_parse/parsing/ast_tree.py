"""
Syntax tree wrapper and parse invocation for tree-sitter
"""

from collections.abc import Iterator

try:
    from tree_sitter import Node as TSNode
    from tree_sitter import Parser
    from tree_sitter import Tree as TSTree
except ImportError as e:
    raise ImportError("tree-sitter is required. Install with: pip install tree-sitter") from e

from sitter_parse.exceptions import ParseFatalError
from sitter_parse.observability import get_logger
from sitter_parse.parsing.grammar_loader import GrammarHandle
from sitter_parse.parsing.source_file import SourceFile

logger = get_logger(__name__)


class SyntaxTree:
    """
    Parse result for one source file.

    Syntax errors in the input are part of the tree (ERROR / MISSING nodes)
    and never make the parse itself fail.
    """

    def __init__(self, source: SourceFile, tree: TSTree):
        """
        Args:
            source: Source file that was parsed
            tree: tree-sitter tree
        """
        self.source = source
        self.tree = tree
        self._root = tree.root_node

    @classmethod
    def parse(cls, source: SourceFile, handle: GrammarHandle) -> "SyntaxTree":
        """
        Parse a source file with a loaded grammar.

        Args:
            source: Source file to parse
            handle: Loaded grammar

        Returns:
            SyntaxTree instance

        Raises:
            ParseFatalError: If tree-sitter itself fails
        """
        try:
            parser = Parser(handle.language)
            tree = parser.parse(source.data)
        except Exception as e:
            raise ParseFatalError(
                f"Parser failed on {source.file_path}: {e}",
                details={"grammar": handle.identifier},
            ) from e

        if tree is None:
            raise ParseFatalError(
                f"Parser returned no tree for {source.file_path}",
                details={"grammar": handle.identifier},
            )

        result = cls(source, tree)
        logger.info(
            "parse_completed",
            file=source.file_path,
            grammar=handle.identifier,
            has_error=result.has_error,
        )
        return result

    @property
    def root(self) -> TSNode:
        """Get root node"""
        return self._root

    @property
    def has_error(self) -> bool:
        """True if the tree contains ERROR or MISSING nodes"""
        return bool(self._root.has_error)

    def walk(self, node: TSNode | None = None) -> Iterator[TSNode]:
        """
        Yield nodes in depth-first pre-order.

        Uses an explicit stack, so nesting depth is not limited by the
        interpreter's recursion limit.
        """
        stack = [node if node is not None else self._root]
        while stack:
            current = stack.pop()
            yield current
            stack.extend(reversed(current.children))

    def error_nodes(self) -> list[TSNode]:
        """All ERROR and MISSING nodes, in document order"""
        return [n for n in self.walk() if n.is_error or n.is_missing]

    def node_count(self) -> int:
        return sum(1 for _ in self.walk())

