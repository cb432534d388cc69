"""
Tree info summary
"""

from dataclasses import dataclass

from sitter_parse.parsing.ast_tree import SyntaxTree


@dataclass(frozen=True)
class TreeInfo:
    """Headline facts about one parse"""

    file: str
    grammar: str
    root_type: str
    child_count: int
    has_error: bool
    line_count: int
    node_count: int
    error_count: int
    first_error: tuple[int, int] | None = None  # (line, column), 1-based line

    @classmethod
    def from_tree(cls, tree: SyntaxTree) -> "TreeInfo":
        errors = tree.error_nodes()
        first_error = None
        if errors:
            row, column = errors[0].start_point[0], errors[0].start_point[1]
            first_error = (row + 1, column)

        return cls(
            file=tree.source.file_path,
            grammar=tree.source.grammar,
            root_type=tree.root.type,
            child_count=tree.root.child_count,
            has_error=tree.has_error,
            line_count=tree.source.line_count,
            node_count=tree.node_count(),
            error_count=len(errors),
            first_error=first_error,
        )


def render_summary(info: TreeInfo) -> str:
    lines = [
        f"File: {info.file}",
        f"Grammar: {info.grammar}",
        f"Root type: {info.root_type}",
        f"Child count: {info.child_count}",
        f"Has errors: {'yes' if info.has_error else 'no'}",
        f"Lines: {info.line_count}",
        f"Nodes: {info.node_count}",
        f"Error nodes: {info.error_count}",
    ]
    if info.first_error is not None:
        line, column = info.first_error
        lines.append(f"First error: line {line}, column {column}")
    return "\n".join(lines)
