"""
S-expression rendering.

Produces the parenthesized form tree-sitter prints for a node:
named descendants only, ``field: (...)`` prefixes, ``(MISSING ...)`` for
inserted nodes and ``(UNEXPECTED 'c')`` for empty-child error leaves.
The starting node is always written, so an anonymous token renders as
``("tok")``.
"""

from typing import Any

_CLOSE = object()


def _write_char(code: int) -> str:
    if code == -1:
        return "INVALID"
    if code == 0:
        return "'\\0'"
    if code == 10:
        return "'\\n'"
    if code == 9:
        return "'\\t'"
    if code == 13:
        return "'\\r'"
    if 0 < code < 128 and chr(code).isprintable():
        return f"'{chr(code)}'"
    return str(code)


def _unexpected_char(node: Any) -> int:
    text = node.text
    if not text:
        return -1
    return ord(text.decode("utf-8", errors="replace")[0])


def _is_visible(node: Any) -> bool:
    return node.is_named or node.is_missing


def _open(node: Any) -> str:
    if node.is_missing:
        name = node.type if node.is_named else f'"{node.type}"'
        return f"(MISSING {name}"
    if node.is_error and node.child_count == 0 and node.end_byte > node.start_byte:
        return f"(UNEXPECTED {_write_char(_unexpected_char(node))}"
    if not node.is_named:
        return f'("{node.type}"'
    return f"({node.type}"


def render_sexp(root: Any) -> str:
    """
    Render a node and its descendants as an S-expression.

    Iterative: a stack of (node, field name) entries interleaved with close
    markers, so the output mirrors the full tree without recursion.

    Args:
        root: tree-sitter node (usually tree.root_node)

    Returns:
        Single-line S-expression
    """
    out: list[str] = []
    stack: list[Any] = [(root, None)]

    while stack:
        entry = stack.pop()
        if entry is _CLOSE:
            out.append(")")
            continue

        node, field_name = entry
        if node is root or _is_visible(node):
            if out:
                out.append(" ")
            if field_name:
                out.append(f"{field_name}: ")
            out.append(_open(node))
            stack.append(_CLOSE)

        children = node.children
        for i in reversed(range(len(children))):
            stack.append((children[i], node.field_name_for_child(i)))

    return "".join(out)
