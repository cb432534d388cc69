"""
Breadth-first JSON node dump.

Output shape (consumed by external tooling, keep stable):

    {
      "file": "<path as given>",
      "root": <NodeSummary>,
      "nodes": [<NodeSummary>, ...]   # BFS order, root first, at most `cap`
    }
"""

import json
from collections import deque
from dataclasses import dataclass
from typing import Any

DEFAULT_NODE_CAP = 2000


@dataclass(frozen=True)
class Position:
    row: int
    column: int

    def to_dict(self) -> dict[str, int]:
        return {"row": self.row, "column": self.column}


@dataclass(frozen=True)
class NodeSummary:
    """
    Flattened description of one node.

    Attributes:
        type: Node type name
        named: False for anonymous (literal token) nodes
        start_position: Zero-based start row/column
        end_position: Zero-based end row/column
        child_count: Number of direct children
    """

    type: str
    named: bool
    start_position: Position
    end_position: Position
    child_count: int

    @classmethod
    def from_node(cls, node: Any) -> "NodeSummary":
        return cls(
            type=node.type,
            named=bool(node.is_named),
            start_position=Position(node.start_point[0], node.start_point[1]),
            end_position=Position(node.end_point[0], node.end_point[1]),
            child_count=node.child_count,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "named": self.named,
            "startPosition": self.start_position.to_dict(),
            "endPosition": self.end_position.to_dict(),
            "childCount": self.child_count,
        }


def collect_summaries(root: Any, cap: int = DEFAULT_NODE_CAP) -> list[NodeSummary]:
    """
    Summarize nodes breadth-first from root, stopping at `cap` entries.

    Args:
        root: Starting node
        cap: Maximum number of summaries

    Returns:
        Summaries in BFS order, root first

    Raises:
        ValueError: If cap < 1
    """
    if cap < 1:
        raise ValueError(f"cap must be >= 1, got {cap}")

    summaries: list[NodeSummary] = []
    queue = deque([root])
    while queue and len(summaries) < cap:
        node = queue.popleft()
        summaries.append(NodeSummary.from_node(node))
        # Nodes queued past the cap would never be visited.
        room = cap - len(summaries) - len(queue)
        if room > 0:
            queue.extend(node.children[:room])
    return summaries


def build_dump(file_path: str, root: Any, cap: int = DEFAULT_NODE_CAP) -> dict[str, Any]:
    """Build the JSON-ready dump for one tree"""
    return {
        "file": file_path,
        "root": NodeSummary.from_node(root).to_dict(),
        "nodes": [summary.to_dict() for summary in collect_summaries(root, cap)],
    }


def render_json(file_path: str, root: Any, cap: int = DEFAULT_NODE_CAP, indent: int | None = 2) -> str:
    return json.dumps(build_dump(file_path, root, cap), indent=indent, ensure_ascii=False)
