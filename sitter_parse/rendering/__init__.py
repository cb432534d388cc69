"""
Rendering Layer

Turns a syntax tree into text for stdout.

Components:
- sexp: canonical S-expression text form
- json_dump: capped breadth-first NodeSummary dump
- summary: headline tree info
"""

from .json_dump import DEFAULT_NODE_CAP, NodeSummary, Position, build_dump, collect_summaries, render_json
from .sexp import render_sexp
from .summary import TreeInfo, render_summary

__all__ = [
    "DEFAULT_NODE_CAP",
    "NodeSummary",
    "Position",
    "build_dump",
    "collect_summaries",
    "render_json",
    "render_sexp",
    "TreeInfo",
    "render_summary",
]
