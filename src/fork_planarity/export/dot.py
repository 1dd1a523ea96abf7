"""
DOT (Graphviz) export for DFS spanning forests.

Generates a digraph with tree edges drawn solid and back edges dashed,
pointing from descendant to ancestor. Back edges that could not be given a
consistent side can be highlighted.
"""

from __future__ import annotations

import re
from typing import Iterable, Optional

from ..planarity._types import BackEdge, Forest, LowPoints

# DOT IDs that need no quoting; vertex IDs are ints and always fit
_PLAIN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*|-?[0-9]+")


def forest_to_dot(
    forest: Forest,
    low_points: Optional[LowPoints] = None,
    *,
    name: str = "forest",
    highlight: Optional[Iterable[BackEdge]] = None,
    highlight_color: str = "red",
) -> str:
    """
    Export a spanning forest to DOT format.

    Args:
        forest: Output of ``build_spanning_forest``
        low_points: Output of ``compute_low_points``, used as edge labels
        name: Name of the graph (default "forest")
        highlight: Back edges to draw in ``highlight_color``
        highlight_color: Color for highlighted back edges

    Returns:
        DOT format string representation of the forest
    """
    marked = set(highlight) if highlight is not None else set()
    lines = [f"digraph {_dot_string(name)} {{"]

    for v, node in forest.items():
        lines.append(f'  {v} [label="{v}\\ndepth={node.depth}"];')

    for v, node in forest.items():
        for c in node.tree_edges:
            attrs: dict[str, str] = {}
            if low_points is not None and c in low_points.get(v, {}):
                attrs["label"] = str(low_points[v][c])
            lines.append(_edge_line(v, c, attrs))

        for a in node.back_edges:
            attrs = {"style": "dashed"}
            if low_points is not None and a in low_points.get(v, {}):
                attrs["label"] = str(low_points[v][a])
            if (v, a) in marked:
                attrs["color"] = highlight_color
            lines.append(_edge_line(v, a, attrs))

    lines.append("}")
    return "\n".join(lines) + "\n"


def _dot_string(s: str) -> str:
    """Render a graph name or attribute value, quoting unless it is a plain word or number."""
    if _PLAIN.fullmatch(s):
        return s
    return '"' + s.replace("\\", "\\\\").replace('"', '\\"') + '"'


def _edge_line(tail: int, head: int, attrs: dict[str, str]) -> str:
    if not attrs:
        return f"  {tail} -> {head};"
    rendered = ", ".join(f"{key}={_dot_string(value)}" for key, value in attrs.items())
    return f"  {tail} -> {head} [{rendered}];"


__all__ = ["forest_to_dot"]
