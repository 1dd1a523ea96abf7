"""
Mermaid export for DFS spanning forests.

Renders a forest as a Mermaid ``graph TD`` flowchart: solid arrows for tree
edges, dotted arrows for back edges, optionally labelled with low points.
Handy for inspecting why a graph was accepted or rejected.
"""

from __future__ import annotations

from typing import Optional

from ..planarity._types import Forest, LowPoints


def forest_to_mermaid(
    forest: Forest,
    low_points: Optional[LowPoints] = None,
    *,
    direction: str = "TD",
) -> str:
    """
    Export a spanning forest to a Mermaid flowchart.

    Args:
        forest: Output of ``build_spanning_forest``
        low_points: Output of ``compute_low_points``; when given, every edge
            with a low point entry is labelled with it
        direction: Mermaid flow direction (TD, LR, ...)

    Returns:
        Mermaid source text
    """
    lines = [f"graph {direction}"]

    for v, node in forest.items():
        lines.append(f'\t{v}["{v}<br/>depth={node.depth}"]')

        for c in node.tree_edges:
            label = _label(low_points, v, c)
            if label is not None:
                lines.append(f'\t{v} --"{label}"--> {c}')
            else:
                lines.append(f"\t{v} --> {c}")

        for a in node.back_edges:
            label = _label(low_points, v, a)
            if label is not None:
                lines.append(f'\t{v} -."{label}".-> {a}')
            else:
                lines.append(f"\t{v} -.-> {a}")

    return "\n".join(lines) + "\n"


def _label(low_points: Optional[LowPoints], v: int, w: int) -> Optional[int]:
    if low_points is None:
        return None
    return low_points.get(v, {}).get(w)


__all__ = ["forest_to_mermaid"]
