"""
Export of DFS spanning forests for debugging.

- Mermaid: flowchart text for Markdown renderers
- DOT: Graphviz digraph

Example usage:
    from fork_planarity.planarity import build_spanning_forest, compute_low_points
    from fork_planarity.export import forest_to_mermaid

    forest = build_spanning_forest(graph)
    print(forest_to_mermaid(forest, compute_low_points(forest)))
"""

from .dot import forest_to_dot
from .mermaid import forest_to_mermaid

__all__ = [
    "forest_to_dot",
    "forest_to_mermaid",
]
