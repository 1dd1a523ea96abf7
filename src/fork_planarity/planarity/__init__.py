"""Planarity testing by fork-path conflict resolution.

A DFS spanning tree is built from vertex 0, every non-tree edge becomes a back
edge to an ancestor, and each branching vertex contributes same-side and
opposite-side constraints between the back edges that return above it. The
graph is planar iff those constraints admit a consistent left/right split.

Public API:
    is_planar(graph) -> bool
    check_planarity(graph) -> PlanarityResult
"""

from __future__ import annotations

import warnings
from typing import Sequence

from ..preprocessing import connected_components, induced_subgraph
from ..validation import GraphStructureWarning, check_graph
from ._conflicts import build_constraint_graph, find_all_back_edges, fork_paths
from ._forest import apply_retractions, build_spanning_forest, record_traversal
from ._low_points import compute_low_points
from ._resolver import assign_sides, resolve_constraints
from ._types import (
    BackEdge,
    EdgeConstraints,
    ForkPath,
    PlanarityResult,
    Retraction,
    SideAssignment,
    TreeNode,
)


def is_planar(graph: Sequence[Sequence[int]]) -> bool:
    """Test whether a graph is planar.

    This is the simple boolean API. For the offending back edges of a
    non-planar graph, use ``check_planarity`` instead.

    Args:
        graph: For each vertex 0..n-1, the ordered list of its neighbors.
            Must be symmetric.

    Returns:
        True if the graph is planar, False otherwise.

    Raises:
        MalformedGraphError: If the adjacency list is not symmetric.
    """
    return check_planarity(graph).is_planar


def check_planarity(graph: Sequence[Sequence[int]]) -> PlanarityResult:
    """Test planarity and return detailed results.

    The traversal is rooted at vertex 0 and only reaches its connected
    component, so the graph is split into connected components first. Each
    component is relabeled in ascending vertex order (its smallest vertex
    becomes the root) and tested on its own; the graph is planar iff every
    component is.

    Args:
        graph: Symmetric adjacency list.

    Returns:
        PlanarityResult with is_planar flag and conflicting back edges.

    Raises:
        MalformedGraphError: If the adjacency list is not symmetric.
    """
    check_graph(graph)

    components = connected_components(graph)
    if len(components) > 1:
        warnings.warn(
            f"Graph has {len(components)} connected components; "
            "testing each component independently.",
            GraphStructureWarning,
            stacklevel=2,
        )

    conflicts: list[BackEdge] = []
    for comp in components:
        local = induced_subgraph(graph, comp)
        for v, a in _component_conflicts(local):
            conflicts.append((comp[v], comp[a]))

    return PlanarityResult(
        is_planar=not conflicts,
        conflicting_edges=sorted(conflicts),
        num_components=len(components),
    )


def _component_conflicts(graph: Sequence[Sequence[int]]) -> list[BackEdge]:
    """Run the pipeline on one connected graph rooted at vertex 0."""
    forest = build_spanning_forest(graph)
    low_points = compute_low_points(forest)
    constraints = build_constraint_graph(forest, low_points)
    return assign_sides(constraints).conflicts()


__all__ = [
    "is_planar",
    "check_planarity",
    "PlanarityResult",
    "TreeNode",
    "Retraction",
    "ForkPath",
    "EdgeConstraints",
    "SideAssignment",
    "BackEdge",
    "build_spanning_forest",
    "record_traversal",
    "apply_retractions",
    "compute_low_points",
    "build_constraint_graph",
    "find_all_back_edges",
    "fork_paths",
    "assign_sides",
    "resolve_constraints",
]
