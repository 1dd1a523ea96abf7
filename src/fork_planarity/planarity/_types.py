"""Internal data structures for fork-path planarity testing."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

# Back edge identifier: (vertex, ancestor)
BackEdge = tuple[int, int]

Forest = dict[int, "TreeNode"]
LowPoints = dict[int, dict[int, int]]
ConstraintGraph = dict[BackEdge, "EdgeConstraints"]


@dataclass
class TreeNode:
    """A vertex of the DFS spanning forest.

    Attributes:
        parent: Parent vertex, or None for the root.
        tree_edges: Children reached through tree edges, in discovery order.
        back_edges: Ancestors reached through non-tree edges.
        depth: Distance from the root (root = 0).
    """

    parent: Optional[int]
    tree_edges: list[int] = field(default_factory=list)
    back_edges: list[int] = field(default_factory=list)
    depth: int = 0


@dataclass(frozen=True)
class Retraction:
    """Demotes ``child`` from ``owner``'s provisional tree edges.

    Emitted when the traversal reaches ``child`` through a different path
    than the one ``owner`` optimistically recorded, so the ``owner``-``child``
    edge is a back edge seen from ``child``'s side.
    """

    owner: int
    child: int


@dataclass
class ForkPath:
    """Back edges returning above a branching vertex through one outgoing edge."""

    edges: list[BackEdge]
    low_point: int


@dataclass
class EdgeConstraints:
    """Routing constraints of one back edge.

    Attributes:
        same: Back edges that must be drawn on the same side.
        opposite: Back edges that must be drawn on the other side.
    """

    same: set[BackEdge] = field(default_factory=set)
    opposite: set[BackEdge] = field(default_factory=set)


@dataclass
class SideAssignment:
    """Left/right placement of back edges produced by constraint resolution."""

    left: set[BackEdge] = field(default_factory=set)
    right: set[BackEdge] = field(default_factory=set)

    def conflicts(self) -> list[BackEdge]:
        """Back edges placed on both sides, sorted."""
        return sorted(self.left & self.right)


@dataclass
class PlanarityResult:
    """Result of a planarity test.

    Attributes:
        is_planar: Whether the graph is planar.
        conflicting_edges: Back edges (in the caller's vertex labels) that
            could not be assigned a consistent side. Empty when planar.
        num_components: Number of connected components tested.
    """

    is_planar: bool
    conflicting_edges: list[BackEdge] = field(default_factory=list)
    num_components: int = 0
