"""Conflict pairs between the fork paths of branching vertices.

At a vertex with two or more outgoing edges, every outgoing edge defines a
fork path: the back edges that leave its subtree (or the back edge itself)
and return strictly above the vertex. Two fork paths interlace when back edges
of one return above the low point of the other; those back edges have to be
drawn on opposite sides of the tree path, while the interlacing edges of a
single fork path are bound to one side together.
"""

from __future__ import annotations

from typing import Optional, Sequence

from ._types import BackEdge, ConstraintGraph, EdgeConstraints, ForkPath, Forest, LowPoints


def build_constraint_graph(
    forest: Forest,
    low_points: LowPoints,
    root: int = 0,
) -> ConstraintGraph:
    """Derive same/opposite routing constraints between back edges.

    Args:
        forest: Output of ``build_spanning_forest``.
        low_points: Output of ``compute_low_points``.
        root: Vertex the traversal starts from.

    Returns:
        Mapping from every back edge of the forest to its constraints. Both
        relations are symmetric.
    """
    out: ConstraintGraph = {}
    for v, node in forest.items():
        for a in node.back_edges:
            out[(v, a)] = EdgeConstraints()

    if root not in forest:
        return out

    stack = [root]
    while stack:
        v = _skip_chain(forest, stack.pop())
        if v is None:
            continue

        forks = fork_paths(forest, low_points, v)
        for i in range(len(forks)):
            for j in range(i + 1, len(forks)):
                set1 = _returning_above(forest, forks[i], forks[j].low_point)
                set2 = _returning_above(forest, forks[j], forks[i].low_point)
                _group_sets(out, set1, set2)

        stack.extend(reversed(forest[v].tree_edges))

    return out


def _skip_chain(forest: Forest, v: int) -> Optional[int]:
    """Descend through vertices with a single outgoing tree edge.

    Returns the first vertex with zero or several outgoing edges, or None if
    the chain ends in a lone back edge.
    """
    node = forest[v]
    while len(node.tree_edges) + len(node.back_edges) == 1:
        if not node.tree_edges:
            return None
        v = node.tree_edges[0]
        node = forest[v]
    return v


def fork_paths(forest: Forest, low_points: LowPoints, v: int) -> list[ForkPath]:
    """Non-empty fork paths of ``v``: tree children first, then back edges."""
    node = forest[v]
    forks: list[ForkPath] = []

    for c in node.tree_edges:
        edges = [e for e in find_all_back_edges(forest, c) if forest[e[1]].depth < node.depth]
        forks.append(ForkPath(edges=edges, low_point=low_points[v][c]))

    for a in node.back_edges:
        forks.append(ForkPath(edges=[(v, a)], low_point=forest[a].depth))

    return [f for f in forks if f.edges]


def find_all_back_edges(forest: Forest, v: int) -> list[BackEdge]:
    """All back edges leaving the subtree rooted at ``v``, in pre-order."""
    out: list[BackEdge] = []
    stack = [v]
    while stack:
        u = stack.pop()
        node = forest[u]
        out.extend((u, a) for a in node.back_edges)
        stack.extend(reversed(node.tree_edges))
    return out


def _returning_above(forest: Forest, fork: ForkPath, low_point: int) -> list[BackEdge]:
    return [e for e in fork.edges if forest[e[1]].depth > low_point]


def _group_sets(
    constraints: ConstraintGraph,
    set1: Sequence[BackEdge],
    set2: Sequence[BackEdge],
) -> None:
    for e1 in set1:
        for e2 in set2:
            constraints[e1].opposite.add(e2)
            constraints[e2].opposite.add(e1)

    for group in (set1, set2):
        for e1 in group:
            for e2 in group:
                if e1 != e2:
                    constraints[e1].same.add(e2)
                    constraints[e2].same.add(e1)
