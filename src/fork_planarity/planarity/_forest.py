"""DFS spanning forest with tree/back-edge classification.

The traversal is iterative and resumes at the most recently deferred branch
vertex whenever it runs out of unvisited neighbors. A vertex records all of its
unvisited neighbors as provisional tree edges on first visit; some of those are
later discovered from a different path. Such edges are demoted through
``Retraction`` events, applied once the traversal is complete.
"""

from __future__ import annotations

from typing import Optional, Sequence

from ._types import Forest, Retraction, TreeNode


def build_spanning_forest(graph: Sequence[Sequence[int]]) -> Forest:
    """Build the spanning forest of the vertices reachable from vertex 0.

    Args:
        graph: Validated, symmetric adjacency list.

    Returns:
        Mapping from vertex to its TreeNode, in discovery order. Vertices not
        reachable from 0 are absent.
    """
    forest, retractions = record_traversal(graph)
    apply_retractions(forest, retractions)
    return forest


def record_traversal(
    graph: Sequence[Sequence[int]],
) -> tuple[Forest, list[Retraction]]:
    """Run the traversal, returning provisional nodes and pending retractions."""
    out: Forest = {}
    retractions: list[Retraction] = []
    if not graph:
        return out, retractions

    # Tree edges are consumed from the parent's side only
    remaining: list[list[int]] = [list(neighbors) for neighbors in graph]

    current = 0
    parent: Optional[int] = None
    depth = 0
    branches: list[int] = []

    while True:
        edges = remaining[current]
        tree_candidates = [w for w in edges if w not in out]
        back_candidates = [w for w in edges if w in out and w != parent]

        for target in back_candidates:
            retractions.append(Retraction(owner=target, child=current))

        if current not in out:
            out[current] = TreeNode(
                parent=parent,
                tree_edges=tree_candidates,
                back_edges=back_candidates,
                depth=depth,
            )

        if not tree_candidates:
            if not branches:
                break
            current = branches.pop()
            parent = out[current].parent
            depth = out[current].depth
        else:
            if len(tree_candidates) > 1:
                branches.append(current)

            child = tree_candidates[0]
            remaining[current] = [w for w in remaining[current] if w != child]

            parent = current
            current = child
            depth += 1

    return out, retractions


def apply_retractions(forest: Forest, retractions: Sequence[Retraction]) -> None:
    """Remove every retracted child from its owner's tree edges, in place."""
    for r in retractions:
        node = forest[r.owner]
        if r.child in node.tree_edges:
            node.tree_edges = [c for c in node.tree_edges if c != r.child]
