"""Low-point computation over the DFS spanning forest."""

from __future__ import annotations

from ._types import Forest, LowPoints


def compute_low_points(forest: Forest, root: int = 0) -> LowPoints:
    """Compute the low point of every tree edge.

    The low point of tree edge ``(v, c)`` is the smallest depth reachable by a
    back edge from the subtree rooted at ``c``, or ``depth(v)`` when that
    subtree has no back edge. Back edge ``(v, a)`` additionally gets the entry
    ``low[v][a] = depth(a)``.

    Args:
        forest: Output of ``build_spanning_forest``.
        root: Vertex the traversal starts from.

    Returns:
        Mapping vertex -> {outgoing edge target -> low point depth}.
    """
    out: LowPoints = {}
    for v, node in forest.items():
        # A tree edge on no cycle has its own root as low point
        out[v] = {c: node.depth for c in node.tree_edges}

    if root not in forest:
        return out

    stack = [root]
    while stack:
        v = stack.pop()
        node = forest[v]

        for a in node.back_edges:
            depth = forest[a].depth
            out[v][a] = depth
            _climb(forest, out, v, a, depth)

        stack.extend(reversed(node.tree_edges))

    return out


def _climb(forest: Forest, low: LowPoints, start: int, ancestor: int, depth: int) -> None:
    """Lower every tree edge on the path ``start`` -> ``ancestor`` to ``depth``."""
    child = start
    while child != ancestor:
        parent = forest[child].parent
        assert parent is not None, f"{ancestor} is not an ancestor of {start}"
        low[parent][child] = min(low[parent][child], depth)
        child = parent
