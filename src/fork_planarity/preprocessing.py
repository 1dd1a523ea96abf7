"""
Graph preprocessing utilities.

This module provides functions for preparing adjacency lists before a
planarity query:
- Building adjacency lists from edge lists or dense matrices
- Cyclic relabeling of vertices
- Connected component detection and induced subgraphs

The planarity tester uses these internally but they can also be used
directly, e.g. to normalize input read from disk.
"""

from __future__ import annotations

from collections import deque
from typing import Any, Sequence

import numpy as np

from .validation import MalformedGraphError

Graph = list[list[int]]


# =============================================================================
# Construction
# =============================================================================


def from_edges(num_nodes: int, edges: Sequence[tuple[int, int]]) -> Graph:
    """
    Build a symmetric adjacency list from undirected edges.

    Self-loops and repeated edges are dropped, since the planarity tester
    expects a simple graph. Neighbor order follows edge order.

    Args:
        num_nodes: Number of vertices (labeled 0..num_nodes-1)
        edges: Sequence of (u, v) pairs

    Returns:
        Adjacency list with ``num_nodes`` entries

    Raises:
        MalformedGraphError: If an endpoint is out of range

    Example:
        >>> from_edges(3, [(0, 1), (1, 2), (2, 1)])
        [[1], [0, 2], [1]]
    """
    adj: Graph = [[] for _ in range(num_nodes)]
    seen: set[tuple[int, int]] = set()

    for u, v in edges:
        if u == v:
            continue
        if not (0 <= u < num_nodes and 0 <= v < num_nodes):
            raise MalformedGraphError(
                f"Edge ({u}, {v}) out of bounds [0, {num_nodes})", (u, v)
            )
        canon = (min(u, v), max(u, v))
        if canon in seen:
            continue
        seen.add(canon)
        adj[u].append(v)
        adj[v].append(u)

    return adj


def from_adjacency_matrix(matrix: Any) -> Graph:
    """
    Build an adjacency list from a square 0/1 (or boolean) matrix.

    Only the upper triangle is read, so an asymmetric matrix is treated as
    undirected. The diagonal is ignored. Neighbor lists are sorted.

    Args:
        matrix: Anything ``numpy.asarray`` accepts, of shape (n, n)

    Returns:
        Adjacency list with n entries
    """
    arr = np.asarray(matrix)
    if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
        raise ValueError(f"Adjacency matrix must be square, got shape {arr.shape}")

    upper = np.triu(arr != 0, k=1)
    sym = upper | upper.T
    return [np.flatnonzero(row).tolist() for row in sym]


def to_edges(graph: Sequence[Sequence[int]]) -> list[tuple[int, int]]:
    """List each undirected edge once as (u, v) with u < v."""
    return [(u, v) for u, neighbors in enumerate(graph) for v in neighbors if u < v]


# =============================================================================
# Relabeling
# =============================================================================


def rotate_graph(graph: Sequence[Sequence[int]], amount: int) -> Graph:
    """
    Cyclically relabel vertices: vertex ``v`` becomes ``(v + amount) mod n``.

    Neighbor order within each list is preserved.

    Args:
        graph: Adjacency list
        amount: Shift applied to every label (may be negative)

    Returns:
        The relabeled adjacency list

    Example:
        >>> rotate_graph([[1], [0, 2], [1]], 1)
        [[2], [2], [1, 0]]
    """
    n = len(graph)
    if n == 0:
        return []
    return [[(k + amount) % n for k in graph[(j - amount) % n]] for j in range(n)]


# =============================================================================
# Connected Components
# =============================================================================


def connected_components(graph: Sequence[Sequence[int]]) -> list[list[int]]:
    """
    Find connected components of an undirected adjacency list.

    Returns:
        List of components, each a sorted list of vertices. Components are
        ordered by their smallest vertex.

    Example:
        >>> connected_components([[1], [0], [], [4], [3]])
        [[0, 1], [2], [3, 4]]
    """
    n = len(graph)
    visited = [False] * n
    components: list[list[int]] = []

    for start in range(n):
        if visited[start]:
            continue

        # BFS to find all nodes in this component
        component: list[int] = []
        queue: deque[int] = deque([start])
        visited[start] = True

        while queue:
            node = queue.popleft()
            component.append(node)

            for neighbor in graph[node]:
                if not visited[neighbor]:
                    visited[neighbor] = True
                    queue.append(neighbor)

        components.append(sorted(component))

    return components


def induced_subgraph(graph: Sequence[Sequence[int]], vertices: Sequence[int]) -> Graph:
    """
    Extract the subgraph on ``vertices``, relabeled to 0..k-1.

    ``vertices[i]`` becomes vertex ``i``. Neighbor order is preserved and
    neighbors outside ``vertices`` are dropped.
    """
    local = {v: i for i, v in enumerate(vertices)}
    return [[local[w] for w in graph[v] if w in local] for v in vertices]


__all__ = [
    "Graph",
    "from_edges",
    "from_adjacency_matrix",
    "to_edges",
    "rotate_graph",
    "connected_components",
    "induced_subgraph",
]
