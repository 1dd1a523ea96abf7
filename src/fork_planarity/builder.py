"""
GraphBuilder - fluent construction of adjacency lists.

Useful for assembling test graphs and standard families (paths, cycles,
complete and complete bipartite graphs) without writing adjacency lists by
hand. Neighbor order is insertion order, which fixes the traversal order of the
planarity tester.
"""

from __future__ import annotations

from typing import Iterable

from typing_extensions import Self

from .preprocessing import Graph, from_edges


class GraphBuilder:
    """
    Accumulates undirected edges and produces a symmetric adjacency list.

    Example:
        graph = (GraphBuilder(5)
            .add_path([0, 1, 2, 3, 4])
            .add_edge(4, 0)
            .build())
    """

    def __init__(self, num_nodes: int = 0) -> None:
        self._num_nodes = num_nodes
        self._edges: list[tuple[int, int]] = []

    @property
    def num_nodes(self) -> int:
        return self._num_nodes

    def add_vertex(self) -> int:
        """Add an isolated vertex and return its index."""
        self._num_nodes += 1
        return self._num_nodes - 1

    def add_edge(self, u: int, v: int) -> Self:
        """Add edge u-v, growing the vertex range if needed."""
        self._num_nodes = max(self._num_nodes, u + 1, v + 1)
        self._edges.append((u, v))
        return self

    def add_edges(self, edges: Iterable[tuple[int, int]]) -> Self:
        for u, v in edges:
            self.add_edge(u, v)
        return self

    def add_path(self, vertices: Iterable[int]) -> Self:
        """Connect consecutive vertices."""
        vs = list(vertices)
        return self.add_edges(zip(vs, vs[1:]))

    def add_cycle(self, vertices: Iterable[int]) -> Self:
        """Connect consecutive vertices and close the loop."""
        vs = list(vertices)
        self.add_path(vs)
        if len(vs) > 2:
            self.add_edge(vs[-1], vs[0])
        return self

    def add_clique(self, vertices: Iterable[int]) -> Self:
        vs = list(vertices)
        return self.add_edges((a, b) for i, a in enumerate(vs) for b in vs[i + 1 :])

    def add_biclique(self, left: Iterable[int], right: Iterable[int]) -> Self:
        rs = list(right)
        return self.add_edges((a, b) for a in left for b in rs)

    def build(self) -> Graph:
        """Return the adjacency list (self-loops and duplicates dropped)."""
        return from_edges(self._num_nodes, self._edges)


def path_graph(n: int) -> Graph:
    """P_n: path on n vertices."""
    return GraphBuilder(n).add_path(range(n)).build()


def cycle_graph(n: int) -> Graph:
    """C_n: cycle on n vertices."""
    return GraphBuilder(n).add_cycle(range(n)).build()


def complete_graph(n: int) -> Graph:
    """K_n."""
    return GraphBuilder(n).add_clique(range(n)).build()


def complete_bipartite_graph(a: int, b: int) -> Graph:
    """K_{a,b}, with vertices 0..a-1 on one side and a..a+b-1 on the other."""
    return GraphBuilder(a + b).add_biclique(range(a), range(a, a + b)).build()


__all__ = [
    "GraphBuilder",
    "path_graph",
    "cycle_graph",
    "complete_graph",
    "complete_bipartite_graph",
]
