"""
Input validation for planarity testing.

Provides the exception hierarchy shared by the planarity pipeline and the
graph readers, plus the adjacency-list symmetry check that every query runs
before traversal.
"""

from __future__ import annotations

from typing import Sequence


class ValidationError(ValueError):
    """Base exception for planarity input errors."""

    pass


class MalformedGraphError(ValidationError):
    """Raised when an adjacency list is not a valid undirected graph.

    Attributes:
        edge: The offending directed pair ``(a, b)``: ``a`` lists ``b`` but
            ``b`` does not list ``a`` (or ``b`` is not a vertex at all).
    """

    def __init__(self, message: str, edge: tuple[int, int]) -> None:
        super().__init__(message)
        self.edge = edge


class MalformedEncodingError(ValidationError):
    """Raised when graph6 or DIMACS input cannot be decoded."""

    pass


class GraphStructureWarning(UserWarning):
    """Warning for graphs outside the traversal's preconditions."""

    pass


def check_graph(graph: Sequence[Sequence[int]]) -> None:
    """
    Verify that an adjacency list is symmetric.

    Args:
        graph: For each vertex, the ordered list of its neighbor indices

    Raises:
        MalformedGraphError: If some vertex ``a`` lists ``b`` while ``b`` does
            not list ``a``, ``b`` is out of range, or ``a`` lists itself
    """
    n = len(graph)
    for a, neighbors in enumerate(graph):
        for b in neighbors:
            if b < 0 or b >= n:
                raise MalformedGraphError(
                    f"invalid graph, edge {a}->{b} points outside [0, {n})",
                    (a, b),
                )
            if b == a:
                raise MalformedGraphError(f"invalid graph, self-loop at {a}", (a, a))
            if a not in graph[b]:
                raise MalformedGraphError(
                    f"invalid graph, edge {a}->{b} exists, but {b}->{a} does not",
                    (a, b),
                )


__all__ = [
    "ValidationError",
    "MalformedGraphError",
    "MalformedEncodingError",
    "GraphStructureWarning",
    "check_graph",
]
