"""
DIMACS edge-list reader.

Format::

    c optional comment lines
    p edge <num_vertices> <num_edges>
    e <u> <v>
    e <u> <v>
    ...

Only the first ``p`` line and the ``e`` lines are read; everything else is
ignored. The declared edge count is informational and not enforced.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Sequence, Union

from ..preprocessing import Graph, rotate_graph, to_edges
from ..validation import MalformedEncodingError


def parse_dimacs(
    text: str,
    *,
    index_base: int = 0,
    drop_leading_isolated: bool = True,
) -> Graph:
    """
    Parse a DIMACS edge list into an adjacency list.

    Self-loop lines (``e v v``) are skipped.

    Args:
        text: File contents
        index_base: Label of the first vertex in the file (0 or 1)
        drop_leading_isolated: While vertex 0 has no incident edge, rotate it
            to the end and remove it, so the planarity traversal starts on an
            edge

    Returns:
        Adjacency list; neighbor order follows edge order in the file

    Raises:
        MalformedEncodingError: If the header is missing or invalid, or an
            edge line is malformed or out of range
    """
    header: list[str] = []
    edge_lines: list[tuple[int, list[str]]] = []

    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line:
            continue
        fields = line.split()
        if fields[0] == "p" and not header:
            header = fields
        elif fields[0] == "e":
            edge_lines.append((lineno, fields))

    if len(header) < 3:
        raise MalformedEncodingError("Missing 'p edge <vertices> <edges>' header line.")
    try:
        num_vertices = int(header[2])
    except ValueError:
        raise MalformedEncodingError(f"Invalid vertex count {header[2]!r} in header.") from None

    out: Graph = [[] for _ in range(num_vertices)]
    for lineno, fields in edge_lines:
        if len(fields) < 3:
            raise MalformedEncodingError(f"Line {lineno}: expected 'e <u> <v>'.")
        try:
            u = int(fields[1]) - index_base
            v = int(fields[2]) - index_base
        except ValueError:
            raise MalformedEncodingError(f"Line {lineno}: endpoints must be integers.") from None
        if not (0 <= u < num_vertices and 0 <= v < num_vertices):
            raise MalformedEncodingError(
                f"Line {lineno}: edge ({fields[1]}, {fields[2]}) out of range "
                f"for {num_vertices} vertices."
            )
        if u == v:
            continue
        out[u].append(v)
        out[v].append(u)

    if drop_leading_isolated:
        while out and not out[0]:
            out = rotate_graph(out, -1)
            out.pop()

    return out


def to_dimacs(graph: Sequence[Sequence[int]], *, comment: Optional[str] = None) -> str:
    """Write an adjacency list as a 0-based DIMACS edge list."""
    edges = to_edges(graph)
    lines = [f"c {comment}"] if comment else []
    lines.append(f"p edge {len(graph)} {len(edges)}")
    lines.extend(f"e {u} {v}" for u, v in edges)
    return "\n".join(lines) + "\n"


def read_dimacs(path: Union[str, Path], **kwargs: Any) -> Graph:
    """Read a DIMACS file; keyword arguments are passed to ``parse_dimacs``."""
    return parse_dimacs(Path(path).read_text(), **kwargs)


__all__ = ["parse_dimacs", "read_dimacs", "to_dimacs"]
