"""
Readers for graph file formats.

- graph6: compact ASCII encoding of the adjacency matrix
- DIMACS: plain-text edge list with a ``p edge`` header

Example usage:
    from fork_planarity import is_planar
    from fork_planarity.io import parse_graph6, read_dimacs

    is_planar(parse_graph6("D~{"))  # K5 -> False
    is_planar(read_dimacs("planar_graph.dimacs"))
"""

from .dimacs import parse_dimacs, read_dimacs, to_dimacs
from .graph6 import decode_size, encode_size, parse_graph6, read_graph6, to_graph6

__all__ = [
    # graph6
    "decode_size",
    "encode_size",
    "parse_graph6",
    "read_graph6",
    "to_graph6",
    # DIMACS
    "parse_dimacs",
    "read_dimacs",
    "to_dimacs",
]
