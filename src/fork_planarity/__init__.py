"""
fork-planarity: planarity testing of undirected graphs in Python.

Decides whether a graph given as adjacency lists can be drawn in the plane
without edge crossings, by building a DFS spanning tree and checking that the
back edges returning above each branching vertex can be split consistently
between the two sides of the tree.

Available modules:
- planarity: the testing pipeline and its intermediate structures
- io: graph6 and DIMACS readers and writers
- preprocessing: adjacency construction, relabeling, components
- builder: fluent graph construction and standard graph families
- export: Mermaid and DOT rendering of spanning forests
- suite: batch checking against labelled DIMACS files
"""

__version__ = "0.1.0"

# Graph construction
from .builder import (
    GraphBuilder,
    complete_bipartite_graph,
    complete_graph,
    cycle_graph,
    path_graph,
)

# Readers and writers
from .io import parse_dimacs, parse_graph6, read_dimacs, read_graph6, to_graph6

# Planarity testing
from .planarity import PlanarityResult, check_planarity, is_planar

# Preprocessing utilities
from .preprocessing import (
    connected_components,
    from_adjacency_matrix,
    from_edges,
    induced_subgraph,
    rotate_graph,
    to_edges,
)

# Batch runs
from .suite import SuiteFailure, SuiteReport, run_suite

# Validation
from .validation import (
    GraphStructureWarning,
    MalformedEncodingError,
    MalformedGraphError,
    ValidationError,
    check_graph,
)

__all__ = [
    # Version
    "__version__",
    # Planarity
    "is_planar",
    "check_planarity",
    "PlanarityResult",
    # Construction
    "GraphBuilder",
    "path_graph",
    "cycle_graph",
    "complete_graph",
    "complete_bipartite_graph",
    # Preprocessing
    "from_edges",
    "from_adjacency_matrix",
    "to_edges",
    "rotate_graph",
    "connected_components",
    "induced_subgraph",
    # Readers and writers
    "parse_graph6",
    "read_graph6",
    "to_graph6",
    "parse_dimacs",
    "read_dimacs",
    # Batch runs
    "run_suite",
    "SuiteReport",
    "SuiteFailure",
    # Validation
    "ValidationError",
    "MalformedGraphError",
    "MalformedEncodingError",
    "GraphStructureWarning",
    "check_graph",
]
