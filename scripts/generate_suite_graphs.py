#!/usr/bin/env python3
"""
Generate labelled DIMACS graphs for scripts/run_suite.py.

File names start with ``planar_`` or ``nonplanar_`` according to the known
planarity of each graph family. Every graph is also written with its vertices
shuffled, so a run checks that the verdict does not depend on labels.

Usage:
    uv run python scripts/generate_suite_graphs.py [--output DIR] [--seed N]
"""

from __future__ import annotations

import argparse
import random
from pathlib import Path
from typing import Callable

from fork_planarity import (
    GraphBuilder,
    complete_bipartite_graph,
    complete_graph,
    cycle_graph,
    from_edges,
    path_graph,
    to_edges,
)
from fork_planarity.io.dimacs import to_dimacs
from fork_planarity.preprocessing import Graph


def generate_grid(rows: int, cols: int) -> Graph:
    """rows x cols grid graph (planar)."""
    builder = GraphBuilder(rows * cols)
    for r in range(rows):
        builder.add_path(r * cols + c for c in range(cols))
    for c in range(cols):
        builder.add_path(r * cols + c for r in range(rows))
    return builder.build()


def generate_wheel(n: int) -> Graph:
    """Hub 0 joined to every vertex of the cycle 1..n (planar)."""
    return GraphBuilder(n + 1).add_cycle(range(1, n + 1)).add_biclique([0], range(1, n + 1)).build()


def generate_petersen() -> Graph:
    """Petersen graph (non-planar, 10 vertices, 15 edges)."""
    outer = [(i, (i + 1) % 5) for i in range(5)]
    inner = [(5 + i, 5 + (i + 2) % 5) for i in range(5)]
    spokes = [(i, i + 5) for i in range(5)]
    return from_edges(10, outer + inner + spokes)


def shuffle_labels(graph: Graph, rng: random.Random) -> Graph:
    """Relabel vertices by a random permutation."""
    perm = list(range(len(graph)))
    rng.shuffle(perm)
    edges = [(perm[u], perm[v]) for u, v in to_edges(graph)]
    rng.shuffle(edges)
    return from_edges(len(graph), edges)


SUITE: dict[str, Callable[[], Graph]] = {
    "planar_path_10": lambda: path_graph(10),
    "planar_cycle_12": lambda: cycle_graph(12),
    "planar_K_4": lambda: complete_graph(4),
    "planar_wheel_8": lambda: generate_wheel(8),
    "planar_grid_5x5": lambda: generate_grid(5, 5),
    "nonplanar_K_5": lambda: complete_graph(5),
    "nonplanar_K_6": lambda: complete_graph(6),
    "nonplanar_K_3_3": lambda: complete_bipartite_graph(3, 3),
    "nonplanar_petersen": generate_petersen,
}


def generate_suite(output_dir: Path, seed: int) -> None:
    output_dir.mkdir(parents=True, exist_ok=True)
    rng = random.Random(seed)

    print(f"Generating {len(SUITE)} graph families into {output_dir}\n")

    for name, make in SUITE.items():
        graph = make()
        (output_dir / f"{name}.dimacs").write_text(to_dimacs(graph, comment=name))
        shuffled = shuffle_labels(graph, rng)
        (output_dir / f"{name}_shuffled.dimacs").write_text(
            to_dimacs(shuffled, comment=f"{name}, shuffled (seed {seed})")
        )
        print(f"  {name}: {len(graph)} vertices, {len(to_edges(graph))} edges")


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate labelled DIMACS planarity inputs")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path(__file__).parent.parent / "benchmarks" / "graphs",
        help="Output directory (default: benchmarks/graphs)",
    )
    parser.add_argument("--seed", type=int, default=42, help="Seed for label shuffling")
    args = parser.parse_args()
    generate_suite(args.output, args.seed)


if __name__ == "__main__":
    main()
