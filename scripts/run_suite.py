#!/usr/bin/env python3
"""
Check the planarity tester against a directory of labelled DIMACS files.

Files whose name starts with ``nonplanar`` are expected to be rejected, all
others accepted.

Usage:
    uv run python scripts/run_suite.py DIRECTORY [--pattern GLOB] [--one-based]

Examples:
    uv run python scripts/run_suite.py ../boost_graph/test/planar_input_graphs
    uv run python scripts/run_suite.py graphs/ --pattern "nonplanar_*" --verbose
"""

from __future__ import annotations

import argparse
import sys
import time
import warnings

from fork_planarity import GraphStructureWarning, run_suite


def main() -> int:
    parser = argparse.ArgumentParser(description="Run the planarity tester over DIMACS files")
    parser.add_argument("directory", help="Folder containing the input files")
    parser.add_argument("--pattern", default="*.dimacs", help="Glob selecting files (default: *.dimacs)")
    parser.add_argument("--one-based", action="store_true", help="Vertex labels in the files start at 1")
    parser.add_argument("--verbose", "-v", action="store_true", help="Print every file, not only mismatches")
    args = parser.parse_args()

    warnings.simplefilter("ignore", GraphStructureWarning)

    def on_result(name: str, expected: bool, actual: bool) -> None:
        if args.verbose or expected != actual:
            status = "ok  " if expected == actual else "FAIL"
            print(f"{status} {name}: planar={actual} (expected {expected})")

    start = time.perf_counter()
    report = run_suite(
        args.directory,
        pattern=args.pattern,
        index_base=1 if args.one_based else 0,
        on_result=on_result,
    )
    elapsed = time.perf_counter() - start

    print()
    print(f"Checked {report.total} files in {elapsed:.2f}s")
    print(f"  correct:   {report.correct}")
    print(f"  incorrect: {report.incorrect}")
    print(f"  accuracy:  {report.accuracy * 100:.2f}%")
    for name, message in report.errors:
        print(f"  unreadable: {name}: {message}")

    smallest = report.smallest_failure
    if smallest is not None:
        print(f"Smallest incorrect graph was {smallest.name} ({smallest.num_vertices} vertices)")

    return 0 if report.incorrect == 0 and not report.errors else 1


if __name__ == "__main__":
    sys.exit(main())
