"""
Batch checking of the planarity tester against labelled DIMACS files.

A file is expected to be non-planar iff its name starts with ``nonplanar``
(the convention of the Boost Graph Library planarity test inputs). All
counters are local to a run and returned in a ``SuiteReport``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional, Sequence, Union

from .io.dimacs import read_dimacs
from .planarity import is_planar
from .validation import ValidationError

NONPLANAR_PREFIX = "nonplanar"


@dataclass
class SuiteFailure:
    """A file whose planarity verdict did not match its name."""

    name: str
    expected: bool
    actual: bool
    num_vertices: int


@dataclass
class SuiteReport:
    """Outcome of ``run_suite``.

    Attributes:
        correct: Files whose verdict matched the expectation.
        incorrect: Files whose verdict did not.
        failures: Details of each mismatch, in file order.
        errors: (file name, message) for files that could not be read.
    """

    correct: int = 0
    incorrect: int = 0
    failures: list[SuiteFailure] = field(default_factory=list)
    errors: list[tuple[str, str]] = field(default_factory=list)

    @property
    def total(self) -> int:
        return self.correct + self.incorrect

    @property
    def accuracy(self) -> float:
        """Fraction of checked files with a matching verdict (1.0 when empty)."""
        if self.total == 0:
            return 1.0
        return self.correct / self.total

    @property
    def smallest_failure(self) -> Optional[SuiteFailure]:
        """The mismatch with the fewest vertices (first one on ties)."""
        if not self.failures:
            return None
        return min(self.failures, key=lambda f: f.num_vertices)


def expected_planarity(name: str) -> bool:
    """Expected verdict for a file name."""
    return not name.startswith(NONPLANAR_PREFIX)


def run_suite(
    directory: Union[str, Path],
    *,
    pattern: str = "*.dimacs",
    index_base: int = 0,
    on_result: Optional[Callable[[str, bool, bool], None]] = None,
) -> SuiteReport:
    """
    Test every matching file in ``directory`` and tally the verdicts.

    Args:
        directory: Folder holding the input files
        pattern: Glob selecting files (default ``*.dimacs``)
        index_base: Vertex label base used by the files
        on_result: Optional callback(name, expected, actual) per checked file

    Returns:
        SuiteReport with counts, mismatches and unreadable files
    """
    paths = sorted(Path(directory).glob(pattern))
    return run_files(paths, index_base=index_base, on_result=on_result)


def run_files(
    paths: Sequence[Path],
    *,
    index_base: int = 0,
    on_result: Optional[Callable[[str, bool, bool], None]] = None,
) -> SuiteReport:
    """Like ``run_suite`` for an explicit list of files."""
    report = SuiteReport()

    for path in paths:
        try:
            graph = read_dimacs(path, index_base=index_base)
            actual = is_planar(graph)
        except ValidationError as e:
            report.errors.append((path.name, str(e)))
            continue

        expected = expected_planarity(path.name)
        if on_result is not None:
            on_result(path.name, expected, actual)

        if actual == expected:
            report.correct += 1
        else:
            report.incorrect += 1
            report.failures.append(
                SuiteFailure(
                    name=path.name,
                    expected=expected,
                    actual=actual,
                    num_vertices=len(graph),
                )
            )

    return report


__all__ = [
    "NONPLANAR_PREFIX",
    "SuiteFailure",
    "SuiteReport",
    "expected_planarity",
    "run_suite",
    "run_files",
]
