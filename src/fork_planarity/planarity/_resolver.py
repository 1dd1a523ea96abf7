"""Two-sided assignment of back edges under same/opposite constraints."""

from __future__ import annotations

from typing import Iterator

from ._types import BackEdge, ConstraintGraph, SideAssignment

_LEFT = False
_RIGHT = True


def resolve_constraints(constraints: ConstraintGraph) -> bool:
    """Return True if the constraint graph admits a consistent left/right split."""
    return not assign_sides(constraints).conflicts()


def assign_sides(constraints: ConstraintGraph) -> SideAssignment:
    """Propagate side placements through the constraint graph.

    Every back edge not yet placed seeds a new component on the left. From an
    edge placed on one side, ``same`` neighbors follow it to that side and
    ``opposite`` neighbors go to the other one. Each (edge, side) placement
    happens at most once, so an inconsistent component ends up with some edge
    on both sides instead of looping. Propagation never stops early.
    """
    result = SideAssignment()

    for seed in constraints:
        if seed in result.left or seed in result.right:
            continue

        result.left.add(seed)
        stack: list[tuple[BackEdge, bool]] = [(seed, _LEFT)]

        while stack:
            edge, side = stack.pop()
            c = constraints[edge]
            for other, other_side in _placements(c.same, c.opposite, side):
                placed = result.right if other_side is _RIGHT else result.left
                if other not in placed:
                    placed.add(other)
                    stack.append((other, other_side))

    return result


def _placements(
    same: set[BackEdge],
    opposite: set[BackEdge],
    side: bool,
) -> Iterator[tuple[BackEdge, bool]]:
    for e in same:
        yield e, side
    for e in opposite:
        yield e, not side
