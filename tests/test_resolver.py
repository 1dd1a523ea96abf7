"""Tests for left/right resolution of back-edge constraints."""

from __future__ import annotations

from typing import Sequence

from fork_planarity.planarity import BackEdge, EdgeConstraints, assign_sides, resolve_constraints


def _graph(
    same: Sequence[tuple[BackEdge, BackEdge]] = (),
    opposite: Sequence[tuple[BackEdge, BackEdge]] = (),
    extra: Sequence[BackEdge] = (),
) -> dict[BackEdge, EdgeConstraints]:
    """Build a symmetric constraint graph from relation pairs."""
    out: dict[BackEdge, EdgeConstraints] = {}
    for e in extra:
        out.setdefault(e, EdgeConstraints())
    for a, b in same:
        out.setdefault(a, EdgeConstraints()).same.add(b)
        out.setdefault(b, EdgeConstraints()).same.add(a)
    for a, b in opposite:
        out.setdefault(a, EdgeConstraints()).opposite.add(b)
        out.setdefault(b, EdgeConstraints()).opposite.add(a)
    return out


A, B, C, D = (1, 0), (2, 0), (3, 1), (4, 2)


class TestResolveConstraints:
    def test_empty(self) -> None:
        assert resolve_constraints({})

    def test_unconstrained_edges(self) -> None:
        assert resolve_constraints(_graph(extra=[A, B]))

    def test_same_chain(self) -> None:
        assert resolve_constraints(_graph(same=[(A, B), (B, C)]))

    def test_opposite_pair(self) -> None:
        assert resolve_constraints(_graph(opposite=[(A, B)]))

    def test_even_opposite_cycle(self) -> None:
        assert resolve_constraints(_graph(opposite=[(A, B), (B, C), (C, D), (D, A)]))

    def test_odd_opposite_cycle(self) -> None:
        assert not resolve_constraints(_graph(opposite=[(A, B), (B, C), (C, A)]))

    def test_same_and_opposite_on_one_pair(self) -> None:
        assert not resolve_constraints(_graph(same=[(A, B)], opposite=[(A, B)]))

    def test_mixed_unbalanced_triangle(self) -> None:
        # A = B, B = C, C != A
        assert not resolve_constraints(_graph(same=[(A, B), (B, C)], opposite=[(C, A)]))


class TestAssignSides:
    def test_seed_goes_left(self) -> None:
        result = assign_sides(_graph(extra=[A]))
        assert result.left == {A}
        assert result.right == set()

    def test_opposite_goes_right(self) -> None:
        result = assign_sides(_graph(same=[(A, C)], opposite=[(A, B)]))
        assert result.left == {A, C}
        assert result.right == {B}
        assert result.conflicts() == []

    def test_separate_components_seeded_independently(self) -> None:
        result = assign_sides(_graph(opposite=[(A, B), (C, D)]))
        assert result.left == {A, C}
        assert result.right == {B, D}

    def test_conflicts_listed_sorted(self) -> None:
        result = assign_sides(_graph(opposite=[(A, B), (B, C), (C, A)], extra=[D]))
        assert result.conflicts() == [A, B, C]
        assert D in result.left and D not in result.right
