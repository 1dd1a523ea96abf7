"""Tests for spanning forest export."""

from __future__ import annotations

from fork_planarity import complete_graph, path_graph
from fork_planarity.export import forest_to_dot, forest_to_mermaid
from fork_planarity.planarity import build_spanning_forest, compute_low_points


class TestMermaid:
    def test_path(self) -> None:
        forest = build_spanning_forest(path_graph(3))
        assert forest_to_mermaid(forest) == (
            "graph TD\n"
            '\t0["0<br/>depth=0"]\n'
            "\t0 --> 1\n"
            '\t1["1<br/>depth=1"]\n'
            "\t1 --> 2\n"
            '\t2["2<br/>depth=2"]\n'
        )

    def test_back_edges_dotted(self) -> None:
        forest = build_spanning_forest(complete_graph(4))
        text = forest_to_mermaid(forest)
        assert "\t2 -.-> 0\n" in text
        assert "\t3 -.-> 1\n" in text

    def test_low_point_labels(self) -> None:
        forest = build_spanning_forest(complete_graph(4))
        text = forest_to_mermaid(forest, compute_low_points(forest))
        assert '\t2 --"0"--> 3\n' in text
        assert '\t3 -."1".-> 1\n' in text

    def test_direction(self) -> None:
        forest = build_spanning_forest([[]])
        assert forest_to_mermaid(forest, direction="LR").startswith("graph LR\n")


class TestDot:
    def test_structure(self) -> None:
        forest = build_spanning_forest(complete_graph(4))
        dot = forest_to_dot(forest)
        assert dot.startswith("digraph forest {\n")
        assert dot.endswith("}\n")
        assert '  0 [label="0\\ndepth=0"];' in dot
        assert "  0 -> 1;" in dot
        assert "  3 -> 1 [style=dashed];" in dot

    def test_labels_and_highlight(self) -> None:
        forest = build_spanning_forest(complete_graph(5))
        dot = forest_to_dot(forest, compute_low_points(forest), highlight=[(4, 2)])
        assert "  0 -> 1 [label=0];" in dot
        assert "  4 -> 2 [style=dashed, label=2, color=red];" in dot
        assert "  4 -> 1 [style=dashed, label=1];" in dot

    def test_name_quoted(self) -> None:
        dot = forest_to_dot({}, name="my forest")
        assert dot.startswith('digraph "my forest" {')

    def test_name_escaped(self) -> None:
        dot = forest_to_dot({}, name='say "hi"')
        assert dot.startswith('digraph "say \\"hi\\"" {')

    def test_empty_name_quoted(self) -> None:
        assert forest_to_dot({}, name="").startswith('digraph "" {')

    def test_hex_color_quoted(self) -> None:
        forest = build_spanning_forest(complete_graph(4))
        dot = forest_to_dot(forest, highlight=[(3, 1)], highlight_color="#ff0000")
        assert '  3 -> 1 [style=dashed, color="#ff0000"];' in dot
