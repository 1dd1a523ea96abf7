"""Tests for fluent graph construction."""

from fork_planarity import (
    GraphBuilder,
    complete_bipartite_graph,
    complete_graph,
    cycle_graph,
    path_graph,
)
from fork_planarity.validation import check_graph


class TestGraphBuilder:
    """Tests for GraphBuilder."""

    def test_chaining_returns_builder(self):
        builder = GraphBuilder(3)
        assert builder.add_edge(0, 1) is builder
        assert builder.add_path([1, 2]) is builder

    def test_vertex_range_grows(self):
        builder = GraphBuilder().add_edge(0, 4)
        assert builder.num_nodes == 5
        assert builder.build() == [[4], [], [], [], [0]]

    def test_add_vertex(self):
        builder = GraphBuilder(2)
        assert builder.add_vertex() == 2
        assert builder.build() == [[], [], []]

    def test_cycle_closes(self):
        graph = GraphBuilder(4).add_cycle(range(4)).build()
        assert graph == [[1, 3], [0, 2], [1, 3], [2, 0]]

    def test_two_vertex_cycle_is_an_edge(self):
        assert GraphBuilder(2).add_cycle([0, 1]).build() == [[1], [0]]

    def test_duplicate_edges_collapse(self):
        graph = GraphBuilder(3).add_cycle([0, 1, 2]).add_edge(1, 0).build()
        assert graph == [[1, 2], [0, 2], [1, 0]]

    def test_output_is_symmetric(self):
        graph = GraphBuilder(6).add_clique([0, 1, 2]).add_biclique([3], [4, 5]).add_edge(2, 3).build()
        check_graph(graph)


class TestGraphFamilies:
    """Tests for the standard graph constructors."""

    def test_path(self):
        assert path_graph(5) == [[1], [0, 2], [1, 3], [2, 4], [3]]

    def test_cycle(self):
        assert cycle_graph(3) == [[1, 2], [0, 2], [1, 0]]

    def test_complete(self):
        assert complete_graph(5) == [
            [1, 2, 3, 4],
            [0, 2, 3, 4],
            [0, 1, 3, 4],
            [0, 1, 2, 4],
            [0, 1, 2, 3],
        ]

    def test_complete_bipartite(self):
        assert complete_bipartite_graph(3, 3) == [
            [3, 4, 5],
            [3, 4, 5],
            [3, 4, 5],
            [0, 1, 2],
            [0, 1, 2],
            [0, 1, 2],
        ]

    def test_edge_counts(self):
        assert sum(len(n) for n in complete_graph(6)) // 2 == 15
        assert sum(len(n) for n in complete_bipartite_graph(2, 4)) // 2 == 8
