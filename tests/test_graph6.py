"""Tests for the graph6 reader."""

from __future__ import annotations

import pytest

from fork_planarity import (
    complete_bipartite_graph,
    complete_graph,
    from_edges,
    is_planar,
    path_graph,
)
from fork_planarity.io import decode_size, encode_size, parse_graph6, read_graph6, to_graph6
from fork_planarity.validation import MalformedEncodingError


class TestDecodeSize:
    def test_single_byte(self) -> None:
        assert decode_size(b"D~{") == (5, 1)

    def test_zero(self) -> None:
        assert decode_size(b"?") == (0, 1)

    def test_largest_single_byte(self) -> None:
        assert decode_size(b"}") == (62, 1)

    def test_18_bit_form(self) -> None:
        assert decode_size(b"~??~") == (63, 4)

    def test_36_bit_form(self) -> None:
        assert decode_size(b"~~???~??") == (258048, 8)

    def test_encode_matches_decode(self) -> None:
        for n in (0, 62, 63, 1000, 258047, 258048, 1 << 30):
            data = encode_size(n)
            assert decode_size(data) == (n, len(data))

    def test_empty_raises(self) -> None:
        with pytest.raises(MalformedEncodingError, match="empty"):
            decode_size(b"")

    def test_invalid_first_byte_raises(self) -> None:
        with pytest.raises(MalformedEncodingError, match="Invalid size byte"):
            decode_size(b" ")

    def test_truncated_18_bit_raises(self) -> None:
        with pytest.raises(MalformedEncodingError, match="Not enough bytes"):
            decode_size(b"~?")

    def test_truncated_36_bit_raises(self) -> None:
        with pytest.raises(MalformedEncodingError, match="Not enough bytes"):
            decode_size(b"~~???")


class TestParseGraph6:
    def test_k5(self) -> None:
        assert parse_graph6("D~{") == complete_graph(5)

    def test_path(self) -> None:
        assert parse_graph6("DhC") == path_graph(5)

    def test_bytes_input(self) -> None:
        assert parse_graph6(b"D~{") == complete_graph(5)

    def test_header_and_newline(self) -> None:
        assert parse_graph6(">>graph6<<D~{\n") == complete_graph(5)

    def test_empty_graph(self) -> None:
        assert parse_graph6("?") == []

    def test_single_vertex(self) -> None:
        assert parse_graph6("@") == [[]]

    def test_truncated_data_raises(self) -> None:
        with pytest.raises(MalformedEncodingError, match="Expected 2 data bytes"):
            parse_graph6("D~")

    def test_invalid_data_byte_raises(self) -> None:
        with pytest.raises(MalformedEncodingError, match="outside 63..126"):
            parse_graph6("D ~")

    def test_decoded_graphs_feed_tester(self) -> None:
        assert not is_planar(parse_graph6("D~{"))
        assert is_planar(parse_graph6("DhC"))

    def test_neighbors_ascending_on_both_sides(self) -> None:
        # Star centered on 2: bits for pairs (0,2), (1,2), (2,3) set
        assert parse_graph6("CX") == [[2], [2], [0, 1, 3], [2]]

    def test_first_and_last_pair(self) -> None:
        graph = from_edges(70, [(0, 1), (68, 69)])
        encoded = to_graph6(graph)
        assert encoded.startswith("~")
        assert parse_graph6(encoded) == graph

    def test_large_sparse_graph(self) -> None:
        graph = path_graph(2000)
        assert parse_graph6(to_graph6(graph)) == graph


class TestToGraph6:
    def test_k5(self) -> None:
        assert to_graph6(complete_graph(5)) == "D~{"

    def test_path_with_header(self) -> None:
        assert to_graph6(path_graph(5), header=True) == ">>graph6<<DhC"

    def test_k33_survives_encoding(self) -> None:
        g = complete_bipartite_graph(3, 3)
        assert parse_graph6(to_graph6(g)) == g


class TestReadGraph6:
    def test_one_graph_per_line(self, tmp_path) -> None:
        path = tmp_path / "graphs.g6"
        path.write_text("D~{\nDhC\n\n")
        assert read_graph6(path) == [complete_graph(5), path_graph(5)]
