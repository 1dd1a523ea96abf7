"""
graph6 reader and writer.

graph6 stores an undirected graph as printable ASCII: a vertex count followed
by the upper triangle of the adjacency matrix, six bits per byte (each byte is
the 6-bit value plus 63), most significant bit first. Bit ``k`` belongs to the
k-th pair ``(x, y)``, ``0 <= x < y < n``, enumerated with ``y`` as the outer
index and ``x`` as the inner one.

Vertex count forms:
    - ``n <= 62``: one byte ``n + 63``
    - ``n <= 258047``: ``~`` followed by three bytes (18 bits)
    - larger: ``~~`` followed by six bytes (36 bits)
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence, Union

import numpy as np

from ..preprocessing import Graph
from ..validation import MalformedEncodingError

HEADER = b">>graph6<<"

_BIAS = 63
_MARKER = 126
_SMALL_MAX = 62
_MEDIUM_MAX = 258047


def decode_size(data: bytes) -> tuple[int, int]:
    """
    Decode the vertex count at the start of a graph6 string.

    Args:
        data: Raw graph6 bytes (header already removed)

    Returns:
        Tuple of (vertex count, bytes consumed)

    Raises:
        MalformedEncodingError: If the input is empty, truncated, or does not
            start with a valid size byte
    """
    if not data:
        raise MalformedEncodingError("Input is empty.")

    first = data[0]
    if _BIAS <= first < _MARKER:
        return first - _BIAS, 1

    if first != _MARKER:
        raise MalformedEncodingError(f"Invalid size byte {first}.")

    if len(data) > 1 and data[1] == _MARKER:
        return _unpack(data[2:8], 6, "~~"), 8

    return _unpack(data[1:4], 3, "~"), 4


def _unpack(chunk: bytes, width: int, form: str) -> int:
    if len(chunk) < width:
        raise MalformedEncodingError(f"Not enough bytes for {form} size encoding.")
    value = 0
    for b in chunk:
        if not _BIAS <= b <= _MARKER:
            raise MalformedEncodingError(f"Invalid byte {b} in {form} size encoding.")
        value = (value << 6) | (b - _BIAS)
    return value


def encode_size(n: int) -> bytes:
    """Encode a vertex count in the shortest graph6 form."""
    if n < 0:
        raise ValueError(f"Vertex count must be non-negative, got {n}")
    if n <= _SMALL_MAX:
        return bytes([n + _BIAS])
    if n <= _MEDIUM_MAX:
        return bytes([_MARKER] + [((n >> s) & 0x3F) + _BIAS for s in (12, 6, 0)])
    return bytes([_MARKER, _MARKER] + [((n >> s) & 0x3F) + _BIAS for s in (30, 24, 18, 12, 6, 0)])


def parse_graph6(text: Union[str, bytes]) -> Graph:
    """
    Decode one graph6 string into an adjacency list.

    An optional ``>>graph6<<`` header and surrounding whitespace are ignored.
    Neighbor lists come out in ascending order.

    Raises:
        MalformedEncodingError: If the size is invalid or the edge data is
            truncated or contains bytes outside 63..126
    """
    data = text.encode("ascii") if isinstance(text, str) else bytes(text)
    data = data.strip()
    if data.startswith(HEADER):
        data = data[len(HEADER) :]

    n, offset = decode_size(data)
    body = np.frombuffer(data[offset:], dtype=np.uint8)

    num_bits = n * (n - 1) // 2
    num_bytes = -(-num_bits // 6)
    if len(body) < num_bytes:
        raise MalformedEncodingError(
            f"Expected {num_bytes} data bytes for {n} vertices, got {len(body)}."
        )
    if np.any((body < _BIAS) | (body > _MARKER)):
        raise MalformedEncodingError("Edge data contains bytes outside 63..126.")

    values = (body[:num_bytes] - _BIAS).astype(np.uint8)
    bits = np.unpackbits(values[:, None], axis=1)[:, 2:].ravel()[:num_bits]

    # Pair k = (x, y) with y(y-1)/2 <= k < y(y+1)/2 and x = k - y(y-1)/2
    ks = np.flatnonzero(bits)
    starts = np.arange(n, dtype=np.int64) * (np.arange(n, dtype=np.int64) - 1) // 2
    ys = np.searchsorted(starts, ks, side="right") - 1
    xs = ks - starts[ys]

    # Pairs arrive sorted by y then x, so every list is filled in ascending order
    out: Graph = [[] for _ in range(n)]
    for x, y in zip(xs.tolist(), ys.tolist()):
        out[x].append(y)
        out[y].append(x)
    return out


def to_graph6(graph: Sequence[Sequence[int]], *, header: bool = False) -> str:
    """Encode an adjacency list as a graph6 string."""
    n = len(graph)
    num_bits = n * (n - 1) // 2
    bits = np.zeros(num_bits + (-num_bits % 6), dtype=np.uint8)
    for x, neighbors in enumerate(graph):
        for y in neighbors:
            if x < y:
                bits[y * (y - 1) // 2 + x] = 1

    values = bits.reshape(-1, 6) @ (1 << np.arange(5, -1, -1))

    body = bytes((values + _BIAS).astype(np.uint8).tolist())
    out = encode_size(n) + body
    if header:
        out = HEADER + out
    return out.decode("ascii")


def read_graph6(path: Union[str, Path]) -> list[Graph]:
    """Read a graph6 file with one graph per non-empty line."""
    graphs: list[Graph] = []
    with open(path, "rb") as f:
        for line in f:
            line = line.strip()
            if line:
                graphs.append(parse_graph6(line))
    return graphs


__all__ = [
    "HEADER",
    "decode_size",
    "encode_size",
    "parse_graph6",
    "to_graph6",
    "read_graph6",
]
