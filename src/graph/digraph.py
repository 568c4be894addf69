"""Edge-weighted directed graph.

Vertices are the dense integers ``0..V-1``; the vertex count is fixed
when the graph is created and only edges are ever added afterwards.
Each vertex keeps its outgoing edges in insertion order, and an
indegree counter is maintained alongside so both degrees are O(1).

The graph can also be read from (and written to) the legacy
whitespace-delimited stream format::

    V E
    from to weight
    ...            (E lines)
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Sequence
from pathlib import Path
from typing import Iterator, List, TextIO, Union, overload

from ..domain.errors import GraphIOError, InvalidArgumentError
from ..domain.models import DirectedEdge

logger = logging.getLogger(__name__)

NEWLINE = "\n"

# Plain decimal tokens only: no digit separators, no nan/inf words.
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
DECIMAL_PATTERN = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


class EdgeView(Sequence):
    """Read-only view over one vertex's adjacency list.

    Iterating the view walks the underlying list lazily, and the view can
    be iterated any number of times.
    """

    __slots__ = ("_edges",)

    def __init__(self, edges: List[DirectedEdge]) -> None:
        self._edges = edges

    @overload
    def __getitem__(self, index: int) -> DirectedEdge: ...

    @overload
    def __getitem__(self, index: slice) -> List[DirectedEdge]: ...

    def __getitem__(self, index):
        return self._edges[index]

    def __len__(self) -> int:
        return len(self._edges)

    def __iter__(self) -> Iterator[DirectedEdge]:
        return iter(self._edges)

    def __repr__(self) -> str:
        return f"EdgeView({self._edges!r})"


class EdgeWeightedDigraph:
    """Directed graph with weighted edges over a fixed vertex set.

    Usage:
        graph = EdgeWeightedDigraph(3)
        graph.add_edge(DirectedEdge(0, 1, 2.5))
        for edge in graph.adjacent_edges(0):
            ...

    Raises:
        InvalidArgumentError: If ``vertex_count`` is negative.
    """

    def __init__(self, vertex_count: int) -> None:
        if isinstance(vertex_count, bool) or not isinstance(vertex_count, int):
            raise InvalidArgumentError(
                f"Number of vertices must be an integer, got {vertex_count!r}"
            )
        if vertex_count < 0:
            raise InvalidArgumentError(
                "Number of vertices in a digraph must be non-negative"
            )
        self._vertex_count = vertex_count
        self._edge_count = 0
        self._adj: List[List[DirectedEdge]] = [[] for _ in range(vertex_count)]
        self._indegree: List[int] = [0] * vertex_count

    # -----------------
    # CONSTRUCTORS
    # -----------------

    @classmethod
    def from_stream(cls, source: Union[str, TextIO]) -> EdgeWeightedDigraph:
        """Build a graph from the legacy ``V E (from to weight)*E`` format.

        Args:
            source: The stream text, or a text stream to read it from.

        Returns:
            A graph equal to ``EdgeWeightedDigraph(V)`` followed by E
            ``add_edge`` calls in stream order.

        Raises:
            InvalidArgumentError: If V or E is negative, an id is out of
                range, or the stream is truncated or mistyped.
        """
        text = source if isinstance(source, str) else source.read()
        tokens = iter(text.split())

        vertex_count = _next_int(tokens, "vertex count")
        if vertex_count < 0:
            raise InvalidArgumentError(
                "Number of vertices in a digraph must be non-negative"
            )
        graph = cls(vertex_count)

        edge_count = _next_int(tokens, "edge count")
        if edge_count < 0:
            raise InvalidArgumentError("Number of edges must be non-negative")

        for _ in range(edge_count):
            v = _next_int(tokens, "edge tail")
            w = _next_int(tokens, "edge head")
            graph._validate_vertex(v)
            graph._validate_vertex(w)
            weight = _next_weight(tokens)
            graph.add_edge(DirectedEdge(v, w, weight))

        if next(tokens, None) is not None:
            logger.debug(
                "Ignoring trailing tokens after edge list",
                extra={"edges": edge_count},
            )
        return graph

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> EdgeWeightedDigraph:
        """Read a legacy stream file from disk.

        Raises:
            GraphIOError: If the file cannot be opened or read.
            InvalidArgumentError: If its content is malformed.
        """
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise GraphIOError(
                f"Failed to read graph stream {path}",
                file_path=str(path),
                cause=e,
            )
        graph = cls.from_stream(text)
        logger.info(
            "Graph stream loaded",
            extra={
                "file_path": str(path),
                "vertices": graph.vertex_count,
                "edges": graph.edge_count,
            },
        )
        return graph

    # -----------------
    # QUERIES
    # -----------------

    @property
    def vertex_count(self) -> int:
        """Number of vertices, fixed at construction."""
        return self._vertex_count

    @property
    def edge_count(self) -> int:
        """Number of edges added so far."""
        return self._edge_count

    def _validate_vertex(self, v: int) -> None:
        if isinstance(v, bool) or not isinstance(v, int):
            raise InvalidArgumentError(f"vertex {v!r} is not an integer")
        if not 0 <= v < self._vertex_count:
            raise InvalidArgumentError(
                f"vertex {v} is not between 0 and {self._vertex_count - 1}",
                vertex=v,
            )

    def outdegree(self, v: int) -> int:
        """Number of edges leaving ``v``."""
        self._validate_vertex(v)
        return len(self._adj[v])

    def indegree(self, v: int) -> int:
        """Number of edges entering ``v``."""
        self._validate_vertex(v)
        return self._indegree[v]

    def adjacent_edges(self, v: int) -> EdgeView:
        """Edges leaving ``v``, in the order they were added."""
        self._validate_vertex(v)
        return EdgeView(self._adj[v])

    def all_edges(self) -> Iterator[DirectedEdge]:
        """Yield every edge once, sorted by ``(from, to, weight)``.

        Edges with identical endpoints and weight are reported a single
        time, even if they were added more than once.
        """
        unique = {edge for edges in self._adj for edge in edges}
        yield from sorted(unique)

    # -----------------
    # MUTATION
    # -----------------

    def add_edge(self, edge: DirectedEdge) -> None:
        """Add ``edge`` to the adjacency list of its tail.

        Both endpoints are checked before anything is touched, so a
        rejected edge leaves the graph unchanged.

        Raises:
            InvalidArgumentError: If an endpoint is outside ``[0, V)``.
        """
        self._validate_vertex(edge.from_vertex)
        self._validate_vertex(edge.to_vertex)
        self._adj[edge.from_vertex].append(edge)
        self._indegree[edge.to_vertex] += 1
        self._edge_count += 1

    # -----------------
    # OUTPUT
    # -----------------

    def render(self) -> str:
        """Diagnostic text: a ``V E`` header then one line per vertex."""
        lines = [f"{self._vertex_count} {self._edge_count}{NEWLINE}"]
        for v, edges in enumerate(self._adj):
            listed = "".join(f"{edge}  " for edge in edges)
            lines.append(f"{v}: {listed}{NEWLINE}")
        return "".join(lines)

    def write_stream(self) -> str:
        """Serialize to the legacy stream format.

        Vertices are written in id order and each adjacency list in
        insertion order, so ``from_stream`` rebuilds identical lists.
        """
        lines = [str(self._vertex_count), str(self._edge_count)]
        for edges in self._adj:
            for edge in edges:
                lines.append(
                    f"{edge.from_vertex} {edge.to_vertex} {edge.weight!r}"
                )
        return NEWLINE.join(lines) + NEWLINE

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"EdgeWeightedDigraph(vertices={self._vertex_count}, "
            f"edges={self._edge_count})"
        )


def _next_token(tokens: Iterator[str], what: str) -> str:
    token = next(tokens, None)
    if token is None:
        raise InvalidArgumentError(
            f"invalid input format: stream ended before {what}"
        )
    return token


def _next_int(tokens: Iterator[str], what: str) -> int:
    token = _next_token(tokens, what)
    if not INTEGER_PATTERN.fullmatch(token):
        raise InvalidArgumentError(
            f"invalid input format: expected integer {what}, got {token!r}"
        )
    return int(token)


def _next_weight(tokens: Iterator[str]) -> float:
    token = _next_token(tokens, "edge weight")
    if not DECIMAL_PATTERN.fullmatch(token):
        raise InvalidArgumentError(
            f"invalid input format: expected numeric weight, got {token!r}"
        )
    weight = float(token)
    if not math.isfinite(weight):
        raise InvalidArgumentError(
            f"invalid input format: weight must be finite, got {token!r}"
        )
    return weight
