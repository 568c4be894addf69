"""Immutable domain models for the flight cost graph.

All models are frozen dataclasses with slots for memory efficiency.
These models have no external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class DirectedEdge:
    """A weighted arc between two vertices.

    Edges compare and sort lexicographically by
    ``(from_vertex, to_vertex, weight)``. Endpoints are not range checked
    here; the digraph does that when the edge is added.

    Attributes:
        from_vertex: Tail vertex id
        to_vertex: Head vertex id
        weight: Arc weight, zero and negative values allowed
    """

    from_vertex: int
    to_vertex: int
    weight: float

    def __str__(self) -> str:
        return f"{self.from_vertex}->{self.to_vertex} {self.weight:5.2f}"
