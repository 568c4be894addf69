"""Turn labelled cost rows into an edge-weighted digraph.

Each data row reads ``origin,destination,via,cost``. Labels in the first
three columns are given dense integer ids in first-seen order (row by
row, left to right), the digraph is sized to the number of distinct
labels, and every row then contributes exactly two edges:

1. ``destination -> origin`` with weight 0
2. ``origin -> via`` weighted by ``cost``
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Sequence, Tuple

from ..domain.errors import InvalidArgumentError, LabelNotFoundError, ParseError
from ..domain.models import DirectedEdge
from .digraph import DECIMAL_PATTERN, EdgeWeightedDigraph

LABEL_COLUMNS = 3
COST_COLUMN = 3
MIN_FIELDS = 4

Row = Sequence[str]


class VertexLabels:
    """Bijective mapping between labels and dense vertex ids."""

    __slots__ = ("_ids", "_labels")

    def __init__(self) -> None:
        self._ids: Dict[str, int] = {}
        self._labels: List[str] = []

    def assign(self, label: str) -> int:
        """Return the id of ``label``, giving it the next free id if new."""
        vertex = self._ids.get(label)
        if vertex is None:
            vertex = len(self._labels)
            self._ids[label] = vertex
            self._labels.append(label)
        return vertex

    def id_of(self, label: str) -> int:
        try:
            return self._ids[label]
        except KeyError:
            raise LabelNotFoundError(f"Unknown label: {label}", label=label)

    def label_of(self, vertex: int) -> str:
        if not 0 <= vertex < len(self._labels):
            raise InvalidArgumentError(
                f"vertex {vertex} is not between 0 and {len(self._labels) - 1}",
                vertex=vertex,
            )
        return self._labels[vertex]

    @property
    def labels(self) -> Tuple[str, ...]:
        """Labels indexed by vertex id."""
        return tuple(self._labels)

    def as_dict(self) -> Dict[str, int]:
        return dict(self._ids)

    def __len__(self) -> int:
        return len(self._labels)

    def __contains__(self, label: object) -> bool:
        return label in self._ids

    def __iter__(self) -> Iterator[str]:
        return iter(self._labels)


@dataclass(frozen=True)
class LabelGraph:
    """A built digraph together with the labels of its vertices."""

    graph: EdgeWeightedDigraph
    labels: VertexLabels


@dataclass
class LabelGraphBuilder:
    """Build a LabelGraph from raw rows.

    Attributes:
        has_header: Discard the first row before scanning.
    """

    has_header: bool = True
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def build(self, rows: Iterable[Row]) -> LabelGraph:
        """Assign vertex ids and emit two edges per data row.

        All rows are validated and every cost parsed before the graph
        is created, so a failing row leaves nothing half-built.

        Args:
            rows: Input rows, header first when ``has_header`` is set.

        Returns:
            The populated graph and its label mapping.

        Raises:
            ParseError: If a row is too short or its cost is not a
                finite number.
        """
        data = self._data_rows(rows)

        labels = VertexLabels()
        for _, row in data:
            for column in range(LABEL_COLUMNS):
                labels.assign(row[column])

        costs = [_parse_cost(row, row_number) for row_number, row in data]

        graph = EdgeWeightedDigraph(len(labels))
        for (_, row), cost in zip(data, costs):
            origin = labels.id_of(row[0])
            destination = labels.id_of(row[1])
            via = labels.id_of(row[2])
            graph.add_edge(DirectedEdge(destination, origin, 0.0))
            graph.add_edge(DirectedEdge(origin, via, cost))

        self._logger.debug(
            "Label graph built",
            extra={
                "rows": len(data),
                "vertices": graph.vertex_count,
                "edges": graph.edge_count,
            },
        )
        return LabelGraph(graph=graph, labels=labels)

    def _data_rows(self, rows: Iterable[Row]) -> List[Tuple[int, Row]]:
        """Number rows from 1, drop the header and blank lines, check widths."""
        data: List[Tuple[int, Row]] = []
        for row_number, row in enumerate(rows, start=1):
            if self.has_header and row_number == 1:
                continue
            if not any(cell.strip() for cell in row):
                continue
            if len(row) < MIN_FIELDS:
                raise ParseError(
                    f"Row {row_number} has {len(row)} fields, "
                    f"expected at least {MIN_FIELDS}",
                    row_number=row_number,
                    value=",".join(row),
                )
            data.append((row_number, row))
        return data


def _parse_cost(row: Row, row_number: int) -> float:
    raw = row[COST_COLUMN]
    if not DECIMAL_PATTERN.fullmatch(raw.strip()):
        raise ParseError(
            f"Row {row_number} has a non-numeric cost {raw!r}",
            row_number=row_number,
            value=raw,
        )
    cost = float(raw)
    if not math.isfinite(cost):
        raise ParseError(
            f"Row {row_number} has a non-finite cost {raw!r}",
            row_number=row_number,
            value=raw,
        )
    return cost


def build_label_graph(rows: Iterable[Row], has_header: bool = True) -> LabelGraph:
    """Shortcut for ``LabelGraphBuilder(has_header).build(rows)``."""
    return LabelGraphBuilder(has_header=has_header).build(rows)
