"""CSV Graph Repository adapter.

This adapter reads the flight costs file and hands its rows to the
label graph builder, adding:
- Configuration injection (paths from config)
- Caching of the built graph
- Typed errors for unreadable files
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ...config import GraphConfig, get_config
from ...domain.errors import GraphIOError
from ...graph.label_builder import LabelGraph, LabelGraphBuilder


@dataclass
class CSVGraphRepository:
    """Graph repository that loads from a CSV file.

    This adapter implements GraphRepositoryPort.

    Attributes:
        config: Graph configuration (path, delimiter, header flag)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _graph: Optional[LabelGraph] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> LabelGraph:
        """Load the labelled graph from the costs CSV.

        The whole file is read before the builder runs, so an I/O
        failure never produces a partial graph.

        Returns:
            The digraph together with its vertex labels.

        Raises:
            GraphIOError: If the file cannot be opened or read.
            ParseError: If a row cannot be turned into edges.
        """
        if self._graph is not None:
            return self._graph

        path = self.config.costs_path
        self._logger.debug("Loading graph", extra={"costs_path": str(path)})

        rows = self._read_rows()
        graph = LabelGraphBuilder(has_header=self.config.has_header).build(rows)
        self._graph = graph
        self._logger.info(
            "Graph loaded",
            extra={
                "vertices": graph.graph.vertex_count,
                "edges": graph.graph.edge_count,
            },
        )
        return graph

    def _read_rows(self) -> List[List[str]]:
        """Read every row of the costs file, without quote handling."""
        path = self.config.costs_path
        try:
            with path.open(newline="", encoding=self.config.encoding) as f:
                reader = csv.reader(
                    f,
                    delimiter=self.config.delimiter,
                    quoting=csv.QUOTE_NONE,
                )
                return list(reader)
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise GraphIOError(
                f"Failed to read graph data {path}",
                file_path=str(path),
                cause=e,
            )

    def id_of(self, label: str) -> int:
        """Vertex id assigned to ``label``.

        Raises:
            LabelNotFoundError: If the label is not in the graph.
        """
        return self.load().labels.id_of(label)

    def label_of(self, vertex: int) -> str:
        """Label of vertex ``vertex``.

        Raises:
            InvalidArgumentError: If the id is out of range.
        """
        return self.load().labels.label_of(vertex)

    def clear_cache(self) -> None:
        """Clear the cached graph."""
        self._graph = None
        self._logger.debug("Graph cache cleared")
