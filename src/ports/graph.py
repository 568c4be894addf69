"""Graph ports - Abstractions for loading the flight cost graph.

These protocols define the contract between consumers of the graph
(path-finding, diagnostics) and the storage it is loaded from.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..graph.label_builder import LabelGraph


class GraphRepositoryPort(Protocol):
    """Port for loading graph data.

    Implementation: adapters/graph/csv_repository.py

    The repository is responsible for loading and caching the
    labelled graph from persistent storage.
    """

    def load(self) -> LabelGraph:
        """Load the labelled graph.

        Returns:
            The digraph together with its vertex labels.
        """
        ...

    def id_of(self, label: str) -> int:
        """Vertex id assigned to ``label``.

        Args:
            label: The label to look up (e.g., an airport code).

        Returns:
            The dense vertex id.
        """
        ...

    def label_of(self, vertex: int) -> str:
        """Label of vertex ``vertex``.

        Args:
            vertex: A vertex id in ``[0, V)``.

        Returns:
            The label that vertex was created for.
        """
        ...
