"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the graph core and the adapters
that feed it, so storage can be swapped in tests.
"""

from .graph import GraphRepositoryPort

__all__ = [
    "GraphRepositoryPort",
]
