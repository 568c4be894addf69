"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    FlightGraphError,
    GraphIOError,
    InvalidArgumentError,
    LabelNotFoundError,
    ParseError,
)
from .models import DirectedEdge

__all__ = [
    # Models
    "DirectedEdge",
    # Errors
    "FlightGraphError",
    "InvalidArgumentError",
    "ParseError",
    "GraphIOError",
    "LabelNotFoundError",
]
