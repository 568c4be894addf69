"""Typed domain errors for the flight cost graph.

Every failure surfaced by the graph, the label builder or the CSV
repository is one of these types, so callers can tell a bad vertex id
apart from an unreadable file or a malformed cost cell.

All errors inherit from FlightGraphError and can optionally
wrap a root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class FlightGraphError(Exception):
    """Base error for the flight graph domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class InvalidArgumentError(FlightGraphError):
    """A vertex count, vertex id or stream token is not acceptable.

    Raised for negative vertex/edge counts, ids outside ``[0, V)`` and
    truncated or mistyped legacy streams.

    Attributes:
        vertex: The offending vertex id, when one is involved
    """

    vertex: Optional[int] = None


@dataclass
class ParseError(FlightGraphError):
    """A CSV row could not be turned into edges.

    Attributes:
        row_number: 1-based line number in the input (header included)
        value: The raw cell that failed to parse
    """

    row_number: int = 0
    value: str = ""


@dataclass
class GraphIOError(FlightGraphError):
    """The backing input could not be opened or read.

    Attributes:
        file_path: Path to the graph data file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class LabelNotFoundError(FlightGraphError):
    """Label not present in the loaded graph.

    Attributes:
        label: The label that was looked up
    """

    label: str = ""
