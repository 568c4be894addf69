"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- CSVGraphRepository: Loads the labelled graph from a CSV file
"""

from .csv_repository import CSVGraphRepository

__all__ = ["CSVGraphRepository"]
