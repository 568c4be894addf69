"""
Command-line interface for the flight cost graph.

Loads a graph and prints its diagnostic rendering.

Usage:
    flight-graph csv [PATH]      # Build from a flight costs CSV
    flight-graph csv --labels    # Also print the label -> id table
    flight-graph stream PATH     # Parse a legacy "V E edges..." file
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import click

from src.adapters.graph import CSVGraphRepository
from src.config import get_config, reset_config
from src.domain.errors import FlightGraphError
from src.graph.digraph import EdgeWeightedDigraph
from src.logging_setup import setup_logging
from src.ports.graph import GraphRepositoryPort


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool) -> None:
    """Flight cost graph - build and inspect edge-weighted digraphs."""
    if debug:
        os.environ["FCG_LOG_LEVEL"] = "DEBUG"
        reset_config()

    setup_logging()


@main.command("csv")
@click.argument(
    "path",
    required=False,
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option("--delimiter", default=None, help="Field delimiter (default from config)")
@click.option("--no-header", is_flag=True, help="Treat the first row as data")
@click.option("--labels", "show_labels", is_flag=True, help="Print the label table")
def csv_command(
    path: Optional[Path],
    delimiter: Optional[str],
    no_header: bool,
    show_labels: bool,
) -> None:
    """Build the graph from a flight costs CSV and print it."""
    config = get_config()
    updates: dict = {}
    if path is not None:
        updates["data_dir"] = path.parent
        updates["costs_file"] = path.name
    if delimiter:
        updates["delimiter"] = delimiter
    if no_header:
        updates["has_header"] = False
    if updates:
        config = config.model_copy(
            update={"graph": config.graph.model_copy(update=updates)}
        )

    repository: GraphRepositoryPort = CSVGraphRepository(config.graph)
    try:
        loaded = repository.load()
    except FlightGraphError as e:
        raise click.ClickException(str(e))

    click.echo(loaded.graph.render(), nl=False)
    if show_labels:
        click.echo()
        for vertex, label in enumerate(loaded.labels):
            click.echo(f"{vertex}\t{label}")


@main.command("stream")
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path))
def stream_command(path: Path) -> None:
    """Parse a legacy stream file and print the graph."""
    try:
        graph = EdgeWeightedDigraph.from_file(path)
    except FlightGraphError as e:
        raise click.ClickException(str(e))

    click.echo(graph.render(), nl=False)


if __name__ == "__main__":
    main()
