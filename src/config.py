"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for all configuration:
where the flight costs file lives, how it is delimited, and how logs
are emitted.

Configuration can be overridden via environment variables:
- FCG_GRAPH_DATA_DIR=/path/to/data
- FCG_GRAPH_COSTS_FILE=FlightCosts.csv
- FCG_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Graph data configuration.

    Environment variables prefixed with FCG_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="FCG_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    costs_file: str = "FlightCostsSmall119.csv"
    delimiter: str = Field(default=",", min_length=1, max_length=1)
    has_header: bool = True
    encoding: str = "utf-8"

    @property
    def costs_path(self) -> Path:
        """Full path to the flight costs CSV file."""
        return self.data_dir / self.costs_file


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with FCG_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="FCG_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.graph.costs_path)

    Environment variables prefixed with FCG_.
    """

    model_config = SettingsConfigDict(env_prefix="FCG_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    @property
    def project_root(self) -> Path:
        """Return the project root directory."""
        return Path(__file__).resolve().parent.parent


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
