"""Logging configuration for command-line use.

Library modules only create loggers with ``logging.getLogger(__name__)``;
this module attaches a single console handler to the root logger using
the level and format from ObservabilityConfig.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from .config import ObservabilityConfig, get_config


def setup_logging(
    config: Optional[ObservabilityConfig] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Configure the root logger.

    Existing root handlers are removed first, so calling this twice
    still leaves exactly one handler.

    Args:
        config: Logging settings, defaults to ``get_config().observability``.
        stream: Output stream, defaults to ``sys.stderr``.
    """
    config = config or get_config().observability
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(config.format))
    root_logger.addHandler(handler)
