"""Logging configuration for mdtable.

Formatter diagnostics (such as an inconsistent column count) go through the
``mdtable`` logger hierarchy; set ``MDTABLE_LOGGING_DISABLED=true`` to leave
handler setup to the embedding application.

Adapted from CAMEL-AI (https://github.com/camel-ai/camel)
Copyright 2023-2026 @ CAMEL-AI.org. All Rights Reserved.
Licensed under the Apache License, Version 2.0
"""
from __future__ import annotations

import logging
import os
import sys

_logger = logging.getLogger("mdtable")


def _configure_library_logging() -> None:
    """Attach a stderr handler to the root mdtable logger once."""
    if _logger.handlers:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    _logger.addHandler(handler)
    _logger.setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a child logger of ``mdtable``.

    Args:
        name: Component name, e.g. ``"formatter"``.

    Returns:
        The logger named ``mdtable.{name}``.
    """
    return logging.getLogger(f"mdtable.{name}")


def set_log_level(level: str | int) -> None:
    """Set the logging level for mdtable and its handlers.

    Args:
        level: Logging level (e.g., 'DEBUG', 'INFO', logging.DEBUG).
    """
    if isinstance(level, str):
        level = level.upper()
    _logger.setLevel(level)
    for handler in _logger.handlers:
        handler.setLevel(level)


if os.environ.get("MDTABLE_LOGGING_DISABLED", "false").lower() != "true":
    _configure_library_logging()
