"""Logging setup for entry points.

Library modules only ever call ``logging.getLogger(__name__)``; handlers are
installed here, by the CLI, and never on import.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str | int = "WARNING") -> None:
    """Install a stderr handler on the root logger at *level*.

    Unknown level names fall back to ``WARNING``.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            resolved = logging.WARNING
    else:
        resolved = level
    logging.basicConfig(level=resolved, format=LOG_FORMAT, force=True)
