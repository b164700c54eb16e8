"""Logging setup shared by the picker script and the Streamlit app.

Both entry points call :func:`configure_logging` once at startup. The level
comes from the ``--debug`` flag, an explicit level name, or
``settings.LOG_LEVEL`` in that order.
"""
from __future__ import annotations

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)-5s [%(name)s] %(message)s"


def resolve_level(debug: bool = False, level: Optional[str] = None) -> int:
    """Map the CLI/app inputs to a numeric logging level.

    Unknown level names fall back to INFO rather than failing startup.
    """
    if debug:
        return logging.DEBUG
    if level is None:
        from config.settings import settings

        level = settings.LOG_LEVEL
    lvl = getattr(logging, str(level).upper(), None)
    return lvl if isinstance(lvl, int) else logging.INFO


def configure_logging(debug: bool = False, level: Optional[str] = None) -> None:
    """Configure root logging for the process.

    Args:
        debug: if True, set level to DEBUG.
        level: optional explicit level name (e.g. 'INFO', 'WARNING').
    """
    root = logging.getLogger()
    # Streamlit reruns the app script on every interaction
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(resolve_level(debug, level))
