"""Logging setup: module loggers rendered by rich on stderr.

stdout is reserved for report lines, so every handler installed here writes
to stderr.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

__all__ = ["configure_logging"]

_HANDLER_NAME = "cmpbench-rich"


def configure_logging(level: str = "WARNING") -> None:
    """Attach a single RichHandler to the `cmpbench` logger (idempotent)."""
    root = logging.getLogger("cmpbench")
    root.setLevel(level)

    if not any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        handler = RichHandler(console=Console(stderr=True), show_path=False, markup=False)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter("%(message)s"))
        root.addHandler(handler)

    # Prevent duplicate logs from root logger
    root.propagate = False
