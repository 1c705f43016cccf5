"""Logging helpers for examprep."""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the examprep namespace."""
    if name.startswith("examprep"):
        return logging.getLogger(name)
    return logging.getLogger(f"examprep.{name}")


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """Send examprep logs to stderr at the given level.

    Safe to call more than once; the handler is installed only once.
    """
    root = logging.getLogger("examprep")
    root.setLevel(level.upper())

    if not any(getattr(h, "_examprep", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._examprep = True
        root.addHandler(handler)

    return root
