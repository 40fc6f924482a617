"""
Logging setup shared by the API server and the command line client.

Modules log through ``logging.getLogger(__name__)``; this only installs
the root handler and level once per process.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Install a single stream handler on the root logger."""
    root = logging.getLogger()

    resolved = getattr(logging, level.upper(), None)
    if not isinstance(resolved, int):
        resolved = logging.INFO

    root.setLevel(resolved)

    for handler in root.handlers:
        if getattr(handler, "_ipmap_handler", False):
            # stderr may have been swapped since the first call (test runners)
            handler.stream = sys.stderr
            return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._ipmap_handler = True  # type: ignore[attr-defined]
    root.addHandler(handler)
