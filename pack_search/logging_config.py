from __future__ import annotations

import logging
import os
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Send pack_search logs to stderr, keeping stdout for CLI output.

    Level comes from *level*, then $LOG_LEVEL, then INFO. Calling it again
    replaces the handler instead of stacking a second one.
    """
    name = (level or os.getenv("LOG_LEVEL") or "INFO").upper()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    pkg = logging.getLogger("pack_search")
    for old in list(pkg.handlers):
        pkg.removeHandler(old)
    pkg.addHandler(handler)
    pkg.setLevel(name)
    pkg.propagate = False

    logging.getLogger("urllib3").setLevel(logging.WARNING)
