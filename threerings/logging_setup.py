"""
Logging defaults for runners. Modules only call ``logging.getLogger(__name__)``;
the entry point decides how records are emitted.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_default_logging(level: int | str = "INFO") -> None:
    """Configure the root logger once. No-op if handlers already exist."""
    if isinstance(level, str):
        lvl = getattr(logging, level.upper(), logging.INFO)
    else:
        lvl = int(level)

    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(level=lvl, format=LOG_FORMAT)
