from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging(*, level: str = "INFO") -> None:
    """Route allokator log records to stderr at the given level name."""
    # basicConfig leaves a root logger that already has handlers untouched
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
