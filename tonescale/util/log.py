"""Logging setup for tonescale."""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
ENV_LEVEL = "TONESCALE_LOG_LEVEL"


def setup_logging(level: Optional[str] = None) -> None:
    log_level = (level or os.environ.get(ENV_LEVEL) or "WARNING").upper()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(getattr(logging, log_level, logging.WARNING))


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


__all__ = ["setup_logging", "get_logger", "LOG_FORMAT"]
