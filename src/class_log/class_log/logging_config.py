"""Logging setup for the class-log service."""
from __future__ import annotations

import logging
import os
import sys
from typing import Optional

SIMPLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DETAILED_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s"

LOG_LEVEL_ENV = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"


def setup_logging(level: Optional[str] = None) -> None:
    """Configure root logging once; level from the argument, LOG_LEVEL, or INFO."""
    level_name = (level or os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)).upper()
    log_level = getattr(logging, level_name, logging.INFO)

    fmt = DETAILED_FORMAT if log_level == logging.DEBUG else SIMPLE_FORMAT
    logging.basicConfig(level=log_level, format=fmt, stream=sys.stdout)

    # Werkzeug request lines are noisy at INFO.
    logging.getLogger("werkzeug").setLevel(max(log_level, logging.WARNING))
