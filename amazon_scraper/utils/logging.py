from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import List

_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def setup_logging(level: str | int | None = None, log_file: str | None = None) -> None:
    """
    Configure application logging once per process.

    Level falls back to AMAZON_SCRAPER_LOG_LEVEL, then INFO. Log lines go to
    stderr so CLI output on stdout stays machine-readable; when a log file is
    given (or AMAZON_SCRAPER_LOG_FILE is set) they are written there as well.
    """
    if level is None:
        level = os.getenv("AMAZON_SCRAPER_LOG_LEVEL", "INFO")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    log_file = log_file or os.getenv("AMAZON_SCRAPER_LOG_FILE")
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(level=level, format=_FORMAT, handlers=handlers)
