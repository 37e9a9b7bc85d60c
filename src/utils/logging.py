"""
Logging configuration for the daily ET0 pipeline.

Timestamps are emitted in UTC so log lines line up with the UTC day being
processed.
"""

import logging
import sys
import time
from pathlib import Path
from typing import Optional, Union


LOG_FORMAT = '%(asctime)sZ - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%dT%H:%M:%S'


class UtcFormatter(logging.Formatter):
    """Formatter that renders %(asctime)s in UTC."""
    converter = time.gmtime


def setup_logging(
    level: Union[str, int] = "INFO",
    log_file: Optional[Path] = None
) -> None:
    """
    Configure root logging for a pipeline run.

    Args:
        level: Logging level name or number
        log_file: Optional file that receives a copy of every record
    """
    formatter = UtcFormatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    root = logging.getLogger()
    root.setLevel(level.upper() if isinstance(level, str) else level)
    root.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    # discovery cache warnings are noise for a single append call
    logging.getLogger("googleapiclient.discovery_cache").setLevel(logging.ERROR)


def get_logger(name: str) -> logging.Logger:
    """Logger for a pipeline module (pass ``__name__``)."""
    return logging.getLogger(name)
