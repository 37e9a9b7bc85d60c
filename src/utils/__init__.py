"""Utility modules for the daily ET0 pipeline."""

from .logging import setup_logging, get_logger
from .exceptions import (
    PipelineError,
    ConfigurationError,
    SourceFetchError,
    EmptySeriesError,
    LedgerWriteError
)
from .numeric import round2

__all__ = [
    "setup_logging",
    "get_logger",
    "PipelineError",
    "ConfigurationError",
    "SourceFetchError",
    "EmptySeriesError",
    "LedgerWriteError",
    "round2"
]
