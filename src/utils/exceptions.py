"""
Custom exceptions for the daily ET0 pipeline.

Fatal errors derive from PipelineError and abort the run. A failed push to
the telemetry sink is not an exception; it is reported as a PushOutcome.
"""

from typing import Iterable, Optional


class PipelineError(Exception):
    """Base exception for all pipeline-related errors."""

    def __init__(self, message: str, stage: Optional[str] = None):
        super().__init__(message)
        self.stage = stage

    def __str__(self) -> str:
        message = super().__str__()
        if self.stage:
            return f"[{self.stage}] {message}"
        return message


class ConfigurationError(PipelineError):
    """Raised when configuration or credentials are invalid or missing."""
    pass


class SourceFetchError(PipelineError):
    """Raised when the telemetry source request fails."""

    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        body: Optional[str] = None,
        stage: Optional[str] = None
    ):
        super().__init__(message, stage=stage)
        self.status = status
        self.body = body


class EmptySeriesError(PipelineError):
    """Raised when one or more channels have no usable samples for the day."""

    def __init__(self, channels: Iterable[str], stage: Optional[str] = None):
        self.channels = list(channels)
        super().__init__(
            f"No usable samples for channel(s): {', '.join(self.channels)}",
            stage=stage
        )


class LedgerWriteError(PipelineError):
    """Raised when appending the result row to the ledger fails."""
    pass
