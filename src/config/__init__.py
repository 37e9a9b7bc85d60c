"""Configuration models for the daily ET0 pipeline."""

from .models import (
    PipelineConfig,
    PipelineInfo,
    ChannelMapping,
    TelemetrySettings,
    LedgerSettings,
    CalculationSettings,
    LoggingSettings,
    Credentials
)

__all__ = [
    "PipelineConfig",
    "PipelineInfo",
    "ChannelMapping",
    "TelemetrySettings",
    "LedgerSettings",
    "CalculationSettings",
    "LoggingSettings",
    "Credentials"
]
