"""Data models for the daily ET0 pipeline."""

from .data import (
    ChannelRole,
    PipelineStage,
    RawSample,
    RawSeries,
    ChannelStatistic,
    AggregationReport,
    DailyAggregate,
    Et0Result,
    PushOutcome,
    PipelineResult
)

__all__ = [
    "ChannelRole",
    "PipelineStage",
    "RawSample",
    "RawSeries",
    "ChannelStatistic",
    "AggregationReport",
    "DailyAggregate",
    "Et0Result",
    "PushOutcome",
    "PipelineResult"
]
