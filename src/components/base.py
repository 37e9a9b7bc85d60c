"""
Abstract base classes for pipeline components.

These define the interfaces that all pipeline components must implement,
ensuring consistency and enabling easy testing through dependency injection.
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import Any, Dict
from src.config import PipelineConfig
from src.models import (
    AggregationReport,
    ChannelRole,
    DailyAggregate,
    Et0Result,
    PushOutcome,
    RawSeries
)


class PipelineComponent(ABC):
    """Base class for all pipeline components."""

    def __init__(self, config: PipelineConfig):
        """Initialize component with pipeline configuration."""
        self.config = config

    @abstractmethod
    def execute(self, *args, **kwargs) -> Any:
        """Execute the component's main functionality."""
        pass


class IngestionComponent(PipelineComponent):
    """Abstract base for telemetry retrieval components."""

    @abstractmethod
    def execute(self, target_date: date) -> Dict[ChannelRole, RawSeries]:
        """
        Retrieve the raw hourly series of every channel for one day.

        Args:
            target_date: Calendar day (UTC) to retrieve

        Returns:
            Raw series keyed by channel role
        """
        pass


class AggregationComponent(PipelineComponent):
    """Abstract base for per-channel daily aggregation components."""

    @abstractmethod
    def execute(self, series_by_role: Dict[ChannelRole, RawSeries]) -> AggregationReport:
        """
        Reduce each channel's raw series to its daily statistic.

        Args:
            series_by_role: Raw series from ingestion

        Returns:
            Per-channel statistics and the channels that had no usable samples
        """
        pass


class ValidationComponent(PipelineComponent):
    """Abstract base for completeness validation components."""

    @abstractmethod
    def execute(self, report: AggregationReport) -> DailyAggregate:
        """
        Check that every formula input is present.

        Args:
            report: Aggregation report

        Returns:
            The four daily aggregates
        """
        pass


class CalculationComponent(PipelineComponent):
    """Abstract base for ET0 calculation components."""

    @abstractmethod
    def execute(self, aggregate: DailyAggregate, target_date: date) -> Et0Result:
        """
        Compute ET0 from the daily aggregates.

        Args:
            aggregate: Validated daily aggregates
            target_date: Day the aggregates describe

        Returns:
            Rounded diagnostics and ET0
        """
        pass


class LoadingComponent(PipelineComponent):
    """Abstract base for result ledger components."""

    @abstractmethod
    def execute(self, result: Et0Result) -> None:
        """
        Record the result in the system of record. Failures must raise.

        Args:
            result: Computed ET0 result
        """
        pass


class PublishingComponent(PipelineComponent):
    """Abstract base for best-effort result publishing components."""

    @abstractmethod
    def execute(self, result: Et0Result) -> PushOutcome:
        """
        Publish the ET0 value. Failures are returned, never raised.

        Args:
            result: Computed ET0 result

        Returns:
            Structured outcome of the publish attempt
        """
        pass
