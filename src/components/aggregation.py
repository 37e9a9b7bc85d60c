"""
Daily aggregation component for the ET0 pipeline.

Reduces each channel's raw hourly series to the statistic the formula needs:
max and min for temperature, arithmetic mean for the other channels.
Null readings are dropped, never treated as zero.
"""

from typing import Dict
import pandas as pd

from src.components.base import AggregationComponent
from src.config import PipelineConfig
from src.models import AggregationReport, ChannelRole, ChannelStatistic, RawSeries
from src.utils import get_logger, EmptySeriesError


class DailyAggregationComponent(AggregationComponent):
    """Concrete implementation of the per-channel daily aggregator."""

    def __init__(self, config: PipelineConfig):
        """
        Initialize aggregation component.

        Args:
            config: Pipeline configuration
        """
        super().__init__(config)
        self.logger = get_logger(__name__)

        self.stats = {
            "channels_aggregated": 0,
            "channels_empty": 0,
            "values_used": 0,
            "values_dropped": 0
        }

    def execute(self, series_by_role: Dict[ChannelRole, RawSeries]) -> AggregationReport:
        """
        Aggregate every channel role.

        Every role is attempted so that all empty channels are reported
        together. A role absent from the input counts as empty.

        Args:
            series_by_role: Raw series keyed by role

        Returns:
            AggregationReport with statistics and empty channels
        """
        self.logger.info("Starting daily aggregation")
        statistics = {}
        empty_channels = []

        for role in ChannelRole:
            series = series_by_role.get(role)
            if series is None:
                series = RawSeries(role=role, channel_id=self.config.telemetry.channels.channel_for(role))
            try:
                statistics[role] = self.aggregate_series(series)
                self.stats["channels_aggregated"] += 1
            except EmptySeriesError:
                self.logger.warning(f"   {role.value}: no usable samples")
                self.stats["channels_empty"] += 1
                empty_channels.append(role)

        self.logger.info(
            f"Aggregation completed: {self.stats['channels_aggregated']} channels, "
            f"{self.stats['channels_empty']} empty"
        )
        return AggregationReport(statistics=statistics, empty_channels=empty_channels)

    def aggregate_series(self, series: RawSeries) -> ChannelStatistic:
        """
        Compute the daily statistic for a single channel.

        Args:
            series: Raw series of one channel

        Returns:
            ChannelStatistic for the channel's role

        Raises:
            EmptySeriesError: If no non-null value remains
        """
        values = pd.Series([sample.value for sample in series.samples], dtype="float64")
        present = values.dropna()
        self.stats["values_dropped"] += int(len(values) - len(present))

        if present.empty:
            raise EmptySeriesError([series.role.value])

        self.stats["values_used"] += int(len(present))

        if series.role == ChannelRole.TEMPERATURE:
            statistic = ChannelStatistic(
                role=series.role,
                sample_count=len(present),
                maximum=float(present.max()),
                minimum=float(present.min())
            )
            self.logger.info(
                f"   {series.role.value}: max={statistic.maximum} min={statistic.minimum} "
                f"({statistic.sample_count} values)"
            )
        else:
            statistic = ChannelStatistic(
                role=series.role,
                sample_count=len(present),
                mean=float(present.mean())
            )
            self.logger.info(
                f"   {series.role.value}: mean={statistic.mean} ({statistic.sample_count} values)"
            )
        return statistic
