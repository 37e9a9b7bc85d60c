"""
Completeness validation component for the ET0 pipeline.

A day is only computed when all four formula inputs are present; any empty
channel fails the whole day rather than producing a degraded result.
"""

from src.components.base import ValidationComponent
from src.config import PipelineConfig
from src.models import AggregationReport, ChannelRole, DailyAggregate
from src.utils import get_logger, EmptySeriesError


class CompletenessValidationComponent(ValidationComponent):
    """Turns a complete aggregation report into the formula inputs."""

    def __init__(self, config: PipelineConfig):
        super().__init__(config)
        self.logger = get_logger(__name__)

    def execute(self, report: AggregationReport) -> DailyAggregate:
        """
        Enforce that every channel produced a statistic.

        Args:
            report: Aggregation report

        Returns:
            DailyAggregate for the day

        Raises:
            EmptySeriesError: Naming every channel without usable samples
        """
        if not report.complete:
            missing = list(report.empty_channels)
            missing += [role for role in ChannelRole if role not in report.statistics and role not in missing]
            names = [role.value for role in missing]
            self.logger.error(f"Completeness check failed, empty channels: {', '.join(names)}")
            raise EmptySeriesError(names)

        temperature = report.statistics[ChannelRole.TEMPERATURE]
        aggregate = DailyAggregate(
            t_max=temperature.maximum,
            t_min=temperature.minimum,
            humidity_mean=report.statistics[ChannelRole.HUMIDITY].mean,
            wind_mean=report.statistics[ChannelRole.WIND_SPEED].mean,
            radiation_mean=report.statistics[ChannelRole.SOLAR_RADIATION].mean
        )
        self.logger.info("Completeness check passed for all channels")
        return aggregate
