"""Tests for the completeness validation component."""

import pytest

from src.components.validation import CompletenessValidationComponent
from src.models import AggregationReport, ChannelRole, ChannelStatistic, DailyAggregate
from src.utils.exceptions import EmptySeriesError


@pytest.fixture
def complete_report():
    return AggregationReport(
        statistics={
            ChannelRole.TEMPERATURE: ChannelStatistic(
                role=ChannelRole.TEMPERATURE, sample_count=24, maximum=30.0, minimum=20.0
            ),
            ChannelRole.HUMIDITY: ChannelStatistic(role=ChannelRole.HUMIDITY, sample_count=24, mean=60.0),
            ChannelRole.WIND_SPEED: ChannelStatistic(role=ChannelRole.WIND_SPEED, sample_count=24, mean=10.8),
            ChannelRole.SOLAR_RADIATION: ChannelStatistic(
                role=ChannelRole.SOLAR_RADIATION, sample_count=24, mean=208.33
            )
        }
    )


class TestCompletenessValidationComponent:
    """Test suite for CompletenessValidationComponent."""

    def test_complete_report_builds_aggregate(self, sample_config, complete_report):
        """Test a complete report maps onto the formula inputs."""
        component = CompletenessValidationComponent(sample_config)

        aggregate = component.execute(complete_report)

        assert aggregate == DailyAggregate(
            t_max=30.0, t_min=20.0, humidity_mean=60.0, wind_mean=10.8, radiation_mean=208.33
        )

    def test_empty_channels_fail(self, sample_config, complete_report):
        """Test reported empty channels are named in the error."""
        statistics = dict(complete_report.statistics)
        del statistics[ChannelRole.HUMIDITY]
        report = AggregationReport(statistics=statistics, empty_channels=[ChannelRole.HUMIDITY])
        component = CompletenessValidationComponent(sample_config)

        with pytest.raises(EmptySeriesError) as exc_info:
            component.execute(report)

        assert exc_info.value.channels == ["humidity"]
        assert "humidity" in str(exc_info.value)

    def test_missing_statistic_fails(self, sample_config):
        """Test an incomplete report without explicit empty channels still fails."""
        report = AggregationReport(statistics={}, empty_channels=[])
        component = CompletenessValidationComponent(sample_config)
        assert not report.complete

        with pytest.raises(EmptySeriesError) as exc_info:
            component.execute(report)

        assert exc_info.value.channels == ["temperature", "humidity", "wind_speed", "solar_radiation"]
