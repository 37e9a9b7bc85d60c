"""
Pydantic models for data structures used throughout the pipeline.

All models are immutable and live for a single run only.
"""

import datetime as dt
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union
from pydantic import BaseModel, ConfigDict, Field


class ChannelRole(str, Enum):
    """Role a telemetry channel plays in the ET0 formula."""
    TEMPERATURE = "temperature"
    HUMIDITY = "humidity"
    WIND_SPEED = "wind_speed"
    SOLAR_RADIATION = "solar_radiation"


class PipelineStage(str, Enum):
    """Linear stages of a pipeline run."""
    START = "start"
    FETCHED = "fetched"
    AGGREGATED = "aggregated"
    VALIDATED = "validated"
    COMPUTED = "computed"
    PERSISTED = "persisted"
    PUSHED_OR_FAILED = "pushed_or_failed"
    DONE = "done"


class RawSample(BaseModel):
    """Single telemetry reading as delivered by the source."""
    model_config = ConfigDict(frozen=True)

    timestamp: Optional[dt.datetime] = Field(None, description="Reading instant (UTC)")
    value: Optional[float] = Field(None, description="Reading value, None when absent")


class RawSeries(BaseModel):
    """Samples for one channel, in source delivery order."""
    model_config = ConfigDict(frozen=True)

    role: ChannelRole = Field(..., description="Role of the channel")
    channel_id: str = Field(..., description="External channel identifier")
    samples: Tuple[RawSample, ...] = Field(default_factory=tuple, description="Ordered samples")


class ChannelStatistic(BaseModel):
    """Daily statistic for one channel: max/min for temperature, mean otherwise."""
    model_config = ConfigDict(frozen=True)

    role: ChannelRole
    sample_count: int = Field(..., description="Number of non-null values used")
    maximum: Optional[float] = None
    minimum: Optional[float] = None
    mean: Optional[float] = None


class AggregationReport(BaseModel):
    """Output of the aggregation stage before completeness is enforced."""
    model_config = ConfigDict(frozen=True)

    statistics: Dict[ChannelRole, ChannelStatistic] = Field(default_factory=dict)
    empty_channels: List[ChannelRole] = Field(default_factory=list)

    @property
    def complete(self) -> bool:
        return not self.empty_channels and all(role in self.statistics for role in ChannelRole)


class DailyAggregate(BaseModel):
    """The four daily inputs of the ET0 formula."""
    model_config = ConfigDict(frozen=True)

    t_max: float = Field(..., description="Maximum air temperature (C)")
    t_min: float = Field(..., description="Minimum air temperature (C)")
    humidity_mean: float = Field(..., description="Mean relative humidity (%)")
    wind_mean: float = Field(..., description="Mean wind speed (km/h)")
    radiation_mean: float = Field(..., description="Mean solar radiation (W/m2)")


class Et0Result(BaseModel):
    """Rounded diagnostics and ET0 for one day."""
    model_config = ConfigDict(frozen=True)

    date: dt.date = Field(..., description="Calendar day (UTC)")
    t_max: float
    t_min: float
    humidity_mean: float
    wind_mean: float
    radiation_mean: float
    et0: float = Field(..., description="Reference evapotranspiration (mm/day)")

    def to_ledger_row(self) -> List[Union[str, float]]:
        """Row in ledger column order: date, tMax, tMin, humidity, wind, radiation, ET0."""
        return [
            self.date.isoformat(),
            self.t_max,
            self.t_min,
            self.humidity_mean,
            self.wind_mean,
            self.radiation_mean,
            self.et0
        ]


class PushOutcome(BaseModel):
    """Best-effort result of pushing ET0 to the telemetry sink."""
    model_config = ConfigDict(frozen=True)

    ok: bool = Field(..., description="Whether the sink accepted the value")
    status: Optional[int] = Field(None, description="HTTP status, None on transport failure")
    body: Optional[str] = Field(None, description="Raw response text when not parsed")
    response: Optional[Any] = Field(None, description="Parsed JSON response body")


class PipelineResult(BaseModel):
    """Overall result of a completed pipeline run."""
    target_date: dt.date = Field(..., description="Day that was processed")
    stage: PipelineStage = Field(PipelineStage.START, description="Last stage reached")
    aggregate: Optional[DailyAggregate] = Field(None, description="Unrounded daily aggregates")
    result: Optional[Et0Result] = Field(None, description="Rounded diagnostics and ET0")
    push_outcome: Optional[PushOutcome] = Field(None, description="Telemetry sink outcome")
    execution_time_seconds: float = Field(0.0, description="Total execution time")

    @property
    def success(self) -> bool:
        """A run succeeds once the ledger row is written, regardless of the push."""
        return self.stage == PipelineStage.DONE and self.result is not None
