"""Pipeline components for the daily ET0 pipeline."""

from .base import (
    PipelineComponent,
    IngestionComponent,
    AggregationComponent,
    ValidationComponent,
    CalculationComponent,
    LoadingComponent,
    PublishingComponent
)

from .ingestion import TelemetryIngestionComponent
from .aggregation import DailyAggregationComponent
from .validation import CompletenessValidationComponent
from .calculation import Et0CalculationComponent
from .loading import SheetsLedgerComponent
from .publishing import TelemetryPushComponent

__all__ = [
    "PipelineComponent",
    "IngestionComponent",
    "AggregationComponent",
    "ValidationComponent",
    "CalculationComponent",
    "LoadingComponent",
    "PublishingComponent",
    "TelemetryIngestionComponent",
    "DailyAggregationComponent",
    "CompletenessValidationComponent",
    "Et0CalculationComponent",
    "SheetsLedgerComponent",
    "TelemetryPushComponent"
]
