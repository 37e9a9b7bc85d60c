"""
Main pipeline orchestrator for daily ET0 computation.

This module coordinates the execution of all pipeline components:
fetch -> aggregate -> validate -> compute -> persist -> push
"""

import argparse
import sys
import time
from datetime import date, datetime, timedelta, timezone
from pathlib import Path
from typing import List, Optional

from src.config import Credentials, PipelineConfig
from src.models import PipelineResult, PipelineStage
from src.components import (
    IngestionComponent,
    AggregationComponent,
    ValidationComponent,
    CalculationComponent,
    LoadingComponent,
    PublishingComponent,
    TelemetryIngestionComponent,
    DailyAggregationComponent,
    CompletenessValidationComponent,
    Et0CalculationComponent,
    SheetsLedgerComponent,
    TelemetryPushComponent
)
from src.utils import get_logger, setup_logging, PipelineError


DEFAULT_CONFIG_PATH = Path("config/default.yaml")

logger = get_logger(__name__)


def yesterday_utc(now: Optional[datetime] = None) -> date:
    """Calendar day preceding ``now`` in UTC."""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    return now.date() - timedelta(days=1)


class Et0Pipeline:
    """Main pipeline orchestrator that coordinates all components."""

    def __init__(self, config: PipelineConfig):
        """
        Initialize pipeline with configuration.

        Args:
            config: Pipeline configuration loaded from YAML
        """
        self.config = config

        # Components are injected (dependency injection pattern)
        self.ingestion: Optional[IngestionComponent] = None
        self.aggregation: Optional[AggregationComponent] = None
        self.validation: Optional[ValidationComponent] = None
        self.calculation: Optional[CalculationComponent] = None
        self.loading: Optional[LoadingComponent] = None
        self.publishing: Optional[PublishingComponent] = None

    @classmethod
    def from_config(cls, config: PipelineConfig, credentials: Credentials) -> "Et0Pipeline":
        """Build a pipeline wired with the default HTTP and Sheets components."""
        pipeline = cls(config)
        pipeline.set_components(
            ingestion=TelemetryIngestionComponent(config, credentials),
            aggregation=DailyAggregationComponent(config),
            validation=CompletenessValidationComponent(config),
            calculation=Et0CalculationComponent(config),
            loading=SheetsLedgerComponent(config, credentials),
            publishing=TelemetryPushComponent(config, credentials)
        )
        return pipeline

    def set_components(
        self,
        ingestion: IngestionComponent,
        aggregation: AggregationComponent,
        validation: ValidationComponent,
        calculation: CalculationComponent,
        loading: LoadingComponent,
        publishing: PublishingComponent
    ):
        """
        Set pipeline components (dependency injection).

        Args:
            ingestion: Telemetry retrieval component
            aggregation: Daily aggregation component
            validation: Completeness validation component
            calculation: ET0 calculation component
            loading: Result ledger component
            publishing: Telemetry push component
        """
        self.ingestion = ingestion
        self.aggregation = aggregation
        self.validation = validation
        self.calculation = calculation
        self.loading = loading
        self.publishing = publishing

    def execute(self, target_date: date) -> PipelineResult:
        """
        Execute the complete pipeline for one day.

        Args:
            target_date: Calendar day (UTC) to process

        Returns:
            Pipeline execution results, including the push outcome

        Raises:
            PipelineError: Tagged with the stage that failed, for fatal errors
        """
        components = [
            self.ingestion, self.aggregation, self.validation,
            self.calculation, self.loading, self.publishing
        ]
        if not all(components):
            raise ValueError("All pipeline components must be set before execution")

        start_time = time.time()
        result = PipelineResult(target_date=target_date, stage=PipelineStage.START)
        logger.info(f"Starting pipeline: {self.config.pipeline.name} for {target_date.isoformat()}")

        try:
            logger.info("Step 1: Fetch")
            series_by_role = self.ingestion.execute(target_date)
            result.stage = PipelineStage.FETCHED

            logger.info("Step 2: Aggregate")
            report = self.aggregation.execute(series_by_role)
            result.stage = PipelineStage.AGGREGATED

            logger.info("Step 3: Validate")
            result.aggregate = self.validation.execute(report)
            result.stage = PipelineStage.VALIDATED

            logger.info("Step 4: Compute")
            result.result = self.calculation.execute(result.aggregate, target_date)
            result.stage = PipelineStage.COMPUTED

            logger.info("Step 5: Persist")
            self.loading.execute(result.result)
            result.stage = PipelineStage.PERSISTED

        except PipelineError as e:
            e.stage = e.stage or self._failing_stage(result.stage)
            logger.error(f"Pipeline aborted: {e}")
            raise

        logger.info("Step 6: Push")
        result.push_outcome = self.publishing.execute(result.result)
        result.stage = PipelineStage.PUSHED_OR_FAILED

        result.execution_time_seconds = time.time() - start_time
        result.stage = PipelineStage.DONE
        logger.info(f"Pipeline completed in {result.execution_time_seconds:.2f} seconds")
        return result

    @staticmethod
    def _failing_stage(reached: PipelineStage) -> str:
        """Name of the step that runs after the last stage reached."""
        steps = {
            PipelineStage.START: "fetch",
            PipelineStage.FETCHED: "aggregate",
            PipelineStage.AGGREGATED: "validate",
            PipelineStage.VALIDATED: "compute",
            PipelineStage.COMPUTED: "persist"
        }
        return steps.get(reached, reached.value)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compute and record daily FAO-56 ET0.")
    parser.add_argument(
        "--config", type=Path, default=DEFAULT_CONFIG_PATH,
        help=f"Path to YAML configuration (default: {DEFAULT_CONFIG_PATH})"
    )
    parser.add_argument(
        "--date", type=date.fromisoformat, default=None,
        help="Day to process as YYYY-MM-DD (default: yesterday in UTC)"
    )
    parser.add_argument(
        "--log-level", default=None, type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for pipeline execution."""
    args = parse_args(argv)

    try:
        config = PipelineConfig.from_yaml(args.config)
        setup_logging(
            level=args.log_level or config.logging.level,
            log_file=Path(config.logging.log_file) if config.logging.log_file else None
        )
        credentials = Credentials.from_env()

        target_date = args.date or yesterday_utc()
        pipeline = Et0Pipeline.from_config(config, credentials)
        result = pipeline.execute(target_date)

    except PipelineError as e:
        e.stage = e.stage or "configuration"
        logger.error(f"Pipeline failed: {e}")
        print(f"Pipeline failed: {e}", file=sys.stderr)
        return 1

    print(f"\nET0 Pipeline Execution Summary:")
    print(f"   Date: {result.target_date.isoformat()}")
    print(f"   ET0: {result.result.et0} mm/day")
    print(f"   Ledger row: {result.result.to_ledger_row()}")
    print(f"   Execution time: {result.execution_time_seconds:.2f} seconds")

    push = result.push_outcome
    if push.ok:
        print(f"   Push: ok (HTTP {push.status})")
    else:
        print(f"   Push: FAILED (status={push.status}) {push.body}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
