"""
Telemetry ingestion component for the daily ET0 pipeline.

Requests one day of hourly data for all four channels from the telemetry
source in a single call and converts the response into RawSeries objects.
"""

from datetime import date, datetime
from typing import Any, Dict, List, Optional, Tuple
import pandas as pd
import requests

from src.components.base import IngestionComponent
from src.config import Credentials, PipelineConfig
from src.models import ChannelRole, RawSample, RawSeries
from src.utils import get_logger, SourceFetchError


def day_bounds(target_date: date) -> Tuple[str, str]:
    """Inclusive UTC start/end instants of a calendar day as ISO-8601 strings."""
    day = target_date.isoformat()
    return f"{day}T00:00:00Z", f"{day}T23:59:59Z"


class TelemetryIngestionComponent(IngestionComponent):
    """Fetches raw hourly series from the telemetry source over HTTP."""

    def __init__(
        self,
        config: PipelineConfig,
        credentials: Credentials,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize ingestion component.

        Args:
            config: Pipeline configuration
            credentials: Telemetry bearer token holder
            session: Optional HTTP session (injected in tests)
        """
        super().__init__(config)
        self.logger = get_logger(__name__)
        self.credentials = credentials
        self.session = session or requests.Session()

        self.stats = {
            "channels_requested": 0,
            "samples_received": 0,
            "null_values": 0
        }

    def execute(self, target_date: date) -> Dict[ChannelRole, RawSeries]:
        """
        Fetch the raw series of every configured channel for one day.

        Args:
            target_date: Calendar day (UTC) to retrieve

        Returns:
            Raw series keyed by channel role

        Raises:
            SourceFetchError: If the request fails or the response is unusable
        """
        self.logger.info(f"Fetching telemetry for {target_date.isoformat()}")
        channels = self.config.telemetry.channels.as_dict()
        self.stats["channels_requested"] = len(channels)

        payload = self.build_payload(target_date)
        chart = self._post_chart(payload)

        series_by_role = {
            role: self._extract_series(chart, role, channel_id)
            for role, channel_id in channels.items()
        }

        for role, series in series_by_role.items():
            self.logger.info(f"   {role.value}: {len(series.samples)} samples")

        self._log_ingestion_summary()
        return series_by_role

    def build_payload(self, target_date: date) -> Dict[str, Any]:
        """Request body covering the whole day for all channels."""
        start_iso, end_iso = day_bounds(target_date)
        return {
            "startDate": start_iso,
            "endDate": end_iso,
            "granularity": self.config.telemetry.granularity,
            "signals": list(self.config.telemetry.channels.as_dict().values())
        }

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.credentials.telemetry_token}",
            "Content-Type": "application/json",
            "Accept": "application/json"
        }

    def _post_chart(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Send the chart request and decode the JSON body.

        Args:
            payload: Request body

        Returns:
            Mapping of channel identifier to list of samples
        """
        url = self.config.telemetry.chart_url
        try:
            response = self.session.post(url, json=payload, headers=self._headers())
        except requests.RequestException as e:
            self.logger.error(f"Telemetry request failed: {str(e)}")
            raise SourceFetchError(f"Telemetry chart request failed: {str(e)}") from e

        if not 200 <= response.status_code < 300:
            self.logger.error(f"Telemetry source returned HTTP {response.status_code}")
            raise SourceFetchError(
                f"Telemetry chart failed: {response.status_code} {response.text}",
                status=response.status_code,
                body=response.text
            )

        try:
            chart = response.json()
        except ValueError as e:
            raise SourceFetchError(
                f"Telemetry chart returned invalid JSON: {str(e)}",
                status=response.status_code,
                body=response.text
            ) from e

        if not isinstance(chart, dict):
            raise SourceFetchError(
                f"Telemetry chart returned {type(chart).__name__}, expected an object",
                status=response.status_code,
                body=response.text
            )
        return chart

    def _extract_series(self, chart: Dict[str, Any], role: ChannelRole, channel_id: str) -> RawSeries:
        """
        Convert one channel's samples into a RawSeries.

        A missing or non-list entry yields an empty series; completeness is
        enforced later, once every channel has been aggregated.
        """
        points = chart.get(channel_id)
        if not isinstance(points, list):
            if points is not None:
                self.logger.warning(f"Unexpected payload for {role.value} ({channel_id}); treating as empty")
            return RawSeries(role=role, channel_id=channel_id)

        samples: List[RawSample] = []
        for point in points:
            if not isinstance(point, dict):
                continue
            value = self._parse_value(point.get("value"))
            if value is None:
                self.stats["null_values"] += 1
            samples.append(RawSample(timestamp=self._parse_timestamp(point.get("timestamp")), value=value))

        self.stats["samples_received"] += len(samples)
        return RawSeries(role=role, channel_id=channel_id, samples=tuple(samples))

    @staticmethod
    def _parse_value(raw: Any) -> Optional[float]:
        if raw is None or isinstance(raw, bool):
            return None
        try:
            value = float(raw)
        except (TypeError, ValueError):
            return None
        return None if pd.isna(value) else value

    @staticmethod
    def _parse_timestamp(raw: Any) -> Optional[datetime]:
        """Parse ISO-8601 strings or epoch milliseconds to an aware UTC datetime."""
        if raw is None or isinstance(raw, bool):
            return None
        if isinstance(raw, (int, float)):
            parsed = pd.to_datetime(raw, unit="ms", utc=True, errors="coerce")
        else:
            parsed = pd.to_datetime(str(raw), utc=True, errors="coerce")
        if pd.isna(parsed):
            return None
        return parsed.to_pydatetime()

    def _log_ingestion_summary(self) -> None:
        self.logger.info("Ingestion Summary:")
        self.logger.info(f"   Channels requested: {self.stats['channels_requested']}")
        self.logger.info(f"   Samples received: {self.stats['samples_received']}")
        self.logger.info(f"   Null values: {self.stats['null_values']}")
