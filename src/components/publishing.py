"""
Telemetry sink push component for the ET0 pipeline.

Pushing ET0 back to the telemetry service is a best-effort mirror of the
ledger: failures are returned as a PushOutcome and never raised.
"""

from datetime import date
from typing import Any, Dict, Optional
import requests

from src.components.base import PublishingComponent
from src.config import Credentials, PipelineConfig
from src.models import Et0Result, PushOutcome
from src.utils import get_logger


def day_start(target_date: date) -> str:
    """Day-start instant used as the pushed value's date stamp."""
    return f"{target_date.isoformat()}T00:00:00Z"


class TelemetryPushComponent(PublishingComponent):
    """Pushes the ET0 value to the configured device and signal."""

    def __init__(
        self,
        config: PipelineConfig,
        credentials: Credentials,
        session: Optional[requests.Session] = None
    ):
        super().__init__(config)
        self.logger = get_logger(__name__)
        self.credentials = credentials
        self.session = session or requests.Session()

    def build_payload(self, result: Et0Result) -> Dict[str, Any]:
        """Device/date/value body for a single ET0 signal."""
        return {
            "device": self.config.telemetry.device,
            "date": day_start(result.date),
            "signals": [
                {"name": self.config.telemetry.signal_name, "value": result.et0}
            ]
        }

    def execute(self, result: Et0Result) -> PushOutcome:
        """
        Push ET0 and capture the outcome.

        Args:
            result: Computed ET0 result

        Returns:
            PushOutcome; ok is False for transport errors and non-2xx responses
        """
        headers = {
            "Authorization": f"Bearer {self.credentials.telemetry_token}",
            "Content-Type": "application/json",
            "Accept": "application/json"
        }

        try:
            response = self.session.post(
                self.config.telemetry.push_url,
                json=self.build_payload(result),
                headers=headers
            )
        except requests.RequestException as e:
            self.logger.warning(f"Telemetry push failed: {str(e)}")
            return PushOutcome(ok=False, status=None, body=str(e))

        outcome = self._to_outcome(response)
        if outcome.ok:
            self.logger.info(f"Telemetry push accepted (HTTP {outcome.status})")
        else:
            self.logger.warning(f"Telemetry push rejected: HTTP {outcome.status} {outcome.body}")
        return outcome

    @staticmethod
    def _to_outcome(response: requests.Response) -> PushOutcome:
        status = response.status_code
        body = response.text

        if not 200 <= status < 300:
            return PushOutcome(ok=False, status=status, body=body)

        if body is None or not body.strip():
            return PushOutcome(ok=True, status=status)

        try:
            return PushOutcome(ok=True, status=status, response=response.json())
        except ValueError:
            return PushOutcome(ok=True, status=status, body=body)
