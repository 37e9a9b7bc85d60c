"""
Tests for the telemetry push component.

Every failure mode must come back as a PushOutcome instead of an exception.
"""

import requests

from src.components.publishing import TelemetryPushComponent
from src.models import Et0Result, PushOutcome
from tests.conftest import TARGET_DATE, make_response, make_session


def sample_result():
    return Et0Result(
        date=TARGET_DATE, t_max=30.0, t_min=20.0, humidity_mean=60.0,
        wind_mean=10.8, radiation_mean=208.33, et0=6.74
    )


class TestTelemetryPushComponent:
    """Test suite for TelemetryPushComponent."""

    def test_payload(self, sample_config, credentials):
        """Test the body is the device/date/value triple for ET0 only."""
        session = make_session(make_response(200, text=""))
        component = TelemetryPushComponent(sample_config, credentials, session=session)

        component.execute(sample_result())

        args, kwargs = session.post.call_args
        assert args[0] == "https://telemetry.example.test/v1/signals/push"
        assert kwargs["json"] == {
            "device": "TEST-DEVICE-1",
            "date": "2024-06-14T00:00:00Z",
            "signals": [{"name": "ET0", "value": 6.74}]
        }
        assert kwargs["headers"]["Authorization"] == "Bearer test-token"

    def test_blank_body_is_ok(self, sample_config, credentials):
        """Test a 2xx with an empty body counts as accepted."""
        session = make_session(make_response(204, text="  "))
        component = TelemetryPushComponent(sample_config, credentials, session=session)

        outcome = component.execute(sample_result())

        assert outcome == PushOutcome(ok=True, status=204)

    def test_json_body_is_parsed(self, sample_config, credentials):
        """Test a 2xx JSON body is kept as the parsed response."""
        session = make_session(make_response(200, {"inserted": 1}))
        component = TelemetryPushComponent(sample_config, credentials, session=session)

        outcome = component.execute(sample_result())

        assert outcome.ok is True
        assert outcome.response == {"inserted": 1}

    def test_non_json_success_body_is_kept(self, sample_config, credentials):
        session = make_session(make_response(200, text="OK"))
        component = TelemetryPushComponent(sample_config, credentials, session=session)

        outcome = component.execute(sample_result())

        assert outcome.ok is True
        assert outcome.body == "OK"

    def test_server_error_is_captured(self, sample_config, credentials):
        """Test HTTP 500 returns ok=False with status and body."""
        session = make_session(make_response(500, text="internal error"))
        component = TelemetryPushComponent(sample_config, credentials, session=session)

        outcome = component.execute(sample_result())

        assert outcome == PushOutcome(ok=False, status=500, body="internal error")

    def test_transport_error_is_captured(self, sample_config, credentials):
        """Test connection failures do not raise."""
        session = make_session(requests.Timeout("read timed out"))
        component = TelemetryPushComponent(sample_config, credentials, session=session)

        outcome = component.execute(sample_result())

        assert outcome.ok is False
        assert outcome.status is None
        assert "timed out" in outcome.body
