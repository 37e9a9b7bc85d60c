"""
Pytest configuration and shared fixtures for testing.

Provides a sample configuration, credentials, a telemetry response body and
helpers for building fake HTTP responses and Sheets services.
"""

import tempfile
import pytest
from datetime import date
from pathlib import Path
from unittest.mock import Mock

from src.config import Credentials, PipelineConfig


TARGET_DATE = date(2024, 6, 14)

CHANNEL_IDS = {
    "temperature": "temp-signal-01",
    "humidity": "hum-signal-02",
    "wind_speed": "wind-signal-03",
    "solar_radiation": "rad-signal-04"
}


def make_response(status_code=200, json_body=None, text=None):
    """
    Build a fake requests.Response.

    Args:
        status_code: HTTP status
        json_body: Value returned by .json(); omitted means .json() raises ValueError
        text: Raw body text
    """
    response = Mock()
    response.status_code = status_code
    response.text = text if text is not None else ("" if json_body is None else repr(json_body))
    if json_body is None:
        response.json.side_effect = ValueError("No JSON object could be decoded")
    else:
        response.json.return_value = json_body
    return response


def make_session(*responses):
    """Fake requests.Session whose post() returns the given responses in order."""
    session = Mock()
    session.post.side_effect = list(responses)
    return session


def make_sheets_service(append_response=None):
    """Fake Sheets v4 service returning ``append_response`` from values().append().execute()."""
    service = Mock()
    append = service.spreadsheets.return_value.values.return_value.append
    append.return_value.execute.return_value = append_response or {
        "updates": {"updatedRange": "ET0_PENMAN-MONTEITH!A2:G2", "updatedRows": 1}
    }
    return service


def appended_calls(service):
    """Calls made to values().append() on a fake Sheets service."""
    return service.spreadsheets.return_value.values.return_value.append.call_args_list


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def config_data():
    """Raw configuration mapping, as it would be read from YAML."""
    return {
        "pipeline": {
            "name": "test_daily_et0",
            "version": "1.0.0"
        },
        "telemetry": {
            "chart_url": "https://telemetry.example.test/v1/chart",
            "push_url": "https://telemetry.example.test/v1/signals/push",
            "granularity": "h",
            "device": "TEST-DEVICE-1",
            "signal_name": "ET0",
            "channels": dict(CHANNEL_IDS)
        },
        "ledger": {
            "spreadsheet_id": "sheet-123",
            "sheet_name": "ET0_PENMAN-MONTEITH",
            "column_range": "A:G",
            "value_input_option": "USER_ENTERED",
            "insert_data_option": "INSERT_ROWS"
        },
        "calculation": {
            "altitude_m": 100
        },
        "logging": {
            "level": "INFO"
        }
    }


@pytest.fixture
def sample_config(config_data):
    """Create a test configuration."""
    return PipelineConfig(**config_data)


@pytest.fixture
def credentials(temp_dir):
    """Credentials pointing at a service-account file that does not exist."""
    return Credentials(
        telemetry_token="test-token",
        ledger_credentials_path=str(temp_dir / "missing_service_account.json")
    )


@pytest.fixture
def chart_payload():
    """
    Telemetry response for TARGET_DATE.

    Daily aggregates: t_max=30, t_min=20, humidity=60, wind=10.8, radiation=208.33.
    """
    return {
        CHANNEL_IDS["temperature"]: [
            {"timestamp": "2024-06-14T00:00:00Z", "value": 20.0},
            {"timestamp": "2024-06-14T06:00:00Z", "value": 25.0},
            {"timestamp": "2024-06-14T14:00:00Z", "value": 30.0},
            {"timestamp": "2024-06-14T23:00:00Z", "value": None}
        ],
        CHANNEL_IDS["humidity"]: [
            {"timestamp": "2024-06-14T00:00:00Z", "value": 55.0},
            {"timestamp": "2024-06-14T01:00:00Z", "value": None},
            {"timestamp": "2024-06-14T02:00:00Z", "value": 65.0}
        ],
        CHANNEL_IDS["wind_speed"]: [
            {"timestamp": "2024-06-14T00:00:00Z", "value": 10.8},
            {"timestamp": "2024-06-14T01:00:00Z", "value": 10.8}
        ],
        CHANNEL_IDS["solar_radiation"]: [
            {"timestamp": "2024-06-14T12:00:00Z", "value": 208.33}
        ]
    }
