"""
Pydantic models for pipeline configuration.

These models provide type-safe parsing and validation of the YAML configuration file.
Static identifiers live in YAML; secrets are read from the environment by Credentials.
"""

import os
from pathlib import Path
from typing import Dict, Optional, Union
import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from src.models import ChannelRole
from src.utils.exceptions import ConfigurationError


TELEMETRY_TOKEN_ENV = "DATABOOM_OAUTH_TOKEN"
LEDGER_CREDENTIALS_ENV = "GOOGLE_APPLICATION_CREDENTIALS"


class FrozenModel(BaseModel):
    """Immutable configuration section that rejects unknown keys."""
    model_config = ConfigDict(frozen=True, extra='forbid')


class PipelineInfo(FrozenModel):
    """Basic pipeline metadata."""
    name: str = Field(..., description="Pipeline name")
    version: str = Field(..., description="Pipeline version")


class ChannelMapping(FrozenModel):
    """External channel identifier for each formula input."""
    temperature: str = Field(..., description="Air temperature channel (C)")
    humidity: str = Field(..., description="Relative humidity channel (%)")
    wind_speed: str = Field(..., description="Wind speed channel (km/h)")
    solar_radiation: str = Field(..., description="Solar radiation channel (W/m2)")

    @field_validator('temperature', 'humidity', 'wind_speed', 'solar_radiation')
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("channel identifier must not be blank")
        return v.strip()

    def channel_for(self, role: ChannelRole) -> str:
        """Channel identifier configured for a role."""
        return getattr(self, role.value)

    def as_dict(self) -> Dict[ChannelRole, str]:
        """Role to identifier, in ChannelRole order."""
        return {role: self.channel_for(role) for role in ChannelRole}


class TelemetrySettings(FrozenModel):
    """Telemetry source and sink endpoints and identifiers."""
    chart_url: str = Field(..., description="Endpoint returning raw series for a time window")
    push_url: str = Field(..., description="Endpoint accepting pushed signal values")
    granularity: str = Field("h", description="Granularity marker for hourly data")
    device: str = Field(..., description="Destination device token for the pushed ET0")
    signal_name: str = Field("ET0", description="Destination signal name")
    channels: ChannelMapping = Field(..., description="Channel identifier per role")


class LedgerSettings(FrozenModel):
    """Google Sheets result ledger settings."""
    spreadsheet_id: str = Field(..., description="Spreadsheet document identifier")
    sheet_name: str = Field(..., description="Tab the rows are appended to")
    column_range: str = Field("A:G", description="Column span of the 7-value row")
    value_input_option: str = Field("USER_ENTERED", description="How values are interpreted")
    insert_data_option: str = Field("INSERT_ROWS", description="How the row is inserted")

    @property
    def target_range(self) -> str:
        return f"{self.sheet_name}!{self.column_range}"


class CalculationSettings(FrozenModel):
    """ET0 formula parameters."""
    altitude_m: float = Field(100.0, description="Site altitude above sea level (m)")


class LoggingSettings(FrozenModel):
    """Logging configuration."""
    level: str = Field("INFO", description="Root log level")
    log_file: Optional[str] = Field(None, description="Optional log file path")

    @field_validator('level')
    @classmethod
    def known_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {v}")
        return level


class PipelineConfig(FrozenModel):
    """Complete pipeline configuration model."""

    pipeline: PipelineInfo = Field(..., description="Pipeline metadata")
    telemetry: TelemetrySettings = Field(..., description="Telemetry source/sink settings")
    ledger: LedgerSettings = Field(..., description="Result ledger settings")
    calculation: CalculationSettings = Field(
        default_factory=CalculationSettings, description="Formula parameters"
    )
    logging: LoggingSettings = Field(
        default_factory=LoggingSettings, description="Logging configuration"
    )

    @classmethod
    def from_yaml(cls, config_path: Union[str, Path]) -> "PipelineConfig":
        """Load configuration from YAML file."""
        config_path = Path(config_path)
        if not config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, 'r') as f:
                config_data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Malformed YAML in {config_path}: {e}") from e

        if not isinstance(config_data, dict):
            raise ConfigurationError(
                f"Configuration in {config_path} must be a mapping, got {type(config_data).__name__}"
            )

        try:
            return cls(**config_data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration in {config_path}: {e}") from e


class Credentials(FrozenModel):
    """Secrets needed to talk to the telemetry service and the ledger."""
    telemetry_token: str = Field(..., description="Bearer token for the telemetry service")
    ledger_credentials_path: str = Field(..., description="Service-account JSON file for the ledger")

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None) -> "Credentials":
        """
        Read credentials from the environment.

        Raises:
            ConfigurationError: If a variable is missing or blank
        """
        environ = os.environ if environ is None else environ
        values = {}
        for env_name in (TELEMETRY_TOKEN_ENV, LEDGER_CREDENTIALS_ENV):
            value = environ.get(env_name)
            if value is None or not value.strip():
                raise ConfigurationError(f"Missing env var: {env_name}")
            values[env_name] = value.strip()

        return cls(
            telemetry_token=values[TELEMETRY_TOKEN_ENV],
            ledger_credentials_path=values[LEDGER_CREDENTIALS_ENV]
        )
