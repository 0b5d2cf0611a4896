"""12-factor configuration adapter using environment variables and TOML config."""

import tomllib
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

RESROBOT_KEY_HINT = (
    "RESROBOT_API_KEY not set. "
    "Get a free key at https://www.trafiklab.se/api/trafiklab-apis/resrobot-v21/"
)


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Locale
    timezone: str = Field(
        default="Europe/Stockholm",
        description="IANA timezone used to interpret and display transit times",
    )
    language: str = Field(
        default="sv",
        validation_alias=AliasChoices("TRANSPORT_LANGUAGE"),
        description="Output language: 'sv' or 'en'",
    )

    # Provider credentials and defaults
    resrobot_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "resrobot_api_key", "RESROBOT_API_KEY", "TRAFIKLAB_RESROBOT_KEY"
        ),
        description="Trafiklab ResRobot v2.1 API key for nationwide trips",
    )
    default_location: str | None = Field(
        default=None,
        validation_alias=AliasChoices("default_location", "TRANSPORT_DEFAULT_LOCATION"),
        description="Origin used when only a destination is given",
    )

    # Per-call timeouts in seconds
    sl_api_timeout: int = Field(default=10, description="Timeout for SL API requests")
    resrobot_api_timeout: int = Field(default=15, description="Timeout for ResRobot requests")
    geocoding_timeout: int = Field(default=10, description="Timeout for Nominatim requests")
    routing_timeout: int = Field(default=10, description="Timeout for OSRM requests")
    airports_timeout: int = Field(default=30, description="Timeout for the airport CSV download")

    # Car estimates
    fuel_price_sek_per_liter: float = Field(
        default=19.5, description="Fuel price used for car cost estimates"
    )
    average_speed_kmh: float = Field(
        default=80.0, description="Average speed used when no routed duration is known"
    )

    # Optional TOML file with a [vehicle] table overriding the default profile
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file",
    )

    log_level: str = Field(default="WARNING", description="Logging level for stderr output")

    @field_validator("language")
    @classmethod
    def validate_language(cls, v: str) -> str:
        """Validate language is either 'sv' or 'en'."""
        if v.lower() not in ("sv", "en"):
            raise ValueError("language must be either 'sv' or 'en'")
        return v.lower()

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate timezone is a known IANA zone."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"timezone must be a valid IANA timezone name, got '{v}'") from e
        return v

    @property
    def tz(self) -> ZoneInfo:
        """The configured timezone as a ZoneInfo object."""
        return ZoneInfo(self.timezone)

    def load_toml_data(self) -> dict[str, Any]:
        """Load and parse the TOML config file, or return an empty dict if unset."""
        if not self.config_file:
            return {}

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            return tomllib.load(f)
