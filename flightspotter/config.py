"""Configuration settings for the Flight Spotter service."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

import boto3
from botocore.exceptions import BotoCoreError, ClientError

logger = logging.getLogger("flightspotter.config")

# Shared SSM client for credential reads. Default to a region so imports do
# not fail in environments without AWS configuration (e.g. CI test runners).
_ssm_client = boto3.client(
    "ssm",
    region_name=os.getenv("AWS_REGION") or os.getenv("AWS_DEFAULT_REGION") or "us-east-1",
)


def _get_float(env_var: str) -> float | None:
    """Parse an optional float environment variable."""

    value = os.getenv(env_var)
    if value is None or not value.strip():
        return None
    return float(value)


@lru_cache(maxsize=4)
def get_opensky_credentials(prefix: str) -> tuple[str, str] | None:
    """Fetch OpenSky basic-auth credentials from AWS SSM Parameter Store.

    Parameters live under ``{prefix}/username`` and ``{prefix}/password``.
    Lookups are cached in-memory. Any failure falls back to anonymous access
    so the feed keeps polling at the anonymous rate limit.
    """

    try:
        username = _ssm_client.get_parameter(Name=f"{prefix}/username")
        password = _ssm_client.get_parameter(
            Name=f"{prefix}/password", WithDecryption=True
        )
    except (ClientError, BotoCoreError) as exc:  # pragma: no cover - AWS error passthrough
        logger.warning("Failed to load OpenSky credentials from SSM: %s", exc)
        return None

    user_value = username.get("Parameter", {}).get("Value")
    password_value = password.get("Parameter", {}).get("Value")
    if not user_value or not password_value:
        logger.warning("OpenSky credentials under %s are empty", prefix)
        return None

    return user_value, password_value


@dataclass
class Settings:
    """Application configuration loaded from environment variables."""

    flightspotter_env: str = os.getenv("FLIGHTSPOTTER_ENV", "local")
    log_level: str = os.getenv("FLIGHTSPOTTER_LOG_LEVEL", "INFO")

    # Aircraft state feed
    opensky_states_url: str = os.getenv(
        "OPENSKY_STATES_URL",
        "https://opensky-network.org/api/states/all",
    )
    opensky_timeout: float = float(os.getenv("OPENSKY_TIMEOUT", "10.0"))
    opensky_username: str | None = os.getenv("OPENSKY_USERNAME")
    opensky_password: str | None = os.getenv("OPENSKY_PASSWORD")
    opensky_ssm_prefix: str | None = os.getenv("OPENSKY_SSM_PREFIX")
    poll_interval_seconds: float = float(os.getenv("POLL_INTERVAL_SECONDS", "10.0"))

    # Route enrichment
    route_base_url: str = os.getenv(
        "ROUTE_BASE_URL", "https://opensky-network.org/api/routes/flight"
    )
    route_timeout: float = float(os.getenv("ROUTE_TIMEOUT", "10.0"))

    # Aircraft photos
    photo_base_url: str = os.getenv(
        "PHOTO_BASE_URL", "https://api.planespotters.net/pub/photos/hex"
    )
    photo_timeout: float = float(os.getenv("PHOTO_TIMEOUT", "5.0"))

    # Weather
    weather_base_url: str = os.getenv(
        "WEATHER_BASE_URL", "https://api.open-meteo.com/v1/forecast"
    )
    weather_timeout: float = float(os.getenv("WEATHER_TIMEOUT", "10.0"))

    # Default observer, started at application startup when lat/lon are set
    observer_lat: float | None = _get_float("OBSERVER_LAT")
    observer_lon: float | None = _get_float("OBSERVER_LON")
    observer_left_bearing: float = float(os.getenv("OBSERVER_LEFT_BEARING", "315"))
    observer_right_bearing: float = float(os.getenv("OBSERVER_RIGHT_BEARING", "45"))
    observer_max_distance_km: float = float(
        os.getenv("OBSERVER_MAX_DISTANCE_KM", "10")
    )

    def opensky_auth(self) -> tuple[str, str] | None:
        """Return basic-auth credentials for the feed, if any are configured."""

        if self.opensky_username and self.opensky_password:
            return self.opensky_username, self.opensky_password
        if self.opensky_ssm_prefix:
            return get_opensky_credentials(self.opensky_ssm_prefix)
        return None


settings = Settings()

__all__ = ["settings", "Settings", "get_opensky_credentials"]
