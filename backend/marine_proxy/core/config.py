"""Application-wide settings for the marine forecast proxy."""
from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Alaska coastal and offshore marine zones served by the proxy.
DEFAULT_MARINE_ZONES: tuple[str, ...] = (
    # SE inner coastal waters
    "PKZ098", "PKZ011", "PKZ012", "PKZ013", "PKZ021", "PKZ022",
    "PKZ031", "PKZ032", "PKZ033", "PKZ034", "PKZ035", "PKZ036",
    # SE outside coastal waters
    "PKZ641", "PKZ661", "PKZ642", "PKZ662", "PKZ643", "PKZ663",
    "PKZ644", "PKZ664", "PKZ651", "PKZ671", "PKZ652", "PKZ672",
    # Yakutat Bay
    "PKZ053",
    # Prince William Sound and northern inside passages
    "PKZ125", "PKZ126", "PKZ127", "PKZ128", "PKZ129", "PKZ130", "PKZ131",
    # North Gulf coast, Kodiak and Cook Inlet
    "PKZ197", "PKZ710", "PKZ711", "PKZ712", "PKZ715", "PKZ716",
    "PKZ714", "PKZ724", "PKZ725", "PKZ726", "PKZ720", "PKZ721",
    "PKZ722", "PKZ723", "PKZ730", "PKZ731", "PKZ733", "PKZ732",
    "PKZ734", "PKZ736", "PKZ737", "PKZ738", "PKZ742", "PKZ740",
    "PKZ741",
    # Southwest Alaska and the Aleutians
    "PKZ750", "PKZ751", "PKZ752", "PKZ753", "PKZ754", "PKZ755",
    "PKZ756", "PKZ757", "PKZ758", "PKZ759", "PKZ770", "PKZ772",
    "PKZ771", "PKZ773", "PKZ774", "PKZ775", "PKZ776", "PKZ777",
    "PKZ778", "PKZ780", "PKZ781", "PKZ782",
)


class Settings(BaseSettings):
    """Global application configuration."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    cors_allow_origin: str = Field(
        default="https://boatsafe.oceanbight.com", env="CORS_ALLOW_ORIGIN"
    )
    upstream_base_url: str = Field(
        default="https://tgftp.nws.noaa.gov/data/forecasts/marine/coastal",
        env="UPSTREAM_BASE_URL",
    )
    upstream_user_agent: str = Field(
        default="BoatSafe/1.0 (https://boatsafe.oceanbight.com contact@oceanbight.com)",
        env="UPSTREAM_USER_AGENT",
    )
    upstream_timeout_seconds: float = Field(
        default=10.0, env="UPSTREAM_TIMEOUT_SECONDS"
    )
    # Fixed-window limiter, keyed by client address
    rate_limit_window_seconds: int = Field(
        default=60 * 60, env="RATE_LIMIT_WINDOW_SECONDS"
    )
    rate_limit_max_requests: int = Field(default=60, env="RATE_LIMIT_MAX_REQUESTS")
    forecast_cache_max_age_seconds: int = Field(
        default=30 * 60, env="FORECAST_CACHE_MAX_AGE_SECONDS"
    )
    marine_zones: tuple[str, ...] = Field(
        default=DEFAULT_MARINE_ZONES, env="MARINE_ZONES"
    )
    log_level: str = Field(default="INFO", env="LOG_LEVEL")


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()


__all__ = ["DEFAULT_MARINE_ZONES", "Settings", "get_settings"]
