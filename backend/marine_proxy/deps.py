"""FastAPI dependency helpers."""
from __future__ import annotations

from functools import lru_cache

from fastapi import Depends

from marine_proxy.core.config import Settings, get_settings
from marine_proxy.services.forecast import ForecastFetcher, UpstreamConfig
from marine_proxy.services.rate_limit import RateConfig, RateLimiter
from marine_proxy.services.zones import ZoneValidator


@lru_cache
def _create_rate_limiter(window_seconds: int, max_requests: int) -> RateLimiter:
    return RateLimiter(
        RateConfig(window_seconds=window_seconds, max_requests=max_requests)
    )


def get_rate_limiter(settings: Settings = Depends(get_settings)) -> RateLimiter:
    """Return the process-wide limiter for the configured window."""

    return _create_rate_limiter(
        int(settings.rate_limit_window_seconds), int(settings.rate_limit_max_requests)
    )


def get_zone_validator(settings: Settings = Depends(get_settings)) -> ZoneValidator:
    return ZoneValidator(settings.marine_zones)


def get_forecast_fetcher(
    settings: Settings = Depends(get_settings),
) -> ForecastFetcher:
    """Provide a forecast fetcher per request."""

    return ForecastFetcher(
        UpstreamConfig(
            base_url=settings.upstream_base_url,
            user_agent=settings.upstream_user_agent,
            timeout_seconds=settings.upstream_timeout_seconds,
        )
    )
