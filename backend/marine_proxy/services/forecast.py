"""Fetch plain-text NWS marine forecasts and reshape them into JSON."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Union

import httpx

from marine_proxy.schemas.forecast import (
    ForecastPeriod,
    ForecastProperties,
    ForecastResponse,
)

logger = logging.getLogger(__name__)

FORECAST_PERIOD_NAME = "Marine Forecast"


class UpstreamError(RuntimeError):
    """Returned inside `FetchFailure` when the forecast provider cannot be reached."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass(frozen=True, slots=True)
class FetchSuccess:
    forecast: ForecastResponse


@dataclass(frozen=True, slots=True)
class FetchFailure:
    error: UpstreamError


FetchResult = Union[FetchSuccess, FetchFailure]


@dataclass(frozen=True, slots=True)
class UpstreamConfig:
    base_url: str
    user_agent: str
    timeout_seconds: float = 10.0


def forecast_url(base_url: str, zone_id: str) -> str:
    """Build ``<base>/<2-letter prefix>/<zone>.txt`` for a zone id."""

    zone = zone_id.lower()
    return f"{base_url.rstrip('/')}/{zone[:2]}/{zone}.txt"


def build_forecast(zone_id: str, text: str) -> ForecastResponse:
    zone = zone_id.upper()
    return ForecastResponse(
        properties=ForecastProperties(
            updated=datetime.now(timezone.utc),
            periods=[
                ForecastPeriod(
                    name=FORECAST_PERIOD_NAME,
                    detailed_forecast=text.strip(),
                    short_forecast=f"Marine conditions for {zone}",
                )
            ],
        )
    )


class ForecastFetcher:
    """Single-attempt GET against the upstream per-zone text product."""

    def __init__(
        self,
        config: UpstreamConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._transport = transport

    async def fetch(self, zone_id: str) -> FetchResult:
        url = forecast_url(self._config.base_url, zone_id)
        logger.info("Fetching marine forecast", extra={"zone_id": zone_id, "url": url})
        try:
            async with httpx.AsyncClient(
                transport=self._transport,
                timeout=self._config.timeout_seconds,
                headers={"User-Agent": self._config.user_agent},
            ) as client:
                response = await client.get(url)
        except httpx.HTTPError as exc:
            logger.warning(
                "Marine forecast request failed",
                extra={"zone_id": zone_id, "url": url, "error": repr(exc)},
            )
            return FetchFailure(UpstreamError("Unable to fetch forecast data"))

        if not response.is_success:
            logger.warning(
                "Marine forecast upstream returned an error status",
                extra={
                    "zone_id": zone_id,
                    "url": url,
                    "status_code": response.status_code,
                },
            )
            return FetchFailure(
                UpstreamError(
                    f"Upstream responded with HTTP {response.status_code}",
                    status_code=response.status_code,
                )
            )

        text = response.text
        logger.info(
            "Fetched marine forecast",
            extra={"zone_id": zone_id, "chars": len(text)},
        )
        return FetchSuccess(build_forecast(zone_id, text))
