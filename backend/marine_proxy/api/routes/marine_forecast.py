"""Marine forecast proxy endpoint."""
from __future__ import annotations

import logging
import re

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from marine_proxy.core.config import Settings, get_settings
from marine_proxy.deps import get_forecast_fetcher, get_rate_limiter, get_zone_validator
from marine_proxy.schemas.forecast import ErrorResponse, ForecastResponse
from marine_proxy.services.forecast import FetchFailure, ForecastFetcher
from marine_proxy.services.rate_limit import RateLimiter
from marine_proxy.services.zones import ZoneValidator

logger = logging.getLogger(__name__)

router = APIRouter(tags=["marine-forecast"])

ROUTE_PREFIX = "/marine-forecast"
LOOPBACK_ADDRESS = "127.0.0.1"
PREFLIGHT_MAX_AGE_SECONDS = 86400

# Methods outside this list are answered by the app-level 405 handler.
_ROUTED_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
_ZONE_SEGMENT = re.compile(r"^/([^/]+)")


def client_address(request: Request) -> str:
    """Resolve the caller's address from proxy headers, then the socket."""

    forwarded_for = request.headers.get("x-forwarded-for")
    if forwarded_for:
        first = forwarded_for.split(",")[0].strip()
        if first:
            return first
    real_ip = request.headers.get("x-real-ip")
    if real_ip:
        return real_ip.strip()
    if request.client and request.client.host:
        return request.client.host
    return LOOPBACK_ADDRESS


def extract_zone_segment(remainder: str) -> str | None:
    """Return the first path segment after the route prefix, if any."""

    match = _ZONE_SEGMENT.match(remainder)
    return match.group(1) if match else None


def error_response(status_code: int, error: str, message: str | None = None, **extra: str) -> JSONResponse:
    body = ErrorResponse(error=error, message=message, **extra)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def _preflight_response(settings: Settings) -> Response:
    return Response(
        status_code=status.HTTP_200_OK,
        headers={
            "Access-Control-Allow-Origin": settings.cors_allow_origin,
            "Access-Control-Allow-Methods": "GET, OPTIONS",
            "Access-Control-Allow-Headers": "Content-Type",
            "Access-Control-Max-Age": str(PREFLIGHT_MAX_AGE_SECONDS),
        },
    )


@router.api_route(
    ROUTE_PREFIX + "{remainder:path}",
    methods=_ROUTED_METHODS,
    summary="Plain-text NWS marine forecast for one Alaska zone, as JSON",
    responses={
        200: {"model": ForecastResponse},
        400: {"model": ErrorResponse},
        405: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def marine_forecast(
    request: Request,
    remainder: str,
    settings: Settings = Depends(get_settings),
    limiter: RateLimiter = Depends(get_rate_limiter),
    validator: ZoneValidator = Depends(get_zone_validator),
    fetcher: ForecastFetcher = Depends(get_forecast_fetcher),
) -> Response:
    if request.method == "OPTIONS":
        return _preflight_response(settings)
    if request.method != "GET":
        return error_response(status.HTTP_405_METHOD_NOT_ALLOWED, "Method not allowed")

    client_key = client_address(request)
    if not limiter.admit(client_key):
        logger.info("Rate limit exceeded", extra={"client": client_key})
        return error_response(
            status.HTTP_429_TOO_MANY_REQUESTS,
            "Rate limit exceeded",
            "Too many requests. Please try again later.",
        )

    segment = extract_zone_segment(remainder)
    if segment is None:
        return error_response(
            status.HTTP_400_BAD_REQUEST,
            "Zone ID required",
            "Zone ID is required in path: /marine-forecast/{zoneId}",
            path=request.url.path,
        )

    zone_id = segment.upper()
    if not validator.validate(zone_id):
        logger.info("Rejected unknown zone id", extra={"zone_id": zone_id, "client": client_key})
        return error_response(
            status.HTTP_400_BAD_REQUEST,
            "Invalid zone ID",
            "Zone ID must be a valid Alaska marine zone (PKZ###)",
        )

    try:
        result = await fetcher.fetch(zone_id)
    except Exception:
        logger.exception("Marine forecast fetch crashed", extra={"zone_id": zone_id})
        result = None
    if result is None or isinstance(result, FetchFailure):
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Internal server error",
            "Unable to fetch marine forecast data",
        )

    logger.info(
        "Served marine forecast",
        extra={
            "zone_id": zone_id,
            "client": client_key,
        },
    )
    return JSONResponse(
        content=result.forecast.model_dump(mode="json", by_alias=True),
        headers={
            "Cache-Control": f"public, max-age={settings.forecast_cache_max_age_seconds}",
        },
    )
