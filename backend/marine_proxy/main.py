"""FastAPI application entrypoint for the marine forecast proxy."""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from marine_proxy.api.routes import api_router
from marine_proxy.api.routes.marine_forecast import error_response
from marine_proxy.core.config import get_settings

logging.getLogger("marine_proxy").setLevel(get_settings().log_level.upper())

app = FastAPI(title="Marine Forecast Proxy", version="0.1.0")

app.include_router(api_router)


class HealthResponse(BaseModel):
    status: str = "ok"


@app.get("/health", response_model=HealthResponse, tags=["health"])
async def health_check() -> HealthResponse:
    """Return service health information for monitoring and load-balancers."""
    return HealthResponse()


@app.exception_handler(StarletteHTTPException)
async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException):
    # Router-level 405s use the same JSON envelope as the forecast route
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        response = error_response(exc.status_code, "Method not allowed")
        if exc.headers:
            response.headers.update(exc.headers)
        return response
    return await http_exception_handler(request, exc)


@app.middleware("http")
async def cors_origin_middleware(request: Request, call_next):
    # Use settings override in tests if present
    settings_override = request.app.dependency_overrides.get(get_settings)
    settings = settings_override() if callable(settings_override) else get_settings()

    response = await call_next(request)
    # Single configured frontend origin, stamped on every response
    response.headers["Access-Control-Allow-Origin"] = settings.cors_allow_origin
    return response
