"""API route registrations."""
from fastapi import APIRouter

from marine_proxy.api.routes import marine_forecast


api_router = APIRouter()
api_router.include_router(marine_forecast.router)

__all__ = ["api_router"]
