"""Schemas for the marine forecast endpoint."""
from __future__ import annotations

from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class ForecastPeriod(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., description="Label for the forecast period")
    detailed_forecast: str = Field(
        ..., alias="detailedForecast", description="Full forecast text"
    )
    short_forecast: str = Field(
        ..., alias="shortForecast", description="One-line summary"
    )


class ForecastProperties(BaseModel):
    updated: datetime = Field(..., description="When the proxy built this payload")
    periods: List[ForecastPeriod] = Field(default_factory=list)


class ForecastResponse(BaseModel):
    properties: ForecastProperties


class ErrorResponse(BaseModel):
    error: str
    message: str | None = None
    path: str | None = None
