"""Environmental snapshot models."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class GeoLocation(BaseModel):
    """Coordinates and a human-readable place name."""

    model_config = ConfigDict(frozen=True)

    lat: float = Field(ge=-90, le=90)
    lon: float = Field(ge=-180, le=180)
    name: str


class WeatherData(BaseModel):
    """Environmental conditions at a site when a design was generated.

    ``wind_direction`` is a compass label such as ``"North-East"`` or
    ``"South-Southwest"``; layout orientation is derived from it by
    substring matching.
    """

    model_config = ConfigDict(frozen=True)

    wind_direction: str
    wind_speed: float = Field(ge=0)
    solar_irradiance: float = Field(ge=0)
    temperature: float
    humidity: float = Field(ge=0, le=100)
    location: GeoLocation
    timestamp: datetime
