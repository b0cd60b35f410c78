"""Builders for domain objects shared across test modules."""

from __future__ import annotations

from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock

from dorry.models.environment import GeoLocation, WeatherData
from dorry.models.project import ProjectCreate
from dorry.services.weather import EnvironmentalDataProvider


def make_weather(wind_direction: str = "North-East") -> WeatherData:
    return WeatherData(
        wind_direction=wind_direction,
        wind_speed=12.0,
        solar_irradiance=5.8,
        temperature=25.0,
        humidity=50.0,
        location=GeoLocation(lat=30.03, lon=31.47, name="New Cairo"),
        timestamp=datetime(2025, 6, 1, 12, 0, tzinfo=UTC),
    )


def make_project_create(**overrides: object) -> ProjectCreate:
    fields: dict[str, object] = {
        "name": "Villa Nile",
        "land_area": 750.0,
        "budget": 3_000_000,
        "latitude": 30.03,
        "longitude": 31.47,
        "location": "New Cairo",
    }
    fields.update(overrides)
    return ProjectCreate(**fields)  # type: ignore[arg-type]


def make_environment(wind_direction: str = "North-East") -> MagicMock:
    """An environmental provider stub that always reports the same weather."""
    provider = MagicMock(spec=EnvironmentalDataProvider)
    provider.fetch_environmental_data = AsyncMock(return_value=make_weather(wind_direction))
    return provider
