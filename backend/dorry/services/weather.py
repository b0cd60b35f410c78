"""Environmental data provider: wind, sun and climate for a site.

Queries WeatherAPI first and OpenWeatherMap as a second source for wind.
Whatever cannot be fetched falls back to typical values for Egypt, so
callers always receive a complete :class:`WeatherData`.
"""

from __future__ import annotations

import logging
import math
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

import httpx

from dorry.exceptions import InvalidInputError, UpstreamDegradedError
from dorry.models.environment import GeoLocation, WeatherData

if TYPE_CHECKING:
    from dorry.config import Settings

logger = logging.getLogger(__name__)

WEATHERAPI_URL = "https://api.weatherapi.com/v1/current.json"
OPENWEATHERMAP_URL = "https://api.openweathermap.org/data/2.5/weather"

FALLBACK_WIND_DIRECTION = "North-East"
FALLBACK_WIND_SPEED = 12.0
FALLBACK_SOLAR_IRRADIANCE = 5.8
FALLBACK_TEMPERATURE = 25.0
FALLBACK_HUMIDITY = 50.0
FALLBACK_LOCATION_NAME = "Egypt"

_CARDINALS: tuple[str, ...] = (
    "North", "North-Northeast", "Northeast", "East-Northeast",
    "East", "East-Southeast", "Southeast", "South-Southeast",
    "South", "South-Southwest", "Southwest", "West-Southwest",
    "West", "West-Northwest", "Northwest", "North-Northwest",
)


def degrees_to_cardinal(degrees: float) -> str:
    """Convert a meteorological bearing to a 16-point compass label.

    Halfway bearings round up (11.25 -> "North-Northeast").
    """
    index = math.floor(degrees / 22.5 + 0.5) % len(_CARDINALS)
    return _CARDINALS[index]


def estimate_solar_irradiance(uv_index: float, cloud_cover: float) -> float:
    """Rough daily irradiance (kWh/m²) from UV index and cloud cover (%)."""
    base = 5.0 * (uv_index / 10)
    cloud_factor = 1 - (cloud_cover / 100) * 0.7
    return max(round(base * cloud_factor, 1), 0.0)


def validate_coordinates(latitude: float | None, longitude: float | None) -> tuple[float, float]:
    """Check that a coordinate pair is present and on the globe.

    Raises:
        InvalidInputError: If either value is missing, not finite, or out
            of range.
    """
    if latitude is None or longitude is None:
        msg = "latitude and longitude are required"
        raise InvalidInputError(msg)
    if not (math.isfinite(latitude) and math.isfinite(longitude)):
        msg = f"Invalid coordinates: ({latitude}, {longitude})"
        raise InvalidInputError(msg)
    if not (-90 <= latitude <= 90 and -180 <= longitude <= 180):
        msg = f"Coordinates out of range: ({latitude}, {longitude})"
        raise InvalidInputError(msg)
    return latitude, longitude


def _section(body: dict[str, Any], key: str) -> dict[str, Any]:
    """A nested object of an upstream body, or ``{}`` if it is not an object."""
    value = body.get(key)
    return value if isinstance(value, dict) else {}


def _finite(value: Any) -> float:
    number = float(value)
    if not math.isfinite(number):
        msg = f"expected a finite number, got {value!r}"
        raise ValueError(msg)
    return number


def _parse_wind(degrees: Any, speed: Any) -> tuple[str, float]:
    """Validated compass label and km/h speed.

    Raises:
        ValueError: If either value is not finite or the speed is negative.
    """
    kph = _finite(speed)
    if kph < 0:
        msg = f"wind speed must not be negative, got {kph}"
        raise ValueError(msg)
    return degrees_to_cardinal(_finite(degrees)), kph


class EnvironmentalDataProvider:
    """Fetches site conditions without ever raising to the caller.

    Args:
        settings: Supplies API keys and the request timeout.  A provider
            without a key is skipped.
        client: Optional shared ``httpx.AsyncClient`` (e.g. with a mock
            transport in tests).  When omitted a client is opened per call.
    """

    def __init__(
        self,
        settings: Settings,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings
        self._client = client

    async def fetch_environmental_data(self, lat: float, lon: float) -> WeatherData:
        """Current wind, solar, temperature and humidity for a coordinate."""
        if self._client is not None:
            return await self._collect(self._client, lat, lon)
        async with httpx.AsyncClient(timeout=self._settings.http_timeout_seconds) as client:
            return await self._collect(client, lat, lon)

    async def _collect(self, client: httpx.AsyncClient, lat: float, lon: float) -> WeatherData:
        current: dict[str, Any] | None = None
        try:
            current = await self._fetch_weatherapi(client, lat, lon)
        except UpstreamDegradedError as exc:
            logger.warning("WeatherAPI unavailable, trying OpenWeatherMap: %s", exc)

        wind_direction, wind_speed = await self._wind(client, current, lat, lon)

        solar = FALLBACK_SOLAR_IRRADIANCE
        temperature = FALLBACK_TEMPERATURE
        humidity = FALLBACK_HUMIDITY
        location_name = FALLBACK_LOCATION_NAME

        if current is not None:
            now = _section(current, "current")
            try:
                irradiance = estimate_solar_irradiance(_finite(now["uv"]), _finite(now["cloud"]))
                solar = _finite(irradiance)
            except (KeyError, TypeError, ValueError):
                logger.warning("WeatherAPI response lacks uv/cloud; using default irradiance")
            try:
                temperature = _finite(now.get("temp_c", temperature))
                humidity = min(max(_finite(now.get("humidity", humidity)), 0.0), 100.0)
            except (TypeError, ValueError):
                temperature, humidity = FALLBACK_TEMPERATURE, FALLBACK_HUMIDITY
                logger.warning("WeatherAPI response has malformed temperature/humidity")
            name = _section(current, "location").get("name")
            if isinstance(name, str) and name.strip():
                location_name = name

        return WeatherData(
            wind_direction=wind_direction,
            wind_speed=wind_speed,
            solar_irradiance=solar,
            temperature=temperature,
            humidity=humidity,
            location=GeoLocation(lat=lat, lon=lon, name=location_name),
            timestamp=datetime.now(UTC),
        )

    async def _wind(
        self,
        client: httpx.AsyncClient,
        current: dict[str, Any] | None,
        lat: float,
        lon: float,
    ) -> tuple[str, float]:
        if current is not None:
            now = _section(current, "current")
            try:
                return _parse_wind(now["wind_degree"], now["wind_kph"])
            except (KeyError, TypeError, ValueError):
                logger.warning("WeatherAPI response lacks valid wind data")

        try:
            data = await self._fetch_openweathermap(client, lat, lon)
            wind = _section(data, "wind")
            # OpenWeatherMap reports m/s.
            return _parse_wind(wind["deg"], _finite(wind["speed"]) * 3.6)
        except UpstreamDegradedError as exc:
            logger.warning("OpenWeatherMap unavailable: %s", exc)
        except (KeyError, TypeError, ValueError):
            logger.warning("OpenWeatherMap response lacks valid wind data")

        return FALLBACK_WIND_DIRECTION, FALLBACK_WIND_SPEED

    async def _fetch_weatherapi(
        self, client: httpx.AsyncClient, lat: float, lon: float
    ) -> dict[str, Any]:
        key = self._settings.weather_api_key
        if not key:
            msg = "WEATHER_API_KEY is not configured"
            raise UpstreamDegradedError(msg)
        return await self._get_json(client, WEATHERAPI_URL, {"key": key, "q": f"{lat},{lon}"})

    async def _fetch_openweathermap(
        self, client: httpx.AsyncClient, lat: float, lon: float
    ) -> dict[str, Any]:
        key = self._settings.openweathermap_api_key
        if not key:
            msg = "OPENWEATHERMAP_API_KEY is not configured"
            raise UpstreamDegradedError(msg)
        return await self._get_json(
            client, OPENWEATHERMAP_URL, {"lat": lat, "lon": lon, "appid": key}
        )

    @staticmethod
    async def _get_json(
        client: httpx.AsyncClient, url: str, params: dict[str, Any]
    ) -> dict[str, Any]:
        try:
            response = await client.get(url, params=params)
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            msg = f"GET {url} failed: {exc}"
            raise UpstreamDegradedError(msg) from exc
        if not isinstance(data, dict):
            msg = f"GET {url} returned {type(data).__name__}, expected an object"
            raise UpstreamDegradedError(msg)
        return data
