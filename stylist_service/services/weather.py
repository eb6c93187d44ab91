"""
Weather Service (v1.1.0)
OpenWeatherMap current conditions for the daily outfit scenarios.
"""
import logging
from typing import Optional, Dict, Any
from dataclasses import dataclass, asdict
import httpx

from stylist_service.config import get_settings

logger = logging.getLogger(__name__)

# Configuration
OPENWEATHER_BASE_URL = "https://api.openweathermap.org/data/2.5/weather"
DEFAULT_UNITS = "metric"  # Celsius
REQUEST_TIMEOUT = 10.0

# OpenWeather "main" groups the scenario builder understands
WEATHER_CONDITIONS = (
    "Clear", "Clouds", "Rain", "Drizzle", "Thunderstorm", "Snow",
    "Mist", "Fog", "Haze", "Smoke", "Dust", "Sand", "Ash", "Squall", "Tornado",
)


@dataclass(frozen=True)
class WeatherSnapshot:
    """Current conditions at the subscriber's coordinates."""
    temp: int  # °C, rounded
    feels_like: int  # °C, rounded
    humidity: int  # %
    condition: str  # e.g. "Clear", "Rain", "Snow"
    description: str  # e.g. "light rain"
    icon: str  # e.g. "01d"
    wind_speed: float  # m/s

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_prompt_context(self) -> str:
        """Generate context string for LLM prompt."""
        return (
            f"{self.temp}°C (feels like {self.feels_like}°C), {self.description}, "
            f"humidity {self.humidity}%, wind {self.wind_speed}m/s"
        )


# Used whenever live weather is unavailable
DEFAULT_WEATHER = WeatherSnapshot(
    temp=20,
    feels_like=20,
    humidity=50,
    condition="Clear",
    description="clear sky",
    icon="01d",
    wind_speed=3.0,
)


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_text(value: Any, default: str) -> str:
    return value if isinstance(value, str) and value else default


def parse_weather_payload(data: Any) -> Optional[WeatherSnapshot]:
    """
    Normalize an OpenWeatherMap /weather response.

    Sections of the wrong type are treated as missing.

    Returns:
        WeatherSnapshot or None if the payload has no usable temperature
    """
    if not isinstance(data, dict):
        return None

    main = _as_dict(data.get("main"))
    weather_list = data.get("weather")
    weather = _as_dict(weather_list[0]) if isinstance(weather_list, list) and weather_list else {}
    wind = _as_dict(data.get("wind"))

    temp = main.get("temp")
    if not isinstance(temp, (int, float)) or isinstance(temp, bool):
        return None

    feels_like = main.get("feels_like", temp)
    if not isinstance(feels_like, (int, float)) or isinstance(feels_like, bool):
        feels_like = temp

    try:
        return WeatherSnapshot(
            temp=int(round(temp)),
            feels_like=int(round(feels_like)),
            humidity=int(main.get("humidity") or 50),
            condition=_as_text(weather.get("main"), "Clear"),
            description=_as_text(weather.get("description"), ""),
            icon=_as_text(weather.get("icon"), "01d"),
            wind_speed=float(wind.get("speed") or 0.0),
        )
    except (TypeError, ValueError, OverflowError) as e:
        logger.warning(f"Weather payload has unusable values: {e}")
        return None


def _query_params(lat: float, lon: float, api_key: str) -> Dict[str, Any]:
    return {
        "lat": lat,
        "lon": lon,
        "appid": api_key,
        "units": DEFAULT_UNITS,
    }


async def get_weather(
    lat: float,
    lon: float,
    api_key: Optional[str] = None,
    client: Optional[httpx.AsyncClient] = None
) -> Optional[WeatherSnapshot]:
    """
    Fetch current weather for a coordinate pair.

    Args:
        lat: Latitude
        lon: Longitude
        api_key: OpenWeatherMap key (defaults to settings)
        client: Optional shared httpx client

    Returns:
        WeatherSnapshot or None if failed
    """
    api_key = api_key or get_settings().openweather_api_key
    if not api_key:
        logger.warning("OPENWEATHER_API_KEY not set - weather disabled")
        return None

    try:
        if client is None:
            async with httpx.AsyncClient(timeout=REQUEST_TIMEOUT) as owned_client:
                response = await owned_client.get(
                    OPENWEATHER_BASE_URL, params=_query_params(lat, lon, api_key)
                )
        else:
            response = await client.get(
                OPENWEATHER_BASE_URL, params=_query_params(lat, lon, api_key)
            )

        if response.status_code != 200:
            logger.warning(f"Weather API returned {response.status_code} for ({lat}, {lon})")
            return None

        snapshot = parse_weather_payload(response.json())
        if snapshot is None:
            logger.warning(f"Weather API payload unusable for ({lat}, {lon})")
            return None

        logger.info(f"Weather: ({lat}, {lon}) - {snapshot.temp}°C, {snapshot.condition}")
        return snapshot

    except httpx.TimeoutException:
        logger.warning(f"Weather API timeout for ({lat}, {lon})")
        return None
    except (httpx.HTTPError, ValueError) as e:
        logger.error(f"Weather API error for ({lat}, {lon}): {e}")
        return None


def get_weather_sync(lat: float, lon: float, api_key: Optional[str] = None) -> Optional[WeatherSnapshot]:
    """
    Synchronous version of get_weather.
    Uses requests instead of httpx for sync context.
    """
    api_key = api_key or get_settings().openweather_api_key
    if not api_key:
        return None

    import requests

    try:
        response = requests.get(
            OPENWEATHER_BASE_URL,
            params=_query_params(lat, lon, api_key),
            timeout=REQUEST_TIMEOUT
        )

        if response.status_code != 200:
            return None

        return parse_weather_payload(response.json())

    except (requests.RequestException, ValueError) as e:
        logger.error(f"Weather sync error: {e}")
        return None


async def get_weather_or_default(
    lat: Optional[float],
    lon: Optional[float],
    api_key: Optional[str] = None,
    client: Optional[httpx.AsyncClient] = None
) -> WeatherSnapshot:
    """
    Fetch weather, degrading to DEFAULT_WEATHER instead of failing.

    Style recommendations are still produced without live weather.
    """
    if lat is None or lon is None:
        logger.info("No coordinates - using default weather")
        return DEFAULT_WEATHER

    snapshot = await get_weather(lat, lon, api_key=api_key, client=client)
    if snapshot is None:
        logger.info("Weather unavailable - using default weather")
        return DEFAULT_WEATHER
    return snapshot
