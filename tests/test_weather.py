"""
Tests for the OpenWeatherMap client.
"""
import asyncio
from unittest.mock import MagicMock, patch

import httpx
import requests

from stylist_service.services.weather import (
    DEFAULT_WEATHER,
    OPENWEATHER_BASE_URL,
    get_weather,
    get_weather_or_default,
    get_weather_sync,
    parse_weather_payload,
)

SEOUL_PAYLOAD = {
    "weather": [{"main": "Snow", "description": "light snow", "icon": "13d"}],
    "main": {"temp": -3.6, "feels_like": -8.2, "humidity": 81},
    "wind": {"speed": 4.1},
    "name": "Seoul",
}


def mock_client(handler):
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class TestParseWeatherPayload:
    """Tests for parse_weather_payload."""

    def test_normalizes_fields(self):
        snapshot = parse_weather_payload(SEOUL_PAYLOAD)

        assert snapshot.temp == -4
        assert snapshot.feels_like == -8
        assert snapshot.humidity == 81
        assert snapshot.condition == "Snow"
        assert snapshot.description == "light snow"
        assert snapshot.icon == "13d"
        assert snapshot.wind_speed == 4.1

    def test_missing_optional_fields(self):
        snapshot = parse_weather_payload({"main": {"temp": 21.2}})

        assert snapshot.temp == 21
        assert snapshot.feels_like == 21
        assert snapshot.humidity == 50
        assert snapshot.condition == "Clear"
        assert snapshot.icon == "01d"
        assert snapshot.wind_speed == 0.0

    def test_no_temperature(self):
        assert parse_weather_payload({"main": {}}) is None
        assert parse_weather_payload({"main": {"temp": "warm"}}) is None
        assert parse_weather_payload("nope") is None

    def test_sections_of_wrong_type_are_ignored(self):
        snapshot = parse_weather_payload({"main": {"temp": 5}, "weather": {"main": "Snow"}, "wind": "calm"})

        assert snapshot.temp == 5
        assert snapshot.condition == "Clear"
        assert snapshot.wind_speed == 0.0

    def test_non_string_condition_uses_defaults(self):
        snapshot = parse_weather_payload({"main": {"temp": 5}, "weather": [{"main": 7, "icon": None}]})

        assert snapshot.condition == "Clear"
        assert snapshot.icon == "01d"

    def test_main_of_wrong_type(self):
        assert parse_weather_payload({"main": [1, 2]}) is None
        assert parse_weather_payload({"main": {"temp": True}}) is None

    def test_unconvertible_values(self):
        assert parse_weather_payload({"main": {"temp": 5, "humidity": "humid"}}) is None
        assert parse_weather_payload({"main": {"temp": float("nan")}}) is None
        assert parse_weather_payload({"main": {"temp": 5}, "wind": {"speed": "fast"}}) is None

    def test_prompt_context(self):
        context = parse_weather_payload(SEOUL_PAYLOAD).to_prompt_context()
        assert context == "-4°C (feels like -8°C), light snow, humidity 81%, wind 4.1m/s"


class TestGetWeather:
    """Tests for the async fetch."""

    def test_success(self):
        seen = {}

        def handler(request):
            seen["params"] = dict(request.url.params)
            return httpx.Response(200, json=SEOUL_PAYLOAD)

        snapshot = asyncio.run(get_weather(37.56, 126.97, api_key="owm-key", client=mock_client(handler)))

        assert snapshot.condition == "Snow"
        assert seen["params"] == {"lat": "37.56", "lon": "126.97", "appid": "owm-key", "units": "metric"}

    def test_non_200_returns_none(self):
        client = mock_client(lambda request: httpx.Response(401, json={"message": "Invalid API key"}))
        assert asyncio.run(get_weather(1.0, 2.0, api_key="bad", client=client)) is None

    def test_timeout_returns_none(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out")

        assert asyncio.run(get_weather(1.0, 2.0, api_key="k", client=mock_client(handler))) is None

    def test_without_key_returns_none(self):
        assert asyncio.run(get_weather(1.0, 2.0)) is None


class TestGetWeatherOrDefault:
    """Default weather replaces every failure."""

    def test_no_coordinates(self):
        assert asyncio.run(get_weather_or_default(None, None, api_key="k")) == DEFAULT_WEATHER

    def test_api_failure(self):
        client = mock_client(lambda request: httpx.Response(500, text="boom"))
        assert asyncio.run(get_weather_or_default(1.0, 2.0, api_key="k", client=client)) == DEFAULT_WEATHER

    def test_invalid_json(self):
        client = mock_client(lambda request: httpx.Response(200, content=b"<html>"))
        assert asyncio.run(get_weather_or_default(1.0, 2.0, api_key="k", client=client)) == DEFAULT_WEATHER

    def test_malformed_payload(self):
        payloads = [
            {"main": {"temp": 5, "humidity": "humid"}},
            {"main": [1, 2]},
        ]
        for payload in payloads:
            client = mock_client(lambda request, payload=payload: httpx.Response(200, json=payload))
            assert asyncio.run(get_weather_or_default(1.0, 2.0, api_key="k", client=client)) == DEFAULT_WEATHER

    def test_live_weather_wins(self):
        client = mock_client(lambda request: httpx.Response(200, json=SEOUL_PAYLOAD))
        snapshot = asyncio.run(get_weather_or_default(1.0, 2.0, api_key="k", client=client))
        assert snapshot.temp == -4

    def test_default_weather_values(self):
        assert DEFAULT_WEATHER.temp == 20
        assert DEFAULT_WEATHER.condition == "Clear"
        assert DEFAULT_WEATHER.humidity == 50


class TestGetWeatherSync:
    """Tests for the requests-based variant."""

    @patch("requests.get")
    def test_success(self, mock_get):
        mock_get.return_value = MagicMock(status_code=200, json=MagicMock(return_value=SEOUL_PAYLOAD))

        snapshot = get_weather_sync(37.56, 126.97, api_key="owm-key")

        assert snapshot.temp == -4
        args, kwargs = mock_get.call_args
        assert args[0] == OPENWEATHER_BASE_URL
        assert kwargs["params"]["appid"] == "owm-key"

    @patch("requests.get")
    def test_request_error(self, mock_get):
        mock_get.side_effect = requests.ConnectionError("down")
        assert get_weather_sync(1.0, 2.0, api_key="k") is None
