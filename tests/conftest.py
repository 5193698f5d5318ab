"""tests/conftest.py – shared fixtures for all tests."""
import asyncio
from contextlib import ExitStack
from datetime import datetime, timezone
from unittest.mock import patch

import httpx
import pytest
from fastapi.testclient import TestClient

from api.core.cities import CityRegistry
from api.core.clock import TimeResolver
from api.core.weather import WeatherResolver
from api.handlers.cities_handler import CityAggregator
from api.handlers.time_handler import TimeHandler
from api.handlers.weather_handler import WeatherHandler

# 2026-10-19 07:05:03.123456 UTC → Berlin 09:05:03 (CEST), Toronto 03:05:03 (EDT), KL 15:05:03
FIXED_INSTANT = datetime(2026, 10, 19, 7, 5, 3, 123456, tzinfo=timezone.utc)

TORONTO_LAT = "43.6532"


def fixed_clock() -> datetime:
    return FIXED_INSTANT


def owm_payload(**main) -> dict:
    """Payload giống OpenWeatherMap /data/2.5/weather (units=metric)."""
    base_main = {"temp": 17.64, "feels_like": 16.5, "humidity": 72, "pressure": 1013}
    base_main.update(main)
    return {
        "coord": {"lon": 13.405, "lat": 52.52},
        "weather": [{"id": 803, "main": "Clouds", "description": "broken clouds", "icon": "04d"}],
        "main": base_main,
        "wind": {"speed": 3.6, "deg": 250},
        "name": "Berlin",
        "cod": 200,
    }


@pytest.fixture
def live_resolver():
    """Factory: WeatherResolver có api_key, gọi AsyncClient với MockTransport (không gọi mạng thật).
    Mọi AsyncClient tạo ra được aclose() khi teardown."""
    clients: list[httpx.AsyncClient] = []

    def _make(handler, api_key: str = "test-key") -> WeatherResolver:
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        clients.append(client)
        return WeatherResolver(api_key=api_key, client=client)

    yield _make
    loop = asyncio.new_event_loop()
    try:
        for client in clients:
            loop.run_until_complete(client.aclose())
    finally:
        loop.close()
    assert all(c.is_closed for c in clients)


@pytest.fixture
def registry() -> CityRegistry:
    return CityRegistry()


@pytest.fixture
def time_resolver() -> TimeResolver:
    return TimeResolver(clock=fixed_clock)


@pytest.fixture
def mock_weather() -> WeatherResolver:
    return WeatherResolver(api_key=None)


@pytest.fixture
def make_client():
    """Factory: patch singletons trong api.deps rồi trả về TestClient."""
    with ExitStack() as stack:
        def _make(weather: WeatherResolver, clock=fixed_clock) -> TestClient:
            reg       = CityRegistry()
            time_h    = TimeHandler(reg, TimeResolver(clock=clock))
            weather_h = WeatherHandler(reg, weather)
            agg       = CityAggregator(reg, time_h, weather_h)
            for name, obj in (
                ("_registry", reg),
                ("_weather", weather),
                ("_time_handler", time_h),
                ("_weather_handler", weather_h),
                ("_aggregator", agg),
            ):
                stack.enter_context(patch(f"api.deps.{name}", obj))
            from api.main import app
            return TestClient(app)
        yield _make


@pytest.fixture
def client(make_client, mock_weather) -> TestClient:
    return make_client(mock_weather)
