"""
core/weather.py – WeatherResolver class.
Trách nhiệm: lấy thời tiết hiện tại theo toạ độ từ OpenWeatherMap.

Hai chế độ, chọn lúc khởi tạo (không check env lúc runtime):
  - api_key rỗng → mock data cố định (chạy local/offline, log cảnh báo)
  - có api_key   → gọi provider; lỗi = lỗi thật, KHÔNG fallback sang mock
"""
import logging
import math
from dataclasses import dataclass
from typing import Any, Optional

import httpx

from .errors import WeatherProviderError

logger = logging.getLogger(__name__)

DEFAULT_URL     = "https://api.openweathermap.org/data/2.5/weather"
DEFAULT_UNITS   = "metric"
DEFAULT_TIMEOUT = 10.0


@dataclass(frozen=True)
class WeatherFragment:
    temperature: int
    description: str
    humidity: int
    wind_speed: float
    icon: str
    feels_like: int
    pressure: Optional[int] = None


MOCK_WEATHER = WeatherFragment(
    temperature=22,
    description="Partly cloudy",
    humidity=65,
    wind_speed=5.5,
    icon="02d",
    feels_like=24,
)


def round_half_up(value: float) -> int:
    """Làm tròn .5 lên (21.5 → 22, -0.5 → 0), khác với round() banker's rounding."""
    return int(math.floor(value + 0.5))


class WeatherResolver:
    """Wrapper OpenWeatherMap current-weather API (async, httpx)."""

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = DEFAULT_URL,
        units: str = DEFAULT_UNITS,
        timeout: float = DEFAULT_TIMEOUT,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._api_key  = (api_key or "").strip()
        self._base_url = base_url
        self._units    = units
        self._timeout  = timeout
        self._client   = client

    @property
    def is_mock(self) -> bool:
        return not self._api_key

    def bind_client(self, client: Optional[httpx.AsyncClient]) -> None:
        """Gắn AsyncClient dùng chung (mở/đóng trong app lifespan)."""
        self._client = client

    # ── Public API ─────────────────────────────────────────────────────────────

    async def resolve(self, latitude: float, longitude: float) -> WeatherFragment:
        if self.is_mock:
            logger.warning("OPENWEATHER_API_KEY is not set, returning mock weather data")
            return MOCK_WEATHER
        payload = await self._fetch(latitude, longitude)
        return self.parse(payload)

    @staticmethod
    def parse(payload: Any) -> WeatherFragment:
        """Map JSON của provider → WeatherFragment. Thiếu field / sai kiểu → WeatherProviderError."""
        try:
            main    = payload["main"]
            weather = payload["weather"][0]
            wind    = payload["wind"]
            pressure = main.get("pressure")
            return WeatherFragment(
                temperature=round_half_up(float(main["temp"])),
                description=str(weather["description"]),
                humidity=int(main["humidity"]),
                wind_speed=float(wind["speed"]),
                icon=str(weather["icon"]),
                feels_like=round_half_up(float(main["feels_like"])),
                pressure=int(pressure) if pressure is not None else None,
            )
        except (KeyError, IndexError, TypeError, ValueError, AttributeError) as e:
            raise WeatherProviderError(f"Malformed provider payload: {e!r}") from e

    # ── Private helpers ────────────────────────────────────────────────────────

    async def _fetch(self, latitude: float, longitude: float) -> Any:
        params = {
            "lat":   latitude,
            "lon":   longitude,
            "appid": self._api_key,
            "units": self._units,
        }
        try:
            if self._client is not None:
                response = await self._client.get(self._base_url, params=params)
            else:
                async with httpx.AsyncClient(timeout=self._timeout) as client:
                    response = await client.get(self._base_url, params=params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"Weather API error: status {e.response.status_code}")
            raise WeatherProviderError(f"Provider returned {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.error(f"Weather API error: {type(e).__name__}: {e}")
            raise WeatherProviderError(f"Provider request failed: {e}") from e
        except ValueError as e:
            logger.error(f"Weather API error: invalid JSON ({e})")
            raise WeatherProviderError("Provider returned invalid JSON") from e
