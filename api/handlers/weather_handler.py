"""
handlers/weather_handler.py – WeatherHandler class.
Trách nhiệm: điều phối /api/weather/{city} (lookup city → WeatherResolver).
"""
from ..core.cities import CityRegistry
from ..core.weather import WeatherResolver
from ..models import WeatherReading


class WeatherHandler:
    """Xử lý /api/weather/{city} endpoint."""

    def __init__(self, registry: CityRegistry, weather: WeatherResolver) -> None:
        self._registry = registry
        self._weather  = weather

    async def handle(self, city: str) -> WeatherReading:
        cfg  = self._registry.lookup(city)
        frag = await self._weather.resolve(cfg.latitude, cfg.longitude)
        return WeatherReading(
            city=cfg.name,
            country=cfg.country,
            temperature=frag.temperature,
            description=frag.description,
            humidity=frag.humidity,
            wind_speed=frag.wind_speed,
            icon=frag.icon,
            feels_like=frag.feels_like,
            pressure=frag.pressure,
        )
