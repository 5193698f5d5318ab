"""
deps.py – Dependency Injection: singleton service instances.
Khởi tạo 1 lần duy nhất khi server start.
"""
from .settings import Settings, load_settings
from .core.cities import CityRegistry
from .core.clock import TimeResolver
from .core.weather import WeatherResolver
from .handlers.time_handler import TimeHandler
from .handlers.weather_handler import WeatherHandler
from .handlers.cities_handler import CityAggregator

# ── Core singletons ────────────────────────────────────────────────────────────

_settings = load_settings()
_registry = CityRegistry()
_clock    = TimeResolver()
_weather  = WeatherResolver(
    api_key=_settings.openweather_api_key,
    base_url=_settings.openweather_url,
    timeout=_settings.weather_timeout,
)

# ── Handler singletons ─────────────────────────────────────────────────────────

_time_handler    = TimeHandler(_registry, _clock)
_weather_handler = WeatherHandler(_registry, _weather)
_aggregator      = CityAggregator(_registry, _time_handler, _weather_handler)


# ── Getters (dùng trong routes) ────────────────────────────────────────────────

def get_settings()        -> Settings:        return _settings
def get_weather()         -> WeatherResolver: return _weather
def get_time_handler()    -> TimeHandler:     return _time_handler
def get_weather_handler() -> WeatherHandler:  return _weather_handler
def get_aggregator()      -> CityAggregator:  return _aggregator
