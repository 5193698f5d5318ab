"""
handlers/time_handler.py – TimeHandler class.
Trách nhiệm: điều phối /api/time/{city} (lookup city → TimeResolver).
"""
from ..core.cities import CityRegistry
from ..core.clock import TimeResolver
from ..models import TimeReading


class TimeHandler:
    """Xử lý /api/time/{city} endpoint."""

    def __init__(self, registry: CityRegistry, clock: TimeResolver) -> None:
        self._registry = registry
        self._clock    = clock

    async def handle(self, city: str) -> TimeReading:
        cfg  = self._registry.lookup(city)
        frag = self._clock.resolve(cfg.timezone)
        return TimeReading(
            city=cfg.name,
            country=cfg.country,
            timezone=cfg.timezone,
            datetime=frag.datetime,
            time=frag.time,
            timestamp=frag.timestamp,
        )
