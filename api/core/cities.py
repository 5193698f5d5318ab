"""
core/cities.py – CityRegistry class.
Bảng thành phố cố định: tên hiển thị, quốc gia, timezone IANA, toạ độ.
Trách nhiệm: lookup ONLY – read-only, không có side effect.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterator, Mapping

from .errors import CityNotFound


@dataclass(frozen=True)
class CityConfig:
    key: str
    name: str
    country: str
    timezone: str
    latitude: float
    longitude: float


_CITY_LIST: tuple[CityConfig, ...] = (
    CityConfig("berlin",      "Berlin",       "Germany",  "Europe/Berlin",     52.52,   13.405),
    CityConfig("toronto",     "Toronto",      "Canada",   "America/Toronto",   43.6532, -79.3832),
    CityConfig("kualalumpur", "Kuala Lumpur", "Malaysia", "Asia/Kuala_Lumpur",  3.1390, 101.6869),
)

CITIES: Mapping[str, CityConfig] = MappingProxyType({c.key: c for c in _CITY_LIST})


class CityRegistry:
    """Read-only view trên bảng thành phố, giữ thứ tự đăng ký."""

    def __init__(self, cities: Mapping[str, CityConfig] = CITIES) -> None:
        for key in cities:
            if key != key.lower():
                raise ValueError(f"City key must be lowercase: {key!r}")
        self._cities = MappingProxyType(dict(cities))

    # ── Public ─────────────────────────────────────────────────────────────────

    def lookup(self, key: str) -> CityConfig:
        """Tìm city theo key (không phân biệt hoa/thường). Raise CityNotFound nếu không có."""
        city = self._cities.get((key or "").strip().lower())
        if city is None:
            raise CityNotFound()
        return city

    def keys(self) -> list[str]:
        return list(self._cities)

    def __iter__(self) -> Iterator[CityConfig]:
        return iter(self._cities.values())

    def __len__(self) -> int:
        return len(self._cities)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.strip().lower() in self._cities
