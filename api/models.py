"""
models.py – Pydantic schemas cho response.
Field JSON dùng camelCase (windSpeed, feelsLike) qua alias.
"""
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class _Schema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


# ── Readings ───────────────────────────────────────────────────────────────────

class TimeReading(_Schema):
    city: str
    country: str
    timezone: str = Field(description="IANA timezone, vd: Europe/Berlin")
    datetime: str = Field(description="Ngày giờ địa phương, vd: October 19, 2026 at 09:05:03")
    time: str     = Field(description="Giờ địa phương HH:MM:SS (24h)")
    timestamp: str = Field(description="Instant ISO-8601 UTC")


class WeatherReading(_Schema):
    city: str
    country: str
    temperature: int = Field(description="°C, đã làm tròn")
    description: str
    humidity: int    = Field(description="%")
    wind_speed: float = Field(alias="windSpeed", description="m/s")
    icon: str
    feels_like: int   = Field(alias="feelsLike", description="°C, đã làm tròn")
    pressure: Optional[int] = Field(default=None, description="hPa – không có ở mock mode")


class CityBundle(_Schema):
    city: str = Field(description="City key, vd: kualalumpur")
    time: TimeReading
    weather: WeatherReading


# ── System ─────────────────────────────────────────────────────────────────────

class HealthResponse(_Schema):
    status: Literal["ok"] = "ok"
    timestamp: str


class ErrorResponse(_Schema):
    error: str
