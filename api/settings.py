"""
settings.py – Runtime configuration (đọc từ environment / .env).
"""
import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from .core.weather import DEFAULT_TIMEOUT, DEFAULT_URL


class Settings(BaseModel):
    """Cấu hình bất biến, tạo 1 lần khi server start."""

    model_config = ConfigDict(frozen=True)

    openweather_api_key: str = Field(default="", description="Rỗng → weather chạy mock mode")
    openweather_url:     str = DEFAULT_URL
    weather_timeout:     float = Field(default=DEFAULT_TIMEOUT, gt=0)
    host:                str = "0.0.0.0"
    port:                int = Field(default=5000, ge=1, le=65535)
    log_level:           str = "INFO"
    cors_origins:        list[str] = ["*"]


def load_settings() -> Settings:
    load_dotenv()
    origins = os.getenv("CORS_ORIGINS", "*")
    return Settings(
        openweather_api_key=os.getenv("OPENWEATHER_API_KEY", ""),
        openweather_url=os.getenv("OPENWEATHER_URL", DEFAULT_URL),
        weather_timeout=float(os.getenv("WEATHER_TIMEOUT", DEFAULT_TIMEOUT)),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "5000")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
    )
