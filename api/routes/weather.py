"""routes/weather.py – GET /api/weather/{city}"""
from fastapi import APIRouter

from ..deps import get_weather_handler
from ..models import ErrorResponse, WeatherReading

router = APIRouter(prefix="/api", tags=["Weather"])


@router.get(
    "/weather/{city}",
    response_model=WeatherReading,
    response_model_exclude_none=True,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Thời tiết hiện tại của city",
)
async def city_weather(city: str):
    """
    Không cấu hình `OPENWEATHER_API_KEY` → trả mock data cố định (không có `pressure`).
    Có key nhưng provider lỗi → 500, không fallback sang mock.
    """
    return await get_weather_handler().handle(city)
