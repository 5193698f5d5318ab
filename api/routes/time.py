"""routes/time.py – GET /api/time/{city}"""
from fastapi import APIRouter

from ..deps import get_time_handler
from ..models import ErrorResponse, TimeReading

router = APIRouter(prefix="/api", tags=["Time"])


@router.get(
    "/time/{city}",
    response_model=TimeReading,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Giờ địa phương hiện tại của city",
)
async def city_time(city: str):
    """City key không phân biệt hoa/thường: `BERLIN` == `berlin`."""
    return await get_time_handler().handle(city)
