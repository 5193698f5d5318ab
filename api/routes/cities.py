"""routes/cities.py – GET /api/cities"""
from fastapi import APIRouter

from ..deps import get_aggregator
from ..models import CityBundle, ErrorResponse

router = APIRouter(prefix="/api", tags=["Cities"])


@router.get(
    "/cities",
    response_model=list[CityBundle],
    response_model_exclude_none=True,
    responses={500: {"model": ErrorResponse}},
    summary="Time + weather cho tất cả city",
)
async def all_cities():
    """Một city lỗi → cả response lỗi 500 (không trả danh sách thiếu)."""
    return await get_aggregator().resolve_all()
