"""routes/system.py – /api/health"""
from fastapi import APIRouter

from ..core.clock import format_timestamp, utc_now
from ..models import HealthResponse

router = APIRouter(prefix="/api", tags=["System"])


@router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(timestamp=format_timestamp(utc_now()))
