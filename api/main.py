"""
main.py – FastAPI app entry point (slim wire-up only).
Chỉ kết nối routes, middleware, error handlers và lifespan. Không chứa business logic.
"""
import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core.errors import ServiceError
from .deps import get_settings, get_weather
from .routes import cities, system, weather
from .routes import time as time_routes

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    resolver = get_weather()
    mode = "mock" if resolver.is_mock else "live (OpenWeatherMap)"
    logger.info(f"Server running on http://{settings.host}:{settings.port} – weather mode: {mode}")
    async with httpx.AsyncClient(timeout=settings.weather_timeout) as client:
        resolver.bind_client(client)
        try:
            yield
        finally:
            resolver.bind_client(None)
    logger.info("Shutdown.")


app = FastAPI(
    title="City Time & Weather API",
    description="Giờ địa phương + thời tiết hiện tại cho Berlin, Toronto, Kuala Lumpur.",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Error handlers: mọi lỗi → {"error": "..."} ─────────────────────────────────

@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} → {exc.status_code}: {exc.detail}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"{request.method} {request.url.path} → unhandled error")
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


app.include_router(system.router)
app.include_router(time_routes.router)
app.include_router(weather.router)
app.include_router(cities.router)
