"""
handlers/cities_handler.py – CityAggregator class.
Trách nhiệm: /api/cities – fan-out time + weather cho MỌI city, join kết quả.

Quy tắc:
  - time và weather của 1 city chạy song song; các city cũng chạy song song
  - chờ đủ tất cả rồi mới trả về, giữ thứ tự đăng ký của registry
  - 1 lỗi bất kỳ → huỷ MỌI call chưa xong (kể cả call còn lại của chính city lỗi),
    raise AggregationError (không trả list thiếu)
"""
import asyncio
import logging

from ..core.cities import CityRegistry
from ..core.errors import AggregationError, ServiceError
from ..models import CityBundle
from .time_handler import TimeHandler
from .weather_handler import WeatherHandler

logger = logging.getLogger(__name__)


class CityAggregator:
    """Xử lý /api/cities endpoint – gọi trực tiếp handler in-process."""

    def __init__(self, registry: CityRegistry, time: TimeHandler, weather: WeatherHandler) -> None:
        self._registry = registry
        self._time     = time
        self._weather  = weather

    async def resolve_all(self) -> list[CityBundle]:
        keys = self._registry.keys()
        # Flat list [time_0, weather_0, time_1, weather_1, ...]
        tasks = []
        for key in keys:
            tasks.append(asyncio.ensure_future(self._time.handle(key)))
            tasks.append(asyncio.ensure_future(self._weather.handle(key)))
        try:
            results = await asyncio.gather(*tasks)
        except ServiceError as e:
            logger.error(f"Cities aggregation failed: {type(e).__name__}: {e.detail}")
            raise AggregationError(e.detail) from e
        except Exception as e:
            logger.exception("Cities aggregation failed unexpectedly")
            raise AggregationError(str(e)) from e
        finally:
            for t in tasks:
                if not t.done():
                    t.cancel()
        return [
            CityBundle(city=key, time=results[2 * i], weather=results[2 * i + 1])
            for i, key in enumerate(keys)
        ]
