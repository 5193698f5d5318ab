"""
core/errors.py – Exception taxonomy.
Mỗi lỗi mang sẵn HTTP status + message trả về client (body: {"error": ...}).
Chi tiết kỹ thuật (detail) chỉ để log, không lộ ra client.
"""


class ServiceError(Exception):
    """Base class cho mọi lỗi nghiệp vụ có thể map sang HTTP response."""

    status_code: int = 500
    message: str = "Internal server error"

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail or self.message)
        self.detail = detail or self.message


class CityNotFound(ServiceError):
    status_code = 404
    message = "City not found"


class TimeFormattingError(ServiceError):
    message = "Failed to get time"


class WeatherProviderError(ServiceError):
    message = "Failed to fetch weather data"


class AggregationError(ServiceError):
    message = "Failed to fetch cities data"
