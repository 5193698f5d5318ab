"""
core/clock.py – TimeResolver class.
Trách nhiệm: format giờ địa phương theo timezone IANA.

Cả 3 giá trị (datetime, time, timestamp) được tính từ CÙNG một instant
để luôn khớp nhau trong một lần gọi.
"""
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .errors import TimeFormattingError

Clock = Callable[[], datetime]

# Không dùng strftime("%B") – phụ thuộc locale của server
MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
DATETIME_FORMAT = "{month} {day}, {year} at {hms}"
TIME_FORMAT     = "%H:%M:%S"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(instant: datetime) -> str:
    """ISO-8601 UTC, độ chính xác mili-giây, hậu tố 'Z' (vd: 2026-10-19T07:05:03.123Z)."""
    utc = instant.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class TimeFragment:
    datetime: str
    time: str
    timestamp: str


class TimeResolver:
    """Tính giờ hiện tại cho một timezone. Clock có thể inject cho test."""

    def __init__(self, clock: Clock = utc_now) -> None:
        self._clock = clock

    # ── Public ─────────────────────────────────────────────────────────────────

    def resolve(self, tz_name: str) -> TimeFragment:
        """Capture instant một lần, format 2 kiểu theo tz_name + timestamp UTC."""
        zone    = self.load_zone(tz_name)
        instant = self._clock()
        if instant.tzinfo is None:
            raise TimeFormattingError(f"Clock returned a naive datetime: {instant!r}")
        return self.format(instant, zone)

    @staticmethod
    def format(instant: datetime, zone: ZoneInfo) -> TimeFragment:
        local = instant.astimezone(zone)
        hms   = local.strftime(TIME_FORMAT)
        return TimeFragment(
            datetime=DATETIME_FORMAT.format(
                month=MONTH_NAMES[local.month - 1], day=local.day, year=local.year, hms=hms,
            ),
            time=hms,
            timestamp=format_timestamp(instant),
        )

    @staticmethod
    def load_zone(tz_name: str) -> ZoneInfo:
        try:
            return ZoneInfo(tz_name)
        except (ZoneInfoNotFoundError, ValueError, TypeError) as e:
            raise TimeFormattingError(f"Unknown timezone: {tz_name!r}") from e
