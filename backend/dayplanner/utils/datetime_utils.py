"""
Timezone-aware datetime utilities.

All timestamps handled by the planner are timezone-aware UTC datetimes.
Day boundaries are computed in a configurable local timezone.
"""

from datetime import datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo

# UTC timezone constant
UTC = timezone.utc


def now_utc() -> datetime:
    """
    Get current UTC datetime (timezone-aware).

    Returns:
        datetime: Current UTC time with tzinfo set to UTC
    """
    return datetime.now(UTC)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Ensure datetime is timezone-aware and in UTC.

    Args:
        dt: datetime to convert (can be None, naive, or timezone-aware)

    Returns:
        Optional[datetime]: UTC timezone-aware datetime, or None if input is None
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        # Naive datetime - assume UTC
        return dt.replace(tzinfo=UTC)

    return dt.astimezone(UTC)


def to_naive_utc(dt: datetime) -> datetime:
    """Convert to a naive UTC datetime for storage in SQLite DateTime columns."""
    return ensure_utc(dt).replace(tzinfo=None)


def day_bounds(moment: datetime, user_timezone: str) -> tuple[datetime, datetime]:
    """
    Get the start (00:00:00) and end (23:59:59) of the local day containing ``moment``.

    Args:
        moment: Any timezone-aware (or naive UTC) datetime
        user_timezone: IANA timezone name (e.g., "Asia/Tokyo", "UTC")

    Returns:
        tuple[datetime, datetime]: Day start and end, both as UTC datetimes

    Example:
        >>> day_bounds(datetime(2024, 1, 19, 23, 0, tzinfo=UTC), "Asia/Tokyo")
        (datetime(2024, 1, 19, 15, 0, tzinfo=UTC), datetime(2024, 1, 20, 14, 59, 59, tzinfo=UTC))
    """
    local = ensure_utc(moment).astimezone(ZoneInfo(user_timezone))
    start = local.replace(hour=0, minute=0, second=0, microsecond=0)
    end = local.replace(hour=23, minute=59, second=59, microsecond=0)
    return start.astimezone(UTC), end.astimezone(UTC)
