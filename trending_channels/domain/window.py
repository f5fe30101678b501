"""Daily activity window bounded by a fixed local boundary hour.

Pure domain logic, no framework dependencies.
"""

from datetime import datetime, timedelta, timezone

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from trending_channels.domain.models import TimeWindow

DEFAULT_TIMEZONE = "Asia/Tokyo"
DEFAULT_BOUNDARY_HOUR = 4


def _zone(tz: str) -> ZoneInfo:
    try:
        return ZoneInfo(tz)
    except (ZoneInfoNotFoundError, KeyError, ValueError):
        raise ValueError(f"Invalid timezone: {tz!r}")


def compute_window(now: datetime, tz: str = DEFAULT_TIMEZONE, boundary_hour: int = DEFAULT_BOUNDARY_HOUR) -> TimeWindow:
    """Return the most recent full local day ending at ``boundary_hour``.

    ``end`` is the latest boundary at or before ``now`` in ``tz``; ``start``
    is the same wall-clock boundary one local calendar day earlier, so DST
    days span 23 or 25 hours. Both bounds come back in UTC.
    """
    if now.tzinfo is None or now.utcoffset() is None:
        raise ValueError("now must be timezone-aware")
    if not 0 <= boundary_hour <= 23:
        raise ValueError(f"Invalid boundary hour: {boundary_hour}")

    zone = _zone(tz)
    now_local = now.astimezone(zone)

    end_date = now_local.date()
    if now_local.hour < boundary_hour:
        end_date -= timedelta(days=1)
    start_date = end_date - timedelta(days=1)

    end_local = datetime(end_date.year, end_date.month, end_date.day, boundary_hour, tzinfo=zone)
    start_local = datetime(start_date.year, start_date.month, start_date.day, boundary_hour, tzinfo=zone)

    return TimeWindow(
        start=start_local.astimezone(timezone.utc),
        end=end_local.astimezone(timezone.utc),
    )
