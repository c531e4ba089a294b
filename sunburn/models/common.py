"""Common time helpers shared across models."""

from datetime import UTC, datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


def utc_now() -> datetime:
    return datetime.now(UTC)


def parse_timestamp(value: str | int | float | datetime) -> datetime:
    """Parse an ISO string, epoch seconds or datetime into an aware UTC datetime.

    Naive values are assumed to be UTC.
    """
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, bool):
        raise ValueError(f"Not a timestamp: {value!r}")
    elif isinstance(value, (int, float)):
        return datetime.fromtimestamp(value, UTC)
    else:
        dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def get_zone(zone_id: str) -> ZoneInfo:
    try:
        return ZoneInfo(zone_id)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"Unknown time zone: {zone_id}") from e


def local_hour(instant: datetime, zone_id: str) -> int:
    """Hour of day (0-23) of an instant in the given IANA zone."""
    return instant.astimezone(get_zone(zone_id)).hour


def local_time(instant: datetime, zone_id: str) -> datetime:
    return instant.astimezone(get_zone(zone_id))
