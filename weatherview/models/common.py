"""Common types and helpers shared across models."""

from datetime import UTC, datetime, timedelta, timezone
from typing import TypeAlias

LocationKey: TypeAlias = str


def utc_now() -> datetime:
    return datetime.now(UTC)


def offset_tz(timezone_offset: int) -> timezone:
    """Fixed-offset tzinfo for an offset in seconds east of UTC."""
    return timezone(timedelta(seconds=timezone_offset))
