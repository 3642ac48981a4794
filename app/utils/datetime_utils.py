"""
Timezone-aware datetime helpers.
- Store and compute in UTC in DB.
- API responses expose datetimes in the configured APP_TIMEZONE; never Z.
"""
from datetime import datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo

from app.core.config import settings

UTC = timezone.utc


def now_utc() -> datetime:
    """Current time in UTC (timezone-aware). Use for created_at, updated_at."""
    return datetime.now(UTC)


def to_local(dt: Optional[datetime]) -> Optional[datetime]:
    """Convert to APP_TIMEZONE. Naive datetimes are treated as UTC before converting."""
    if dt is None:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.astimezone(ZoneInfo(settings.APP_TIMEZONE))


def iso_local(dt: Optional[datetime]) -> Optional[str]:
    """Serialize as ISO-8601 with the APP_TIMEZONE offset. Use for all API response datetime fields."""
    if dt is None:
        return None
    return to_local(dt).isoformat()
