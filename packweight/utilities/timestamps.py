"""created_at parsing and normalization. Every stored timestamp is compared as aware UTC."""
from datetime import datetime, timezone
from typing import Optional

EPOCH_MIN: datetime = datetime.min.replace(tzinfo=timezone.utc)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Attach UTC to naive datetimes and convert aware ones to UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_timestamp(value) -> Optional[datetime]:
    """Parse an ISO-8601 string (a trailing 'Z' included) into aware UTC; None if unparseable."""
    if not value:
        return None
    if isinstance(value, datetime):
        return as_utc(value)
    if not isinstance(value, str):
        return None
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return as_utc(datetime.fromisoformat(text))
    except ValueError:
        return None


def sort_timestamp(value: Optional[datetime]) -> datetime:
    # Missing timestamps compare as the earliest possible instant
    return as_utc(value) or EPOCH_MIN
