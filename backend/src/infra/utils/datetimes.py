from datetime import datetime, timezone
from typing import Optional


def ensure_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)

    return value.astimezone(timezone.utc)


def ensure_optional_utc(value: Optional[datetime]) -> Optional[datetime]:
    return ensure_utc(value) if value is not None else None


def utc_or_now(value: Optional[datetime]) -> datetime:
    if value is None:
        return datetime.now(timezone.utc)

    return ensure_utc(value)
