from datetime import datetime, timezone

def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes (SQLite drops tzinfo on the way back)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)

def is_expired(expires_at: datetime, now: datetime) -> bool:
    return as_utc(expires_at) <= as_utc(now)
