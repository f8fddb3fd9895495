from datetime import datetime, timezone


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_naive_utc(value: datetime | None) -> datetime | None:
    """SQLite hands back naive UTC, fresh objects carry tzinfo. Compare them on one footing."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def timestamp_key(value: datetime | None) -> datetime:
    """Sort key where a missing timestamp counts as the earliest possible."""
    return as_naive_utc(value) or datetime.min


def isoformat(value: datetime | None) -> str | None:
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()
