from datetime import UTC, datetime


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes read back from stores without time zone support."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)
