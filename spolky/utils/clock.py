"""
Časové pomůcky / Time helpers.
Všechna razítka ukládáme jako naivní UTC / All timestamps are stored as naive UTC.
"""

from datetime import datetime, timezone


def utcnow() -> datetime:
    """Aktuální čas serveru v UTC / Current server time in UTC (naive)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def as_naive_utc(value: datetime | None) -> datetime | None:
    """Převést na naivní UTC / Normalise an aware datetime to naive UTC."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)
