"""Calendar date keys used to group dated records."""

from datetime import date, datetime


def format_date_key(value: date | datetime | str | None = None) -> str:
    """Return the ``YYYY-MM-DD`` key for a date-like value in local time.

    ``None`` and the empty string mean now. Strings must be ISO-8601 dates or
    timestamps; anything else raises ValueError.
    """
    day = _to_local_date(value)
    return f"{day.year:04d}-{day.month:02d}-{day.day:02d}"


def today_key() -> str:
    """Return the key for the current local date."""
    return format_date_key(None)


def _to_local_date(value: date | datetime | str | None) -> date:
    if value is None or (isinstance(value, str) and not value.strip()):
        return datetime.now().astimezone().date()
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            return value.astimezone().date()
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return date.fromisoformat(text)
        except ValueError:
            return _to_local_date(datetime.fromisoformat(text))
    raise ValueError(f"Unsupported date value: {value!r}")
