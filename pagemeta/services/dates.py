"""Date normalisation to ``YYYY-MM-DDTHH:MM:SS.mmmZ`` UTC timestamps."""

from datetime import date, datetime, time, timezone
from typing import NamedTuple, Optional


class NormalizedDates(NamedTuple):
    published: Optional[str]
    modified: Optional[str]
    uploaded: Optional[str]


def to_iso_timestamp(value: Optional[date]) -> Optional[str]:
    """Convert *value* to a millisecond-precision UTC ISO-8601 string.

    Naive datetimes and plain dates are interpreted as UTC.
    """
    if value is None:
        return None
    if not isinstance(value, datetime):
        value = datetime.combine(value, time.min)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S") + f".{value.microsecond // 1000:03d}Z"


def normalize_dates(
    publish: Optional[date],
    modified: Optional[date] = None,
    upload: Optional[date] = None,
) -> NormalizedDates:
    """Normalise page dates; *modified* and *upload* fall back to *publish*."""
    published = to_iso_timestamp(publish)
    return NormalizedDates(
        published=published,
        modified=_or_default(to_iso_timestamp(modified), published),
        uploaded=_or_default(to_iso_timestamp(upload), published),
    )


def _or_default(value: Optional[str], default: Optional[str]) -> Optional[str]:
    return default if value is None else value
