"""Coercion of date inputs to timezone-aware instants."""

import logging
from datetime import date, datetime, time, timedelta, timezone
from numbers import Real
from typing import TypeAlias
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dateutil.parser import isoparse

from calspan.errors import InvalidDateError
from calspan.util import DEFAULT_TZ

logger = logging.getLogger(__name__)

DateInput: TypeAlias = datetime | date | int | float | str

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MILLISECOND = timedelta(milliseconds=1)


def _zone(tz: str) -> ZoneInfo:
    try:
        return ZoneInfo(tz)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise InvalidDateError(
            f"Unknown time zone {tz!r}.\n"
            f"Hint: Use an IANA name such as 'UTC', 'US/Pacific' or 'Europe/London'"
        ) from exc


def coerce_date(value: DateInput, tz: str = DEFAULT_TZ) -> datetime:
    """Convert a date input to a timezone-aware datetime.

    Accepts:
    - datetime: Returned as-is when aware, placed in ``tz`` when naive
    - date: Midnight of that day in ``tz``
    - int/float: Unix epoch in milliseconds, expressed in ``tz``
    - str: ISO 8601 timestamp; naive results are placed in ``tz``

    Raises:
        InvalidDateError: If the value cannot be resolved to an instant
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=_zone(tz))
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=_zone(tz))
    if isinstance(value, Real) and not isinstance(value, bool):
        zone = _zone(tz)
        try:
            return (_EPOCH + timedelta(milliseconds=float(value))).astimezone(zone)
        except (OverflowError, ValueError) as exc:
            raise InvalidDateError(
                f"Epoch milliseconds out of range: {value!r}"
            ) from exc
    if isinstance(value, str):
        try:
            parsed = isoparse(value.strip())
        except (ValueError, OverflowError) as exc:
            raise InvalidDateError(
                f"Invalid date string: {value!r}\n"
                f"Expected an ISO 8601 timestamp.\n"
                f"Examples: '2025-01-31', '2025-01-31T09:30:00', "
                f"'2025-01-31T09:30:00+01:00'"
            ) from exc
        logger.debug("Parsed date string %r as %s", value, parsed.isoformat())
        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=_zone(tz))
        return parsed
    raise InvalidDateError(
        f"Date input must be datetime, date, int, float, or str.\n"
        f"Got {type(value).__name__!r}: {value!r}\n"
        f"Examples:\n"
        f"  datetime(2025, 1, 31, tzinfo=timezone.utc)  # aware datetime\n"
        f"  date(2025, 1, 31)  # midnight in tz\n"
        f"  1738281600000  # Unix epoch milliseconds\n"
        f"  '2025-01-31T00:00:00Z'  # ISO 8601 string"
    )


def epoch_millis(instant: datetime) -> float:
    """Milliseconds since the Unix epoch for an aware datetime."""
    return elapsed_millis(_EPOCH, instant)


def elapsed_millis(start: datetime, end: datetime) -> float:
    """Milliseconds elapsed from ``start`` to ``end`` on the UTC timeline.

    Both datetimes are converted to UTC first; subtracting two datetimes
    that share a tzinfo would otherwise compare wall clocks and miss DST
    transitions.
    """
    delta = end.astimezone(timezone.utc) - start.astimezone(timezone.utc)
    return delta / _ONE_MILLISECOND
