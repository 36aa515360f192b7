"""Applying durations to calendar dates.

Calendar-variable units (years, months) are applied through
``dateutil.relativedelta`` on the reference instant's wall clock, so
"one month" from January 31st lands on the last day of February. Fixed
units are then added as one linear millisecond offset on the UTC
timeline.
"""

import logging
import math
from datetime import datetime, timedelta, timezone

from dateutil.relativedelta import relativedelta

from calspan.canonical import TimeInput, parse
from calspan.dates import DateInput, coerce_date
from calspan.duration import Number
from calspan.errors import InvalidInputError
from calspan.units import FIXED_UNITS
from calspan.util import DEFAULT_TZ, MONTH, YEAR

logger = logging.getLogger(__name__)


def _split(value: Number) -> tuple[int, Number]:
    """Split a calendar field into its whole part and fractional remainder."""
    whole = math.trunc(value)
    return whole, value - whole


def apply(
    reference_date: DateInput, time: TimeInput, *, tz: str = DEFAULT_TZ
) -> datetime:
    """Return the instant reached by applying ``time`` to ``reference_date``.

    Years and months are applied first with calendar arithmetic: month
    overflow rolls into years and the day of month is clamped to the
    target month's length. Weeks, days, hours, minutes, seconds and
    milliseconds are then added as elapsed time, so a DST transition
    never changes the length of a day.

    Fractional years or months apply their whole part through the
    calendar and their remainder through the mean month/year length.

    Args:
        reference_date: Anchor instant (see ``coerce_date`` for accepted forms)
        time: Duration to apply (see ``parse`` for accepted forms)
        tz: IANA zone for naive dates, dates and epoch numbers

    Returns:
        Timezone-aware datetime in the reference instant's zone

    Example:
        >>> apply("2025-01-31", {"months": 1}).date()
        datetime.date(2025, 2, 28)
    """
    instant = coerce_date(reference_date, tz)
    duration = parse(time)

    years, year_rest = _split(duration.years)
    months, month_rest = _split(duration.months)

    offset = sum(getattr(duration, s.unit) * s.milliseconds for s in FIXED_UNITS)
    offset += year_rest * YEAR + month_rest * MONTH

    try:
        shifted = instant + relativedelta(years=years, months=months)
        elapsed = shifted.astimezone(timezone.utc) + timedelta(milliseconds=offset)
        result = elapsed.astimezone(shifted.tzinfo)
    except (OverflowError, ValueError) as exc:
        raise InvalidInputError(
            f"Duration out of range when applied to {instant.isoformat()}.\n"
            f"Got: {duration}\n"
            f"Hint: The result must fall between years 1 and 9999"
        ) from exc
    logger.debug(
        "Applied %s to %s: calendar -> %s, +%sms -> %s",
        duration,
        instant.isoformat(),
        shifted.isoformat(),
        offset,
        result.isoformat(),
    )
    return result
