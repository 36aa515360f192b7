"""Converting durations to a single unit."""

from datetime import timedelta

from calspan.anchor import apply
from calspan.canonical import TimeInput, parse
from calspan.dates import DateInput, coerce_date, elapsed_millis
from calspan.errors import InvalidInputError
from calspan.units import UNITS, UNITS_MAP, Unit, UnitSpec
from calspan.util import DEFAULT_TZ


def to_milliseconds(
    time: TimeInput, reference_date: DateInput | None = None, *, tz: str = DEFAULT_TZ
) -> float:
    """Convert a duration to milliseconds.

    Without a reference date every field is multiplied by its unit length
    and summed; months and years use their mean Gregorian lengths. With a
    reference date the duration is applied to it (see ``apply``) and the
    true elapsed time is returned, so months and years are exact for that
    anchor.

    Example:
        >>> to_milliseconds({"days": 1})
        86400000
        >>> to_milliseconds({"months": 1}, "2025-02-01")
        2419200000.0
    """
    if reference_date is not None:
        start = coerce_date(reference_date, tz)
        return elapsed_millis(start, apply(start, time))

    duration = parse(time)
    return sum(getattr(duration, spec.unit) * spec.milliseconds for spec in UNITS)


def _unit_spec(unit: Unit) -> UnitSpec:
    if unit not in UNITS_MAP:
        valid = ", ".join(UNITS_MAP)
        raise InvalidInputError(f"Unknown unit {unit!r}. Valid units: {valid}")
    return UNITS_MAP[unit]


def to_unit(
    time: TimeInput,
    unit: Unit,
    reference_date: DateInput | None = None,
    *,
    tz: str = DEFAULT_TZ,
) -> float:
    """Convert a duration to ``unit``. Results are not rounded."""
    return to_milliseconds(time, reference_date, tz=tz) / _unit_spec(unit).milliseconds


def to_timedelta(
    time: TimeInput, reference_date: DateInput | None = None, *, tz: str = DEFAULT_TZ
) -> timedelta:
    """Convert a duration to a ``datetime.timedelta``."""
    return timedelta(milliseconds=to_milliseconds(time, reference_date, tz=tz))


class Converter:
    """Callable converting any time input to one fixed unit."""

    def __init__(self, unit: Unit):
        self.unit: Unit = unit
        self.scale: int = _unit_spec(unit).milliseconds

    def __call__(
        self,
        time: TimeInput,
        reference_date: DateInput | None = None,
        *,
        tz: str = DEFAULT_TZ,
    ) -> float:
        return to_milliseconds(time, reference_date, tz=tz) / self.scale

    def __repr__(self) -> str:
        return f"Converter({self.unit!r})"


to_seconds: Converter = Converter("seconds")
to_minutes: Converter = Converter("minutes")
to_hours: Converter = Converter("hours")
to_days: Converter = Converter("days")
to_weeks: Converter = Converter("weeks")
# Months and years are mean-length approximations unless a reference date is given
to_months: Converter = Converter("months")
to_years: Converter = Converter("years")
