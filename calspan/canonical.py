"""Canonicalization of time inputs into complete durations."""

from collections.abc import Mapping
from datetime import timedelta
from numbers import Real
from typing import Any, TypeAlias

from calspan.duration import Duration, Number
from calspan.errors import InvalidInputError
from calspan.shorthand import tokenize
from calspan.units import UNITS_MAP

TimeInput: TypeAlias = Duration | Mapping[str, Number] | timedelta | int | float | str


def _from_fields(fields: Mapping[str, Any]) -> Duration:
    unknown = [key for key in fields if key not in UNITS_MAP]
    if unknown:
        valid = ", ".join(UNITS_MAP)
        raise InvalidInputError(
            f"Unknown duration unit(s): {', '.join(map(repr, unknown))}\n"
            f"Valid units: {valid}"
        )
    # A fresh record per call; Duration validates each field
    return Duration(**fields)


def parse(time: TimeInput) -> Duration:
    """Return the complete, signed Duration described by ``time``.

    Accepts:
    - Duration: Returned unchanged
    - Mapping: Partial fields by unit name; absent units are zero
    - str: Shorthand such as "1h 30m" or "P1DT2H"
    - timedelta: Days, seconds and milliseconds fields
    - int/float: A millisecond count

    Values are never rebalanced between units: {"seconds": 90} stays
    90 seconds.

    Raises:
        InvalidInputError: If the input shape, a unit name or a value is invalid
        InvalidDurationStringError: If a shorthand string cannot be tokenized
    """
    if isinstance(time, Duration):
        return time
    if isinstance(time, Mapping):
        return _from_fields(time)
    if isinstance(time, str):
        return _from_fields(tokenize(time))
    if isinstance(time, timedelta):
        return Duration(
            days=time.days,
            seconds=time.seconds,
            milliseconds=time.microseconds / 1000 if time.microseconds else 0,
        )
    if isinstance(time, Real) and not isinstance(time, bool):
        return Duration(milliseconds=time)
    raise InvalidInputError(
        f"Time input must be a number, mapping, string, timedelta, or Duration.\n"
        f"Got {type(time).__name__!r}: {time!r}\n"
        f"Examples:\n"
        f"  parse(1500)  # milliseconds\n"
        f"  parse({{'hours': 2, 'seconds': -10}})  # partial fields\n"
        f"  parse('1h 30m')  # shorthand"
    )
