"""Tokenizer for textual duration shorthand.

Two notations are understood:

- Compact tokens such as ``"1h 30m"``, ``"2d,-4h"`` or
  ``"1.5 hours and 10 seconds"``. Each token carries its own sign.
- ISO 8601 durations such as ``"P1Y2M10DT2H30M"`` or ``"-PT1.5S"``. A
  leading sign negates every field.

The result is a partial duration: only the units that appear are present.
"""

import re

from calspan.errors import InvalidDurationStringError
from calspan.units import Unit

_NUMBER = r"(?:\d+(?:[.,]\d*)?|[.,]\d+)"

_TOKEN_PATTERN = re.compile(
    rf"\s*(?:,\s*|and\s+)?([+-]?)\s*({_NUMBER})\s*([a-z]+)\s*",
    re.IGNORECASE,
)

_ISO_PATTERN = re.compile(
    rf"""
    ([+-])?P
    (?:(?P<years>{_NUMBER})Y)?
    (?:(?P<months>{_NUMBER})M)?
    (?:(?P<weeks>{_NUMBER})W)?
    (?:(?P<days>{_NUMBER})D)?
    (?:T
        (?:(?P<hours>{_NUMBER})H)?
        (?:(?P<minutes>{_NUMBER})M)?
        (?:(?P<seconds>{_NUMBER})S)?
    )?
    """,
    re.IGNORECASE | re.VERBOSE,
)

# Mapping from accepted spellings to unit names
_ALIASES: dict[str, Unit] = {
    "ms": "milliseconds",
    "msec": "milliseconds",
    "msecs": "milliseconds",
    "millisecond": "milliseconds",
    "milliseconds": "milliseconds",
    "s": "seconds",
    "sec": "seconds",
    "secs": "seconds",
    "second": "seconds",
    "seconds": "seconds",
    "m": "minutes",
    "min": "minutes",
    "mins": "minutes",
    "minute": "minutes",
    "minutes": "minutes",
    "h": "hours",
    "hr": "hours",
    "hrs": "hours",
    "hour": "hours",
    "hours": "hours",
    "d": "days",
    "day": "days",
    "days": "days",
    "w": "weeks",
    "wk": "weeks",
    "wks": "weeks",
    "week": "weeks",
    "weeks": "weeks",
    "mo": "months",
    "mos": "months",
    "month": "months",
    "months": "months",
    "y": "years",
    "yr": "years",
    "yrs": "years",
    "year": "years",
    "years": "years",
}


def _to_number(text: str) -> int | float:
    text = text.replace(",", ".")
    if "." in text:
        return float(text)
    return int(text)


def _invalid(text: str) -> InvalidDurationStringError:
    return InvalidDurationStringError(
        f"Invalid duration string: {text!r}\n"
        f"Expected compact tokens or an ISO 8601 duration.\n"
        f"Examples: '1h 30m', '2 days and -4 hours', 'P1Y2M', '-PT1.5S'"
    )


def _tokenize_iso(text: str) -> dict[Unit, int | float] | None:
    match = _ISO_PATTERN.fullmatch(text)
    if match is None:
        return None

    groups = {unit: value for unit, value in match.groupdict().items() if value}
    if not groups or text.upper().endswith("T"):
        raise _invalid(text)

    sign = -1 if match.group(1) == "-" else 1
    return {unit: sign * _to_number(value) for unit, value in groups.items()}  # type: ignore[misc]


def tokenize(text: str) -> dict[Unit, int | float]:
    """Split a shorthand duration string into signed unit fields.

    Raises:
        InvalidDurationStringError: If the text is empty or not recognized
    """
    stripped = text.strip()
    if not stripped:
        raise _invalid(text)

    iso = _tokenize_iso(stripped)
    if iso is not None:
        return iso

    result: dict[Unit, int | float] = {}
    pos = 0
    while pos < len(stripped):
        match = _TOKEN_PATTERN.match(stripped, pos)
        if match is None:
            raise _invalid(text)

        sign, number, alias = match.groups()
        unit = _ALIASES.get(alias.lower())
        if unit is None:
            valid = ", ".join(sorted(_ALIASES))
            raise InvalidDurationStringError(
                f"Unknown unit {alias!r} in duration string {text!r}\n"
                f"Valid units: {valid}"
            )

        value = _to_number(number)
        if sign == "-":
            value = -value
        result[unit] = result.get(unit, 0) + value
        pos = match.end()

    return result
