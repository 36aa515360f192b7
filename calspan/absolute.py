from calspan.canonical import TimeInput, parse
from calspan.convert import to_milliseconds
from calspan.duration import Duration


def negate(time: TimeInput) -> Duration:
    """Return the canonical duration with every field negated."""
    return -parse(time)


def absolute(time: TimeInput) -> Duration:
    """Return ``time`` with its overall sign made non-negative.

    The sign is decided once, by the net effect of all fields (months and
    years at their mean lengths). A negative duration has every field
    negated; anything else is returned in canonical form with its fields,
    possibly of mixed sign, untouched.

    Example:
        >>> str(absolute({"hours": -2, "seconds": 10}))
        'Duration(2h -10s)'
    """
    duration = parse(time)
    if to_milliseconds(duration) < 0:
        return -duration
    return duration
