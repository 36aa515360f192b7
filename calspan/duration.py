import math
from dataclasses import dataclass, fields
from numbers import Real
from typing import TypeAlias

from typing_extensions import override

from calspan.errors import InvalidInputError
from calspan.units import UNIT_NAMES, Unit

Number: TypeAlias = int | float

_ABBREVIATIONS: dict[Unit, str] = {
    "milliseconds": "ms",
    "seconds": "s",
    "minutes": "m",
    "hours": "h",
    "days": "d",
    "weeks": "w",
    "months": "mo",
    "years": "y",
}


@dataclass(frozen=True, kw_only=True)
class Duration:
    """A complete, signed span of time with one field per unit.

    Fields are independent: ``Duration(hours=2, seconds=-10)`` is a valid
    duration whose net effect is two hours minus ten seconds. Values are
    never rebalanced between units, so ``Duration(seconds=90)`` keeps its
    90 seconds.
    """

    milliseconds: Number = 0
    seconds: Number = 0
    minutes: Number = 0
    hours: Number = 0
    days: Number = 0
    weeks: Number = 0
    months: Number = 0
    years: Number = 0

    def __post_init__(self) -> None:
        for field in fields(self):
            value = getattr(self, field.name)
            if isinstance(value, bool) or not isinstance(value, Real):
                raise InvalidInputError(
                    f"Duration field {field.name!r} must be a number.\n"
                    f"Got {type(value).__name__!r}: {value!r}"
                )
            if not math.isfinite(value):
                raise InvalidInputError(
                    f"Duration field {field.name!r} must be finite, got {value!r}"
                )

    def as_dict(self) -> dict[Unit, Number]:
        """Return every field keyed by unit name, smallest unit first."""
        return {unit: getattr(self, unit) for unit in UNIT_NAMES}

    def __neg__(self) -> "Duration":
        return Duration(**{unit: -value for unit, value in self.as_dict().items()})

    def __abs__(self) -> "Duration":
        from calspan.absolute import absolute

        return absolute(self)

    def __add__(self, other: object) -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(
            **{unit: getattr(self, unit) + getattr(other, unit) for unit in UNIT_NAMES}
        )

    def __sub__(self, other: object) -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return self + (-other)

    @override
    def __str__(self) -> str:
        """Compact listing of the nonzero fields, largest unit first."""
        parts = [
            f"{value}{_ABBREVIATIONS[unit]}"
            for unit, value in reversed(self.as_dict().items())
            if value
        ]
        return f"Duration({' '.join(parts) or '0ms'})"


ZERO = Duration()
