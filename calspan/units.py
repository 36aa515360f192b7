from dataclasses import dataclass
from typing import Literal, TypeAlias

from calspan.util import DAY, HOUR, MILLISECOND, MINUTE, MONTH, SECOND, WEEK, YEAR

Unit: TypeAlias = Literal[
    "milliseconds",
    "seconds",
    "minutes",
    "hours",
    "days",
    "weeks",
    "months",
    "years",
]


@dataclass(frozen=True, kw_only=True)
class UnitSpec:
    unit: Unit
    milliseconds: int

    @property
    def calendar(self) -> bool:
        """True for units whose real length depends on a calendar anchor."""
        return self.unit in ("months", "years")


# Ordered smallest to largest; months and years sort after weeks
UNITS: tuple[UnitSpec, ...] = (
    UnitSpec(unit="milliseconds", milliseconds=MILLISECOND),
    UnitSpec(unit="seconds", milliseconds=SECOND),
    UnitSpec(unit="minutes", milliseconds=MINUTE),
    UnitSpec(unit="hours", milliseconds=HOUR),
    UnitSpec(unit="days", milliseconds=DAY),
    UnitSpec(unit="weeks", milliseconds=WEEK),
    UnitSpec(unit="months", milliseconds=MONTH),
    UnitSpec(unit="years", milliseconds=YEAR),
)

UNITS_MAP: dict[Unit, UnitSpec] = {spec.unit: spec for spec in UNITS}

UNIT_NAMES: tuple[Unit, ...] = tuple(spec.unit for spec in UNITS)

FIXED_UNITS: tuple[UnitSpec, ...] = tuple(s for s in UNITS if not s.calendar)
