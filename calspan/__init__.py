import logging
from importlib.resources import files

from .absolute import absolute, negate
from .anchor import apply
from .canonical import TimeInput, parse
from .convert import (
    Converter,
    to_days,
    to_hours,
    to_milliseconds,
    to_minutes,
    to_months,
    to_seconds,
    to_timedelta,
    to_unit,
    to_weeks,
    to_years,
)
from .dates import DateInput, coerce_date, elapsed_millis, epoch_millis
from .duration import ZERO, Duration
from .errors import (
    DurationError,
    InvalidDateError,
    InvalidDurationStringError,
    InvalidInputError,
)
from .shorthand import tokenize
from .units import UNITS, UNITS_MAP, Unit, UnitSpec

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Load documentation files for programmatic access by agents and code-aware tools
_docs_path = files(__package__) / "docs"
docs = {
    "readme": (_docs_path / "README.md").read_text(),
    "api": (_docs_path / "API.md").read_text(),
}

__all__ = [
    "Duration",
    "ZERO",
    "Unit",
    "UnitSpec",
    "UNITS",
    "UNITS_MAP",
    "TimeInput",
    "DateInput",
    "parse",
    "tokenize",
    "coerce_date",
    "epoch_millis",
    "elapsed_millis",
    "apply",
    "absolute",
    "negate",
    "to_milliseconds",
    "to_unit",
    "to_timedelta",
    "Converter",
    "to_seconds",
    "to_minutes",
    "to_hours",
    "to_days",
    "to_weeks",
    "to_months",
    "to_years",
    "DurationError",
    "InvalidInputError",
    "InvalidDateError",
    "InvalidDurationStringError",
    "docs",
]
