"""Tests for unit conversion."""

from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

import pytest

from calspan import (
    UNITS_MAP,
    Converter,
    Duration,
    InvalidDateError,
    InvalidDurationStringError,
    InvalidInputError,
    apply,
    coerce_date,
    elapsed_millis,
    negate,
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


def test_documented_conversions():
    """Test the reference conversions."""
    assert to_milliseconds({"days": 1}) == 86_400_000
    assert to_seconds({"minutes": 2}) == 120
    assert to_minutes({"hours": 1, "minutes": 10}) == 70
    assert to_hours({"days": 1}) == 24
    assert to_days({"hours": 12}) == 0.5
    assert to_weeks({"days": 14}) == 2


@pytest.mark.parametrize(
    "unit", ["milliseconds", "seconds", "minutes", "hours", "days", "weeks"]
)
@pytest.mark.parametrize("amount", [1, 7, -3])
def test_fixed_units_are_exact(unit: str, amount: int):
    """Test that a single fixed-unit field converts exactly."""
    expected = amount * UNITS_MAP[unit].milliseconds  # type: ignore[index]
    result = to_milliseconds({unit: amount})
    assert result == expected
    assert isinstance(result, int)


def test_calendar_units_use_mean_lengths():
    """Test that months and years convert with mean Gregorian lengths."""
    assert to_milliseconds({"months": 1}) == 2_629_746_000
    assert to_milliseconds({"years": 1}) == 31_556_952_000
    assert to_days({"months": 1}) == 30.436875
    assert to_days({"years": 1}) == 365.2425
    assert to_months({"years": 1, "months": 10}) == 22
    assert to_years({"months": 6}) == 0.5


def test_mixed_sign_fields_sum_algebraically():
    """Test that the net effect is the sum of every field's contribution."""
    assert to_milliseconds({"hours": 2, "seconds": -10}) == 7_190_000
    assert to_seconds({"minutes": 1, "seconds": -90}) == -30


def test_fractional_results_are_not_rounded():
    """Test that converters return fractional values as-is."""
    assert to_hours({"minutes": 90}) == 1.5
    assert to_weeks({"days": 1}) == pytest.approx(1 / 7)
    assert to_seconds(1) == 0.001


def test_accepts_every_input_shape():
    """Test conversion of numbers, strings, timedeltas and Durations."""
    assert to_seconds(1500) == 1.5
    assert to_milliseconds("1h 30m") == 5_400_000
    assert to_minutes(timedelta(hours=2)) == 120
    assert to_hours(Duration(days=1, hours=-12)) == 12


@pytest.mark.parametrize(
    "duration",
    [
        Duration(hours=2, seconds=-10),
        Duration(years=1, months=-3, days=4, milliseconds=7),
        Duration(weeks=-2, minutes=30.5),
        Duration(),
    ],
)
def test_negation_flips_the_sign(duration: Duration):
    """Test that negating every field negates the total."""
    assert to_milliseconds(duration) == -to_milliseconds(negate(duration))


def test_to_unit_is_the_generic_converter():
    """Test that to_unit matches the per-unit converters."""
    assert to_unit({"hours": 1}, "minutes") == 60
    assert to_unit({"days": 14}, "weeks") == to_weeks({"days": 14})
    assert to_unit({"months": 1}, "days", "2025-02-01") == 28


def test_unknown_unit():
    """Test that unknown target units raise InvalidInputError."""
    with pytest.raises(InvalidInputError, match="Unknown unit 'fortnights'"):
        to_unit({"days": 14}, "fortnights")  # type: ignore[arg-type]

    with pytest.raises(InvalidInputError, match="Unknown unit"):
        Converter("fortnights")  # type: ignore[arg-type]


def test_converter_repr_and_scale():
    """Test that converters expose their unit and scale."""
    assert repr(to_days) == "Converter('days')"
    assert to_days.scale == 86_400_000
    assert Converter("hours")({"minutes": 30}) == 0.5


def test_reference_date_gives_exact_month_lengths():
    """Test that a reference date makes months and years calendar-exact."""
    assert to_days({"months": 1}, "2025-02-01") == 28
    assert to_days({"months": 1}, "2024-02-01") == 29
    assert to_days({"months": 1}, "2025-03-01") == 31
    assert to_days({"years": 1}, "2024-01-01") == 366
    assert to_days({"years": 1}, "2025-01-01") == 365
    assert to_milliseconds({"months": 1}, "2025-01-01") == 2_678_400_000


def test_reference_date_with_fixed_units_matches_linear_sum():
    """Test that fixed units give the same result with or without an anchor."""
    duration = {"days": 1, "hours": 2, "seconds": -5}
    assert to_milliseconds(duration, "2025-06-01") == to_milliseconds(duration)


def test_reference_date_counts_real_elapsed_time_across_dst():
    """Test that a month spanning a DST change loses an hour of real time."""
    pacific = ZoneInfo("US/Pacific")
    reference = datetime(2025, 2, 15, 12, tzinfo=pacific)
    assert to_milliseconds({"months": 1}, reference) == 28 * 86_400_000 - 3_600_000
    assert to_hours({"days": 1}, reference) == 24


@pytest.mark.parametrize(
    "reference",
    [
        "2025-01-31",
        "2024-02-29T12:00:00",
        datetime(2025, 3, 8, 22, tzinfo=ZoneInfo("US/Pacific")),
        1738281600000,
    ],
)
@pytest.mark.parametrize(
    "duration",
    [
        {"months": 1},
        {"years": -1, "days": 3},
        {"months": 13, "hours": -5},
        {"weeks": 1, "milliseconds": 250},
    ],
)
def test_reference_path_matches_apply(reference: object, duration: dict):
    """Test that anchored conversion equals applying then differencing."""
    start = coerce_date(reference)  # type: ignore[arg-type]
    expected = elapsed_millis(start, apply(reference, duration))  # type: ignore[arg-type]
    assert to_milliseconds(duration, reference) == expected  # type: ignore[arg-type]


def test_reference_date_tz_applies_to_naive_dates():
    """Test that tz places a naive reference date before applying months."""
    # March 2025 in US/Pacific spans the DST change, in UTC it does not
    assert to_hours({"months": 1}, "2025-03-01", tz="UTC") == 31 * 24
    assert to_hours({"months": 1}, "2025-03-01", tz="US/Pacific") == 31 * 24 - 1


def test_to_timedelta():
    """Test conversion to datetime.timedelta."""
    assert to_timedelta({"hours": 1, "minutes": 30}) == timedelta(minutes=90)
    assert to_timedelta({"months": 1}, "2025-02-01") == timedelta(days=28)
    assert to_timedelta(-1500) == timedelta(seconds=-1.5)


def test_errors_propagate():
    """Test that collaborator errors reach the caller unchanged."""
    with pytest.raises(InvalidDurationStringError):
        to_seconds("soon")

    with pytest.raises(InvalidDateError):
        to_days({"months": 1}, "not a date")

    with pytest.raises(InvalidInputError):
        to_milliseconds({"fortnights": 2})
