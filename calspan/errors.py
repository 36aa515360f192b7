"""Exceptions raised by calspan.

Every error is a ``ValueError`` so callers that only care about "bad
input" can catch the builtin, while the subclasses tell apart which
input was rejected.
"""


class DurationError(ValueError):
    """Base class for all calspan errors."""


class InvalidInputError(DurationError):
    """A time input has an unsupported shape, unit name or field value."""


class InvalidDateError(DurationError):
    """A date input could not be resolved to an instant."""


class InvalidDurationStringError(DurationError):
    """A shorthand duration string could not be tokenized."""
