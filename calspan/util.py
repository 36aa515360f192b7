"""Utility constants for calspan.

Time unit constants represent durations in milliseconds.
These are used throughout the API for consistent time representation.

MONTH and YEAR are the mean Gregorian lengths (30.436875 and 365.2425
days). They only apply when a duration is converted without a reference
date; anchored conversions use real calendar arithmetic instead.
"""

# Time unit constants (all values in milliseconds)
MILLISECOND = 1
SECOND = 1000
MINUTE = 60000
HOUR = 3600000
DAY = 86400000
WEEK = 604800000
MONTH = 2629746000
YEAR = 31556952000

# Zone used for naive dates, dates and epoch numbers
DEFAULT_TZ = "UTC"
