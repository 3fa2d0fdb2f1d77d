"""Utility constants for datespace.

Time unit constants represent fixed durations in milliseconds.
Months and years are calendar averages (365.25 days per year).
"""

from datetime import datetime, timezone
from types import MappingProxyType

# Time unit constants (all values in milliseconds)
MILLISECOND = 1
SECOND = 1000
MINUTE = 60000
HOUR = 3600000
DAY = 86400000
WEEK = 604800000
MONTH = 2629800000
YEAR = 31557600000

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

UNIT_MILLIS = MappingProxyType(
    {
        "ms": MILLISECOND,
        "s": SECOND,
        "m": MINUTE,
        "h": HOUR,
        "d": DAY,
        "w": WEEK,
        "b": MONTH,
        "y": YEAR,
    }
)
