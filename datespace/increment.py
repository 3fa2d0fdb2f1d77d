"""Increment parsing: numeric milliseconds or composable duration strings.

Duration strings are made of ``<integer><unit>`` segments, joined by any
separator, whose values are summed:

    >>> parse_duration("12h")
    43200000
    >>> parse_duration("1day.500ms")
    86400500
    >>> parse_duration("-1h.30m")
    -5400000
"""

import math
import re
from types import MappingProxyType
from typing import TypeAlias

from datespace.errors import ParseError
from datespace.util import DAY, UNIT_MILLIS

Increment: TypeAlias = str | int | float

DEFAULT_INCREMENT = DAY

_SEGMENT = re.compile(r"(\d+)([A-Za-z]+)")
_FRACTION = re.compile(r"\d\.\d")

# Accepted spellings for each unit in UNIT_MILLIS
_SPELLINGS = {
    "ms": ("ms", "millisecond", "milliseconds"),
    "s": ("s", "sec", "second", "seconds"),
    "m": ("m", "min", "minute", "minutes"),
    "h": ("h", "hr", "hour", "hours"),
    "d": ("d", "day", "days"),
    "w": ("w", "wk", "week", "weeks"),
    "b": ("b", "month", "months"),
    "y": ("y", "yr", "year", "years"),
}

_UNITS = MappingProxyType(
    {spelling: unit for unit, names in _SPELLINGS.items() for spelling in names}
)


def parse_duration(text: str) -> int:
    """Convert a duration string to a signed number of milliseconds.

    A leading ``-`` negates the total. Unit tokens are case-sensitive.

    Raises:
        ParseError: If no segment is found, a segment has a fractional
            value, or a unit is not recognized
    """
    if _FRACTION.search(text):
        raise ParseError(
            f"Increment segments must be whole numbers.\n"
            f"Got: {text!r}\n"
            f"Hint: Use a smaller unit, e.g. '1h.30m' instead of '1.5h'"
        )
    segments = _SEGMENT.findall(text)
    if not segments:
        raise ParseError(
            f"Unable to parse increment string.\n"
            f"Got: {text!r}\n"
            f"Examples: '12h', '1day.500ms', '-2w'"
        )

    total = 0
    for digits, token in segments:
        unit = _UNITS.get(token)
        if unit is None:
            valid = ", ".join(_UNITS.keys())
            raise ParseError(
                f"Unrecognized increment unit: '{token}' in {text!r}\n"
                f"Valid units: {valid}\n"
            )
        total += int(digits) * UNIT_MILLIS[unit]

    return -total if text.startswith("-") else total


def normalize_increment(value: Increment | None) -> int | float:
    """Resolve an increment to a signed millisecond delta.

    Numbers pass through unchanged (fractional, zero and negative values are
    all allowed). ``None`` means the default of one day.
    """
    if value is None:
        return DEFAULT_INCREMENT
    if isinstance(value, str):
        return parse_duration(value)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        if math.isnan(value):
            raise TypeError(
                "Increment must be a valid number, got NaN.\n"
                "Example: 1000 for one second, or a string such as '1s'"
            )
        return value

    raise TypeError(
        f"Increment must be either a string or number.\n"
        f"Got {type(value).__name__!r}: {value!r}\n"
        f"Examples: 3600000, '1h', '1h.30m'"
    )
