import math
import re
from datetime import date, datetime, time, timedelta, timezone
from typing import TypeAlias

from dateutil.parser import isoparse

from datespace.errors import ParseError, ValidationError
from datespace.util import EPOCH

Boundary: TypeAlias = str | int | float | datetime | date

_TIMESTAMP = re.compile(r"^\d{10}$|^\d{13}$")
_ONE_MS = timedelta(milliseconds=1)


def to_millis(dt: datetime) -> int:
    """Convert a datetime to integer epoch milliseconds.

    Naive datetimes are taken to be UTC. Sub-millisecond precision is
    truncated toward the earlier instant.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return (dt - EPOCH) // _ONE_MS


def from_millis(ms: int) -> datetime:
    """Convert integer epoch milliseconds to a UTC datetime."""
    return EPOCH + timedelta(milliseconds=ms)


def normalize_boundary(value: Boundary, label: str) -> int:
    """Convert a date-like boundary to integer epoch milliseconds.

    Accepts:
    - str: ISO-8601 date or date-time (UTC unless an offset is given)
    - int/float: Unix timestamp (10 digits, seconds) or JavaScript-style
      timestamp (13 digits, milliseconds)
    - datetime: naive values are taken to be UTC
    - date: midnight UTC of that day

    Raises:
        ParseError: If a string cannot be parsed as a date
        ValidationError: If a numeric timestamp has the wrong number of digits
        TypeError: If the value is not date-like
    """
    name = label.lower()
    # bool is an int subclass but never a timestamp
    if isinstance(value, bool):
        pass
    elif isinstance(value, str):
        try:
            parsed = isoparse(value)
        except (ValueError, OverflowError) as exc:
            raise ParseError(
                f"Unable to parse {name} date.\n"
                f"Got: {value!r}\n"
                f"Hint: Use an ISO-8601 string, e.g. '2014-12-02T07:00:55.973Z'"
            ) from exc
        return to_millis(parsed)
    elif isinstance(value, (int, float)):
        if not math.isfinite(value) or not _TIMESTAMP.match(str(int(value))):
            raise ValidationError(
                f"Numeric {name} date must be either a Unix or JavaScript "
                f"timestamp.\n"
                f"Got: {value!r}\n"
                f"Examples: 1417503655 (seconds), 1417503655973 (milliseconds)"
            )
        if len(str(int(value))) == 10:
            value = value * 1000
        return int(value)
    elif isinstance(value, datetime):
        return to_millis(value)
    elif isinstance(value, date):
        return to_millis(datetime.combine(value, time.min, tzinfo=timezone.utc))

    raise TypeError(
        f"{label} date must be a date string, datetime, date, Unix timestamp, "
        f"or JavaScript timestamp.\n"
        f"Got {type(value).__name__!r}: {value!r}"
    )
