"""Linearly spaced timestamp sequences.

The generator works on integer epoch milliseconds; ``generate_sequence`` is
the user-facing entry point that accepts date-like boundaries and returns
timezone-aware UTC datetimes.
"""

import logging
import math
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from datespace.boundary import Boundary, from_millis, normalize_boundary
from datespace.increment import Increment, normalize_increment
from datespace.options import RoundMode, resolve_options, rounder

logger = logging.getLogger(__name__)

# Beyond this many elements the output list is grown by appending
LARGE_SEQUENCE = 64_000


def generate(
    start_ms: int,
    stop_ms: int,
    increment_ms: int | float,
    round: RoundMode = "floor",
) -> list[int]:
    """Generate epoch-millisecond timestamps from start toward stop.

    The length is ``ceil((stop_ms - start_ms) / increment_ms)``. When that is
    not a positive finite number (zero increment, an increment pointing away
    from stop, or one larger than the span) the result is ``[start_ms]``.

    Element 0 is ``start_ms`` as given. Later elements come from a running
    total that adds ``increment_ms`` once per step, passed through the
    rounding function, so fractional increments accumulate the same way
    repeated floating-point addition does.
    """
    to_int = rounder(round)
    span = stop_ms - start_ms
    if increment_ms == 0:
        logger.debug("Zero increment over span of %d ms, returning start", span)
        return [start_ms]

    ratio = span / increment_ms
    if not math.isfinite(ratio) or math.ceil(ratio) <= 0:
        logger.debug(
            "Increment %r cannot step from %d toward %d, returning start",
            increment_ms,
            start_ms,
            stop_ms,
        )
        return [start_ms]

    count = math.ceil(ratio)
    acc: int | float = start_ms

    if count > LARGE_SEQUENCE:
        logger.debug("Building %d timestamps by appending", count)
        out = [start_ms]
        for _ in range(1, count):
            acc += increment_ms
            out.append(to_int(acc))
        return out

    logger.debug("Building %d timestamps", count)
    arr = [start_ms] * count
    for i in range(1, count):
        acc += increment_ms
        arr[i] = to_int(acc)
    return arr


def generate_sequence(
    start: Boundary,
    stop: Boundary,
    increment: Increment | Mapping[str, Any] | None = None,
    options: Mapping[str, Any] | None = None,
) -> list[datetime]:
    """Generate linearly spaced datetimes between two boundaries.

    Args:
        start: First instant, as an ISO-8601 string, datetime, date, Unix
            timestamp (10 digits) or JavaScript timestamp (13 digits)
        stop: Boundary the sequence steps toward (exclusive), same forms as
            start
        increment: Milliseconds between elements, or a duration string such
            as "12h" or "1day.500ms" (default: one day). A mapping here is
            read as options when options is omitted.
        options: Mapping with an optional "round" key, one of "floor",
            "ceil" or "round" (default: "floor"). Other keys are ignored.

    Returns:
        Timezone-aware UTC datetimes. Ascending when the increment points
        from start to stop, descending for a negative increment, and just
        [start] when the increment cannot reach stop.

    Raises:
        ParseError: If a date or increment string cannot be parsed
        ValidationError: If a numeric timestamp or round option is invalid
        TypeError: If an argument is of an unsupported type

    Example:
        >>> from datespace import generate_sequence
        >>>
        >>> # Every 12 hours over two days
        >>> generate_sequence("2014-11-30T07:00:00Z", "2014-12-02T07:00:00Z", "12h")
        >>>
        >>> # Counting down
        >>> generate_sequence("2014-12-02", "2014-11-30", "-1d")
    """
    start_ms = normalize_boundary(start, "Start")
    stop_ms = normalize_boundary(stop, "Stop")

    if isinstance(increment, Mapping) and options is None:
        increment, options = None, increment
    increment_ms = normalize_increment(increment)
    opts = resolve_options(options)

    return [
        from_millis(ms) for ms in generate(start_ms, stop_ms, increment_ms, opts.round)
    ]
