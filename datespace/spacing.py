from datetime import datetime

from datespace.increment import Increment, normalize_increment
from datespace.options import RoundMode, resolve_options
from datespace.sequence import generate_sequence


class Spacing:
    """A reusable increment that can be sliced between two boundaries.

    The increment and round mode are validated up front, so a bad spacing
    fails where it is defined rather than where it is sliced.
    """

    def __init__(self, increment: Increment | None = None, round: RoundMode = "floor"):
        normalize_increment(increment)
        self.increment: Increment | None = increment
        self.round: RoundMode = resolve_options({"round": round}).round

    def __getitem__(self, item: slice) -> list[datetime]:
        if not isinstance(item, slice):
            raise TypeError(
                f"Spacing must be sliced with [start:stop].\n"
                f"Got {type(item).__name__!r}: {item!r}"
            )
        if item.step is not None:
            raise TypeError(
                f"Spacing slices do not take a step; the increment is the step.\n"
                f"Got step: {item.step!r}\n"
                f"Hint: every('{item.step}')[start:stop]"
            )
        if item.start is None or item.stop is None:
            raise ValueError(
                f"Spacing requires finite bounds, got start={item.start!r}, "
                f"stop={item.stop!r}.\n"
                f"Example: every('12h')['2014-11-30':'2014-12-02']"
            )
        return generate_sequence(
            item.start, item.stop, self.increment, {"round": self.round}
        )

    def __repr__(self) -> str:
        return f"Spacing(increment={self.increment!r}, round={self.round!r})"


def every(increment: Increment | None = None, *, round: RoundMode = "floor") -> Spacing:
    """
    Create a spacing that yields timestamps when sliced.

    Args:
        increment: Milliseconds or a duration string (default: one day)
        round: How fractional millisecond offsets are rounded

    Returns:
        Spacing sliceable with [start:stop]

    Example:
        >>> from datespace import every
        >>>
        >>> # Every 12 hours
        >>> half_days = every("12h")["2014-11-30T07:00:00Z":"2014-12-02T07:00:00Z"]
        >>>
        >>> # Half-millisecond steps, rounded up
        >>> every(0.5, round="ceil")[1417503655968:1417503655973]
    """
    return Spacing(increment, round)
