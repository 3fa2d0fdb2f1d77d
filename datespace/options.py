import math
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Literal, TypeAlias, get_args

from datespace.errors import ValidationError

RoundMode: TypeAlias = Literal["floor", "ceil", "round"]

ROUND_MODES: tuple[RoundMode, ...] = get_args(RoundMode)


def _round_half_up(value: float) -> int:
    whole = math.floor(value)
    return whole + 1 if value - whole >= 0.5 else whole


_ROUNDERS: dict[RoundMode, Callable[[float], int]] = {
    "floor": math.floor,
    "ceil": math.ceil,
    "round": _round_half_up,
}


def rounder(mode: RoundMode) -> Callable[[float], int]:
    """Return the function that turns a fractional offset into an integer.

    Raises:
        TypeError: If mode is not a string
        ValidationError: If mode is not one of the supported modes
    """
    return _ROUNDERS[resolve_options({"round": mode}).round]


@dataclass(frozen=True, kw_only=True)
class Options:
    round: RoundMode = "floor"


def resolve_options(raw: Mapping[str, Any] | None) -> Options:
    """Validate a user-supplied options mapping.

    Only ``round`` is recognized; other keys are ignored.

    Raises:
        TypeError: If options is not a mapping or round is not a string
        ValidationError: If round is not one of the supported modes
    """
    if raw is None:
        return Options()
    if not isinstance(raw, Mapping):
        raise TypeError(
            f"Options must be a mapping.\n"
            f"Got {type(raw).__name__!r}: {raw!r}\n"
            f"Example: {{'round': 'ceil'}}"
        )
    if "round" not in raw:
        return Options()

    mode = raw["round"]
    if not isinstance(mode, str):
        raise TypeError(
            f"Round option must be a string.\n"
            f"Got {type(mode).__name__!r}: {mode!r}"
        )
    if mode not in ROUND_MODES:
        valid = ", ".join(ROUND_MODES)
        raise ValidationError(
            f"Unrecognized round option: '{mode}'\n" f"Valid options: {valid}\n"
        )
    return Options(round=mode)
