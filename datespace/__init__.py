from .boundary import Boundary, from_millis, normalize_boundary, to_millis
from .errors import DatespaceError, ParseError, ValidationError
from .increment import DEFAULT_INCREMENT, Increment, normalize_increment, parse_duration
from .options import ROUND_MODES, Options, RoundMode, resolve_options
from .sequence import LARGE_SEQUENCE, generate, generate_sequence
from .spacing import Spacing, every
from .util import DAY, HOUR, MILLISECOND, MINUTE, MONTH, SECOND, WEEK, YEAR

__all__ = [
    "generate_sequence",
    "generate",
    "every",
    "Spacing",
    "normalize_boundary",
    "normalize_increment",
    "parse_duration",
    "resolve_options",
    "to_millis",
    "from_millis",
    "Options",
    "RoundMode",
    "ROUND_MODES",
    "Boundary",
    "Increment",
    "DatespaceError",
    "ParseError",
    "ValidationError",
    "DEFAULT_INCREMENT",
    "LARGE_SEQUENCE",
    "MILLISECOND",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "WEEK",
    "MONTH",
    "YEAR",
]
