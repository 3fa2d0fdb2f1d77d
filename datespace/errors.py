class DatespaceError(Exception):
    """Base class for errors raised by datespace."""


class ParseError(DatespaceError, ValueError):
    """A date or increment string could not be parsed."""


class ValidationError(DatespaceError, ValueError):
    """A value has the right type but unusable content."""
