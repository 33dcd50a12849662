"""Exception types raised by caldur.

Every error derives from `DurationError` as well as the closest builtin, so
callers may catch either `caldur.errors.UnknownUnitError` or a plain
`ValueError`.
"""


class DurationError(Exception):
    """Base class for all caldur errors."""


class UnknownUnitError(DurationError, ValueError):
    """A unit name has no entry in the unit table."""


class InvalidAxisError(DurationError, ValueError):
    """An axis other than "seconds" or "months" was requested."""


class TypeMismatchError(DurationError, TypeError):
    """Arithmetic was attempted between a Duration and something else."""


class UnknownPolicyError(DurationError, ValueError):
    """A normalization policy name is not registered."""


class UnknownSyntaxError(DurationError, ValueError):
    """A rendering syntax name is not registered."""


class TimeOutOfBoundsError(DurationError, ValueError):
    """A value cannot be represented as a time of day."""


class TimeIsInThePastError(DurationError, ValueError):
    """An instant expected to be in the future is in the past."""


class TimeIsInTheFutureError(DurationError, ValueError):
    """An instant expected to be in the past is in the future."""
