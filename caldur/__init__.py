import logging
from importlib.resources import files

from .builders import (
    centuries,
    days,
    decades,
    hours,
    millennia,
    minutes,
    months,
    seconds,
    weeks,
    years,
)
from .duration import Duration
from .elapsed import between, since, until
from .errors import (
    DurationError,
    InvalidAxisError,
    TimeIsInTheFutureError,
    TimeIsInThePastError,
    TimeOutOfBoundsError,
    TypeMismatchError,
    UnknownPolicyError,
    UnknownSyntaxError,
    UnknownUnitError,
)
from .policies import POLICIES, Policy
from .presentation import SYNTAXES, Syntax, render
from .units import Unit, canonical_order, resolve
from .wallclock import WallClock

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Load documentation files for programmatic access by agents and code-aware tools
_docs_path = files(__package__) / "docs"
docs = {
    "readme": (_docs_path / "README.md").read_text(),
    "api": (_docs_path / "API.md").read_text(),
}

__all__ = [
    "Duration",
    "WallClock",
    "Unit",
    "Policy",
    "Syntax",
    "seconds",
    "minutes",
    "hours",
    "days",
    "weeks",
    "months",
    "years",
    "decades",
    "centuries",
    "millennia",
    "resolve",
    "canonical_order",
    "render",
    "between",
    "since",
    "until",
    "POLICIES",
    "SYNTAXES",
    "DurationError",
    "UnknownUnitError",
    "InvalidAxisError",
    "TypeMismatchError",
    "UnknownPolicyError",
    "UnknownSyntaxError",
    "TimeOutOfBoundsError",
    "TimeIsInThePastError",
    "TimeIsInTheFutureError",
    "docs",
]
