"""Conversion between Duration and the standard/dateutil delta types.

`datetime.timedelta` only knows elapsed seconds, so it maps onto the seconds
axis alone. `dateutil.relativedelta.relativedelta` carries calendar months as
well and maps onto both axes.
"""

from datetime import timedelta

from dateutil.relativedelta import relativedelta

from caldur.duration import Duration
from caldur.policies import Policy
from caldur.util import DAY, trunc_div

_MICROSECONDS = 10**6

# relativedelta attributes holding absolute (not relative) values
_ABSOLUTE_FIELDS = (
    "year",
    "month",
    "day",
    "weekday",
    "hour",
    "minute",
    "second",
    "microsecond",
)


def from_timedelta(delta: timedelta) -> Duration:
    """Convert a timedelta, truncating any sub-second part toward zero."""
    microseconds = (delta.days * DAY + delta.seconds) * _MICROSECONDS
    microseconds += delta.microseconds
    return Duration(seconds=trunc_div(microseconds, _MICROSECONDS))


def to_timedelta(duration: Duration, policy: "str | Policy | None" = None) -> timedelta:
    """Convert to a timedelta.

    Args:
        duration: The duration to convert
        policy: Normalization policy used to approximate months as seconds.
            When None, a duration with months cannot be converted.

    Raises:
        ValueError: If the duration has months and no policy was given
    """
    if policy is not None:
        duration = duration.normalize(policy)
    if duration.months:
        raise ValueError(
            f"Cannot convert a Duration with months to a timedelta exactly.\n"
            f"Got: {duration!r}\n"
            f"Hint: pass a policy to approximate, e.g. to_timedelta(d, policy='standard')"
        )
    return timedelta(seconds=duration.seconds)


def from_relativedelta(delta: relativedelta) -> Duration:
    """Convert the relative fields of a relativedelta.

    Raises:
        ValueError: If any absolute field (year=, month=, weekday=, ...) or
            leapdays is set, since those depend on the date they are applied to
    """
    absolute = [name for name in _ABSOLUTE_FIELDS if getattr(delta, name) is not None]
    if delta.leapdays:
        absolute.append("leapdays")
    if absolute:
        raise ValueError(
            f"relativedelta has absolute fields that have no Duration equivalent: "
            f"{', '.join(absolute)}\n"
            f"Got: {delta!r}\n"
            f"Hint: use plural (relative) arguments, e.g. relativedelta(months=+1)"
        )
    seconds = from_timedelta(
        timedelta(
            days=delta.days,
            hours=delta.hours,
            minutes=delta.minutes,
            seconds=delta.seconds,
            microseconds=delta.microseconds,
        )
    )
    return Duration(years=int(delta.years), months=int(delta.months)) + seconds


def to_relativedelta(duration: Duration) -> relativedelta:
    """Convert to a relativedelta; months and seconds stay separate fields."""
    return relativedelta(months=duration.months, seconds=duration.seconds)
