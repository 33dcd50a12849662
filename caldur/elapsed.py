"""Elapsed time between instants, as Durations of whole seconds."""

from datetime import date, datetime

from caldur.duration import Duration
from caldur.errors import TimeIsInTheFutureError, TimeIsInThePastError
from caldur.interop import from_timedelta
from caldur.projection import coerce_instant


def between(first: datetime | date, second: datetime | date) -> Duration:
    """Return the absolute time between two instants, in either order."""
    return from_timedelta(abs(coerce_instant(second) - coerce_instant(first)))


def until(instant: datetime | date, now: datetime | date | None = None) -> Duration:
    """Return the time from now until a future instant.

    Raises:
        TimeIsInThePastError: If `instant` is earlier than now
    """
    target = coerce_instant(instant)
    current = coerce_instant(now) if now is not None else datetime.now(target.tzinfo)
    if target < current:
        raise TimeIsInThePastError(
            f"Cannot count down to an instant in the past.\n"
            f"Got: {target.isoformat()} (now is {current.isoformat()})\n"
            f"Hint: use since() for past instants"
        )
    return from_timedelta(target - current)


def since(instant: datetime | date, now: datetime | date | None = None) -> Duration:
    """Return the time elapsed from a past instant until now.

    Raises:
        TimeIsInTheFutureError: If `instant` is later than now
    """
    target = coerce_instant(instant)
    current = coerce_instant(now) if now is not None else datetime.now(target.tzinfo)
    if target > current:
        raise TimeIsInTheFutureError(
            f"Cannot count up from an instant in the future.\n"
            f"Got: {target.isoformat()} (now is {current.isoformat()})\n"
            f"Hint: use until() for future instants"
        )
    return from_timedelta(current - target)
