"""Calendar projection: offsetting an instant by a Duration.

Month-based parts move the calendar month and clamp the day to the end of
shorter months, so one month after January 31st is the last day of February.
Day and second parts are then applied as plain elapsed time.

Example:
    >>> from datetime import datetime
    >>> from caldur import Duration
    >>> Duration(months=1).after(datetime(2000, 1, 31, 3, 45))
    datetime.datetime(2000, 2, 29, 3, 45)
"""

import calendar
import logging
from datetime import date, datetime, time, timedelta
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from caldur.duration import Duration

logger = logging.getLogger(__name__)

_PROJECTION_UNITS = ("years", "months", "days", "seconds")


def coerce_instant(instant: Any) -> datetime:
    """Accept a datetime as-is, or a date as midnight of that day."""
    if isinstance(instant, datetime):
        return instant
    if isinstance(instant, date):
        return datetime.combine(instant, time.min)
    raise TypeError(
        f"Expected a datetime or date instant.\n"
        f"Got {type(instant).__name__!r}: {instant!r}\n"
        f"Example: Duration(months=5).after(datetime(2000, 1, 1, 12, 0))"
    )


def month_carry(month: int) -> tuple[int, int]:
    """Wrap a month index into 1..12, returning (month, years carried).

    Month 0 is December of the previous year, month 13 is January of the next.
    """
    years, offset = divmod(month - 1, 12)
    return offset + 1, years


def is_valid_date(year: int, month: int, day: int) -> bool:
    try:
        date(year, month, day)
    except ValueError:
        return False
    return True


def last_day_of_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def build_date(year: int, month: int, day: int) -> date:
    """Build a date, wrapping the month into range and clamping the day.

    If `day` does not exist in the target month the last day of that month is
    used instead.
    """
    month, years = month_carry(month)
    year += years
    if not is_valid_date(year, month, day):
        day = last_day_of_month(year, month)
    return date(year, month, day)


def after(duration: "Duration", instant: datetime | date) -> datetime:
    """Return the instant `duration` after `instant`.

    Algorithm:
    1. Break the duration into years, months, days and seconds.
    2. Shift the calendar month by the month and year parts, carrying into the
       year and clamping the day to the target month.
    3. Add the days part as calendar days.
    4. Restore the original time of day, then add the seconds part.
    """
    start = coerce_instant(instant)
    parts = duration.to_units(*_PROJECTION_UNITS)
    logger.debug("Projecting %r from %s with parts %s", duration, start, parts)

    shifted = build_date(
        start.year + parts["years"],
        start.month + parts["months"],
        start.day,
    )
    shifted += timedelta(days=parts["days"])

    result = start.replace(year=shifted.year, month=shifted.month, day=shifted.day)
    return result + timedelta(seconds=parts["seconds"])


def before(duration: "Duration", instant: datetime | date) -> datetime:
    """Return the instant `duration` before `instant`."""
    return after(-duration, instant)


def from_now(duration: "Duration", now: datetime | None = None) -> datetime:
    """Return the instant `duration` after now (or after the `now` given)."""
    return after(duration, now if now is not None else datetime.now())


def ago(duration: "Duration", now: datetime | None = None) -> datetime:
    """Return the instant `duration` before now (or before the `now` given)."""
    return before(duration, now if now is not None else datetime.now())
