"""Shorthand for building durations.

Each unit is available as a one-unit Duration, so compound durations read
naturally with `*` and `+`:

    >>> from caldur.builders import duration, minutes, months
    >>> 5 * minutes + 12 * months == duration(5, "minutes") + duration(1, "year")
    True
"""

from caldur.duration import Duration
from caldur.units import Unit


def duration(count: int, unit: "str | Unit") -> Duration:
    """Return a Duration of `count` units, e.g. duration(5, "minutes")."""
    return Duration({unit: count})


seconds: Duration = duration(1, "seconds")
minutes: Duration = duration(1, "minutes")
hours: Duration = duration(1, "hours")
days: Duration = duration(1, "days")
weeks: Duration = duration(1, "weeks")
months: Duration = duration(1, "months")
years: Duration = duration(1, "years")
decades: Duration = duration(1, "decades")
centuries: Duration = duration(1, "centuries")
millennia: Duration = duration(1, "millennia")
