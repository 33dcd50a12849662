"""WallClock: a time of day with no date attached.

A WallClock counts whole seconds since midnight and is always within a single
day, so 24:00 and later cannot be represented.

Example:
    >>> from caldur.wallclock import WallClock
    >>> clock = WallClock(5, 30, 27, meridiem="pm")
    >>> clock.hour, str(clock), clock.format("twenty_four_hour")
    (17, '5:30:27 PM', '17:30:27')
"""

import re
from datetime import date, datetime, time, tzinfo
from functools import total_ordering
from typing import Any, Literal, TypeAlias

from typing_extensions import override

from caldur.duration import Duration
from caldur.errors import TimeOutOfBoundsError
from caldur.util import DAY, HOUR, MINUTE

Meridiem: TypeAlias = Literal["am", "pm"]
HourSystem: TypeAlias = Literal["twelve_hour", "twenty_four_hour"]

_CLOCK_PATTERN = re.compile(
    r"^\s*(?P<hour>\d{1,2}):(?P<minute>\d{2})(?::(?P<second>\d{2}))?"
    r"\s*(?P<meridiem>[ap]\.?m\.?)?\s*$",
    re.IGNORECASE,
)


@total_ordering
class WallClock:
    __slots__ = ("_seconds",)

    _seconds: int

    def __init__(
        self,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        *,
        meridiem: Meridiem | None = None,
    ) -> None:
        """Create a time of day.

        Args:
            hour: 0-23, or 1-12 when a meridiem is given
            minute: 0-59
            second: 0-59
            meridiem: "am" or "pm" for 12-hour input; 12 am is midnight and
                12 pm is noon

        Raises:
            TimeOutOfBoundsError: If any component is out of range
        """
        if meridiem is not None:
            meridiem = meridiem.lower()  # type: ignore[assignment]
            if meridiem not in ("am", "pm"):
                raise ValueError(f"meridiem must be 'am' or 'pm', got {meridiem!r}")
            if not 1 <= hour <= 12:
                raise TimeOutOfBoundsError(
                    f"hour must be 1-12 with a meridiem, got {hour} {meridiem}"
                )
            hour = hour % 12 + (12 if meridiem == "pm" else 0)
        elif not 0 <= hour <= 23:
            raise TimeOutOfBoundsError(f"hour must be 0-23, got {hour}")
        if not 0 <= minute <= 59:
            raise TimeOutOfBoundsError(f"minute must be 0-59, got {minute}")
        if not 0 <= second <= 59:
            raise TimeOutOfBoundsError(f"second must be 0-59, got {second}")
        object.__setattr__(self, "_seconds", hour * HOUR + minute * MINUTE + second)

    @classmethod
    def from_seconds(cls, seconds: int) -> "WallClock":
        """Create a WallClock from seconds since midnight, in [0, 86400)."""
        if not 0 <= seconds < DAY:
            raise TimeOutOfBoundsError(
                f"A wall clock holds 0 to {DAY - 1} seconds since midnight.\n"
                f"Got: {seconds}\n"
                f"Hint: durations of a day or more cannot be a time of day"
            )
        hours, rest = divmod(seconds, HOUR)
        return cls(hours, *divmod(rest, MINUTE))

    @classmethod
    def from_string(cls, text: str) -> "WallClock":
        """Parse "H:MM" or "H:MM:SS", optionally followed by AM/PM.

        Example:
            >>> WallClock.from_string("9:00 PM") == WallClock(21, 0)
            True
        """
        match = _CLOCK_PATTERN.match(text)
        if match is None:
            raise ValueError(
                f"Cannot parse wall clock time: {text!r}\n"
                f"Expected formats: '13:00', '23:34:45', '9:00 PM', '11:00:01 pm'"
            )
        meridiem = match["meridiem"]
        return cls(
            int(match["hour"]),
            int(match["minute"]),
            int(match["second"] or 0),
            meridiem=meridiem.replace(".", "").lower() if meridiem else None,
        )

    @classmethod
    def from_time(cls, value: datetime | time) -> "WallClock":
        """Take the time of day from a datetime or time, dropping microseconds."""
        return cls(value.hour, value.minute, value.second)

    @property
    def hour(self) -> int:
        """Hour on the 24-hour clock."""
        return self._seconds // HOUR

    @property
    def twelve_hour(self) -> int:
        """Hour on the 12-hour clock (1-12)."""
        return self.hour % 12 or 12

    @property
    def minute(self) -> int:
        return self._seconds % HOUR // MINUTE

    @property
    def second(self) -> int:
        return self._seconds % MINUTE

    @property
    def meridiem(self) -> Meridiem:
        return "am" if self.hour < 12 else "pm"

    def to_duration(self) -> Duration:
        """Return the time since midnight as a Duration."""
        return Duration(seconds=self._seconds)

    def on(self, day: date, tz: tzinfo | None = None) -> datetime:
        """Return this time of day on the given date."""
        return datetime.combine(day, time(self.hour, self.minute, self.second), tz)

    def format(
        self,
        system: HourSystem = "twelve_hour",
        *,
        use_seconds: bool = True,
        include_meridiem: bool = True,
    ) -> str:
        """Format as "5:30:27 PM" (twelve_hour) or "17:30:27" (twenty_four_hour)."""
        if system == "twelve_hour":
            hour = self.twelve_hour
        elif system == "twenty_four_hour":
            hour = self.hour
        else:
            raise ValueError(
                f"Unknown hour system: {system!r}\n"
                f"Valid systems: twelve_hour, twenty_four_hour"
            )

        text = f"{hour}:{self.minute:02d}"
        if use_seconds:
            text += f":{self.second:02d}"
        if system == "twelve_hour" and include_meridiem:
            text += f" {self.meridiem.upper()}"
        return text

    def __int__(self) -> int:
        return self._seconds

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WallClock):
            return NotImplemented
        return self._seconds == other._seconds

    def __lt__(self, other: "WallClock") -> bool:
        if not isinstance(other, WallClock):
            return NotImplemented
        return self._seconds < other._seconds

    @override
    def __hash__(self) -> int:
        return hash(self._seconds)

    @override
    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"WallClock is immutable; cannot set {name!r}")

    @override
    def __reduce__(self) -> tuple[Any, ...]:
        return (WallClock.from_seconds, (self._seconds,))

    @override
    def __repr__(self) -> str:
        return f"WallClock({self.hour}, {self.minute}, {self.second})"

    @override
    def __str__(self) -> str:
        return self.format()
