"""The Duration value type.

A Duration holds two exact integers: elapsed seconds, contributed by
second-based units (seconds through weeks), and elapsed months, contributed by
month-based units (months through millennia). The axes are never converted into
each other implicitly; `normalize` and `denormalize` cross between them under an
explicit policy.

Example:
    >>> from caldur import Duration
    >>> d = Duration(hours=1, minutes=3, seconds=4)
    >>> d.to_units("minutes", "seconds")
    {'minutes': 63, 'seconds': 4}
    >>> Duration(months=12) == Duration(years=1)
    True
"""

from collections.abc import Mapping
from datetime import date, datetime
from itertools import chain
from typing import TYPE_CHECKING, Any

from typing_extensions import override

from caldur import presentation, projection
from caldur.errors import InvalidAxisError, TimeOutOfBoundsError, TypeMismatchError
from caldur.policies import DEFAULT_POLICY, Policy, resolve_policy
from caldur.units import AXES, Axis, Unit, resolve, sort_units, superior
from caldur.util import trunc_div

if TYPE_CHECKING:
    from caldur.presentation import Syntax
    from caldur.wallclock import WallClock


class Duration:
    __slots__ = ("_seconds", "_months")

    _seconds: int
    _months: int

    def __init__(
        self, units: "Mapping[str | Unit, int] | None" = None, /, **unit_counts: int
    ) -> None:
        """Build a duration from unit counts.

        Counts from the positional mapping and from keyword arguments are
        summed. Unit names may be plural or singular.

        Raises:
            UnknownUnitError: If a unit name is not recognized
            TypeError: If a count is not an integer

        Example:
            >>> Duration(hours=1, days=2, year=10).get("months")
            120
            >>> Duration({"minute": 20}, seconds=10).get("seconds")
            1210
        """
        seconds = 0
        months = 0
        for name, count in chain((units or {}).items(), unit_counts.items()):
            unit = resolve(name)
            if isinstance(count, bool) or not isinstance(count, int):
                raise TypeError(
                    f"Duration counts must be integers.\n"
                    f"Got {type(count).__name__!r} for {str(name)!r}: {count!r}\n"
                    f"Hint: use a smaller unit instead of a fraction, "
                    f"e.g. Duration(minutes=90) rather than Duration(hours=1.5)"
                )
            if unit.axis == "seconds":
                seconds += count * unit.magnitude
            else:
                months += count * unit.magnitude
        object.__setattr__(self, "_seconds", seconds)
        object.__setattr__(self, "_months", months)

    @property
    def seconds(self) -> int:
        return self._seconds

    @property
    def months(self) -> int:
        return self._months

    def get(self, axis: Axis) -> int:
        """Return the raw seconds or months field."""
        if axis == "seconds":
            return self._seconds
        if axis == "months":
            return self._months
        raise InvalidAxisError(
            f"Unknown axis: {axis!r}\n"
            f"Valid axes: {', '.join(AXES)}\n"
            f"Hint: use to_unit() to convert to other units, "
            f"e.g. duration.to_unit('days')"
        )

    # Arithmetic

    def _require_duration(self, other: Any, symbol: str) -> "Duration":
        if not isinstance(other, Duration):
            raise TypeMismatchError(
                f"Cannot apply {symbol} to a Duration and a {type(other).__name__}.\n"
                f"Got: Duration {symbol} {other!r}\n"
                f"Hint: build a Duration first, e.g. "
                f"Duration(minutes=5) {symbol} Duration(months=12)"
            )
        return other

    def __add__(self, other: "Duration") -> "Duration":
        other = self._require_duration(other, "+")
        return Duration(
            seconds=self._seconds + other._seconds,
            months=self._months + other._months,
        )

    def __sub__(self, other: "Duration") -> "Duration":
        other = self._require_duration(other, "-")
        return Duration(
            seconds=self._seconds - other._seconds,
            months=self._months - other._months,
        )

    def __radd__(self, other: Any) -> "Duration | datetime":
        """Project onto `instant + duration`; `0 + duration` is the duration.

        Example:
            >>> datetime(2000, 1, 1, 3, 45) + Duration(minutes=5)
            datetime.datetime(2000, 1, 1, 3, 50)
            >>> sum([Duration(hours=1), Duration(minutes=30)]) == Duration(minutes=90)
            True
        """
        if isinstance(other, int) and not isinstance(other, bool) and other == 0:
            return self
        if isinstance(other, date):
            return projection.after(self, other)
        raise self._reflected_mismatch(other, "+")

    def __rsub__(self, other: Any) -> datetime:
        """Project onto `instant - duration`."""
        if isinstance(other, date):
            return projection.before(self, other)
        raise self._reflected_mismatch(other, "-")

    def _reflected_mismatch(self, other: Any, symbol: str) -> TypeMismatchError:
        return TypeMismatchError(
            f"Cannot apply {symbol} to a {type(other).__name__} and a Duration.\n"
            f"Got: {other!r} {symbol} {self!r}\n"
            f"Hint: only a datetime or date can have a Duration added or subtracted, "
            f"e.g. datetime(2000, 1, 1) {symbol} Duration(months=5)"
        )

    def __neg__(self) -> "Duration":
        return Duration(seconds=-self._seconds, months=-self._months)

    def __mul__(self, factor: int) -> "Duration":
        if isinstance(factor, bool) or not isinstance(factor, int):
            return NotImplemented
        return Duration(seconds=self._seconds * factor, months=self._months * factor)

    def __rmul__(self, factor: int) -> "Duration":
        return self.__mul__(factor)

    def __bool__(self) -> bool:
        return bool(self._seconds or self._months)

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._seconds == other._seconds and self._months == other._months

    @override
    def __hash__(self) -> int:
        return hash((self._seconds, self._months))

    @override
    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"Duration is immutable; cannot set {name!r}")

    @override
    def __reduce__(self) -> tuple[Any, ...]:
        return (Duration, ({"seconds": self._seconds, "months": self._months},))

    @override
    def __repr__(self) -> str:
        return f"Duration(seconds={self._seconds}, months={self._months})"

    @override
    def __str__(self) -> str:
        return self.render()

    @override
    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return str(self)
        return self.render(format_spec)

    # Unit conversion

    def to_unit(self, unit: "str | Unit") -> int:
        """Return the whole number of `unit` in this duration.

        Second-based units are counted after normalizing months into seconds,
        month-based units after denormalizing seconds into months (both with
        the standard policy). Partial units are truncated toward zero.

        Example:
            >>> Duration(months=1).to_unit("days")
            30
            >>> Duration(seconds=-90).to_unit("minutes")
            -1
        """
        info = resolve(unit)
        if info.axis == "seconds":
            return trunc_div(self.normalize()._seconds, info.magnitude)
        return trunc_div(self.denormalize()._months, info.magnitude)

    def to_units(self, *units: "str | Unit") -> "dict[str | Unit, int]":
        """Break this duration down into several units, largest first.

        Units are always processed in descending magnitude regardless of the
        order they are given in. Each unit takes its whole count out of what
        the larger units left behind. Result keys use the given spellings.

        Example:
            >>> Duration(days=180).to_units("days", "weeks")
            {'weeks': 25, 'days': 5}
        """
        parts: dict[str | Unit, int] = {}
        remainder = self
        for unit in reversed(sort_units(units)):
            part = remainder.to_unit(unit)
            parts[unit] = part
            remainder -= Duration({unit: part})
        return parts

    def _to_unit_part(self, unit: "str | Unit") -> int:
        """Like to_unit, but reads the raw field without crossing axes.

        `Duration(years=1, months=1, days=365)._to_unit_part("months")` is 13:
        the days cannot be expressed exactly in months so they are ignored.
        """
        info = resolve(unit)
        return trunc_div(self.get(info.axis), info.magnitude)

    def count(self, unit: "str | Unit") -> int:
        """Return the `unit` component left over once whole larger units are removed.

        Example:
            >>> Duration(hours=1, minutes=3).count("minutes")
            3
        """
        info = resolve(unit)
        value = self.to_unit(info)
        larger = superior(info)
        if larger is not None:
            value -= Duration({larger: self.to_unit(larger)}).to_unit(info)
        return value

    # Normalization

    def normalize(self, policy: "str | Policy" = DEFAULT_POLICY) -> "Duration":
        """Approximate the months field as seconds.

        Whole years are converted with the policy's year length first, then
        the remaining whole months with its month length. The result has
        `months == 0`.

        Example:
            >>> Duration(months=14).normalize().get("seconds") // 86400
            425
        """
        rules = resolve_policy(policy)
        normalized = 0
        remainder = self
        for unit, seconds_per_unit in rules.units:
            part = remainder._to_unit_part(unit)
            normalized += part * seconds_per_unit
            remainder -= Duration({unit: part})
        return Duration(seconds=normalized) + remainder

    def denormalize(self, policy: "str | Policy" = DEFAULT_POLICY) -> "Duration":
        """Approximate the seconds field as months.

        Whole policy-years are moved out of the seconds field first, then whole
        policy-months. Seconds that do not fill a whole month stay as seconds.

        Example:
            >>> Duration(days=32).denormalize("minimum").to_units("months", "days")
            {'months': 1, 'days': 4}
        """
        rules = resolve_policy(policy)
        denormalized = Duration()
        remainder = self
        for unit, seconds_per_unit in rules.units:
            count = trunc_div(remainder._seconds, seconds_per_unit)
            denormalized += Duration({unit: count})
            remainder -= Duration(seconds=count * seconds_per_unit)
        return denormalized + remainder

    # Calendar projection

    def after(self, instant: datetime | date) -> datetime:
        """Return the instant this duration after `instant`."""
        return projection.after(self, instant)

    def before(self, instant: datetime | date) -> datetime:
        """Return the instant this duration before `instant`."""
        return projection.before(self, instant)

    def from_now(self, now: datetime | None = None) -> datetime:
        return projection.from_now(self, now)

    def ago(self, now: datetime | None = None) -> datetime:
        return projection.ago(self, now)

    # Presentation

    def render(
        self,
        syntax: "str | Syntax | Mapping[str, Any]" = presentation.DEFAULT_SYNTAX,
        **overrides: Any,
    ) -> str:
        """Render as text, e.g. "1 hour, 3 minutes, 4 seconds"."""
        return presentation.render(self, syntax, **overrides)

    def to_wall(self) -> "WallClock":
        """Convert to a time of day, counting from midnight.

        Raises:
            TimeOutOfBoundsError: If there are months, or the seconds fall
                outside a single day
        """
        # Import at runtime to avoid circular dependency
        from caldur.wallclock import WallClock

        if self._months != 0:
            raise TimeOutOfBoundsError(
                f"A wall clock cannot hold calendar months.\n"
                f"Got: {self!r}\n"
                f"Hint: normalize() first if an approximation is acceptable"
            )
        return WallClock.from_seconds(self._seconds)
