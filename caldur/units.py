"""Unit table: every recognized unit name and its exact magnitude.

A unit lives on exactly one axis. Second-based units count seconds, month-based
units count months, and magnitudes are always exact integers.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from types import MappingProxyType
from typing import Literal, TypeAlias

from caldur.errors import UnknownUnitError
from caldur.util import (
    CENTURY,
    DAY,
    DECADE,
    HOUR,
    MILLENNIUM,
    MINUTE,
    MONTH,
    SECOND,
    WEEK,
    YEAR,
)

Axis: TypeAlias = Literal["seconds", "months"]

AXES: tuple[Axis, ...] = ("seconds", "months")


@dataclass(frozen=True, kw_only=True)
class Unit:
    name: str
    singular: str
    axis: Axis
    magnitude: int

    def __post_init__(self) -> None:
        if self.magnitude <= 0:
            raise ValueError(
                f"Unit magnitude must be positive, got {self.magnitude} for {self.name!r}"
            )

    @property
    def sort_key(self) -> tuple[int, int]:
        """Ordering key: months-magnitude first, then seconds-magnitude."""
        if self.axis == "months":
            return (self.magnitude, 0)
        return (0, self.magnitude)

    def __str__(self) -> str:
        return self.name


# Ascending canonical order
_UNITS: tuple[Unit, ...] = (
    Unit(name="seconds", singular="second", axis="seconds", magnitude=SECOND),
    Unit(name="minutes", singular="minute", axis="seconds", magnitude=MINUTE),
    Unit(name="hours", singular="hour", axis="seconds", magnitude=HOUR),
    Unit(name="days", singular="day", axis="seconds", magnitude=DAY),
    Unit(name="weeks", singular="week", axis="seconds", magnitude=WEEK),
    Unit(name="months", singular="month", axis="months", magnitude=MONTH),
    Unit(name="years", singular="year", axis="months", magnitude=YEAR),
    Unit(name="decades", singular="decade", axis="months", magnitude=DECADE),
    Unit(name="centuries", singular="century", axis="months", magnitude=CENTURY),
    Unit(name="millennia", singular="millennium", axis="months", magnitude=MILLENNIUM),
)

UNITS: MappingProxyType[str, Unit] = MappingProxyType(
    {unit.name: unit for unit in _UNITS}
)

# Canonical names plus singular aliases
_LOOKUP: MappingProxyType[str, Unit] = MappingProxyType(
    {**UNITS, **{unit.singular: unit for unit in _UNITS}}
)

_POSITION = {unit.name: index for index, unit in enumerate(_UNITS)}


def resolve(unit: "str | Unit") -> Unit:
    """Return the unit metadata for a canonical name or singular alias."""
    if isinstance(unit, Unit):
        return unit
    try:
        return _LOOKUP[unit]
    except (KeyError, TypeError):
        valid = ", ".join(canonical_order())
        raise UnknownUnitError(
            f"Unknown unit: {unit!r}\n"
            f"Valid units: {valid}\n"
            f"Singular forms are accepted too (e.g. 'minute', 'century')."
        ) from None


def canonical_order() -> tuple[str, ...]:
    """Return every canonical unit name, smallest first."""
    return tuple(unit.name for unit in _UNITS)


def sort_units(units: Iterable["str | Unit"]) -> list["str | Unit"]:
    """Sort unit names ascending by magnitude, keeping the given spellings."""
    return sorted(units, key=lambda unit: resolve(unit).sort_key)


def superior(unit: "str | Unit") -> Unit | None:
    """Return the next larger unit in canonical order, or None for the largest."""
    position = _POSITION[resolve(unit).name] + 1
    if position < len(_UNITS):
        return _UNITS[position]
    return None
