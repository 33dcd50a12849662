"""Rendering durations as human-readable text.

A Syntax maps unit names to labels and says how many components to show and
how to join them. Three syntaxes are built in:

    >>> from caldur import Duration
    >>> d = Duration(hours=1, minutes=3, seconds=4)
    >>> d.render("long")
    '1 hour, 3 minutes, 4 seconds'
    >>> d.render("short")
    '1hr 3min'
    >>> d.render("micro")
    '1h'
"""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, fields, replace
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Literal, TypeAlias

from caldur.errors import UnknownSyntaxError
from caldur.units import resolve

if TYPE_CHECKING:
    from caldur.duration import Duration

logger = logging.getLogger(__name__)

DEFAULT_SYNTAX = "long"

# A single label used for any count, or a (singular, plural) pair where the
# plural may be None or left out
Label: TypeAlias = str | tuple[str] | tuple[str, str | None]


@dataclass(frozen=True, kw_only=True)
class Syntax:
    units: Mapping[str, Label]
    count: int | Literal["all"] | None = None
    separator: str = " "
    delimiter: str = ", "

    def __post_init__(self) -> None:
        for unit, entry in self.units.items():
            resolve(unit)
            if isinstance(entry, str):
                continue
            if not isinstance(entry, Sequence) or not 1 <= len(entry) <= 2:
                raise ValueError(
                    f"Label for {unit!r} must be a string or a (singular, plural) pair.\n"
                    f"Got: {entry!r}\n"
                    f"Example: units={{'days': ('day', 'days'), 'hours': 'h'}}"
                )
        if self.count is not None and self.count != "all":
            if isinstance(self.count, bool) or not isinstance(self.count, int):
                raise TypeError(
                    f"Syntax count must be an int, 'all' or None, got {self.count!r}"
                )
            if self.count < 1:
                raise ValueError(f"Syntax count must be positive, got {self.count}")

    def label(self, unit: str, value: int) -> str:
        """Pick the singular label for 1 and the plural label otherwise."""
        entry = self.units[unit]
        if isinstance(entry, str):
            return entry
        singular, *rest = entry
        if value == 1 or not rest:
            return singular
        return rest[0] or singular


SYNTAXES: MappingProxyType[str, Syntax] = MappingProxyType(
    {
        "micro": Syntax(
            units={
                "seconds": "s",
                "minutes": "m",
                "hours": "h",
                "days": "d",
                "weeks": "w",
                "months": "mn",
                "years": "y",
            },
            count=1,
            separator="",
            delimiter=" ",
        ),
        "short": Syntax(
            units={
                "seconds": "sec",
                "minutes": "min",
                "hours": "hr",
                "days": "d",
                "weeks": "wk",
                "months": "mn",
                "years": "yr",
                "centuries": "ct",
                "millennia": "ml",
            },
            count=2,
            separator="",
            delimiter=" ",
        ),
        "long": Syntax(
            units={
                "seconds": ("second", "seconds"),
                "minutes": ("minute", "minutes"),
                "hours": ("hour", "hours"),
                "days": ("day", "days"),
                "weeks": ("week", "weeks"),
                "months": ("month", "months"),
                "years": ("year", "years"),
                "centuries": ("century", "centuries"),
                "millennia": ("millennium", "millennia"),
            },
        ),
    }
)

_SYNTAX_FIELDS = frozenset(field.name for field in fields(Syntax))


def resolve_syntax(
    syntax: "str | Syntax | Mapping[str, Any]", **overrides: Any
) -> Syntax:
    """Turn a syntax name, Syntax or plain mapping into a Syntax.

    Keyword overrides replace individual fields of the resolved syntax.
    """
    if isinstance(syntax, Syntax):
        resolved = syntax
    elif isinstance(syntax, str):
        try:
            resolved = SYNTAXES[syntax]
        except KeyError:
            valid = ", ".join(SYNTAXES)
            raise UnknownSyntaxError(
                f"Unknown syntax: {syntax!r}\n"
                f"Valid syntaxes: {valid}\n"
                f"Or pass a mapping: render(units={{'hours': 'h'}}, separator='')"
            ) from None
    elif isinstance(syntax, Mapping):
        overrides = {**syntax, **overrides}
        resolved = SYNTAXES[DEFAULT_SYNTAX]
    else:
        raise TypeError(
            f"Expected a syntax name, Syntax or mapping.\n"
            f"Got {type(syntax).__name__!r}: {syntax!r}"
        )

    unknown = set(overrides) - _SYNTAX_FIELDS
    if unknown:
        raise TypeError(
            f"Unknown syntax field(s): {', '.join(sorted(unknown))}\n"
            f"Valid fields: {', '.join(sorted(_SYNTAX_FIELDS))}"
        )
    if overrides:
        resolved = replace(resolved, **overrides)
    return resolved


def render(
    duration: "Duration",
    syntax: "str | Syntax | Mapping[str, Any]" = DEFAULT_SYNTAX,
    **overrides: Any,
) -> str:
    """Render `duration` as text.

    Args:
        duration: The duration to render
        syntax: Built-in syntax name ("micro", "short", "long"), a Syntax, or a
            mapping of Syntax fields
        **overrides: Syntax fields replacing those of `syntax`

    Returns:
        The largest non-zero components, at most `count` of them, each as
        number + separator + label, joined by the delimiter

    Example:
        >>> render(Duration(hours=1, minutes=3, seconds=4), units={
        ...     "hours": "hour(s)", "minutes": "minute(s)", "seconds": "second(s)",
        ... }, delimiter=" / ")
        '1 hour(s) / 3 minute(s) / 4 second(s)'
    """
    rules = resolve_syntax(syntax, **overrides)
    parts = duration.to_units(*rules.units)
    components = [(unit, value) for unit, value in parts.items() if value > 0]

    if isinstance(rules.count, int):
        components = components[: rules.count]
    logger.debug("Rendering %r as %s", duration, components)

    return rules.delimiter.join(
        f"{value}{rules.separator}{rules.label(unit, value)}"
        for unit, value in components
    )
