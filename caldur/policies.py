"""Normalization policies: how many seconds a month or a year is taken to be.

Months and seconds are incommensurable, so crossing between the two axes needs
an approximation. Each policy fixes one, expressed in exact seconds.
"""

from dataclasses import dataclass
from types import MappingProxyType

from caldur.errors import UnknownPolicyError
from caldur.util import DAY

DEFAULT_POLICY = "standard"


@dataclass(frozen=True, kw_only=True)
class Policy:
    name: str
    seconds_per_year: int
    seconds_per_month: int

    @property
    def units(self) -> tuple[tuple[str, int], ...]:
        """(unit, seconds per unit) pairs, largest unit first."""
        return (
            ("years", self.seconds_per_year),
            ("months", self.seconds_per_month),
        )


POLICIES: MappingProxyType[str, Policy] = MappingProxyType(
    {
        "standard": Policy(
            name="standard", seconds_per_year=365 * DAY, seconds_per_month=30 * DAY
        ),
        "minimum": Policy(
            name="minimum", seconds_per_year=365 * DAY, seconds_per_month=28 * DAY
        ),
        "maximum": Policy(
            name="maximum", seconds_per_year=366 * DAY, seconds_per_month=31 * DAY
        ),
        # Mean Gregorian year (365.2425 days) and a twelfth of it
        "average": Policy(
            name="average", seconds_per_year=31556952, seconds_per_month=2629746
        ),
    }
)


def resolve_policy(policy: "str | Policy") -> Policy:
    """Look up a policy by name; Policy instances pass through unchanged."""
    if isinstance(policy, Policy):
        return policy
    try:
        return POLICIES[policy]
    except (KeyError, TypeError):
        valid = ", ".join(POLICIES)
        raise UnknownPolicyError(
            f"Unknown normalization policy: {policy!r}\n"
            f"Valid policies: {valid}\n"
            f"Example: duration.normalize(policy='maximum')"
        ) from None
