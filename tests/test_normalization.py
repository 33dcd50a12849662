"""Tests for normalize/denormalize and the policy table."""

import pytest

from caldur import Duration
from caldur.errors import UnknownPolicyError
from caldur.policies import POLICIES, Policy, resolve_policy

DAY = 24 * 60 * 60


def test_normalize_months_as_seconds():
    """Test that month-based units are approximated with the standard policy."""
    assert Duration(months=1).normalize().to_unit("seconds") == 30 * DAY
    assert Duration(months=11).normalize().to_unit("seconds") == 11 * 30 * DAY
    assert Duration(months=14).normalize().to_unit("seconds") == 365 * DAY + 2 * 30 * DAY

    d = Duration(months=25, days=366)
    assert d.normalize().get("seconds") == 3 * 365 * DAY + 30 * DAY + DAY


def test_normalize_negative_months():
    """Test that negative durations normalize symmetrically."""
    assert Duration(months=-1).normalize().to_unit("seconds") == -30 * DAY
    assert Duration(months=-11).normalize().to_unit("seconds") == -11 * 30 * DAY
    assert (
        Duration(months=-14).normalize().to_unit("seconds")
        == -365 * DAY - 2 * 30 * DAY
    )

    d = -Duration(months=25, days=366)
    assert d.normalize().get("seconds") == -3 * 365 * DAY - 30 * DAY - DAY


def test_normalize_clears_months():
    """Test that the months field is always zero after normalizing."""
    for policy in POLICIES:
        for d in (Duration(months=7), Duration(years=-3, days=2), Duration()):
            assert d.normalize(policy).get("months") == 0


def test_normalize_with_other_policies():
    """Test the minimum and maximum policies."""
    assert Duration(months=1).normalize("minimum").to_unit("seconds") == 28 * DAY
    assert Duration(months=1).normalize("maximum").to_unit("seconds") == 31 * DAY
    assert Duration(years=1).normalize("minimum").to_unit("seconds") == 365 * DAY
    assert Duration(years=1).normalize("maximum").to_unit("seconds") == 366 * DAY


def test_normalize_with_average_policy():
    """Test the mean Gregorian year policy."""
    assert Duration(years=1).normalize("average").seconds == 31556952
    assert Duration(months=1).normalize("average").seconds == 2629746
    assert Duration(years=400).normalize("average").seconds == 146097 * DAY


def test_denormalize_seconds_as_months():
    """Test that second-based units are approximated with the standard policy."""
    assert Duration(days=30).denormalize().to_unit("months") == 1

    assert Duration(months=1, days=100).denormalize().to_units("months", "days") == {
        "months": 4,
        "days": 10,
    }

    assert Duration(years=2, days=366).denormalize().to_units("years", "days") == {
        "years": 3,
        "days": 1,
    }


def test_denormalize_negative_seconds():
    """Test that negative durations denormalize symmetrically."""
    assert Duration(days=-30).denormalize().to_unit("months") == -1

    d = -Duration(months=1, days=100)
    assert d.denormalize().to_units("months", "days") == {"months": -4, "days": -10}

    d = -Duration(years=2, days=366)
    assert d.denormalize().to_units("years", "days") == {"years": -3, "days": -1}


def test_denormalize_with_other_policies():
    """Test the minimum and maximum policies."""
    assert Duration(days=32).denormalize("minimum").to_units("months", "days") == {
        "months": 1,
        "days": 4,
    }
    assert Duration(days=32).denormalize("maximum").to_units("months", "days") == {
        "months": 1,
        "days": 1,
    }
    assert Duration(days=367).denormalize("minimum").to_units("years", "days") == {
        "years": 1,
        "days": 2,
    }
    assert Duration(days=367).denormalize("maximum").to_units("years", "days") == {
        "years": 1,
        "days": 1,
    }


def test_denormalize_keeps_partial_month_as_seconds():
    """Test that leftover seconds stay on the seconds axis."""
    d = Duration(days=45, seconds=5).denormalize()
    assert d.get("months") == 1
    assert d.get("seconds") == 15 * DAY + 5


def test_normalize_reverses_denormalize_for_seconds():
    """Test that denormalizing then normalizing a seconds-only duration is lossless."""
    for policy in POLICIES:
        for d in (
            Duration(days=400),
            Duration(days=-400),
            Duration(weeks=100, seconds=7),
            Duration(seconds=1),
        ):
            assert d.denormalize(policy).normalize(policy) == d


def test_policy_instances_pass_through():
    """Test that a custom Policy can be used directly."""
    lunar = Policy(name="lunar", seconds_per_year=354 * DAY, seconds_per_month=29 * DAY)
    assert resolve_policy(lunar) is lunar
    assert Duration(months=13).normalize(lunar).get("seconds") == 354 * DAY + 29 * DAY


def test_unknown_policy():
    """Test that unknown policy names raise UnknownPolicyError."""
    with pytest.raises(UnknownPolicyError, match="Unknown normalization policy"):
        Duration(months=1).normalize("median")

    with pytest.raises(ValueError, match="Valid policies: standard"):
        Duration(days=1).denormalize("median")
