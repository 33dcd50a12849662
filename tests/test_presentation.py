"""Tests for rendering durations as text."""

import pytest

from caldur import SYNTAXES, Duration, Syntax, render
from caldur.errors import UnknownSyntaxError, UnknownUnitError
from caldur.presentation import resolve_syntax

HMS = Duration(hours=1, minutes=3, seconds=4)
YMD = Duration(years=1, months=3, days=4)


def test_long_syntax_is_default():
    """Test rendering every non-zero unit with full words."""
    assert HMS.render() == "1 hour, 3 minutes, 4 seconds"
    assert YMD.render("long") == "1 year, 3 months, 4 days"
    assert str(HMS) == "1 hour, 3 minutes, 4 seconds"


def test_micro_syntax():
    """Test that micro shows only the largest unit."""
    assert HMS.render("micro") == "1h"
    assert YMD.render("micro") == "1y"


def test_short_syntax():
    """Test that short shows the two largest units."""
    assert HMS.render("short") == "1hr 3min"
    assert YMD.render("short") == "1yr 3mn"


def test_singular_and_plural_labels():
    """Test label selection by count."""
    assert Duration(days=1).render() == "1 day"
    assert Duration(days=2).render() == "2 days"
    assert Duration(centuries=1, years=2).render() == "1 century, 2 years"
    assert Duration(millennia=3).render() == "3 millennia"


def test_decades_fold_into_years():
    """Test that built-in syntaxes render decades as years."""
    assert Duration(decades=2).render() == "20 years"


def test_user_defined_syntax():
    """Test a caller-supplied syntax as keyword overrides."""
    text = HMS.render(
        units={
            "seconds": "second(s)",
            "minutes": "minute(s)",
            "hours": "hour(s)",
        },
        separator=" ",
        delimiter=" / ",
    )
    assert text == "1 hour(s) / 3 minute(s) / 4 second(s)"


def test_mapping_syntax():
    """Test that a plain mapping overrides the default syntax's fields."""
    text = render(HMS, {"units": {"hours": "h", "minutes": "m"}, "separator": ""})
    assert text == "1h, 3m"


def test_overrides_extend_built_in_syntax():
    """Test overriding single fields of a named syntax."""
    assert HMS.render("long", count=1) == "1 hour"
    assert HMS.render("short", count="all") == "1hr 3min 4sec"
    assert HMS.render("micro", delimiter="|", count=3) == "1h|3m|4s"


def test_syntax_instances():
    """Test rendering with a Syntax object."""
    compact = Syntax(units={"weeks": "w", "days": "d"}, separator="", delimiter="")
    assert Duration(days=10).render(compact) == "1w3d"


def test_plural_falls_back_to_singular():
    """Test that a missing plural label reuses the singular one."""
    syntax = Syntax(units={"days": ("day", None)})
    assert Duration(days=3).render(syntax) == "3 day"

    single = Syntax(units={"days": ["day"]})
    assert Duration(days=3).render(single) == "3 day"
    assert Duration(days=1).render(single) == "1 day"


def test_invalid_label_shape():
    """Test that labels must be a string or a one- or two-element sequence."""
    with pytest.raises(ValueError, match="Label for 'days'"):
        Syntax(units={"days": ()})

    with pytest.raises(ValueError, match="singular, plural"):
        Syntax(units={"days": ("day", "days", "dayz")})  # type: ignore[dict-item]

    with pytest.raises(ValueError, match="Got: 3"):
        HMS.render(units={"hours": 3})


def test_zero_components_are_omitted():
    """Test that zero units are skipped and the zero duration renders empty."""
    assert Duration(hours=2, seconds=5).render() == "2 hours, 5 seconds"
    assert Duration().render() == ""


def test_format_protocol():
    """Test f-string formatting with a syntax name."""
    assert f"{HMS:short}" == "1hr 3min"
    assert f"{HMS}" == "1 hour, 3 minutes, 4 seconds"
    assert format(YMD, "micro") == "1y"


def test_unknown_syntax():
    """Test that unknown syntax names raise UnknownSyntaxError."""
    with pytest.raises(UnknownSyntaxError, match="Unknown syntax: 'tiny'"):
        HMS.render("tiny")


def test_unknown_syntax_field():
    """Test that unknown override fields raise TypeError."""
    with pytest.raises(TypeError, match="Unknown syntax field"):
        HMS.render(spacing="-")


def test_unknown_unit_in_syntax():
    """Test that labels for unknown units fail instead of rendering as zero."""
    with pytest.raises(UnknownUnitError):
        HMS.render(units={"fortnights": "fn"})


def test_invalid_count():
    """Test that count must be a positive int, 'all' or None."""
    with pytest.raises(ValueError, match="must be positive"):
        Syntax(units={"days": "d"}, count=0)

    with pytest.raises(TypeError, match="count must be"):
        Syntax(units={"days": "d"}, count="some")  # type: ignore[arg-type]


def test_resolve_syntax():
    """Test resolving names, instances and bad types."""
    assert resolve_syntax("micro") is SYNTAXES["micro"]
    assert resolve_syntax(SYNTAXES["short"]) is SYNTAXES["short"]
    assert resolve_syntax("micro", count=2).count == 2

    with pytest.raises(TypeError, match="Expected a syntax name"):
        resolve_syntax(42)  # type: ignore[arg-type]
