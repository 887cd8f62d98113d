"""
Tests for compact number display
"""
import pytest

from econ.formatting import NA_MARKER, format_compact, format_currency, short_label


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, "0"),
        (5, "5"),
        (999, "999"),
        (1234, "1.23K"),
        (1500000, "1.5M"),
        (7000000000, "7B"),
        (21433226000000, "21.43T"),
        (999999, "1M"),
        (-2500, "-2.5K"),
        (12.5, "12.5"),
    ],
)
def test_format_compact(value, expected):
    assert format_compact(value) == expected


def test_format_currency():
    assert format_currency(1500000000000) == "$1.5T"
    assert format_currency(-3000) == "-$3K"
    assert format_currency(200) == "$200"


def test_missing_values():
    assert format_compact(None) == NA_MARKER
    assert format_currency(None) == NA_MARKER == "N/A"


def test_short_label():
    assert short_label("Japan") == "Japan"
    assert short_label("Korea, Rep.") == "Korea, Rep."
    assert short_label("United States") == "United Stat..."
