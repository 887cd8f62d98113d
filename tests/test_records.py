"""
Unit tests for cell coercion
"""
import pytest

from econ.records import Record, make_record, to_number


@pytest.mark.parametrize(
    "cell",
    ["", "NA", "abc", None, "inf", "-Infinity", "nan", "1,5", "1_000", "0x10", "1e", "."],
)
def test_to_number_missing_or_invalid(cell):
    assert to_number(cell) is None


@pytest.mark.parametrize(
    "cell, expected",
    [
        ("42", 42.0),
        ("-3.5", -3.5),
        ("0", 0.0),
        ("1e3", 1000.0),
        (" 7 ", 7.0),
        ("+2.5E-1", 0.25),
        (".5", 0.5),
        ("5.", 5.0),
    ],
)
def test_to_number_valid(cell, expected):
    assert to_number(cell) == expected


def test_to_number_is_exact():
    assert to_number("21433226000000.5") == 21433226000000.5
    assert to_number("0.1") == 0.1


def test_na_is_case_sensitive_sentinel():
    # only the literal "NA" is a sentinel; "na" falls through to float() and fails
    assert to_number("na") is None
    assert to_number("NaN") is None


def test_make_record_defaults_missing_keys():
    rec = make_record({"country": "Peru", "gdp_2019": "226.8"})
    assert rec == Record("Peru", "", "", None, 226.8, None)


def test_record_is_immutable():
    rec = make_record({"country": "Peru"})
    with pytest.raises(AttributeError):
        rec.country = "Chile"
