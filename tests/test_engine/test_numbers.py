"""Tests for attribute number coercion and rendering."""

import math

import pytest

from shape2path.engine.numbers import first_given, format_number, is_truthy, nan_min, to_number


@pytest.mark.parametrize(
    "text, expected",
    [
        ("12", 12.0),
        (" 12.5 ", 12.5),
        ("-3", -3.0),
        ("+.5", 0.5),
        ("1.", 1.0),
        ("1e3", 1000.0),
        ("2E-2", 0.02),
        ("0x10", 16.0),
        ("", 0.0),
        ("   ", 0.0),
        (None, 0.0),
        ("Infinity", math.inf),
        ("-Infinity", -math.inf),
    ],
)
def test_to_number(text, expected):
    assert to_number(text) == expected


@pytest.mark.parametrize("text", ["abc", "12px", "1,5", "nan", "inf", "--1", "0b12"])
def test_to_number_non_numeric_is_nan(text):
    assert math.isnan(to_number(text))


def test_truthiness_treats_zero_and_nan_as_missing():
    assert not is_truthy(0.0)
    assert not is_truthy(math.nan)
    assert is_truthy(-1.0)


def test_first_given():
    assert first_given(0.0, 5.0, 0.0) == 5.0
    assert first_given(math.nan, 0.0, 0.0) == 0.0
    assert first_given(3.0, 5.0, 0.0) == 3.0


def test_nan_min_propagates_nan():
    assert nan_min(3.0, 4.0) == 3.0
    assert math.isnan(nan_min(math.nan, 4.0))
    assert math.isnan(nan_min(4.0, math.nan))


@pytest.mark.parametrize(
    "value, expected",
    [
        (50.0, "50"),
        (50, "50"),
        (-15.0, "-15"),
        (2.5, "2.5"),
        (0.1 + 0.2, "0.30000000000000004"),
        (-0.0, "0"),
        (0.000001, "0.000001"),
        (1e-7, "1e-7"),
        (1.5e-7, "1.5e-7"),
        (1e21, "1e+21"),
        (1e20, "100000000000000000000"),
        (123456789.125, "123456789.125"),
        (math.nan, "NaN"),
        (math.inf, "Infinity"),
        (-math.inf, "-Infinity"),
    ],
)
def test_format_number_matches_js_rendering(value, expected):
    assert format_number(value) == expected
