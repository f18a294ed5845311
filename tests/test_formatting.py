"""Tests for unit formatting."""

import math

import pytest

from prompttax.formatting import FormattedValue, format_impact_value


@pytest.mark.parametrize(
    ("value", "unit", "expected"),
    [
        (999, "g", ("999.0", "g")),
        (1000, "g", ("1.0", "kg")),
        (1_000_000, "g", ("1.00", "t")),
        (2_345_678, "g", ("2.35", "t")),
        (17.55, "g", ("17.6", "g")),
        (999.9, "mg", ("999.9", "mg")),
        (1000, "mg", ("1.0", "g")),
        (1_000_000, "mg", ("1.00", "kg")),
        (999, "L", ("999.0", "L")),
        (1000, "L", ("1.0", "kL")),
        (12_345, "L", ("12.3", "kL")),
        (0.119, "kWh", ("0.119", "kWh")),
        (999.9999, "kWh", ("1000.000", "kWh")),
        (1000, "kWh", ("1.00", "MWh")),
    ],
)
def test_threshold_ladders(value, unit, expected):
    assert format_impact_value(value, unit) == expected


def test_result_is_named():
    formatted = format_impact_value(1500, "g")
    assert isinstance(formatted, FormattedValue)
    assert formatted.value == "1.5"
    assert formatted.unit == "kg"


def test_zero_and_negative_values_are_formatted():
    assert format_impact_value(0, "g") == ("0.0", "g")
    assert format_impact_value(0, "kWh") == ("0.000", "kWh")
    assert format_impact_value(-5000, "g") == ("-5000.0", "g")
    assert format_impact_value(-2, "L") == ("-2.0", "L")


def test_nan_falls_to_base_unit():
    assert format_impact_value(math.nan, "mg") == ("nan", "mg")


def test_unknown_family_is_echoed_with_two_decimals():
    assert format_impact_value(3.14159, "kg") == ("3.14", "kg")


@pytest.mark.parametrize("bad", ["12", None, [1.0], True])
def test_non_numeric_input_raises(bad):
    with pytest.raises(TypeError):
        format_impact_value(bad, "g")
