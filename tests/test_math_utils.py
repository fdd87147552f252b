"""Tests for numeric helpers."""

import pytest

from pysortie.misc.math_utils import (
    clamp,
    clamp_min,
    meters_to_nautical_miles,
    nautical_miles_to_meters,
    percent_to_fraction,
)


@pytest.mark.parametrize("value,expected", [(-10, 0), (0, 0), (50, 50), (100, 100), (250, 100)])
def test_clamp_int_keeps_int(value, expected):
    result = clamp(value, 0, 100)
    assert result == expected
    assert isinstance(result, int)


def test_clamp_float():
    assert clamp(1.5, 0.0, 1.0) == 1.0
    assert isinstance(clamp(0.5, 0.0, 1.0), float)


@pytest.mark.parametrize("value,expected", [(-5, 0), (0, 0), (12, 12)])
def test_clamp_min(value, expected):
    assert clamp_min(value) == expected


@pytest.mark.parametrize("percent,fraction", [(-20, 0.0), (0, 0.0), (80, 0.8), (100, 1.0), (150, 1.0)])
def test_percent_to_fraction(percent, fraction):
    assert percent_to_fraction(percent) == pytest.approx(fraction)


def test_nautical_mile_conversion():
    assert nautical_miles_to_meters(1) == 1852.0
    assert meters_to_nautical_miles(3704) == pytest.approx(2.0)
