"""
Angle conversion and wrapping tests
"""
from math import pi

import pytest

from greatcircle_core.utils import (
    WrapTo180,
    WrapTo360,
    clamp_unit,
    to_degrees,
    to_radians,
)


def test_degree_radian_conversion():
    assert to_radians(180.0) == pytest.approx(pi)
    assert to_radians(-90.0) == pytest.approx(-pi / 2)
    assert to_degrees(pi / 4) == pytest.approx(45.0)
    assert to_degrees(to_radians(123.456)) == pytest.approx(123.456)


@pytest.mark.parametrize("deg", [0.0, 45.5, 180.0, 359.999])
def test_wrap360_passes_in_range_values_through(deg):
    assert WrapTo360(deg) == deg


@pytest.mark.parametrize("deg, expected", [
    (360.0, 0.0),
    (-90.0, 270.0),
    (720.5, 0.5),
    (-360.0, 0.0),
    (-725.0, 355.0),
])
def test_wrap360_normalizes_out_of_range(deg, expected):
    assert WrapTo360(deg) == pytest.approx(expected)


@pytest.mark.parametrize("k", [-3, -1, 1, 2, 10])
def test_wrap360_is_periodic(k):
    for deg in (0.0, 12.5, 200.0, 359.0):
        assert WrapTo360(deg + 360 * k) == pytest.approx(WrapTo360(deg))


@pytest.mark.parametrize("deg, expected", [
    (0.0, 0.0),
    (90.0, 90.0),
    (-90.0, -90.0),
    (180.0, -180.0),
    (-180.0, -180.0),
    (190.0, -170.0),
    (-190.0, 170.0),
    (540.0, -180.0),
])
def test_wrap180(deg, expected):
    assert WrapTo180(deg) == pytest.approx(expected)


def test_clamp_unit():
    assert clamp_unit(1.0000000000000002) == 1.0
    assert clamp_unit(-1.5) == -1.0
    assert clamp_unit(0.25) == 0.25
    assert isinstance(clamp_unit(0.25), float)
