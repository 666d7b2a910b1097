import math

import pytest

from skid_odometry.processors.orientation import (
    heading_from_quaternion,
    normalize_angle,
    quaternion_from_heading,
)


@pytest.mark.parametrize('theta', [0.0, 1.2, -2.5, math.pi / 2])
def test_heading_survives_quaternion(theta):
    assert heading_from_quaternion(*quaternion_from_heading(theta)) == pytest.approx(theta)


def test_identity_quaternion_has_zero_heading():
    assert heading_from_quaternion(0.0, 0.0, 0.0, 1.0) == 0.0


def test_quaternion_is_unit_length():
    x, y, z, w = quaternion_from_heading(0.7)
    assert (x, y) == (0.0, 0.0)
    assert z * z + w * w == pytest.approx(1.0)


def test_normalize_keeps_in_range_values_exact():
    for theta in (0.0, 1.2, -3.0, -math.pi):
        assert normalize_angle(theta) == theta


def test_normalize_wraps_out_of_range_values():
    assert normalize_angle(math.pi) == pytest.approx(-math.pi)
    assert normalize_angle(3.0 * math.pi / 2.0) == pytest.approx(-math.pi / 2.0)
    assert normalize_angle(-3.0 * math.pi / 2.0) == pytest.approx(math.pi / 2.0)
    assert normalize_angle(10.0) == pytest.approx(10.0 - 4.0 * math.pi)


def test_normalize_just_below_minus_pi_stays_in_range():
    theta = normalize_angle(math.nextafter(-math.pi, -math.inf))

    assert -math.pi <= theta < math.pi
    assert theta == pytest.approx(-math.pi)
