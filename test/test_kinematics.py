import pytest

from skid_odometry.models.odometry_state import WheelSpeeds
from skid_odometry.processors.kinematics import (
    APPARENT_BASELINE,
    GEAR_RATIO,
    RPM_TO_RADS,
    WHEEL_RADIUS,
    KinematicModel,
    estimate_velocity,
)


def surface_speed(rpm):
    return GEAR_RATIO * RPM_TO_RADS * WHEEL_RADIUS * rpm


def test_straight_driving_has_no_rotation():
    # Left motors report forward motion with a negative sign
    velocity = estimate_velocity(WheelSpeeds(-1200.0, 1200.0, -1200.0, 1200.0))

    assert velocity.angular == pytest.approx(0.0, abs=1e-12)
    assert velocity.linear == pytest.approx(surface_speed(1200.0))
    assert velocity.linear > 0.0


def test_reverse_driving():
    velocity = estimate_velocity(WheelSpeeds(800.0, -800.0, 800.0, -800.0))

    assert velocity.angular == pytest.approx(0.0, abs=1e-12)
    assert velocity.linear == pytest.approx(-surface_speed(800.0))


def test_turning_in_place():
    # Equal raw readings mean the sides spin in opposite directions
    velocity = estimate_velocity(WheelSpeeds(500.0, 500.0, 500.0, 500.0))

    assert velocity.linear == pytest.approx(0.0, abs=1e-12)
    assert velocity.angular == pytest.approx(2.0 * surface_speed(500.0) / APPARENT_BASELINE)
    assert velocity.angular > 0.0


def test_right_slower_turns_clockwise():
    velocity = estimate_velocity(WheelSpeeds(-1000.0, 600.0, -1000.0, 600.0))

    assert velocity.angular < 0.0
    assert velocity.linear == pytest.approx(surface_speed(800.0))


def test_front_and_rear_are_averaged():
    model = KinematicModel()
    left, right = model.side_speeds(WheelSpeeds(-900.0, 0.0, -100.0, 1000.0))

    assert left == pytest.approx(surface_speed(500.0))
    assert right == pytest.approx(surface_speed(500.0))


def test_stalled_wheel_is_not_clamped():
    velocity = estimate_velocity(WheelSpeeds(-1000.0, 1000.0, 0.0, 1000.0))

    left = surface_speed(500.0)
    right = surface_speed(1000.0)
    assert velocity.linear == pytest.approx((left + right) / 2.0)
    assert velocity.angular == pytest.approx((right - left) / APPARENT_BASELINE)


def test_baseline_is_tunable():
    wheels = WheelSpeeds(100.0, 100.0, 100.0, 100.0)
    wide = KinematicModel(apparent_baseline=2.0 * APPARENT_BASELINE)

    assert wide.estimate_velocity(wheels).angular == pytest.approx(
        estimate_velocity(wheels).angular / 2.0)


@pytest.mark.parametrize('kwargs', [
    {'apparent_baseline': 0.0},
    {'apparent_baseline': -1.0},
    {'wheel_radius': 0.0},
])
def test_invalid_calibration_is_rejected(kwargs):
    with pytest.raises(ValueError):
        KinematicModel(**kwargs)
