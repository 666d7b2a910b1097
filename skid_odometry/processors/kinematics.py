from ..models.odometry_state import BodyVelocity, WheelSpeeds

# Drivetrain calibration
GEAR_RATIO = 0.02615575
RPM_TO_RADS = 0.104719755
WHEEL_RADIUS = 0.1575  # meters
APPARENT_BASELINE = 1.03334887  # meters, larger than the physical track to absorb skid slip


class KinematicModel:
    """Skid-steering forward kinematics from four motor shaft speeds."""

    def __init__(self,
                 gear_ratio: float = GEAR_RATIO,
                 rpm_to_rads: float = RPM_TO_RADS,
                 wheel_radius: float = WHEEL_RADIUS,
                 apparent_baseline: float = APPARENT_BASELINE):
        """
        Args:
            gear_ratio: Motor to wheel reduction
            rpm_to_rads: RPM to rad/s conversion
            wheel_radius: Wheel radius in meters
            apparent_baseline: Effective track width in meters
        """
        if apparent_baseline <= 0.0:
            raise ValueError(f'apparent_baseline must be positive, got {apparent_baseline}')
        if wheel_radius <= 0.0:
            raise ValueError(f'wheel_radius must be positive, got {wheel_radius}')

        self.gear_ratio = float(gear_ratio)
        self.rpm_to_rads = float(rpm_to_rads)
        self.wheel_radius = float(wheel_radius)
        self.apparent_baseline = float(apparent_baseline)

    def side_speeds(self, wheels: WheelSpeeds) -> tuple[float, float]:
        """
        Surface speed of each side in m/s.

        The left motors report with inverted sign, so they are negated
        before averaging.

        Returns:
            tuple[float, float]: (left, right)
        """
        left_rpm = -((wheels.front_left + wheels.rear_left) * self.gear_ratio) / 2.0
        right_rpm = ((wheels.front_right + wheels.rear_right) * self.gear_ratio) / 2.0

        left = left_rpm * self.wheel_radius * self.rpm_to_rads
        right = right_rpm * self.wheel_radius * self.rpm_to_rads
        return left, right

    def estimate_velocity(self, wheels: WheelSpeeds) -> BodyVelocity:
        left, right = self.side_speeds(wheels)
        return BodyVelocity(
            linear=(left + right) / 2.0,
            angular=(right - left) / self.apparent_baseline,
        )


_DEFAULT_MODEL = KinematicModel()


def estimate_velocity(wheels: WheelSpeeds) -> BodyVelocity:
    """Body velocity with the default drivetrain calibration."""
    return _DEFAULT_MODEL.estimate_velocity(wheels)
