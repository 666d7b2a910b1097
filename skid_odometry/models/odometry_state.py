from dataclasses import dataclass
from enum import Enum

import numpy as np


class IntegrationMode(Enum):
    """Numerical scheme used to advance the pose."""
    EULER = 0
    MIDPOINT = 1

    @property
    def method_name(self) -> str:
        """Name used to tag published odometry"""
        return 'euler' if self is IntegrationMode.EULER else 'rk'

    @classmethod
    def parse(cls, value):
        """
        Map an external configuration value to a mode.

        Accepts a mode, its integer id (0 or 1) or its method name
        ('euler' or 'rk'). Returns None for anything else.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            for mode in cls:
                if mode.value == value:
                    return mode
            return None
        if isinstance(value, str):
            for mode in cls:
                if mode.method_name == value.strip().lower():
                    return mode
        return None


@dataclass(frozen=True)
class WheelSpeeds:
    """Motor shaft speeds in RPM, before gear reduction."""
    front_left: float
    front_right: float
    rear_left: float
    rear_right: float


@dataclass(frozen=True)
class BodyVelocity:
    linear: float = 0.0   # m/s, forward positive
    angular: float = 0.0  # rad/s, counter-clockwise positive


@dataclass(frozen=True)
class Pose:
    """Planar pose in the odom frame."""
    x: float = 0.0
    y: float = 0.0
    theta: float = 0.0

    @classmethod
    def from_sequence(cls, values):
        x, y, theta = (float(v) for v in values)
        return cls(x, y, theta)

    def as_array(self) -> np.ndarray:
        """Returns the pose as [x, y, theta]."""
        return np.array([self.x, self.y, self.theta], dtype=np.float64)


@dataclass(frozen=True)
class OdometryUpdate:
    """Result of one estimator cycle, ready for publication."""
    velocity: BodyVelocity
    pose: Pose
    mode: IntegrationMode
    timestamp: float
