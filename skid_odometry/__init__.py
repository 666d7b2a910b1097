"""
Skid-steering wheel odometry.

Estimates the planar pose of a four-wheel skid-steering vehicle by dead
reckoning from the motor shaft speeds.
"""

from .models.odometry_state import (
    BodyVelocity,
    IntegrationMode,
    OdometryUpdate,
    Pose,
    WheelSpeeds,
)
from .odometry_estimator import OdometryEstimator

__version__ = '0.1.0'
