import math
import threading
from typing import Callable, Optional

from ..models.odometry_state import BodyVelocity, IntegrationMode, Pose
from .orientation import normalize_angle


def euler_step(pose: Pose, velocity: BodyVelocity, dt: float) -> Pose:
    """Advance using the heading at the start of the interval."""
    return Pose(
        x=pose.x + velocity.linear * dt * math.cos(pose.theta),
        y=pose.y + velocity.linear * dt * math.sin(pose.theta),
        theta=normalize_angle(pose.theta + velocity.angular * dt),
    )


def midpoint_step(pose: Pose, velocity: BodyVelocity, dt: float) -> Pose:
    """Advance using the heading halfway through the rotation of the interval."""
    heading = pose.theta + (velocity.angular * dt) / 2.0
    return Pose(
        x=pose.x + velocity.linear * dt * math.cos(heading),
        y=pose.y + velocity.linear * dt * math.sin(heading),
        theta=normalize_angle(pose.theta + velocity.angular * dt),
    )


_STEPS = {
    IntegrationMode.EULER: euler_step,
    IntegrationMode.MIDPOINT: midpoint_step,
}


class PoseIntegrator:
    """
    Dead-reckoning pose state.

    Holds the current pose and the timestamp of the last sample. Every
    mutation (an advance or a correction) runs inside one critical
    section, so readers never see a half-applied update.
    """

    def __init__(self, initial_pose: Optional[Pose] = None, logger=None):
        """
        Args:
            initial_pose: Seed pose, origin with zero heading when omitted
            logger: ROS logger instance
        """
        self.logger = logger
        seed = initial_pose or Pose()
        self._pose = Pose(seed.x, seed.y, normalize_angle(seed.theta))
        self._last_timestamp = None
        self._lock = threading.Lock()

    @property
    def pose(self) -> Pose:
        with self._lock:
            return self._pose

    @property
    def last_timestamp(self) -> Optional[float]:
        """Timestamp baseline in seconds, None before the first sample."""
        with self._lock:
            return self._last_timestamp

    def advance(self, velocity: BodyVelocity, timestamp: float,
                mode: IntegrationMode = IntegrationMode.EULER) -> Pose:
        """
        Integrate the body velocity from the last sample up to `timestamp`.

        The first sample only sets the time baseline. A timestamp that is
        not newer than the baseline counts as zero elapsed time and leaves
        the baseline where it is.

        Returns:
            Pose: The pose after the step
        """
        step = _STEPS[mode]
        with self._lock:
            if self._last_timestamp is None:
                self._last_timestamp = timestamp
                return self._pose

            dt = timestamp - self._last_timestamp
            if dt <= 0.0:
                if dt < 0.0 and self.logger:
                    self.logger.warn(
                        f'Out of order sample: {timestamp:.6f} is {-dt:.6f}s older than last sample')
                return self._pose

            self._pose = step(self._pose, velocity, dt)
            self._last_timestamp = timestamp
            return self._pose

    def correct(self, correction: Callable[[Pose], Pose]) -> Pose:
        """
        Replace the pose with `correction(current_pose)` in one critical section.

        The time baseline is kept, so the next sample integrates from the
        corrected pose.
        """
        with self._lock:
            corrected = correction(self._pose)
            self._pose = Pose(corrected.x, corrected.y, normalize_angle(corrected.theta))
            return self._pose
