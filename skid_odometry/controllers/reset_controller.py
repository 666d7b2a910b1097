from ..models.odometry_state import Pose
from ..processors.pose_integrator import PoseIntegrator


class ResetController:
    """Drift corrections applied to the integrator outside the sample cycle."""

    def __init__(self, integrator: PoseIntegrator, logger=None):
        self.integrator = integrator
        self.logger = logger

    def reset_to_origin(self) -> Pose:
        """Zero the position, keep the heading."""
        pose = self.integrator.correct(lambda current: Pose(0.0, 0.0, current.theta))
        if self.logger:
            self.logger.info(f'Odometry position reset, heading kept at {pose.theta:.3f} rad')
        return pose

    def reset_to_pose(self, x: float, y: float, theta: float) -> Pose:
        """Overwrite the whole pose with an externally known one."""
        target = Pose(float(x), float(y), float(theta))
        pose = self.integrator.correct(lambda current: target)
        if self.logger:
            self.logger.info(
                f'Odometry reset to x={pose.x:.3f}, y={pose.y:.3f}, theta={pose.theta:.3f}')
        return pose
