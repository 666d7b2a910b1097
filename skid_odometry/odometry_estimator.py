from typing import Optional, Sequence

from .controllers.integration_mode import IntegrationModeSelector
from .controllers.reset_controller import ResetController
from .models.odometry_state import IntegrationMode, OdometryUpdate, Pose, WheelSpeeds
from .processors.kinematics import KinematicModel
from .processors.pose_integrator import PoseIntegrator


class OdometryEstimator:
    """
    Runs one odometry cycle per synchronized wheel speed sample.

    wheel speeds -> body velocity -> pose. Mode changes and resets are
    separate entry points that may be called from other threads.
    """

    def __init__(self,
                 kinematics: Optional[KinematicModel] = None,
                 integrator: Optional[PoseIntegrator] = None,
                 mode_selector: Optional[IntegrationModeSelector] = None,
                 logger=None):
        self.logger = logger
        self.kinematics = kinematics or KinematicModel()
        self.integrator = integrator or PoseIntegrator(logger=logger)
        self.mode_selector = mode_selector or IntegrationModeSelector(logger=logger)
        self.reset_controller = ResetController(self.integrator, logger=logger)

    @classmethod
    def from_parameters(cls,
                        initial_pose: Optional[Sequence[float]] = None,
                        integration_method=IntegrationMode.EULER,
                        gear_ratio: Optional[float] = None,
                        rpm_to_rads: Optional[float] = None,
                        wheel_radius: Optional[float] = None,
                        apparent_baseline: Optional[float] = None,
                        logger=None) -> 'OdometryEstimator':
        """
        Build an estimator from plain configuration values.

        A malformed initial_pose falls back to the origin with a warning.
        """
        calibration = {
            'gear_ratio': gear_ratio,
            'rpm_to_rads': rpm_to_rads,
            'wheel_radius': wheel_radius,
            'apparent_baseline': apparent_baseline,
        }
        kinematics = KinematicModel(**{k: v for k, v in calibration.items() if v is not None})

        seed = Pose()
        if initial_pose is not None:
            values = list(initial_pose)
            if len(values) == 3:
                seed = Pose.from_sequence(values)
            elif logger:
                logger.warn(f'initial_pose must be [x, y, theta], got {values}; starting at origin')
        selector = IntegrationModeSelector(logger=logger)
        selector.set_mode(integration_method)

        return cls(
            kinematics=kinematics,
            integrator=PoseIntegrator(seed, logger=logger),
            mode_selector=selector,
            logger=logger,
        )

    @property
    def pose(self) -> Pose:
        return self.integrator.pose

    @property
    def mode(self) -> IntegrationMode:
        return self.mode_selector.get_mode()

    def update(self, wheels: WheelSpeeds, timestamp: float) -> OdometryUpdate:
        """
        Process one synchronized sample.

        Args:
            wheels: Motor speeds of the four wheels
            timestamp: Sample time in seconds

        Returns:
            OdometryUpdate: Velocity and pose to publish
        """
        velocity = self.kinematics.estimate_velocity(wheels)
        mode = self.mode_selector.get_mode()
        pose = self.integrator.advance(velocity, timestamp, mode)

        if self.logger:
            self.logger.debug(
                f'Odometry [{mode.method_name}] t={timestamp:.3f}: '
                f'v={velocity.linear:.3f} m/s, w={velocity.angular:.3f} rad/s, '
                f'pose=({pose.x:.3f}, {pose.y:.3f}, {pose.theta:.3f})')

        return OdometryUpdate(velocity=velocity, pose=pose, mode=mode, timestamp=timestamp)

    def set_integration_mode(self, value) -> bool:
        return self.mode_selector.set_mode(value)

    def reset_to_origin(self) -> Pose:
        return self.reset_controller.reset_to_origin()

    def reset_to_pose(self, x: float, y: float, theta: float) -> Pose:
        return self.reset_controller.reset_to_pose(x, y, theta)
