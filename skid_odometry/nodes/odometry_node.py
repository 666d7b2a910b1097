#!/usr/bin/env python3
import rclpy
from rclpy.node import Node
from rclpy.callback_groups import MutuallyExclusiveCallbackGroup, ReentrantCallbackGroup
from rclpy.executors import MultiThreadedExecutor
from rcl_interfaces.msg import SetParametersResult
from geometry_msgs.msg import PoseWithCovarianceStamped, TwistStamped
from nav_msgs.msg import Odometry
from message_filters import Subscriber, TimeSynchronizer
from skid_odometry_interfaces.msg import CustomOdometry, MotorSpeed
from skid_odometry_interfaces.srv import GivenReset, Reset

from ..odometry_estimator import OdometryEstimator
from ..processors.kinematics import APPARENT_BASELINE, GEAR_RATIO, RPM_TO_RADS, WHEEL_RADIUS
from ..processors.orientation import heading_from_quaternion
from .conversions import (
    stamp_to_seconds,
    to_custom_odometry,
    to_odometry,
    to_twist_stamped,
    wheel_speeds_from_messages,
)


class SkidSteeringOdometryNode(Node):
    """Publishes wheel odometry computed by OdometryEstimator."""

    def __init__(self):
        super().__init__('odometry')

        # Declare parameters
        self.declare_parameter('initial_pose', [0.0, 0.0, 0.0])
        self.declare_parameter('integration_method', 0)  # 0 Euler, 1 Runge-Kutta (midpoint)
        self.declare_parameter('gear_ratio', GEAR_RATIO)
        self.declare_parameter('rpm_to_rads', RPM_TO_RADS)
        self.declare_parameter('wheel_radius', WHEEL_RADIUS)
        self.declare_parameter('apparent_baseline', APPARENT_BASELINE)
        self.declare_parameter('odom_frame', 'odom')
        self.declare_parameter('base_frame', 'base_link')
        self.declare_parameter('sync_queue_size', 10)
        self.declare_parameter('motor_speed_fl_topic', 'motor_speed_fl')
        self.declare_parameter('motor_speed_fr_topic', 'motor_speed_fr')
        self.declare_parameter('motor_speed_rl_topic', 'motor_speed_rl')
        self.declare_parameter('motor_speed_rr_topic', 'motor_speed_rr')

        # Get parameters
        self.odom_frame = self.get_parameter('odom_frame').value
        self.base_frame = self.get_parameter('base_frame').value
        sync_queue_size = self.get_parameter('sync_queue_size').value

        self.estimator = OdometryEstimator.from_parameters(
            initial_pose=list(self.get_parameter('initial_pose').value or []),
            integration_method=self.get_parameter('integration_method').value,
            gear_ratio=self.get_parameter('gear_ratio').value,
            rpm_to_rads=self.get_parameter('rpm_to_rads').value,
            wheel_radius=self.get_parameter('wheel_radius').value,
            apparent_baseline=self.get_parameter('apparent_baseline').value,
            logger=self.get_logger(),
        )
        self.add_on_set_parameters_callback(self.parameters_callback)

        # Samples are processed one at a time; resets may run concurrently
        sample_group = MutuallyExclusiveCallbackGroup()
        reset_group = ReentrantCallbackGroup()

        # Publishers
        self.twist_pub = self.create_publisher(TwistStamped, '/twist_stamped', 50)
        self.odometry_pub = self.create_publisher(Odometry, '/Odometry', 50)
        self.custom_odometry_pub = self.create_publisher(CustomOdometry, '/custom_odometry', 50)

        # Synchronized motor speeds
        self.motor_subs = [
            Subscriber(self, MotorSpeed, self.get_parameter(name).value,
                       qos_profile=1, callback_group=sample_group)
            for name in ('motor_speed_fl_topic', 'motor_speed_fr_topic',
                         'motor_speed_rl_topic', 'motor_speed_rr_topic')
        ]
        self.sync = TimeSynchronizer(self.motor_subs, sync_queue_size)
        self.sync.registerCallback(self.motor_speeds_callback)

        # Reset channels
        self.create_service(Reset, 'reset', self.reset_callback, callback_group=reset_group)
        self.create_service(GivenReset, 'given_reset', self.given_reset_callback,
                            callback_group=reset_group)
        self.create_subscription(PoseWithCovarianceStamped, 'initialpose',
                                 self.initial_pose_callback, 10, callback_group=reset_group)

        pose = self.estimator.pose
        self.get_logger().info(
            f'Skid steering odometry initialized:\n'
            f'  Initial pose: x={pose.x:.3f}, y={pose.y:.3f}, theta={pose.theta:.3f}\n'
            f'  Integration method: {self.estimator.mode.method_name}\n'
            f'  Frames: {self.odom_frame} -> {self.base_frame}'
        )

    def parameters_callback(self, params):
        """Apply live integration method changes."""
        for param in params:
            if param.name == 'integration_method':
                # Unknown methods are ignored by the selector
                self.estimator.set_integration_mode(param.value)
        return SetParametersResult(successful=True)

    def motor_speeds_callback(self, fl_msg, fr_msg, rl_msg, rr_msg):
        """Run one odometry cycle for a synchronized set of motor speeds."""
        try:
            wheels = wheel_speeds_from_messages(fl_msg, fr_msg, rl_msg, rr_msg)
            stamp = fl_msg.header.stamp
            update = self.estimator.update(wheels, stamp_to_seconds(stamp))

            odometry = to_odometry(update, stamp, self.odom_frame, self.base_frame)
            self.twist_pub.publish(to_twist_stamped(update.velocity, stamp, self.base_frame))
            self.odometry_pub.publish(odometry)
            self.custom_odometry_pub.publish(to_custom_odometry(odometry, update))

        except Exception as e:
            self.get_logger().error(f'Error in motor speeds callback: {str(e)}')

    def reset_callback(self, request, response):
        """Zero the position, keep the heading."""
        try:
            self.estimator.reset_to_origin()
        except Exception as e:
            self.get_logger().error(f'Error resetting odometry: {str(e)}')
        return response

    def given_reset_callback(self, request, response):
        """Move the estimate to the requested pose."""
        try:
            self.estimator.reset_to_pose(request.x, request.y, request.theta)
        except Exception as e:
            self.get_logger().error(f'Error resetting odometry to given pose: {str(e)}')
        return response

    def initial_pose_callback(self, msg: PoseWithCovarianceStamped):
        """Pose estimates from localization tools (e.g. RViz) reset the odometry."""
        try:
            pose = msg.pose.pose
            theta = heading_from_quaternion(
                pose.orientation.x, pose.orientation.y,
                pose.orientation.z, pose.orientation.w)
            self.estimator.reset_to_pose(pose.position.x, pose.position.y, theta)
        except Exception as e:
            self.get_logger().error(f'Error handling initial pose: {str(e)}')


def main(args=None):
    rclpy.init(args=args)
    node = SkidSteeringOdometryNode()
    executor = MultiThreadedExecutor()
    executor.add_node(node)
    try:
        executor.spin()
    except KeyboardInterrupt:
        pass
    finally:
        node.destroy_node()
        rclpy.shutdown()

if __name__ == '__main__':
    main()
