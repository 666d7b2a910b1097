"""Conversions between odometry values and ROS 2 messages."""

from geometry_msgs.msg import Quaternion, TransformStamped, TwistStamped
from nav_msgs.msg import Odometry
from skid_odometry_interfaces.msg import CustomOdometry

from ..models.odometry_state import BodyVelocity, OdometryUpdate, WheelSpeeds
from ..processors.orientation import quaternion_from_heading


def stamp_to_seconds(stamp) -> float:
    return stamp.sec + stamp.nanosec * 1e-9


def wheel_speeds_from_messages(fl_msg, fr_msg, rl_msg, rr_msg) -> WheelSpeeds:
    return WheelSpeeds(
        front_left=fl_msg.rpm,
        front_right=fr_msg.rpm,
        rear_left=rl_msg.rpm,
        rear_right=rr_msg.rpm,
    )


def heading_quaternion(theta: float) -> Quaternion:
    x, y, z, w = quaternion_from_heading(theta)
    return Quaternion(x=x, y=y, z=z, w=w)


def to_twist_stamped(velocity: BodyVelocity, stamp, frame_id: str) -> TwistStamped:
    twist = TwistStamped()
    twist.header.stamp = stamp
    twist.header.frame_id = frame_id
    twist.twist.linear.x = velocity.linear
    twist.twist.angular.z = velocity.angular
    return twist


def to_odometry(update: OdometryUpdate, stamp, odom_frame: str, base_frame: str) -> Odometry:
    odom = Odometry()
    odom.header.stamp = stamp
    odom.header.frame_id = odom_frame
    odom.child_frame_id = base_frame

    odom.pose.pose.position.x = update.pose.x
    odom.pose.pose.position.y = update.pose.y
    odom.pose.pose.position.z = 0.0
    odom.pose.pose.orientation = heading_quaternion(update.pose.theta)

    odom.twist.twist.linear.x = update.velocity.linear
    odom.twist.twist.angular.z = update.velocity.angular
    return odom


def to_custom_odometry(odom: Odometry, update: OdometryUpdate) -> CustomOdometry:
    custom = CustomOdometry()
    custom.odom = odom
    custom.method.data = update.mode.method_name
    return custom


def transform_from_odometry(odom: Odometry, stamp) -> TransformStamped:
    """odom -> base transform carried by an odometry message"""
    transform = TransformStamped()
    transform.header.stamp = stamp
    transform.header.frame_id = odom.header.frame_id
    transform.child_frame_id = odom.child_frame_id

    transform.transform.translation.x = odom.pose.pose.position.x
    transform.transform.translation.y = odom.pose.pose.position.y
    transform.transform.translation.z = 0.0
    transform.transform.rotation = odom.pose.pose.orientation
    return transform
