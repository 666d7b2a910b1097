#!/usr/bin/env python3
import rclpy
from rclpy.node import Node
from nav_msgs.msg import Odometry
from tf2_ros import TransformBroadcaster

from .conversions import transform_from_odometry


class OdomTfBroadcaster(Node):
    """Re-broadcasts wheel odometry as the odom -> base_link transform."""

    def __init__(self):
        super().__init__('odom_tf_broadcaster')

        self.declare_parameter('odometry_topic', '/Odometry')
        odometry_topic = self.get_parameter('odometry_topic').value

        # TF broadcaster
        self.tf_broadcaster = TransformBroadcaster(self)

        self.create_subscription(Odometry, odometry_topic, self.odometry_callback, 500)

        self.get_logger().info(f'Broadcasting transforms from {odometry_topic}')

    def odometry_callback(self, msg: Odometry):
        try:
            transform = transform_from_odometry(msg, self.get_clock().now().to_msg())
            self.tf_broadcaster.sendTransform(transform)
        except Exception as e:
            self.get_logger().error(f'Error broadcasting odometry transform: {str(e)}')


def main(args=None):
    rclpy.init(args=args)
    node = OdomTfBroadcaster()
    try:
        rclpy.spin(node)
    except KeyboardInterrupt:
        pass
    finally:
        node.destroy_node()
        rclpy.shutdown()

if __name__ == '__main__':
    main()
