import os
from ament_index_python.packages import get_package_share_directory
from launch import LaunchDescription
from launch.actions import DeclareLaunchArgument
from launch.substitutions import LaunchConfiguration
from launch_ros.actions import Node

def generate_launch_description():
    pkg_dir = get_package_share_directory('skid_odometry')
    default_params = os.path.join(pkg_dir, 'config', 'odometry.yaml')

    params_file = LaunchConfiguration('params_file')
    use_sim_time = LaunchConfiguration('use_sim_time')

    return LaunchDescription([
        DeclareLaunchArgument(
            'params_file',
            default_value=default_params,
            description='Odometry parameter file'
        ),
        DeclareLaunchArgument(
            'use_sim_time',
            default_value='true',
            description='Use the bag/simulation clock'
        ),

        # Wheel odometry
        Node(
            package='skid_odometry',
            executable='odometry',
            name='odometry',
            parameters=[params_file, {'use_sim_time': use_sim_time}],
            output='screen'
        ),

        # odom -> base_link transform
        Node(
            package='skid_odometry',
            executable='odom_tf_broadcaster',
            name='odom_tf_broadcaster',
            parameters=[params_file, {'use_sim_time': use_sim_time}],
            output='screen'
        ),
    ])
