from setuptools import setup, find_packages
from glob import glob

package_name = 'skid_odometry'

setup(
    name=package_name,
    version='0.1.0',
    packages=find_packages(exclude=['test']),
    data_files=[
        ('share/ament_index/resource_index/packages',
            ['resource/' + package_name]),
        ('share/' + package_name, ['package.xml']),
        ('share/' + package_name + '/launch', glob('launch/*.py')),
        ('share/' + package_name + '/config', glob('config/*.yaml')),
    ],
    install_requires=['setuptools', 'numpy'],
    extras_require={
        'test': ['pytest'],
    },
    zip_safe=True,
    maintainer='Ahmed Mazher',
    maintainer_email='a.mazher1014@gmail.com',
    description='Wheel odometry for a four wheel skid steering robot',
    license='GNU General Public License v3.0',
    tests_require=['pytest'],
    entry_points={
        'console_scripts': [
            'odometry = skid_odometry.nodes.odometry_node:main',
            'odom_tf_broadcaster = skid_odometry.nodes.odom_tf_broadcaster:main',
        ],
    },
)
