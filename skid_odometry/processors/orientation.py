import math


def normalize_angle(theta: float) -> float:
    """Wrap an angle into [-pi, pi). Values already in range are returned as is."""
    if -math.pi <= theta < math.pi:
        return theta
    wrapped = math.fmod(theta + math.pi, 2.0 * math.pi)
    if wrapped < 0.0:
        wrapped += 2.0 * math.pi
    result = wrapped - math.pi
    # wrapped can round up to exactly 2 pi for inputs just below -pi
    return -math.pi if result >= math.pi else result


def heading_from_quaternion(x: float, y: float, z: float, w: float) -> float:
    """Yaw angle of an orientation quaternion."""
    siny_cosp = 2.0 * (w * z + x * y)
    cosy_cosp = 1.0 - 2.0 * (y * y + z * z)
    return math.atan2(siny_cosp, cosy_cosp)


def quaternion_from_heading(theta: float) -> tuple[float, float, float, float]:
    """Planar rotation about z as an (x, y, z, w) quaternion."""
    return 0.0, 0.0, math.sin(theta / 2.0), math.cos(theta / 2.0)
