import math
import sys
from typing import Tuple

# Tolerance used by the word solvers' feasibility predicates.
EPS = 10.0 * sys.float_info.epsilon


def normalize_angle(angle: float) -> float:
    """Wrap angle to (-pi, pi]. Values already in range are returned unchanged."""
    if -math.pi < angle <= math.pi:
        return angle
    a = math.fmod(angle + math.pi, 2.0 * math.pi)
    if a <= 0.0:
        a += 2.0 * math.pi
    a -= math.pi
    return a if a > -math.pi else math.pi


def heading_diff(a: float, b: float) -> float:
    """Smallest signed difference a-b."""
    return normalize_angle(a - b)


def cartesian_to_polar(x: float, y: float) -> Tuple[float, float]:
    return math.hypot(x, y), math.atan2(y, x)


def rotate(x: float, y: float, theta: float) -> Tuple[float, float]:
    """Rotate a vector counter-clockwise by theta."""
    c = math.cos(theta)
    s = math.sin(theta)
    return c * x - s * y, s * x + c * y
