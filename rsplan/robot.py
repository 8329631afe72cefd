import math
from dataclasses import dataclass
from typing import Sequence, Tuple, Union

from .errors import ConfigurationError


@dataclass(frozen=True)
class Pose:
    x: float
    y: float
    theta: float

    def __post_init__(self):
        if not all(math.isfinite(v) for v in (self.x, self.y, self.theta)):
            raise ConfigurationError(f"pose must be finite, got ({self.x}, {self.y}, {self.theta})")

    def as_tuple(self) -> Tuple[float, float, float]:
        return self.x, self.y, self.theta


PoseLike = Union[Pose, Sequence[float]]


def as_pose(pose: PoseLike) -> Pose:
    """Accept a Pose or any (x, y, theta) sequence."""
    if isinstance(pose, Pose):
        return pose
    x, y, theta = pose
    return Pose(float(x), float(y), float(theta))


@dataclass(frozen=True)
class VehicleParams:
    """
    Car-like vehicle geometry relevant to curve generation.

    `max_steer` is the maximum front wheel angle (radians) and
    `front_edge_to_center` the distance used to turn it into a curvature bound.
    """

    max_steer: float = 0.5
    front_edge_to_center: float = 3.89

    def __post_init__(self):
        if not math.isfinite(self.max_steer) or not 0.0 < self.max_steer < math.pi / 2.0:
            raise ConfigurationError("max_steer must be finite and in (0, pi/2)")
        if not math.isfinite(self.front_edge_to_center) or self.front_edge_to_center <= 0.0:
            raise ConfigurationError("front_edge_to_center must be finite and > 0")

    @property
    def max_kappa(self) -> float:
        return math.tan(self.max_steer) / self.front_edge_to_center

    @property
    def min_turn_radius(self) -> float:
        return 1.0 / self.max_kappa

    @classmethod
    def from_turning_radius(cls, radius: float, front_edge_to_center: float = 1.0) -> "VehicleParams":
        """Build parameters whose curvature bound is exactly 1/radius."""
        radius = float(radius)
        if not math.isfinite(radius) or radius <= 0.0:
            raise ConfigurationError("turning radius must be finite and > 0")
        return cls(max_steer=math.atan(front_edge_to_center / radius), front_edge_to_center=front_edge_to_center)


@dataclass(frozen=True)
class PlanningConfig:
    # Arc-length sampling interval, in curvature-normalized units.
    step_size: float = 0.1

    def __post_init__(self):
        if not math.isfinite(self.step_size) or self.step_size <= 0.0:
            raise ConfigurationError("step_size must be finite and > 0")
