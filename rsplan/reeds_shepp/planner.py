import logging
import math
from typing import List, Sequence, Tuple

from ..common import heading_diff, rotate
from ..errors import ConfigurationError, PathGenerationError
from ..robot import PlanningConfig, Pose, PoseLike, VehicleParams, as_pose
from .discretize import discretize
from .families import FAMILY_GENERATORS
from .path import CandidatePath

logger = logging.getLogger(__name__)


def select_shortest(paths: Sequence[CandidatePath]) -> CandidatePath:
    """First candidate of strictly minimal total length."""
    best = None
    best_length = float("inf")
    for path in paths:
        if path.total_length < best_length:
            best = path
            best_length = path.total_length
    if best is None:
        raise PathGenerationError("no candidate with a finite length")
    return best


class ReedsShepp:
    """
    Shortest Reeds–Shepp connection between two poses of a car-like vehicle.

    The curvature bound is taken from `vehicle` once, at construction, and every
    path is sampled at `config.step_size` (curvature-normalized arc length).
    """

    def __init__(self, vehicle: VehicleParams, config: PlanningConfig):
        max_kappa = vehicle.max_kappa
        if not math.isfinite(max_kappa) or max_kappa <= 0.0:
            raise ConfigurationError("vehicle max_kappa must be finite and > 0")
        if not math.isfinite(config.step_size) or config.step_size <= 0.0:
            raise ConfigurationError("step_size must be finite and > 0")
        self.vehicle = vehicle
        self.config = config
        self.max_kappa = max_kappa
        self.step_size = config.step_size

    def local_goal(self, start: Pose, goal: Pose) -> Tuple[float, float, float]:
        """Goal expressed in the start frame, scaled to a unit turning radius."""
        x, y = rotate(goal.x - start.x, goal.y - start.y, -start.theta)
        return x * self.max_kappa, y * self.max_kappa, heading_diff(goal.theta, start.theta)

    def _candidates(self, start: Pose, goal: Pose) -> List[CandidatePath]:
        x, y, phi = self.local_goal(start, goal)
        paths: List[CandidatePath] = []
        for family, generate in FAMILY_GENERATORS:
            try:
                generate(x, y, phi, paths)
            except PathGenerationError:
                logger.info("Failed to generate %s Reeds–Shepp paths", family)
                raise
        if not paths:
            logger.info("No Reeds–Shepp path from %s to %s", start, goal)
            raise PathGenerationError("no Reeds–Shepp candidate connects the poses")
        return paths

    def generate_paths(self, start: PoseLike, goal: PoseLike) -> List[CandidatePath]:
        """All candidates in enumeration order, lengths in physical units, not sampled."""
        paths = self._candidates(as_pose(start), as_pose(goal))
        for path in paths:
            path.segment_lengths = [v / self.max_kappa for v in path.segment_lengths]
            path.total_length = path.total_length / self.max_kappa
        return paths

    def distance(self, start: PoseLike, goal: PoseLike) -> float:
        """Length of the shortest path, without sampling it."""
        best = select_shortest(self._candidates(as_pose(start), as_pose(goal)))
        return best.total_length / self.max_kappa

    def shortest_path(self, start: PoseLike, goal: PoseLike) -> CandidatePath:
        start = as_pose(start)
        goal = as_pose(goal)
        best = select_shortest(self._candidates(start, goal))
        logger.debug("Selected %s, normalized length %.6f", best.word, best.total_length)
        return discretize(best, start, self.max_kappa, self.step_size)


def compute_shortest_path(
    start: PoseLike,
    goal: PoseLike,
    vehicle: VehicleParams,
    config: PlanningConfig,
) -> CandidatePath:
    """
    Shortest Reeds–Shepp path from `start` to `goal`, sampled in the world frame.

    Raises PathGenerationError when no candidate could be produced and
    ConfigurationError when the parameters violate the planner preconditions.
    """
    return ReedsShepp(vehicle, config).shortest_path(start, goal)
