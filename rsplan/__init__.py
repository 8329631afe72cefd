"""
Reeds–Shepp curve generation for car-like robots with a strict turning radius.
Exports:
- ReedsShepp / compute_shortest_path: shortest forward/reverse arc-line path between two poses
- Pose, VehicleParams, PlanningConfig: inputs owned by the calling planner
"""

from .errors import ConfigurationError, PathGenerationError, RSPlanError
from .reeds_shepp import CandidatePath, PathSample, ReedsShepp, compute_shortest_path
from .robot import PlanningConfig, Pose, VehicleParams

__all__ = [
    "ReedsShepp",
    "compute_shortest_path",
    "CandidatePath",
    "PathSample",
    "Pose",
    "VehicleParams",
    "PlanningConfig",
    "RSPlanError",
    "PathGenerationError",
    "ConfigurationError",
]
