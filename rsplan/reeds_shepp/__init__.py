from .families import FAMILY_GENERATORS, assemble_path
from .path import CandidatePath, PathSample, path_segments
from .planner import ReedsShepp, compute_shortest_path, select_shortest
from .solvers import SegmentSolution, tau_omega

__all__ = [
    "FAMILY_GENERATORS",
    "assemble_path",
    "CandidatePath",
    "PathSample",
    "path_segments",
    "ReedsShepp",
    "compute_shortest_path",
    "select_shortest",
    "SegmentSolution",
    "tau_omega",
]
