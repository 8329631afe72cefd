from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Tuple

import numpy as np

from ..robot import Pose

STRAIGHT = "S"
LEFT = "L"
RIGHT = "R"
SEGMENT_TYPES = (STRAIGHT, LEFT, RIGHT)


@dataclass(frozen=True)
class PathSample:
    x: float
    y: float
    theta: float
    gear: bool  # True forward, False reverse

    def as_tuple(self) -> Tuple[float, float, float]:
        return self.x, self.y, self.theta


@dataclass
class CandidatePath:
    """
    Reeds–Shepp path consisting of L/R/S segments.

    `segment_lengths` are signed: a negative value means the segment is driven
    in reverse. Lengths are curvature-normalized while the path sits in the
    candidate set and physical once the planner hands it back. `samples` is
    filled only for the selected path.
    """

    segment_types: Tuple[str, ...]
    segment_lengths: List[float]
    total_length: float
    samples: List[PathSample] = field(default_factory=list)

    @property
    def word(self) -> str:
        return "".join(self.segment_types)

    def segments(self) -> Iterator[Tuple[str, float]]:
        for t, length in zip(self.segment_types, self.segment_lengths):
            yield t, float(length)

    def gears(self) -> List[bool]:
        return [s.gear for s in self.samples]

    def as_array(self) -> np.ndarray:
        """Samples as an (N, 4) array of x, y, heading, gear (1.0 forward, 0.0 reverse)."""
        if not self.samples:
            return np.zeros((0, 4), dtype=float)
        return np.asarray([(s.x, s.y, s.theta, float(s.gear)) for s in self.samples], dtype=float)

    def end_pose(self) -> Pose:
        if not self.samples:
            raise ValueError("path has not been discretized")
        return Pose(*self.samples[-1].as_tuple())


def path_segments(path: CandidatePath) -> Iterable[Tuple[str, float]]:
    return path.segments()
