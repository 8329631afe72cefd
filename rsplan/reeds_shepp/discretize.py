import math
from typing import List, Tuple

import numpy as np

from ..common import normalize_angle, rotate
from ..robot import Pose
from .path import LEFT, RIGHT, STRAIGHT, CandidatePath, PathSample

# Segments (and remainders) shorter than this, in normalized units, are not sampled.
SAMPLE_TOL = 1e-9


def interpolate(seg_type: str, pd: float, ox: float, oy: float, ophi: float) -> Tuple[float, float, float]:
    """
    Pose reached after driving signed normalized length `pd` along one segment
    that starts at `(ox, oy, ophi)`, on a unit turning radius.
    """
    if seg_type == STRAIGHT:
        return ox + pd * math.cos(ophi), oy + pd * math.sin(ophi), ophi
    if seg_type == LEFT:
        gdx, gdy = rotate(math.sin(pd), 1.0 - math.cos(pd), ophi)
        return ox + gdx, oy + gdy, ophi + pd
    if seg_type == RIGHT:
        gdx, gdy = rotate(math.sin(pd), math.cos(pd) - 1.0, ophi)
        return ox + gdx, oy + gdy, ophi - pd
    raise ValueError(f"Unknown Reeds–Shepp segment type: {seg_type!r}")


def sample_local(path: CandidatePath, step_size: float) -> List[Tuple[float, float, float, bool]]:
    """
    Walk the normalized segments of `path` from the origin at a fixed step.

    Each segment starts exactly where the previous one ended and closes with a
    sample at its exact length, so the last step of a segment may be shorter
    than `step_size`. The first sample is the origin itself.
    """
    if not math.isfinite(step_size) or step_size <= 0.0:
        raise ValueError("step_size must be finite and > 0")

    first_gear = True
    for _, length in path.segments():
        if abs(length) >= SAMPLE_TOL:
            first_gear = length > 0.0
            break

    samples = [(0.0, 0.0, 0.0, first_gear)]
    ox, oy, ophi = 0.0, 0.0, 0.0
    for seg_type, length in path.segments():
        if abs(length) < SAMPLE_TOL:
            continue
        gear = length > 0.0
        d = step_size if gear else -step_size
        pd = d
        while abs(pd) < abs(length) - SAMPLE_TOL:
            x, y, phi = interpolate(seg_type, pd, ox, oy, ophi)
            samples.append((x, y, phi, gear))
            pd += d
        ox, oy, ophi = interpolate(seg_type, length, ox, oy, ophi)
        samples.append((ox, oy, ophi, gear))
    return samples


def discretize(path: CandidatePath, start: Pose, max_kappa: float, step_size: float) -> CandidatePath:
    """
    Fill `path.samples` in the world frame and convert its lengths to physical units.

    `path` must still hold curvature-normalized lengths. It is modified in place
    and also returned.
    """
    if path.samples:
        raise ValueError("path has already been discretized")
    local = np.asarray(sample_local(path, step_size), dtype=float)

    c = math.cos(start.theta)
    s = math.sin(start.theta)
    lx = local[:, 0] / max_kappa
    ly = local[:, 1] / max_kappa
    wx = c * lx - s * ly + start.x
    wy = s * lx + c * ly + start.y
    path.samples = [
        PathSample(float(x), float(y), normalize_angle(float(phi) + start.theta), bool(gear))
        for x, y, phi, gear in zip(wx, wy, local[:, 2], local[:, 3])
    ]

    path.segment_lengths = [v / max_kappa for v in path.segment_lengths]
    path.total_length = path.total_length / max_kappa
    return path
