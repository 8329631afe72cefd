"""
Closed-form solvers for the canonical Reeds–Shepp words.

Every solver takes the goal displacement `(x, y, phi)` expressed in the start
frame (start at the origin, heading 0) with the turning radius scaled to 1,
and returns a `SegmentSolution`. An invalid solution only means the word cannot
connect the two poses; it is not an error.

Naming: letters are segment types, `n`/`p` distinguish the two four-turn
solutions. Magnitudes are signed, negative meaning reverse.
"""

import math
from dataclasses import dataclass
from typing import Tuple

from ..common import EPS, cartesian_to_polar, normalize_angle


@dataclass(frozen=True)
class SegmentSolution:
    valid: bool = False
    t: float = 0.0
    u: float = 0.0
    v: float = 0.0


INFEASIBLE = SegmentSolution()


def tau_omega(u: float, v: float, xi: float, eta: float, phi: float) -> Tuple[float, float]:
    """Outer turn angles of a four-turn word given its two inner turns."""
    delta = normalize_angle(u - v)
    a = math.sin(u) - math.sin(delta)
    b = math.cos(u) - math.cos(delta) - 1.0
    t1 = math.atan2(eta * a - xi * b, xi * a + eta * b)
    t2 = 2.0 * (math.cos(delta) - math.cos(v) - math.cos(u)) + 3.0
    if t2 < 0.0:
        tau = normalize_angle(t1 + math.pi)
    else:
        tau = normalize_angle(t1)
    omega = normalize_angle(tau - u + v - phi)
    return tau, omega


def lsl(x: float, y: float, phi: float) -> SegmentSolution:
    u, t = cartesian_to_polar(x - math.sin(phi), y - 1.0 + math.cos(phi))
    if t >= -EPS:
        v = normalize_angle(phi - t)
        if v >= -EPS:
            return SegmentSolution(True, t, u, v)
    return INFEASIBLE


def lsr(x: float, y: float, phi: float) -> SegmentSolution:
    r, t1 = cartesian_to_polar(x + math.sin(phi), y - 1.0 - math.cos(phi))
    u1 = r * r
    if u1 >= 4.0:
        u = math.sqrt(u1 - 4.0)
        t = normalize_angle(t1 + math.atan2(2.0, u))
        v = normalize_angle(t - phi)
        if t >= -EPS and v >= -EPS:
            return SegmentSolution(True, t, u, v)
    return INFEASIBLE


def lrl(x: float, y: float, phi: float) -> SegmentSolution:
    u1, theta = cartesian_to_polar(x - math.sin(phi), y - 1.0 + math.cos(phi))
    if u1 <= 4.0:
        u = -2.0 * math.asin(0.25 * u1)
        t = normalize_angle(theta + 0.5 * u + math.pi)
        v = normalize_angle(phi - t + u)
        if t >= -EPS and u <= EPS:
            return SegmentSolution(True, t, u, v)
    return INFEASIBLE


def sls(x: float, y: float, phi: float) -> SegmentSolution:
    """Straight, left arc, straight. `t` and `v` are straight lengths, `u` the arc angle."""
    phi = normalize_angle(phi)
    if y == 0.0 or not 0.0 < phi < 0.99 * math.pi:
        return INFEASIBLE
    # Where the goal's heading line crosses the start's x axis.
    xd = -y / math.tan(phi) + x
    half = math.tan(0.5 * phi)
    t = xd - half
    v = math.copysign(math.hypot(x - xd, y), y) - half
    return SegmentSolution(True, t, phi, v)


def lrlr_n(x: float, y: float, phi: float) -> SegmentSolution:
    xi = x + math.sin(phi)
    eta = y - 1.0 - math.cos(phi)
    rho = 0.25 * (2.0 + math.hypot(xi, eta))
    if rho <= 1.0:
        u = math.acos(rho)
        t, v = tau_omega(u, -u, xi, eta, phi)
        if t >= -EPS and v <= EPS:
            return SegmentSolution(True, t, u, v)
    return INFEASIBLE


def lrlr_p(x: float, y: float, phi: float) -> SegmentSolution:
    xi = x + math.sin(phi)
    eta = y - 1.0 - math.cos(phi)
    rho = (20.0 - xi * xi - eta * eta) / 16.0
    if 0.0 <= rho <= 1.0:
        u = -math.acos(rho)
        if u >= -0.5 * math.pi:
            t, v = tau_omega(u, u, xi, eta, phi)
            if t >= -EPS and v >= -EPS:
                return SegmentSolution(True, t, u, v)
    return INFEASIBLE


def lrsr(x: float, y: float, phi: float) -> SegmentSolution:
    xi = x + math.sin(phi)
    eta = y - 1.0 - math.cos(phi)
    rho, theta = cartesian_to_polar(-eta, xi)
    if rho >= 2.0:
        t = theta
        u = 2.0 - rho
        v = normalize_angle(t + 0.5 * math.pi - phi)
        if t >= -EPS and u <= EPS and v <= EPS:
            return SegmentSolution(True, t, u, v)
    return INFEASIBLE


def lrsl(x: float, y: float, phi: float) -> SegmentSolution:
    xi = x - math.sin(phi)
    eta = y - 1.0 + math.cos(phi)
    rho, theta = cartesian_to_polar(xi, eta)
    if rho >= 2.0:
        r = math.sqrt(rho * rho - 4.0)
        u = 2.0 - r
        t = normalize_angle(theta + math.atan2(r, -2.0))
        v = normalize_angle(phi - 0.5 * math.pi - t)
        if t >= -EPS and u <= EPS and v <= EPS:
            return SegmentSolution(True, t, u, v)
    return INFEASIBLE


def lrslr(x: float, y: float, phi: float) -> SegmentSolution:
    xi = x + math.sin(phi)
    eta = y - 1.0 - math.cos(phi)
    rho = math.hypot(xi, eta)
    if rho >= 2.0:
        u = 4.0 - math.sqrt(rho * rho - 4.0)
        if u <= EPS:
            t = normalize_angle(math.atan2((4.0 - u) * xi - 2.0 * eta, -2.0 * xi + (u - 4.0) * eta))
            v = normalize_angle(t - phi)
            if t >= -EPS and v >= -EPS:
                return SegmentSolution(True, t, u, v)
    return INFEASIBLE
