import math

import numpy as np
import pytest

from rsplan.common import cartesian_to_polar, heading_diff, normalize_angle, rotate


@pytest.mark.parametrize(
    "angle, expected",
    [
        (0.0, 0.0),
        (math.pi, math.pi),
        (-math.pi, math.pi),
        (3.0 * math.pi, math.pi),
        (2.0 * math.pi, 0.0),
        (-0.5 * math.pi, -0.5 * math.pi),
        (7.5, 7.5 - 2.0 * math.pi),
        (-7.5, -7.5 + 2.0 * math.pi),
    ],
)
def test_normalize_angle_known_values(angle, expected):
    assert normalize_angle(angle) == pytest.approx(expected, abs=1e-12)


def test_normalize_angle_range_and_idempotence():
    rng = np.random.default_rng(0)
    for angle in rng.uniform(-50.0, 50.0, size=500):
        a = normalize_angle(float(angle))
        assert -math.pi < a <= math.pi
        assert normalize_angle(a) == a
        assert math.cos(a) == pytest.approx(math.cos(angle), abs=1e-9)
        assert math.sin(a) == pytest.approx(math.sin(angle), abs=1e-9)


def test_heading_diff_takes_short_way_round():
    assert heading_diff(math.radians(170), math.radians(-170)) == pytest.approx(math.radians(-20))


def test_cartesian_to_polar():
    r, theta = cartesian_to_polar(-1.0, 1.0)
    assert r == pytest.approx(math.sqrt(2.0))
    assert theta == pytest.approx(0.75 * math.pi)
    assert cartesian_to_polar(0.0, 0.0) == (0.0, 0.0)


def test_rotate_quarter_turn():
    x, y = rotate(1.0, 0.0, 0.5 * math.pi)
    assert x == pytest.approx(0.0, abs=1e-12)
    assert y == pytest.approx(1.0)
