import math
import numpy as np
from tintmath.conversions.numbers import round_half_up, np_round_half_up, normalize_hue, np_normalize_hue, clamp01
from tintmath.conversions.hue import hue_min_max_delta, np_hue_min_max_delta
from ..samples import grid_levels
import itertools


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(0.5) == 1
    assert round_half_up(-2.5) == -2
    assert round_half_up(0.4999) == 0
    assert round_half_up(127.5) == 128
    assert np.array_equal(np_round_half_up([0.5, 1.5, -0.5, 2.4]), [1.0, 2.0, 0.0, 2.0])


def test_normalize_hue():
    assert normalize_hue(-30) == 330
    assert normalize_hue(360) == 0
    assert normalize_hue(725) == 5
    assert normalize_hue(-1e-17) == 0.0
    assert np.array_equal(np_normalize_hue([-30, 360, 725]), [330, 0, 5])


def test_clamp01():
    assert clamp01(-0.2) == 0.0
    assert clamp01(1.5) == 1.0
    assert clamp01(0.25) == 0.25


def test_hue_primaries():
    assert hue_min_max_delta(1, 0, 0)[0] == 0
    assert hue_min_max_delta(0, 1, 0)[0] == 120
    assert hue_min_max_delta(0, 0, 1)[0] == 240
    assert hue_min_max_delta(1, 0, 1)[0] == 300


def test_hue_gray_is_zero():
    h, lo, hi, delta = hue_min_max_delta(0.4, 0.4, 0.4)
    assert (h, lo, hi, delta) == (0.0, 0.4, 0.4, 0.0)


def test_hue_wraps_into_range():
    # red max with b > g gives a negative raw hue
    h = hue_min_max_delta(1.0, 0.0, 0.1)[0]
    assert 0 <= h < 360
    assert abs(h - 354.0) < 1e-9


def test_hue_numpy_matches_scalar():
    colors = np.array(list(itertools.product(grid_levels, repeat=3)))
    h, lo, hi, delta = np_hue_min_max_delta(colors[..., 0], colors[..., 1], colors[..., 2])
    for i, (r, g, b) in enumerate(colors):
        expected = hue_min_max_delta(r, g, b)
        assert math.isclose(h[i], expected[0], abs_tol=1e-9)
        assert lo[i] == expected[1]
        assert hi[i] == expected[2]
        assert math.isclose(delta[i], expected[3], abs_tol=1e-12)
