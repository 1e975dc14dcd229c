import math
import numpy as np
from numpy import ndarray as NDArray

from ..types.format_type import HUE_360


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward positive infinity."""
    return int(math.floor(value + 0.5))


def np_round_half_up(values: NDArray) -> NDArray:
    """Vectorized round_half_up; stays a float array."""
    return np.floor(np.asarray(values, dtype=float) + 0.5)


def clamp(value, lo, hi):
    return max(lo, min(value, hi))


def clamp01(value: float) -> float:
    return clamp(value, 0.0, 1.0)


def normalize_hue(h: float) -> float:
    """Normalize hue to [0, 360) range."""
    h = h % HUE_360
    # -1e-17 % 360 == 360.0
    return 0.0 if h >= HUE_360 else h


def np_normalize_hue(h: NDArray) -> NDArray:
    h = np.asarray(h, dtype=float) % HUE_360
    return np.where(h >= HUE_360, 0.0, h)
