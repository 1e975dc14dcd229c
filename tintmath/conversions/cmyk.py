from typing import Tuple
import numpy as np
from numpy import ndarray as NDArray

from .numbers import round_half_up, np_round_half_up
from ..types.format_type import PERCENT_MAX


def rgb_to_cmyk(r: float, g: float, b: float) -> Tuple[int, int, int, int]:
    """
    Convert RGB to CMYK.

    Pure black has no color components: k == 100 gives c = m = y = 0.

    Returns:
        Tuple[int, int, int, int]: (c, m, y, k) in [0, 100], rounded half up
    """
    k = 1 - max(r, g, b)
    if k == 1:
        cy = m = y = 0.0
    else:
        cy = (1 - r - k) / (1 - k)
        m = (1 - g - k) / (1 - k)
        y = (1 - b - k) / (1 - k)
    return (
        round_half_up(cy * PERCENT_MAX),
        round_half_up(m * PERCENT_MAX),
        round_half_up(y * PERCENT_MAX),
        round_half_up(k * PERCENT_MAX),
    )


def cmyk_to_rgb(cy: float, m: float, y: float, k: float) -> Tuple[float, float, float]:
    """Convert CMYK (channels in [0, 100]) to RGB."""
    cy, m, y, k = (v / PERCENT_MAX for v in (cy, m, y, k))
    return (1 - cy) * (1 - k), (1 - m) * (1 - k), (1 - y) * (1 - k)


def np_rgb_to_cmyk(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """Vectorized: Convert RGB to CMYK, shape (..., 4), rounded."""
    r, g, b = np.broadcast_arrays(*(np.asarray(v, dtype=float) for v in (r, g, b)))
    k = 1 - np.maximum.reduce([r, g, b])
    black = k == 1
    denom = np.where(black, 1.0, 1 - k)
    channels = [np.where(black, 0.0, (1 - v - k) / denom) for v in (r, g, b)]
    return np.stack([np_round_half_up(v * PERCENT_MAX) for v in channels + [k]], axis=-1)


def np_cmyk_to_rgb(cy: NDArray, m: NDArray, y: NDArray, k: NDArray) -> NDArray:
    """Vectorized: Convert CMYK to RGB, shape (..., 3)."""
    cy, m, y, k = (np.asarray(v, dtype=float) / PERCENT_MAX for v in (cy, m, y, k))
    return np.stack(np.broadcast_arrays((1 - cy) * (1 - k), (1 - m) * (1 - k), (1 - y) * (1 - k)), axis=-1)
