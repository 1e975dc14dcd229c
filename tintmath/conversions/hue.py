from typing import Tuple
import numpy as np
from numpy import ndarray as NDArray

from ..types.format_type import HUE_360

HUE_SECTOR = 60.0


def hue_min_max_delta(r: float, g: float, b: float) -> Tuple[float, float, float, float]:
    """
    Compute the hue, minimum, maximum and max - min of three channels.

    Shared by every RGB -> cylindrical conversion so HSL, HSV and HWB always
    agree on the hue of a given color.

    Args:
        r, g, b: Channels scaled to [0, 1] (out-of-range values are accepted)

    Returns:
        Tuple[float, float, float, float]: (hue [0, 360), min, max, delta).
        Hue is 0 when min == max.
    """
    lo = min(r, g, b)
    hi = max(r, g, b)
    delta = hi - lo

    if hi == lo:
        h = 0.0
    elif r == hi:
        h = (g - b) / delta
    elif g == hi:
        h = 2 + (b - r) / delta
    else:
        h = 4 + (r - g) / delta

    h = min(h * HUE_SECTOR, float(HUE_360))
    if h < 0:
        h += HUE_360
    if h >= HUE_360:
        h = 0.0

    return h, lo, hi, delta


def np_hue_min_max_delta(r: NDArray, g: NDArray, b: NDArray) -> Tuple[NDArray, NDArray, NDArray, NDArray]:
    """
    Vectorized: hue, min, max and delta of three channel arrays.

    Args:
        r, g, b: array-like or scalar channels

    Returns:
        Tuple of arrays (hue, min, max, delta), broadcast to a common shape
    """
    r, g, b = np.broadcast_arrays(
        np.asarray(r, dtype=float),
        np.asarray(g, dtype=float),
        np.asarray(b, dtype=float),
    )
    hi = np.maximum.reduce([r, g, b])
    lo = np.minimum.reduce([r, g, b])
    delta = hi - lo

    gray = delta == 0
    safe = np.where(gray, 1.0, delta)
    h = np.select(
        [gray, r == hi, g == hi],
        [0.0, (g - b) / safe, 2 + (b - r) / safe],
        4 + (r - g) / safe,
    )

    h = np.minimum(h * HUE_SECTOR, HUE_360)
    h = np.where(h < 0, h + HUE_360, h)
    h = np.where(h >= HUE_360, 0.0, h)

    return h, lo, hi, delta
