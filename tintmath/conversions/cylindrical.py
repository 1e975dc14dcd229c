import math
from typing import Tuple
import numpy as np
from numpy import ndarray as NDArray

from .hue import HUE_SECTOR, hue_min_max_delta, np_hue_min_max_delta
from .numbers import normalize_hue, np_normalize_hue, round_half_up, np_round_half_up
from ..types.format_type import PERCENT_MAX

Triple = Tuple[float, float, float]


def _hue_or_zero(h: float) -> float:
    return 0.0 if math.isnan(h) else normalize_hue(h)


def _sector_rgb(h: float, chroma: float) -> Triple:
    """Chroma contributions of the six 60 degree hue sectors."""
    x = chroma * (1 - abs((h / HUE_SECTOR) % 2 - 1))
    sector = int(h // HUE_SECTOR) % 6

    if sector == 0:
        return chroma, x, 0.0
    if sector == 1:
        return x, chroma, 0.0
    if sector == 2:
        return 0.0, chroma, x
    if sector == 3:
        return 0.0, x, chroma
    if sector == 4:
        return x, 0.0, chroma
    return chroma, 0.0, x


## HSL

def rgb_to_hsl(r: float, g: float, b: float) -> Tuple[int, int, int]:
    """
    Convert RGB to HSL.

    Args:
        r, g, b: Channels in [0, 1]

    Returns:
        Tuple[int, int, int]: (hue [0, 360], saturation [0, 100], lightness [0, 100]),
        rounded half up. Achromatic colors get hue 0.
    """
    h, lo, hi, delta = hue_min_max_delta(r, g, b)
    lightness = (lo + hi) / 2

    if hi == lo:
        saturation = 0.0
    else:
        denom = hi + lo if lightness <= 0.5 else 2 - hi - lo
        saturation = delta / denom if denom else 0.0

    return (
        round_half_up(h),
        round_half_up(saturation * PERCENT_MAX),
        round_half_up(lightness * PERCENT_MAX),
    )


def hsl_to_rgb(h: float, s: float, l: float) -> Triple:
    """
    Convert HSL to RGB.

    Args:
        h: Hue in degrees; NaN is read as 0
        s: Saturation in [0, 100]
        l: Lightness in [0, 100]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    h = _hue_or_zero(h)
    s = s / PERCENT_MAX
    l = l / PERCENT_MAX

    chroma = (1 - abs(2 * l - 1)) * s
    r, g, b = _sector_rgb(h, chroma)
    m = l - chroma / 2
    return r + m, g + m, b + m


## HSV

def rgb_to_hsv(r: float, g: float, b: float) -> Tuple[int, int, int]:
    """
    Convert RGB to HSV.

    Returns:
        Tuple[int, int, int]: (hue [0, 360], saturation [0, 100], value [0, 100]),
        rounded half up.
    """
    h, _, hi, delta = hue_min_max_delta(r, g, b)
    saturation = 0.0 if hi == 0 else delta / hi
    return (
        round_half_up(h),
        round_half_up(saturation * PERCENT_MAX),
        round_half_up(hi * PERCENT_MAX),
    )


def hsv_to_rgb(h: float, s: float, v: float) -> Triple:
    """Convert HSV (s, v in [0, 100]) to RGB in [0, 1]."""
    h = _hue_or_zero(h)
    s = s / PERCENT_MAX
    v = v / PERCENT_MAX

    chroma = v * s
    r, g, b = _sector_rgb(h, chroma)
    m = v - chroma
    return r + m, g + m, b + m


## HWB

def rgb_to_hwb(r: float, g: float, b: float) -> Triple:
    """
    Convert RGB to HWB (CSS Color 4).

    Returns:
        Tuple[float, float, float]: (hue [0, 360) or NaN, whiteness, blackness),
        whiteness and blackness in [0, 100]. Hue is not rounded.
    """
    h, lo, hi, delta = hue_min_max_delta(r, g, b)
    hue = math.nan if delta == 0 else h
    return hue, PERCENT_MAX * lo, PERCENT_MAX * (1 - hi)


def hwb_to_rgb(h: float, w: float, b: float) -> Triple:
    """
    Convert HWB to RGB (CSS Color 4).

    Whiteness and blackness summing past 100 are scaled down proportionally,
    which yields a gray.
    """
    w = w / PERCENT_MAX
    b = b / PERCENT_MAX
    total = w + b
    if total > 1:
        w = w / total
        b = b / total

    scale = 1 - w - b
    r_p, g_p, b_p = _sector_rgb(_hue_or_zero(h), 1.0)
    return r_p * scale + w, g_p * scale + w, b_p * scale + w


## Vectorized

def _np_hue_or_zero(h: NDArray) -> NDArray:
    h = np.asarray(h, dtype=float)
    return np_normalize_hue(np.where(np.isnan(h), 0.0, h))


def _np_sector_rgb(h: NDArray, chroma: NDArray) -> Tuple[NDArray, NDArray, NDArray]:
    h, chroma = np.broadcast_arrays(h, chroma)
    x = chroma * (1 - np.abs((h / HUE_SECTOR) % 2 - 1))
    zero = np.zeros_like(chroma)
    sector = np.floor(h / HUE_SECTOR).astype(int) % 6
    masks = [sector == i for i in range(5)]

    r = np.select(masks, [chroma, x, zero, zero, x], chroma)
    g = np.select(masks, [x, chroma, chroma, x, zero], zero)
    b = np.select(masks, [zero, zero, x, chroma, chroma], x)
    return r, g, b


def np_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB to HSL.

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        hsl: array of shape (..., 3): rounded (hue, saturation, lightness)
    """
    h, lo, hi, delta = np_hue_min_max_delta(r, g, b)
    lightness = (lo + hi) / 2

    denom = np.where(lightness <= 0.5, hi + lo, 2 - hi - lo)
    usable = (delta != 0) & (denom != 0)
    saturation = np.where(usable, delta / np.where(usable, denom, 1.0), 0.0)

    return np.stack([
        np_round_half_up(h),
        np_round_half_up(saturation * PERCENT_MAX),
        np_round_half_up(lightness * PERCENT_MAX),
    ], axis=-1)


def np_hsl_to_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """Vectorized: Convert HSL to RGB, shape (..., 3)."""
    h = _np_hue_or_zero(h)
    s = np.asarray(s, dtype=float) / PERCENT_MAX
    l = np.asarray(l, dtype=float) / PERCENT_MAX

    chroma = (1 - np.abs(2 * l - 1)) * s
    r, g, b = _np_sector_rgb(h, chroma)
    m = l - chroma / 2
    return np.stack([r + m, g + m, b + m], axis=-1)


def np_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """Vectorized: Convert RGB to HSV, shape (..., 3), rounded."""
    h, _, hi, delta = np_hue_min_max_delta(r, g, b)
    saturation = np.where(hi == 0, 0.0, delta / np.where(hi == 0, 1.0, hi))
    return np.stack([
        np_round_half_up(h),
        np_round_half_up(saturation * PERCENT_MAX),
        np_round_half_up(hi * PERCENT_MAX),
    ], axis=-1)


def np_hsv_to_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """Vectorized: Convert HSV to RGB, shape (..., 3)."""
    h = _np_hue_or_zero(h)
    s = np.asarray(s, dtype=float) / PERCENT_MAX
    v = np.asarray(v, dtype=float) / PERCENT_MAX

    chroma = v * s
    r, g, b = _np_sector_rgb(h, chroma)
    m = v - chroma
    return np.stack([r + m, g + m, b + m], axis=-1)


def np_rgb_to_hwb(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """Vectorized: Convert RGB to HWB, shape (..., 3)."""
    h, lo, hi, delta = np_hue_min_max_delta(r, g, b)
    hue = np.where(delta == 0, np.nan, h)
    return np.stack([hue, PERCENT_MAX * lo, PERCENT_MAX * (1 - hi)], axis=-1)


def np_hwb_to_rgb(h: NDArray, w: NDArray, b: NDArray) -> NDArray:
    """Vectorized: Convert HWB to RGB, shape (..., 3)."""
    h = _np_hue_or_zero(h)
    w = np.asarray(w, dtype=float) / PERCENT_MAX
    b = np.asarray(b, dtype=float) / PERCENT_MAX

    total = w + b
    over = total > 1
    safe = np.where(over, total, 1.0)
    w = np.where(over, w / safe, w)
    b = np.where(over, b / safe, b)

    scale = 1 - w - b
    r_p, g_p, b_p = _np_sector_rgb(h, np.ones_like(scale))
    return np.stack([r_p * scale + w, g_p * scale + w, b_p * scale + w], axis=-1)
