"""
CIE conversions: RGB <-> XYZ, XYZ <-> LAB, XYZ <-> LUV and the polar LCH forms.

XYZ is expressed with the reference white at Y = 1.0. All functions are pure;
out-of-gamut input is carried through without clamping.
"""
import math
from typing import Tuple
import numpy as np
from numpy import ndarray as NDArray

from . import constants as c
from .numbers import normalize_hue, np_normalize_hue

Triple = Tuple[float, float, float]


## RGB <-> XYZ

def srgb_to_linear(value: float) -> float:
    """Linearize one sRGB channel."""
    if value > c.SRGB_LINEAR_THRESHOLD:
        return ((value + c.SRGB_OFFSET) / c.SRGB_SCALE) ** c.SRGB_GAMMA
    return value / c.SRGB_SLOPE


def linear_to_srgb(value: float) -> float:
    """Apply the sRGB transfer curve to one linear channel."""
    if value > c.SRGB_GAMMA_THRESHOLD:
        return c.SRGB_SCALE * value ** (1 / c.SRGB_GAMMA) - c.SRGB_OFFSET
    return c.SRGB_SLOPE * value


def _mat_mul(m, v0: float, v1: float, v2: float) -> Triple:
    return (
        m[0][0] * v0 + m[0][1] * v1 + m[0][2] * v2,
        m[1][0] * v0 + m[1][1] * v1 + m[1][2] * v2,
        m[2][0] * v0 + m[2][1] * v1 + m[2][2] * v2,
    )


def rgb_to_xyz(r: float, g: float, b: float) -> Triple:
    """
    Convert sRGB to CIE XYZ (D65).

    Args:
        r, g, b: sRGB channels, [0, 1] for SDR colors

    Returns:
        Tuple[float, float, float]: (x, y, z) with white at y = 1.0
    """
    return _mat_mul(c.M_RGB_XYZ, srgb_to_linear(r), srgb_to_linear(g), srgb_to_linear(b))


def xyz_to_rgb(x: float, y: float, z: float) -> Triple:
    """
    Convert CIE XYZ (D65) to sRGB. Out-of-gamut colors fall outside [0, 1].
    """
    r_lin, g_lin, b_lin = _mat_mul(c.M_XYZ_RGB, x, y, z)
    return linear_to_srgb(r_lin), linear_to_srgb(g_lin), linear_to_srgb(b_lin)


## XYZ <-> LAB

def _lab_f(t: float) -> float:
    if t > c.CIE_E:
        return t ** (1 / 3)
    return (c.CIE_K * t + c.LAB_L_SUB) / c.LAB_L_MULT


def xyz_to_lab(x: float, y: float, z: float) -> Triple:
    """
    Convert CIE XYZ to CIE LAB relative to the D65 white.

    Returns:
        Tuple[float, float, float]: (L [0, 100], a, b)
    """
    fx = _lab_f(x / c.D65_X)
    fy = _lab_f(y / c.D65_Y)
    fz = _lab_f(z / c.D65_Z)
    l = c.LAB_L_MULT * fy - c.LAB_L_SUB
    a = c.LAB_A_MULT * (fx - fy)
    b = c.LAB_B_MULT * (fy - fz)
    return l, a, b


def lab_to_xyz(l: float, a: float, b: float) -> Triple:
    """Convert CIE LAB to CIE XYZ."""
    fy = (l + c.LAB_L_SUB) / c.LAB_L_MULT
    fx = fy + a / c.LAB_A_MULT
    fz = fy - b / c.LAB_B_MULT

    fx3 = fx ** 3
    fz3 = fz ** 3
    xr = fx3 if fx3 > c.CIE_E else (c.LAB_L_MULT * fx - c.LAB_L_SUB) / c.CIE_K
    yr = fy ** 3 if l > c.CIE_KE else l / c.CIE_K
    zr = fz3 if fz3 > c.CIE_E else (c.LAB_L_MULT * fz - c.LAB_L_SUB) / c.CIE_K

    return xr * c.D65_X, yr * c.D65_Y, zr * c.D65_Z


## XYZ <-> LUV

def _luv_lightness(yr: float) -> float:
    if yr > c.CIE_E:
        return c.LAB_L_MULT * yr ** (1 / 3) - c.LAB_L_SUB
    return c.CIE_K * yr


def xyz_to_luv(x: float, y: float, z: float) -> Triple:
    """
    Convert CIE XYZ to CIE LUV (1976) relative to the D65 white.

    XYZ(0, 0, 0) maps to LUV(0, 0, 0) instead of dividing by zero.
    """
    denom = x + 15.0 * y + 3.0 * z
    if denom == 0:
        u_prime = 0.0
        v_prime = 0.0
    else:
        u_prime = 4.0 * x / denom
        v_prime = 9.0 * y / denom

    l = _luv_lightness(y / c.D65_Y)
    if l == 0:
        return l, 0.0, 0.0

    u = c.LUV_UV_MULT * l * (u_prime - c.D65_U_PRIME)
    v = c.LUV_UV_MULT * l * (v_prime - c.D65_V_PRIME)
    return l, u, v


def luv_to_xyz(l: float, u: float, v: float) -> Triple:
    """Convert CIE LUV to CIE XYZ. L = 0 is black."""
    if l == 0:
        return 0.0, 0.0, 0.0

    u_prime = u / (c.LUV_UV_MULT * l) + c.D65_U_PRIME
    v_prime = v / (c.LUV_UV_MULT * l) + c.D65_V_PRIME

    if l > c.CIE_KE:
        y = c.D65_Y * ((l + c.LAB_L_SUB) / c.LAB_L_MULT) ** 3
    else:
        y = c.D65_Y * l / c.CIE_K

    if v_prime == 0:
        return 0.0, y, 0.0

    x = y * 9.0 * u_prime / (4.0 * v_prime)
    z = y * (12.0 - 3.0 * u_prime - 20.0 * v_prime) / (4.0 * v_prime)
    return x, y, z


## Rectangular <-> polar

def _to_polar(l: float, a: float, b: float) -> Triple:
    chroma = math.hypot(a, b)
    if chroma < c.ACHROMATIC_CHROMA:
        return l, chroma, math.nan
    return l, chroma, normalize_hue(math.degrees(math.atan2(b, a)))


def _from_polar(l: float, chroma: float, hue: float) -> Triple:
    if math.isnan(hue):
        return l, 0.0, 0.0
    rad = math.radians(hue)
    return l, chroma * math.cos(rad), chroma * math.sin(rad)


def lab_to_lchab(l: float, a: float, b: float) -> Triple:
    """LAB -> LCHab. Hue is NaN when the chroma is (numerically) zero."""
    return _to_polar(l, a, b)


def lchab_to_lab(l: float, chroma: float, hue: float) -> Triple:
    """LCHab -> LAB. A NaN hue means a = b = 0."""
    return _from_polar(l, chroma, hue)


def luv_to_lchuv(l: float, u: float, v: float) -> Triple:
    """LUV -> LCHuv. Hue is NaN when the chroma is (numerically) zero."""
    return _to_polar(l, u, v)


def lchuv_to_luv(l: float, chroma: float, hue: float) -> Triple:
    """LCHuv -> LUV. A NaN hue means u = v = 0."""
    return _from_polar(l, chroma, hue)


## Vectorized

def _floats(*arrays):
    return np.broadcast_arrays(*(np.asarray(a, dtype=float) for a in arrays))


def np_srgb_to_linear(values: NDArray) -> NDArray:
    values = np.asarray(values, dtype=float)
    curved = ((np.maximum(values, c.SRGB_LINEAR_THRESHOLD) + c.SRGB_OFFSET) / c.SRGB_SCALE) ** c.SRGB_GAMMA
    return np.where(values > c.SRGB_LINEAR_THRESHOLD, curved, values / c.SRGB_SLOPE)


def np_linear_to_srgb(values: NDArray) -> NDArray:
    values = np.asarray(values, dtype=float)
    curved = c.SRGB_SCALE * np.maximum(values, c.SRGB_GAMMA_THRESHOLD) ** (1 / c.SRGB_GAMMA) - c.SRGB_OFFSET
    return np.where(values > c.SRGB_GAMMA_THRESHOLD, curved, c.SRGB_SLOPE * values)


def np_rgb_to_xyz(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: sRGB to CIE XYZ.

    Args:
        r, g, b: array-like or scalar channels

    Returns:
        xyz: array of shape (..., 3)
    """
    linear = np_srgb_to_linear(np.stack(_floats(r, g, b), axis=-1))
    return linear @ c.RGB_TO_XYZ.T


def np_xyz_to_rgb(x: NDArray, y: NDArray, z: NDArray) -> NDArray:
    """Vectorized: CIE XYZ to sRGB, shape (..., 3)."""
    linear = np.stack(_floats(x, y, z), axis=-1) @ c.XYZ_TO_RGB.T
    return np_linear_to_srgb(linear)


def _np_lab_f(t: NDArray) -> NDArray:
    return np.where(t > c.CIE_E, np.cbrt(t), (c.CIE_K * t + c.LAB_L_SUB) / c.LAB_L_MULT)


def np_xyz_to_lab(x: NDArray, y: NDArray, z: NDArray) -> NDArray:
    """Vectorized: CIE XYZ to CIE LAB, shape (..., 3)."""
    x, y, z = _floats(x, y, z)
    fx = _np_lab_f(x / c.D65_X)
    fy = _np_lab_f(y / c.D65_Y)
    fz = _np_lab_f(z / c.D65_Z)
    return np.stack([
        c.LAB_L_MULT * fy - c.LAB_L_SUB,
        c.LAB_A_MULT * (fx - fy),
        c.LAB_B_MULT * (fy - fz),
    ], axis=-1)


def np_lab_to_xyz(l: NDArray, a: NDArray, b: NDArray) -> NDArray:
    """Vectorized: CIE LAB to CIE XYZ, shape (..., 3)."""
    l, a, b = _floats(l, a, b)
    fy = (l + c.LAB_L_SUB) / c.LAB_L_MULT
    fx = fy + a / c.LAB_A_MULT
    fz = fy - b / c.LAB_B_MULT

    xr = np.where(fx ** 3 > c.CIE_E, fx ** 3, (c.LAB_L_MULT * fx - c.LAB_L_SUB) / c.CIE_K)
    yr = np.where(l > c.CIE_KE, fy ** 3, l / c.CIE_K)
    zr = np.where(fz ** 3 > c.CIE_E, fz ** 3, (c.LAB_L_MULT * fz - c.LAB_L_SUB) / c.CIE_K)

    return np.stack([xr * c.D65_X, yr * c.D65_Y, zr * c.D65_Z], axis=-1)


def np_xyz_to_luv(x: NDArray, y: NDArray, z: NDArray) -> NDArray:
    """Vectorized: CIE XYZ to CIE LUV, shape (..., 3)."""
    x, y, z = _floats(x, y, z)
    denom = x + 15.0 * y + 3.0 * z
    empty = denom == 0
    safe = np.where(empty, 1.0, denom)
    u_prime = np.where(empty, 0.0, 4.0 * x / safe)
    v_prime = np.where(empty, 0.0, 9.0 * y / safe)

    yr = y / c.D65_Y
    l = np.where(yr > c.CIE_E, c.LAB_L_MULT * np.cbrt(yr) - c.LAB_L_SUB, c.CIE_K * yr)
    black = l == 0
    u = np.where(black, 0.0, c.LUV_UV_MULT * l * (u_prime - c.D65_U_PRIME))
    v = np.where(black, 0.0, c.LUV_UV_MULT * l * (v_prime - c.D65_V_PRIME))
    return np.stack([l, u, v], axis=-1)


def np_luv_to_xyz(l: NDArray, u: NDArray, v: NDArray) -> NDArray:
    """Vectorized: CIE LUV to CIE XYZ, shape (..., 3)."""
    l, u, v = _floats(l, u, v)
    black = l == 0
    safe_l = np.where(black, 1.0, l)
    u_prime = u / (c.LUV_UV_MULT * safe_l) + c.D65_U_PRIME
    v_prime = v / (c.LUV_UV_MULT * safe_l) + c.D65_V_PRIME

    y = c.D65_Y * np.where(l > c.CIE_KE, ((l + c.LAB_L_SUB) / c.LAB_L_MULT) ** 3, l / c.CIE_K)

    flat = v_prime == 0
    safe_v = np.where(flat, 1.0, v_prime)
    x = np.where(flat, 0.0, y * 9.0 * u_prime / (4.0 * safe_v))
    z = np.where(flat, 0.0, y * (12.0 - 3.0 * u_prime - 20.0 * v_prime) / (4.0 * safe_v))

    xyz = np.stack([x, y, z], axis=-1)
    return np.where(black[..., None], 0.0, xyz)


def np_to_polar(l: NDArray, a: NDArray, b: NDArray) -> NDArray:
    """Vectorized LAB -> LCHab / LUV -> LCHuv, shape (..., 3)."""
    l, a, b = _floats(l, a, b)
    chroma = np.hypot(a, b)
    hue = np_normalize_hue(np.degrees(np.arctan2(b, a)))
    hue = np.where(chroma < c.ACHROMATIC_CHROMA, np.nan, hue)
    return np.stack([l, chroma, hue], axis=-1)


def np_from_polar(l: NDArray, chroma: NDArray, hue: NDArray) -> NDArray:
    """Vectorized LCHab -> LAB / LCHuv -> LUV, shape (..., 3)."""
    l, chroma, hue = _floats(l, chroma, hue)
    missing = np.isnan(hue)
    rad = np.radians(np.where(missing, 0.0, hue))
    a = np.where(missing, 0.0, chroma * np.cos(rad))
    b = np.where(missing, 0.0, chroma * np.sin(rad))
    return np.stack([l, a, b], axis=-1)
