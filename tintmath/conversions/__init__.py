"""
Tintmath Color Space Conversions
================================

Pure conversion functions between RGB, CIE XYZ, LAB, LCHab, LUV, LCHuv, HSL,
HSV, HWB, CMYK and the ANSI 16/256 color palettes, with scalar and vectorized
(numpy) implementations.

Conventions
-----------
- RGB channels are [0, 1] for SDR colors; HDR values pass through unclamped
- XYZ uses the D65 white with Y = 1.0
- HSL, HSV, CMYK results are integers rounded half up; s, l, v, c, m, y, k in [0, 100]
- Hues are in [0, 360); LCHab, LCHuv and HWB report NaN for achromatic colors
- Alpha is never an input to these functions; color classes carry it

Conversion Functions
-------------------

RGB <-> XYZ:
    rgb_to_xyz(r, g, b) / xyz_to_rgb(x, y, z)
    np_rgb_to_xyz(r, g, b) / np_xyz_to_rgb(x, y, z)

XYZ <-> LAB <-> LCHab:
    xyz_to_lab / lab_to_xyz, lab_to_lchab / lchab_to_lab

XYZ <-> LUV <-> LCHuv:
    xyz_to_luv / luv_to_xyz, luv_to_lchuv / lchuv_to_luv

RGB <-> HSL / HSV / HWB / CMYK:
    rgb_to_hsl / hsl_to_rgb, rgb_to_hsv / hsv_to_rgb,
    rgb_to_hwb / hwb_to_rgb, rgb_to_cmyk / cmyk_to_rgb
    (each with an np_ variant)

RGB <-> ANSI:
    rgb_to_ansi16 / ansi16_to_rgb, rgb_to_ansi256 / ansi256_to_rgb,
    ansi16_to_ansi256 / ansi256_to_ansi16

8-bit boundary:
    rgb_to_argb / argb_to_rgb, parse_hex / format_hex

High-Level API
-------------
    convert(color, from_space, to_space)
        Universal converter on a channel tuple, routed through the RGB and XYZ hubs
    np_convert(colors, from_space, to_space, alpha=False)
        Vectorized universal converter
    conversion_path(from_space, to_space)
        The direct steps a conversion takes

Examples
--------
>>> from tintmath.conversions import convert, rgb_to_hsl
>>> rgb_to_hsl(1.0, 0.5, 0.0)
(30, 100, 50)
>>> convert((40.0, 50.0, 60.0), "luv", "lchuv")
(40.0, 78.10249675906654, 50.19442890773481)
"""

from .hue import hue_min_max_delta, np_hue_min_max_delta
from .numbers import round_half_up, normalize_hue, clamp, clamp01

# CIE
from .cie import (
    rgb_to_xyz,
    xyz_to_rgb,
    xyz_to_lab,
    lab_to_xyz,
    xyz_to_luv,
    luv_to_xyz,
    lab_to_lchab,
    lchab_to_lab,
    luv_to_lchuv,
    lchuv_to_luv,
    np_rgb_to_xyz,
    np_xyz_to_rgb,
    np_xyz_to_lab,
    np_lab_to_xyz,
    np_xyz_to_luv,
    np_luv_to_xyz,
    np_to_polar,
    np_from_polar,
)

# Cylindrical
from .cylindrical import (
    rgb_to_hsl,
    hsl_to_rgb,
    rgb_to_hsv,
    hsv_to_rgb,
    rgb_to_hwb,
    hwb_to_rgb,
    np_rgb_to_hsl,
    np_hsl_to_rgb,
    np_rgb_to_hsv,
    np_hsv_to_rgb,
    np_rgb_to_hwb,
    np_hwb_to_rgb,
)

from .cmyk import rgb_to_cmyk, cmyk_to_rgb, np_rgb_to_cmyk, np_cmyk_to_rgb

from .ansi import (
    ANSI16_CODES,
    rgb_to_ansi16,
    ansi16_to_rgb,
    rgb_to_ansi256,
    ansi256_to_rgb,
    ansi16_to_ansi256,
    ansi256_to_ansi16,
)

from .packed import InvalidFormat, rgb_to_argb, argb_to_rgb, parse_hex, format_hex

# High-level API
from .wrapper import convert, np_convert, conversion_path

from ..types.color_types import ColorSpace
from ..types.format_type import RenderCondition

__all__ = [
    'hue_min_max_delta',
    'np_hue_min_max_delta',
    'round_half_up',
    'normalize_hue',
    'clamp',
    'clamp01',

    # CIE
    'rgb_to_xyz',
    'xyz_to_rgb',
    'xyz_to_lab',
    'lab_to_xyz',
    'xyz_to_luv',
    'luv_to_xyz',
    'lab_to_lchab',
    'lchab_to_lab',
    'luv_to_lchuv',
    'lchuv_to_luv',
    'np_rgb_to_xyz',
    'np_xyz_to_rgb',
    'np_xyz_to_lab',
    'np_lab_to_xyz',
    'np_xyz_to_luv',
    'np_luv_to_xyz',
    'np_to_polar',
    'np_from_polar',

    # Cylindrical
    'rgb_to_hsl',
    'hsl_to_rgb',
    'rgb_to_hsv',
    'hsv_to_rgb',
    'rgb_to_hwb',
    'hwb_to_rgb',
    'np_rgb_to_hsl',
    'np_hsl_to_rgb',
    'np_rgb_to_hsv',
    'np_hsv_to_rgb',
    'np_rgb_to_hwb',
    'np_hwb_to_rgb',

    # CMYK
    'rgb_to_cmyk',
    'cmyk_to_rgb',
    'np_rgb_to_cmyk',
    'np_cmyk_to_rgb',

    # ANSI
    'ANSI16_CODES',
    'rgb_to_ansi16',
    'ansi16_to_rgb',
    'rgb_to_ansi256',
    'ansi256_to_rgb',
    'ansi16_to_ansi256',
    'ansi256_to_ansi16',

    # 8-bit boundary
    'InvalidFormat',
    'rgb_to_argb',
    'argb_to_rgb',
    'parse_hex',
    'format_hex',

    # High-level API
    'convert',
    'np_convert',
    'conversion_path',

    # Types
    'ColorSpace',
    'RenderCondition',
]
