"""
Tintmath Color Classes
======================

Immutable color values, one class per color model. Every color carries an
alpha in [0, 1] that conversions preserve.

Features
--------
- Immutable color instances (frozen after initialization)
- Channel validation on construction
- Conversion between any two models with ``convert`` or ``to_<model>()``
- NaN-aware equality for achromatic hues

Usage
-----
>>> from tintmath.colors import RGB
>>> orange = RGB(1.0, 0.5, 0.0)
>>> orange.to_hsl()
HSL(h=30.0, s=100.0, l=50.0, alpha=1.0)
>>> RGB.from_hex("#ff800080").alpha  # doctest: +ELLIPSIS
0.50...

Color Classes
-------------
    - RGB, RGBInt: sRGB, as floats or a packed 32 bit integer
    - XYZ, LAB, LCHab, LUV, LCHuv: CIE models
    - HSL, HSV, HWB: cylindrical RGB models
    - CMYK: naive subtractive model
    - Ansi16, Ansi256: terminal palette codes

Notes
-----
- HSL, HSV and CMYK values computed from RGB are rounded to integers
- Channels must be finite; only hue channels may be NaN
"""

from .color_base import ColorBase
from .rgb import RGB
from .rgb_int import RGBInt
from .cie import XYZ, LAB, LCHab, LUV, LCHuv
from .hsl import HSL
from .hsv import HSV
from .hwb import HWB
from .cmyk import CMYK
from .ansi import Ansi16, Ansi256
from .color import color_convert, get_color_class, unified_space_to_class


__all__ = [
    'ColorBase',
    'RGB',
    'RGBInt',
    'XYZ',
    'LAB',
    'LCHab',
    'LUV',
    'LCHuv',
    'HSL',
    'HSV',
    'HWB',
    'CMYK',
    'Ansi16',
    'Ansi256',
    'color_convert',
    'get_color_class',
    'unified_space_to_class',
]
