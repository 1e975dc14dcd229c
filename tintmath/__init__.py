"""Tintmath: color model conversions for sRGB, CIE, cylindrical, CMYK and ANSI palettes."""
import logging

from .colors import (
    ColorBase,
    RGB,
    RGBInt,
    XYZ,
    LAB,
    LCHab,
    LUV,
    LCHuv,
    HSL,
    HSV,
    HWB,
    CMYK,
    Ansi16,
    Ansi256,
    get_color_class,
)
from .conversions import convert, np_convert, conversion_path, InvalidFormat
from .types.color_types import ColorSpace
from .types.format_type import RenderCondition

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

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
    'get_color_class',
    'convert',
    'np_convert',
    'conversion_path',
    'InvalidFormat',
    'ColorSpace',
    'RenderCondition',
]
