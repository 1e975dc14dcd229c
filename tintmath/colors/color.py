from __future__ import annotations
from .color_base import ColorBase, build_registry
from .rgb import RGB
from .cie import XYZ, LAB, LCHab, LUV, LCHuv
from .hsl import HSL
from .hsv import HSV
from .hwb import HWB
from .cmyk import CMYK
from .ansi import Ansi16, Ansi256
from ..conversions import convert
from ..types.color_types import ColorSpace, SpaceLike, to_color_space

unified_space_to_class: dict[ColorSpace, type[ColorBase]] = build_registry(
    RGB, XYZ, LAB, LCHab, LUV, LCHuv, HSL, HSV, HWB, CMYK, Ansi16, Ansi256,
)


def get_color_class(color_space: SpaceLike) -> type[ColorBase]:
    return unified_space_to_class[to_color_space(color_space)]


def color_convert(self: ColorBase, to_space: SpaceLike) -> ColorBase:
    """
    Convert this color to another color model.

    Args:
        to_space: Target color space (e.g., "lab", ColorSpace.HSV)

    Returns:
        New ColorBase instance of the target model with the same alpha.
        Converting to the color's own model returns the color itself.
    """
    to_space = to_color_space(to_space)
    if to_space == self.mode:
        return self

    result = convert(self.value, self.mode, to_space)
    cls = unified_space_to_class[to_space]
    return cls(*result, alpha=self.alpha)


ColorBase.convert = color_convert
