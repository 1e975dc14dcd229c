from __future__ import annotations
from enum import Enum
from typing import Tuple, Union
import numpy as np
from numpy import ndarray

Scalar = int | float
ScalarVector = Tuple[Scalar, ...]
ColorValue = Union[ScalarVector, ndarray]  # Includes array support


class ColorSpace(str, Enum):
    RGB = "rgb"
    XYZ = "xyz"
    LAB = "lab"
    LCHAB = "lchab"
    LUV = "luv"
    LCHUV = "lchuv"
    HSL = "hsl"
    HSV = "hsv"
    HWB = "hwb"
    CMYK = "cmyk"
    ANSI16 = "ansi16"
    ANSI256 = "ansi256"


SpaceLike = Union[ColorSpace, str]

HUE_SPACES = {ColorSpace.HSL, ColorSpace.HSV, ColorSpace.HWB, ColorSpace.LCHAB, ColorSpace.LCHUV}
PALETTE_SPACES = {ColorSpace.ANSI16, ColorSpace.ANSI256}


def to_color_space(space: SpaceLike) -> ColorSpace:
    """
    Resolve a color space name or member to a ColorSpace.

    Args:
        space: ColorSpace member or its name, case-insensitive ("rgb", "LCHab", ...)

    Returns:
        The matching ColorSpace member
    """
    if isinstance(space, ColorSpace):
        return space
    try:
        return ColorSpace(str(space).lower())
    except ValueError:
        raise ValueError(f"Unknown color space: {space!r}") from None


def element_to_array(element: ColorValue) -> np.ndarray:
    """
    Convert a color element to a float numpy array.

    Args:
        element: Tuple of channels, or already an ndarray

    Returns:
        numpy array representation
    """
    if isinstance(element, ndarray):
        return element.astype(float, copy=False)
    return np.asarray(element, dtype=float)


def is_hue_space(color_space: SpaceLike) -> bool:
    """
    Check if the given color space has a hue channel.

    Args:
        color_space: Color space member or string
    Returns:
        True if hue-based, False otherwise
    """
    return to_color_space(color_space) in HUE_SPACES
