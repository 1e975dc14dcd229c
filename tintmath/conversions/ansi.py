"""
Terminal palette quantization: RGB <-> ANSI 16 color and 256 color codes.

Codes are the SGR foreground numbers: 30-37 and 90-97 for the 16 color
palette, 0-255 for the 256 color palette. RGB input is clamped to [0, 1]
before quantizing.
"""
from typing import Tuple

from .cylindrical import rgb_to_hsv
from .numbers import clamp01, round_half_up
from ..types.format_type import BYTE_MAX

ANSI16_CODES = frozenset(list(range(30, 38)) + list(range(90, 98)))
ANSI256_MAX = 255

_BRIGHT_OFFSET = 60
_GRAY_RAMP_START = 232


def rgb_to_ansi16(r: float, g: float, b: float) -> int:
    """
    Quantize RGB to the 16 color palette.

    Follows the legacy rule exactly: an HSV value of 30 maps straight to code
    30, and only value // 50 == 2 selects the bright half of the palette.
    """
    r, g, b = clamp01(r), clamp01(g), clamp01(b)
    _, _, value = rgb_to_hsv(r, g, b)
    if value == 30:
        return 30

    code = 30 + ((round_half_up(b) * 4) | (round_half_up(g) * 2) | round_half_up(r))
    return code + _BRIGHT_OFFSET if value // 50 == 2 else code


def ansi16_to_rgb(code: int) -> Tuple[float, float, float]:
    color = code % 10
    bright = code > 50

    # black and white are grays
    if color == 0 or color == 7:
        v = (color + 3.5 if bright else color) / 10.5
        return v, v, v

    mul = 1.0 if bright else 0.5
    return (color % 2) * mul, ((color // 2) % 2) * mul, ((color // 4) % 2) * mul


def ansi16_to_ansi256(code: int) -> int:
    if code >= 90:
        return code - 90 + 8
    return code - 30


def rgb_to_ansi256(r: float, g: float, b: float) -> int:
    """
    Quantize RGB to the 256 color palette.

    Grays use the 24 step ramp (232-255) or the cube's black and white
    entries; everything else lands in the 6x6x6 color cube (16-231).
    """
    r, g, b = clamp01(r), clamp01(g), clamp01(b)
    ri = round_half_up(r * BYTE_MAX)
    gi = round_half_up(g * BYTE_MAX)
    bi = round_half_up(b * BYTE_MAX)

    if ri == gi == bi:
        if ri < 8:
            return 16
        if ri > 248:
            return 231
        return round_half_up((ri - 8) / 247.0 * 24.0) + _GRAY_RAMP_START

    return 16 + 36 * round_half_up(r * 5) + 6 * round_half_up(g * 5) + round_half_up(b * 5)


def ansi256_to_ansi16(code: int) -> int:
    if code < 8:
        return code + 30
    if code < 16:
        return code - 8 + 90
    return rgb_to_ansi16(*ansi256_to_rgb(code))


def ansi256_to_rgb(code: int) -> Tuple[float, float, float]:
    if code < 16:
        return ansi16_to_rgb(ansi256_to_ansi16(code))

    if code >= _GRAY_RAMP_START:
        v = ((code - _GRAY_RAMP_START) * 10 + 8) / BYTE_MAX
        return v, v, v

    c = code - 16
    rem = c % 36
    return (c // 36) / 5.0, (rem // 6) / 5.0, (rem % 6) / 5.0
