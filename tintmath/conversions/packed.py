"""
The 8-bit boundary: packed ARGB integers and hex strings.

This is the one place where float channels are unconditionally clamped to
[0, 255]; HDR and out-of-gamut colors are materialized here.
"""
import logging
import string
from typing import Tuple

from .numbers import clamp, round_half_up
from ..types.format_type import BYTE_MAX, RenderCondition

logger = logging.getLogger(__name__)

ARGB_MAX = 0xFFFFFFFF
_HEX_LENGTHS = (3, 4, 6, 8)
_HEX_DIGITS = frozenset(string.hexdigits)


class InvalidFormat(ValueError):
    """A hex color string with the wrong length or non-hex characters."""


def to_byte(value: float) -> int:
    """Scale a [0, 1] channel to [0, 255], rounding half up and clamping."""
    return clamp(round_half_up(value * BYTE_MAX), 0, BYTE_MAX)


def pack_argb(a: int, r: int, g: int, b: int) -> int:
    return (a << 24) | (r << 16) | (g << 8) | b


def unpack_argb(argb: int) -> Tuple[int, int, int, int]:
    """Split a packed integer into (a, r, g, b) bytes."""
    return (argb >> 24) & 0xFF, (argb >> 16) & 0xFF, (argb >> 8) & 0xFF, argb & 0xFF


def rgb_to_argb(r: float, g: float, b: float, alpha: float = 1.0) -> int:
    """
    Pack float RGB and alpha into a 32 bit ARGB integer.

    Args:
        r, g, b: Channels, nominally [0, 1]; anything outside is clamped
        alpha: Opacity in [0, 1]

    Returns:
        int: alpha << 24 | red << 16 | green << 8 | blue
    """
    if not all(0.0 <= v <= 1.0 for v in (r, g, b, alpha)):
        logger.debug("Clamping out-of-range channels (%r, %r, %r, %r) to 8 bits", r, g, b, alpha)
    return pack_argb(to_byte(alpha), to_byte(r), to_byte(g), to_byte(b))


def argb_to_rgb(argb: int) -> Tuple[float, float, float, float]:
    """Unpack an ARGB integer to float (r, g, b, alpha) in [0, 1]."""
    a, r, g, b = unpack_argb(argb)
    return r / BYTE_MAX, g / BYTE_MAX, b / BYTE_MAX, a / BYTE_MAX


def parse_hex(text: str) -> Tuple[int, int, int, int]:
    """
    Parse a hex color string.

    Accepted forms, each with an optional leading ``#``:

    - ``rrggbb`` and ``rrggbbaa``: one pair of hex digits per channel
    - ``rgb`` and ``rgba``: shorthand, each digit is repeated (``def`` == ``ddeeff``)

    Returns:
        Tuple[int, int, int, int]: (r, g, b, a) bytes; a is 255 when absent

    Raises:
        InvalidFormat: wrong length or non-hex characters
    """
    if not isinstance(text, str):
        raise InvalidFormat(f"Hex color must be a string, got {type(text).__name__}")

    digits = text[1:] if text.startswith("#") else text
    if len(digits) not in _HEX_LENGTHS or not _HEX_DIGITS.issuperset(digits):
        raise InvalidFormat(f'Hex string must be in the format "#ffffff" or "ffffff", got {text!r}')

    if len(digits) <= 4:
        pairs = [d * 2 for d in digits]
    else:
        pairs = [digits[i:i + 2] for i in range(0, len(digits), 2)]

    values = [int(p, 16) for p in pairs]
    if len(values) == 3:
        values.append(BYTE_MAX)
    r, g, b, a = values
    return r, g, b, a


def format_hex(argb: int, with_number_sign: bool = True,
               render_alpha: RenderCondition = RenderCondition.AUTO) -> str:
    """
    Format a packed ARGB integer as a lowercase hex string.

    Args:
        argb: Packed color
        with_number_sign: Prefix the result with ``#``
        render_alpha: ALWAYS, NEVER, or AUTO (only when alpha is not 255)
    """
    a, r, g, b = unpack_argb(argb)
    out = f"{r:02x}{g:02x}{b:02x}"

    render_alpha = RenderCondition(render_alpha)
    if render_alpha == RenderCondition.ALWAYS or (render_alpha == RenderCondition.AUTO and a != BYTE_MAX):
        out += f"{a:02x}"

    return "#" + out if with_number_sign else out
