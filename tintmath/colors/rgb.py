from __future__ import annotations
from typing import TYPE_CHECKING, ClassVar, Tuple

from ..conversions.numbers import round_half_up
from ..conversions.packed import parse_hex, rgb_to_argb
from ..types.color_types import ColorSpace
from ..types.format_type import BYTE_MAX, RenderCondition
from .color_base import ColorBase, channel

if TYPE_CHECKING:
    from .rgb_int import RGBInt


class RGB(ColorBase):
    """
    A color in the sRGB color space, which uses the D65 illuminant.

    Channels are floats normalized to [0, 1] for SDR colors; HDR colors may
    exceed this range and are only clamped when materialized to 8 bits
    (``to_rgb_int``, ``to_hex``).
    """
    __slots__ = ()

    mode:          ClassVar[ColorSpace] = ColorSpace.RGB
    channel_names: ClassVar[Tuple[str, ...]] = ("r", "g", "b")

    r = channel(0, "The red channel")
    g = channel(1, "The green channel")
    b = channel(2, "The blue channel")

    def __init__(self, r: float, g: float, b: float, alpha: float = 1.0) -> None:
        super().__init__(r, g, b, alpha=alpha)

    @classmethod
    def from_ints(cls, r: int, g: int, b: int, alpha: float = 1.0) -> RGB:
        """Construct from channels typically in [0, 255]."""
        return cls(r / BYTE_MAX, g / BYTE_MAX, b / BYTE_MAX, alpha)

    @classmethod
    def from_hex(cls, text: str) -> RGB:
        """
        Construct from a hex string: ``#rgb``, ``#rgba``, ``#rrggbb`` or ``#rrggbbaa``.

        The ``#`` is optional. Raises InvalidFormat for anything else.
        """
        r, g, b, a = parse_hex(text)
        return cls.from_ints(r, g, b, a / BYTE_MAX)

    # Scaled to [0, 255]; HDR colors may exceed this range.
    @property
    def red_int(self) -> int:
        return round_half_up(self.r * BYTE_MAX)

    @property
    def green_int(self) -> int:
        return round_half_up(self.g * BYTE_MAX)

    @property
    def blue_int(self) -> int:
        return round_half_up(self.b * BYTE_MAX)

    @property
    def alpha_int(self) -> int:
        return round_half_up(self.alpha * BYTE_MAX)

    def to_rgb_int(self) -> RGBInt:
        """Return this color as a packed ARGB integer, clamped to [0, 255] per channel."""
        from .rgb_int import RGBInt
        return RGBInt(rgb_to_argb(self.r, self.g, self.b, self.alpha))

    def to_hex(self, with_number_sign: bool = True,
               render_alpha: RenderCondition = RenderCondition.AUTO) -> str:
        return self.to_rgb_int().to_hex(with_number_sign, render_alpha)
