from __future__ import annotations
from .rgb import RGB
from ..conversions.packed import (
    ARGB_MAX,
    argb_to_rgb,
    format_hex,
    pack_argb,
    parse_hex,
    unpack_argb,
)
from ..types.format_type import BYTE_MAX, RenderCondition


class RGBInt:
    """
    A color packed into a 32 bit integer: alpha, red, green, blue, one byte each.

    This is the clamped SDR form of an RGB color.
    """
    __slots__ = ('_argb', '_is_frozen')

    def __setattr__(self, name, value):
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, argb: int) -> None:
        if isinstance(argb, bool) or not isinstance(argb, int):
            raise ValueError(f"argb must be an int, got {argb!r}")
        if not 0 <= argb <= ARGB_MAX:
            raise ValueError(f"argb must fit in 32 bits, got {argb:#x}")
        self._argb = argb
        super().__setattr__('_is_frozen', True)

    @classmethod
    def from_channels(cls, r: int, g: int, b: int, a: int = BYTE_MAX) -> RGBInt:
        for name, v in (("r", r), ("g", g), ("b", b), ("a", a)):
            if not 0 <= v <= BYTE_MAX:
                raise ValueError(f"{name} must be in [0, 255], got {v!r}")
        return cls(pack_argb(int(a), int(r), int(g), int(b)))

    @classmethod
    def from_hex(cls, text: str) -> RGBInt:
        r, g, b, a = parse_hex(text)
        return cls.from_channels(r, g, b, a)

    @property
    def argb(self) -> int:
        return self._argb

    @property
    def a(self) -> int:
        return unpack_argb(self._argb)[0]

    @property
    def r(self) -> int:
        return unpack_argb(self._argb)[1]

    @property
    def g(self) -> int:
        return unpack_argb(self._argb)[2]

    @property
    def b(self) -> int:
        return unpack_argb(self._argb)[3]

    def to_rgb(self) -> RGB:
        r, g, b, alpha = argb_to_rgb(self._argb)
        return RGB(r, g, b, alpha)

    def to_hex(self, with_number_sign: bool = True,
               render_alpha: RenderCondition = RenderCondition.AUTO) -> str:
        return format_hex(self._argb, with_number_sign, render_alpha)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RGBInt):
            return NotImplemented
        return self._argb == other._argb

    def __hash__(self) -> int:
        return hash(self._argb)

    def __repr__(self) -> str:
        return f"RGBInt(argb={self._argb:#010x})"
