"""
CIE color classes: XYZ, LAB and LUV, plus LCHab and LCHuv, their polar forms.

All are relative to the D65 white; XYZ has white at Y = 1.0.
"""
from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace
from .color_base import ColorBase, channel


class XYZ(ColorBase):
    __slots__ = ()

    mode:          ClassVar[ColorSpace] = ColorSpace.XYZ
    channel_names: ClassVar[Tuple[str, ...]] = ("x", "y", "z")

    x = channel(0)
    y = channel(1, "Luminance, 1.0 for the reference white")
    z = channel(2)

    def __init__(self, x: float, y: float, z: float, alpha: float = 1.0) -> None:
        super().__init__(x, y, z, alpha=alpha)


class LAB(ColorBase):
    __slots__ = ()

    mode:          ClassVar[ColorSpace] = ColorSpace.LAB
    channel_names: ClassVar[Tuple[str, ...]] = ("l", "a", "b")

    l = channel(0, "Lightness, [0, 100]")
    a = channel(1)
    b = channel(2)

    def __init__(self, l: float, a: float, b: float, alpha: float = 1.0) -> None:
        super().__init__(l, a, b, alpha=alpha)


class LCHab(ColorBase):
    """Polar LAB. The hue is NaN when chroma is zero."""
    __slots__ = ()

    mode:          ClassVar[ColorSpace] = ColorSpace.LCHAB
    channel_names: ClassVar[Tuple[str, ...]] = ("l", "c", "h")
    hue_index:     ClassVar[int] = 2

    l = channel(0, "Lightness, [0, 100]")
    c = channel(1, "Chroma")
    h = channel(2, "Hue in degrees, NaN when achromatic")

    def __init__(self, l: float, c: float, h: float, alpha: float = 1.0) -> None:
        super().__init__(l, c, h, alpha=alpha)


class LUV(ColorBase):
    __slots__ = ()

    mode:          ClassVar[ColorSpace] = ColorSpace.LUV
    channel_names: ClassVar[Tuple[str, ...]] = ("l", "u", "v")

    l = channel(0, "Lightness, [0, 100]")
    u = channel(1)
    v = channel(2)

    def __init__(self, l: float, u: float, v: float, alpha: float = 1.0) -> None:
        super().__init__(l, u, v, alpha=alpha)


class LCHuv(ColorBase):
    """Polar LUV. The hue is NaN when chroma is zero."""
    __slots__ = ()

    mode:          ClassVar[ColorSpace] = ColorSpace.LCHUV
    channel_names: ClassVar[Tuple[str, ...]] = ("l", "c", "h")
    hue_index:     ClassVar[int] = 2

    l = channel(0, "Lightness, [0, 100]")
    c = channel(1, "Chroma")
    h = channel(2, "Hue in degrees, NaN when achromatic")

    def __init__(self, l: float, c: float, h: float, alpha: float = 1.0) -> None:
        super().__init__(l, c, h, alpha=alpha)
