from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace
from .color_base import ColorBase, channel


class HSL(ColorBase):
    """Hue in degrees, saturation and lightness in [0, 100]."""
    __slots__ = ()

    mode:          ClassVar[ColorSpace] = ColorSpace.HSL
    channel_names: ClassVar[Tuple[str, ...]] = ("h", "s", "l")
    hue_index:     ClassVar[int] = 0

    h = channel(0, "Hue in degrees")
    s = channel(1, "Saturation, [0, 100]")
    l = channel(2, "Lightness, [0, 100]")

    def __init__(self, h: float, s: float, l: float, alpha: float = 1.0) -> None:
        super().__init__(h, s, l, alpha=alpha)
