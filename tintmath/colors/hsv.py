from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace
from .color_base import ColorBase, channel


class HSV(ColorBase):
    """Hue in degrees, saturation and value in [0, 100]."""
    __slots__ = ()

    mode:          ClassVar[ColorSpace] = ColorSpace.HSV
    channel_names: ClassVar[Tuple[str, ...]] = ("h", "s", "v")
    hue_index:     ClassVar[int] = 0

    h = channel(0, "Hue in degrees")
    s = channel(1, "Saturation, [0, 100]")
    v = channel(2, "Value, [0, 100]")

    def __init__(self, h: float, s: float, v: float, alpha: float = 1.0) -> None:
        super().__init__(h, s, v, alpha=alpha)
