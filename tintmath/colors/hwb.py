from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace
from .color_base import ColorBase, channel


class HWB(ColorBase):
    """
    Hue, whiteness and blackness (CSS Color 4).

    Whiteness and blackness are in [0, 100]. Grays have a NaN hue; a NaN hue
    is read as 0 when converting back to RGB.
    """
    __slots__ = ()

    mode:          ClassVar[ColorSpace] = ColorSpace.HWB
    channel_names: ClassVar[Tuple[str, ...]] = ("h", "w", "b")
    hue_index:     ClassVar[int] = 0

    h = channel(0, "Hue in degrees, NaN for grays")
    w = channel(1, "Whiteness, [0, 100]")
    b = channel(2, "Blackness, [0, 100]")

    def __init__(self, h: float, w: float, b: float, alpha: float = 1.0) -> None:
        super().__init__(h, w, b, alpha=alpha)
