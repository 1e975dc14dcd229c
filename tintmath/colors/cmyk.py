from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace
from .color_base import ColorBase, channel


class CMYK(ColorBase):
    """Naive (uncalibrated) CMYK with every channel in [0, 100]."""
    __slots__ = ()

    mode:          ClassVar[ColorSpace] = ColorSpace.CMYK
    channel_names: ClassVar[Tuple[str, ...]] = ("c", "m", "y", "k")

    c = channel(0, "Cyan")
    m = channel(1, "Magenta")
    y = channel(2, "Yellow")
    k = channel(3, "Key (black)")

    def __init__(self, c: float, m: float, y: float, k: float, alpha: float = 1.0) -> None:
        super().__init__(c, m, y, k, alpha=alpha)
