from __future__ import annotations
import math
from typing import TYPE_CHECKING, Any, Callable, ClassVar, Optional, Tuple

from ..types.color_types import ColorSpace, ScalarVector, SpaceLike, HUE_SPACES

if TYPE_CHECKING:
    from .ansi import Ansi16, Ansi256
    from .cie import LAB, LCHab, LCHuv, LUV, XYZ
    from .cmyk import CMYK
    from .hsl import HSL
    from .hsv import HSV
    from .hwb import HWB
    from .rgb import RGB


def channel(index: int, doc: Optional[str] = None) -> property:
    """Read-only property exposing one channel of a color."""
    return property(lambda self: self._value[index], doc=doc)


def _same(a: float, b: float) -> bool:
    return a == b or (math.isnan(a) and math.isnan(b))


class ColorBase:
    """
    Immutable color value: a tuple of channels plus an alpha in [0, 1].

    Subclasses declare their space, channel names, which channel (if any) is
    a hue, and how channel values are coerced. Every color converts to every
    other model with ``convert`` or the ``to_<model>()`` shortcuts.
    """
    __slots__ = ('_value', '_alpha', '_is_frozen')

    mode:          ClassVar[ColorSpace]
    channel_names: ClassVar[Tuple[str, ...]]
    hue_index:     ClassVar[Optional[int]] = None
    _type:         ClassVar[type] = float
    # color_convert(self, to_space) is bound in colors/color.py
    convert: Callable[[ColorBase, SpaceLike], ColorBase]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, *channels: Any, alpha: float = 1.0) -> None:
        if len(channels) != len(self.channel_names):
            raise ValueError(
                f"{self.__class__.__name__} expects {len(self.channel_names)} channels "
                f"{self.channel_names}, got {len(channels)}"
            )

        value = tuple(self._coerce(i, v) for i, v in enumerate(channels))

        try:
            alpha = float(alpha)
        except (TypeError, ValueError):
            raise ValueError(f"alpha must be a number, got {alpha!r}") from None
        if not 0.0 <= alpha <= 1.0:
            raise ValueError(f"alpha must be in [0, 1], got {alpha!r}")

        self._value = value
        self._alpha = alpha

        # freeze; later writes raise AttributeError
        super().__setattr__('_is_frozen', True)

    def _coerce(self, index: int, v: Any) -> Any:
        try:
            v = self._type(v)
        except (TypeError, ValueError):
            raise ValueError(f"{self.channel_names[index]} must be a number, got {v!r}") from None
        if math.isnan(v) and index == self.hue_index:
            return v
        if not math.isfinite(v):
            raise ValueError(f"{self.channel_names[index]} must be finite, got {v!r}")
        return v

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ScalarVector:
        """Channel values, alpha excluded."""
        return self._value

    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def has_hue(self) -> bool:
        """Check if this color space includes a hue channel."""
        return self.mode in HUE_SPACES

    def as_tuple(self) -> ScalarVector:
        """Channel values followed by alpha."""
        return self._value + (self._alpha,)

    def with_alpha(self, alpha: float):
        """Return a copy of this color with a different alpha."""
        return self.__class__(*self._value, alpha=alpha)

    # ------------------ COMPARISON ------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return (
            self.mode == other.mode
            and self._alpha == other._alpha
            and all(_same(a, b) for a, b in zip(self._value, other._value))
        )

    def __hash__(self) -> int:
        key = tuple(None if isinstance(v, float) and math.isnan(v) else v for v in self._value)
        return hash((self.mode, key, self._alpha))

    def is_close(self, other: ColorBase, tolerance: float = 5e-4) -> bool:
        """
        Compare with another color of the same model within an absolute tolerance.

        NaN hues only match NaN hues.
        """
        if self.mode != other.mode:
            return False
        pairs = list(zip(self.as_tuple(), other.as_tuple()))
        return all(
            (math.isnan(a) and math.isnan(b)) or abs(a - b) <= tolerance
            for a, b in pairs
        )

    def __repr__(self) -> str:
        parts = [f"{name}={v!r}" for name, v in zip(self.channel_names, self._value)]
        parts.append(f"alpha={self._alpha!r}")
        return f"{self.__class__.__name__}({', '.join(parts)})"

    # ------------------ CONVERSIONS ------------------
    def to_rgb(self) -> RGB:
        return self.convert(ColorSpace.RGB)

    def to_xyz(self) -> XYZ:
        return self.convert(ColorSpace.XYZ)

    def to_lab(self) -> LAB:
        return self.convert(ColorSpace.LAB)

    def to_lchab(self) -> LCHab:
        return self.convert(ColorSpace.LCHAB)

    def to_luv(self) -> LUV:
        return self.convert(ColorSpace.LUV)

    def to_lchuv(self) -> LCHuv:
        return self.convert(ColorSpace.LCHUV)

    def to_hsl(self) -> HSL:
        return self.convert(ColorSpace.HSL)

    def to_hsv(self) -> HSV:
        return self.convert(ColorSpace.HSV)

    def to_hwb(self) -> HWB:
        return self.convert(ColorSpace.HWB)

    def to_cmyk(self) -> CMYK:
        return self.convert(ColorSpace.CMYK)

    def to_ansi16(self) -> Ansi16:
        return self.convert(ColorSpace.ANSI16)

    def to_ansi256(self) -> Ansi256:
        return self.convert(ColorSpace.ANSI256)


def build_registry(*classes: type[ColorBase]):
    return {cls.mode: cls for cls in classes}
