from numbers import Integral
from typing import Any, ClassVar, Tuple
from ..conversions.ansi import ANSI16_CODES, ANSI256_MAX
from ..types.color_types import ColorSpace
from .color_base import ColorBase, channel


class _AnsiColor(ColorBase):
    """A terminal palette entry: a single integer code."""
    __slots__ = ()

    channel_names: ClassVar[Tuple[str, ...]] = ("code",)
    _type:         ClassVar[type] = int

    code = channel(0, "SGR color code")

    def __init__(self, code: int, alpha: float = 1.0) -> None:
        super().__init__(code, alpha=alpha)

    def _coerce(self, index: int, v: Any) -> int:
        if isinstance(v, Integral) and not isinstance(v, bool):
            v = int(v)
        elif isinstance(v, float) and v.is_integer():
            v = int(v)
        else:
            raise ValueError(f"{self.__class__.__name__} code must be an integer, got {v!r}")
        if not self._valid(v):
            raise ValueError(f"Invalid {self.__class__.__name__} code: {v}")
        return v

    @staticmethod
    def _valid(code: int) -> bool:
        raise NotImplementedError


class Ansi16(_AnsiColor):
    """Foreground code of the 16 color palette: 30-37 or 90-97."""
    __slots__ = ()

    mode: ClassVar[ColorSpace] = ColorSpace.ANSI16

    @staticmethod
    def _valid(code: int) -> bool:
        return code in ANSI16_CODES


class Ansi256(_AnsiColor):
    """Code of the 256 color palette, 0-255."""
    __slots__ = ()

    mode: ClassVar[ColorSpace] = ColorSpace.ANSI256

    @staticmethod
    def _valid(code: int) -> bool:
        return 0 <= code <= ANSI256_MAX
