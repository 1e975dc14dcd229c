import itertools
import math
import pytest
from tintmath.colors import (
    ColorBase, RGB, XYZ, LAB, LCHab, LUV, LCHuv, HSL, HSV, HWB, CMYK, Ansi16, Ansi256,
    get_color_class, unified_space_to_class,
)
from tintmath.types.color_types import ColorSpace
from ..samples import samples_rgb_hsl, samples_rgb_hsv, samples_rgb_cmyk, samples_luv_xyz, samples_luv_lchuv

SPACES = list(ColorSpace)


def test_registry_covers_every_space():
    assert set(unified_space_to_class) == set(ColorSpace)
    for space, cls in unified_space_to_class.items():
        assert cls.mode == space
        assert get_color_class(space.value) is cls


def test_class_conversion_rgb_to_hsl():
    for rgb, hsl in samples_rgb_hsl.items():
        result = RGB(*rgb).to_hsl()
        assert isinstance(result, HSL)
        assert result == HSL(*hsl)


def test_class_conversion_rgb_to_hsv():
    for rgb, hsv in samples_rgb_hsv.items():
        result = RGB(*rgb).convert("hsv")
        assert isinstance(result, HSV)
        assert result.value == hsv


def test_class_conversion_rgb_to_cmyk():
    for rgb, cmyk in samples_rgb_cmyk.items():
        assert RGB(*rgb).to_cmyk() == CMYK(*cmyk)
        assert RGB(*rgb).to_cmyk().to_rgb().is_close(RGB(*rgb))


def test_luv_reference_scenarios():
    for luv, xyz in samples_luv_xyz.items():
        assert LUV(*luv).to_xyz().is_close(XYZ(*xyz))
    for luv, lch in samples_luv_lchuv.items():
        assert LUV(*luv).to_lchuv().is_close(LCHuv(*lch))


def test_luv_black_scenarios_are_exact():
    assert LUV(0, 0, 0).to_xyz() == XYZ(0, 0, 0)
    assert LUV(0, 0, 0).to_lchuv() == LCHuv(0.0, 0.0, math.nan)


@pytest.mark.parametrize("v", [0.0, 0.25, 1.0])
def test_grays_have_nan_hue(v):
    gray = RGB(v, v, v)
    for lch in (gray.to_lchab(), gray.to_lchuv()):
        assert math.isnan(lch.h)
        assert lch.c < 1e-6
    assert math.isnan(gray.to_hwb().h)
    assert gray.to_hsl().h == 0
    assert gray.to_hsv().h == 0


@pytest.mark.parametrize("src,dst", list(itertools.product(SPACES, SPACES)))
def test_every_pair_converts_and_keeps_alpha(src, dst):
    for rgb in [(0.2, 0.4, 0.6), (0.5, 0.5, 0.5)]:
        color = RGB(*rgb, alpha=0.25).convert(src)
        result = color.convert(dst)
        assert isinstance(result, unified_space_to_class[dst])
        assert result.alpha == 0.25


def test_to_methods_match_convert():
    color = LAB(60.0, 20.0, -30.0, alpha=0.5)
    for space in SPACES:
        method = getattr(color, f"to_{space.value}")
        assert method() == color.convert(space)


def test_convert_to_same_space_returns_self():
    color = HSL(210, 50, 40)
    assert color.convert("hsl") is color
    assert color.to_hsl() is color


def test_convert_unknown_space():
    with pytest.raises(ValueError):
        RGB(1, 0, 0).convert("oklch")


def test_rgb_round_trips():
    for rgb in samples_rgb_hsl:
        color = RGB(*rgb, alpha=0.8)
        assert color.to_xyz().to_rgb().is_close(color)
        assert color.to_lab().to_rgb().is_close(color)
        assert color.to_lchuv().to_rgb().is_close(color)
        assert color.to_hsl().to_rgb().is_close(color)
        assert color.to_hwb().to_rgb().is_close(color)


def test_hsv_round_trip_through_class():
    for rgb in samples_rgb_hsv:
        assert RGB(*rgb).to_hsv().to_rgb().is_close(RGB(*rgb))


def test_palette_classes():
    assert RGB(1.0, 0.0, 0.0).to_ansi16() == Ansi16(91)
    assert RGB(1.0, 0.0, 0.0).to_ansi256() == Ansi256(196)
    assert Ansi16(91).to_ansi256() == Ansi256(9)
    assert Ansi256(9).to_ansi16() == Ansi16(91)
    assert Ansi16(31).code == 31
    assert Ansi16(31.0).code == 31


@pytest.mark.parametrize("cls,code", [
    (Ansi16, 38), (Ansi16, 29), (Ansi16, 98), (Ansi16, 31.5), (Ansi16, True), (Ansi16, "31"),
    (Ansi256, -1), (Ansi256, 256),
])
def test_palette_codes_are_validated(cls, code):
    with pytest.raises(ValueError):
        cls(code)


def test_channel_properties():
    rgb = RGB(0.1, 0.2, 0.3, alpha=0.4)
    assert (rgb.r, rgb.g, rgb.b, rgb.alpha) == (0.1, 0.2, 0.3, 0.4)
    assert rgb.value == (0.1, 0.2, 0.3)
    assert rgb.as_tuple() == (0.1, 0.2, 0.3, 0.4)
    cmyk = CMYK(1, 2, 3, 4)
    assert (cmyk.c, cmyk.m, cmyk.y, cmyk.k) == (1.0, 2.0, 3.0, 4.0)
    lch = LCHab(50, 20, 120)
    assert (lch.l, lch.c, lch.h) == (50.0, 20.0, 120.0)
    hwb = HWB(10, 20, 30)
    assert (hwb.h, hwb.w, hwb.b) == (10.0, 20.0, 30.0)


def test_has_hue():
    assert HSL(0, 0, 0).has_hue
    assert LCHuv(0, 0, math.nan).has_hue
    assert not RGB(0, 0, 0).has_hue
    assert not LAB(0, 0, 0).has_hue


@pytest.mark.parametrize("alpha", [-0.1, 1.5, math.nan, math.inf, "opaque"])
def test_invalid_alpha(alpha):
    with pytest.raises(ValueError):
        RGB(0.0, 0.0, 0.0, alpha=alpha)


@pytest.mark.parametrize("channels", [
    (math.nan, 0.0, 0.0),
    (math.inf, 0.0, 0.0),
    (0.0, -math.inf, 0.0),
    ("red", 0.0, 0.0),
])
def test_invalid_channels(channels):
    with pytest.raises(ValueError):
        RGB(*channels)


def test_nan_only_allowed_in_hue():
    assert math.isnan(HWB(math.nan, 0, 0).h)
    assert math.isnan(LCHab(50, 0, math.nan).h)
    with pytest.raises(ValueError):
        LCHab(math.nan, 0, 0)
    with pytest.raises(ValueError):
        LAB(50, math.nan, 0)


def test_hdr_rgb_is_allowed():
    color = RGB(1.5, -0.2, 0.5)
    assert color.r == 1.5
    assert color.red_int == 383


def test_immutability():
    color = RGB(0.1, 0.2, 0.3)
    with pytest.raises(AttributeError):
        color.r = 0.5
    with pytest.raises(AttributeError):
        color._value = (0.5, 0.5, 0.5)
    with pytest.raises(AttributeError):
        color.extra = 1


def test_with_alpha():
    color = RGB(0.1, 0.2, 0.3)
    faded = color.with_alpha(0.5)
    assert faded.alpha == 0.5
    assert faded.value == color.value
    assert color.alpha == 1.0
    with pytest.raises(ValueError):
        color.with_alpha(2.0)


def test_equality_and_hash():
    assert RGB(0.1, 0.2, 0.3) == RGB(0.1, 0.2, 0.3)
    assert RGB(0.1, 0.2, 0.3) != RGB(0.1, 0.2, 0.3, alpha=0.5)
    assert RGB(0, 0, 0) != XYZ(0, 0, 0)
    assert RGB(0, 0, 0) != (0, 0, 0)
    achromatic = LCHuv(50.0, 0.0, math.nan)
    assert achromatic == LCHuv(50.0, 0.0, math.nan)
    assert hash(achromatic) == hash(LCHuv(50.0, 0.0, math.nan))
    assert len({HSL(1, 2, 3), HSL(1, 2, 3), HSL(1, 2, 4)}) == 2


def test_is_close():
    assert RGB(0.1, 0.2, 0.3).is_close(RGB(0.1002, 0.2, 0.2998))
    assert not RGB(0.1, 0.2, 0.3).is_close(RGB(0.102, 0.2, 0.3))
    assert not LCHab(50, 0, math.nan).is_close(LCHab(50, 0, 0))
    assert not RGB(0, 0, 0).is_close(XYZ(0, 0, 0))


def test_repr():
    assert repr(RGB(1, 0, 0)) == "RGB(r=1.0, g=0.0, b=0.0, alpha=1.0)"
    assert repr(Ansi256(9)) == "Ansi256(code=9, alpha=1.0)"


def test_subclasses_share_base():
    for cls in unified_space_to_class.values():
        assert issubclass(cls, ColorBase)
