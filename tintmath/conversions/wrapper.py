import logging
from typing import Callable, Dict, List, Sequence, Tuple
import numpy as np

from . import ansi, cie, cmyk, cylindrical
from ..types.color_types import ColorSpace, ColorValue, SpaceLike, PALETTE_SPACES, element_to_array, to_color_space

logger = logging.getLogger(__name__)

S = ColorSpace
Step = Tuple[ColorSpace, ColorSpace]

CHANNEL_COUNTS: Dict[ColorSpace, int] = {space: 3 for space in ColorSpace}
CHANNEL_COUNTS.update({S.CMYK: 4, S.ANSI16: 1, S.ANSI256: 1})


def _code(fn: Callable[..., int]) -> Callable[..., Tuple[int]]:
    """Palette functions return a bare code; steps always return tuples."""
    return lambda *channels: (fn(*channels),)


# Direct conversions on channel tuples (alpha excluded)
CONVERT_DIRECT: Dict[Step, Callable[..., tuple]] = {
    (S.RGB, S.XYZ): cie.rgb_to_xyz,
    (S.XYZ, S.RGB): cie.xyz_to_rgb,
    (S.XYZ, S.LAB): cie.xyz_to_lab,
    (S.LAB, S.XYZ): cie.lab_to_xyz,
    (S.LAB, S.LCHAB): cie.lab_to_lchab,
    (S.LCHAB, S.LAB): cie.lchab_to_lab,
    (S.XYZ, S.LUV): cie.xyz_to_luv,
    (S.LUV, S.XYZ): cie.luv_to_xyz,
    (S.LUV, S.LCHUV): cie.luv_to_lchuv,
    (S.LCHUV, S.LUV): cie.lchuv_to_luv,
    (S.RGB, S.HSL): cylindrical.rgb_to_hsl,
    (S.HSL, S.RGB): cylindrical.hsl_to_rgb,
    (S.RGB, S.HSV): cylindrical.rgb_to_hsv,
    (S.HSV, S.RGB): cylindrical.hsv_to_rgb,
    (S.RGB, S.HWB): cylindrical.rgb_to_hwb,
    (S.HWB, S.RGB): cylindrical.hwb_to_rgb,
    (S.RGB, S.CMYK): cmyk.rgb_to_cmyk,
    (S.CMYK, S.RGB): cmyk.cmyk_to_rgb,
    (S.RGB, S.ANSI16): _code(ansi.rgb_to_ansi16),
    (S.ANSI16, S.RGB): ansi.ansi16_to_rgb,
    (S.RGB, S.ANSI256): _code(ansi.rgb_to_ansi256),
    (S.ANSI256, S.RGB): ansi.ansi256_to_rgb,
    # palette shortcuts
    (S.ANSI16, S.ANSI256): _code(ansi.ansi16_to_ansi256),
    (S.ANSI256, S.ANSI16): _code(ansi.ansi256_to_ansi16),
}

# Vectorized counterparts; each takes one array per channel and returns (..., n)
CONVERT_NUMPY: Dict[Step, Callable[..., np.ndarray]] = {
    (S.RGB, S.XYZ): cie.np_rgb_to_xyz,
    (S.XYZ, S.RGB): cie.np_xyz_to_rgb,
    (S.XYZ, S.LAB): cie.np_xyz_to_lab,
    (S.LAB, S.XYZ): cie.np_lab_to_xyz,
    (S.LAB, S.LCHAB): cie.np_to_polar,
    (S.LCHAB, S.LAB): cie.np_from_polar,
    (S.XYZ, S.LUV): cie.np_xyz_to_luv,
    (S.LUV, S.XYZ): cie.np_luv_to_xyz,
    (S.LUV, S.LCHUV): cie.np_to_polar,
    (S.LCHUV, S.LUV): cie.np_from_polar,
    (S.RGB, S.HSL): cylindrical.np_rgb_to_hsl,
    (S.HSL, S.RGB): cylindrical.np_hsl_to_rgb,
    (S.RGB, S.HSV): cylindrical.np_rgb_to_hsv,
    (S.HSV, S.RGB): cylindrical.np_hsv_to_rgb,
    (S.RGB, S.HWB): cylindrical.np_rgb_to_hwb,
    (S.HWB, S.RGB): cylindrical.np_hwb_to_rgb,
    (S.RGB, S.CMYK): cmyk.np_rgb_to_cmyk,
    (S.CMYK, S.RGB): cmyk.np_cmyk_to_rgb,
}

# Each space converts directly to and from its hub; RGB is the root.
HUB_PARENT: Dict[ColorSpace, ColorSpace] = {
    S.XYZ: S.RGB,
    S.LAB: S.XYZ,
    S.LCHAB: S.LAB,
    S.LUV: S.XYZ,
    S.LCHUV: S.LUV,
    S.HSL: S.RGB,
    S.HSV: S.RGB,
    S.HWB: S.RGB,
    S.CMYK: S.RGB,
    S.ANSI16: S.RGB,
    S.ANSI256: S.RGB,
}


def _lineage(space: ColorSpace) -> List[ColorSpace]:
    chain = [space]
    while chain[-1] in HUB_PARENT:
        chain.append(HUB_PARENT[chain[-1]])
    return chain


def conversion_path(from_space: SpaceLike, to_space: SpaceLike) -> List[Step]:
    """
    Resolve the direct steps that take one color space to another.

    Climbs from the source towards RGB until it meets the target's lineage,
    then descends to the target, so LAB -> LUV goes through XYZ and never RGB.

    Returns:
        List of (from, to) steps; empty when the spaces are the same
    """
    src = to_color_space(from_space)
    dst = to_color_space(to_space)
    if src == dst:
        return []
    if (src, dst) in CONVERT_DIRECT:
        return [(src, dst)]

    up = _lineage(src)
    down = _lineage(dst)
    common = next(space for space in up if space in down)
    chain = up[:up.index(common) + 1] + down[:down.index(common)][::-1]
    return list(zip(chain, chain[1:]))


def _describe(path: List[Step]) -> str:
    if not path:
        return "(identity)"
    return " -> ".join([path[0][0].value] + [step[1].value for step in path])


def convert(color: Sequence[float], from_space: SpaceLike, to_space: SpaceLike) -> tuple:
    """
    Convert one color's channels between any two color spaces.

    Args:
        color: Channel values of the source space, alpha excluded
        from_space: Source space (ColorSpace or name)
        to_space: Target space (ColorSpace or name)

    Returns:
        tuple: Channel values in the target space
    """
    src = to_color_space(from_space)
    dst = to_color_space(to_space)
    values = tuple(color)
    if len(values) != CHANNEL_COUNTS[src]:
        raise ValueError(f"{src.value} expects {CHANNEL_COUNTS[src]} channels, got {len(values)}")

    path = conversion_path(src, dst)
    debug = logger.isEnabledFor(logging.DEBUG)
    if debug:
        logger.debug("Converting %s from %s to %s", values, src.value, dst.value)
        logger.debug(" @ Conversion path: %s", _describe(path))

    for step in path:
        values = tuple(CONVERT_DIRECT[step](*values))
        if debug:
            logger.debug(" |-< %s out %s", step[1].value, values)

    return values


def np_convert(colors: ColorValue, from_space: SpaceLike, to_space: SpaceLike, alpha: bool = False) -> np.ndarray:
    """
    Vectorized convert for arrays of colors.

    Args:
        colors: array-like of shape (..., n) in the source space
        from_space: Source space
        to_space: Target space
        alpha: When True the last column is alpha and is carried through unchanged

    Returns:
        np.ndarray of shape (..., m) in the target space

    Raises:
        ValueError: for the ANSI palettes, which have no vectorized form
    """
    src = to_color_space(from_space)
    dst = to_color_space(to_space)
    for space in (src, dst):
        if space in PALETTE_SPACES:
            raise ValueError(f"No vectorized conversion for palette space {space.value}")

    arr = element_to_array(colors)
    base = arr[..., :-1] if alpha else arr
    if base.shape[-1] != CHANNEL_COUNTS[src]:
        raise ValueError(f"{src.value} expects last dimension {CHANNEL_COUNTS[src]}, got shape {arr.shape}")

    path = conversion_path(src, dst)
    logger.debug("Vectorized conversion of %s colors: %s", base.shape[:-1], _describe(path))

    for step in path:
        base = CONVERT_NUMPY[step](*(base[..., i] for i in range(base.shape[-1])))

    if alpha:
        return np.concatenate([base, arr[..., -1:]], axis=-1)
    return base
