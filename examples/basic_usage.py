"""Basic Tintmath usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import logging

import numpy as np

from tintmath import RGB, LUV, Ansi16, convert, np_convert, conversion_path


def demonstrate_colors() -> None:
    # Construct typed colors and convert between models.
    accent = RGB.from_hex("#ff8040")
    print("RGB:", accent)
    print("RGB -> HSL:", accent.to_hsl())
    print("RGB -> LCHab:", accent.to_lchab())
    print("RGB -> ANSI 256:", accent.to_ansi256())

    # Alpha rides along every conversion.
    glass = accent.with_alpha(0.5)
    print("Translucent in LUV:", glass.to_luv())
    print("Back to hex:", glass.to_lab().to_rgb().to_hex())

    # Grays have no hue in the polar CIE models.
    print("Gray in LCHuv:", RGB(0.5, 0.5, 0.5).to_lchuv())
    print("LUV(0, 0, 0) -> XYZ:", LUV(0, 0, 0).to_xyz())
    print("ANSI 91 -> RGB:", Ansi16(91).to_rgb())


def demonstrate_tuples() -> None:
    # Channel tuples and arrays, without color objects.
    print("Path LAB -> HSL:", conversion_path("lab", "hsl"))
    print("LUV -> LCHuv:", convert((40.0, 50.0, 60.0), "luv", "lchuv"))

    pixels = np.random.default_rng(0).random((2, 3, 3))
    print("Image to LAB:", np_convert(pixels, "rgb", "lab").shape)


if __name__ == "__main__":
    # Show the routing decisions
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    demonstrate_colors()
    demonstrate_tuples()
