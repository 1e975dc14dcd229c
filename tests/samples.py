"""Reference values shared by the conversion and color tests."""
import math

nan = math.nan

# RGB -> HSL, exact at integer percent precision so they also round-trip
samples_rgb_hsl = {
    (1.0, 0.0, 0.0): (0, 100, 50),
    (0.0, 1.0, 0.0): (120, 100, 50),
    (0.0, 0.0, 1.0): (240, 100, 50),
    (1.0, 1.0, 0.0): (60, 100, 50),
    (0.0, 1.0, 1.0): (180, 100, 50),
    (1.0, 0.0, 1.0): (300, 100, 50),
    (1.0, 1.0, 1.0): (0, 0, 100),
    (0.0, 0.0, 0.0): (0, 0, 0),
    (0.5, 0.5, 0.5): (0, 0, 50),
    (1.0, 0.5, 0.0): (30, 100, 50),
    (0.5, 0.0, 0.0): (0, 100, 25),
    (0.75, 0.25, 0.25): (0, 50, 50),
}

samples_rgb_hsv = {
    (1.0, 0.0, 0.0): (0, 100, 100),
    (0.0, 1.0, 0.0): (120, 100, 100),
    (0.0, 0.0, 1.0): (240, 100, 100),
    (1.0, 1.0, 1.0): (0, 0, 100),
    (0.0, 0.0, 0.0): (0, 0, 0),
    (0.5, 0.5, 0.5): (0, 0, 50),
    (1.0, 0.5, 0.0): (30, 100, 100),
    (0.5, 0.0, 0.0): (0, 100, 50),
    (0.5, 0.25, 0.0): (30, 100, 50),
}

samples_rgb_hwb = {
    (1.0, 0.0, 0.0): (0.0, 0.0, 0.0),
    (1.0, 0.5, 0.0): (30.0, 0.0, 0.0),
    (0.75, 0.25, 0.25): (0.0, 25.0, 25.0),
    (0.5, 0.5, 0.5): (nan, 50.0, 50.0),
    (0.0, 0.0, 0.0): (nan, 0.0, 100.0),
}

samples_rgb_cmyk = {
    (1.0, 0.0, 0.0): (0, 100, 100, 0),
    (0.0, 0.0, 0.0): (0, 0, 0, 100),
    (1.0, 1.0, 1.0): (0, 0, 0, 0),
    (0.5, 0.5, 0.5): (0, 0, 0, 50),
    (1.0, 0.5, 0.0): (0, 50, 100, 0),
    (0.5, 0.25, 0.0): (0, 50, 100, 50),
}

# sRGB D65 primaries, tolerance 1e-2
samples_rgb_lab = {
    (1.0, 0.0, 0.0): (53.2408, 80.0925, 67.2032),
    (0.0, 1.0, 0.0): (87.7347, -86.1827, 83.1793),
    (0.0, 0.0, 1.0): (32.2970, 79.1875, -107.8602),
    (1.0, 1.0, 1.0): (100.0, 0.0, 0.0),
    (0.0, 0.0, 0.0): (0.0, 0.0, 0.0),
}

samples_rgb_luv = {
    (1.0, 0.0, 0.0): (53.2408, 175.0151, 37.7564),
    (0.0, 1.0, 0.0): (87.7347, -83.0776, 107.3985),
    (0.0, 0.0, 1.0): (32.2970, -9.4054, -130.3423),
    (1.0, 1.0, 1.0): (100.0, 0.0, 0.0),
    (0.0, 0.0, 0.0): (0.0, 0.0, 0.0),
}

# Conversion reference table, tolerance 5e-4
samples_luv_xyz = {
    (0.0, 0.0, 0.0): (0.0, 0.0, 0.0),
    (18.0, 18.0, 18.0): (0.02854945, 0.02518041, 0.00312744),
    (40.0, 50.0, 60.0): (0.12749789, 0.11250974, -0.02679452),
    (100.0, 100.0, 100.0): (1.13379604, 1.0, 0.12420117),
}

samples_luv_lchuv = {
    (0.0, 0.0, 0.0): (0.0, 0.0, nan),
    (18.0, 18.0, 18.0): (18.0, 25.45584412, 45.0),
    (40.0, 50.0, 60.0): (40.0, 78.10249676, 50.19442891),
    (100.0, 100.0, 100.0): (100.0, 141.42135624, 45.0),
}

samples_rgb_ansi16 = {
    (0.0, 0.0, 0.0): 30,
    (0.3, 0.1, 0.3): 30,
    (0.5, 0.0, 0.0): 31,
    (1.0, 0.0, 0.0): 91,
    (0.0, 0.0, 1.0): 94,
    (0.0, 1.0, 1.0): 96,
    (1.0, 1.0, 1.0): 97,
}

samples_rgb_ansi256 = {
    (0.0, 0.0, 0.0): 16,
    (1.0, 1.0, 1.0): 231,
    (0.5, 0.5, 0.5): 244,
    (1.0, 0.0, 0.0): 196,
    (0.0, 0.0, 1.0): 21,
    (1.0, 0.5, 0.0): 214,
}

# Chromatic and achromatic colors for round trips and agreement checks
grid_levels = (0.0, 0.2, 0.55, 1.0)
