"""
Numeric constants shared by the conversion functions.

Matrices are kept as numpy arrays for the vectorized functions and mirrored as
nested tuples of plain floats for the scalar ones, so scalar results never
carry numpy scalar types.
"""
import numpy as np

# sRGB transfer function
SRGB_LINEAR_THRESHOLD = 0.04045
SRGB_GAMMA_THRESHOLD = 0.0031308
SRGB_SLOPE = 12.92
SRGB_OFFSET = 0.055
SRGB_SCALE = 1.055
SRGB_GAMMA = 2.4

# D65 sRGB -> XYZ, http://www.brucelindbloom.com/index.html?Eqn_RGB_XYZ_Matrix.html
RGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
])
XYZ_TO_RGB = np.linalg.inv(RGB_TO_XYZ)

M_RGB_XYZ = tuple(tuple(row) for row in RGB_TO_XYZ.tolist())
M_XYZ_RGB = tuple(tuple(row) for row in XYZ_TO_RGB.tolist())

# D65 reference white as realized by the matrix: XYZ of RGB(1, 1, 1),
# ~(0.95047, 1.0, 1.08883). Grays land exactly on the neutral axis.
D65 = tuple(RGB_TO_XYZ.sum(axis=1).tolist())
D65_X, D65_Y, D65_Z = D65

# CIE 1976
CIE_E = 216.0 / 24389.0
CIE_K = 24389.0 / 27.0
CIE_KE = CIE_K * CIE_E  # 8.0
LAB_L_MULT = 116.0
LAB_L_SUB = 16.0
LAB_A_MULT = 500.0
LAB_B_MULT = 200.0
LUV_UV_MULT = 13.0

_denom_white = D65_X + 15.0 * D65_Y + 3.0 * D65_Z
D65_U_PRIME = 4.0 * D65_X / _denom_white
D65_V_PRIME = 9.0 * D65_Y / _denom_white

# Below this chroma a LCH color has no hue
ACHROMATIC_CHROMA = 1e-8
