"""Linear sRGB -> CIE XYZ (D65) -> linear Display P3.

OKLab is defined over linear sRGB, so reaching Display P3 goes through XYZ.
Both spaces share the D65 white point; no chromatic adaptation is needed.
Both matrices are derived from the same D65 chromaticities (CSS Color 4),
so white maps to (1, 1, 1) in P3.
"""

from ._backend import Array
from .oklch import oklch_to_oklab, oklab_to_linear_rgb

# Linear sRGB -> XYZ (D65)
_SRGB_TO_XYZ = (
    (506752 / 1228815, 87881 / 245763, 12673 / 70218),
    (87098 / 409605, 175762 / 245763, 12673 / 175545),
    (7918 / 409605, 87881 / 737289, 1001167 / 1053270),
)

# XYZ (D65) -> linear Display P3
_XYZ_TO_P3 = (
    (446124 / 178915, -333277 / 357830, -72051 / 178915),
    (-14852 / 17905, 63121 / 35810, 423 / 17905),
    (11844 / 330415, -50337 / 660830, 316169 / 330415),
)


def _apply(mat, x: Array, y: Array, z: Array) -> tuple[Array, Array, Array]:
    return (
        mat[0][0]*x + mat[0][1]*y + mat[0][2]*z,
        mat[1][0]*x + mat[1][1]*y + mat[1][2]*z,
        mat[2][0]*x + mat[2][1]*y + mat[2][2]*z,
    )


def linear_srgb_to_xyz(r: Array, g: Array, b: Array) -> tuple[Array, Array, Array]:
    """Linear sRGB -> CIE XYZ, D65 white (Y of white = 1)."""
    return _apply(_SRGB_TO_XYZ, r, g, b)


def xyz_to_linear_display_p3(x: Array, y: Array, z: Array) -> tuple[Array, Array, Array]:
    """CIE XYZ (D65) -> linear Display P3 RGB."""
    return _apply(_XYZ_TO_P3, x, y, z)


def oklch_to_linear_display_p3(L: Array, C: Array, H: Array) -> tuple[Array, Array, Array]:
    """OKLCH -> linear Display P3 (no clamping, no gamma encoding).

    Values may fall outside [0, 1] for colors outside the P3 gamut.
    """
    L_ok, a, b = oklch_to_oklab(L, C, H)
    r, g, b = oklab_to_linear_rgb(L_ok, a, b)
    x, y, z = linear_srgb_to_xyz(r, g, b)
    return xyz_to_linear_display_p3(x, y, z)
