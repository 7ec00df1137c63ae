"""OKLCH / OKLab stage functions.

Reference: https://bottosson.github.io/posts/oklab/

All functions accept python floats, numpy arrays or torch tensors.
"""

from math import pi
from . import _backend as B
from ._backend import Array
from ..defaults import SRGB_LINEAR_THRESHOLD

# === OKLab -> Linear sRGB matrices ===
# From Björn Ottosson's reference implementation

# OKLab -> LMS cube root
_OKLAB_TO_LMS = (
    (1.0, 0.3963377774, 0.2158037573),
    (1.0, -0.1055613458, -0.0638541728),
    (1.0, -0.0894841775, -1.2914855480),
)

# LMS -> Linear sRGB
_LMS_TO_RGB = (
    (+4.0767416621, -3.3077115913, +0.2309699292),
    (-1.2684380046, +2.6097574011, -0.3413193965),
    (-0.0041960863, -0.7034186147, +1.7076147010),
)


# === Core Conversions ===

def oklch_to_oklab(L: Array, C: Array, H: Array) -> tuple[Array, Array, Array]:
    """OKLCH -> OKLab. H in degrees, reduced modulo 360 first."""
    H_rad = (H % 360) * (pi / 180)
    a = C * B.cos(H_rad)
    b = C * B.sin(H_rad)
    return L, a, b


def oklab_to_lms(L: Array, a: Array, b: Array) -> tuple[Array, Array, Array]:
    """OKLab -> LMS (cube root space, then cubed back to linear LMS)."""
    l_ = L + _OKLAB_TO_LMS[0][1] * a + _OKLAB_TO_LMS[0][2] * b
    m_ = L + _OKLAB_TO_LMS[1][1] * a + _OKLAB_TO_LMS[1][2] * b
    s_ = L + _OKLAB_TO_LMS[2][1] * a + _OKLAB_TO_LMS[2][2] * b
    return l_ * l_ * l_, m_ * m_ * m_, s_ * s_ * s_


def lms_to_linear_srgb(l: Array, m: Array, s: Array) -> tuple[Array, Array, Array]:
    """LMS -> linear RGB with sRGB primaries."""
    r = _LMS_TO_RGB[0][0]*l + _LMS_TO_RGB[0][1]*m + _LMS_TO_RGB[0][2]*s
    g = _LMS_TO_RGB[1][0]*l + _LMS_TO_RGB[1][1]*m + _LMS_TO_RGB[1][2]*s
    b = _LMS_TO_RGB[2][0]*l + _LMS_TO_RGB[2][1]*m + _LMS_TO_RGB[2][2]*s
    return r, g, b


def oklab_to_linear_rgb(L: Array, a: Array, b: Array) -> tuple[Array, Array, Array]:
    """OKLab -> Linear sRGB via LMS intermediate."""
    return lms_to_linear_srgb(*oklab_to_lms(L, a, b))


def linear_to_srgb(x: Array) -> Array:
    """Linear -> sRGB transfer encoding (per channel).

    Display P3 shares the sRGB transfer curve, so this is also the P3 encode.
    """
    low = x * 12.92
    high = 1.055 * B.pow(B.maximum(x, B.full_like(x, 1e-10)), 1/2.4) - 0.055
    return B.where(x <= SRGB_LINEAR_THRESHOLD, low, high)
