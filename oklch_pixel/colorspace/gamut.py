"""Display P3 gamut clamping.

Out-of-gamut colors are hard-clipped per channel. This can shift hue and
lightness; hue-preserving gamut mapping is deliberately not done here.
"""

from . import _backend as B
from ._backend import Array
from ..defaults import GAMUT_CLIP_TOLERANCE


def clip_to_gamut(
    r: Array,
    g: Array,
    b: Array,
    tolerance: float = GAMUT_CLIP_TOLERANCE,
) -> tuple[Array, Array, Array, Array]:
    """Clamp each linear channel to [0, 1] independently.

    Args:
        r, g, b: Linear Display P3 channels
        tolerance: Excursions up to this size (rounding noise) are clamped
            without being reported as clipping

    Returns:
        (r, g, b, clipped) where clipped is True (element-wise for arrays)
        if any channel was outside [0, 1] before clamping
    """
    clipped = (
        _outside_unit(r, tolerance)
        | _outside_unit(g, tolerance)
        | _outside_unit(b, tolerance)
    )
    return B.clip(r, 0.0, 1.0), B.clip(g, 0.0, 1.0), B.clip(b, 0.0, 1.0), clipped


def _outside_unit(x: Array, tolerance: float) -> Array:
    return (x < -tolerance) | (x > 1.0 + tolerance)
