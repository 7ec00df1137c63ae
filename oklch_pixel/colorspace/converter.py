"""Single-color OKLCH -> Display P3 conversion.

This is the scalar entry point used by the PNG writer: one OKLCH triple in,
one clamped, gamma-encoded Display P3 sample out.
"""

import logging
import math

import numpy as np

from .display_p3 import oklch_to_linear_display_p3
from .gamut import clip_to_gamut
from .oklch import linear_to_srgb
from ..errors import ConversionError
from ..types import DisplaySample, OklchColor

logger = logging.getLogger(__name__)


def oklch_to_display_p3(L: float, C: float, H: float) -> tuple[float, float, float, bool]:
    """Convert one OKLCH color to gamma-encoded Display P3.

    Args:
        L: Lightness (0-1)
        C: Chroma (>= 0)
        H: Hue in degrees, any finite value

    Returns:
        (r, g, b, clipped) with channels in [0, 1]; clipped is True if the
        color was outside the P3 gamut and had to be clamped

    Raises:
        ConversionError: If the linear P3 result is not finite
    """
    # Huge chroma overflows the LMS cube; report it as ConversionError only
    with np.errstate(over='ignore', invalid='ignore'):
        r_lin, g_lin, b_lin = (
            float(v) for v in oklch_to_linear_display_p3(float(L), float(C), float(H))
        )

    if not (math.isfinite(r_lin) and math.isfinite(g_lin) and math.isfinite(b_lin)):
        raise ConversionError("color conversion produced a non-finite value")

    logger.debug("linear Display P3: r=%.6f g=%.6f b=%.6f", r_lin, g_lin, b_lin)

    r_lin, g_lin, b_lin, clipped = clip_to_gamut(r_lin, g_lin, b_lin)
    return (
        float(linear_to_srgb(r_lin)),
        float(linear_to_srgb(g_lin)),
        float(linear_to_srgb(b_lin)),
        bool(clipped),
    )


def convert(color: OklchColor) -> DisplaySample:
    """OKLCH color -> DisplaySample. Alpha passes through unencoded."""
    r, g, b, clipped = oklch_to_display_p3(color.L, color.C, color.H)
    return DisplaySample(r=r, g=g, b=b, a=float(color.alpha_or_opaque), clipped=clipped)
