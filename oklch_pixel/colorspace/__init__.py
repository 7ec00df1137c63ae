"""OKLCH -> Display P3 color conversion.

This module provides:
- OKLCH -> OKLab -> LMS -> linear sRGB stage functions
- Linear sRGB -> XYZ (D65) -> linear Display P3
- Per-channel gamut clamping with a clip flag
- Single-color conversion to a gamma-encoded DisplaySample
- Backend-agnostic stages: work with floats, numpy arrays or torch tensors

Example:
    from oklch_pixel.colorspace import convert
    from oklch_pixel.types import OklchColor

    sample = convert(OklchColor(L=0.7, C=0.15, H=30.0))
    if sample.clipped:
        ...  # color was outside Display P3
"""

from .oklch import (
    oklch_to_oklab,
    oklab_to_lms,
    lms_to_linear_srgb,
    oklab_to_linear_rgb,
    linear_to_srgb,
)

from .display_p3 import (
    linear_srgb_to_xyz,
    xyz_to_linear_display_p3,
    oklch_to_linear_display_p3,
)

from .gamut import clip_to_gamut

from .converter import oklch_to_display_p3, convert

__all__ = [
    # High-level API
    'convert',
    'oklch_to_display_p3',
    # OKLCH stages
    'oklch_to_oklab',
    'oklab_to_lms',
    'lms_to_linear_srgb',
    'oklab_to_linear_rgb',
    'linear_to_srgb',
    # Display P3
    'linear_srgb_to_xyz',
    'xyz_to_linear_display_p3',
    'oklch_to_linear_display_p3',
    # Gamut
    'clip_to_gamut',
]
