"""Tests for the XYZ / Display P3 stages and gamut clamping."""

import numpy as np

from oklch_pixel.colorspace import (
    linear_srgb_to_xyz,
    xyz_to_linear_display_p3,
    oklch_to_linear_display_p3,
    clip_to_gamut,
)
from oklch_pixel.defaults import GAMUT_CLIP_TOLERANCE

# D65 white from its chromaticity (x=0.3127, y=0.3290), Y=1
D65_WHITE = (0.3127 / 0.3290, 1.0, (1 - 0.3127 - 0.3290) / 0.3290)


class TestMatrices:
    """Test the fixed linear transforms."""

    def test_srgb_white_is_d65(self):
        np.testing.assert_allclose(linear_srgb_to_xyz(1.0, 1.0, 1.0), D65_WHITE, atol=1e-8)

    def test_d65_is_p3_white(self):
        np.testing.assert_allclose(xyz_to_linear_display_p3(*D65_WHITE), (1.0, 1.0, 1.0), atol=1e-8)

    def test_srgb_luminance_row(self):
        """Y row of the sRGB matrix is the Rec. 709 luminance weights."""
        _, y, _ = linear_srgb_to_xyz(np.array([1.0, 0.0, 0.0]), np.array([0.0, 1.0, 0.0]), np.array([0.0, 0.0, 1.0]))
        np.testing.assert_allclose(y, [0.2126, 0.7152, 0.0722], atol=1e-4)

    def test_srgb_primaries_inside_p3(self):
        """Every sRGB primary is representable in the wider P3 gamut."""
        for rgb in [(1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0)]:
            p3 = np.array(xyz_to_linear_display_p3(*linear_srgb_to_xyz(*rgb)))
            assert (p3 >= -GAMUT_CLIP_TOLERANCE).all()
            assert (p3 <= 1 + GAMUT_CLIP_TOLERANCE).all()

    def test_srgb_red_in_p3(self):
        """sRGB red sits well inside P3: roughly (0.82, 0.03, 0.02)."""
        p3 = xyz_to_linear_display_p3(*linear_srgb_to_xyz(1.0, 0.0, 0.0))
        np.testing.assert_allclose(p3, (0.8225, 0.0332, 0.0171), atol=1e-3)


class TestClipToGamut:
    """Test per-channel clamping and the clip flag."""

    def test_in_range_untouched(self):
        r, g, b, clipped = clip_to_gamut(0.1, 0.5, 1.0)
        assert (r, g, b) == (0.1, 0.5, 1.0)
        assert not clipped

    def test_out_of_range_clamped_independently(self):
        r, g, b, clipped = clip_to_gamut(1.2, 0.5, -0.1)
        assert (r, g, b) == (1.0, 0.5, 0.0)
        assert clipped

    def test_rounding_noise_not_reported(self):
        r, g, b, clipped = clip_to_gamut(1.0 + 1e-13, 0.5, -1e-13)
        assert (r, g, b) == (1.0, 0.5, 0.0)
        assert not clipped

    def test_elementwise_for_arrays(self):
        r = np.array([0.5, 1.5, 0.2])
        g = np.array([0.5, 0.5, 0.2])
        b = np.array([0.5, 0.5, -0.2])

        r2, g2, b2, clipped = clip_to_gamut(r, g, b)

        np.testing.assert_array_equal(clipped, [False, True, True])
        np.testing.assert_array_equal(r2, [0.5, 1.0, 0.2])
        np.testing.assert_array_equal(b2, [0.5, 0.5, 0.0])


class TestOklchInP3:
    """Test which OKLCH colors land inside Display P3."""

    def test_grays_in_gamut(self):
        L = np.linspace(0, 1, 11)
        r, g, b = oklch_to_linear_display_p3(L, np.zeros(11), np.zeros(11))
        *_, clipped = clip_to_gamut(r, g, b)
        assert not clipped.any()

    def test_high_chroma_out_of_gamut(self):
        *_, clipped = clip_to_gamut(*oklch_to_linear_display_p3(0.5, 0.5, 0.0))
        assert clipped

    def test_srgb_red_in_gamut(self):
        """OKLCH of sRGB red (0.628, 0.2577, 29.23) fits in P3 without clipping."""
        r, g, b = oklch_to_linear_display_p3(0.6279554, 0.2576833, 29.2338851)
        np.testing.assert_allclose((r, g, b), (0.8225, 0.0332, 0.0171), atol=1e-3)
        assert not clip_to_gamut(r, g, b)[3]
