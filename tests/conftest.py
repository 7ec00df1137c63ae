"""Test configuration for oklch-pixel."""

import pytest

from oklch_pixel.types import DisplaySample


@pytest.fixture
def white():
    return DisplaySample(r=1.0, g=1.0, b=1.0)


@pytest.fixture
def black():
    return DisplaySample(r=0.0, g=0.0, b=0.0)


@pytest.fixture
def half_alpha_gray():
    """Mid gray with alpha 0.5 (quantizes to 128 at 8 bits)."""
    return DisplaySample(r=0.5, g=0.5, b=0.5, a=0.5)
