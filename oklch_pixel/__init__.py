"""oklch-pixel: write an OKLCH color as a single-pixel Display P3 PNG.

Pipeline:
    OklchColor -> colorspace.convert -> DisplaySample -> png.write_png

Example:
    from oklch_pixel import OklchColor, EncodeOptions, convert, write_png

    color = OklchColor(L=0.7, C=0.15, H=30.0)
    sample = convert(color)
    write_png("swatch.png", sample, EncodeOptions(bit_depth=16))
"""

__version__ = "0.1.0"

from .errors import (
    OklchPixelError,
    ConversionError,
    EncodingError,
    ImageIOError,
    DecodingError,
)
from .types import OklchColor, DisplaySample, EncodeOptions
from .colorspace import convert, oklch_to_display_p3
from .png import write_png, encode_png, iter_chunks, read_pixel

__all__ = [
    '__version__',
    # Data
    'OklchColor',
    'DisplaySample',
    'EncodeOptions',
    # Pipeline
    'convert',
    'oklch_to_display_p3',
    'write_png',
    'encode_png',
    'iter_chunks',
    'read_pixel',
    # Errors
    'OklchPixelError',
    'ConversionError',
    'EncodingError',
    'ImageIOError',
    'DecodingError',
]
