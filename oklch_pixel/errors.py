"""Conversion and encoding errors."""


class OklchPixelError(Exception):
    """Base class for oklch-pixel errors."""
    pass


class ConversionError(OklchPixelError):
    """Color conversion produced a non-finite value."""
    pass


class EncodingError(OklchPixelError):
    """PNG framing invariant violated (oversized chunk, bad tag, bad options)."""
    pass


class ImageIOError(OklchPixelError, OSError):
    """Destination could not be created or written."""
    pass


class DecodingError(OklchPixelError):
    """Byte stream is not a well-formed PNG."""
    pass
