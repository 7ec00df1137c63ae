"""Central place for oklch-pixel default settings and format constants."""

# Output encoding
DEFAULT_BIT_DEPTH: int = 8
BIT_DEPTH_CHOICES: tuple[int, ...] = (8, 16)
DEFAULT_COMPRESSION_LEVEL: int = -1  # zlib default (level 6)

# PNG framing
PNG_SIGNATURE: bytes = b"\x89PNG\r\n\x1a\n"
MAX_CHUNK_LENGTH: int = 0xFFFFFFFF  # 32-bit length field
COLOR_TYPE_RGB: int = 2
COLOR_TYPE_RGBA: int = 6
FILTER_NONE: int = 0

# cICP coding-independent code points (ITU-T H.273)
CICP_PRIMARIES_DISPLAY_P3: int = 12
CICP_TRANSFER_SRGB: int = 13
CICP_MATRIX_IDENTITY: int = 0
CICP_FULL_RANGE: int = 1

# sRGB transfer function
SRGB_LINEAR_THRESHOLD: float = 0.0031308

# Alpha used when the caller did not ask for an alpha channel
OPAQUE_ALPHA: float = 1.0

CLIP_WARNING: str = "color out of Display P3 gamut; clipped"

# Linear excursions below this are float noise, not gamut clipping
GAMUT_CLIP_TOLERANCE: float = 1e-9
