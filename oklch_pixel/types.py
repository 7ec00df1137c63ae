"""Core data types for oklch-pixel - plain immutable values."""

from dataclasses import dataclass

from oklch_pixel import defaults
from oklch_pixel.errors import EncodingError


@dataclass(frozen=True)
class OklchColor:
    """An OKLCH color as given by the caller.

    Attributes:
        L: Lightness in [0, 1]
        C: Chroma (>= 0)
        H: Hue in degrees, any finite value (reduced modulo 360 on use)
        alpha: Optional alpha in [0, 1]; None means no alpha channel
    """

    L: float
    C: float
    H: float
    alpha: float | None = None

    @property
    def include_alpha(self) -> bool:
        return self.alpha is not None

    @property
    def alpha_or_opaque(self) -> float:
        return defaults.OPAQUE_ALPHA if self.alpha is None else self.alpha


@dataclass(frozen=True)
class DisplaySample:
    """Gamma-encoded Display P3 color, ready for quantization.

    Attributes:
        r, g, b: sRGB-transfer encoded channels in [0, 1]
        a: Linear alpha in [0, 1]
        clipped: True if any linear channel was outside [0, 1] before clamping
    """

    r: float
    g: float
    b: float
    a: float = defaults.OPAQUE_ALPHA
    clipped: bool = False

    def channels(self, include_alpha: bool = False) -> tuple[float, ...]:
        """Channel values in scanline order (R, G, B[, A])."""
        if include_alpha:
            return (self.r, self.g, self.b, self.a)
        return (self.r, self.g, self.b)


@dataclass(frozen=True)
class EncodeOptions:
    """PNG output settings."""

    bit_depth: int = defaults.DEFAULT_BIT_DEPTH
    include_alpha: bool = False
    compression_level: int = defaults.DEFAULT_COMPRESSION_LEVEL

    def __post_init__(self):
        if self.bit_depth not in defaults.BIT_DEPTH_CHOICES:
            raise EncodingError(
                f"Unsupported bit depth: {self.bit_depth}. "
                f"Use one of {defaults.BIT_DEPTH_CHOICES}."
            )
        if not -1 <= self.compression_level <= 9:
            raise EncodingError(f"Compression level must be in -1..9, got {self.compression_level}")

    @property
    def color_type(self) -> int:
        return defaults.COLOR_TYPE_RGBA if self.include_alpha else defaults.COLOR_TYPE_RGB

    @property
    def max_sample(self) -> int:
        return (1 << self.bit_depth) - 1

    @property
    def sample_width(self) -> int:
        """Bytes per sample."""
        return self.bit_depth // 8
