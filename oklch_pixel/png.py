"""Minimal PNG writer for a single Display P3 pixel.

Format:
    signature (8 bytes)
    IHDR   width=1, height=1, bit depth 8|16, color type 2 (RGB) | 6 (RGBA)
    cICP   12, 13, 0, 1  (Display P3 primaries, sRGB transfer, identity, full range)
    IDAT   zlib stream of one scanline: filter byte 0 + R G B [A]
    IEND   empty

Every chunk is framed as length (u32 BE), type, data, CRC-32 over type + data.
The cICP chunk precedes IDAT so viewers decode the pixel as wide gamut.

A small chunk reader is included so produced files can be verified without
a third-party decoder.
"""

from __future__ import annotations

import logging
import struct
import zlib
from io import BytesIO
from pathlib import Path
from typing import BinaryIO, Iterator, NamedTuple, Union

import numpy as np

from oklch_pixel import defaults
from oklch_pixel.errors import DecodingError, EncodingError, ImageIOError
from oklch_pixel.types import DisplaySample, EncodeOptions

logger = logging.getLogger(__name__)

Destination = Union[str, Path, BinaryIO]

# width, height, bit depth, color type, compression, filter, interlace
_IHDR = struct.Struct('>IIBBBBB')


class Chunk(NamedTuple):
    chunk_type: bytes
    data: bytes
    crc: int


class PixelData(NamedTuple):
    bit_depth: int
    color_type: int
    samples: tuple[int, ...]


# === Chunk framing ===

def chunk_crc(chunk_type: bytes, data: bytes) -> int:
    """CRC-32 (ISO 3309 / zlib polynomial) over chunk type + data."""
    return zlib.crc32(data, zlib.crc32(chunk_type)) & 0xFFFFFFFF


def write_chunk(stream: BinaryIO, chunk_type: bytes, data: bytes) -> int:
    """Write one length-tagged, checksummed chunk.

    Args:
        stream: Writable binary stream
        chunk_type: 4-byte ASCII tag, e.g. b'IHDR'
        data: Chunk payload

    Returns:
        Number of bytes written (12 + len(data))

    Raises:
        EncodingError: If the tag is malformed or data overflows the length field
    """
    if len(chunk_type) != 4 or not chunk_type.isalpha() or not chunk_type.isascii():
        raise EncodingError(f"Invalid chunk type: {chunk_type!r}")
    if len(data) > defaults.MAX_CHUNK_LENGTH:
        raise EncodingError(
            f"{chunk_type.decode('ascii')} chunk too large: {len(data)} bytes "
            f"(max {defaults.MAX_CHUNK_LENGTH})"
        )

    stream.write(struct.pack('>I', len(data)))
    stream.write(chunk_type)
    stream.write(data)
    stream.write(struct.pack('>I', chunk_crc(chunk_type, data)))
    return 12 + len(data)


# === Chunk payloads ===

def build_ihdr(options: EncodeOptions) -> bytes:
    """13-byte IHDR body for a 1x1 image (no interlace, default methods)."""
    return _IHDR.pack(
        1,                      # width
        1,                      # height
        options.bit_depth,
        options.color_type,
        0,                      # compression method
        0,                      # filter method
        0,                      # interlace method
    )


def build_cicp() -> bytes:
    return bytes((
        defaults.CICP_PRIMARIES_DISPLAY_P3,
        defaults.CICP_TRANSFER_SRGB,
        defaults.CICP_MATRIX_IDENTITY,
        defaults.CICP_FULL_RANGE,
    ))


def quantize(values, bit_depth: int) -> np.ndarray:
    """Map [0, 1] floats to integer samples, rounding half away from zero.

    0.5 at 8 bits gives 128, not the 127 that round-half-to-even would give.
    Values outside [0, 1] are clamped first.

    Raises:
        EncodingError: If a value is not finite
    """
    arr = np.asarray(values, dtype=np.float64)
    if not np.isfinite(arr).all():
        raise EncodingError(f"Cannot quantize non-finite sample values: {arr.tolist()}")

    max_sample = (1 << bit_depth) - 1
    scaled = np.clip(arr, 0.0, 1.0) * max_sample
    whole = np.floor(scaled)
    rounded = np.where(scaled - whole >= 0.5, whole + 1.0, whole)
    return rounded.astype(np.uint16 if bit_depth == 16 else np.uint8)


def pack_samples(values, bit_depth: int) -> bytes:
    """Quantize and serialize samples (16-bit samples are big-endian)."""
    dtype = '>u2' if bit_depth == 16 else 'u1'
    return quantize(values, bit_depth).astype(dtype).tobytes()


def build_scanline(sample: DisplaySample, options: EncodeOptions) -> bytes:
    """Filter-type byte (none) followed by R, G, B[, A] samples."""
    channels = sample.channels(options.include_alpha)
    return bytes((defaults.FILTER_NONE,)) + pack_samples(channels, options.bit_depth)


# === Writer ===

def _emit(stream: BinaryIO, ihdr: bytes, idat: bytes) -> int:
    stream.write(defaults.PNG_SIGNATURE)
    written = len(defaults.PNG_SIGNATURE)
    written += write_chunk(stream, b'IHDR', ihdr)
    written += write_chunk(stream, b'cICP', build_cicp())
    written += write_chunk(stream, b'IDAT', idat)
    written += write_chunk(stream, b'IEND', b'')
    return written


def write_png(
    destination: Destination,
    sample: DisplaySample,
    options: EncodeOptions | None = None,
) -> int:
    """Encode sample as a 1x1 PNG and stream it to destination.

    Args:
        destination: File path, or a writable binary stream
        sample: Gamma-encoded Display P3 color
        options: Bit depth / alpha settings (defaults: 8-bit RGB)

    Returns:
        Number of bytes written

    Raises:
        EncodingError: On framing invariant violations
        ImageIOError: If the destination cannot be created or written. A
            partially written file is left in place.
    """
    if options is None:
        options = EncodeOptions()

    ihdr = build_ihdr(options)
    idat = zlib.compress(build_scanline(sample, options), options.compression_level)

    try:
        if hasattr(destination, 'write'):
            written = _emit(destination, ihdr, idat)
        else:
            with open(destination, 'wb') as fh:
                written = _emit(fh, ihdr, idat)
    except OSError as e:
        raise ImageIOError(f"failed to write PNG to {destination}: {e}") from e

    logger.debug("Wrote %d-byte PNG to %s", written, destination)
    return written


def encode_png(sample: DisplaySample, options: EncodeOptions | None = None) -> bytes:
    """Encode sample as a 1x1 PNG in memory."""
    buffer = BytesIO()
    write_png(buffer, sample, options)
    return buffer.getvalue()


# === Reader (verification) ===

def iter_chunks(data: bytes) -> Iterator[Chunk]:
    """Walk the chunks of a PNG byte string, checking lengths and CRCs.

    Raises:
        DecodingError: If the signature is missing, a chunk is truncated,
            or a stored CRC does not match
    """
    signature = defaults.PNG_SIGNATURE
    if data[:len(signature)] != signature:
        raise DecodingError("Missing PNG signature")

    offset = len(signature)
    while offset < len(data):
        if offset + 8 > len(data):
            raise DecodingError(f"Truncated chunk header at offset {offset}")
        length, chunk_type = struct.unpack_from('>I4s', data, offset)
        start = offset + 8
        end = start + length
        if end + 4 > len(data):
            raise DecodingError(f"Truncated {chunk_type!r} chunk at offset {offset}")

        payload = data[start:end]
        (crc,) = struct.unpack_from('>I', data, end)
        if crc != chunk_crc(chunk_type, payload):
            raise DecodingError(f"CRC mismatch in {chunk_type!r} chunk")

        yield Chunk(chunk_type, payload, crc)
        offset = end + 4


def read_pixel(data: bytes) -> PixelData:
    """Decode the single pixel of a PNG written by write_png.

    Only 1x1, non-interlaced, 8/16-bit RGB/RGBA images are understood.

    Raises:
        DecodingError: If the file is malformed or uses an unsupported layout
    """
    header = None
    idat = bytearray()
    for chunk in iter_chunks(data):
        if chunk.chunk_type == b'IHDR':
            if len(chunk.data) != _IHDR.size:
                raise DecodingError(f"IHDR must be {_IHDR.size} bytes, got {len(chunk.data)}")
            header = _IHDR.unpack(chunk.data)
        elif chunk.chunk_type == b'IDAT':
            idat += chunk.data

    if header is None:
        raise DecodingError("Missing IHDR chunk")
    width, height, bit_depth, color_type, _, _, interlace = header
    if (width, height) != (1, 1) or interlace != 0:
        raise DecodingError(f"Unsupported image layout: {width}x{height}, interlace={interlace}")
    if bit_depth not in defaults.BIT_DEPTH_CHOICES:
        raise DecodingError(f"Unsupported bit depth: {bit_depth}")
    if color_type not in (defaults.COLOR_TYPE_RGB, defaults.COLOR_TYPE_RGBA):
        raise DecodingError(f"Unsupported color type: {color_type}")

    try:
        raw = zlib.decompress(bytes(idat))
    except zlib.error as e:
        raise DecodingError(f"Corrupt IDAT stream: {e}") from e

    n_channels = 4 if color_type == defaults.COLOR_TYPE_RGBA else 3
    expected = 1 + n_channels * (bit_depth // 8)
    if len(raw) != expected or raw[0] != defaults.FILTER_NONE:
        raise DecodingError(f"Unexpected scanline: {raw!r}")

    dtype = '>u2' if bit_depth == 16 else 'u1'
    samples = tuple(int(v) for v in np.frombuffer(raw[1:], dtype=dtype))
    return PixelData(bit_depth, color_type, samples)
