"""Command-line entry point: oklch-pixel L C H [A].

Usage:
    oklch-pixel 0.7 0.15 30
    oklch-pixel 62.5% 0.2 145 0.5 --bit-depth 16 --output-file swatch.png
    oklch-pixel generate-completions bash > oklch-pixel.bash
"""

from __future__ import annotations

import argparse
import logging
import math
import sys
from pathlib import Path

import shtab

from oklch_pixel import __version__, defaults
from oklch_pixel.colorspace import convert
from oklch_pixel.errors import OklchPixelError
from oklch_pixel.naming import default_output_name
from oklch_pixel.png import write_png
from oklch_pixel.types import EncodeOptions, OklchColor

logger = logging.getLogger(__name__)

USAGE_HINT = "Run with --help for usage."
COMPLETIONS_COMMAND = "generate-completions"


# === Argument parsing ===

def parse_finite(text: str, name: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise ValueError(f"{name} must be a number") from None
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite")
    return value


def parse_lightness(text: str) -> float:
    """Lightness as 0..1, or as a percentage ('62.5%') normalized to 0..1."""
    if text.endswith('%'):
        value = parse_finite(text[:-1], "L%")
        if not 0.0 <= value <= 100.0:
            raise ValueError("L% must be between 0 and 100")
        return value / 100.0

    value = parse_finite(text, "L")
    if not 0.0 <= value <= 1.0:
        raise ValueError("L must be between 0 and 1 (or use %)")
    return value


def parse_non_negative(text: str, name: str) -> float:
    value = parse_finite(text, name)
    if value < 0.0:
        raise ValueError(f"{name} must be >= 0")
    return value


def parse_unit_range(text: str, name: str) -> float:
    value = parse_finite(text, name)
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{name} must be between 0 and 1")
    return value


def parse_color(args: argparse.Namespace) -> OklchColor:
    """Validate the positional arguments into an OklchColor.

    Raises:
        ValueError: With a user-facing message for the first invalid value
    """
    return OklchColor(
        L=parse_lightness(args.L),
        C=parse_non_negative(args.C, "C"),
        H=parse_finite(args.H, "H"),
        alpha=None if args.A is None else parse_unit_range(args.A, "A"),
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="oklch-pixel",
        description="Generate a 1x1 PNG in Display P3 from OKLCH.",
        epilog=(
            "Default output file: oklch(l c h).png or oklch(l c h ∕ a).png "
            "(L normalized to 0..1). "
            f"Shell completions: oklch-pixel {COMPLETIONS_COMMAND} {{{','.join(shtab.SUPPORTED_SHELLS)}}}."
        ),
    )
    parser.add_argument("L", help="Lightness: 0..1 or percent (e.g. 62.5%%).")
    parser.add_argument("C", help="Chroma (>= 0).")
    parser.add_argument("H", help="Hue in degrees.")
    parser.add_argument(
        "A", nargs="?", default=None,
        help="Alpha 0..1 (optional). If provided, output is RGBA.",
    )
    parser.add_argument(
        "--bit-depth", type=int, choices=defaults.BIT_DEPTH_CHOICES,
        default=defaults.DEFAULT_BIT_DEPTH, help="Output bit depth",
    )
    parser.add_argument(
        "--output-file", metavar="path", help="Explicit output file path",
    ).complete = shtab.FILE
    parser.add_argument("-v", "--verbose", action="store_true", help="Log conversion details")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def build_completions_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=f"oklch-pixel {COMPLETIONS_COMMAND}",
        description="Print a shell completion script to stdout.",
    )
    parser.add_argument("shell", choices=shtab.SUPPORTED_SHELLS, help="Target shell")
    return parser


def generate_completions(argv: list[str]) -> int:
    """Print the completion script for the requested shell."""
    args = build_completions_parser().parse_args(argv)
    print(shtab.complete(build_parser(), shell=args.shell))
    return 0


# === Logging ===

class CliFormatter(logging.Formatter):
    """Format records as '<level>: <message>' with a lowercase level name."""

    def format(self, record: logging.LogRecord) -> str:
        return f"{record.levelname.lower()}: {super().format(record)}"


def setup_logging(verbose: bool = False) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(CliFormatter("%(message)s"))
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        handlers=[handler],
    )


# === Pipeline ===

def render(color: OklchColor, output: str | Path, bit_depth: int = defaults.DEFAULT_BIT_DEPTH) -> Path:
    """Convert color and write it as a 1x1 PNG.

    Gamut clipping is reported as a warning and does not stop the write.

    Raises:
        ConversionError: If the color cannot be converted (nothing is written)
        EncodingError, ImageIOError: If the PNG cannot be written
    """
    sample = convert(color)
    if sample.clipped:
        logger.warning(defaults.CLIP_WARNING)

    options = EncodeOptions(bit_depth=bit_depth, include_alpha=color.include_alpha)
    write_png(output, sample, options)
    return Path(output)


def main(argv: list[str] | None = None) -> int:
    """Main entry point. Returns the process exit code."""
    if argv is None:
        argv = sys.argv[1:]
    if argv and argv[0] == COMPLETIONS_COMMAND:
        return generate_completions(argv[1:])

    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        color = parse_color(args)
    except ValueError as e:
        logger.error("%s", e)
        print(USAGE_HINT, file=sys.stderr)
        return 1

    output = args.output_file or default_output_name(color.L, color.C, color.H, color.alpha)

    try:
        path = render(color, output, args.bit_depth)
    except OklchPixelError as e:
        logger.error("%s", e)
        return 1

    logger.info("Wrote %s", path)
    return 0


if __name__ == '__main__':
    sys.exit(main())
