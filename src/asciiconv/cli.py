import argparse
import logging
import sys
from pathlib import Path

from asciiconv.buffer import load_image
from asciiconv.charsets import charset_names
from asciiconv.converter import convert, format_ansi
from asciiconv.errors import ConversionError
from asciiconv.logging_config import setup_logging
from asciiconv.render import render_image
from asciiconv.settings import DEFAULT_CHARSET, DEFAULT_RESOLUTION, ConversionSettings

logger = logging.getLogger(__name__)


def _resolution(value: str) -> float:
    resolution = float(value)
    if not 0 < resolution <= 1:
        raise argparse.ArgumentTypeError(f"resolution must be in (0, 1], got {value}")
    return resolution


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Convert an image to ASCII art")
    parser.add_argument("image", help="Path to input image")
    parser.add_argument(
        "-r",
        "--resolution",
        type=_resolution,
        default=DEFAULT_RESOLUTION,
        help=f"Fraction of pixel columns that become characters (default: {DEFAULT_RESOLUTION})",
    )
    parser.add_argument(
        "-c",
        "--charset",
        default=DEFAULT_CHARSET,
        choices=charset_names(),
        help=f"Character ramp to use (default: {DEFAULT_CHARSET})",
    )
    parser.add_argument("-i", "--invert", action="store_true", default=False, help="Invert brightness")
    parser.add_argument(
        "--colour", action="store_true", default=False, help="Derive glyph colours and print truecolor ANSI output"
    )
    parser.add_argument("-o", "--output", type=Path, default=None, help="Also write the plain text to this file")
    parser.add_argument("--png", type=Path, default=None, help="Also render the art to this image file")
    parser.add_argument("--font-size", type=int, default=8, help="Font size for --png (default: 8)")
    parser.add_argument("--font", default=None, help="TrueType font for --png (default: Pillow's built-in font)")
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    image_path = Path(args.image)
    if not image_path.exists():
        print(f"File not found: {image_path}", file=sys.stderr)
        return 1

    settings = ConversionSettings(
        resolution=args.resolution,
        charset=args.charset,
        inverted=args.invert,
        grayscale=not args.colour,
    )
    try:
        grid = convert(load_image(image_path), settings)
    except ConversionError as exc:
        print(f"Conversion failed: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"Could not read image {image_path}: {exc}", file=sys.stderr)
        return 1

    try:
        if args.output is not None:
            args.output.write_text(grid.text, encoding="utf-8")
            logger.info("Wrote text to %s", args.output)
        if args.png is not None:
            render_image(grid, font_size=args.font_size, font_path=args.font).save(args.png)
            logger.info("Wrote preview to %s", args.png)
    except OSError as exc:
        print(f"Export failed: {exc}", file=sys.stderr)
        return 1

    sys.stdout.write(format_ansi(grid) if args.colour else grid.text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
