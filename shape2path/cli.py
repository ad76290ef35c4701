"""
shape2path — replace SVG basic shapes with equivalent paths.

Usage:
  shape2path input.svg                          # prints to terminal
  shape2path input.svg -o out.svg               # saves converted SVG
  shape2path - < input.svg                      # reads stdin
  shape2path folder/ -o output_folder/          # batch process folder
  shape2path input.svg --circle-algorithm QuadBezier --circle-segments 16
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from shape2path.config import settings
from shape2path.engine.dispatcher import convert
from shape2path.models.options import CircleAlgorithm, ConversionOptions
from shape2path.svg.document import SvgParseError, parse_svg, serialize_svg

logger = logging.getLogger(__name__)


def convert_text(svg: str | bytes, options: ConversionOptions) -> tuple[str, int]:
    root = parse_svg(svg)
    converted = convert(root, options=options)
    return serialize_svg(root), converted


def process_file(input_path: Path, output_path: Path | None, options: ConversionOptions) -> bool:
    """Convert one file. Returns False (after logging) if it could not be read or parsed."""
    try:
        svg = input_path.read_bytes()
        result, converted = convert_text(svg, options)
    except (OSError, SvgParseError) as e:
        logger.error("%s: %s", input_path, e)
        return False

    if output_path is None:
        sys.stdout.write(result + "\n")
    else:
        output_path.write_text(result, encoding="utf-8")
        logger.info("%s: %d shape(s) converted -> %s", input_path, converted, output_path)
    return True


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="shape2path", description="Convert SVG basic shapes to paths")
    parser.add_argument("input", help="SVG file, folder of SVGs, or - for stdin")
    parser.add_argument("-o", "--output", help="Output file or folder")
    parser.add_argument(
        "--circle-algorithm",
        choices=[a.value for a in CircleAlgorithm],
        help=f"How circles and ellipses are drawn (default: {settings.circle_algorithm})",
    )
    parser.add_argument(
        "--circle-segments",
        type=int,
        help=f"Quadratic segments per ellipse for QuadBezier (default: {settings.circle_segments})",
    )
    parser.add_argument(
        "--strict-attributes",
        action="store_true",
        help="Also drop rect geometry attributes from the generated path",
    )
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )

    try:
        options = ConversionOptions.from_settings(
            settings,
            {
                "circle_algorithm": args.circle_algorithm,
                "circle_segments": args.circle_segments,
                "attribute_cleanup": "strict" if args.strict_attributes else None,
            },
        )
    except ValidationError as e:
        parser.error("; ".join(f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in e.errors()))

    if args.input == "-":
        try:
            result, _ = convert_text(sys.stdin.buffer.read(), options)
        except SvgParseError as e:
            logger.error("<stdin>: %s", e)
            return 1
        if args.output:
            Path(args.output).write_text(result, encoding="utf-8")
        else:
            sys.stdout.write(result + "\n")
        return 0

    input_path = Path(args.input)
    if input_path.is_dir():
        # Batch mode
        svg_files = sorted(p for p in input_path.iterdir() if p.suffix.lower() == ".svg")
        if not svg_files:
            logger.error("No .svg files found in %s", input_path)
            return 1

        out_dir = Path(args.output) if args.output else input_path.with_name(input_path.name + "_paths")
        out_dir.mkdir(parents=True, exist_ok=True)

        success = sum(process_file(p, out_dir / p.name, options) for p in svg_files)
        logger.info("Done: %d/%d processed -> %s", success, len(svg_files), out_dir)
        return 0 if success == len(svg_files) else 1

    if not input_path.exists():
        logger.error("File not found: %s", input_path)
        return 1

    output_path = Path(args.output) if args.output else None
    return 0 if process_file(input_path, output_path, options) else 1


if __name__ == "__main__":
    sys.exit(main())
