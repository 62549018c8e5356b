import argparse
import logging
import os
import sys

from .pipeline import FramePipeline
from .ratios import RATIO_OPTIONS
from .settings import (BORDER_PERCENT_MAX, BORDER_PERCENT_MIN, DEFAULT_BORDER_PERCENT,
                       DEFAULT_OUTPUT_NAME, DEFAULT_RATIO, JPEG_QUALITY,
                       MAX_CANVAS_DIMENSION, FrameSettings)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Add a border to a photo and fit it to a social media aspect ratio")
    parser.add_argument('--input', '-i', required=True, help="Input image path")
    parser.add_argument('--output', '-o',
                        help=f"Output image path (default: {DEFAULT_OUTPUT_NAME} next to the input)")
    parser.add_argument('--border', '-b', type=float, default=DEFAULT_BORDER_PERCENT,
                        help=f"Border as a percentage of the shorter side "
                             f"({BORDER_PERCENT_MIN}-{BORDER_PERCENT_MAX}, values outside are clamped)")
    parser.add_argument('--ratio', '-r', default=DEFAULT_RATIO, choices=RATIO_OPTIONS,
                        help="Target aspect ratio")
    parser.add_argument('--max-dimension', type=int, default=MAX_CANVAS_DIMENSION,
                        help="Longest output side in pixels, 0 disables downscaling")
    parser.add_argument('--quality', '-q', type=int, default=JPEG_QUALITY,
                        help="JPEG quality")
    parser.add_argument('--verbose', '-v', action='store_true', help="Enable debug logging")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    output = args.output
    if not output:
        output = os.path.join(os.path.dirname(os.path.abspath(args.input)), DEFAULT_OUTPUT_NAME)

    settings = FrameSettings(border_percent=args.border, ratio=args.ratio)

    print(f"Processing {args.input}...")
    try:
        pipeline = FramePipeline(args.input).load()

        if pipeline.exif_segment is None:
            print("No EXIF metadata found, exporting without it")

        print(f"Adding {settings.border_percent:g}% border ({settings.ratio})...")
        pipeline.add_frame(settings, max_dimension=args.max_dimension)

        pipeline.save(output, quality=args.quality)
        print(f"Saved to {output}")

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
