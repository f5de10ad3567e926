import argparse
import os
import sys

from .config import DEFAULT_OUTPUT, PALETTE_SIZES, Config, parse_format, parse_palette_size
from .convert import convert, convert_directory
from .errors import ConversionError


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        # Usage problems exit with 1 like every other failure
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser():
    parser = _ArgumentParser(
        prog="img2palette",
        description="Convert an image to a palette array and an index array of C source.",
    )
    parser.add_argument('image_path', help='Path to the image to convert, or a directory of images.')
    parser.add_argument('-c', '--colour', default='565', metavar='FORMAT',
                        help='Palette colour format: [RGB]565 or RGB[888] (default: 565)')
    parser.add_argument('-p', '--palette', metavar='FILE',
                        help='Image whose pixels define the palette. Defaults to the colours of the image itself.')
    parser.add_argument('--palsize', default='8', metavar='SIZE',
                        help=f"Index element size in bits, one of {', '.join(map(str, PALETTE_SIZES))} (default: 8)")
    parser.add_argument('-o', '--output', metavar='FILE',
                        help=f'Output file name (default: {DEFAULT_OUTPUT}). For a directory input, '
                             f'the directory the .c files are written to (default: current directory).')
    parser.add_argument('-q', '--quiet', action='store_true', help='Only report errors.')
    return parser


def parse_config(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        color_format = parse_format(args.colour)
        palette_size = parse_palette_size(args.palsize)
    except ConversionError as e:
        parser.error(str(e))

    if args.output is not None:
        output_path = args.output
    elif os.path.isdir(args.image_path):
        output_path = "."
    else:
        output_path = DEFAULT_OUTPUT

    config = Config(
        image_path=args.image_path,
        palette_path=args.palette,
        output_path=output_path,
        color_format=color_format,
        palette_size=palette_size,
    )
    return config, args.quiet


def main(argv=None):
    config, quiet = parse_config(argv)
    log = None if quiet else print
    try:
        if os.path.isdir(config.image_path):
            written = convert_directory(config, log=log)
            if log:
                log(f"[+] Processed {len(written)} images. Output saved to {config.output_path}")
        else:
            convert(config)
            if log:
                log(f'Arrays written successfully to file "{config.output_path}"')
    except ConversionError as e:
        print(e, file=sys.stderr)
        sys.exit(1)
    return 0
