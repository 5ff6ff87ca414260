import argparse
import logging
import sys

from imgtoascii.charsets import DENSITY
from imgtoascii.config import DEFAULT_INPUT, DEFAULT_OUTPUT, ConvertConfig
from imgtoascii.converter import convert
from imgtoascii.errors import ImgToAsciiError


def main(argv=None):
    parser = argparse.ArgumentParser(description="Convert an image to ASCII art text")
    parser.add_argument(
        "image", nargs="?", default=str(DEFAULT_INPUT), help=f"Path to input image (default: {DEFAULT_INPUT})"
    )
    parser.add_argument(
        "-o", "--output", default=str(DEFAULT_OUTPUT), help=f"Path to output text file (default: {DEFAULT_OUTPUT})"
    )
    parser.add_argument(
        "-r", "--ramp", default=DENSITY, help="Characters ordered from densest to sparsest (default: built-in ramp)"
    )
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = ConvertConfig(input_path=args.image, output_path=args.output, ramp=args.ramp)
        convert(config)
    except ImgToAsciiError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    print("File written successfully.")
