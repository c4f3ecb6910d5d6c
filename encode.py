#!/usr/bin/env python3
"""
CTE Texture Encoder CLI

Usage:
    python encode.py --input <path> --output <path>

Example:
    python encode.py --input font.png --output font.img
"""

import argparse
import sys
import os
import time

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from ctecodec.io import read_raster
from ctecodec.codec import CteEncoder
from ctecodec.formats import FormatVariant


def main():
    parser = argparse.ArgumentParser(
        description='CTE Texture Encoder - Convert a standard image to a CTE texture',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Encode a PNG
  python encode.py --input font.png --output font.img

  # Encode with verbose output
  python encode.py --input font.png --output font.img --verbose
        """
    )

    # Required arguments
    parser.add_argument('--input', '-i', required=True,
                        help='Input image path (any format Pillow can read)')
    parser.add_argument('--output', '-o', required=True,
                        help='Output CTE texture path (.img)')

    # Optional arguments
    parser.add_argument('--format', '-f', choices=[v.name for v in FormatVariant],
                        default=FormatVariant.A8.name,
                        help='CTE pixel format (default: A8)')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Verbose output')

    args = parser.parse_args()

    # Check input file exists
    if not os.path.exists(args.input):
        print(f"Error: Input file not found: {args.input}", file=sys.stderr)
        sys.exit(1)

    variant = FormatVariant[args.format]

    try:
        if args.verbose:
            print(f"Reading input: {args.input}")

        start_time = time.time()

        image = read_raster(args.input)

        if args.verbose:
            print(f"  Shape: {image.shape}")
            print(f"Encoding with format={variant.name}...")

        encoder = CteEncoder()
        encoded = encoder.encode(image, variant)

        # Write output
        with open(args.output, 'wb') as f:
            f.write(encoded)

        elapsed = time.time() - start_time

        if args.verbose:
            print(f"\nResults:")
            print(f"  Image size: {image.shape[1]}x{image.shape[0]}")
            print(f"  Output size: {len(encoded):,} bytes")
            print(f"  Encoding time: {elapsed:.2f}s")
            print(f"\nOutput written to: {args.output}")
        else:
            print(f"Encoded: {args.input} -> {args.output} "
                  f"({image.shape[1]}x{image.shape[0]}, {variant.name})")

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
