#!/usr/bin/env python3
"""
CTE Texture Extractor CLI

Usage:
    python extract.py --input <path> --output <path>

Example:
    python extract.py --input font.img --output font.png
"""

import argparse
import sys
import os
import time

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from ctecodec.io import write_raster
from ctecodec.codec import CteDecoder


def main():
    parser = argparse.ArgumentParser(
        description='CTE Texture Extractor - Convert a CTE texture to a standard image',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Extract to PNG
  python extract.py --input font.img --output font.png

  # Extract with verbose output
  python extract.py --input font.img --output font.png --verbose
        """
    )

    # Required arguments
    parser.add_argument('--input', '-i', required=True,
                        help='Input CTE texture path (.img)')
    parser.add_argument('--output', '-o', required=True,
                        help='Output image path (format from extension, .png recommended)')

    # Optional arguments
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Verbose output')

    args = parser.parse_args()

    # Check input file exists
    if not os.path.exists(args.input):
        print(f"Error: Input file not found: {args.input}", file=sys.stderr)
        sys.exit(1)

    try:
        if args.verbose:
            print(f"Reading CTE file: {args.input}")

        start_time = time.time()

        decoder = CteDecoder()
        with open(args.input, 'rb') as f:
            cte_image = decoder.decode(f)

        elapsed = time.time() - start_time

        if args.verbose:
            header = decoder.header
            print(f"\nHeader:")
            print(f"  Format: {header.variant.name} (id {header.variant.format_id})")
            print(f"  Size: {header.width}x{header.height}")
            print(f"  Bits per pixel: {header.pixel_bit_length}")
            print(f"  Payload offset: {header.payload_offset}")

        # Write output
        write_raster(cte_image.image, args.output)

        if args.verbose:
            print(f"  Decoding time: {elapsed:.2f}s")
            print(f"\nOutput written to: {args.output}")
        else:
            print(f"Extracted: {args.input} -> {args.output} "
                  f"({cte_image.width}x{cte_image.height}, "
                  f"{cte_image.original_format.name})")

    except ValueError as e:
        print(f"Error: Invalid CTE file - {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
