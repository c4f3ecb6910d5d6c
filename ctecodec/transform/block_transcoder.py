"""Conversion between the tiled CTE payload and an RGBA8 raster."""

import numpy as np

from ..constants import BLOCK_SIZE
from ..formats import FormatVariant
from ..streams import read_exact
from .block_order import morton_scan, inverse_morton
from .block_utils import check_dimensions, iter_block_origins


def decode_blocks(stream, width: int, height: int,
                  variant: FormatVariant) -> np.ndarray:
    """
    Read the pixel payload and rebuild the raster image.

    Blocks are consumed one at a time in payload order (bottom block-row
    first) and each is placed through the Z-order table.

    Args:
        stream: Binary stream positioned at the start of the payload
        width: Image width in pixels
        height: Image height in pixels
        variant: Pixel packing of the payload

    Returns:
        (height, width, 4) uint8 RGBA array

    Raises:
        EOFError: If the payload is truncated
    """
    check_dimensions(width, height)
    image = np.zeros((height, width, 4), dtype=np.uint8)

    for x0, y0 in iter_block_origins(width, height):
        data = read_exact(stream, variant.block_bytes)
        image[y0:y0 + BLOCK_SIZE, x0:x0 + BLOCK_SIZE] = inverse_morton(variant.unpack(data))

    return image


def encode_blocks(stream, image: np.ndarray, variant: FormatVariant) -> None:
    """
    Write the raster image as a tiled pixel payload.

    Args:
        stream: Binary stream to write to
        image: (height, width, 4) RGBA array
        variant: Pixel packing to apply
    """
    height, width = image.shape[:2]
    check_dimensions(width, height)

    for x0, y0 in iter_block_origins(width, height):
        block = image[y0:y0 + BLOCK_SIZE, x0:x0 + BLOCK_SIZE]
        stream.write(variant.pack(morton_scan(block)))
