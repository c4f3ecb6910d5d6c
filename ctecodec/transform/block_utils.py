"""Block layout utilities for the CTE payload."""

from typing import Iterator, Tuple

from ..constants import BLOCK_SIZE
from ..errors import WidthNotMultipleOf8, HeightNotMultipleOf8


def check_dimensions(width: int, height: int) -> None:
    """
    Reject dimensions that do not tile into whole blocks.

    Raises:
        WidthNotMultipleOf8: If width % 8 != 0
        HeightNotMultipleOf8: If height % 8 != 0
    """
    if width % BLOCK_SIZE != 0:
        raise WidthNotMultipleOf8(width)
    if height % BLOCK_SIZE != 0:
        raise HeightNotMultipleOf8(height)


def iter_block_origins(width: int, height: int,
                       block_size: int = BLOCK_SIZE) -> Iterator[Tuple[int, int]]:
    """
    Yield the top-left (x, y) of each block in payload order.

    Block-rows are stored bottom-to-top; blocks within a row run
    left-to-right.
    """
    n_blocks_h = height // block_size
    n_blocks_w = width // block_size

    for i in reversed(range(n_blocks_h)):
        for j in range(n_blocks_w):
            yield j * block_size, i * block_size
