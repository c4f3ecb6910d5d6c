"""Block tiling transforms for the CTE texture codec."""

from .block_order import BLOCK_ORDER, morton_scan, inverse_morton
from .block_utils import check_dimensions, iter_block_origins
from .block_transcoder import decode_blocks, encode_blocks

__all__ = [
    'BLOCK_ORDER',
    'morton_scan',
    'inverse_morton',
    'check_dimensions',
    'iter_block_origins',
    'decode_blocks',
    'encode_blocks',
]
