"""Z-order (Morton) scan for converting 8x8 blocks to and from 1D arrays."""

import numpy as np

# Quadrant offsets (dx, dy) at each subdivision level, in storage order
OUTER_OFFSETS = ((0, 4), (4, 4), (0, 0), (4, 0))   # 4x4 quadrants of the 8x8 block
MIDDLE_OFFSETS = ((0, 2), (2, 2), (0, 0), (2, 0))  # 2x2 quadrants of a 4x4
INNER_OFFSETS = ((0, 1), (1, 1), (0, 0), (1, 0))   # pixels of a 2x2


def _build_block_order() -> np.ndarray:
    order = []
    for outer_x, outer_y in OUTER_OFFSETS:
        for middle_x, middle_y in MIDDLE_OFFSETS:
            for inner_x, inner_y in INNER_OFFSETS:
                order.append((outer_x + middle_x + inner_x,
                              outer_y + middle_y + inner_y))
    return np.array(order, dtype=np.intp)


# Pre-computed (dx, dy) for each of the 64 stored pixels of a block
BLOCK_ORDER = _build_block_order()
ORDER_X = BLOCK_ORDER[:, 0]
ORDER_Y = BLOCK_ORDER[:, 1]


def morton_scan(block: np.ndarray) -> np.ndarray:
    """
    Read an 8x8 block in storage order.

    Args:
        block: (8, 8) or (8, 8, C) block indexed [y, x]

    Returns:
        Array of 64 elements (or 64 x C) in Z-order
    """
    assert block.shape[:2] == (8, 8), f"Expected 8x8 block, got {block.shape}"
    return block[ORDER_Y, ORDER_X]


def inverse_morton(array: np.ndarray) -> np.ndarray:
    """
    Convert a Z-ordered array back to an 8x8 block.

    Args:
        array: 64 elements (or 64 x C) in storage order

    Returns:
        (8, 8) or (8, 8, C) block indexed [y, x]
    """
    assert len(array) == 64, f"Expected 64 elements, got {len(array)}"
    block = np.zeros((8, 8) + array.shape[1:], dtype=array.dtype)
    block[ORDER_Y, ORDER_X] = array
    return block
