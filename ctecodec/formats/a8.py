"""A8 pixel packing: 4-bit luminance in the high nibble, 4-bit alpha in the low nibble."""

import numpy as np


def unpack_a8(data: bytes) -> np.ndarray:
    """
    Expand A8 bytes into RGBA8 pixels.

    Alpha is scaled by 16 while luminance keeps its raw 4-bit value
    (0-15) on all three colour channels, so 0xFF becomes (15, 15, 15, 240).

    Args:
        data: Packed pixel bytes

    Returns:
        (N, 4) uint8 array of RGBA pixels
    """
    values = np.frombuffer(data, dtype=np.uint8)
    luminance = values // 16
    alpha = (values % 16) * 16
    return np.stack([luminance, luminance, luminance, alpha], axis=-1)


def pack_a8(pixels: np.ndarray) -> bytes:
    """
    Pack RGBA8 pixels into A8 bytes.

    Luminance is the truncating mean of R, G and B. Only its low nibble
    survives the shift into the high half of the byte; the low 4 bits of
    alpha are dropped.

    Args:
        pixels: (N, 4) array of RGBA pixels

    Returns:
        Packed bytes, one per pixel
    """
    pixels = np.asarray(pixels).astype(np.uint16)
    luminance = (pixels[:, 0] + pixels[:, 1] + pixels[:, 2]) // 3
    packed = ((luminance << 4) & 0xFF) + pixels[:, 3] // 16
    return packed.astype(np.uint8).tobytes()
