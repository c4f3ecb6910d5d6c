"""CTE pixel format variants."""

from enum import Enum
from typing import Optional

import numpy as np

from ..constants import PIXELS_PER_BLOCK
from .a8 import pack_a8, unpack_a8


class FormatVariant(Enum):
    """
    Pixel packing schemes, keyed by the format id stored in the header.

    Each member carries its file id and bit length; pack/unpack are looked
    up in the codec tables below so new variants only need a new member and
    a table entry.
    """

    A8 = (8, 8)

    def __init__(self, format_id: int, bits_per_pixel: int):
        self.format_id = format_id
        self.bits_per_pixel = bits_per_pixel

    @classmethod
    def from_id(cls, format_id: int) -> Optional['FormatVariant']:
        """Resolve a header format id, or None if it is unknown."""
        for variant in cls:
            if variant.format_id == format_id:
                return variant
        return None

    @property
    def block_bytes(self) -> int:
        """Number of payload bytes holding one 8x8 block."""
        return PIXELS_PER_BLOCK * self.bits_per_pixel // 8

    def unpack(self, data: bytes) -> np.ndarray:
        """Decode packed bytes into an (N, 4) RGBA8 array."""
        return _UNPACKERS[self](data)

    def pack(self, pixels: np.ndarray) -> bytes:
        """Encode an (N, 4) RGBA8 array into packed bytes."""
        return _PACKERS[self](pixels)


_UNPACKERS = {
    FormatVariant.A8: unpack_a8,
}

_PACKERS = {
    FormatVariant.A8: pack_a8,
}
