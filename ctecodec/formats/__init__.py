"""Pixel format variants for the CTE texture codec."""

from .variant import FormatVariant
from .a8 import pack_a8, unpack_a8

__all__ = [
    'FormatVariant',
    'pack_a8',
    'unpack_a8',
]
