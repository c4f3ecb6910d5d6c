"""Codec modules for the CTE texture codec."""

from .cte_image import CteImage, read_cte, write_cte
from .encoder import CteEncoder
from .decoder import CteDecoder

__all__ = [
    'CteImage',
    'read_cte',
    'write_cte',
    'CteEncoder',
    'CteDecoder',
]
