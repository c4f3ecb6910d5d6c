"""I/O modules for the CTE texture codec."""

from .image_reader import read_raster, get_image_info
from .image_writer import write_raster
from .header import CteHeader, pack_header, write_header, read_header

__all__ = [
    'read_raster',
    'get_image_info',
    'write_raster',
    'CteHeader',
    'pack_header',
    'write_header',
    'read_header',
]
