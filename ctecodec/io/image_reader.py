"""Raster image reader backed by Pillow."""

import numpy as np
from pathlib import Path
from PIL import Image


def read_raster(path: str) -> np.ndarray:
    """
    Read any Pillow-supported image as RGBA8.

    Args:
        path: Path to the image file (.png, .bmp, .tga, ...)

    Returns:
        (height, width, 4) numpy array with dtype uint8

    Raises:
        ValueError: If the file cannot be decoded as an image
    """
    path = Path(path)

    try:
        with Image.open(path) as img:
            rgba = img.convert('RGBA')
    except Image.UnidentifiedImageError:
        raise ValueError(f"Unsupported image file: {path}")

    return np.asarray(rgba, dtype=np.uint8).copy()


def get_image_info(path: str) -> dict:
    """
    Get information about a raster image file.

    Returns:
        Dictionary with 'width', 'height', 'mode', 'format'
    """
    with Image.open(Path(path)) as img:
        return {
            'width': img.width,
            'height': img.height,
            'mode': img.mode,
            'format': img.format,
        }
