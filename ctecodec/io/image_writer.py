"""Raster image writer backed by Pillow."""

import numpy as np
from pathlib import Path
from PIL import Image


def write_raster(image: np.ndarray, path: str, format: str = None) -> None:
    """
    Write an RGBA8 image to file.

    Args:
        image: (height, width, 4) uint8 array
        path: Output file path
        format: Pillow format name. Auto-detected from extension if None.

    Raises:
        ValueError: If the array is not RGBA or the format is unknown
    """
    path = Path(path)

    if image.ndim != 3 or image.shape[2] != 4:
        raise ValueError(f"Expected RGBA image of shape (H, W, 4), got {image.shape}")

    if format is None and path.suffix.lower() not in Image.registered_extensions():
        raise ValueError(f"Unsupported output format: {path.suffix or '(none)'}")

    Image.fromarray(image.astype(np.uint8)).save(path, format=format)
