"""Decoded CTE texture value."""

import numpy as np

from ..formats import FormatVariant
from ..transform import check_dimensions


class CteImage:
    """
    An RGBA8 raster together with the CTE format it came from.

    Re-encoding uses ``original_format`` so a decoded texture keeps its
    packing.
    """

    def __init__(self, image: np.ndarray,
                 original_format: FormatVariant = FormatVariant.A8):
        image = np.asarray(image, dtype=np.uint8)
        if image.ndim != 3 or image.shape[2] != 4:
            raise ValueError(f"Expected RGBA image of shape (H, W, 4), got {image.shape}")
        check_dimensions(image.shape[1], image.shape[0])

        self.image = image
        self.original_format = original_format

    @property
    def width(self) -> int:
        return self.image.shape[1]

    @property
    def height(self) -> int:
        return self.image.shape[0]

    @classmethod
    def decode(cls, source) -> 'CteImage':
        """Decode CTE bytes or a binary stream."""
        from .decoder import CteDecoder
        return CteDecoder().decode(source)

    def encode(self) -> bytes:
        """Encode with the original format."""
        from .encoder import CteEncoder
        return CteEncoder().encode(self.image, self.original_format)

    def encode_to(self, stream) -> None:
        from .encoder import CteEncoder
        CteEncoder().encode_to(stream, self.image, self.original_format)

    def __repr__(self):
        return (f"CteImage({self.width}x{self.height}, "
                f"format={self.original_format.name})")


def read_cte(path: str) -> CteImage:
    """Decode a CTE file from disk."""
    with open(path, 'rb') as f:
        return CteImage.decode(f)


def write_cte(cte_image: CteImage, path: str) -> None:
    """Encode a CteImage to disk."""
    with open(path, 'wb') as f:
        cte_image.encode_to(f)
