"""CTE Encoder - Block packing behind a canonical header."""

import io

import numpy as np

from ..formats import FormatVariant
from ..io.header import write_header
from ..transform import check_dimensions, encode_blocks


class CteEncoder:
    """
    Encoder for CTE textures.

    Pipeline:
    1. Validate dimensions
    2. Write the canonical 128-byte header
    3. Pack pixels block by block in Z-order, bottom block-row first
    """

    def encode(self, image: np.ndarray,
               variant: FormatVariant = FormatVariant.A8) -> bytes:
        """
        Encode an RGBA8 image.

        Args:
            image: (height, width, 4) uint8 array
            variant: Pixel packing to use

        Returns:
            CTE file contents as bytes
        """
        buffer = io.BytesIO()
        self.encode_to(buffer, image, variant)
        return buffer.getvalue()

    def encode_to(self, stream, image: np.ndarray,
                  variant: FormatVariant = FormatVariant.A8) -> None:
        """
        Encode an RGBA8 image into a binary stream.

        Raises:
            ValueError: If the array is not RGBA
            WidthNotMultipleOf8, HeightNotMultipleOf8: On invalid dimensions
        """
        image = np.asarray(image)
        if image.ndim != 3 or image.shape[2] != 4:
            raise ValueError(f"Expected RGBA image of shape (H, W, 4), got {image.shape}")

        h, w = image.shape[:2]

        # Step 1: Nothing is written for an image that cannot be tiled
        check_dimensions(w, h)

        # Step 2: Header
        write_header(stream, variant, w, h)

        # Step 3: Payload
        encode_blocks(stream, image, variant)
