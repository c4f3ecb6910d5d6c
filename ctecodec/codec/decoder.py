"""CTE Decoder - Header parse followed by block unpacking."""

import io

from ..io.header import read_header
from ..transform import decode_blocks
from .cte_image import CteImage


class CteDecoder:
    """
    Decoder for CTE textures.

    Pipeline:
    1. Read and validate header
    2. Skip padding up to the payload offset
    3. Read 8x8 blocks, bottom block-row first
    4. Unpack pixels and place them through the Z-order table
    """

    def __init__(self):
        self.header = None

    def decode(self, source) -> CteImage:
        """
        Decode a CTE texture.

        Args:
            source: CTE data as bytes, or a binary stream

        Returns:
            CteImage holding the RGBA8 raster and its source format

        Raises:
            CteError: If the header is invalid or unsupported
            EOFError: If the data is truncated
        """
        if isinstance(source, (bytes, bytearray, memoryview)):
            source = io.BytesIO(source)

        # Step 1 & 2: Header and padding
        self.header = read_header(source)
        h = self.header

        # Step 3 & 4: Payload
        image = decode_blocks(source, h.width, h.height, h.variant)

        return CteImage(image, original_format=h.variant)
