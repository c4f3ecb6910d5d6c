"""CTE file header reader and writer."""

import struct

from ..constants import (MAGIC, HEADER_FORMAT, HEADER_SIZE,
                         CANONICAL_PAYLOAD_OFFSET)
from ..errors import (InvalidHeader, UnsupportedFormat, PayloadStartsTooSoon,
                      PixelLengthInvalid)
from ..formats import FormatVariant
from ..streams import read_exact
from ..transform.block_utils import check_dimensions


class CteHeader:
    """Parsed fields of a CTE file header."""

    def __init__(self, variant: FormatVariant, width: int, height: int,
                 pixel_bit_length: int, reserved: int = 0,
                 payload_offset: int = CANONICAL_PAYLOAD_OFFSET):
        self.variant = variant
        self.width = width
        self.height = height
        self.pixel_bit_length = pixel_bit_length
        self.reserved = reserved
        self.payload_offset = payload_offset

    @property
    def padding(self) -> int:
        """Bytes between the fixed header fields and the payload."""
        return self.payload_offset - HEADER_SIZE

    def __repr__(self):
        return (f"CteHeader(variant={self.variant.name}, width={self.width}, "
                f"height={self.height}, pixel_bit_length={self.pixel_bit_length}, "
                f"payload_offset={self.payload_offset})")


def pack_header(variant: FormatVariant, width: int, height: int) -> bytes:
    """
    Pack metadata into the canonical 128-byte header.

    Args:
        variant: Pixel format of the payload
        width: Image width (multiple of 8)
        height: Image height (multiple of 8)

    Returns:
        Header bytes, zero-padded up to the payload offset

    Raises:
        WidthNotMultipleOf8, HeightNotMultipleOf8: On invalid dimensions
    """
    check_dimensions(width, height)

    header = struct.pack(
        HEADER_FORMAT,
        MAGIC,                      # Magic number
        variant.format_id,          # Format id
        width,
        height,
        variant.bits_per_pixel,     # Pixel bit length
        0,                          # Reserved
        CANONICAL_PAYLOAD_OFFSET    # Payload offset
    )
    return header + bytes(CANONICAL_PAYLOAD_OFFSET - HEADER_SIZE)


def write_header(stream, variant: FormatVariant, width: int, height: int) -> None:
    """Write the canonical header to a binary stream."""
    stream.write(pack_header(variant, width, height))


def read_header(stream) -> CteHeader:
    """
    Read and validate a CTE header, leaving the stream at the payload.

    Args:
        stream: Binary stream positioned at the start of the file

    Returns:
        CteHeader with the parsed fields

    Raises:
        InvalidHeader: If the magic bytes do not match
        UnsupportedFormat: If the format id is unknown
        PixelLengthInvalid: If the bit length disagrees with the format
        WidthNotMultipleOf8, HeightNotMultipleOf8: On invalid dimensions
        PayloadStartsTooSoon: If the payload offset is inside the header
        EOFError: If the stream is truncated
    """
    magic = read_exact(stream, len(MAGIC))
    if magic != MAGIC:
        raise InvalidHeader(magic)

    fields = read_exact(stream, HEADER_SIZE - len(MAGIC))
    _, format_id, w, h, bit_len, reserved, offset = struct.unpack(
        HEADER_FORMAT, magic + fields)

    variant = FormatVariant.from_id(format_id)
    if variant is None:
        raise UnsupportedFormat(format_id)

    if bit_len != variant.bits_per_pixel:
        raise PixelLengthInvalid(bit_len, variant)

    check_dimensions(w, h)

    if offset < HEADER_SIZE:
        raise PayloadStartsTooSoon(offset)

    header = CteHeader(variant, w, h, bit_len, reserved, offset)

    # Padding contents are opaque
    read_exact(stream, header.padding)

    return header
