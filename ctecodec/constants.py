"""Constants for the CTE texture codec."""

import struct

# Magic number: '\x00cte'
MAGIC = b'\x00cte'

# Pixels are tiled in square blocks of this size
BLOCK_SIZE = 8
PIXELS_PER_BLOCK = BLOCK_SIZE * BLOCK_SIZE

# Header format (Little-endian, 28 bytes total)
# 4s: Magic (4B), I: Format id (4B), I: Width (4B), I: Height (4B)
# I: Pixel bit length (4B), I: Reserved (4B), I: Payload offset (4B)
HEADER_FORMAT = '<4sIIIIII'
HEADER_SIZE = struct.calcsize(HEADER_FORMAT)  # 28 bytes

# Payload offset written by the encoder; the gap after the header is zeroed
CANONICAL_PAYLOAD_OFFSET = 128

# Format id used when none is requested (A8)
DEFAULT_FORMAT_ID = 8
