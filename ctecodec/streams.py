"""Helpers for reading fixed-size fields from binary streams."""


def read_exact(stream, size: int) -> bytes:
    """
    Read exactly ``size`` bytes from a binary stream.

    Raises:
        EOFError: If the stream ends first
    """
    data = stream.read(size)
    if len(data) != size:
        raise EOFError(f"Unexpected end of CTE data: wanted {size} bytes, got {len(data)}")
    return data
