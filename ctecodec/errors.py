"""Exception classes for the CTE texture codec."""


class CteError(ValueError):
    """Base class for invalid or unsupported CTE data."""
    pass


class InvalidHeader(CteError):
    """Magic bytes at the start of the file do not match."""
    def __init__(self, found):
        self.found = bytes(found)
        super().__init__(
            f"Invalid CTE signature: {self.found!r}. Expected b'\\x00cte'")


class UnsupportedFormat(CteError):
    """Format id has no known variant."""
    def __init__(self, format_id):
        self.format_id = format_id
        super().__init__(f"Unsupported CTE format id: {format_id}")


class PayloadStartsTooSoon(CteError):
    """Declared payload offset lies inside the fixed header."""
    def __init__(self, payload_offset):
        self.payload_offset = payload_offset
        super().__init__(
            f"Pixel payload overlaps the header (payload starts at {payload_offset})")


class PixelLengthInvalid(CteError):
    """Header bit length disagrees with the format variant."""
    def __init__(self, pixel_length, variant):
        self.pixel_length = pixel_length
        self.variant = variant
        super().__init__(
            f"Invalid pixel bit length {pixel_length} for format {variant.name} "
            f"(expected {variant.bits_per_pixel})")


class WidthNotMultipleOf8(CteError):
    def __init__(self, width):
        self.width = width
        super().__init__(f"Image width {width} is not a multiple of 8")


class HeightNotMultipleOf8(CteError):
    def __init__(self, height):
        self.height = height
        super().__init__(f"Image height {height} is not a multiple of 8")
