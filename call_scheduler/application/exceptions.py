class InvalidInputError(ValueError):
    """Raised for caller bugs: malformed dates/times, slots outside the grid, unknown ids."""
    pass


class BookingStoreError(RuntimeError):
    """Raised when the booking store cannot be read or written."""
    pass
