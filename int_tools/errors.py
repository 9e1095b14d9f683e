"""Exceptions raised for caller-contract violations."""

from .constants import MAX_RADIX, MIN_RADIX


class InvalidRadixError(ValueError):
    """Raised when a radix falls outside the supported range."""

    def __init__(self, radix: int) -> None:
        super().__init__(
            f"Invalid radix {radix}: it must be between {MIN_RADIX} and {MAX_RADIX}."
        )
        self.radix = radix


class InfiniteRangeError(ValueError):
    """Raised when a range would never reach its stop value."""
