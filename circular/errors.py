"""Exception types raised by circular containers."""

from __future__ import annotations


class EmptySourceError(ValueError):
    """Raised when a circular container is built from an empty source."""


class IndexOutOfRangeError(IndexError):
    """Absolute position or range bound outside the container's storage."""

    def __init__(self, index: int, length: int) -> None:
        super().__init__(f"index {index} out of range for length {length}")
        self.index = index
        self.length = length
