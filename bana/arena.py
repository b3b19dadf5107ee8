"""A fixed-capacity bump allocator over a single byte buffer."""

from __future__ import annotations


class OutOfMemoryError(MemoryError):
    """Raised when an arena has no room left for a request."""


class Arena:
    """Hands out consecutive regions of a fixed ``bytearray``.

    Regions are returned as writable memoryviews into :attr:`data`.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self.pointer = 0
        self.data = bytearray(capacity)

    def _reserve(self, length: int) -> memoryview:
        if length < 0:
            raise ValueError("length must not be negative")
        if self.pointer + length > self.capacity:
            raise OutOfMemoryError(
                f"arena needs {length} bytes but only {self.capacity - self.pointer} remain"
            )
        start = self.pointer
        self.pointer += length
        return memoryview(self.data)[start : start + length]

    def push_array(self, size: int, count: int) -> memoryview:
        """Reserve ``size * count`` bytes and return a view of them."""
        if size < 0 or count < 0:
            raise ValueError("size and count must not be negative")
        return self._reserve(size * count)

    def push_struct(self, data) -> memoryview:
        """Copy the bytes of ``data`` into the arena and return a view of the copy."""
        payload = bytes(data)
        view = self._reserve(len(payload))
        view[:] = payload
        return view

    def begin_temp(self) -> int:
        """Return a marker to roll the arena back to with :meth:`end_temp`."""
        return self.pointer

    def end_temp(self, pointer: int) -> None:
        """Release everything pushed since ``pointer`` was taken."""
        if not 0 <= pointer <= self.capacity:
            raise ValueError(f"pointer {pointer} is outside the arena")
        self.pointer = pointer

    def reset(self) -> None:
        """Release everything in the arena."""
        self.pointer = 0