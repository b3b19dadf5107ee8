"""Fixed-capacity containers: arrays, builders, bucket arrays, open-addressed maps and free lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


class CapacityError(Exception):
    """Raised when a fixed-capacity container has no room for more items."""


def _normalise_index(index: int, size: int) -> int:
    if not isinstance(index, int):
        raise TypeError(f"indices must be integers, not {type(index).__name__}")
    if index < 0:
        index += size
    if not 0 <= index < size:
        raise IndexError(f"index {index} out of range for size {size}")
    return index


class FixedArray(Generic[T]):
    """A list that never grows beyond the capacity it was made with."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[T] = []

    def append(self, item: T) -> int:
        """Add ``item`` at the end and return its index."""
        if len(self._items) == self.capacity:
            raise CapacityError(f"fixed array is full (capacity {self.capacity})")
        self._items.append(item)
        return len(self._items) - 1

    def extend(self, items: Iterable[T]) -> None:
        """Add all of ``items`` at the end, or none of them if they do not fit."""
        new_items = list(items)
        if len(self._items) + len(new_items) > self.capacity:
            raise CapacityError(
                f"cannot add {len(new_items)} items to a fixed array holding "
                f"{len(self._items)} of {self.capacity}"
            )
        self._items.extend(new_items)

    def remove(self, index: int) -> T:
        """Remove and return the item at ``index``, shifting later items down."""
        return self._items.pop(_normalise_index(index, len(self._items)))

    def copy_from(self, other: FixedArray[T]) -> None:
        """Replace this array's contents with those of ``other``."""
        if self.capacity < len(other):
            raise CapacityError(
                f"cannot copy {len(other)} items into capacity {self.capacity}"
            )
        self._items = list(other)

    def __getitem__(self, index: int) -> T:
        return self._items[_normalise_index(index, len(self._items))]

    def __setitem__(self, index: int, value: T) -> None:
        self._items[_normalise_index(index, len(self._items))] = value

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"FixedArray(capacity={self.capacity}, items={self._items!r})"


class BufferBuilder(Generic[T]):
    """Accumulates items into a buffer of fixed capacity."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self.data: list[T] = []

    def extend(self, items: Iterable[T]) -> None:
        """Append all of ``items``, or none of them if they do not fit."""
        new_items = list(items)
        if len(self.data) + len(new_items) > self.capacity:
            raise CapacityError(
                f"cannot add {len(new_items)} items to a buffer holding "
                f"{len(self.data)} of {self.capacity}"
            )
        self.data.extend(new_items)

    def append(self, item: T) -> None:
        """Append a single item."""
        self.extend((item,))

    def __len__(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class BucketLocator:
    """Where an item lives inside a :class:`BucketArray`."""

    bucket_index: int
    slot_index: int


@dataclass
class _Bucket:
    index: int
    items: list[Any]
    occupied: list[bool]
    filled_count: int = 0


class BucketArray(Generic[T]):
    """Stores items in fixed-size buckets so that locators stay valid across removals."""

    def __init__(self, bucket_capacity: int) -> None:
        if bucket_capacity <= 0:
            raise ValueError("bucket_capacity must be positive")
        self.bucket_capacity = bucket_capacity
        self._buckets: list[_Bucket] = []
        self._unfull: list[_Bucket] = []
        self._size = 0

    def insert(self, item: T) -> BucketLocator:
        """Store ``item`` in the first free slot and return where it went."""
        if not self._unfull:
            bucket = _Bucket(
                index=len(self._buckets),
                items=[None] * self.bucket_capacity,
                occupied=[False] * self.bucket_capacity,
            )
            self._buckets.append(bucket)
            self._unfull.append(bucket)

        bucket = self._unfull[0]
        slot = bucket.occupied.index(False)
        bucket.occupied[slot] = True
        bucket.items[slot] = item
        bucket.filled_count += 1
        self._size += 1
        if bucket.filled_count == self.bucket_capacity:
            self._unfull.pop(0)
        return BucketLocator(bucket.index, slot)

    def _bucket_for(self, locator: BucketLocator) -> _Bucket:
        if not 0 <= locator.bucket_index < len(self._buckets):
            raise KeyError(locator)
        bucket = self._buckets[locator.bucket_index]
        if not 0 <= locator.slot_index < self.bucket_capacity:
            raise KeyError(locator)
        if not bucket.occupied[locator.slot_index]:
            raise KeyError(locator)
        return bucket

    def remove(self, locator: BucketLocator) -> None:
        """Free the slot at ``locator``."""
        bucket = self._bucket_for(locator)
        if bucket.filled_count == self.bucket_capacity:
            self._unfull.append(bucket)
        bucket.occupied[locator.slot_index] = False
        bucket.items[locator.slot_index] = None
        bucket.filled_count -= 1
        self._size -= 1

    def __getitem__(self, locator: BucketLocator) -> T:
        return self._bucket_for(locator).items[locator.slot_index]

    def __setitem__(self, locator: BucketLocator, value: T) -> None:
        self._bucket_for(locator).items[locator.slot_index] = value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        for bucket in self._buckets:
            for occupied, item in zip(bucket.occupied, bucket.items):
                if occupied:
                    yield item


@dataclass
class _Entry:
    key: Any
    value: Any = field(default=None)


def _key_bytes(key: Any) -> bytes:
    if isinstance(key, (bytes, bytearray, memoryview)):
        return bytes(key)
    if isinstance(key, str):
        return key.encode("utf-8")
    if isinstance(key, int):
        if _I64_MIN <= key <= _I64_MAX:
            return key.to_bytes(8, "little", signed=True)
        length = (key.bit_length() + 8) // 8
        return key.to_bytes(length, "little", signed=True)
    return (hash(key) & 0xFFFFFFFFFFFFFFFF).to_bytes(8, "little")


class FixedMap:
    """An open-addressed map with linear probing and a fixed number of slots.

    ``put`` never overwrites: a key put twice occupies two slots, and ``get``
    finds the one nearest the key's home slot.
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._slots: list[_Entry | None] = [None] * capacity
        self._size = 0

    def hash(self, key: Any) -> int:
        """Return the home slot of ``key``: the sum of its bytes modulo the capacity."""
        return (sum(_key_bytes(key)) & 0xFFFFFFFF) % self.capacity

    def _probe(self, key: Any) -> Iterator[int]:
        start = self.hash(key)
        for step in range(self.capacity):
            yield (start + step) % self.capacity

    def _claim(self, key: Any, value: Any) -> None:
        if self._size == self.capacity:
            raise CapacityError(f"map is full (capacity {self.capacity})")
        for slot in self._probe(key):
            if self._slots[slot] is None:
                self._slots[slot] = _Entry(key, value)
                self._size += 1
                return
        raise CapacityError(f"map is full (capacity {self.capacity})")

    def _find(self, key: Any) -> int | None:
        for slot in self._probe(key):
            entry = self._slots[slot]
            if entry is not None and entry.key == key:
                return slot
        return None

    def put(self, key: Any, value: Any) -> None:
        """Store ``value`` under ``key`` in the first free slot from its home."""
        self._claim(key, value)

    def slot_in(self, key: Any) -> None:
        """Reserve a slot for ``key`` without giving it a value."""
        self._claim(key, None)

    def remove(self, key: Any) -> None:
        """Free the slot holding ``key``."""
        slot = self._find(key) if self._size else None
        if slot is None:
            raise KeyError(key)
        self._slots[slot] = None
        self._size -= 1

    def get(self, key: Any) -> Any:
        """Return the value stored under ``key``, or None if it is absent."""
        slot = self._find(key)
        return None if slot is None else self._slots[slot].value

    def __contains__(self, key: Any) -> bool:
        return self._find(key) is not None

    def __iter__(self) -> Iterator[Any]:
        return (entry.key for entry in self._slots if entry is not None)

    def __len__(self) -> int:
        return self._size


class FixedStringMap(FixedMap):
    """A :class:`FixedMap` whose keys are strings or byte strings."""

    def hash(self, key: str | bytes) -> int:
        """Return the home slot of ``key``: the sum of its characters modulo the capacity."""
        if isinstance(key, str):
            data = key.encode("utf-8")
        elif isinstance(key, (bytes, bytearray, memoryview)):
            data = bytes(key)
        else:
            raise TypeError(f"string map keys must be str or bytes, not {type(key).__name__}")
        return (sum(data) & 0xFFFFFFFF) % self.capacity


class FreeList:
    """Hands out fixed-size slots of a byte buffer, addressed by byte offset."""

    def __init__(self, item_size: int, capacity: int) -> None:
        if item_size <= 0:
            raise ValueError("item_size must be positive")
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.item_size = item_size
        self.capacity = capacity
        self.data = bytearray(item_size * capacity)
        self._occupied = [False] * capacity

    def alloc(self, size: int) -> int | None:
        """Claim the first free slot and return its offset, or None if all are taken."""
        if size != self.item_size:
            raise ValueError(f"free list hands out {self.item_size}-byte items, not {size}")
        try:
            slot = self._occupied.index(False)
        except ValueError:
            return None
        self._occupied[slot] = True
        return slot * self.item_size

    def _slot(self, offset: int) -> int:
        if not 0 <= offset < len(self.data):
            raise ValueError(f"offset {offset} is outside the free list")
        if offset % self.item_size:
            raise ValueError(f"offset {offset} is not on an item boundary")
        return offset // self.item_size

    def free(self, offset: int) -> None:
        """Return the slot at ``offset`` to the list."""
        self._occupied[self._slot(offset)] = False

    def view(self, offset: int) -> memoryview:
        """Return a writable view of the slot at ``offset``."""
        slot = self._slot(offset)
        start = slot * self.item_size
        return memoryview(self.data)[start : start + self.item_size]