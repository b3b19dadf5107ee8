"""A cursor over a byte buffer for hand-written parsers."""

from __future__ import annotations

import math
import re
import struct

_FLOAT_RE = re.compile(
    rb"[ \t\n\v\f\r]*"
    rb"([+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_INT_RE = re.compile(rb"[ \t\n\v\f\r]*([+-]?[0-9]+)")

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1

_U16 = struct.Struct("<H")
_U32 = struct.Struct("<I")
_U64 = struct.Struct("<Q")
_F32 = struct.Struct("<f")


def _as_byte(c: str | bytes | int) -> int:
    if isinstance(c, int):
        if not 0 <= c <= 0xFF:
            raise ValueError(f"not a byte value: {c}")
        return c
    if isinstance(c, str):
        c = c.encode("latin-1")
    if len(c) != 1:
        raise ValueError("expected a single character")
    return c[0]


def _to_f32(value: float) -> float:
    try:
        return _F32.unpack(_F32.pack(value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


class BufferReader:
    """Reads through a byte buffer, tracking a cursor position.

    Integer reads are little-endian and return None when too few bytes remain.
    Views returned by the ``view_*`` methods share memory with the buffer.
    """

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        self._data = bytes(data)
        self._view = memoryview(self._data)
        self.size = len(self._data)
        self.cursor = 0

    @property
    def data(self) -> bytes:
        return self._data

    def has_more_data(self) -> bool:
        return self.cursor < self.size

    def consume(self, c: str | bytes | int) -> bool:
        """Advance past ``c`` if it is the current character."""
        if not self.has_more_data() or self._data[self.cursor] != _as_byte(c):
            return False
        self.cursor += 1
        return True

    def current(self) -> bytes:
        """Return the character at the cursor, or a NUL byte past the end."""
        if not self.has_more_data():
            return b"\0"
        return self._data[self.cursor : self.cursor + 1]

    def next(self) -> bytes:
        """Return the character after the cursor, or a NUL byte if there is none."""
        if self.cursor + 1 >= self.size:
            return b"\0"
        return self._data[self.cursor + 1 : self.cursor + 2]

    def _read(self, layout: struct.Struct) -> int | None:
        if self.cursor + layout.size > self.size:
            return None
        (value,) = layout.unpack_from(self._data, self.cursor)
        self.cursor += layout.size
        return value

    def read16(self) -> int | None:
        return self._read(_U16)

    def read32(self) -> int | None:
        return self._read(_U32)

    def read64(self) -> int | None:
        return self._read(_U64)

    def read_bytes(self, num_bytes: int) -> memoryview | None:
        """Return a view of the next ``num_bytes`` bytes, or None if too few remain."""
        if num_bytes < 0:
            raise ValueError("num_bytes must not be negative")
        if self.cursor + num_bytes > self.size:
            return None
        start = self.cursor
        self.cursor += num_bytes
        return self._view[start : self.cursor]

    def skip_to_next(self, c: str | bytes | int) -> int:
        """Move the cursor onto the next ``c`` (or the end); return bytes skipped."""
        start = self.cursor
        if start >= self.size:
            return 0
        pos = self._data.find(_as_byte(c), start)
        if pos == -1:
            pos = self.size
        self.cursor = pos
        return pos - start

    def skip_to_after(self, c: str | bytes | int) -> int:
        """Move the cursor just past the next ``c``; return bytes skipped.

        When ``c`` is absent the cursor ends one past the end of the buffer.
        """
        skipped = self.skip_to_next(c)
        self.cursor += 1
        return skipped + 1

    def skip_to_after_sequence(self, seq: bytes | str) -> int:
        """Move the cursor just past the next occurrence of ``seq``; return bytes skipped.

        When ``seq`` is absent the cursor ends ``len(seq)`` past the end.
        """
        if isinstance(seq, str):
            seq = seq.encode("latin-1")
        start = self.cursor
        pos = self._data.find(seq, start) if start < self.size else -1
        if pos == -1:
            pos = max(start, self.size)
        self.cursor = pos + len(seq)
        return pos - start + len(seq)

    def slice_until(self, c: str | bytes | int) -> bytes:
        """Return a copy of the bytes up to the next ``c``, leaving the cursor on it."""
        return bytes(self.view_until(c))

    def view_until(self, c: str | bytes | int) -> memoryview:
        """Return a view of the bytes up to the next ``c``, leaving the cursor on it."""
        start = self.cursor
        length = self.skip_to_next(c)
        return self._view[start : start + length]

    def view_until_after(self, c: str | bytes | int) -> memoryview:
        """Return a view of the bytes up to and including the next ``c``."""
        start = self.cursor
        length = self.skip_to_after(c)
        return self._view[start : start + length]

    def view_next_line(self) -> memoryview:
        """Return the rest of the current line without its newline, and move past it."""
        line = self.view_until("\n")
        self.consume("\n")
        return line

    def view_next_line_with_newline(self) -> memoryview:
        """Return the rest of the current line including its newline."""
        return self.view_until_after("\n")

    def read_f32(self) -> float:
        """Parse a single-precision float at the cursor; 0.0 if none is there."""
        if not self.has_more_data():
            return 0.0
        match = _FLOAT_RE.match(self._data, self.cursor)
        if match is None:
            return 0.0
        self.cursor = match.end()
        return _to_f32(float(match.group(1)))

    def read_i64(self) -> int:
        """Parse a decimal integer at the cursor, clamped to the signed 64-bit range."""
        if not self.has_more_data():
            return 0
        match = _INT_RE.match(self._data, self.cursor)
        if match is None:
            return 0
        self.cursor = match.end()
        return min(max(int(match.group(1)), _I64_MIN), _I64_MAX)