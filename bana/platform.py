"""File, sleep and timing helpers."""

from __future__ import annotations

import logging
import os
import threading
import time
from collections.abc import Iterator
from contextlib import contextmanager
from typing import BinaryIO

_log = logging.getLogger(__name__)

MAX_OPEN_FILES = 32

_slots: list[File | None] = [None] * MAX_OPEN_FILES
_slots_lock = threading.Lock()


class TooManyFilesError(OSError):
    """Raised when every slot for files opened for writing is taken."""


class File:
    """A file opened for writing by :func:`open_file_write`."""

    def __init__(self, path: str | os.PathLike[str], handle: BinaryIO, slot: int) -> None:
        self.path = os.fspath(path)
        self._handle: BinaryIO | None = handle
        self._slot = slot

    @property
    def closed(self) -> bool:
        return self._handle is None

    def __enter__(self) -> File:
        return self

    def __exit__(self, *exc_info: object) -> None:
        close_file(self)

    def __repr__(self) -> str:
        state = "closed" if self.closed else "open"
        return f"File({self.path!r}, {state})"


def open_file_write(path: str | os.PathLike[str]) -> File:
    """Create or truncate ``path`` and return it open for writing.

    At most :data:`MAX_OPEN_FILES` files may be open at once.
    """
    try:
        handle = open(path, "wb")
    except OSError:
        _log.error("Failed to open file for writing!")
        raise

    with _slots_lock:
        for slot, occupant in enumerate(_slots):
            if occupant is None:
                file = File(path, handle, slot)
                _slots[slot] = file
                return file

    handle.close()
    _log.error("Too many files open!")
    raise TooManyFilesError(f"no more than {MAX_OPEN_FILES} files may be open at once")


def write_entire_file(path: str | os.PathLike[str], data: bytes | bytearray | memoryview) -> None:
    """Replace the contents of ``path`` with ``data``."""
    with open(path, "wb") as handle:
        handle.write(data)


def append_file(file: File, data: bytes | bytearray | memoryview) -> None:
    """Write ``data`` at the end of what has been written to ``file`` so far."""
    if file._handle is None:
        raise ValueError(f"cannot write to closed file {file.path!r}")
    file._handle.write(data)


def close_file(file: File) -> None:
    """Close ``file`` and release its slot. Closing twice does nothing."""
    handle = file._handle
    if handle is None:
        return
    file._handle = None
    try:
        handle.close()
    finally:
        with _slots_lock:
            if _slots[file._slot] is file:
                _slots[file._slot] = None


def read_entire_file(path: str | os.PathLike[str]) -> bytes | None:
    """Return the whole contents of ``path``, or None if it cannot be read."""
    try:
        with open(path, "rb") as handle:
            return handle.read()
    except OSError:
        return None


def file_exists(path: str | os.PathLike[str]) -> bool:
    """Return True if ``path`` names an existing file that is not a directory."""
    return os.path.exists(path) and not os.path.isdir(path)


def sleep(seconds: float) -> None:
    """Suspend the calling thread for ``seconds``."""
    if seconds < 0:
        raise ValueError("sleep time must not be negative")
    time.sleep(seconds)


def get_current_time() -> float:
    """Return a monotonic, high-resolution time in seconds."""
    return time.perf_counter()


@contextmanager
def timed_block(name: str) -> Iterator[None]:
    """Log how long the enclosed block took, in milliseconds."""
    start = get_current_time()
    try:
        yield
    finally:
        elapsed_ms = (get_current_time() - start) * 1000.0
        _log.info('Timed block "%s" took %fms!', name, elapsed_ms)