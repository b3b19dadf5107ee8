# bana

A small toolbox of building blocks for programs that manage their own data
layout: a bump-pointer arena, fixed-capacity containers, a bucket array with
stable locators, open-addressing maps, a free list, a cursor-based reader for
text and binary buffers, and a few file and timing helpers.

It is a library only: it installs no command-line programs. It has no
dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `bana.text`

- `is_whitespace(c)`: true for space, newline, tab, form feed, carriage return and vertical
  tab. Accepts a one-character `str`, a one-byte `bytes`, or a byte value as `int`.
- `strip_whitespace(text)`: removes every whitespace character, not only those at the ends.
  Returns `str` for `str` input and `bytes` otherwise.
- `parse_hex_u32(text)`: parses hexadecimal digits into an unsigned 32-bit value, wrapping
  modulo 2**32. Any character that is not a hex digit makes the result `0`.
- `utf8_char_length(byte)`: the length of the UTF-8 sequence that a leading byte starts.
  A continuation byte is logged as an error and counted as 1; a value outside 0..255 raises
  `ValueError`.

### `bana.arena`

`Arena(capacity)` hands out consecutive regions of one `bytearray` (`arena.data`).
`push_array(size, count)` reserves `size * count` bytes and `push_struct(data)` copies the bytes
of `data` in; both return a writable `memoryview` of the region and raise `OutOfMemoryError`
(a `MemoryError`) when there is no room. `begin_temp()` returns a marker that `end_temp(pointer)`
rolls back to, and `reset()` empties the arena.

```python
from bana.arena import Arena

arena = Arena(64)
mark = arena.begin_temp()
view = arena.push_struct(b"hello")
assert bytes(view) == b"hello"
arena.end_temp(mark)
```

### `bana.reader`

`BufferReader(data)` walks a byte buffer with a `cursor`:

- `read16`, `read32`, `read64` read little-endian unsigned integers and return `None` when too
  few bytes remain; `read_bytes(n)` returns a `memoryview` or `None`.
- `current()` and `next()` return one byte as `bytes`, or `b"\0"` past the end; `consume(c)`
  advances past `c` if it is next.
- `skip_to_next`, `skip_to_after` and `skip_to_after_sequence` move the cursor and return the
  number of bytes skipped.
- `view_until`, `view_until_after`, `view_next_line` and `view_next_line_with_newline` return
  views sharing memory with the buffer; `slice_until` returns a copy.
- `read_f32` parses a single-precision float written as text (0.0 if there is none) and
  `read_i64` a decimal integer clamped to the signed 64-bit range (0 if there is none).
- `has_more_data()` is true while the cursor is inside the buffer.

```python
from bana.reader import BufferReader

reader = BufferReader(b"v 1.5 2\n")
reader.consume("v")
x = reader.read_f32()   # 1.5
n = reader.read_i64()   # 2
```

### `bana.containers`

- `FixedArray(capacity)`: a list that raises `CapacityError` rather than grow past its capacity.
  `append` returns the new index, `extend` adds all items or none, `remove(index)` pops and
  shifts, `copy_from(other)` replaces the contents.
- `BufferBuilder(capacity)`: accumulates items in `data` with `append` and `extend`, under the
  same capacity rule.
- `BucketArray(bucket_capacity)`: stores items in fixed-size buckets. `insert` returns a
  `BucketLocator(bucket_index, slot_index)` that stays valid until that item is removed;
  index with the locator to read or write the item. Unknown or freed locators raise `KeyError`.
- `FixedMap(capacity)` and `FixedStringMap(capacity)`: linear-probing hash maps with a fixed
  number of slots. A key's home slot is the sum of its bytes modulo the capacity. `put` never
  overwrites: putting a key twice takes two slots. `slot_in(key)` reserves a slot with no
  value, `get` returns the value or `None`, `remove` raises `KeyError` for a missing key, and a
  full map raises `CapacityError`. `FixedStringMap` accepts only `str` or `bytes` keys.
- `FreeList(item_size, capacity)`: hands out equal-size slots of one `bytearray`. `alloc(size)`
  returns a byte offset (or `None` when full), `free(offset)` gives it back and `view(offset)`
  returns a writable view of the slot.

### `bana.platform`

- `read_entire_file(path)`: the whole file as `bytes`, or `None` if it cannot be read.
- `write_entire_file(path, data)`: replaces the file's contents.
- `open_file_write(path)`: creates or truncates a file and returns a `File`, usable as a context
  manager. At most `MAX_OPEN_FILES` (32) may be open at once; beyond that `TooManyFilesError`
  is raised. Write to it with `append_file(file, data)` and close it with `close_file(file)`.
- `file_exists(path)`: true for an existing path that is not a directory.
- `sleep(seconds)` and `get_current_time()` (a monotonic clock in seconds).
- `timed_block(name)`: a context manager that logs, at info level, how many milliseconds its
  body took.

```python
from bana.platform import timed_block, write_entire_file, read_entire_file

with timed_block("save"):
    write_entire_file("out.bin", b"\x01\x02")
data = read_entire_file("out.bin")
```