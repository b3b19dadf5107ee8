"""Text helpers: whitespace handling, hexadecimal parsing and UTF-8 lead bytes."""

from __future__ import annotations

import logging

_log = logging.getLogger(__name__)

WHITESPACE = " \n\t\f\r\v"
_WHITESPACE_BYTES = frozenset(WHITESPACE.encode("ascii"))

_HEX_DIGITS = {
    **{ch: value for value, ch in enumerate("0123456789")},
    **{ch: value + 10 for value, ch in enumerate("abcdef")},
    **{ch: value + 10 for value, ch in enumerate("ABCDEF")},
}

_U32_MASK = 0xFFFFFFFF


def is_whitespace(c: str | bytes | int) -> bool:
    """Return True if ``c`` is one of space, newline, tab, form feed, CR or VT."""
    if isinstance(c, int):
        return c in _WHITESPACE_BYTES
    if isinstance(c, (bytes, bytearray)):
        return len(c) == 1 and c[0] in _WHITESPACE_BYTES
    return len(c) == 1 and c in WHITESPACE


def strip_whitespace(text: str | bytes | bytearray) -> str | bytes:
    """Remove every whitespace character from ``text``, wherever it occurs."""
    if isinstance(text, str):
        return "".join(ch for ch in text if ch not in WHITESPACE)
    return bytes(b for b in text if b not in _WHITESPACE_BYTES)


def parse_hex_u32(text: str | bytes | bytearray) -> int:
    """Parse ``text`` as unsigned 32-bit hexadecimal.

    The result wraps modulo 2**32. Any character that is not a hex digit
    makes the whole result 0.
    """
    if isinstance(text, (bytes, bytearray)):
        text = text.decode("latin-1")
    result = 0
    for ch in text:
        digit = _HEX_DIGITS.get(ch)
        if digit is None:
            return 0
        result = (result * 16 + digit) & _U32_MASK
    return result


def utf8_char_length(byte: int) -> int:
    """Return the length of the UTF-8 sequence that starts with ``byte``.

    A byte that cannot start a sequence is reported and counted as 1.
    """
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"not a byte value: {byte}")
    if byte <= 0x7F:
        return 1
    if byte & 0b11110000 == 0b11110000:
        return 4
    if byte & 0b11100000 == 0b11100000:
        return 3
    if byte & 0b11000000 == 0b11000000:
        return 2
    _log.error("Not a valid utf8 character: %u", byte)
    return 1