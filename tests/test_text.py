import logging

import pytest

from bana.text import is_whitespace, parse_hex_u32, strip_whitespace, utf8_char_length


@pytest.mark.parametrize("c", [" ", "\n", "\t", "\f", "\r", "\v"])
def test_whitespace_characters(c):
    assert is_whitespace(c) is True
    assert is_whitespace(ord(c)) is True
    assert is_whitespace(c.encode()) is True


@pytest.mark.parametrize("c", ["a", "0", "_", "", "  "])
def test_non_whitespace(c):
    assert is_whitespace(c) is False


def test_strip_whitespace_str():
    assert strip_whitespace(" a\tb\nc \r\v\f") == "abc"


def test_strip_whitespace_bytes():
    assert strip_whitespace(b"  12 34\n") == b"1234"


def test_strip_whitespace_invariant():
    text = "\t hello  world \n and\fmore\r\n"
    stripped = strip_whitespace(text)
    assert not any(is_whitespace(ch) for ch in stripped)
    assert stripped == "".join(ch for ch in text if not ch.isspace())


def test_strip_whitespace_empty():
    assert strip_whitespace("") == ""
    assert strip_whitespace(" \n\t") == ""


@pytest.mark.parametrize("value", [0, 1, 9, 10, 15, 16, 0xABCD, 0xDEADBEEF, 0xFFFFFFFF])
def test_parse_hex_round_trip(value):
    assert parse_hex_u32(format(value, "x")) == value
    assert parse_hex_u32(format(value, "X")) == value
    assert parse_hex_u32(format(value, "x").encode()) == value


def test_parse_hex_empty_is_zero():
    assert parse_hex_u32("") == 0


@pytest.mark.parametrize("text", ["xyz", "12g4", "0x10", "-1", " ff"])
def test_parse_hex_invalid_gives_zero(text):
    assert parse_hex_u32(text) == 0


def test_parse_hex_wraps_to_32_bits():
    assert parse_hex_u32("1" + "0" * 8) == 0
    assert parse_hex_u32("1" + "deadbeef") == 0xDEADBEEF


@pytest.mark.parametrize("ch", ["a", "\x7f", "é", "ß", "€", "日", "😀", "\U0010ffff"])
def test_utf8_char_length_matches_encoding(ch):
    encoded = ch.encode("utf-8")
    assert utf8_char_length(encoded[0]) == len(encoded)


def test_utf8_continuation_byte_counts_as_one(caplog):
    continuation = "é".encode("utf-8")[1]
    with caplog.at_level(logging.ERROR):
        assert utf8_char_length(continuation) == 1
    assert any("Not a valid utf8 character" in r.getMessage() for r in caplog.records)


def test_utf8_char_length_rejects_non_bytes():
    with pytest.raises(ValueError):
        utf8_char_length(256)
    with pytest.raises(ValueError):
        utf8_char_length(-1)