import pytest

from bana.arena import Arena, OutOfMemoryError


def test_push_array_advances_pointer():
    arena = Arena(64)
    view = arena.push_array(4, 3)
    assert len(view) == 12
    assert arena.pointer == 12
    second = arena.push_array(2, 2)
    assert len(second) == 4
    assert arena.pointer == 16


def test_push_array_view_writes_into_arena():
    arena = Arena(16)
    arena.push_array(1, 4)
    view = arena.push_array(1, 3)
    view[:] = b"xyz"
    assert bytes(arena.data[4:7]) == b"xyz"


def test_push_array_out_of_memory():
    arena = Arena(10)
    arena.push_array(4, 2)
    with pytest.raises(OutOfMemoryError):
        arena.push_array(4, 1)
    assert arena.pointer == 8


def test_push_array_exact_fit():
    arena = Arena(12)
    view = arena.push_array(3, 4)
    assert len(view) == arena.capacity
    assert arena.pointer == arena.capacity
    with pytest.raises(OutOfMemoryError):
        arena.push_array(1, 1)


def test_push_struct_copies_bytes():
    arena = Arena(32)
    payload = bytearray(b"hello")
    view = arena.push_struct(payload)
    payload[0] = ord("j")
    assert bytes(view) == b"hello"
    assert bytes(arena.data[:5]) == b"hello"
    assert arena.pointer == len(b"hello")


def test_push_struct_out_of_memory():
    arena = Arena(4)
    with pytest.raises(OutOfMemoryError):
        arena.push_struct(b"too long")
    assert arena.pointer == 0


def test_temp_memory_rolls_back():
    arena = Arena(32)
    arena.push_struct(b"keep")
    marker = arena.begin_temp()
    arena.push_struct(b"scratch data")
    assert arena.pointer > marker
    arena.end_temp(marker)
    assert arena.pointer == marker
    again = arena.push_struct(b"next")
    assert bytes(arena.data[marker : marker + 4]) == bytes(again)


def test_end_temp_rejects_out_of_range():
    arena = Arena(8)
    with pytest.raises(ValueError):
        arena.end_temp(9)
    with pytest.raises(ValueError):
        arena.end_temp(-1)


def test_reset():
    arena = Arena(8)
    arena.push_array(1, 8)
    arena.reset()
    assert arena.pointer == 0
    assert len(arena.push_array(8, 1)) == 8


def test_negative_arguments_rejected():
    arena = Arena(8)
    with pytest.raises(ValueError):
        arena.push_array(-1, 2)
    with pytest.raises(ValueError):
        Arena(-1)