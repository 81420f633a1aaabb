import pytest

from vaultkit.bits import (
    contains,
    left_rotate,
    random_bytes,
    reverse_range,
    right_rotate,
    rotl8,
    rotl32,
    rotl64,
    rotr8,
    rotr32,
    rotr64,
)


def test_contains():
    items = ["a", "b", "c"]
    assert contains(items, "b") is True
    assert contains(items, "z") is False


def test_random_bytes_length():
    assert len(random_bytes(16)) == 16


@pytest.mark.parametrize("n", [0, -3])
def test_random_bytes_non_positive(n):
    assert random_bytes(n) == b""


def test_reverse_range_inclusive():
    data = bytearray(b"abcdef")
    reverse_range(data, 1, 4)
    assert data[0:1] == b"a"
    assert data[1:5] == b"bcde"[::-1]
    assert data[5:] == b"f"


def test_reverse_range_empty_span_unchanged():
    data = bytearray(b"abcdef")
    reverse_range(data, 3, 3)
    assert data == bytearray(b"abcdef")


def test_left_rotate():
    data = bytearray(range(8))
    left_rotate(data, 3)
    assert data == bytearray(range(3, 8)) + bytearray(range(3))


def test_right_rotate_undoes_left_rotate():
    data = list(range(10))
    left_rotate(data, 4)
    right_rotate(data, 4)
    assert data == list(range(10))


def test_rotate_full_length_is_identity():
    data = bytearray(b"wxyz")
    left_rotate(data, 4)
    assert data == bytearray(b"wxyz")


@pytest.mark.parametrize(
    "rotl,rotr,value",
    [(rotl8, rotr8, 0xA5), (rotl32, rotr32, 0xDEADBEEF), (rotl64, rotr64, 0x0123456789ABCDEF)],
)
@pytest.mark.parametrize("d", [0, 1, 5, 7, 13, 31])
def test_rotation_round_trip(rotl, rotr, value, d):
    assert rotr(rotl(value, d), d) == value


def test_rotation_wraps_by_width():
    assert rotl32(0x12345678, 32) == 0x12345678
    assert rotl8(0x5A, 8) == 0x5A
    assert rotr64(0x0123456789ABCDEF, 64) == 0x0123456789ABCDEF


def test_rotation_moves_top_bit():
    assert rotl32(0x80000000, 1) == 1
    assert rotr32(1, 1) == 0x80000000
    assert rotl64(1, 63) == 1 << 63
    assert rotl8(0x81, 1) == 0x03