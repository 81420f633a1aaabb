import pytest

from vaultkit.aescipher import (
    decrypt_block,
    encrypt_block,
    galois_mul,
    increment_counter,
    key_schedule,
)

PLAINTEXT = bytes.fromhex("00112233445566778899aabbccddeeff")


def test_galois_mul_identity_and_zero():
    for value in range(256):
        assert galois_mul(value, 1) == value
        assert galois_mul(1, value) == value
        assert galois_mul(value, 0) == 0


def test_galois_mul_reduction_by_polynomial():
    assert galois_mul(0x80, 2) == 0x1B


def test_galois_mul_commutative():
    for a, b in [(0x57, 0x83), (0x13, 0xFE), (0xAA, 0x55)]:
        assert galois_mul(a, b) == galois_mul(b, a)


def test_galois_mul_rejects_non_bytes():
    with pytest.raises(ValueError):
        galois_mul(256, 1)


@pytest.mark.parametrize("bits,count", [(128, 11), (192, 13), (256, 15), (64, 11)])
def test_key_schedule_lengths(bits, count):
    key = bytes(range(32))
    subkeys = key_schedule(key, bits)
    assert len(subkeys) == count
    assert all(len(k) == 16 for k in subkeys)


def test_key_schedule_starts_with_key():
    key = bytes(range(32))
    subkeys = key_schedule(key, 256)
    assert subkeys[0] + subkeys[1] == key


def test_key_schedule_short_key():
    with pytest.raises(ValueError):
        key_schedule(bytes(16), 256)


def test_aes128_known_vector():
    subkeys = key_schedule(bytes(range(16)), 128)
    assert encrypt_block(PLAINTEXT, subkeys).hex() == "69c4e0d86a7b0430d8cdb78070b4c55a"


def test_aes192_known_vector():
    subkeys = key_schedule(bytes(range(24)), 192)
    assert encrypt_block(PLAINTEXT, subkeys).hex() == "dda97ca4864cdfe06eaf70a0ec0d7191"


def test_aes256_known_vector():
    subkeys = key_schedule(bytes(range(32)), 256)
    assert encrypt_block(PLAINTEXT, subkeys).hex() == "8ea2b7ca516745bfeafc49904b496089"


@pytest.mark.parametrize("bits", [128, 192, 256])
def test_block_round_trip(bits):
    subkeys = key_schedule(bytes(range(1, 33)), bits)
    cipher = encrypt_block(PLAINTEXT, subkeys)
    assert cipher != PLAINTEXT
    assert decrypt_block(cipher, subkeys) == PLAINTEXT


def test_iv_is_xored_before_encryption():
    subkeys = key_schedule(bytes(range(16)))
    iv = bytes(range(100, 116))
    mixed = bytes(a ^ b for a, b in zip(PLAINTEXT, iv))
    assert encrypt_block(PLAINTEXT, subkeys, iv) == encrypt_block(mixed, subkeys)
    assert decrypt_block(encrypt_block(PLAINTEXT, subkeys, iv), subkeys, iv) == PLAINTEXT


def test_short_block_is_padded():
    subkeys = key_schedule(bytes(range(16)))
    assert encrypt_block(b"abc", subkeys) == encrypt_block(b"abc" + bytes([13]) * 13, subkeys)
    assert decrypt_block(encrypt_block(b"abc", subkeys), subkeys) == b"abc" + bytes([13]) * 13


def test_block_size_errors():
    subkeys = key_schedule(bytes(range(16)))
    with pytest.raises(ValueError):
        encrypt_block(bytes(17), subkeys)
    with pytest.raises(ValueError):
        decrypt_block(bytes(15), subkeys)
    with pytest.raises(ValueError):
        encrypt_block(bytes(16), subkeys, iv=bytes(8))


def test_increment_counter_adds():
    counter = bytes(range(16))
    result = increment_counter(counter, 5)
    assert int.from_bytes(result, "big") == int.from_bytes(counter, "big") + 5


def test_increment_counter_carries_and_wraps():
    assert increment_counter(b"\xff" * 16, 1) == bytes(16)
    carried = increment_counter(bytes(14) + b"\x00\xff", 1)
    assert carried == bytes(14) + b"\x01\x00"


def test_increment_counter_bad_length():
    with pytest.raises(ValueError):
        increment_counter(bytes(4))