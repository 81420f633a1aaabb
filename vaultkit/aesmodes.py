"""AES encryption and decryption of whole messages in ECB, CBC and CTR modes."""

from __future__ import annotations

from enum import IntEnum
from typing import Optional, Sequence, Union

from .aescipher import BLOCK_LEN, decrypt_block, encrypt_block, increment_counter, key_schedule


class Mode(IntEnum):
    """Block cipher modes of operation."""

    ECB = 0
    CBC = 1
    CTR = 2


ModeLike = Union[Mode, int]


def _resolve(mode: ModeLike) -> Mode:
    try:
        return Mode(mode)
    except ValueError:
        return Mode.ECB


def _require_iv(iv: Optional[bytes], mode: Mode) -> bytes:
    if iv is None:
        raise ValueError(f"{mode.name} mode needs an iv")
    if len(iv) != BLOCK_LEN:
        raise ValueError(f"iv must be {BLOCK_LEN} bytes, got {len(iv)}")
    return bytes(iv)


def _ctr_apply(data: bytes, subkeys: Sequence[bytes], iv: bytes) -> bytes:
    out = bytearray()
    counter = iv
    for offset in range(0, len(data), BLOCK_LEN):
        stream = encrypt_block(counter, subkeys)
        chunk = data[offset : offset + BLOCK_LEN]
        out += bytes(a ^ b for a, b in zip(chunk, stream))
        counter = increment_counter(counter)
    return bytes(out)


def encrypt_with_schedule(
    data: bytes,
    subkeys: Sequence[bytes],
    mode: ModeLike = Mode.ECB,
    iv: Optional[bytes] = None,
) -> bytes:
    """Encrypt ``data`` with precomputed round keys.

    ECB and CBC always append PKCS#5 padding, so the result is a whole
    number of blocks and at least one block longer than a multiple-of-16
    input. CTR output has the same length as the input. Unknown modes
    fall back to ECB.
    """
    data = bytes(data)
    if not data:
        return b""
    resolved = _resolve(mode)
    if resolved is Mode.CTR:
        return _ctr_apply(data, subkeys, _require_iv(iv, resolved))

    previous = _require_iv(iv, resolved) if resolved is Mode.CBC else None
    out = bytearray()
    for index in range(len(data) // BLOCK_LEN + 1):
        chunk = data[index * BLOCK_LEN : (index + 1) * BLOCK_LEN]
        block = encrypt_block(chunk, subkeys, previous)
        if resolved is Mode.CBC:
            previous = block
        out += block
    return bytes(out)


def decrypt_with_schedule(
    data: bytes,
    subkeys: Sequence[bytes],
    mode: ModeLike = Mode.ECB,
    iv: Optional[bytes] = None,
) -> bytes:
    """Decrypt ``data`` with precomputed round keys, removing ECB/CBC padding.

    Raises ValueError when ECB/CBC input is not a whole number of blocks or
    its padding is invalid.
    """
    data = bytes(data)
    if not data:
        return b""
    resolved = _resolve(mode)
    if resolved is Mode.CTR:
        return _ctr_apply(data, subkeys, _require_iv(iv, resolved))

    if len(data) % BLOCK_LEN:
        raise ValueError(f"ciphertext length {len(data)} is not a multiple of {BLOCK_LEN}")
    previous = _require_iv(iv, resolved) if resolved is Mode.CBC else None
    out = bytearray()
    for offset in range(0, len(data), BLOCK_LEN):
        block = data[offset : offset + BLOCK_LEN]
        out += decrypt_block(block, subkeys, previous)
        if resolved is Mode.CBC:
            previous = block
    padding = out[-1]
    if not 1 <= padding <= BLOCK_LEN:
        raise ValueError(f"invalid padding byte {padding}")
    return bytes(out[:-padding])


def encrypt(
    data: bytes,
    key: bytes,
    key_bits: int = 128,
    mode: ModeLike = Mode.ECB,
    iv: Optional[bytes] = None,
) -> bytes:
    """Encrypt ``data`` under ``key`` (AES-128, -192 or -256 by ``key_bits``)."""
    if not data:
        return b""
    return encrypt_with_schedule(data, key_schedule(key, key_bits), mode, iv)


def decrypt(
    data: bytes,
    key: bytes,
    key_bits: int = 128,
    mode: ModeLike = Mode.ECB,
    iv: Optional[bytes] = None,
) -> bytes:
    """Decrypt ``data`` under ``key`` (AES-128, -192 or -256 by ``key_bits``)."""
    if not data:
        return b""
    return decrypt_with_schedule(data, key_schedule(key, key_bits), mode, iv)