"""Byte-sequence and fixed-width integer rotation helpers."""

from __future__ import annotations

import random
from collections.abc import Iterable, MutableSequence
from typing import Any


def contains(items: Iterable[Any], target: Any) -> bool:
    """Return whether ``target`` occurs in ``items``."""
    return target in items


def random_bytes(n: int) -> bytes:
    """Return ``n`` pseudo-random bytes; a non-positive ``n`` gives ``b""``."""
    if n <= 0:
        return b""
    return random.randbytes(n)


def reverse_range(data: MutableSequence, start: int, end: int) -> None:
    """Reverse ``data[start..end]`` (both bounds inclusive) in place."""
    if start < end:
        data[start : end + 1] = data[start : end + 1][::-1]


def left_rotate(data: MutableSequence, d: int) -> None:
    """Rotate ``data`` left by ``d`` positions in place."""
    n = len(data)
    if not n:
        return
    d %= n
    data[:] = data[d:] + data[:d]


def right_rotate(data: MutableSequence, d: int) -> None:
    """Rotate ``data`` right by ``d`` positions in place."""
    n = len(data)
    if not n:
        return
    left_rotate(data, n - d % n)


def _rotl(value: int, d: int, width: int) -> int:
    mask = (1 << width) - 1
    d &= width - 1
    value &= mask
    return ((value << d) | (value >> (width - d))) & mask


def _rotr(value: int, d: int, width: int) -> int:
    mask = (1 << width) - 1
    d &= width - 1
    value &= mask
    return ((value >> d) | (value << (width - d))) & mask


def rotl8(value: int, d: int) -> int:
    """Rotate an 8-bit value left by ``d`` (mod 8) bits."""
    return _rotl(value, d, 8)


def rotr8(value: int, d: int) -> int:
    """Rotate an 8-bit value right by ``d`` (mod 8) bits."""
    return _rotr(value, d, 8)


def rotl32(value: int, d: int) -> int:
    """Rotate a 32-bit value left by ``d`` (mod 32) bits."""
    return _rotl(value, d, 32)


def rotr32(value: int, d: int) -> int:
    """Rotate a 32-bit value right by ``d`` (mod 32) bits."""
    return _rotr(value, d, 32)


def rotl64(value: int, d: int) -> int:
    """Rotate a 64-bit value left by ``d`` (mod 64) bits."""
    return _rotl(value, d, 64)


def rotr64(value: int, d: int) -> int:
    """Rotate a 64-bit value right by ``d`` (mod 64) bits."""
    return _rotr(value, d, 64)