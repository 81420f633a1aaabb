"""Hexadecimal and endian conversions for byte strings."""

from __future__ import annotations

import string

_HEX_DIGITS = frozenset(string.hexdigits)
_WORD = 4


def scan_hex(text: str, length: int | None = None) -> bytes:
    """Parse ``length`` bytes of hexadecimal ``text``.

    ``length`` defaults to half the text length. Raises ValueError on a
    non-hex character or when the text is too short.
    """
    if length is None:
        length = len(text) // 2
    segment = text[: 2 * length]
    if len(segment) < 2 * length:
        raise ValueError(f"need {2 * length} hex digits, got {len(segment)}")
    bad = next((c for c in segment if c not in _HEX_DIGITS), None)
    if bad is not None:
        raise ValueError(f"invalid hex digit {bad!r}")
    return bytes.fromhex(segment)


def format_bytes(data: bytes, delimiter: str = "", word_size: int = 0) -> str:
    """Format ``data`` as uppercase hex, placing ``delimiter`` between words.

    A ``word_size`` of 0 treats the whole input as one word.
    """
    if not data:
        return ""
    if word_size <= 0:
        word_size = len(data)
    words = (data[i : i + word_size].hex().upper() for i in range(0, len(data), word_size))
    return delimiter.join(words)


def hex_string(data: bytes, title: str | None = None) -> str:
    """Print ``data`` as hex, prefixed by ``title`` if given, and return the line."""
    text = format_bytes(data)
    line = f"{title}: {text}" if title else text
    print(line)
    return line


def little_endian_value(data: bytes) -> int:
    """Read an unsigned little-endian integer from at most the first 4 bytes."""
    return int.from_bytes(bytes(data[:_WORD]), "little")


def little_endian_bytes(value: int, n: int = _WORD) -> bytes:
    """Return the low ``min(n, 4)`` bytes of a 32-bit value, least significant first."""
    count = max(0, min(n, _WORD))
    return (value & 0xFFFFFFFF).to_bytes(_WORD, "little")[:count]


def big_endian_value(data: bytes) -> int:
    """Read an unsigned big-endian integer from at most the first 4 bytes."""
    return int.from_bytes(bytes(data[:_WORD]), "big")


def big_endian_bytes(value: int, n: int = _WORD) -> bytes:
    """Return the low ``min(n, 4)`` bytes of a 32-bit value, most significant first."""
    count = max(0, min(n, _WORD))
    return (value & 0xFFFFFFFF).to_bytes(_WORD, "big")[_WORD - count :]