"""SHA-1 message digest."""

from __future__ import annotations

import struct

from .bits import rotl32

_INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)
_ROUND_CONSTANTS = (0x5A827999, 0x6ED9EBA1, 0x8F1BBCDC, 0xCA62C1D6)
_ROUNDS = 80
_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


def _compress(state: list[int], block: bytes) -> None:
    words = list(struct.unpack(">16I", block))
    for t in range(16, _ROUNDS):
        words.append(rotl32(words[t - 3] ^ words[t - 8] ^ words[t - 14] ^ words[t - 16], 1))

    a, b, c, d, e = state
    for t, word in enumerate(words):
        if t < 20:
            f = (b & c) | (~b & d)
        elif t < 40:
            f = b ^ c ^ d
        elif t < 60:
            f = (b & c) | (b & d) | (c & d)
        else:
            f = b ^ c ^ d
        tmp = (rotl32(a, 5) + e + word + _ROUND_CONSTANTS[t // 20] + f) & _MASK32
        a, b, c, d, e = tmp, a, rotl32(b, 30), c, d

    for i, value in enumerate((a, b, c, d, e)):
        state[i] = (state[i] + value) & _MASK32


class Sha1:
    """Incremental SHA-1 hasher."""

    block_size = 64
    digest_size = 20

    def __init__(self) -> None:
        self._state = list(_INITIAL_STATE)
        self._buffer = bytearray()
        self._length = 0

    def update(self, data: bytes) -> None:
        """Absorb ``data`` into the hash."""
        self._buffer += data
        self._length += len(data)
        full = len(self._buffer) - len(self._buffer) % self.block_size
        for offset in range(0, full, self.block_size):
            _compress(self._state, bytes(self._buffer[offset : offset + self.block_size]))
        del self._buffer[:full]

    def digest(self) -> bytes:
        """Return the digest of everything absorbed so far."""
        state = list(self._state)
        tail = bytes(self._buffer) + b"\x80"
        tail += b"\x00" * ((self.block_size - 8 - len(tail)) % self.block_size)
        tail += ((self._length * 8) & _MASK64).to_bytes(8, "big")
        for offset in range(0, len(tail), self.block_size):
            _compress(state, tail[offset : offset + self.block_size])
        return struct.pack(">5I", *state)