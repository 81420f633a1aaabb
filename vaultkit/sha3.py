"""Keccak-f[1600] permutation and SHA-3 style sponge hashing."""

from __future__ import annotations

import struct

from .bits import rotl64

_MASK64 = 0xFFFFFFFFFFFFFFFF
_STATE_BYTES = 200
_ROUNDS = 24

# rotation offsets indexed [y][x]
_ROTATIONS = (
    (0, 1, 190, 28, 91),
    (36, 300, 6, 55, 276),
    (3, 10, 171, 153, 231),
    (105, 45, 15, 21, 136),
    (210, 66, 253, 120, 78),
)


def _lfsr_bit(t: int) -> int:
    r = 1
    for _ in range(t % 255):
        r <<= 1
        if r & 0x100:
            r ^= 0x171
    return r & 1


def _round_constant(index: int) -> int:
    return sum(_lfsr_bit(j + 7 * index) << ((1 << j) - 1) for j in range(7))


_ROUND_CONSTANTS = tuple(_round_constant(i) for i in range(_ROUNDS))


def keccak_f(state: list[int]) -> None:
    """Apply Keccak-f[1600] in place to 25 lanes, lane ``x + 5*y`` at index ``x + 5*y``."""
    if len(state) != 25:
        raise ValueError(f"state must hold 25 lanes, got {len(state)}")
    for rc in _ROUND_CONSTANTS:
        # theta
        columns = [state[x] ^ state[x + 5] ^ state[x + 10] ^ state[x + 15] ^ state[x + 20] for x in range(5)]
        d = [columns[(x + 4) % 5] ^ rotl64(columns[(x + 1) % 5], 1) for x in range(5)]
        state[:] = [lane ^ d[i % 5] for i, lane in enumerate(state)]

        # rho and pi
        b = [0] * 25
        for y in range(5):
            for x in range(5):
                b[y + 5 * ((2 * x + 3 * y) % 5)] = rotl64(state[x + 5 * y], _ROTATIONS[y][x])

        # chi
        state[:] = [
            b[x + 5 * y] ^ (~b[(x + 1) % 5 + 5 * y] & b[(x + 2) % 5 + 5 * y] & _MASK64)
            for y in range(5)
            for x in range(5)
        ]

        # iota
        state[0] ^= rc


def _absorb(state: list[int], block: bytes) -> None:
    lanes = struct.unpack(f"<{len(block) // 8}Q", block)
    for i, lane in enumerate(lanes):
        state[i] ^= lane


class Sha3:
    """Keccak sponge with SHA-3 padding; ``rate`` and ``digest_size`` are in bytes."""

    def __init__(self, rate: int, digest_size: int) -> None:
        if not 0 < rate < _STATE_BYTES or rate % 8:
            raise ValueError(f"rate must be a multiple of 8 between 8 and 192, got {rate}")
        if digest_size <= 0:
            raise ValueError(f"digest_size must be positive, got {digest_size}")
        self.rate = rate
        self.digest_size = digest_size
        self._state = [0] * 25
        self._buffer = bytearray()

    def update(self, data: bytes) -> None:
        """Absorb ``data`` into the sponge."""
        self._buffer += data
        full = len(self._buffer) - len(self._buffer) % self.rate
        for offset in range(0, full, self.rate):
            _absorb(self._state, bytes(self._buffer[offset : offset + self.rate]))
            keccak_f(self._state)
        del self._buffer[:full]

    def digest(self) -> bytes:
        """Return the digest of everything absorbed so far."""
        state = list(self._state)
        block = bytearray(self._buffer) + bytes(self.rate - len(self._buffer))
        block[len(self._buffer)] ^= 0x06
        block[-1] ^= 0x80
        _absorb(state, bytes(block))

        out = bytearray()
        while len(out) < self.digest_size:
            keccak_f(state)
            take = min(self.rate, self.digest_size - len(out))
            out += struct.pack("<25Q", *state)[:take]
        return bytes(out)