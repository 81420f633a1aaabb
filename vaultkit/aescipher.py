"""AES block primitives: GF(2^8) arithmetic, key expansion and single-block transforms."""

from __future__ import annotations

from typing import Optional, Sequence

from .bits import rotl8

BLOCK_LEN = 16
IRREDUCIBLE = 0x1B

_ROUNDS_BY_KEY_BITS = {128: 10, 192: 12, 256: 14}

_MIX = ((2, 3, 1, 1), (1, 2, 3, 1), (1, 1, 2, 3), (3, 1, 1, 2))
_INV_MIX = ((14, 11, 13, 9), (9, 14, 11, 13), (13, 9, 14, 11), (11, 13, 9, 14))


def galois_mul(a: int, b: int) -> int:
    """Multiply two bytes in GF(2^8) modulo the AES polynomial."""
    if not (0 <= a <= 0xFF and 0 <= b <= 0xFF):
        raise ValueError(f"operands must be bytes, got {a} and {b}")
    product = 0
    for _ in range(8):
        if b & 1:
            product ^= a
        high = a & 0x80
        a = (a << 1) & 0xFF
        if high:
            a ^= IRREDUCIBLE
        b >>= 1
    return product


def _build_sboxes() -> tuple[bytes, bytes]:
    exp = [0] * 255
    log = [0] * 256
    x = 1
    for i in range(255):
        exp[i] = x
        log[x] = i
        x = galois_mul(x, 3)

    sbox = [0] * 256
    inverse_box = [0] * 256
    for value in range(256):
        inv = exp[(255 - log[value]) % 255] if value else 0
        s = inv ^ rotl8(inv, 1) ^ rotl8(inv, 2) ^ rotl8(inv, 3) ^ rotl8(inv, 4) ^ 0x63
        sbox[value] = s
        inverse_box[s] = value
    return bytes(sbox), bytes(inverse_box)


_SBOX, _INV_SBOX = _build_sboxes()
_MUL = {k: bytes(galois_mul(k, v) for v in range(256)) for k in (1, 2, 3, 9, 11, 13, 14)}


def key_schedule(key: bytes, key_bits: int = 128) -> list[bytes]:
    """Expand ``key`` into the round keys for AES-128, -192 or -256.

    Any other ``key_bits`` value is treated as 128. Each round key is 16
    bytes in column order. Raises ValueError if ``key`` is too short.
    """
    if key_bits not in _ROUNDS_BY_KEY_BITS:
        key_bits = 128
    rounds = _ROUNDS_BY_KEY_BITS[key_bits]
    nk = key_bits // 32
    if len(key) < 4 * nk:
        raise ValueError(f"AES-{key_bits} needs a {4 * nk}-byte key, got {len(key)} bytes")

    words = [list(key[4 * i : 4 * i + 4]) for i in range(nk)]
    rcon = 1
    for i in range(nk, 4 * (rounds + 1)):
        temp = words[i - 1]
        if i % nk == 0:
            temp = [_SBOX[b] for b in temp[1:] + temp[:1]]
            temp[0] ^= rcon
            rcon = galois_mul(rcon, 2)
        elif nk > 6 and i % nk == 4:
            temp = [_SBOX[b] for b in temp]
        words.append([a ^ b for a, b in zip(words[i - nk], temp)])

    return [bytes(b for word in words[4 * r : 4 * r + 4] for b in word) for r in range(rounds + 1)]


def _add_round_key(state: list[int], subkey: bytes) -> None:
    for i, k in enumerate(subkey):
        state[i] ^= k


def _sub_bytes(state: list[int], box: bytes) -> None:
    state[:] = [box[b] for b in state]


def _shift_rows(state: list[int], direction: int) -> None:
    state[:] = [state[r + 4 * ((c + direction * r) % 4)] for c in range(4) for r in range(4)]


def _mix_columns(state: list[int], matrix: tuple[tuple[int, ...], ...]) -> None:
    mixed: list[int] = []
    for c in range(4):
        column = state[4 * c : 4 * c + 4]
        for row in matrix:
            value = 0
            for coeff, byte in zip(row, column):
                value ^= _MUL[coeff][byte]
            mixed.append(value)
    state[:] = mixed


def _check_schedule(subkeys: Sequence[bytes]) -> int:
    if len(subkeys) < 2 or any(len(k) != BLOCK_LEN for k in subkeys):
        raise ValueError("subkeys must be at least two 16-byte round keys")
    return len(subkeys) - 1


def _check_iv(iv: Optional[bytes]) -> None:
    if iv is not None and len(iv) != BLOCK_LEN:
        raise ValueError(f"iv must be {BLOCK_LEN} bytes, got {len(iv)}")


def encrypt_block(block: bytes, subkeys: Sequence[bytes], iv: Optional[bytes] = None) -> bytes:
    """Encrypt one block of at most 16 bytes.

    A short block is filled with PKCS#5 padding; ``iv``, if given, is XORed
    into the padded block first.
    """
    n = len(block)
    if n > BLOCK_LEN:
        raise ValueError(f"block must be at most {BLOCK_LEN} bytes, got {n}")
    _check_iv(iv)
    rounds = _check_schedule(subkeys)

    state = list(block) + [BLOCK_LEN - n] * (BLOCK_LEN - n)
    if iv is not None:
        state = [s ^ v for s, v in zip(state, iv)]

    _add_round_key(state, subkeys[0])
    for r in range(1, rounds):
        _sub_bytes(state, _SBOX)
        _shift_rows(state, 1)
        _mix_columns(state, _MIX)
        _add_round_key(state, subkeys[r])
    _sub_bytes(state, _SBOX)
    _shift_rows(state, 1)
    _add_round_key(state, subkeys[rounds])
    return bytes(state)


def decrypt_block(block: bytes, subkeys: Sequence[bytes], iv: Optional[bytes] = None) -> bytes:
    """Decrypt one 16-byte block, XORing ``iv`` into the result if given."""
    if len(block) != BLOCK_LEN:
        raise ValueError(f"block must be {BLOCK_LEN} bytes, got {len(block)}")
    _check_iv(iv)
    rounds = _check_schedule(subkeys)

    state = list(block)
    _add_round_key(state, subkeys[rounds])
    _shift_rows(state, -1)
    _sub_bytes(state, _INV_SBOX)
    for r in range(rounds - 1, 0, -1):
        _add_round_key(state, subkeys[r])
        _mix_columns(state, _INV_MIX)
        _shift_rows(state, -1)
        _sub_bytes(state, _INV_SBOX)
    _add_round_key(state, subkeys[0])

    if iv is not None:
        state = [s ^ v for s, v in zip(state, iv)]
    return bytes(state)


def increment_counter(counter: bytes, inc: int = 1) -> bytes:
    """Return the 16-byte big-endian ``counter`` plus a 32-bit ``inc``, wrapping at 2**128."""
    if len(counter) != BLOCK_LEN:
        raise ValueError(f"counter must be {BLOCK_LEN} bytes, got {len(counter)}")
    value = (int.from_bytes(counter, "big") + (inc & 0xFFFFFFFF)) % (1 << (8 * BLOCK_LEN))
    return value.to_bytes(BLOCK_LEN, "big")