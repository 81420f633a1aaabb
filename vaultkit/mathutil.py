"""Small integer helpers: combined division and digit counting."""

from __future__ import annotations


def _require_unsigned(**values: int) -> None:
    for name, value in values.items():
        if value < 0:
            raise ValueError(f"{name} must be non-negative, got {value}")


def div_mod(num: int, divisor: int) -> tuple[int, int]:
    """Return ``(quotient, remainder)`` of two non-negative integers.

    Raises ZeroDivisionError when ``divisor`` is zero.
    """
    _require_unsigned(num=num, divisor=divisor)
    return divmod(num, divisor)


def num_digits(value: int, base: int) -> int:
    """Return how many digits ``value`` takes in ``base``.

    Zero needs no digits, and a base of 0 or 1 yields 0.
    """
    _require_unsigned(value=value)
    if base <= 1:
        return 0
    count = 0
    while value:
        count += 1
        value //= base
    return count