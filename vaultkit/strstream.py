"""A growable character buffer with substring, split and file helpers."""

from __future__ import annotations

import io
from typing import IO, Optional, Union

DEFAULT_SIZE = 1 << 2


def _capacity_for(size: int) -> int:
    capacity = 1
    while capacity < size:
        capacity <<= 1
    return capacity


def _as_text(data: Union[str, bytes, bytearray]) -> str:
    if isinstance(data, (bytes, bytearray)):
        return bytes(data).decode("latin-1")
    return data


class StrStream:
    """A text buffer that tracks a doubling capacity, with one slot kept for a terminator."""

    def __init__(self, text: str = "", size: Optional[int] = None) -> None:
        if size is not None and size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        needed = len(text) + 1 if text else DEFAULT_SIZE
        if size is not None:
            needed = max(size, len(text) + 1) if text else size
        self._text = text
        self._capacity = _capacity_for(needed)

    @property
    def capacity(self) -> int:
        """The number of character slots reserved, terminator included."""
        return self._capacity

    @property
    def available(self) -> int:
        """Free slots left before the buffer has to grow."""
        return max(0, self._capacity - len(self._text) - 1)

    def _grow(self, additional: int) -> bool:
        new_size = len(self._text) + additional
        if new_size + 1 < self._capacity:
            return False
        capacity = self._capacity or 1
        while capacity <= new_size + 1:
            capacity <<= 1
        self._capacity = capacity
        return True

    def substr_length(self, start: int, n: int) -> str:
        """Return ``n`` characters from ``start``.

        A negative ``n`` takes the ``-n`` characters before ``start``,
        reversed.
        """
        if n == 0:
            raise ValueError("substring length must be non-zero")
        size = len(self._text)
        if start < 0 or start >= size or start + n < 0 or start + n > size:
            raise IndexError(f"substring ({start}, {n}) out of range for size {size}")
        if n > 0:
            return self._text[start : start + n]
        return self._text[start + n : start][::-1]

    def substr_range(self, start: int, end: int) -> str:
        """Return the characters from ``start`` up to ``end`` (reversed if ``end < start``)."""
        return self.substr_length(start, end - start)

    def split(self, separator: str = " ", max_parts: int = 0) -> list[str]:
        """Split on ``separator``, dropping empty pieces.

        With ``max_parts > 0`` at most that many pieces are returned and the
        last holds the unsplit rest.
        """
        text = self._text
        if not text:
            return []
        if max_parts == 1:
            return [text]
        parts: list[str] = []
        start = 0
        for i, char in enumerate(text):
            if char != separator:
                continue
            if i == start:
                start = i + 1
                continue
            parts.append(text[start:i])
            start = i + 1
            if max_parts > 0 and len(parts) == max_parts - 1:
                break
        if start != len(text):
            parts.append(text[start:])
        return parts

    def index_of(self, char: str, start: int = 0) -> int:
        """Return the index of ``char`` at or after ``start``, or the length if absent."""
        found = self._text.find(char, start)
        return found if found >= 0 else max(start, len(self._text))

    def concat(self, text: str) -> None:
        """Append ``text``."""
        if not self._capacity:
            self._capacity = DEFAULT_SIZE
        self._grow(len(text))
        self._text += text

    def read(self, data: Union[str, bytes, bytearray]) -> None:
        """Append raw ``data``; bytes are taken one character per byte."""
        text = _as_text(data)
        self._grow(len(text))
        self._text += text

    def retreat(self, length: int) -> None:
        """Drop the last ``length`` characters (all of them if ``length`` is too large)."""
        if not self._text or not self._capacity:
            return
        size = len(self._text)
        self._text = "" if length >= size else self._text[: size - length]

    def read_file(self, file: IO, length: int = 0) -> None:
        """Append ``length`` characters from ``file``, or the rest of it when ``length`` is 0."""
        data = _as_text(file.read(length if length > 0 else -1))
        self._grow(len(data))
        self._text += data

    def write_file(self, file: IO, first: int = 0, last: int = 0) -> None:
        """Write characters ``first`` up to ``last`` (0 meaning the end) to ``file``."""
        size = len(self._text)
        if first >= size:
            return
        if not last:
            last = size
        if last < first:
            return
        chunk = self._text[first : min(last, size)]
        if isinstance(file, io.TextIOBase):
            file.write(chunk)
        else:
            file.write(chunk.encode("latin-1"))

    def clear(self) -> None:
        """Empty the buffer and release its capacity."""
        self._text = ""
        self._capacity = 0

    def __str__(self) -> str:
        return self._text

    def __len__(self) -> int:
        return len(self._text)

    def __repr__(self) -> str:
        return f"StrStream({self._text!r}, capacity={self._capacity})"