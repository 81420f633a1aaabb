"""Console prompts: yes/no confirmation and masked input."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from typing import IO, Optional

try:
    import termios
except ImportError:  # not a POSIX terminal
    termios = None  # type: ignore[assignment]

try:
    import msvcrt
except ImportError:
    msvcrt = None  # type: ignore[assignment]

_TERMINATORS = frozenset({"\r", "\n", "\x03"})
_BACKSPACE = "\x08"


def get_confirmation(prompt: str, stdin: Optional[IO[str]] = None, stdout: Optional[IO[str]] = None) -> bool:
    """Ask ``prompt`` until a ``y`` or ``n`` is read; return True for ``y``.

    Raises EOFError if the input ends first.
    """
    source = stdin or sys.stdin
    out = stdout or sys.stdout
    while True:
        out.write(f"{prompt} (y/n)> ")
        out.flush()
        answer = source.read(1)
        if not answer:
            raise EOFError("input ended before a y/n answer")
        if answer in ("y", "n"):
            return answer == "y"


def _edit(typed: list[str], key: str) -> str:
    """Apply one keystroke to ``typed`` and return what the mask display gains."""
    if key == _BACKSPACE:
        if typed:
            typed.pop()
            return "\b \b"
        return ""
    if " " <= key <= "~":
        typed.append(key)
        return "*"
    return ""


def apply_keystrokes(keys: Iterable[str]) -> str:
    """Return the text typed by ``keys`` up to the first end-of-line or interrupt.

    Backspace removes the last character; other non-printable keys are ignored.
    """
    typed: list[str] = []
    for key in keys:
        if key in _TERMINATORS:
            break
        _edit(typed, key)
    return "".join(typed)


@contextmanager
def _echo_disabled(stream: IO[str]) -> Iterator[None]:
    if termios is None or not stream.isatty():
        yield
        return
    fd = stream.fileno()
    old = termios.tcgetattr(fd)
    new = termios.tcgetattr(fd)
    new[3] &= ~(termios.ICANON | termios.ECHO)
    termios.tcsetattr(fd, termios.TCSANOW, new)
    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, old)


def _keys(stream: Optional[IO[str]]) -> Iterator[str]:
    if stream is None and msvcrt is not None:
        while True:
            yield msvcrt.getwch()
    source = stream or sys.stdin
    while key := source.read(1):
        yield key


def get_masked_input(prompt: str, stdin: Optional[IO[str]] = None, stdout: Optional[IO[str]] = None) -> str:
    """Read a line while echoing ``*`` for each character; return the text.

    Input ends at a carriage return, newline, interrupt key or end of input.
    """
    out = stdout or sys.stdout
    typed: list[str] = []
    masked = prompt
    out.write(masked)
    out.flush()

    stream = stdin if stdin is not None else sys.stdin
    with _echo_disabled(stream) if stdin is None else _no_change():
        for key in _keys(stdin):
            if key in _TERMINATORS:
                break
            masked += _edit(typed, key)
            out.write("\r" + masked)
            out.flush()

    out.write("\n")
    out.flush()
    return "".join(typed)


@contextmanager
def _no_change() -> Iterator[None]:
    yield