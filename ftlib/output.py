"""Writing characters, strings and numbers to text streams."""

from __future__ import annotations

from typing import TextIO

from ftlib.strings import itoa, strdup


def putchar_fd(c: int | str, stream: TextIO) -> None:
    """Write one character, given as an int or a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        stream.write(c)
        return
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    stream.write(chr(c & 0xFF))


def putstr_fd(s: str, stream: TextIO) -> None:
    """Write *s* up to its first NUL."""
    stream.write(strdup(s))


def putendl_fd(s: str, stream: TextIO) -> None:
    """Write *s* up to its first NUL, followed by a newline."""
    putstr_fd(s, stream)
    putchar_fd("\n", stream)


def putnbr_fd(n: int, stream: TextIO) -> None:
    """Write the decimal text of a 32-bit signed integer."""
    stream.write(itoa(n))