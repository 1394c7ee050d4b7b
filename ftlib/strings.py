"""String conversion, searching, splitting and mapping helpers."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import zip_longest
from typing import Any

from ftlib.memory import strlen

_WHITESPACE = " \t\n\v\f\r"
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _char(c: int | str) -> str:
    """Normalise a character given as an int or a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def atoi(text: str) -> int:
    """Parse a leading decimal integer after optional whitespace and one sign.

    Parsing stops at the first non-digit; a string with no digits gives 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + ord(ch) - ord("0")
    return sign * value


def itoa(n: int) -> str:
    """Decimal text of a 32-bit signed integer."""
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)


def split(s: str, c: int | str) -> list[str]:
    """Split *s* on the separator character *c*, dropping empty pieces."""
    sep = _char(c)
    return [part for part in s.split(sep) if part]


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in *charset* from both ends of *s*."""
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """At most *length* characters of *s* beginning at *start*; empty past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Concatenation of *s1* and *s2*."""
    return s1 + s2


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of the first *needle* lying wholly within the first *length* characters.

    An empty needle is found at index 0; None when there is no match.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most *n* characters; the difference of the first unequal codes, or 0."""
    if n < 0:
        raise ValueError("n must not be negative")
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue="\0"):
        if a != b or a == "\0":
            return ord(a) - ord(b)
    return 0


def strchr(s: str, c: int | str) -> int | None:
    """Index of the first *c* in *s*; the terminator's index for NUL; None if absent."""
    ch = _char(c)
    if ch == "\0":
        return strlen(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: int | str) -> int | None:
    """Index of the last *c* in *s*; the terminator's index for NUL; None if absent."""
    ch = _char(c)
    if ch == "\0":
        return strlen(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Copy of *s* up to its first NUL."""
    return s[: strlen(s)]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """New string made of f(index, char) for each character of *s*."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(s: MutableSequence[Any], f: Callable[[int, Any], Any]) -> None:
    """Call f(index, item) for each item of *s*, storing any non-None result in place."""
    for index in range(len(s)):
        result = f(index, s[index])
        if result is not None:
            s[index] = result