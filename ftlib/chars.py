"""Classification and case conversion of single ASCII characters."""

from __future__ import annotations

from typing import overload


def _code(c: int | str) -> int:
    """Return the integer code of a character given as an int or a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return c


def isalpha(c: int | str) -> bool:
    """True if *c* is an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def isdigit(c: int | str) -> bool:
    """True if *c* is an ASCII decimal digit."""
    code = _code(c)
    return ord("0") <= code <= ord("9")


def isalnum(c: int | str) -> bool:
    """True if *c* is an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: int | str) -> bool:
    """True if *c* lies in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def isprint(c: int | str) -> bool:
    """True if *c* is a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


@overload
def toupper(c: int) -> int: ...
@overload
def toupper(c: str) -> str: ...


def toupper(c):
    """Map a lowercase ASCII letter to uppercase; other values pass through unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


@overload
def tolower(c: int) -> int: ...
@overload
def tolower(c: str) -> str: ...


def tolower(c):
    """Map an uppercase ASCII letter to lowercase; other values pass through unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code