"""A small printf supporting the %c, %s, %p, %d, %i, %u, %x, %X and %% conversions."""

from __future__ import annotations

import operator
import re
import sys
from collections.abc import Iterator
from typing import Any, TextIO

from ftlib.memory import strlen
from ftlib.strings import itoa

_UINT_MAX = 2**32 - 1
_POINTER_MASK = 2**64 - 1
_CONVERSIONS = frozenset("cspdiuxX%")
_DIRECTIVE = re.compile(r"%(.?)", re.DOTALL)
_HEX_DIGITS = {"x": "0123456789abcdef", "X": "0123456789ABCDEF"}


def uitoa(n: int) -> str:
    """Decimal text of a 32-bit unsigned integer."""
    if not 0 <= n <= _UINT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit unsigned integer")
    return str(n)


def _to_base16(n: int, digits: str) -> str:
    if n == 0:
        return digits[0]
    out = []
    while n:
        n, rem = divmod(n, 16)
        out.append(digits[rem])
    return "".join(reversed(out))


def uitoa_hex(n: int, case: str) -> str:
    """Hexadecimal text of a 32-bit unsigned integer; *case* 'x' gives lower, 'X' upper."""
    if case not in _HEX_DIGITS:
        raise ValueError(f"case must be 'x' or 'X', got {case!r}")
    if not 0 <= n <= _UINT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit unsigned integer")
    return _to_base16(n, _HEX_DIGITS[case])


def _as_uint32(value: Any) -> int:
    return operator.index(value) & _UINT_MAX


def _as_int32(value: Any) -> int:
    unsigned = _as_uint32(value)
    return unsigned - 2**32 if unsigned > 2**31 - 1 else unsigned


def _as_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return value
    return chr(operator.index(value) & 0xFF)


def _as_string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str or None, got {type(value).__name__}")
    return value[: strlen(value)]


def _as_pointer(value: Any) -> str:
    if value is None:
        address = 0
    elif isinstance(value, int) and not isinstance(value, bool):
        address = value & _POINTER_MASK
    else:
        address = id(value)
    return "0x" + _to_base16(address, _HEX_DIGITS["x"])


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        return _as_char(value)
    if spec == "s":
        return _as_string(value)
    if spec == "p":
        return _as_pointer(value)
    if spec in ("d", "i"):
        return itoa(_as_int32(value))
    if spec == "u":
        return uitoa(_as_uint32(value))
    return uitoa_hex(_as_uint32(value), spec)


def sprintf(fmt: str, *args: Any) -> str:
    """Format *args* according to *fmt* and return the text.

    The format ends at its first NUL. A '%' followed by an unknown character
    is dropped and the character is kept; a trailing '%' is dropped.
    """
    text = fmt[: strlen(fmt)]
    remaining = iter(args)
    parts: list[str] = []
    position = 0
    for match in _DIRECTIVE.finditer(text):
        parts.append(text[position : match.start()])
        spec = match.group(1)
        if spec in _CONVERSIONS and spec:
            parts.append(_convert(spec, remaining))
        else:
            parts.append(spec)
        position = match.end()
    parts.append(text[position:])
    return "".join(parts)


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to *stream* (standard output by default).

    Returns the number of characters written.
    """
    out = sys.stdout if stream is None else stream
    text = sprintf(fmt, *args)
    out.write(text)
    return len(text)