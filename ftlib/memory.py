"""Byte-buffer operations and NUL-terminated string helpers over bytearrays."""

from __future__ import annotations

from typing import Union

Buffer = Union[bytes, bytearray, memoryview]


def memset(buf: bytearray, c: int, length: int) -> bytearray:
    """Fill the first *length* bytes of *buf* with the low byte of *c*; return *buf*."""
    if length < 0 or length > len(buf):
        raise ValueError(f"length {length} outside buffer of size {len(buf)}")
    buf[:length] = bytes([c & 0xFF]) * length
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Zero the first *n* bytes of *buf*."""
    memset(buf, 0, n)


def _copy(dst: bytearray, src: Buffer, n: int) -> bytearray:
    if n < 0 or n > len(dst) or n > len(src):
        raise ValueError(f"cannot copy {n} bytes")
    dst[:n] = bytes(src[:n])
    return dst


def memcpy(dst: bytearray, src: Buffer, n: int) -> bytearray:
    """Copy *n* bytes from *src* to the start of *dst*; return *dst*."""
    return _copy(dst, src, n)


def memmove(dst: bytearray, src: Buffer, n: int) -> bytearray:
    """Copy *n* bytes from *src* to *dst*, correct even when the two overlap; return *dst*."""
    return _copy(dst, src, n)


def memchr(buf: Buffer, c: int, n: int) -> int | None:
    """Index of the first byte equal to the low byte of *c* among the first *n*, or None."""
    if n < 0:
        raise ValueError("n must not be negative")
    index = bytes(buf[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(s1: Buffer, s2: Buffer, n: int) -> int:
    """Difference of the first differing bytes within the first *n*, or 0 if equal."""
    if n < 0 or n > len(s1) or n > len(s2):
        raise ValueError(f"cannot compare {n} bytes")
    for a, b in zip(bytes(s1[:n]), bytes(s2[:n])):
        if a != b:
            return a - b
    return 0


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of *count* elements of *size* bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def strlen(s: Buffer | str) -> int:
    """Length of *s* up to, not including, its first NUL."""
    if isinstance(s, str):
        end = s.find("\0")
    else:
        end = bytes(s).find(b"\0")
    return len(s) if end < 0 else end


def _cstring(s: Buffer) -> bytes:
    return bytes(s[: strlen(s)])


def strlcpy(dst: bytearray, src: Buffer, size: int) -> int:
    """Copy the string in *src* into *dst*, at most *size* - 1 bytes plus a NUL.

    Returns the length of the string in *src*.
    """
    if size < 0 or size > len(dst):
        raise ValueError(f"size {size} outside buffer of size {len(dst)}")
    text = _cstring(src)
    if size > 0:
        count = min(len(text), size - 1)
        dst[: count + 1] = text[:count] + b"\0"
    return len(text)


def strlcat(dst: bytearray, src: Buffer, size: int) -> int:
    """Append the string in *src* to the string in *dst* within a buffer of *size* bytes.

    Returns the length of the string it tried to create.
    """
    if size < 0 or size > len(dst):
        raise ValueError(f"size {size} outside buffer of size {len(dst)}")
    len_dst = strlen(dst)
    text = _cstring(src)
    total = len_dst + len(text) if size > len_dst else len(text) + size
    count = max(0, min(len(text), size - len_dst - 1))
    dst[len_dst : len_dst + count] = text[:count]
    end = len_dst + count
    if end < len(dst):
        dst[end] = 0
    return total