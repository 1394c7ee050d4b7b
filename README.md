# ftlib

Small helpers that behave like the classic C library routines. They cover
character classification, byte-buffer operations, string utilities, a singly
linked list, stream output and a minimal `printf`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `ftlib.chars`: `isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`,
  `toupper`, `tolower`. Each takes an integer character code or a
  one-character string. `toupper` and `tolower` return the same kind they
  were given.
- `ftlib.memory`: `memset`, `bzero`, `memcpy`, `memmove`, `memchr`, `memcmp`,
  `calloc`, `strlen`, `strlcpy`, `strlcat`. These work on `bytearray`
  buffers, and on `bytes` and `memoryview` where a buffer is only read.
  Lengths that fall outside a buffer raise `ValueError`. `memchr` returns
  an index or `None`. `strlen` counts up to the first NUL.
- `ftlib.strings`: `atoi`, `itoa`, `split`, `strtrim`, `substr`, `strjoin`,
  `strnstr`, `strncmp`, `strchr`, `strrchr`, `strdup`, `strmapi`,
  `striteri`. The search functions return an index or `None`. `itoa` raises
  `OverflowError` for values outside the 32-bit signed range.
- `ftlib.linked`: `Node` and `LinkedList`. A `LinkedList` can be built from
  an iterable. It provides `push_front`, `push_back`, `last`, `clear`,
  `iterate`, `map`, `len()` and iteration over contents. If the function
  given to `map` raises, the results made so far are passed to the `delete`
  callback and the exception propagates.
- `ftlib.output`: `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd`.
  Each writes to a text stream.
- `ftlib.printf`: `uitoa`, `uitoa_hex`, `sprintf`, `printf`.

## Example

```python
from ftlib.strings import split, itoa
from ftlib.printf import sprintf
from ftlib.linked import LinkedList

split("  hello  world ", " ")       # ['hello', 'world']
itoa(-2147483648)                   # '-2147483648'
sprintf("%s is %d (%x)", "n", 255, 255)   # 'n is 255 (ff)'

items = LinkedList([1, 2])
doubled = items.map(lambda x: x * 2, None)
list(doubled)                       # [2, 4]
```

## Formatting

`sprintf` and `printf` support the conversions `%c`, `%s`, `%p`, `%d`,
`%i`, `%u`, `%x`, `%X` and `%%`. They handle other parts of a conversion
as follows:

- Integer arguments wrap to 32 bits.
- `%s` with `None` prints `(null)`.
- `%p` prints an integer address, or the `id()` of any other object, as
  `0x...`.
- A `%` followed by an unknown character is dropped, and the character is
  kept.
- Too few arguments raises `TypeError`.

`printf` writes to `stream`, which defaults to standard output. It returns
the number of characters written.

Flags, field widths, precision and length modifiers are not supported.