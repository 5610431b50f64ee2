# ftkit

A small, dependency-free toolkit of everyday helpers with the edge-case
behaviour of the classic C routines they are named after.

## Modules

- `ftkit.chars`: character classification (`is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`, `is_space`), case changes (`to_lower`,
  `to_upper`) and integer/text conversion (`atoi`, `itoa`, `itoa_base`).
  Each function accepts a one-character string or an integer code.
  `atoi` skips leading whitespace and one sign, stops at the first non-digit
  and wraps the result to 32 bits.
- `ftkit.memory`: byte-buffer operations on `bytearray` (`calloc`, `bzero`,
  `memset`, `memcpy`, `memccpy`, `memchr`, `memcmp`, `memmove`). Lengths that
  run past a buffer raise `ValueError`; searches return an index or `None`.
- `ftkit.strings`: string helpers (`split`, `strtrim`, `substr`, `strndup`,
  `strjoin`, `strmapi`, `strchr`, `strrchr`, `strnstr`, `strcmp`, `strncmp`,
  `strlcpy`, `strlcat`). Searches return an index or `None`; `strlcpy` and
  `strlcat` return the resulting text together with the length the full
  result would have had.
- `ftkit.linkedlist`: `LinkedList`, a singly linked list with `push_front`,
  `push_back`, `last`, `len()`, iteration, `for_each`, `map` (returns a new
  list) and `clear` (optionally calling a function on each element first).
- `ftkit.output`: writing to a text stream, standard output by default
  (`put_char`, `put_str`, `put_endl`, `put_nbr`, `put_unbr`).
- `ftkit.lines`: `LineReader` and `read_lines`, which read a text or binary
  stream a fixed number of units at a time and return its lines without the
  newline. The text after the last newline is always returned as a final
  line, even when empty, so the lines equal the content split on `"\n"`.
  `read_line()` returns `None` once the stream is exhausted.
- `ftkit.formatter`: `sprintf` and `printf`.
- `ftkit.spec`, `ftkit.integers`, `ftkit.floats`: the building blocks of the
  formatter. `parse_spec` parses one conversion specification into a `Spec`
  (with its `Flag` set, width, precision and conversion character);
  `number_base` and `nb_len` write and count digits; `format_char`,
  `format_string`, `format_int`, `format_unsigned`, `format_pointer`,
  `format_percent`, `format_fixed`, `format_exp` and `format_general`
  render a single conversion; `decimal_digits` gives the exact decimal
  expansion of a float and `round_digits` rounds it.

## Formatting

`sprintf(fmt, *args)` supports the conversions `c s d i u x X p n f e g %`,
the flags `- + space # 0`, a field width and a precision (either of which may
be `*`, taken from the arguments), and the length modifiers `h hh l ll`,
which truncate integer arguments to 16, 8 or 64 bits.

- `%s` with `None` prints `(null)`; `%p` prints `0x` and lower-case hex.
- `%n` takes a list (or `None`) and appends the number of characters
  written so far.
- An unknown conversion, or a `%lc` character outside 0-255, ends the output
  at that point.
- Running out of arguments raises `ValueError`.

`printf(fmt, *args, file=None)` writes the same text to `file` (standard
output by default) and returns the number of characters written.

## Installation

```
pip install .
```

## Examples

```python
from ftkit.formatter import sprintf, printf
from ftkit.strings import split
from ftkit.chars import itoa_base
from ftkit.linkedlist import LinkedList

sprintf("%-5d|%05.1f|%#x", 42, 3.14159, 255)   # '42   |003.1|0xff'
printf("%s has %d items\n", "cart", 3)

split("  a  b c ", " ")                          # ['a', 'b', 'c']
itoa_base(255, "0123456789abcdef")               # 'ff'

items = LinkedList([1, 2, 3])
items.push_front(0)
list(items.map(lambda x: x * 10))                # [0, 10, 20, 30]
```

Reading lines:

```python
from ftkit.lines import read_lines

with open("scene.txt") as fh:
    for line in read_lines(fh, 32):
        print(line)
```

## What it does not do

ftkit is a library only: it installs no command, and it does not parse,
render or display any particular file format; `read_lines` only splits a
stream into lines.

## Running the tests

```
pip install .[test]
pytest
```