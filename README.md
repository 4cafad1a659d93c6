# libft

A small collection of helpers: character checks, string operations, a
singly linked list, number conversion, byte-buffer utilities, a minimal
`printf`-style formatter and a buffered line reader for file descriptors.

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

- `libft.checks`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `is_space` (each takes a one-character string or an integer
  code), `count_char` and `array_len` (counts items before the first `None`).
- `libft.strings`: `split` (drops empty pieces), `strchr`, `strrchr` and
  `strnstr` (return an index or `None`), `strcmp`, `strncmp`, `strtrim`,
  `substr`, `strlen`, `to_lower`, `to_upper`.
- `libft.strops`: `strdup`, `strndup`, `strjoin`, `strmapi`, `striteri`, and
  the bounded copies `strlcpy` and `strlcat`. Those two return a pair of the
  resulting text and the length the copy tried to create.
- `libft.converters`: `atoi` (32-bit wrap-around, with leading whitespace and
  a sign), `atoi_base` (bases of 2 and up, digits `0`-`9` and `a`-`f`), `itoa`.
- `libft.lists`: `Node` and `LinkedList`, with `add_front`, `add_back`,
  `last`, `for_each`, `map`, `clear`, `len()` and iteration over contents.
- `libft.memory`: `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy`,
  `memmove` (offsets within one buffer, overlap-safe), `memset`, `realloc`.
  They work on `bytes`, `bytearray` and `memoryview` objects.
- `libft.printf`: `sprintf` returns the formatted text and `printf` writes
  it to standard output and returns its length. They support the
  `%c %s %d %i %u %x %X %p %%` conversions. Unknown specifiers produce no
  output, and `%s` with `None` gives `(null)`.
- `libft.reader`: `LineReader(fd, buffer_size=100)` reads one line at a time
  with `read_line()` or iteration. `get_next_line(fd)` does the same with one
  buffer shared by all calls. Lines keep their trailing newline, and `None`
  marks the end of input.

## Examples

```python
from libft.strings import split, strtrim
from libft.converters import atoi, itoa
from libft.printf import sprintf
from libft.lists import LinkedList

split("  hello  world ", " ")       # ['hello', 'world']
strtrim("xxhixx", "x")              # 'hi'
atoi("  -42abc")                    # -42
itoa(-2147483648)                   # '-2147483648'
sprintf("%s has %d items (%x)", "box", 255, 255)  # 'box has 255 items (ff)'

items = LinkedList([1, 2, 3])
doubled = items.map(lambda x: x * 2, lambda x: None)
list(doubled)                       # [2, 4, 6]
```

Reading lines from a file descriptor:

```python
import os
from libft.reader import LineReader

fd = os.open("notes.txt", os.O_RDONLY)
for line in LineReader(fd, 100):
    print(line, end="")
os.close(fd)
```

## What it does not do

The package has no helpers for writing characters, strings or numbers
straight to a file descriptor. To write output, use `printf` for standard
output, or `os.write` with text that `sprintf` has formatted. There is no
command-line program either. The package is a library only.