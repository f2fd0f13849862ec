# libftx

A small toolkit of everyday helpers, built only on the standard library:

- `libftx.chars`: ASCII character classification (`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `is_upper_at`), case conversion (`to_lower`, `to_upper`) and `skip_whitespace`
- `libftx.numbers`: lenient and strict parsing of 32-bit integers (`atoi`, `atoi_base`, `atoi_strict`, `parse_int`), `add_checked`, `absolute` and `itoa`
- `libftx.search`: searching and comparing text, with positions given as indices (`strlen`, `strchr`, `strrchr`, `strclen`, `strcmp`, `strncmp`, `strnstr`)
- `libftx.strings`: `split`, `strjoin`, `strlcpy`, `strlcat`, `strmapi`, `strndup`, `strtrim`, `substr`
- `libftx.reader`: line-by-line reading from several file descriptors at once (`LineReader`, `get_next_line`)
- `libftx.slist`: a singly linked list (`LinkedList`, `Node`)
- `libftx.dlist`: a doubly linked list with node removal and merge sort (`DoublyLinkedList`, `DNode`)
- `libftx.numfmt` and `libftx.printf`: a printf-style formatter supporting `%c %s %p %d %i %u %x %X %% %n`, the flags `- 0 + space # '`, width and precision (either may be `*`) and the length modifiers `h hh l ll`

## Installation

```
pip install .
```

## Examples

Parsing numbers:

```python
from libftx.numbers import atoi, parse_int, itoa

atoi("  -42abc")    # -42
parse_int("123")    # 123; ValueError on a stray character, OverflowError outside the int range
itoa(-2147483648)   # "-2147483648"
```

Searching and building strings:

```python
from libftx.search import strchr, strnstr
from libftx.strings import split, strtrim, substr, strlcpy

strchr("hello", "l")            # 2, or None when absent
strnstr("haystack", "st", 8)    # 3
split("  hello  world ", " ")   # ["hello", "world"]
strtrim("xxhixx", "x")          # "hi"
substr("abcdef", 2, 3)          # "cde"
strlcpy("", "abcdef", 4)        # ("abc", 6)
```

Reading lines:

```python
import os
from libftx.reader import LineReader

reader = LineReader(32)
fd = os.open("notes.txt", os.O_RDONLY)
line, more = reader.read_line(fd)   # more is False once the last line has been read
```

Linked lists:

```python
from libftx.slist import LinkedList
from libftx.dlist import DoublyLinkedList

numbers = LinkedList([1, 2, 3])
numbers.pop_back()            # 3
list(numbers.map(str))        # ["1", "2"]

items = DoublyLinkedList([3, 1, 2])
items.sort()
list(items)                   # [1, 2, 3]
```

Formatting:

```python
from libftx.printf import sprintf, printf, CountRef

sprintf("%05d|%-6s|%#x", 42, "ab", 255)   # "00042|ab    |0xff"
sprintf("%'u", 1234567)                    # "1,234,567"

written = CountRef()
sprintf("abc%n", written)                  # written.value == 3

printf("%s\n", "hello")                    # writes to standard output, returns 6
```

`sprintf` raises `ValueError` when the template ends inside a conversion and
`TypeError` when arguments are missing or of the wrong kind.

## What the package does not do

It has no byte-buffer helpers (fill, copy, compare or search within a
`bytearray`) and no functions for writing characters, strings or numbers
straight to a file descriptor; use Python's `bytearray` methods and
`os.write` for those. It is a library only and installs no command.

## Running the tests

```
pip install ".[test]"
pytest
```