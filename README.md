# cstringkit

Routines modelled on C's `string.h`, a small `sprintf` and an `sscanf`, for
Python code that needs C-style string behaviour. Everything works on
ordinary Python values. Strings are never changed in place: each function
returns a new string. Where C returns a pointer, these functions return an
index, or `None` if nothing is found.

## Installation

```
pip install cstringkit
```

## Modules

### `cstringkit.memory`

These functions work on `bytes` and `bytearray`. Bytes are compared as
signed 8-bit values.

- `memchr(data, c, n)` returns the offset of the first byte equal to `c`
  among the first `n` bytes, or `None`.
- `memcmp(first, second, n)` returns the difference at the first mismatch,
  or `0`.
- `memcpy(dest, src, n)` copies into a `bytearray` and returns it.
- `memset(buffer, c, n)` fills a `bytearray` and returns it.

A count that is negative or longer than a buffer raises `ValueError`.

### `cstringkit.cstring`

A string ends at its first `"\0"`, if it has one.

- Measuring and searching: `strlen`, `strchr`, `strrchr`, `strpbrk`,
  `strstr` and `strcspn`.
- Comparing: `strncmp`.
- Building strings: `strncpy`, `strncat`, `strcat` and `strcpy`.
- Tokenizing: `Tokenizer(text).next_token(delim)` works like `strtok` and
  takes new delimiters on each call. `tokenize(text, delim)` yields every
  token.

### `cstringkit.text`

- `to_upper` and `to_lower` change the case of ASCII letters only.
- `insert(src, text, start_index)` raises `IndexError` if the index lies
  outside `src`.
- `trim(src, trim_chars)` strips the given characters from both ends. It
  returns `None` if either argument is `None`.

### `cstringkit.errnames`

`strerror(errnum, platform=None)` returns the error message for an error
number.

- `platform` may be `Platform.LINUX`, `Platform.DARWIN`, `"linux"` or
  `"darwin"`. Without it, the running system is used.
- A number outside the table gives `"Unknown error <n>"`.

### `cstringkit.formatting`

`sprintf(fmt, *args)` returns the formatted string.

- Conversions: `c`, `d`, `f`, `s`, `u` and `%`.
- Flags: `-`, `+`, space and `0`.
- Width and precision, each of which may be `*`.
- Length modifiers: `h` and `l`.
- Other conversion letters are parsed but produce no output and use no
  argument.
- For `d`, width is applied before precision and sign, so `%+5d` gives
  `"+   42"`.
- Missing or wrongly typed arguments raise `TypeError`.

The module also provides:

- `parse_spec` and `split_format`, which return `FormatSpec` and
  `FormatPart` objects.
- `int_to_str`.
- `float_to_str(value, precision)`, which rounds half up on the next digit.

### `cstringkit.scanning`

`sscanf(text, fmt)` returns `(count, values)`. `values` holds the assigned
values in format order.

- Conversions: `c`, `s`, `d`, `u`, `i`, `p`, `x`, `X`, `o`, `e`, `E`, `f`,
  `g`, `G`, `n` and `%`.
- Format options: `*` (read without assigning), a field width, and the
  length modifiers `h`, `l` and `L`.
- Integers wrap to 16, 32 or 64 bits.
- A floating value without a length modifier is rounded to single
  precision.

`Scanner(text, fmt).scan()` does the same work. It leaves the count in
`scanner.count`. `ScanToken` describes one conversion.

## Example

```python
from cstringkit.cstring import tokenize
from cstringkit.formatting import sprintf
from cstringkit.scanning import sscanf
from cstringkit.text import trim

sprintf("%05d|%-6s|%.2f", 42, "abc", 3.14159)  # '00042|abc   |3.14'
trim("  hello  ", " ")                          # 'hello'
list(tokenize("a,b;;c", ",;"))                  # ['a', 'b', 'c']
sscanf("12 abc", "%d %s")                       # (2, [12, 'abc'])
```

## Limitations

- `sprintf` has no hexadecimal, octal, exponent, `g` or pointer output.
- The scanner returns values instead of writing to caller storage. It has
  no wide-character handling beyond plain Python strings.
- There is no command-line tool. The package is a library only.

## Running the tests

```
pip install -e .[test]
pytest
```