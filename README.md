# miniprintf

A compact printf-style formatter. It supports a small, fixed set of conversions
and reports how many characters it produced, the way a classic `printf` does.
It is a library only; it has no command-line program.

## Installation

```
pip install miniprintf
```

## Usage

```python
from miniprintf.printf import printf, sprintf

text = sprintf("%s has %d items (%x in hex)", "cart", 42, 42)
# 'cart has 42 items (2a in hex)'

count = printf("%c%c%c\n", "a", "b", "c")
# writes "abc\n" to standard output and returns 4
```

`sprintf` returns the formatted string. `printf` formats the same way, writes
the result to standard output and returns the number of characters written.
Use the `file` keyword to send the output to any text stream:

```python
import io
from miniprintf.printf import printf

buffer = io.StringIO()
printf("pointer: %p\n", 0xDEADBEEF, file=buffer)
# buffer.getvalue() == 'pointer: 0xdeadbeef\n'
```

### Supported conversions

| Conversion | Argument                                  | Output                                           |
|------------|-------------------------------------------|--------------------------------------------------|
| `%c`       | a one-character string or a character code | the character (codes are reduced to their low byte) |
| `%s`       | a string or `None`                        | the string, or `(null)` for `None`               |
| `%d`, `%i` | an integer                                | signed decimal, wrapped to 32 bits               |
| `%u`       | an integer                                | unsigned decimal, wrapped to 32 bits             |
| `%x`       | an integer                                | lower-case hexadecimal, wrapped to 32 bits       |
| `%X`       | an integer                                | upper-case hexadecimal, wrapped to 32 bits       |
| `%p`       | an address or `None`                      | `0x` and lower-case hex (64-bit), or `(nil)` for `None` or 0 |
| `%%`       | none                                      | a literal `%`                                    |

A `%` followed by any other character is copied to the output unchanged,
together with that character, and consumes no argument. Arguments left over
after the template is used up are ignored. No flags, widths or precisions are
supported.

### Building blocks

`miniprintf.conversions` has the helpers each conversion relies on, and they can
be used on their own:

```python
from miniprintf.conversions import (
    format_char,
    format_decimal,
    format_hex,
    format_pointer,
    format_string,
    format_unsigned,
    itoa,
    itoa_base,
)

itoa(-123)                  # '-123'
itoa_base(255, 16)          # 'ff'
format_char(65)             # 'A'
format_decimal(2**31)       # '-2147483648'
format_unsigned(-1)         # '4294967295'
format_hex(255, True)       # 'FF'
format_pointer(None)        # '(nil)'
format_string(None)         # '(null)'
```

`itoa_base` accepts bases from 2 to 16 and non-negative values only.

### Errors

`miniprintf.printf.FormatError` (a subclass of `ValueError`) is raised when the
template is `None`, when it ends with a lone `%`, or when a conversion gets
fewer arguments than it needs.

The helpers raise on bad input as well: `format_char` raises `ValueError` for
a string that is not exactly one character, `format_string` raises `TypeError`
for anything other than a string or `None`, and `itoa_base` raises `ValueError`
for a negative value or a base outside 2 to 16. These errors pass through
`sprintf` and `printf` unchanged.

## Running the tests

```
pip install "miniprintf[test]"
pytest
```