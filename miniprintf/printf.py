"""A small printf supporting the ``c s p d i u x X %`` conversions."""

from __future__ import annotations

import sys
from typing import Any, Callable, TextIO

from miniprintf.conversions import (
    format_char,
    format_decimal,
    format_hex,
    format_pointer,
    format_string,
    format_unsigned,
)


class FormatError(ValueError):
    """Raised when a template cannot be formatted with the given arguments."""


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": format_char,
    "s": format_string,
    "p": format_pointer,
    "d": format_decimal,
    "i": format_decimal,
    "u": format_unsigned,
    "x": lambda n: format_hex(n, False),
    "X": lambda n: format_hex(n, True),
}

_MISSING = object()


def sprintf(template: str, *args: Any) -> str:
    """Format ``args`` into ``template`` and return the result.

    Unknown conversions are copied through literally; surplus arguments are ignored.
    """
    if template is None:
        raise FormatError("template must not be None")
    values = iter(args)
    chars = iter(template)
    out: list[str] = []
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise FormatError("template ends with an incomplete conversion")
        if spec == "%":
            out.append("%")
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            out.append("%")
            out.append(spec)
            continue
        value = next(values, _MISSING)
        if value is _MISSING:
            raise FormatError(f"missing argument for conversion %{spec}")
        out.append(convert(value))
    return "".join(out)


def printf(template: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the formatted text to ``file`` (standard output by default); return its length."""
    text = sprintf(template, *args)
    stream = sys.stdout if file is None else file
    stream.write(text)
    return len(text)