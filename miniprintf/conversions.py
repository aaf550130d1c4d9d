"""Renderers for the individual printf conversions."""

from __future__ import annotations

import operator

_DIGITS = "0123456789abcdef"
_INT_BITS = 32
_POINTER_BITS = 64


def _as_unsigned(value: int, bits: int) -> int:
    """Reduce an integer to the unsigned range of the given width."""
    return operator.index(value) & ((1 << bits) - 1)


def _as_signed(value: int, bits: int) -> int:
    """Reduce an integer to the signed two's-complement range of the given width."""
    unsigned = _as_unsigned(value, bits)
    if unsigned >= 1 << (bits - 1):
        return unsigned - (1 << bits)
    return unsigned


def itoa(n: int) -> str:
    """Return the decimal representation of an integer."""
    n = operator.index(n)
    if n < 0:
        return "-" + itoa(-n)
    return itoa_base(n, 10)


def itoa_base(value: int, base: int) -> str:
    """Return a non-negative integer written in ``base`` (2 to 16), lower-case digits."""
    value = operator.index(value)
    base = operator.index(base)
    if not 2 <= base <= len(_DIGITS):
        raise ValueError(f"base must be between 2 and {len(_DIGITS)}, got {base}")
    if value < 0:
        raise ValueError(f"value must be non-negative, got {value}")
    if value == 0:
        return _DIGITS[0]
    digits = []
    while value:
        value, remainder = divmod(value, base)
        digits.append(_DIGITS[remainder])
    return "".join(reversed(digits))


def format_char(c: int | str) -> str:
    """Render a ``%c`` argument: a one-character string or a character code (low byte)."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(_as_unsigned(c, 8))


def format_string(s: str | None) -> str:
    """Render a ``%s`` argument; ``None`` is shown as ``(null)``."""
    if s is None:
        return "(null)"
    if not isinstance(s, str):
        raise TypeError(f"expected a string or None, got {type(s).__name__}")
    return s


def format_decimal(n: int) -> str:
    """Render a ``%d``/``%i`` argument as a signed 32-bit integer."""
    return itoa(_as_signed(n, _INT_BITS))


def format_unsigned(n: int) -> str:
    """Render a ``%u`` argument as an unsigned 32-bit integer."""
    return itoa_base(_as_unsigned(n, _INT_BITS), 10)


def format_hex(n: int, uppercase: bool = False) -> str:
    """Render a ``%x`` or ``%X`` argument as an unsigned 32-bit hexadecimal number."""
    text = itoa_base(_as_unsigned(n, _INT_BITS), 16)
    return text.upper() if uppercase else text


def format_pointer(address: int | None) -> str:
    """Render a ``%p`` argument; a null address is shown as ``(nil)``."""
    if address is None:
        return "(nil)"
    address = _as_unsigned(address, _POINTER_BITS)
    if address == 0:
        return "(nil)"
    return "0x" + itoa_base(address, 16)