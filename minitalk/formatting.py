"""A small printf with the conversions ``c s p d i u x X %``.

Integers wrap the way their C counterparts do: ``%d``/``%i`` as a signed
32-bit int, ``%u``/``%x``/``%X`` as an unsigned 32-bit int and ``%p`` as an
unsigned 64-bit address. A ``%`` followed by any other character prints
nothing and takes no argument; a ``%`` at the very end is dropped.
"""

from __future__ import annotations

import operator
import sys
from collections.abc import Iterator
from typing import Any, TextIO

_INT_RANGE = 1 << 32
_INT_MIN = -(1 << 31)
_ADDRESS_RANGE = 1 << 64

_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"


def _to_int(value: Any) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(f"expected an integer, got {type(value).__name__}") from None


def _signed32(value: Any) -> int:
    return (_to_int(value) - _INT_MIN) % _INT_RANGE + _INT_MIN


def _unsigned32(value: Any) -> int:
    return _to_int(value) % _INT_RANGE


def _in_base16(value: int, digits: str) -> str:
    if value == 0:
        return digits[0]
    out = []
    while value:
        value, rem = divmod(value, 16)
        out.append(digits[rem])
    return "".join(reversed(out))


def format_hex(value: int, uppercase: bool = False) -> str:
    """Return ``value`` as an unsigned 32-bit number in hexadecimal."""
    digits = _UPPER_DIGITS if uppercase else _LOWER_DIGITS
    return _in_base16(_unsigned32(value), digits)


def format_pointer(value: int | None) -> str:
    """Return an address as ``0x`` and lower-case hex, or ``(nil)`` for zero."""
    address = 0 if value is None else _to_int(value) % _ADDRESS_RANGE
    if address == 0:
        return "(nil)"
    return "0x" + _in_base16(address, _LOWER_DIGITS)


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c needs a single character")
        return value
    return chr(_to_int(value) % 256)


def _format_str(value: Any) -> str:
    if value is None:
        return "(null)"
    if isinstance(value, (bytes, bytearray)):
        value = bytes(value).decode("utf-8", errors="replace")
    return str(value).split("\0", 1)[0]


def _next_arg(args: Iterator[Any], conversion: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{conversion}") from None


def _convert(conversion: str, args: Iterator[Any]) -> str:
    if conversion == "%":
        return "%"
    if conversion == "c":
        return _format_char(_next_arg(args, conversion))
    if conversion == "s":
        return _format_str(_next_arg(args, conversion))
    if conversion == "p":
        return format_pointer(_next_arg(args, conversion))
    if conversion in ("d", "i"):
        return str(_signed32(_next_arg(args, conversion)))
    if conversion == "u":
        return str(_unsigned32(_next_arg(args, conversion)))
    if conversion in ("x", "X"):
        return format_hex(_next_arg(args, conversion), uppercase=conversion == "X")
    return ""


def render(template: str, *args: Any) -> str:
    """Return ``template`` with its conversions filled in from ``args``.

    Raises TypeError when the template asks for more arguments than given;
    surplus arguments are ignored.
    """
    pending = iter(args)
    chars = iter(template)
    pieces: list[str] = []
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        conversion = next(chars, None)
        if conversion is None:
            break
        pieces.append(_convert(conversion, pending))
    return "".join(pieces)


def printf(template: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the rendered template to ``stream`` (standard output by default).

    Returns the number of characters written.
    """
    text = render(template, *args)
    out = sys.stdout if stream is None else stream
    out.write(text)
    out.flush()
    return len(text)