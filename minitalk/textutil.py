"""String helpers with the semantics of the classic C string routines.

Positions are returned as indices rather than pointers; ``None`` stands for
"not found".
"""

from __future__ import annotations

from collections.abc import Callable
from itertools import islice, zip_longest

_SPACES = frozenset("\t\n\v\f\r ")


def atoi(text: str) -> int:
    """Parse a leading decimal integer after optional whitespace and one sign.

    Parsing stops at the first non-digit; no digits at all gives 0.
    """
    rest = text.lstrip("".join(_SPACES))
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + (ord(ch) - 48)
    return value * sign


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(int(n))


def split(text: str, sep: str) -> list[str]:
    """Return the non-empty runs of ``text`` between occurrences of ``sep``.

    A NUL separator never occurs inside a string, so the whole text is one word.
    """
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    if sep == "\0":
        return [text] if text else []
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str | None) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``.

    With no charset the text comes back unchanged.
    """
    if charset is None:
        return text
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start`` on.

    A start past the end yields an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if len(text) < start:
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Return the index of ``needle`` lying wholly in the first ``length``
    characters of ``haystack``, or ``None``.

    An empty needle is found at index 0.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    if length == 0 or not haystack:
        return None
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def _codes(s: str | bytes) -> list[int]:
    return list(s) if isinstance(s, (bytes, bytearray)) else [ord(c) for c in s]


def strncmp(a: str | bytes, b: str | bytes, n: int) -> int:
    """Compare at most ``n`` characters; return the difference of the first
    pair that differs, or 0.

    The shorter string compares as if followed by a NUL.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    pairs = zip_longest(_codes(a), _codes(b), fillvalue=0)
    for ca, cb in islice(pairs, n):
        if ca != cb:
            return ca - cb
    return 0


def _char(ch: str | int) -> str:
    if isinstance(ch, int):
        return chr(ch % 256)
    if len(ch) != 1:
        raise ValueError("expected a single character")
    return ch


def strchr(text: str, ch: str | int) -> int | None:
    """Return the index of the first ``ch`` in ``text``, or ``None``.

    Searching for NUL finds the terminator at ``len(text)``.
    """
    target = _char(ch)
    if target == "\0":
        return len(text)
    index = text.find(target)
    return None if index < 0 else index


def strrchr(text: str, ch: str | int) -> int | None:
    """Return the index of the last ``ch`` in ``text``, or ``None``.

    Searching for NUL finds the terminator at ``len(text)``.
    """
    target = _char(ch)
    if target == "\0":
        return len(text)
    index = text.rfind(target)
    return None if index < 0 else index


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a string by applying ``func(index, char)`` to every character."""
    return "".join(func(i, c) for i, c in enumerate(text))