"""ASCII character classes and case mapping.

Each function takes a character code or a one-character string. Only the
ASCII ranges count; other characters are never letters or digits.
"""

from __future__ import annotations


def _code(c: int | str) -> int:
    return ord(c) if isinstance(c, str) else int(c)


def isalpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def isdigit(c: int | str) -> bool:
    """True for ASCII decimal digits."""
    return 48 <= _code(c) <= 57


def isalnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isascii(c: int | str) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def isprint(c: int | str) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


def _convert(c: int | str, code: int) -> int | str:
    return chr(code) if isinstance(c, str) else code


def tolower(c: int | str) -> int | str:
    """Map an ASCII upper-case letter to lower case; leave others alone."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return _convert(c, code)


def toupper(c: int | str) -> int | str:
    """Map an ASCII lower-case letter to upper case; leave others alone."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return _convert(c, code)