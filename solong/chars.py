"""ASCII character classification and case conversion.

Every function accepts either a one-character string or an integer
character code. Only the ASCII ranges are recognised: any other
character is neither a letter nor a digit and is left alone by the case
conversions.
"""

from __future__ import annotations

from typing import Union

Char = Union[str, int]

_SPACE_CODES = frozenset(map(ord, " \t\n\v\f\r"))
_SIGN_CODES = frozenset(map(ord, "+-"))
_CASE_OFFSET = ord("a") - ord("A")


def _code(c: Char) -> int:
    """Return the integer code of ``c``, validating its type and length."""
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code, got bool")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    raise TypeError(
        f"expected a character or an integer code, got {type(c).__name__}"
    )


def _like(original: Char, code: int) -> Char:
    """Return ``code`` in the same form (string or integer) as ``original``."""
    return chr(code) if isinstance(original, str) else code


def isalpha(c: Char) -> bool:
    """Tell whether ``c`` is an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def isdigit(c: Char) -> bool:
    """Tell whether ``c`` is an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: Char) -> bool:
    """Tell whether ``c`` is an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: Char) -> bool:
    """Tell whether ``c`` lies in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def isprint(c: Char) -> bool:
    """Tell whether ``c`` is a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def is_sign(c: Char) -> bool:
    """Tell whether ``c`` is a plus or minus sign."""
    return _code(c) in _SIGN_CODES


def is_space(c: Char) -> bool:
    """Tell whether ``c`` is one of the six ASCII whitespace characters."""
    return _code(c) in _SPACE_CODES


def tolower(c: Char) -> Char:
    """Return ``c`` with an ASCII capital letter turned into lower case."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        return _like(c, code + _CASE_OFFSET)
    return c


def toupper(c: Char) -> Char:
    """Return ``c`` with an ASCII small letter turned into upper case."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        return _like(c, code - _CASE_OFFSET)
    return c