"""Formatted output with the conversions %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import sys
from typing import Any, Iterator, List, Optional

from solong.numbers import convert_base, uitoa

HEX_LOW = "0123456789abcdef"
HEX_UP = "0123456789ABCDEF"

_INT_BITS = 32


def _wrap_int(value: int) -> int:
    """Reduce ``value`` to a 32-bit two's complement signed integer."""
    modulus = 1 << _INT_BITS
    value %= modulus
    return value - modulus if value >= modulus >> 1 else value


def _as_int(value: Any, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} expects an integer, got {type(value).__name__}")
    return value


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_as_int(value, "c") % 256)


def _format_string(value: Optional[str]) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string, got {type(value).__name__}")
    return value


def _format_pointer(value: Optional[int]) -> str:
    if value is None or _as_int(value, "p") == 0:
        return "(nil)"
    return "0x" + convert_base(value, HEX_LOW)


def _convert(spec: str, args: Iterator[Any]) -> str:
    def take() -> Any:
        try:
            return next(args)
        except StopIteration:
            raise ValueError(f"not enough arguments for %{spec}") from None

    if spec == "c":
        return _format_char(take())
    if spec == "s":
        return _format_string(take())
    if spec == "p":
        return _format_pointer(take())
    if spec in ("d", "i"):
        return str(_wrap_int(_as_int(take(), spec)))
    if spec == "u":
        return uitoa(_as_int(take(), spec))
    if spec == "x":
        return convert_base(_as_int(take(), spec) % (1 << _INT_BITS), HEX_LOW)
    if spec == "X":
        return convert_base(_as_int(take(), spec) % (1 << _INT_BITS), HEX_UP)
    if spec == "%":
        return "%"
    return ""


def sprintf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with each conversion replaced by the next argument.

    An unknown conversion, and a lone ``%`` at the end, produce nothing.
    Extra arguments are ignored; too few raise ValueError.
    """
    if fmt is None:
        raise TypeError("format must be a string, not None")
    pieces: List[str] = []
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch == "%":
            spec = next(chars, "")
            pieces.append(_convert(spec, remaining) if spec else "")
        else:
            pieces.append(ch)
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    return len(text)