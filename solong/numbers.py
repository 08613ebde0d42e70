"""Conversions between integers and their text forms."""

from __future__ import annotations

from itertools import takewhile

from solong.chars import isdigit, is_sign

_WHITESPACE = " \t\n\v\f\r"


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a two's complement signed integer of ``bits`` bits."""
    modulus = 1 << bits
    value %= modulus
    return value - modulus if value >= modulus >> 1 else value


def _parse_signed(text: str) -> int:
    """Parse leading whitespace, one optional sign and the digits after it."""
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest and is_sign(rest[0]):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = "".join(takewhile(isdigit, rest))
    return sign * int(digits) if digits else 0


def atoi(text: str) -> int:
    """Parse the leading decimal integer of ``text`` as a 32-bit signed int.

    Leading whitespace and a single sign are accepted; parsing stops at the
    first non-digit. A text with no digits gives 0. Values beyond the 32-bit
    range wrap around.
    """
    return _wrap(_parse_signed(text), 32)


def atoli(text: str) -> int:
    """Parse the leading decimal integer of ``text`` as a 64-bit signed long."""
    return _wrap(_parse_signed(text), 64)


def itoa(n: int) -> str:
    """Return the decimal text of ``n``, with a leading minus when negative."""
    return str(n)


def uitoa(n: int) -> str:
    """Return the decimal text of ``n`` taken as a 32-bit unsigned int."""
    return str(n % (1 << 32))


def convert_base(n: int, base: str) -> str:
    """Write ``n``, taken as a 64-bit unsigned size, in the digits of ``base``.

    The length of ``base`` is the radix and its characters are the digits,
    lowest first. Zero is written as the single digit ``base[0]``.
    """
    if len(base) < 2:
        raise ValueError("a base needs at least two digits")
    radix = len(base)
    n %= 1 << 64
    digits = []
    while True:
        n, remainder = divmod(n, radix)
        digits.append(base[remainder])
        if n == 0:
            break
    return "".join(reversed(digits))