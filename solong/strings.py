"""String primitives: searching, comparing, copying, slicing and splitting.

Positions are returned as indices into the text rather than as views of
it. Where a search finds nothing, None is returned. Searching for the NUL
character finds the end of the text, at index ``len(text)``.
"""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Tuple, Union

Char = Union[str, int]

_NUL = "\0"


def _char(c: Char) -> str:
    """Return ``c`` as a one-character string; integer codes keep their low byte."""
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code, got bool")
    if isinstance(c, int):
        return chr(c % 256)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    raise TypeError(
        f"expected a character or an integer code, got {type(c).__name__}"
    )


def _check_size(value: int, what: str) -> None:
    if value < 0:
        raise ValueError(f"{what} must not be negative, got {value}")


def strlen(text: str) -> int:
    """Return the number of characters in ``text``."""
    return len(text)


def strchr(text: str, c: Char) -> Optional[int]:
    """Return the index of the first ``c`` in ``text``, or None.

    Searching for NUL gives ``len(text)``, the position of the terminator.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(text: str, c: Char) -> Optional[int]:
    """Return the index of the last ``c`` in ``text``, or None.

    Searching for NUL gives ``len(text)``, the position of the terminator.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def _compare(first: str, second: str, limit: Optional[int]) -> int:
    if limit is not None:
        first, second = first[:limit], second[:limit]
    for a, b in zip(first, second):
        if a != b:
            return ord(a) - ord(b)
    if len(first) > len(second):
        return ord(first[len(second)])
    if len(second) > len(first):
        return -ord(second[len(first)])
    return 0


def strcmp(first: str, second: str) -> int:
    """Compare two texts character by character.

    Returns the difference of the codes of the first differing characters,
    the end of a text counting as code 0; equal texts give 0.
    """
    return _compare(first, second, None)


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most the first ``n`` characters of two texts, like strcmp."""
    _check_size(n, "length")
    return _compare(first, second, n)


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0. Returns None when absent.
    """
    _check_size(length, "length")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the text that fits, at most ``size - 1`` characters, and the
    full length of ``src`` so that truncation can be detected.
    """
    _check_size(size, "size")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have
    had: the length of ``dest``, counted only up to ``size``, plus the
    length of ``src``.
    """
    _check_size(size, "size")
    dest_len = min(len(dest), size)
    room = size - 1 - dest_len
    result = dest + src[:room] if src and room > 0 else dest
    return result, dest_len + len(src)


def strdup(text: str) -> str:
    """Return a copy of ``text``."""
    return "".join(text)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start past the end of the text gives an empty string.
    """
    _check_size(start, "start")
    _check_size(length, "length")
    if start > len(text):
        return ""
    return text[start:start + length]


def strjoin(first: str, second: str) -> str:
    """Return ``first`` followed by ``second``."""
    return first + second


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def split(text: str, sep: Char) -> List[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    return [word for word in text.split(_char(sep)) if word]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Return a new text of ``func(index, char)`` for every character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(
    chars: MutableSequence[str], func: Callable[[int, str], Optional[str]]
) -> None:
    """Call ``func(index, char)`` on every character of ``chars`` in order.

    Where ``func`` returns a character, it replaces the one at that index;
    a None result leaves the character as it was.
    """
    for index, ch in enumerate(list(chars)):
        result = func(index, ch)
        if result is not None:
            chars[index] = result