"""String helpers: number conversion, splitting, trimming, searching and copying.

Searches return an index, or None where nothing is found. The bounded
copy functions return the resulting string together with the length the
caller would have needed.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, List, Optional, Tuple

_WHITESPACE = " \t\n\v\f\r"
_LONG_MAX = 2**63 - 1
_OVERFLOW_LIMIT = _LONG_MAX // 10


def _wrap_int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def _check_char(ch: str) -> None:
    if not isinstance(ch, str) or len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")


def _check_non_negative(**values: int) -> None:
    for name, value in values.items():
        if value < 0:
            raise ValueError(f"{name} must not be negative: {value}")


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way the C library helper does.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit. A value that grows too large yields -1 (positive) or 0
    (negative), and the result is wrapped to a signed 32-bit integer.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        if result >= _OVERFLOW_LIMIT:
            return -1 if sign == 1 else 0
        result = result * 10 + (ord(ch) - ord("0"))
    return _wrap_int32(result * sign)


def itoa(n: int) -> str:
    """Decimal representation of an integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)


def split(text: str, sep: str) -> List[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    _check_char(sep)
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: Optional[str]) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` beginning at ``start``."""
    _check_non_negative(start=start, length=length)
    if length == 0 or start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters."""
    _check_non_negative(length=length)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters; return the code difference at the first mismatch."""
    _check_non_negative(n=n)
    for x, y in zip_longest(a[:n], b[:n], fillvalue="\0"):
        if x != y:
            return ord(x) - ord(y)
    return 0


def strchr(text: str, ch: str) -> Optional[int]:
    """Index of the first ``ch`` in ``text``; the terminator ``"\\0"`` is found at the end."""
    _check_char(ch)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(text: str, ch: str) -> Optional[int]:
    """Index of the last ``ch`` in ``text``; the terminator ``"\\0"`` is found at the end."""
    _check_char(ch)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copied text and the full length of ``src``.
    """
    _check_non_negative(size=size)
    return src[:max(size - 1, 0)], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the whole result would need.
    """
    _check_non_negative(size=size)
    if size == 0:
        return dst, len(src)
    used = min(len(dst), size)
    if used >= size:
        return dst, used + len(src)
    return dst + src[:size - used - 1], used + len(src)


def strjoin(a: str, b: str) -> str:
    """Concatenate two strings."""
    if not isinstance(a, str) or not isinstance(b, str):
        raise TypeError("both arguments must be strings")
    return a + b


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """New string built from ``func(index, char)`` for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(chars: List[str], func: Callable[[int, str], Optional[str]]) -> List[str]:
    """Apply ``func(index, char)`` to each element of ``chars`` in place.

    A returned character replaces the element; None leaves it as it is.
    """
    for index, ch in enumerate(chars):
        replacement = func(index, ch)
        if replacement is not None:
            chars[index] = replacement
    return chars