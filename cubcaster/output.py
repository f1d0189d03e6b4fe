"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str, stream: Optional[TextIO] = None) -> None:
    """Write one character."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)


def put_str(s: str, stream: Optional[TextIO] = None) -> None:
    """Write a string."""
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    _target(stream).write(s)


def put_endl(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write a string followed by a newline; None writes nothing."""
    if s is None:
        return
    put_str(s, stream)
    put_char("\n", stream)


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write an integer in decimal."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    _target(stream).write(str(n))