"""Reading a stream or a file descriptor one line at a time.

Data is pulled in chunks of a fixed size; whatever follows the last
newline returned is kept for the next call. Lines keep their trailing
newline, and the final line is returned even when it has none.
"""

from __future__ import annotations

import os
from typing import Callable, Dict, Iterator, Optional, Union

Text = Union[str, bytes]

DEFAULT_BUFFER_SIZE = 1024
_MAX_BUFFER_SIZE = 2147483647

_pending: Dict[int, bytes] = {}


def _check_buffer_size(buffer_size: int) -> None:
    if isinstance(buffer_size, bool) or not isinstance(buffer_size, int):
        raise TypeError(f"buffer size must be an int, got {type(buffer_size).__name__}")
    if buffer_size <= 0 or buffer_size >= _MAX_BUFFER_SIZE:
        raise ValueError(f"buffer size out of range: {buffer_size}")


def _newline_index(data: Text) -> int:
    """Position of the first newline in ``data``, or -1 if there is none."""
    return data.find("\n" if isinstance(data, str) else b"\n")


def _split_line(
    stash: Optional[Text], read: Callable[[], Text]
) -> "tuple[Optional[Text], Optional[Text]]":
    """Read until ``stash`` holds a newline or the source is exhausted.

    Returns the next line (or None at the end) and what remains after it.
    """
    while stash is None or _newline_index(stash) < 0:
        chunk = read()
        if not chunk:
            break
        if isinstance(chunk, bytearray):
            chunk = bytes(chunk)
        stash = chunk if stash is None else stash + chunk
    if not stash:
        return None, None
    index = _newline_index(stash)
    if index < 0:
        return stash, None
    rest = stash[index + 1:]
    return stash[:index + 1], rest or None


class LineReader:
    """Line-by-line reader over a text or binary stream."""

    def __init__(self, stream, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        _check_buffer_size(buffer_size)
        self.stream = stream
        self.buffer_size = buffer_size
        self._stash: Optional[Text] = None

    def _read_chunk(self) -> Text:
        return self.stream.read(self.buffer_size)

    def read_line(self) -> Optional[Text]:
        """The next line with its newline, or None once the stream is exhausted.

        A read error discards anything buffered and propagates.
        """
        try:
            line, self._stash = _split_line(self._stash, self._read_chunk)
        except OSError:
            self._stash = None
            raise
        return line

    def __iter__(self) -> Iterator[Text]:
        return iter(self.read_line, None)


def get_next_line(fd: int, buffer_size: int = DEFAULT_BUFFER_SIZE) -> Optional[bytes]:
    """The next line read from file descriptor ``fd``, or None at the end.

    Unread data is remembered separately for each descriptor, so several
    descriptors may be read in turn. A read error discards the data kept
    for ``fd`` and propagates.
    """
    if isinstance(fd, bool) or not isinstance(fd, int):
        raise TypeError(f"file descriptor must be an int, got {type(fd).__name__}")
    if fd < 0:
        raise ValueError(f"invalid file descriptor: {fd}")
    _check_buffer_size(buffer_size)
    try:
        line, rest = _split_line(_pending.pop(fd, None), lambda: os.read(fd, buffer_size))
    except OSError:
        _pending.pop(fd, None)
        raise
    if rest is not None:
        _pending[fd] = rest
    return line