import io
import os

import pytest

from cubcaster.linereader import LineReader, get_next_line

TEXT = "first line\nsecond\n\nlast without newline"


@pytest.mark.parametrize("size", [1, 2, 3, 7, 1024])
def test_text_lines_keep_newlines(size):
    reader = LineReader(io.StringIO(TEXT), size)
    assert list(reader) == ["first line\n", "second\n", "\n", "last without newline"]


@pytest.mark.parametrize("size", [1, 5, 64])
def test_join_reconstructs_input(size):
    data = b"alpha\nbeta\ngamma\n"
    lines = list(LineReader(io.BytesIO(data), size))
    assert b"".join(lines) == data
    assert all(line.endswith(b"\n") for line in lines)


def test_binary_lines():
    reader = LineReader(io.BytesIO(b"a\nbc\n"), 4)
    assert reader.read_line() == b"a\n"
    assert reader.read_line() == b"bc\n"
    assert reader.read_line() is None


def test_empty_stream_returns_none():
    reader = LineReader(io.StringIO(""))
    assert reader.read_line() is None
    assert list(reader) == []


def test_none_repeats_after_end():
    reader = LineReader(io.StringIO("x"), 2)
    assert reader.read_line() == "x"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_default_buffer_size():
    assert LineReader(io.StringIO("")).buffer_size == 1024


@pytest.mark.parametrize("size", [0, -1, 2147483647])
def test_invalid_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), size)


class _FailingStream:
    def __init__(self):
        self.calls = 0

    def read(self, n):
        self.calls += 1
        if self.calls == 1:
            return "partial"
        raise OSError("read failed")


def test_read_error_discards_buffer():
    stream = _FailingStream()
    reader = LineReader(stream, 8)
    with pytest.raises(OSError):
        reader.read_line()
    stream.read = lambda n: ""
    assert reader.read_line() is None


def _fd_for(tmp_path, name, data):
    path = tmp_path / name
    path.write_bytes(data)
    return os.open(path, os.O_RDONLY)


def test_get_next_line_reads_file(tmp_path):
    data = b"one\ntwo\nthree"
    fd = _fd_for(tmp_path, "a.txt", data)
    try:
        lines = list(iter(lambda: get_next_line(fd, 3), None))
    finally:
        os.close(fd)
    assert lines == [b"one\n", b"two\n", b"three"]
    assert b"".join(lines) == data


def test_get_next_line_separate_descriptors(tmp_path):
    fd_a = _fd_for(tmp_path, "a.txt", b"a1\na2\n")
    fd_b = _fd_for(tmp_path, "b.txt", b"b1\nb2\n")
    try:
        assert get_next_line(fd_a) == b"a1\n"
        assert get_next_line(fd_b) == b"b1\n"
        assert get_next_line(fd_a) == b"a2\n"
        assert get_next_line(fd_b) == b"b2\n"
        assert get_next_line(fd_a) is None
        assert get_next_line(fd_b) is None
    finally:
        os.close(fd_a)
        os.close(fd_b)


def test_get_next_line_negative_fd():
    with pytest.raises(ValueError):
        get_next_line(-1)


def test_get_next_line_bad_buffer_size(tmp_path):
    fd = _fd_for(tmp_path, "c.txt", b"x\n")
    try:
        with pytest.raises(ValueError):
            get_next_line(fd, 0)
    finally:
        os.close(fd)


def test_get_next_line_closed_fd(tmp_path):
    fd = _fd_for(tmp_path, "d.txt", b"x\n")
    os.close(fd)
    with pytest.raises(OSError):
        get_next_line(fd)