import io

import pytest

from gdrivecore.readers import ByteCounter, LimitedReadCloser, ReadSeeker, StdoutLogger


class Tracked(io.BytesIO):
    def __init__(self, data):
        super().__init__(data)
        self.was_closed = False

    def close(self):
        self.was_closed = True
        super().close()


def test_limited_read_all_stops_at_limit():
    reader = LimitedReadCloser(io.BytesIO(b"abcdefgh"), 3)
    assert reader.read() == b"abc"
    assert reader.read() == b""


def test_limited_read_in_pieces():
    reader = LimitedReadCloser(io.BytesIO(b"abcdefgh"), 5)
    assert reader.read(2) == b"ab"
    assert reader.read(10) == b"cde"
    assert reader.read(1) == b""


def test_limited_read_shorter_source():
    reader = LimitedReadCloser(io.BytesIO(b"xy"), 10)
    assert reader.read() == b"xy"
    assert reader.read() == b""


def test_limited_zero_limit():
    reader = LimitedReadCloser(io.BytesIO(b"data"), 0)
    assert reader.read() == b""


def test_limited_close_closes_underlying():
    source = Tracked(b"data")
    LimitedReadCloser(source, 2).close()
    assert source.was_closed


def test_limited_context_manager():
    source = Tracked(b"payload")
    with LimitedReadCloser(source, 3) as reader:
        assert reader.read() == b"pay"
    assert source.was_closed


def test_read_seeker_reads_through():
    rs = ReadSeeker(io.BytesIO(b"hello world"))
    assert rs.read(5) == b"hello"
    assert rs.read() == b" world"


def test_read_seeker_position_tracks_reads():
    data = b"hello world"
    rs = ReadSeeker(io.BytesIO(data))
    rs.read(4)
    assert rs.seek(0, io.SEEK_CUR) == 4
    rs.read()
    assert rs.seek(0, io.SEEK_CUR) == len(data)


def test_read_seeker_seek_to_current_start():
    rs = ReadSeeker(io.BytesIO(b"abc"))
    assert rs.seek(0) == 0


def test_read_seeker_seek_backwards_fails():
    rs = ReadSeeker(io.BytesIO(b"abcdef"))
    rs.read(3)
    with pytest.raises(EOFError):
        rs.seek(1)


def test_read_seeker_seek_forwards_fails():
    rs = ReadSeeker(io.BytesIO(b"abcdef"))
    with pytest.raises(EOFError):
        rs.seek(2, io.SEEK_CUR)


def test_read_seeker_seek_end_fails():
    rs = ReadSeeker(io.BytesIO(b"abcdef"))
    with pytest.raises(EOFError):
        rs.seek(0, io.SEEK_END)


def test_read_seeker_negative_fails():
    rs = ReadSeeker(io.BytesIO(b"abcdef"))
    with pytest.raises(EOFError):
        rs.seek(-1)


def test_stdout_logger_forwards():
    received = []
    logger = StdoutLogger(received.append)
    assert logger.write(b"line one") == len(b"line one")
    logger.write(b"two")
    assert received == [b"line one", b"two"]


def test_byte_counter_counts_buffers():
    counter = ByteCounter()
    assert counter.bytes_read() == 0
    first = bytearray(10)
    second = bytearray(6)
    assert counter.read(first) == len(first)
    counter.read(second)
    assert counter.bytes_read() == len(first) + len(second)


def test_byte_counter_leaves_buffer_alone():
    counter = ByteCounter()
    buf = bytearray(b"keep")
    counter.read(buf)
    assert buf == bytearray(b"keep")