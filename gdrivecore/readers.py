"""Small reader and writer helpers."""

from __future__ import annotations

import io
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, BinaryIO


class LimitedReadCloser:
    """Reads at most ``n`` bytes from ``rc`` and closes ``rc`` when closed."""

    def __init__(self, rc: BinaryIO, n: int) -> None:
        self._rc = rc
        self._remaining = n

    def read(self, size: int = -1) -> bytes:
        if self._remaining <= 0:
            return b""
        if size < 0 or size > self._remaining:
            size = self._remaining
        data = self._rc.read(size)
        self._remaining -= len(data)
        return data

    def close(self) -> None:
        self._rc.close()

    def __enter__(self) -> LimitedReadCloser:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


class ReadSeeker:
    """A forward-only reader that can report its position through ``seek``.

    Seeking to the current position succeeds; any other seek raises
    :class:`EOFError`.
    """

    def __init__(self, reader: BinaryIO) -> None:
        self._reader = reader
        self._offset = 0

    def read(self, size: int = -1) -> bytes:
        data = self._reader.read(size)
        self._offset += len(data)
        return data

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        if whence == io.SEEK_SET:
            new_offset = offset
        elif whence == io.SEEK_CUR:
            new_offset = self._offset + offset
        elif whence == io.SEEK_END:
            raise EOFError("unexpected EOF")
        else:
            new_offset = 0
        if new_offset < 0 or new_offset != self._offset:
            raise EOFError("unexpected EOF")
        return new_offset


@dataclass
class StdoutLogger:
    """A writer that hands everything written to ``callback``."""

    callback: Callable[[bytes], None]

    def write(self, data: bytes) -> int:
        self.callback(data)
        return len(data)


class ByteCounter:
    """A reader that counts the size of every buffer it is asked to fill."""

    def __init__(self) -> None:
        self._total = 0

    def bytes_read(self) -> int:
        return self._total

    def read(self, buf: bytearray) -> int:
        """Count ``buf`` as read without changing it; return its length."""
        n = len(buf)
        self._total += n
        return n