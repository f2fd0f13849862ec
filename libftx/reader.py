"""Line-by-line reading from file descriptors, with state kept per descriptor."""

from __future__ import annotations

import errno
import os

BUFFER_SIZE = 32


def _decode(raw: bytes) -> str:
    return raw.decode("utf-8", errors="surrogateescape")


class LineReader:
    """Reads lines from any number of file descriptors, buffering leftovers."""

    def __init__(self, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError("buffer size must be at least 1")
        self.buffer_size = buffer_size
        self._pending: dict[int, bytes] = {}

    def read_line(self, fd: int) -> tuple[str, bool]:
        """Read the next line from ``fd``, without its newline.

        Returns the line and whether more may follow. ``False`` means the
        line was the last one (it may be empty) and the descriptor's state
        has been dropped. Read errors discard all buffered state and raise
        OSError.
        """
        if fd < 0:
            raise OSError(errno.EBADF, os.strerror(errno.EBADF))
        os.fstat(fd)
        data = self._pending.get(fd, b"")
        try:
            while b"\n" not in data:
                chunk = os.read(fd, self.buffer_size)
                if not chunk:
                    break
                data += chunk
        except OSError:
            self.clear()
            raise
        line, newline, rest = data.partition(b"\n")
        if newline:
            self._pending[fd] = rest
            return _decode(line), True
        self._pending.pop(fd, None)
        return _decode(line), False

    def forget(self, fd: int) -> None:
        """Drop the buffered data of ``fd``; KeyError if none is kept."""
        try:
            del self._pending[fd]
        except KeyError:
            raise KeyError(f"no state kept for descriptor {fd}") from None

    def clear(self) -> None:
        """Drop the buffered data of every descriptor."""
        self._pending.clear()


_default_reader = LineReader()


def get_next_line(fd: int) -> tuple[str, bool]:
    """Read the next line from ``fd`` with a shared reader; see LineReader.read_line."""
    return _default_reader.read_line(fd)