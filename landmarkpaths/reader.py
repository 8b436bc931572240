"""Buffered reader for whitespace-separated graph files."""

from __future__ import annotations

from os import PathLike

_DIGIT_0 = ord("0")
_DIGIT_9 = ord("9")


class GraphFormatError(ValueError):
    """Raised when a graph file does not have the expected layout."""


def _is_alpha(byte: int) -> bool:
    return bytes((byte,)).isalpha()


class GraphReader:
    """Reads unsigned integers and the header line of a graph file.

    Any byte that is not a decimal digit separates numbers, so the reader
    accepts spaces, tabs, newlines, commas and similar separators alike.
    """

    def __init__(self, path: str | PathLike[str], buffer_size: int = 1 << 20) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._buffer_size = buffer_size
        self._buffer = b""
        self._pos = 0
        self._eof = False
        self._file = open(path, "rb")
        self._fill()

    def _fill(self) -> None:
        self._buffer = self._file.read(self._buffer_size)
        self._pos = 0
        if len(self._buffer) < self._buffer_size:
            self._eof = True

    def _next_byte(self) -> int | None:
        if self._pos >= len(self._buffer):
            if self._eof:
                return None
            self._fill()
            if not self._buffer:
                return None
        byte = self._buffer[self._pos]
        self._pos += 1
        return byte

    def read_int(self) -> int:
        """Return the next unsigned integer, skipping any non-digit bytes."""
        value: int | None = None
        while (byte := self._next_byte()) is not None:
            if _DIGIT_0 <= byte <= _DIGIT_9:
                value = (value or 0) * 10 + (byte - _DIGIT_0)
            elif value is not None:
                break
        if value is None:
            raise GraphFormatError("Wrong file format.")
        return value

    def read_header(self) -> tuple[int, int, str]:
        """Return ``(vertices, edges, direction)`` from the first line."""
        vertices = self.read_int()
        edges = self.read_int()
        while (byte := self._next_byte()) is not None:
            if _is_alpha(byte):
                return vertices, edges, chr(byte)
        raise GraphFormatError("Wrong file format.")

    def close(self) -> None:
        """Close the underlying file."""
        self._file.close()

    def __enter__(self) -> GraphReader:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()