"""seekbuf provides SeekableBuffer, an in-memory byte store with a single cursor shared by reads, writes and seeks.

It behaves like a random-access binary file backed by memory: writes overwrite in place and grow the store past
its end, reads copy from the cursor, and seeks move the cursor relative to the start, the cursor or the end.
"""

import io
import logging
import operator
import os
from enum import IntEnum
from typing import Optional, Union

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]


class Whence(IntEnum):
    """Origins accepted by SeekableBuffer.seek; the values match os.SEEK_SET, os.SEEK_CUR and os.SEEK_END"""

    START = os.SEEK_SET
    CURRENT = os.SEEK_CUR
    END = os.SEEK_END


class SeekBufferException(Exception):
    """Base class for every error raised by seekbuf."""


class EndOfDataError(SeekBufferException, EOFError):
    """Raised by readinto when bytes were requested but none remain after the cursor."""


class InvalidArgumentError(SeekBufferException, ValueError):
    """Raised by seek when the target position fails validation or the whence is not recognized.

    Attributes:
        offset: The offset passed to seek
        whence: The whence passed to seek, as given by the caller
    """

    def __init__(self, msg: str, offset: Optional[int] = None, whence: Optional[int] = None) -> None:
        super().__init__(msg)
        self.offset = offset
        self.whence = whence


def _as_bytes_view(data: BytesLike) -> memoryview:
    view = memoryview(data)
    if view.format != "B" or view.ndim != 1:
        view = view.cast("B")
    return view


class SeekableBuffer(io.IOBase):
    """A growable in-memory byte store with one cursor for reading, writing and seeking.

    The buffer is a buffered binary stream in the manner of io.BytesIO: it inherits ``closed``, ``close``,
    ``flush``, line reading, iteration and context-manager support from io.IOBase, so it can be wrapped in
    io.TextIOWrapper or handed to code that expects a file opened in ``r+b`` mode. It is not a raw stream,
    since readinto raises EndOfDataError at the end of the data, so it should not be wrapped in
    io.BufferedReader. It is not thread-safe.

    Examples:
        >>> buf = SeekableBuffer()
        >>> buf.write(b"foobar")
        6
        >>> buf.seek(0)
        0
        >>> buf.write(b"baz")
        3
        >>> buf.getvalue()
        b'bazbar'
    """

    def __init__(self, initial: BytesLike = b"", fill: BytesLike = b"\x00") -> None:
        """Initialize the buffer, optionally pre-populated.

        Args:
            initial: Bytes to start with. They are copied, so mutating the argument later does not affect
                the buffer. The cursor starts at 0 either way. (default: empty)
            fill: Single byte used to fill the gap when writing with the cursor past the end of the data.
                (default: b"\\x00")

        Raises:
            ValueError: If ``fill`` is not exactly one byte long
        """
        fill = bytes(_as_bytes_view(fill))
        if len(fill) != 1:
            raise ValueError(f"fill must be a single byte, got {len(fill)} bytes")
        super().__init__()
        self._data = bytearray(_as_bytes_view(initial))
        self._pos = 0
        self._fill = fill

    @classmethod
    def from_bytes(cls, data: BytesLike, **kwargs) -> "SeekableBuffer":
        """Create a buffer holding a copy of ``data`` with the cursor at the start."""
        return cls(data, **kwargs)

    def _check_open(self) -> None:
        if self.closed:
            raise ValueError("I/O operation on closed file")

    def view(self) -> memoryview:
        """Return a read-only view of the bytes from the cursor to the end of the data.

        The view aliases the internal store rather than copying it. While it is alive the store cannot be
        resized, so a write that grows the buffer raises BufferError; release it with ``view.release()`` or
        by using it as a context manager.

        Returns:
            A memoryview over ``data[cursor:]``, empty when the cursor is at or past the end

        Examples:
            >>> buf = SeekableBuffer(b"foobar")
            >>> buf.seek(-1, Whence.END)
            5
            >>> with buf.view() as remainder:
            ...     bytes(remainder)
            b'r'
        """
        self._check_open()
        return memoryview(self._data)[self._pos :].toreadonly()

    def getvalue(self) -> bytes:
        """Return a copy of the entire store regardless of the cursor. Still available after close."""
        return bytes(self._data)

    def __bytes__(self) -> bytes:
        return bytes(self._data[self._pos :])

    def readinto(self, dest) -> int:
        """Copy bytes from the cursor into ``dest`` and advance the cursor past them.

        Args:
            dest: A writable bytes-like object; its length is the number of bytes requested

        Returns:
            The number of bytes copied. This is less than ``len(dest)`` when fewer bytes remain; a short
            read is not an error. Requesting zero bytes always returns 0.

        Raises:
            EndOfDataError: If at least one byte was requested and none remain
        """
        self._check_open()
        target = _as_bytes_view(dest)
        requested = len(target)
        if requested == 0:
            return 0

        remaining = len(self._data) - self._pos
        if remaining <= 0:
            raise EndOfDataError(f"end of data at position {self._pos}")

        count = min(requested, remaining)
        target[:count] = self._data[self._pos : self._pos + count]
        self._pos += count
        return count

    def read(self, size: Optional[int] = -1) -> bytes:
        """Read up to ``size`` bytes from the cursor and advance past them.

        Unlike readinto this follows the file protocol at the end of the data and returns ``b""`` instead of
        raising, so generic consumers like shutil.copyfileobj can detect the end.

        Args:
            size: Maximum number of bytes to read. None or a negative value reads everything remaining.
                (default: -1)

        Returns:
            The bytes read, possibly fewer than ``size``
        """
        self._check_open()
        remaining = self.remaining
        if size is None or size < 0:
            size = remaining
        count = min(size, remaining)
        if count == 0:
            return b""
        chunk = bytes(self._data[self._pos : self._pos + count])
        self._pos += count
        return chunk

    def read1(self, size: Optional[int] = -1) -> bytes:
        """Same as read; the whole store is in memory so there is never more than one underlying read."""
        return self.read(size)

    def write(self, data: BytesLike) -> int:
        """Write ``data`` at the cursor, overwriting existing bytes and appending whatever runs past the end.

        If the cursor was moved beyond the end of the data, the gap up to the cursor is first filled with the
        ``fill`` byte. The cursor always advances by ``len(data)``.

        Args:
            data: Bytes-like content to write

        Returns:
            The number of bytes written, always ``len(data)``

        Examples:
            >>> buf = SeekableBuffer()
            >>> buf.write(b"foo")
            3
            >>> buf.write(b"quxbaz")
            6
            >>> buf.getvalue()
            b'fooquxbaz'
        """
        self._check_open()
        chunk = _as_bytes_view(data)
        size = len(chunk)
        start = self._pos
        length = len(self._data)

        if size and start > length:
            logger.debug("filling %d byte gap before write at position %d", start - length, start)
            self._data.extend(self._fill * (start - length))
            length = start

        self._data[start : start + size] = chunk
        if start + size > length:
            logger.debug("buffer grew from %d to %d bytes", length, len(self._data))

        self._pos = start + size
        return size

    def seek(self, offset: int, whence: int = Whence.START) -> int:
        """Move the cursor and return its new absolute position.

        Validation depends on the origin:

        * ``Whence.START``: a positive offset must be below the data length.
        * ``Whence.CURRENT``: a positive offset must land below the data length.
        * ``Whence.END``: the target must not be negative; there is no upper bound, so the cursor may
          be placed past the end and a following write fills the gap.

        A target below zero is rejected for every origin, including a negative offset from the start,
        which the forward-only bounds above would let through on their own. The cursor is never negative.

        Args:
            offset: Signed offset relative to ``whence``
            whence: A Whence member or the matching os.SEEK_* integer (default: Whence.START)

        Returns:
            The new cursor position

        Raises:
            InvalidArgumentError: If the target is out of range or ``whence`` is unknown. The cursor is
                left where it was.
            TypeError: If ``offset`` or ``whence`` is not an integer. A bool whence is refused as well.
        """
        self._check_open()
        offset = operator.index(offset)
        if isinstance(whence, bool):
            raise TypeError("whence must be an integer, not bool")
        whence = operator.index(whence)
        try:
            origin = Whence(whence)
        except ValueError:
            raise InvalidArgumentError(f"invalid whence {whence}", offset, whence) from None

        length = len(self._data)
        if origin is Whence.START:
            target = offset
            out_of_range = offset > 0 and target >= length
        elif origin is Whence.CURRENT:
            target = self._pos + offset
            out_of_range = offset > 0 and target >= length
        else:
            target = length + offset
            out_of_range = False

        if out_of_range or target < 0:
            raise InvalidArgumentError(f"invalid offset {offset}", offset, whence)

        self._pos = target
        return target

    def tell(self) -> int:
        """Return the cursor position."""
        self._check_open()
        return self._pos

    @property
    def remaining(self) -> int:
        """Bytes between the cursor and the end of the data."""
        return max(0, len(self._data) - self._pos)

    def readable(self) -> bool:
        return True

    def writable(self) -> bool:
        return True

    def seekable(self) -> bool:
        return True

    def __len__(self) -> int:
        """Return the length of the stored data."""
        return len(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={len(self._data)}, pos={self._pos})"
