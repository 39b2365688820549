"""seekbuf provides SeekableBuffer, an in-memory byte buffer that can be read, written and seeked through a single
cursor, like a random-access file handle backed by memory instead of disk.

Useful for staging data before flushing it elsewhere, or for standing in for a file in tests.
"""

from seekbuf.seekbuf import (
    EndOfDataError,
    InvalidArgumentError,
    SeekableBuffer,
    SeekBufferException,
    Whence,
)

__all__ = ["SeekableBuffer", "Whence", "SeekBufferException", "EndOfDataError", "InvalidArgumentError"]
