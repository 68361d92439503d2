"""
In-memory seekable byte stream with typed fixed-width integer access.
"""

from py_stream.stream import (
    BorrowedView,
    FixedWidthInteger,
    InsufficientDataException,
    InvalidSeekOffsetException,
    MemoryStream,
    NotEnoughSpaceException,
    Readable,
    Seekable,
    SeekOrigin,
    StaleViewException,
    Stream,
    StreamClosedException,
    StreamException,
    Writable,
)
