from .error import (
    InsufficientDataException,
    InvalidSeekOffsetException,
    NotEnoughSpaceException,
    StaleViewException,
    StreamClosedException,
    StreamException,
)
from .growth import INITIAL_CAPACITY, GrowthPolicy, LinearGrowth, PowerOfTwoGrowth
from .integer import (
    FixedWidthInteger,
    Int,
    Int8,
    Int16,
    Int32,
    Int64,
    UInt,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
)
from .memory import MemoryStream
from .traits import Readable, Seekable, SeekOrigin, Stream, Writable
from .view import BorrowedView
