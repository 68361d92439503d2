import logging
import operator
from collections.abc import Buffer

from .error import (
    InsufficientDataException,
    InvalidSeekOffsetException,
    NotEnoughSpaceException,
    StreamClosedException,
)
from .growth import GrowthPolicy, PowerOfTwoGrowth
from .integer import FixedWidthInteger
from .traits import Seekable, SeekOrigin, Stream
from .view import BorrowedView


class MemoryStream(Stream, Seekable):
    """
    Seekable read/write stream backed by a single in-memory region.

    Three construction modes are supported:

    - `MemoryStream()`: expandable, nothing allocated until the first write.
    - `MemoryStream(reserving_capacity=n)`: expandable, `n` bytes allocated.
    - `MemoryStream(capacity=n)`: fixed at `n` bytes, writes past it fail.

    Writes overwrite at the current position and extend `count` only when
    they end past it. Reads return `BorrowedView`s into the storage that
    stay valid until the next write, reallocation or close.
    """

    _storage: bytearray
    _expandable: bool
    _growth: GrowthPolicy
    _position: int
    _count: int
    _generation: int
    _closed: bool

    def __init__(
        self,
        *,
        reserving_capacity: int | None = None,
        capacity: int | None = None,
        growth: GrowthPolicy | None = None,
    ):
        if reserving_capacity is not None and capacity is not None:
            raise ValueError("reserving_capacity and capacity are exclusive")

        if capacity is not None:
            if capacity < 0:
                raise ValueError(f"Capacity must not be negative, got {capacity}")
            if growth is not None:
                raise ValueError("A fixed capacity stream cannot have a growth policy")
            self._storage = bytearray(capacity)
            self._expandable = False
        else:
            size = reserving_capacity or 0
            if size < 0:
                raise ValueError(f"Capacity must not be negative, got {size}")
            self._storage = bytearray(size)
            self._expandable = True

        self._growth = growth or PowerOfTwoGrowth()
        self._position = 0
        self._count = 0
        self._generation = 0
        self._closed = False

    def _assert_open(self) -> None:
        if self._closed:
            raise StreamClosedException("Stream is closed")

    @property
    def position(self) -> int:
        self._assert_open()
        return self._position

    @property
    def count(self) -> int:
        self._assert_open()
        return self._count

    @property
    def remain(self) -> int:
        self._assert_open()
        return self._count - self._position

    @property
    def allocated(self) -> int:
        self._assert_open()
        return len(self._storage)

    @property
    def is_eof(self) -> bool:
        self._assert_open()
        return self._position == self._count

    @property
    def expandable(self) -> bool:
        return self._expandable

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def buffer(self) -> BorrowedView:
        """
        All valid bytes, `[0, count)`. Valid until the next mutation.
        """
        self._assert_open()
        return BorrowedView(self, memoryview(self._storage)[: self._count])

    def tell(self) -> int:
        return self.position

    def seek(self, offset: int, origin: SeekOrigin = SeekOrigin.BEGIN) -> None:
        self._assert_open()
        offset = operator.index(offset)
        match origin:
            case SeekOrigin.BEGIN:
                target = offset
            case SeekOrigin.CURRENT:
                target = self._position + offset
            case SeekOrigin.END:
                target = self._count + offset
            case other:
                raise ValueError(f"Unknown seek origin: {other}")

        if not 0 <= target <= self._count:
            raise InvalidSeekOffsetException(offset, origin, target)
        self._position = target

    def _reallocate(self, size: int) -> None:
        logging.debug(f"Reallocating stream storage: {len(self._storage)} -> {size}")
        storage = bytearray(size)
        storage[: self._count] = self._storage[: self._count]
        self._storage = storage
        self._generation += 1

    def _ensure(self, capacity: int) -> None:
        if capacity <= len(self._storage):
            return
        if not self._expandable:
            raise NotEnoughSpaceException(len(self._storage), capacity)

        size = self._growth.next_capacity(len(self._storage), capacity)
        if size < capacity:
            raise ValueError(
                f"Growth policy returned {size} bytes, {capacity} are required"
            )
        self._reallocate(size)

    def write(self, data: Buffer) -> int:
        self._assert_open()
        with memoryview(data) as source:
            n = source.nbytes
            if n == 0:
                return 0

            end = self._position + n
            self._ensure(end)
            self._storage[self._position : end] = source.cast("B")

        self._generation += 1
        self._position = end
        if end > self._count:
            self._count = end
        return n

    def read_exactly(self, n: int) -> BorrowedView:
        self._assert_open()
        n = operator.index(n)
        if n < 0:
            raise ValueError(f"Read length must not be negative, got {n}")
        if self.remain < n:
            raise InsufficientDataException(n, self.remain)

        start = self._position
        self._position += n
        return BorrowedView(self, memoryview(self._storage)[start : self._position])

    def read(self, max_length: int) -> BorrowedView:
        max_length = operator.index(max_length)
        if max_length < 0:
            raise ValueError(f"Read length must not be negative, got {max_length}")
        return self.read_exactly(min(self.remain, max_length))

    def read_into(self, buffer: Buffer) -> int:
        self._assert_open()
        with memoryview(buffer) as raw, raw.cast("B") as target:
            if target.readonly:
                raise TypeError("Cannot read into a read-only buffer")
            view = self.read(target.nbytes)
            if len(view) == 0:
                return 0
            with view:
                return view.copy_into(target)

    def write_integer(self, value: FixedWidthInteger) -> int:
        return self.write(value.to_bytes())

    def read_integer[T: FixedWidthInteger](self, integer_type: type[T]) -> T:
        view = self.read_exactly(integer_type.byte_size())
        return integer_type.from_bytes(view.tobytes())

    def close(self) -> None:
        if self._closed:
            return
        logging.debug(f"Releasing stream storage of {len(self._storage)} bytes")
        self._storage = bytearray()
        self._position = 0
        self._count = 0
        self._generation += 1
        self._closed = True

    def __enter__(self) -> "MemoryStream":
        self._assert_open()
        return self

    def __exit__(self, *_) -> None:
        self.close()

    def __repr__(self) -> str:
        if self._closed:
            return "MemoryStream(<closed>)"
        return (
            f"MemoryStream(position={self._position}, count={self._count}, "
            f"allocated={len(self._storage)}, expandable={self._expandable})"
        )
