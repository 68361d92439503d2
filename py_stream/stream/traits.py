from collections.abc import Buffer
from enum import Enum
from typing import Protocol, runtime_checkable


class SeekOrigin(Enum):
    BEGIN = 0
    CURRENT = 1
    END = 2


@runtime_checkable
class Writable(Protocol):
    def write(self, data: Buffer) -> int: ...


@runtime_checkable
class Readable(Protocol):
    def read_into(self, buffer: Buffer) -> int: ...

    def read_exactly(self, n: int) -> Buffer: ...

    def read(self, max_length: int) -> Buffer: ...


@runtime_checkable
class Seekable(Protocol):
    def seek(self, offset: int, origin: SeekOrigin = SeekOrigin.BEGIN) -> None: ...


@runtime_checkable
class Stream(Readable, Writable, Protocol):
    pass
