import struct
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Final, Self

from .traits import Readable, Writable

# Width of the platform's ssize_t, which backs `Int` and `UInt`.
WORD_BITS: Final[int] = struct.calcsize("n") * 8


@dataclass(frozen=True)
class FixedWidthInteger(ABC):
    """
    Integer of a fixed bit width, stored as its raw bytes in the host's
    native byte order (`sys.byteorder`).

    There is no byte order normalization: bytes written on a little endian
    host read back differently on a big endian one.
    """

    value: int

    @staticmethod
    @abstractmethod
    def bits() -> int: ...

    @staticmethod
    @abstractmethod
    def signed() -> bool: ...

    @classmethod
    def byte_size(cls) -> int:
        return cls.bits() // 8

    @classmethod
    def min_value(cls) -> int:
        return -(1 << (cls.bits() - 1)) if cls.signed() else 0

    @classmethod
    def max_value(cls) -> int:
        if cls.signed():
            return (1 << (cls.bits() - 1)) - 1
        return (1 << cls.bits()) - 1

    def __post_init__(self):
        cls = self.__class__
        if self.value < cls.min_value() or self.value > cls.max_value():
            raise ValueError(f"Value {self.value} is out of range for {cls.__name__}")

    def to_bytes(self) -> bytes:
        cls = self.__class__
        return self.value.to_bytes(cls.byte_size(), sys.byteorder, signed=cls.signed())

    @classmethod
    def from_bytes(cls, data: bytes) -> Self:
        if len(data) != cls.byte_size():
            raise ValueError(
                f"{cls.__name__} needs {cls.byte_size()} bytes, got {len(data)}"
            )
        return cls(int.from_bytes(data, sys.byteorder, signed=cls.signed()))

    @classmethod
    def deserialize(cls, reader: Readable) -> Self:
        return cls.from_bytes(bytes(reader.read_exactly(cls.byte_size())))

    def serialize(self, writer: Writable) -> None:
        writer.write(self.to_bytes())

    def serialized_length(self) -> int:
        return self.__class__.byte_size()


@dataclass(frozen=True)
class Int8(FixedWidthInteger):
    @staticmethod
    def bits() -> int:
        return 8

    @staticmethod
    def signed() -> bool:
        return True


@dataclass(frozen=True)
class Int16(FixedWidthInteger):
    @staticmethod
    def bits() -> int:
        return 16

    @staticmethod
    def signed() -> bool:
        return True


@dataclass(frozen=True)
class Int32(FixedWidthInteger):
    @staticmethod
    def bits() -> int:
        return 32

    @staticmethod
    def signed() -> bool:
        return True


@dataclass(frozen=True)
class Int64(FixedWidthInteger):
    @staticmethod
    def bits() -> int:
        return 64

    @staticmethod
    def signed() -> bool:
        return True


@dataclass(frozen=True)
class Int(FixedWidthInteger):
    @staticmethod
    def bits() -> int:
        return WORD_BITS

    @staticmethod
    def signed() -> bool:
        return True


@dataclass(frozen=True)
class UInt8(FixedWidthInteger):
    @staticmethod
    def bits() -> int:
        return 8

    @staticmethod
    def signed() -> bool:
        return False


@dataclass(frozen=True)
class UInt16(FixedWidthInteger):
    @staticmethod
    def bits() -> int:
        return 16

    @staticmethod
    def signed() -> bool:
        return False


@dataclass(frozen=True)
class UInt32(FixedWidthInteger):
    @staticmethod
    def bits() -> int:
        return 32

    @staticmethod
    def signed() -> bool:
        return False


@dataclass(frozen=True)
class UInt64(FixedWidthInteger):
    @staticmethod
    def bits() -> int:
        return 64

    @staticmethod
    def signed() -> bool:
        return False


@dataclass(frozen=True)
class UInt(FixedWidthInteger):
    @staticmethod
    def bits() -> int:
        return WORD_BITS

    @staticmethod
    def signed() -> bool:
        return False
