import sys
import unittest

from .error import InsufficientDataException
from .integer import (
    WORD_BITS,
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
from .traits import SeekOrigin

ALL_TYPES: list[type[FixedWidthInteger]] = [
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
]


class TestFixedWidthInteger(unittest.TestCase):
    def test_ranges(self):
        cases = {
            Int8: (-0x80, 0x7F),
            Int16: (-0x8000, 0x7FFF),
            Int32: (-0x80000000, 0x7FFFFFFF),
            Int64: (-0x8000000000000000, 0x7FFFFFFFFFFFFFFF),
            UInt8: (0, 0xFF),
            UInt16: (0, 0xFFFF),
            UInt32: (0, 0xFFFFFFFF),
            UInt64: (0, 0xFFFFFFFFFFFFFFFF),
        }
        for integer_type, (low, high) in cases.items():
            with self.subTest(integer_type=integer_type.__name__):
                self.assertEqual(integer_type.min_value(), low)
                self.assertEqual(integer_type.max_value(), high)
                with self.assertRaises(ValueError):
                    integer_type(low - 1)
                with self.assertRaises(ValueError):
                    integer_type(high + 1)

    def test_word_size(self):
        self.assertEqual(Int.bits(), WORD_BITS)
        self.assertEqual(UInt.byte_size(), WORD_BITS // 8)
        self.assertEqual(Int.max_value(), sys.maxsize)

    def test_native_byte_order(self):
        data = UInt16(0x1234).to_bytes()
        if sys.byteorder == "little":
            self.assertEqual(data, bytes([0x34, 0x12]))
        else:
            self.assertEqual(data, bytes([0x12, 0x34]))

    def test_signed_bytes(self):
        self.assertEqual(Int8(-1).to_bytes(), b"\xff")
        self.assertEqual(Int8.from_bytes(b"\x80"), Int8(-128))
        self.assertEqual(UInt8.from_bytes(b"\x80"), UInt8(128))

    def test_from_bytes_wrong_length(self):
        with self.assertRaises(ValueError):
            UInt32.from_bytes(b"\x00\x00")

    def test_abstract(self):
        with self.assertRaises(TypeError):
            FixedWidthInteger(0)  # type: ignore[abstract]


class TestStreamIntegers(unittest.TestCase):
    def test_trivial(self):
        stream = MemoryStream()
        buffer = bytearray(8)

        stream.write_integer(Int64(0x0102030405060708))
        stream.seek(0)
        self.assertEqual(stream.read_into(buffer), 8)
        self.assertEqual(bytes(buffer), (0x0102030405060708).to_bytes(8, sys.byteorder))

        stream.seek(0)
        for integer_type in ALL_TYPES:
            with self.subTest(integer_type=integer_type.__name__):
                value = integer_type(integer_type.max_value())
                self.assertEqual(stream.write_integer(value), integer_type.byte_size())

        stream.seek(0)
        for integer_type in ALL_TYPES:
            with self.subTest(integer_type=integer_type.__name__):
                value = stream.read_integer(integer_type)
                self.assertEqual(value, integer_type(integer_type.max_value()))

        with self.assertRaises(InsufficientDataException):
            stream.read_integer(Int)

        stream.write_integer(UInt32(UInt32.max_value()))
        stream.seek(-UInt32.byte_size(), SeekOrigin.END)
        with self.assertRaises(InsufficientDataException):
            stream.read_integer(UInt64)
        self.assertEqual(stream.remain, 4)
        self.assertEqual(stream.read_integer(UInt32), UInt32(0xFFFFFFFF))

    def test_round_trip(self):
        cases = [Int8(-5), Int16(-300), Int32(123456), Int64(-(1 << 40)), UInt16(7)]
        stream = MemoryStream()
        for value in cases:
            stream.write_integer(value)

        stream.seek(0)
        for value in cases:
            with self.subTest(value=value):
                self.assertEqual(stream.read_integer(type(value)), value)
        self.assertTrue(stream.is_eof)

    def test_any_bit_pattern(self):
        stream = MemoryStream()
        stream.write(b"\xff" * 8)
        stream.seek(0)
        self.assertEqual(stream.read_integer(Int64), Int64(-1))
        stream.seek(0)
        self.assertEqual(stream.read_integer(UInt64), UInt64(0xFFFFFFFFFFFFFFFF))

    def test_serialize(self):
        stream = MemoryStream(capacity=4)
        value = UInt32(0xDEADBEEF)
        value.serialize(stream)
        self.assertEqual(value.serialized_length(), 4)
        self.assertEqual(stream.buffer, value.to_bytes())

        stream.seek(0)
        self.assertEqual(UInt32.deserialize(stream), value)
        with self.assertRaises(InsufficientDataException):
            UInt8.deserialize(stream)
