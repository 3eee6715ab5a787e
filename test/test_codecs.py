import unittest
import struct
import numpy
from texelcheck import (
    BitfieldException,
    ComponentCountException,
    SubresourceBoundsException,
)
from texelcheck.codecs import ChannelMismatch, PackedBitfieldCodec, UniformChannelCodec


class UniformChannelCodecTests(unittest.TestCase):

    def test_roundtrip(self):
        for dtype in (numpy.uint8, numpy.int16, numpy.uint32, numpy.float32):
            for component_count in range(1, 5):
                codec = UniformChannelCodec(dtype, component_count)
                block = bytearray(codec.texel_size)
                codec.initialize(block, 3, 1, 4, 1, 5)
                self.assertEqual(codec.compare(block, bytes(block)), [])

    def test_values(self):
        codec = UniformChannelCodec(numpy.uint16, 4)
        block = bytearray(8)
        codec.initialize(block, 1, 2, 3, 4, 5)
        self.assertEqual(struct.unpack("<4H", block), (6, 2, 3, 4))

        codec = UniformChannelCodec(numpy.uint32, 1)
        block = bytearray(4)
        codec.initialize(block, 1, 2, 3, 4, 5)
        self.assertEqual(struct.unpack("<I", block), (15,))

        codec = UniformChannelCodec(numpy.float32, 2)
        block = bytearray(8)
        codec.initialize(block, 1, 2, 3, 4, 5)
        self.assertEqual(struct.unpack("<2f", block), (9.0, 6.0))

        codec = UniformChannelCodec(numpy.int8, 3)
        block = bytearray(3)
        codec.initialize(block, 1, 2, 3, 4, 5)
        self.assertEqual(struct.unpack("<3b", block), (5, 7, 3))

    def test_every_axis_changes_a_channel(self):
        base = (3, 5, 7, 2, 1)
        for component_count in range(1, 5):
            codec = UniformChannelCodec(numpy.uint32, component_count)
            reference = bytearray(codec.texel_size)
            codec.initialize(reference, *base)
            for axis in range(5):
                coordinate = list(base)
                coordinate[axis] += 1
                block = bytearray(codec.texel_size)
                codec.initialize(block, *coordinate)
                self.assertNotEqual(
                    codec.decode(block),
                    codec.decode(reference),
                    "{0} components, axis {1}".format(component_count, axis),
                )

    def test_wraparound(self):
        codec = UniformChannelCodec(numpy.uint8, 1)
        block = bytearray(1)
        codec.initialize(block, 300, 0, 0, 0, 0)
        self.assertEqual(block, bytearray([44]))

    def test_invalid_component_count(self):
        with self.assertRaises(ComponentCountException):
            UniformChannelCodec(numpy.uint8, 0)
        with self.assertRaises(ComponentCountException):
            UniformChannelCodec(numpy.uint8, 5)

    def test_compare_reports_channel(self):
        codec = UniformChannelCodec(numpy.uint8, 4)
        expected = bytearray(4)
        codec.initialize(expected, 1, 2, 3, 0, 0)
        actual = bytearray(expected)
        actual[2] = 9
        self.assertEqual(
            codec.compare(actual, expected), [ChannelMismatch(2, 9, 3)]
        )

    def test_compare_reports_every_channel(self):
        codec = UniformChannelCodec(numpy.uint16, 4)
        expected = bytearray(8)
        codec.initialize(expected, 1, 2, 3, 4, 0)
        mismatches = codec.compare(bytes(8), expected)
        self.assertEqual([mismatch.channel for mismatch in mismatches], [0, 1, 2, 3])

    def test_block_too_small(self):
        codec = UniformChannelCodec(numpy.uint32, 4)
        with self.assertRaises(SubresourceBoundsException):
            codec.initialize(bytearray(12), 0, 0, 0, 0, 0)
        with self.assertRaises(SubresourceBoundsException):
            codec.compare(bytes(12), bytes(16))


class PackedBitfieldCodecTests(unittest.TestCase):

    def test_rgb565_layout(self):
        codec = PackedBitfieldCodec(numpy.uint16, 5, 6, 5, 0)
        block = bytearray(2)
        codec.initialize(block, 3, 4, 5, 1, 2)
        self.assertEqual(struct.unpack("<H", block), (4 | 6 << 5 | 5 << 11,))
        self.assertEqual(codec.decode(block), [4, 6, 5, 0])

    def test_rgb10a2_layout(self):
        codec = PackedBitfieldCodec(numpy.uint32, 10, 10, 10, 2)
        block = bytearray(4)
        codec.initialize(block, 3, 4, 5, 1, 2)
        self.assertEqual(
            struct.unpack("<I", block), (5 | 4 << 10 | 5 << 20 | 1 << 30,)
        )
        self.assertEqual(codec.decode(block), [5, 4, 5, 1])

    def test_roundtrip(self):
        configurations = (
            (numpy.uint16, 5, 6, 5, 0),
            (numpy.uint16, 5, 5, 5, 1),
            (numpy.uint16, 4, 4, 4, 4),
            (numpy.uint32, 10, 10, 10, 2),
            (numpy.uint32, 11, 11, 10, 0),
            (numpy.uint32, 9, 9, 9, 5),
        )
        for dtype, *widths in configurations:
            codec = PackedBitfieldCodec(dtype, *widths)
            for fields in (
                [0, 0, 0, 0],
                [(1 << width) - 1 for width in widths],
                [(1 << width) // 2 for width in widths],
            ):
                fields = [value if width else 0 for value, width in zip(fields, widths)]
                self.assertEqual(codec.unpack(codec.pack(fields)), fields)

    def test_zero_width_field(self):
        codec = PackedBitfieldCodec(numpy.uint16, 5, 6, 5, 0)
        self.assertEqual(codec.unpack(0xFFFF)[3], 0)

    def test_overflow_truncates(self):
        codec = PackedBitfieldCodec(numpy.uint16, 5, 6, 5, 0)
        block = bytearray(2)
        codec.initialize(block, 40, 0, 0, 0, 0)
        self.assertEqual(codec.decode(block), [8, 0, 0, 0])

    def test_unused_bits_ignored(self):
        codec = PackedBitfieldCodec(numpy.uint16, 4, 4, 4, 0)
        self.assertEqual(
            codec.compare(struct.pack("<H", 0x0123), struct.pack("<H", 0xF123)), []
        )

    def test_compare_reports_channel(self):
        codec = PackedBitfieldCodec(numpy.uint32, 10, 10, 10, 2)
        actual = bytearray(4)
        expected = bytearray(4)
        codec.initialize(actual, 1, 2, 3, 1, 0)
        codec.initialize(expected, 1, 2, 3, 2, 0)
        self.assertEqual(
            codec.compare(actual, expected), [ChannelMismatch(3, 1, 2)]
        )

    def test_invalid_widths(self):
        with self.assertRaises(BitfieldException):
            PackedBitfieldCodec(numpy.uint16, 8, 8, 8, 0)
        with self.assertRaises(BitfieldException):
            PackedBitfieldCodec(numpy.uint32, 10, -1, 10, 2)
        with self.assertRaises(BitfieldException):
            PackedBitfieldCodec(numpy.int32, 10, 10, 10, 2)
