"""Texel codecs.

A codec knows how to fill one texel from its coordinate and how to decide
whether two texels hold the same channel values. Two layouts exist:
UniformChannelCodec stores every channel as its own element of a single
numeric type, PackedBitfieldCodec stores all channels as bit-fields of one
unsigned storage word.
"""

from collections import namedtuple

import numpy

from . import BitfieldException, ComponentCountException, SubresourceBoundsException

ChannelMismatch = namedtuple("ChannelMismatch", ("channel", "actual", "expected"))


def _little_endian(dtype):
    return numpy.dtype(dtype).newbyteorder("<")


def _check_block(block, size):
    if len(block) < size:
        raise SubresourceBoundsException(
            "texel block of {0} bytes is smaller than {1} bytes".format(len(block), size)
        )


def _mismatches(actual, expected):
    return [
        ChannelMismatch(channel, a, e)
        for channel, (a, e) in enumerate(zip(actual, expected))
        if a != e
    ]


def get_texel_values(component_count, x, y, z, mip_level, array_layer):
    # every axis must move at least one channel
    if component_count == 1:
        return (x + y + z + mip_level + array_layer,)
    if component_count == 2:
        return (x + z + array_layer, y + mip_level)
    if component_count == 3:
        return (x + mip_level, y + array_layer, z)
    if component_count == 4:
        return (x + array_layer, y, z, mip_level)
    raise ComponentCountException(
        "component count must be between 1 and 4, got {0}".format(component_count)
    )


class UniformChannelCodec:
    def __init__(self, dtype, component_count):
        if component_count not in (1, 2, 3, 4):
            raise ComponentCountException(
                "component count must be between 1 and 4, got {0}".format(
                    component_count
                )
            )
        self.dtype = _little_endian(dtype)
        self.component_count = component_count

    def __repr__(self):
        return "UniformChannelCodec({0}, {1})".format(
            self.dtype.name, self.component_count
        )

    @property
    def texel_size(self):
        return self.dtype.itemsize * self.component_count

    def initialize(self, block, x, y, z, mip_level, array_layer):
        _check_block(block, self.texel_size)
        values = numpy.array(
            get_texel_values(self.component_count, x, y, z, mip_level, array_layer),
            dtype=numpy.int64,
        ).astype(self.dtype)
        block[0 : self.texel_size] = values.tobytes()

    def decode(self, block):
        _check_block(block, self.texel_size)
        return numpy.frombuffer(
            block, dtype=self.dtype, count=self.component_count
        ).tolist()

    def compare(self, actual, expected):
        return _mismatches(self.decode(actual), self.decode(expected))


class PackedBitfieldCodec:
    """Channels packed as bit-fields of one unsigned word.

    Fields are laid out from the least significant bit as r, g, b, a. With
    no alpha field the mip level is folded into red and the array layer into
    green; with an alpha field red carries the array layer and alpha the mip
    level. Values wider than their field are truncated to it.
    """

    def __init__(self, dtype, r_bits, g_bits, b_bits, a_bits):
        self.dtype = _little_endian(dtype)
        if self.dtype.kind != "u":
            raise BitfieldException(
                "packed storage must be an unsigned integer, got {0}".format(
                    self.dtype.name
                )
            )
        self.widths = (r_bits, g_bits, b_bits, a_bits)
        if any(width < 0 for width in self.widths):
            raise BitfieldException("negative bit width in {0}".format(self.widths))
        if sum(self.widths) > self.dtype.itemsize * 8:
            raise BitfieldException(
                "bit widths {0} do not fit in {1}".format(self.widths, self.dtype.name)
            )

    def __repr__(self):
        return "PackedBitfieldCodec({0}, {1}, {2}, {3}, {4})".format(
            self.dtype.name, *self.widths
        )

    @property
    def a_bits(self):
        return self.widths[3]

    @property
    def texel_size(self):
        return self.dtype.itemsize

    def get_fields(self, x, y, z, mip_level, array_layer):
        if self.a_bits == 0:
            return (x + mip_level, y + array_layer, z, 0)
        return (x + array_layer, y, z, mip_level)

    def pack(self, fields):
        word = 0
        for value, width in reversed(list(zip(fields, self.widths))):
            word <<= width
            word |= value & ((1 << width) - 1)
        return word

    def unpack(self, word):
        word = int(word)
        fields = []
        for width in self.widths:
            fields.append(word & ((1 << width) - 1))
            word >>= width
        return fields

    def initialize(self, block, x, y, z, mip_level, array_layer):
        _check_block(block, self.texel_size)
        word = self.pack(self.get_fields(x, y, z, mip_level, array_layer))
        block[0 : self.texel_size] = numpy.array(word, dtype=self.dtype).tobytes()

    def decode(self, block):
        _check_block(block, self.texel_size)
        return self.unpack(numpy.frombuffer(block, dtype=self.dtype, count=1)[0])

    def compare(self, actual, expected):
        return _mismatches(self.decode(actual), self.decode(expected))
