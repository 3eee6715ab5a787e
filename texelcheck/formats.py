import numpy

from . import (
    ASPECT_COLOR,
    ASPECT_DEPTH,
    ASPECT_STENCIL,
    UnsupportedFormatException,
)
from .codecs import PackedBitfieldCodec, UniformChannelCodec

R32G32B32A32_TYPELESS = 1
R32G32B32A32_FLOAT = 2
R32G32B32A32_UINT = 3
R32G32B32A32_SINT = 4
R32G32B32_TYPELESS = 5
R32G32B32_FLOAT = 6
R32G32B32_UINT = 7
R32G32B32_SINT = 8
R16G16B16A16_TYPELESS = 9
R16G16B16A16_FLOAT = 10
R16G16B16A16_UNORM = 11
R16G16B16A16_UINT = 12
R16G16B16A16_SNORM = 13
R16G16B16A16_SINT = 14
R32G32_TYPELESS = 15
R32G32_FLOAT = 16
R32G32_UINT = 17
R32G32_SINT = 18
D32_FLOAT_S8X24_UINT = 20
X32_TYPELESS_G8X24_UINT = 22
R10G10B10A2_TYPELESS = 23
R10G10B10A2_UNORM = 24
R10G10B10A2_UINT = 25
R11G11B10_FLOAT = 26
R8G8B8A8_TYPELESS = 27
R8G8B8A8_UNORM = 28
R8G8B8A8_UNORM_SRGB = 29
R8G8B8A8_UINT = 30
R8G8B8A8_SNORM = 31
R8G8B8A8_SINT = 32
R16G16_TYPELESS = 33
R16G16_FLOAT = 34
R16G16_UNORM = 35
R16G16_UINT = 36
R16G16_SNORM = 37
R16G16_SINT = 38
R32_TYPELESS = 39
D32_FLOAT = 40
R32_FLOAT = 41
R32_UINT = 42
R32_SINT = 43
D24_UNORM_S8_UINT = 45
X24_TYPELESS_G8_UINT = 47
R8G8_TYPELESS = 48
R8G8_UNORM = 49
R8G8_UINT = 50
R8G8_SNORM = 51
R8G8_SINT = 52
R16_TYPELESS = 53
R16_FLOAT = 54
D16_UNORM = 55
R16_UNORM = 56
R16_UINT = 57
R16_SNORM = 58
R16_SINT = 59
R8_TYPELESS = 60
R8_UNORM = 61
R8_UINT = 62
R8_SNORM = 63
R8_SINT = 64
R9G9B9E5_SHAREDEXP = 67
BC1_UNORM = 71
BC1_UNORM_SRGB = 72
BC2_UNORM = 74
BC2_UNORM_SRGB = 75
BC3_UNORM = 77
BC3_UNORM_SRGB = 78
BC4_UNORM = 80
BC4_SNORM = 81
BC5_UNORM = 83
BC5_SNORM = 84
B5G6R5_UNORM = 85
B5G5R5A1_UNORM = 86
B8G8R8A8_UNORM = 87
B8G8R8X8_UNORM = 88
B8G8R8A8_TYPELESS = 90
B8G8R8A8_UNORM_SRGB = 91
B8G8R8X8_TYPELESS = 92
B8G8R8X8_UNORM_SRGB = 93
BC6H_UF16 = 95
BC6H_SF16 = 96
BC7_UNORM = 98
BC7_UNORM_SRGB = 99
B4G4R4A4_UNORM = 115

_uniform_formats = {
    R32G32B32A32_TYPELESS: (numpy.uint32, 4),
    R32G32B32A32_FLOAT: (numpy.float32, 4),
    R32G32B32A32_UINT: (numpy.uint32, 4),
    R32G32B32A32_SINT: (numpy.int32, 4),
    R32G32B32_TYPELESS: (numpy.uint32, 3),
    R32G32B32_FLOAT: (numpy.float32, 3),
    R32G32B32_UINT: (numpy.uint32, 3),
    R32G32B32_SINT: (numpy.int32, 3),
    R32G32_TYPELESS: (numpy.uint32, 2),
    R32G32_FLOAT: (numpy.float32, 2),
    R32G32_UINT: (numpy.uint32, 2),
    R32G32_SINT: (numpy.int32, 2),
    R32_TYPELESS: (numpy.uint32, 1),
    R32_FLOAT: (numpy.float32, 1),
    R32_UINT: (numpy.uint32, 1),
    R32_SINT: (numpy.int32, 1),
    D32_FLOAT: (numpy.float32, 1),
    # half floats are generated and compared as their raw bits
    R16G16B16A16_TYPELESS: (numpy.uint16, 4),
    R16G16B16A16_FLOAT: (numpy.uint16, 4),
    R16G16B16A16_UNORM: (numpy.uint16, 4),
    R16G16B16A16_UINT: (numpy.uint16, 4),
    R16G16B16A16_SNORM: (numpy.int16, 4),
    R16G16B16A16_SINT: (numpy.int16, 4),
    R16G16_TYPELESS: (numpy.uint16, 2),
    R16G16_FLOAT: (numpy.uint16, 2),
    R16G16_UNORM: (numpy.uint16, 2),
    R16G16_UINT: (numpy.uint16, 2),
    R16G16_SNORM: (numpy.int16, 2),
    R16G16_SINT: (numpy.int16, 2),
    R16_TYPELESS: (numpy.uint16, 1),
    R16_FLOAT: (numpy.uint16, 1),
    R16_UNORM: (numpy.uint16, 1),
    R16_UINT: (numpy.uint16, 1),
    R16_SNORM: (numpy.int16, 1),
    R16_SINT: (numpy.int16, 1),
    D16_UNORM: (numpy.uint16, 1),
    R8G8B8A8_TYPELESS: (numpy.uint8, 4),
    R8G8B8A8_UNORM: (numpy.uint8, 4),
    R8G8B8A8_UNORM_SRGB: (numpy.uint8, 4),
    R8G8B8A8_UINT: (numpy.uint8, 4),
    R8G8B8A8_SNORM: (numpy.int8, 4),
    R8G8B8A8_SINT: (numpy.int8, 4),
    R8G8_TYPELESS: (numpy.uint8, 2),
    R8G8_UNORM: (numpy.uint8, 2),
    R8G8_UINT: (numpy.uint8, 2),
    R8G8_SNORM: (numpy.int8, 2),
    R8G8_SINT: (numpy.int8, 2),
    R8_TYPELESS: (numpy.uint8, 1),
    R8_UNORM: (numpy.uint8, 1),
    R8_UINT: (numpy.uint8, 1),
    R8_SNORM: (numpy.int8, 1),
    R8_SINT: (numpy.int8, 1),
    B8G8R8A8_TYPELESS: (numpy.uint8, 4),
    B8G8R8A8_UNORM: (numpy.uint8, 4),
    B8G8R8A8_UNORM_SRGB: (numpy.uint8, 4),
    # the X byte is padding
    B8G8R8X8_TYPELESS: (numpy.uint8, 3),
    B8G8R8X8_UNORM: (numpy.uint8, 3),
    B8G8R8X8_UNORM_SRGB: (numpy.uint8, 3),
}

_packed_formats = {
    B4G4R4A4_UNORM: (numpy.uint16, 4, 4, 4, 4),
    B5G6R5_UNORM: (numpy.uint16, 5, 6, 5, 0),
    B5G5R5A1_UNORM: (numpy.uint16, 5, 5, 5, 1),
    R9G9B9E5_SHAREDEXP: (numpy.uint32, 9, 9, 9, 5),
    R10G10B10A2_TYPELESS: (numpy.uint32, 10, 10, 10, 2),
    R10G10B10A2_UNORM: (numpy.uint32, 10, 10, 10, 2),
    R10G10B10A2_UINT: (numpy.uint32, 10, 10, 10, 2),
    R11G11B10_FLOAT: (numpy.uint32, 11, 11, 10, 0),
}

_block_compressed_formats = (
    BC1_UNORM,
    BC1_UNORM_SRGB,
    BC2_UNORM,
    BC2_UNORM_SRGB,
    BC3_UNORM,
    BC3_UNORM_SRGB,
    BC4_UNORM,
    BC4_SNORM,
    BC5_UNORM,
    BC5_SNORM,
    BC6H_UF16,
    BC6H_SF16,
    BC7_UNORM,
    BC7_UNORM_SRGB,
)

_depth_formats = (D16_UNORM, D32_FLOAT, D24_UNORM_S8_UINT, D32_FLOAT_S8X24_UINT)
_stencil_formats = (X24_TYPELESS_G8_UINT, X32_TYPELESS_G8X24_UINT)

_pixel_sizes = {
    D24_UNORM_S8_UINT: 4,
    D32_FLOAT_S8X24_UINT: 8,
    X24_TYPELESS_G8_UINT: 4,
    X32_TYPELESS_G8X24_UINT: 8,
}

for _format, (_dtype, _components) in _uniform_formats.items():
    _pixel_sizes[_format] = numpy.dtype(_dtype).itemsize * _components
for _format, _packing in _packed_formats.items():
    _pixel_sizes[_format] = numpy.dtype(_packing[0]).itemsize
for _format in _block_compressed_formats:
    _pixel_sizes[_format] = 0

# the X byte still occupies storage
for _format in (B8G8R8X8_TYPELESS, B8G8R8X8_UNORM, B8G8R8X8_UNORM_SRGB):
    _pixel_sizes[_format] = 4


def get_pixel_size(format):
    if format not in _pixel_sizes:
        raise UnsupportedFormatException("unknown format {0}".format(format))
    return _pixel_sizes[format]


def is_block_compressed(format):
    return format in _block_compressed_formats


def get_texture_aspect(format):
    if format in _depth_formats:
        return ASPECT_DEPTH
    if format in _stencil_formats:
        return ASPECT_STENCIL
    return ASPECT_COLOR


def get_validation_format(format):
    if format in _uniform_formats:
        dtype, component_count = _uniform_formats[format]
        return UniformChannelCodec(dtype, component_count)
    if format in _packed_formats:
        dtype, r_bits, g_bits, b_bits, a_bits = _packed_formats[format]
        return PackedBitfieldCodec(dtype, r_bits, g_bits, b_bits, a_bits)
    raise UnsupportedFormatException(
        "no validation format available for format {0}".format(format)
    )
