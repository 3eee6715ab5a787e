import logging
from collections import namedtuple

from . import (
    CUBE_FACES,
    TEXTURE_1D,
    TEXTURE_2D,
    TEXTURE_3D,
    TEXTURE_CUBE,
    SubresourceBoundsException,
    TextureDescriptorException,
)
from .formats import get_pixel_size

logger = logging.getLogger(__name__)

Extents = namedtuple("Extents", ("width", "height", "depth"))
Strides = namedtuple("Strides", ("x", "y", "z"))
SubresourceData = namedtuple("SubresourceData", ("data", "row_pitch", "slice_pitch"))

_texture_type_names = {
    TEXTURE_1D: "1D",
    TEXTURE_2D: "2D",
    TEXTURE_3D: "3D",
    TEXTURE_CUBE: "Cube",
}


def get_subresource_index(mip_level, mip_level_count, array_layer):
    return array_layer * mip_level_count + mip_level


def get_mip_extents(extents, mip_level):
    return Extents(
        max(extents[0] >> mip_level, 1),
        max(extents[1] >> mip_level, 1),
        max(extents[2] >> mip_level, 1),
    )


def get_mip_level_count(width, height=1, depth=1):
    return max(width, height, depth).bit_length()


class SubresourceLayout:
    """A view over the texels of one mip level of one array layer.

    The layout does not own the memory it addresses: it is either a buffer
    owned by a TextureDescriptor or readback memory handed over by a device.
    """

    def __init__(self, buffer, extents, texel_size, strides, offset=0):
        self.buffer = memoryview(buffer).cast("B")
        self.extents = Extents(*extents)
        self.texel_size = texel_size
        self.strides = Strides(*strides)
        self.offset = offset

    @classmethod
    def from_pitches(
        cls, buffer, extents, texel_size, row_pitch, slice_pitch=None, offset=0
    ):
        extents = Extents(*extents)
        if row_pitch < extents.width * texel_size:
            raise SubresourceBoundsException(
                "row pitch {0} cannot hold {1} texels of {2} bytes".format(
                    row_pitch, extents.width, texel_size
                )
            )
        if slice_pitch is None:
            slice_pitch = row_pitch * extents.height
        elif extents.depth > 1 and slice_pitch < row_pitch * extents.height:
            raise SubresourceBoundsException(
                "slice pitch {0} cannot hold {1} rows of {2} bytes".format(
                    slice_pitch, extents.height, row_pitch
                )
            )
        layout = cls(
            buffer, extents, texel_size, (texel_size, row_pitch, slice_pitch), offset
        )
        last = layout.offset_of(
            extents.width - 1, extents.height - 1, extents.depth - 1
        )
        if last + texel_size > len(layout.buffer):
            raise SubresourceBoundsException(
                "buffer of {0} bytes is too small for {1}x{2}x{3} texels".format(
                    len(layout.buffer), *extents
                )
            )
        return layout

    def __repr__(self):
        return "SubresourceLayout(extents={0}, strides={1}, offset={2})".format(
            tuple(self.extents), tuple(self.strides), self.offset
        )

    @property
    def width(self):
        return self.extents.width

    @property
    def height(self):
        return self.extents.height

    @property
    def depth(self):
        return self.extents.depth

    def offset_of(self, x, y, z=0):
        if not 0 <= x < self.extents.width:
            raise SubresourceBoundsException(
                "x {0} outside of width {1}".format(x, self.extents.width)
            )
        if not 0 <= y < self.extents.height:
            raise SubresourceBoundsException(
                "y {0} outside of height {1}".format(y, self.extents.height)
            )
        if not 0 <= z < self.extents.depth:
            raise SubresourceBoundsException(
                "z {0} outside of depth {1}".format(z, self.extents.depth)
            )
        return (
            self.offset
            + z * self.strides.z
            + y * self.strides.y
            + x * self.strides.x
        )

    def block_at(self, x, y, z=0):
        offset = self.offset_of(x, y, z)
        end = offset + self.texel_size
        if end > len(self.buffer):
            raise SubresourceBoundsException(
                "texel ({0}, {1}, {2}) ends at byte {3}, past the buffer end {4}".format(
                    x, y, z, end, len(self.buffer)
                )
            )
        return self.buffer[offset:end]

    def coordinates(self):
        for z in range(self.extents.depth):
            for y in range(self.extents.height):
                for x in range(self.extents.width):
                    yield x, y, z


class TextureDescriptor:
    def __init__(
        self,
        format,
        texel_size,
        texture_type,
        extents,
        mip_level_count,
        array_layer_count,
    ):
        self.format = format
        self.texel_size = texel_size
        self.texture_type = texture_type
        self.extents = Extents(*extents)
        self.mip_level_count = mip_level_count
        self.array_layer_count = array_layer_count
        self.subresources = []
        self.buffers = []

    def __repr__(self):
        return (
            "TextureDescriptor(format={0}, type={1}, extents={2}, mips={3}, layers={4})"
        ).format(
            self.format,
            _texture_type_names.get(self.texture_type, self.texture_type),
            tuple(self.extents),
            self.mip_level_count,
            self.array_layer_count,
        )

    @property
    def subresource_count(self):
        return self.mip_level_count * self.array_layer_count

    def get_subresource(self, mip_level, array_layer):
        return self.subresources[
            get_subresource_index(mip_level, self.mip_level_count, array_layer)
        ]

    def iter_subresources(self):
        for array_layer in range(self.array_layer_count):
            for mip_level in range(self.mip_level_count):
                index = get_subresource_index(
                    mip_level, self.mip_level_count, array_layer
                )
                yield index, mip_level, array_layer, self.subresources[index]

    @property
    def subresource_data(self):
        return [
            SubresourceData(buffer, layout.strides.y, layout.strides.z)
            for layout, buffer in zip(self.subresources, self.buffers)
        ]


def build_texture_descriptor(
    format,
    texture_type,
    width,
    height=1,
    depth=1,
    mip_level_count=1,
    array_layer_count=1,
    texel_size=None,
    get_pitches=None,
):
    """Allocate zero-filled subresource buffers for a texture.

    get_pitches, when given, is called as get_pitches(mip_level, extents) and
    must return the (row_pitch, slice_pitch) reported by the device for that
    mip level; otherwise rows and slices are tightly packed.
    """
    if texture_type not in _texture_type_names:
        raise TextureDescriptorException(
            "unknown texture type {0}".format(texture_type)
        )
    if texel_size is None:
        texel_size = get_pixel_size(format)
    if texel_size <= 0:
        raise TextureDescriptorException(
            "format {0} has no addressable texel size".format(format)
        )

    if texture_type == TEXTURE_1D:
        height = depth = 1
    elif texture_type in (TEXTURE_2D, TEXTURE_CUBE):
        depth = 1
    else:
        array_layer_count = 1

    if min(width, height, depth) < 1:
        raise TextureDescriptorException(
            "invalid extents {0}x{1}x{2}".format(width, height, depth)
        )
    if array_layer_count < 1:
        raise TextureDescriptorException(
            "invalid array layer count {0}".format(array_layer_count)
        )
    if texture_type == TEXTURE_CUBE:
        array_layer_count *= CUBE_FACES

    max_mip_level_count = get_mip_level_count(width, height, depth)
    if mip_level_count == 0:
        mip_level_count = max_mip_level_count
    if not 1 <= mip_level_count <= max_mip_level_count:
        raise TextureDescriptorException(
            "invalid mip level count {0} (maximum is {1})".format(
                mip_level_count, max_mip_level_count
            )
        )

    descriptor = TextureDescriptor(
        format,
        texel_size,
        texture_type,
        (width, height, depth),
        mip_level_count,
        array_layer_count,
    )

    for array_layer in range(array_layer_count):
        for mip_level in range(mip_level_count):
            extents = get_mip_extents(descriptor.extents, mip_level)
            row_pitch = extents.width * texel_size
            slice_pitch = row_pitch * extents.height
            if get_pitches:
                row_pitch, slice_pitch = get_pitches(mip_level, extents)
                if row_pitch < extents.width * texel_size:
                    raise TextureDescriptorException(
                        "row pitch {0} too small for mip level {1}".format(
                            row_pitch, mip_level
                        )
                    )
                if slice_pitch < row_pitch * extents.height:
                    raise TextureDescriptorException(
                        "slice pitch {0} too small for mip level {1}".format(
                            slice_pitch, mip_level
                        )
                    )
            buffer = bytearray(slice_pitch * extents.depth)
            descriptor.buffers.append(buffer)
            descriptor.subresources.append(
                SubresourceLayout(
                    buffer, extents, texel_size, (texel_size, row_pitch, slice_pitch)
                )
            )

    logger.debug(
        "built %r with %d subresources", descriptor, descriptor.subresource_count
    )
    return descriptor
