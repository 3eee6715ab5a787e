TEXTURE_1D = 0
TEXTURE_2D = 1
TEXTURE_3D = 2
TEXTURE_CUBE = 3

ASPECT_COLOR = 0
ASPECT_DEPTH = 1
ASPECT_STENCIL = 2

CUBE_FACES = 6


class UnsupportedFormatException(Exception):
    pass


class ComponentCountException(Exception):
    pass


class BitfieldException(Exception):
    pass


class SubresourceBoundsException(Exception):
    pass


class TextureDescriptorException(Exception):
    pass
