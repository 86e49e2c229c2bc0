"""Enumerations for textures, shaders and images."""

from __future__ import annotations

import enum


class TextureTarget(enum.IntEnum):
    """Kind of texture, or a face of a cube map."""

    TEXTURE_1D = 0x0DE0
    TEXTURE_2D = 0x0DE1
    TEXTURE_3D = 0x806F
    TEXTURE_1D_ARRAY = 0x8C18
    TEXTURE_2D_ARRAY = 0x8C1A
    TEXTURE_RECTANGLE = 0x84F5
    TEXTURE_CUBE_MAP = 0x8513
    TEXTURE_CUBE_MAP_ARRAY = 0x9009
    TEXTURE_2D_MULTISAMPLE = 0x9100
    TEXTURE_2D_MULTISAMPLE_ARRAY = 0x9102
    TEXTURE_CUBE_MAP_POSITIVE_X = 0x8515
    TEXTURE_CUBE_MAP_NEGATIVE_X = 0x8516
    TEXTURE_CUBE_MAP_POSITIVE_Y = 0x8517
    TEXTURE_CUBE_MAP_NEGATIVE_Y = 0x8518
    TEXTURE_CUBE_MAP_POSITIVE_Z = 0x8519
    TEXTURE_CUBE_MAP_NEGATIVE_Z = 0x851A


class InternalFormat(enum.IntEnum):
    """Storage format of texture texels."""

    NONE = 0
    R8 = 0x8229
    R8_SNORM = 0x8F94
    R16 = 0x822A
    R16_SNORM = 0x8F98
    RG8 = 0x822B
    RG8_SNORM = 0x8F95
    RG16 = 0x822C
    RG16_SNORM = 0x8F99
    R3_G3_B2 = 0x2A10
    RGB4 = 0x804F
    RGB5 = 0x8050
    RGB8 = 0x8051
    RGB8_SNORM = 0x8F96
    RGB10 = 0x8052
    RGB12 = 0x8053
    RGB16_SNORM = 0x8F9A
    RGBA2 = 0x8055
    RGBA4 = 0x8056
    RGB5_A1 = 0x8057
    RGBA8 = 0x8058
    RGBA8_SNORM = 0x8F97
    RGB10_A2 = 0x8059
    RGB10_A2UI = 0x906F
    RGBA12 = 0x805A
    RGBA16 = 0x805B
    SRGB8 = 0x8C41
    R16F = 0x822D
    RG16F = 0x822F
    RGB16F = 0x881B
    RGBA16F = 0x881A
    R32F = 0x822E
    RG32F = 0x8230
    RGB32F = 0x8815
    RGBA32F = 0x8814
    RGB9_E5 = 0x8C3D
    R8I = 0x8231
    R8UI = 0x8232
    R16I = 0x8233
    R16UI = 0x8234
    R32I = 0x8235
    R32UI = 0x8236
    RG8I = 0x8237
    RG8UI = 0x8238
    RG16I = 0x8239
    RG16UI = 0x823A
    RG32I = 0x823B
    RG32UI = 0x823C
    RGB8I = 0x8D8F
    RGB8UI = 0x8D7D
    RGB16I = 0x8D89
    RGB16UI = 0x8D77
    RGB32I = 0x8D83
    RGB32UI = 0x8D71
    RGBA8I = 0x8D8E
    RGBA8UI = 0x8D7C
    RGBA16I = 0x8D88
    RGBA16UI = 0x8D76
    RGBA32I = 0x8D82
    RGBA32UI = 0x8D70


class PixelFormat(enum.IntEnum):
    """Layout of pixel data passed to or read from a texture."""

    NONE = 0
    R = 0x1903
    RG = 0x8227
    RGB = 0x1907
    BGR = 0x80E0
    RGBA = 0x1908
    BGRA = 0x80E1
    DEPTH_COMPONENT = 0x1902
    STENCIL_INDEX = 0x1901


class DepthStencilMode(enum.IntEnum):
    """Which part of a depth-stencil texture is sampled."""

    DEPTH_COMPONENT = 0x1902
    STENCIL_INDEX = 0x1901


class CompareFunc(enum.IntEnum):
    """Comparison used for depth texture sampling."""

    NEVER = 0x0200
    LESS = 0x0201
    EQUAL = 0x0202
    LEQUAL = 0x0203
    GREATER = 0x0204
    NOTEQUAL = 0x0205
    GEQUAL = 0x0206
    ALWAYS = 0x0207


class CompareMode(enum.IntEnum):
    """Whether depth texture sampling compares against a reference."""

    NONE = 0
    COMPARE_REF_TO_TEXTURE = 0x884E


class MinFilter(enum.IntEnum):
    """Filter used when a texture is minified."""

    NEAREST = 0x2600
    LINEAR = 0x2601
    NEAREST_MIPMAP_NEAREST = 0x2700
    LINEAR_MIPMAP_NEAREST = 0x2701
    NEAREST_MIPMAP_LINEAR = 0x2702
    LINEAR_MIPMAP_LINEAR = 0x2703


class MagFilter(enum.IntEnum):
    """Filter used when a texture is magnified."""

    NEAREST = 0x2600
    LINEAR = 0x2601


class Swizzle(enum.IntEnum):
    """Source of a sampled color component."""

    ZERO = 0
    ONE = 1
    RED = 0x1903
    GREEN = 0x1904
    BLUE = 0x1905
    ALPHA = 0x1906


class Wrap(enum.IntEnum):
    """How texture coordinates outside [0, 1] are handled."""

    REPEAT = 0x2901
    CLAMP_TO_BORDER = 0x812D
    CLAMP_TO_EDGE = 0x812F
    MIRRORED_REPEAT = 0x8370
    MIRROR_CLAMP_TO_EDGE = 0x8743


class ShaderType(enum.IntEnum):
    """Pipeline stage a shader runs in."""

    COMPUTE = 0x91B9
    VERTEX = 0x8B31
    TESS_CONTROL = 0x8E88
    TESS_EVALUATION = 0x8E87
    GEOMETRY = 0x8DD9
    FRAGMENT = 0x8B30


class ShaderFormat(enum.IntEnum):
    """Language or binary form of shader source."""

    GLSL = 0
    SPIRV = 1


class ColorType(enum.IntEnum):
    """Channels stored per image pixel."""

    NONE = 0
    GRAY = 1
    GRAY_ALPHA = 2
    RGB = 3
    RGBA = 4