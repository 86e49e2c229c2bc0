"""Enumerations for rendering state, buffers and cameras."""

from __future__ import annotations

import enum


class PrimitiveType(enum.IntEnum):
    """How vertices are assembled into primitives."""

    POINTS = 0x0000
    LINES = 0x0001
    LINE_LOOP = 0x0002
    LINE_STRIP = 0x0003
    TRIANGLES = 0x0004
    TRIANGLE_STRIP = 0x0005
    TRIANGLE_FAN = 0x0006
    LINES_ADJACENCY = 0x000A
    LINE_STRIP_ADJACENCY = 0x000B
    TRIANGLES_ADJACENCY = 0x000C
    TRIANGLE_STRIP_ADJACENCY = 0x000D
    PATCHES = 0x000E


class DepthFunction(enum.IntEnum):
    """Comparison used by the depth test."""

    NEVER = 0x0200
    LESS = 0x0201
    EQUAL = 0x0202
    LEQUAL = 0x0203
    GREATER = 0x0204
    NOTEQUAL = 0x0205
    GEQUAL = 0x0206
    ALWAYS = 0x0207


class BlendFactor(enum.IntEnum):
    """Source or destination factor of blending."""

    ZERO = 0
    ONE = 1
    SRC_COLOR = 0x0300
    ONE_MINUS_SRC_COLOR = 0x0301
    SRC_ALPHA = 0x0302
    ONE_MINUS_SRC_ALPHA = 0x0303
    DST_ALPHA = 0x0304
    ONE_MINUS_DST_ALPHA = 0x0305
    DST_COLOR = 0x0306
    ONE_MINUS_DST_COLOR = 0x0307
    CONSTANT_COLOR = 0x8001
    ONE_MINUS_CONSTANT_COLOR = 0x8002
    CONSTANT_ALPHA = 0x8003
    ONE_MINUS_CONSTANT_ALPHA = 0x8004


class BlendEquation(enum.IntEnum):
    """How blended source and destination are combined."""

    ADD = 0x8006
    MIN = 0x8007
    MAX = 0x8008
    SUBTRACT = 0x800A
    REVERSE_SUBTRACT = 0x800B


class StencilFunction(enum.IntEnum):
    """Comparison used by the stencil test."""

    NEVER = 0x0200
    LESS = 0x0201
    EQUAL = 0x0202
    LEQUAL = 0x0203
    GREATER = 0x0204
    NOTEQUAL = 0x0205
    GEQUAL = 0x0206
    ALWAYS = 0x0207


class StencilAction(enum.IntEnum):
    """What the stencil test does to the stored value."""

    ZERO = 0
    KEEP = 0x1E00
    REPLACE = 0x1E01
    INCREMENT = 0x1E02
    DECREMENT = 0x1E03
    INVERT = 0x150A
    INCREMENT_WRAP = 0x8507
    DECREMENT_WRAP = 0x8508


class StencilFace(enum.IntEnum):
    """Faces a stencil setting applies to."""

    FRONT = 0x0404
    BACK = 0x0405
    FRONT_AND_BACK = 0x0408


class CullFaceFacet(enum.IntEnum):
    """Faces that are culled."""

    FRONT = 0x0404
    BACK = 0x0405
    FRONT_AND_BACK = 0x0408


class CullFaceOrientation(enum.IntEnum):
    """Winding order of front faces."""

    CW = 0x0900
    CCW = 0x0901


class PolygonMode(enum.IntEnum):
    """How polygons are rasterized."""

    POINT = 0x1B00
    LINE = 0x1B01
    FILL = 0x1B02


class ClearFlags(enum.IntFlag):
    """Buffers cleared by a clear operation."""

    DEPTH = 0x00000100
    STENCIL = 0x00000400
    COLOR = 0x00004000


class BufferTarget(enum.IntEnum):
    """Binding point of a GPU buffer."""

    NONE = 0
    ARRAY = 0x8892
    ELEMENT_ARRAY = 0x8893
    PIXEL_PACK = 0x88EB
    PIXEL_UNPACK = 0x88EC
    UNIFORM = 0x8A11
    TEXTURE = 0x8C2A
    TRANSFORM_FEEDBACK = 0x8C8E
    COPY_READ = 0x8F36
    COPY_WRITE = 0x8F37
    DRAW_INDIRECT = 0x8F3F
    DISPATCH_INDIRECT = 0x90EE
    SHADER_STORAGE = 0x90D2
    QUERY = 0x9192
    ATOMIC_COUNTER = 0x92C0


class BufferUsage(enum.IntEnum):
    """Expected access pattern of a GPU buffer's data."""

    NONE = 0
    STREAM_DRAW = 0x88E0
    STREAM_READ = 0x88E1
    STREAM_COPY = 0x88E2
    STATIC_DRAW = 0x88E4
    STATIC_READ = 0x88E5
    STATIC_COPY = 0x88E6
    DYNAMIC_DRAW = 0x88E8
    DYNAMIC_READ = 0x88E9
    DYNAMIC_COPY = 0x88EA


class CameraType(enum.IntEnum):
    """Kind of projection a camera uses."""

    ORTHOGRAPHIC = 0
    PERSPECTIVE = 1