###
# Protocol-level enumerations. Every value is the numeric constant the
# native GL API assigns to the same concept and must never be renumbered.
###

from enum import IntEnum, IntFlag
from numbers import Integral
from typing import Tuple, Type, TypeVar, Union

from glbridge.errors import UnknownCodeError

_E = TypeVar("_E", bound="GLEnum")


def _as_code(enum: str, code: object) -> int:
    # bool is Integral but never a GL code
    if isinstance(code, bool) or not isinstance(code, Integral):
        raise UnknownCodeError(enum, code)
    return int(code)


class GLEnum(IntEnum):
    """
    Enumeration whose values are native GL constants

    Exchange these through `to_code` / `from_code` so the numeric code,
    not the Python name, is what crosses process boundaries
    """

    def to_code(self) -> int:
        return int(self.value)

    @classmethod
    def from_code(cls: Type[_E], code: int) -> _E:
        code = _as_code(cls.__name__, code)
        try:
            return cls(code)
        except ValueError:
            raise UnknownCodeError(cls.__name__, code) from None


class GLFlag(IntFlag):
    """
    Bitmask of native GL flag constants
    """

    @classmethod
    def all_bits(cls) -> int:
        bits = 0
        for member in cls.__members__.values():
            bits |= int(member.value)
        return bits

    def to_code(self) -> int:
        return int(self.value)

    @classmethod
    def from_code(cls, code: int) -> "GLFlag":
        code = _as_code(cls.__name__, code)
        if code < 0 or code & ~cls.all_bits():
            raise UnknownCodeError(cls.__name__, code)
        return cls(code)


def to_code(value: Union[GLEnum, GLFlag]) -> int:
    if not isinstance(value, (GLEnum, GLFlag)):
        raise TypeError(
            f"{type(value).__name__} is not a protocol-level enumeration")
    return value.to_code()


def from_code(enum: Type[_E], code: int) -> _E:
    return enum.from_code(code)


class BlendEquation(GLEnum):
    ADD = 0x8006
    SUBTRACT = 0x800A
    REVERSE_SUBTRACT = 0x800B
    MIN = 0x8007
    MAX = 0x8008


class BlendMultiplier(GLEnum):
    ZERO = 0x0000
    ONE = 0x0001
    SRC_COLOR = 0x0300
    ONE_MINUS_SRC_COLOR = 0x0301
    DST_COLOR = 0x0306
    ONE_MINUS_DST_COLOR = 0x0307
    SRC_ALPHA = 0x0302
    ONE_MINUS_SRC_ALPHA = 0x0303
    DST_ALPHA = 0x0304
    ONE_MINUS_DST_ALPHA = 0x0305
    SRC1_COLOR = 0x0308
    ONE_MINUS_SRC1_COLOR = 0x0309
    SRC1_ALPHA = 0x881A
    ONE_MINUS_SRC1_ALPHA = 0x881B


class Comparison(GLEnum):
    NEVER = 0x0200
    LESS = 0x0201
    EQUAL = 0x0202
    LESS_OR_EQUAL = 0x0203
    GREATER = 0x0204
    NOT_EQUAL = 0x0205
    GREATER_OR_EQUAL = 0x0206
    ALWAYS = 0x0207

    # GL spellings
    LEQUAL = 0x0203
    NOTEQUAL = 0x0205
    GEQUAL = 0x0206


class CullFace(GLEnum):
    NONE = 0
    FRONT = 0x0404
    BACK = 0x0405
    FRONT_AND_BACK = 0x0408


class FaceWinding(GLEnum):
    COUNTER_CLOCKWISE = 0x0901
    CLOCKWISE = 0x0900

    CCW = 0x0901
    CW = 0x0900


class StencilOperation(GLEnum):
    KEEP = 0x1E00
    ZERO = 0x0000
    REPLACE = 0x1E01
    INCREMENT = 0x1E02
    DECREMENT = 0x1E03
    INCREMENT_WRAP = 0x8507
    DECREMENT_WRAP = 0x8508
    INVERT = 0x150A


class PolygonMode(GLEnum):
    POINT = 0x1B00
    LINE = 0x1B01
    FILL = 0x1B02


class TextureMinFilter(GLEnum):
    NEAREST = 0x2600
    LINEAR = 0x2601
    NEAREST_MIPMAP_NEAREST = 0x2700
    LINEAR_MIPMAP_NEAREST = 0x2701
    NEAREST_MIPMAP_LINEAR = 0x2702
    LINEAR_MIPMAP_LINEAR = 0x2703


class TextureMagFilter(GLEnum):
    NEAREST = 0x2600
    LINEAR = 0x2601


class TextureWrap(GLEnum):
    REPEAT = 0x2901
    MIRRORED_REPEAT = 0x8370
    CLAMP_TO_EDGE = 0x812F
    CLAMP_TO_BORDER = 0x812D


class BufferUsage(GLEnum):
    STATIC_DRAW = 0x88E4
    DYNAMIC_DRAW = 0x88E8
    STREAM_DRAW = 0x88E0
    STATIC_READ = 0x88E5
    DYNAMIC_READ = 0x88E9
    STREAM_READ = 0x88E1
    STATIC_COPY = 0x88E6
    DYNAMIC_COPY = 0x88EA
    STREAM_COPY = 0x88E2


class DrawMode(GLEnum):
    STATIC = 0x88E4
    DYNAMIC = 0x88E8
    STREAM = 0x88E0

    def to_buffer_usage(self) -> BufferUsage:
        return BufferUsage.from_code(self.to_code())


class PrimitiveType(GLEnum):
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


class DataType(GLEnum):
    BYTE = 0x1400
    UNSIGNED_BYTE = 0x1401
    SHORT = 0x1402
    UNSIGNED_SHORT = 0x1403
    INT = 0x1404
    UNSIGNED_INT = 0x1405
    HALF_FLOAT = 0x140B
    FLOAT = 0x1406
    DOUBLE = 0x140A

    @property
    def byte_size(self) -> int:
        return _DATA_TYPE_SIZES[self]


_DATA_TYPE_SIZES = {
    DataType.BYTE: 1,
    DataType.UNSIGNED_BYTE: 1,
    DataType.SHORT: 2,
    DataType.UNSIGNED_SHORT: 2,
    DataType.INT: 4,
    DataType.UNSIGNED_INT: 4,
    DataType.HALF_FLOAT: 2,
    DataType.FLOAT: 4,
    DataType.DOUBLE: 8,
}


class ShaderType(GLEnum):
    VERTEX = 0x8B31
    FRAGMENT = 0x8B30
    GEOMETRY = 0x8DD9
    COMPUTE = 0x91B9
    TESSELLATION_CONTROL = 0x8E87
    TESSELLATION_EVALUATION = 0x8E88


class CubeMapSide(GLEnum):
    POSITIVE_X = 0x8515
    NEGATIVE_X = 0x8516
    POSITIVE_Y = 0x8517
    NEGATIVE_Y = 0x8518
    POSITIVE_Z = 0x8519
    NEGATIVE_Z = 0x851A


class TextureFormat(GLEnum):
    R8 = 0x8229
    R8I = 0x8231
    R8UI = 0x8232
    R16F = 0x822D
    R16I = 0x8233
    R16UI = 0x8234
    R32F = 0x822E
    R32I = 0x8235
    R32UI = 0x8236
    R8G8 = 0x822B
    R8G8I = 0x8237
    R8G8UI = 0x8238
    R8G8B8 = 0x1907
    R8G8B8I = 0x8D8F
    R8G8B8UI = 0x8D7D
    R8G8B8A8 = 0x1908
    R8G8B8A8I = 0x8D95
    R8G8B8A8UI = 0x8D81
    R16F16I = 0x822F
    R16I16UI = 0x8239
    R32F32I = 0x8230
    R32I32UI = 0x823A
    R16F16I16UI = 0x881E
    R16I16UI16F = 0x8E59
    R16F16I16UI16F = 0x8E5A
    R16I16UI16F16F = 0x8E5B
    R32F32I32UI32F = 0x8E5C
    R8G8B8A8_UNORM = 0x8058
    R8G8B8A8_SNORM = 0x8F97
    R8G8B8A8_SINT = 0x8D94
    R8G8B8A8_UINT = 0x8D7C
    DEPTH16 = 0x81A5
    DEPTH24 = 0x81A6
    DEPTH32F = 0x8CAC
    DEPTH24_STENCIL8 = 0x88F0
    DEPTH32F_STENCIL8 = 0x8CAD
    STENCIL_INDEX8 = 0x1901


class ClearMask(GLFlag):
    COLOR = 0x00004000
    DEPTH = 0x00000100
    STENCIL = 0x00000400


# Names kept for callers of the older duplicated definitions
DepthTest = Comparison
BlendFactor = BlendMultiplier
BufferUsageHint = BufferUsage
WindingOrder = FaceWinding


PROTOCOL_ENUMS: Tuple[Type[GLEnum], ...] = (
    BlendEquation,
    BlendMultiplier,
    Comparison,
    CullFace,
    FaceWinding,
    StencilOperation,
    PolygonMode,
    TextureMinFilter,
    TextureMagFilter,
    TextureWrap,
    BufferUsage,
    DrawMode,
    PrimitiveType,
    DataType,
    ShaderType,
    CubeMapSide,
    TextureFormat,
)
