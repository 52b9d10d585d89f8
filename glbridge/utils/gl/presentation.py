"""
Presentation-level enumerations.

These only name choices; their values mean nothing to the native API and
they are not integers, so a `Cull` can never be mistaken for
the protocol-level `CullFace` that shares its variant names.
"""

from enum import Enum, Flag, auto

from glbridge.utils.gl import CullFace


class Cull(Enum):
    NONE = auto()
    BACK = auto()
    FRONT = auto()
    FRONT_AND_BACK = auto()


_CULL_TO_CULL_FACE = {
    Cull.NONE: CullFace.NONE,
    Cull.BACK: CullFace.BACK,
    Cull.FRONT: CullFace.FRONT,
    Cull.FRONT_AND_BACK: CullFace.FRONT_AND_BACK,
}


def cull_to_cull_face(mode: Cull) -> CullFace:
    return _CULL_TO_CULL_FACE[mode]


def cull_face_to_cull(face: CullFace) -> Cull:
    for mode, mapped in _CULL_TO_CULL_FACE.items():
        if mapped is face:
            return mode
    raise ValueError(f"{face!r} has no presentation equivalent")


class WriteMask(Flag):
    NONE = 0
    COLOR = 1
    DEPTH = 2
    STENCIL = 4
    ALL = 7


class BufferType(Enum):
    VERTEX = auto()
    ELEMENT = auto()
    INSTANCE = auto()
    UNIFORM = auto()


class Transparency(Enum):
    OPAQUE = auto()
    ALPHA = auto()
    ADDITIVE = auto()
    MULTIPLY = auto()


class FilterMode(Enum):
    POINT = auto()
    LINEAR = auto()
    GAUSSIAN = auto()


class ToneMapping(Enum):
    NONE = auto()
    REINHARD = auto()
    ACES_FILMIC = auto()
    FILMIC = auto()
    LOTTES = auto()
    UCHIMURA = auto()
    UNREAL = auto()


class BackgroundMode(Enum):
    COLOR = auto()
    CUBE_MAP = auto()
    SKYBOX = auto()
    ENVIRONMENT = auto()
    NONE = auto()


class GeometryType(Enum):
    POINTS = auto()
    LINES = auto()
    TRIANGLES = auto()
    FAN = auto()
    STRIP = auto()
    QUADS = auto()


class MaterialShadingModel(Enum):
    PBR = auto()
    PHONG = auto()
    LAMBERT = auto()
    TOON = auto()
    UNLIT = auto()


class LightType(Enum):
    DIRECTIONAL = auto()
    POINT = auto()
    SPOT = auto()
    AMBIENT = auto()


class StereoMode(Enum):
    MONO = auto()
    LEFT = auto()
    RIGHT = auto()
    SIDE_BY_SIDE = auto()
    TOP_BOTTOM = auto()
