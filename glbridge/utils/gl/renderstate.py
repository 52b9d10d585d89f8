"""
Fixed-function pipeline state as one plain snapshot.

`RenderStateDescriptor` holds every blend, depth, stencil, rasterizer,
scissor, viewport and clear setting a backend needs before it draws. It
is data only: every field can be set independently and nothing here
checks whether a combination is legal on the GPU. That is left to the
backend that consumes the snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from io import BytesIO
from numbers import Integral, Real
from typing import Any, BinaryIO, Callable, Dict, Mapping, Tuple, Union

from glbridge.errors import SnapshotDecodeError, SnapshotEncodeError, UnknownCodeError
from glbridge.log import get_logger
from glbridge.utils import A_Clonable, A_Serializable, VariadicArgs, VariadicKwargs
from glbridge.utils.gl import (BlendEquation, BlendMultiplier, ClearMask, Comparison, CullFace,
                               FaceWinding, GLEnum, GLFlag, PolygonMode, StencilOperation)
from glbridge.utils.gl.color import Srgba
from glbridge.utils.iohelper import (read_bool, read_double, read_exact, read_sint32, read_uint32,
                                     write_bool, write_double, write_sint32, write_uint32)

_LOG = get_logger("renderstate")

SNAPSHOT_MAGIC = b"RSD1"


@dataclass
class BlendState:
    enabled: bool = False
    equation: BlendEquation = BlendEquation.ADD
    src: BlendMultiplier = BlendMultiplier.ONE
    dst: BlendMultiplier = BlendMultiplier.ZERO


@dataclass
class DepthState:
    enabled: bool = False
    function: Comparison = Comparison.LESS
    write_enabled: bool = True


@dataclass
class StencilState:
    enabled: bool = False
    function: Comparison = Comparison.ALWAYS
    reference: int = 0
    mask: int = 0xFF
    fail: StencilOperation = StencilOperation.KEEP
    depth_fail: StencilOperation = StencilOperation.KEEP
    depth_pass: StencilOperation = StencilOperation.KEEP


@dataclass
class RasterizerState:
    cull_face: CullFace = CullFace.NONE
    front_face: FaceWinding = FaceWinding.COUNTER_CLOCKWISE
    polygon_mode: PolygonMode = PolygonMode.FILL
    alpha_to_coverage: bool = False
    dither: bool = False


@dataclass
class ScissorState:
    enabled: bool = False
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0


@dataclass
class Viewport:
    """
    The rectangle of the render target that rendering maps onto
    """
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @classmethod
    def at_origin(cls, width: int, height: int) -> Viewport:
        return cls(0, 0, width, height)

    def aspect_ratio(self) -> float:
        """
        Returns width / height, or 1.0 for a zero height viewport
        """
        if self.height == 0:
            return 1.0
        return self.width / self.height

    def contains(self, px: int, py: int) -> bool:
        return (
            self.x <= px < self.x + self.width and
            self.y <= py < self.y + self.height
        )

    def get_info(self) -> str:
        return f"Viewport({self.x},{self.y},{self.width},{self.height})"


@dataclass
class ClearState:
    red: float = 0.0
    green: float = 0.0
    blue: float = 0.0
    alpha: float = 1.0
    depth: float = 1.0
    stencil: int = 0
    mask: ClearMask = ClearMask(0)

    @property
    def color(self) -> Srgba:
        return Srgba(self.red, self.green, self.blue, self.alpha)

    @color.setter
    def color(self, color: Union[Srgba, Tuple[float, float, float, float]]):
        self.red, self.green, self.blue, self.alpha = (float(c) for c in color)


# -- Flat field table -- #
# (flat name, group, attribute, codec) in wire order

_BOOL = "bool"
_SINT = "sint32"
_UINT = "uint32"
_DOUBLE = "double"

_FIELDS: Tuple[Tuple[str, str, str, Any], ...] = (
    ("blending_enabled", "blend", "enabled", _BOOL),
    ("blend_equation", "blend", "equation", BlendEquation),
    ("blend_src", "blend", "src", BlendMultiplier),
    ("blend_dst", "blend", "dst", BlendMultiplier),
    ("depth_test_enabled", "depth", "enabled", _BOOL),
    ("depth_func", "depth", "function", Comparison),
    ("depth_write_mask", "depth", "write_enabled", _BOOL),
    ("stencil_test_enabled", "stencil", "enabled", _BOOL),
    ("stencil_func", "stencil", "function", Comparison),
    ("stencil_ref", "stencil", "reference", _SINT),
    ("stencil_mask", "stencil", "mask", _UINT),
    ("stencil_fail", "stencil", "fail", StencilOperation),
    ("stencil_z_fail", "stencil", "depth_fail", StencilOperation),
    ("stencil_z_pass", "stencil", "depth_pass", StencilOperation),
    ("cull_face", "rasterizer", "cull_face", CullFace),
    ("front_face", "rasterizer", "front_face", FaceWinding),
    ("polygon_mode", "rasterizer", "polygon_mode", PolygonMode),
    ("alpha_to_coverage", "rasterizer", "alpha_to_coverage", _BOOL),
    ("dither", "rasterizer", "dither", _BOOL),
    ("scissor_test", "scissor", "enabled", _BOOL),
    ("scissor_x", "scissor", "x", _SINT),
    ("scissor_y", "scissor", "y", _SINT),
    ("scissor_width", "scissor", "width", _UINT),
    ("scissor_height", "scissor", "height", _UINT),
    ("viewport_x", "viewport", "x", _SINT),
    ("viewport_y", "viewport", "y", _SINT),
    ("viewport_width", "viewport", "width", _UINT),
    ("viewport_height", "viewport", "height", _UINT),
    ("clear_color_r", "clear", "red", _DOUBLE),
    ("clear_color_g", "clear", "green", _DOUBLE),
    ("clear_color_b", "clear", "blue", _DOUBLE),
    ("clear_color_a", "clear", "alpha", _DOUBLE),
    ("clear_depth", "clear", "depth", _DOUBLE),
    ("clear_stencil", "clear", "stencil", _SINT),
    ("clear_mask", "clear", "mask", ClearMask),
)

FIELD_NAMES: Tuple[str, ...] = tuple(entry[0] for entry in _FIELDS)

_WRITERS: Dict[str, Callable[[BinaryIO, Any], None]] = {
    _BOOL: write_bool,
    _SINT: write_sint32,
    _UINT: write_uint32,
    _DOUBLE: write_double,
}

_READERS: Dict[str, Callable[[BinaryIO], Any]] = {
    _BOOL: read_bool,
    _SINT: read_sint32,
    _UINT: read_uint32,
    _DOUBLE: read_double,
}


_RANGES: Dict[str, Tuple[int, int]] = {
    _SINT: (-0x80000000, 0x7FFFFFFF),
    _UINT: (0, 0xFFFFFFFF),
}


def _is_code(codec: Any) -> bool:
    return isinstance(codec, type) and issubclass(codec, (GLEnum, GLFlag))


def _is_integer(value: Any) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


def _is_real(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _encode(codec: Any, name: str, value: Any) -> Any:
    if codec == _BOOL:
        return bool(value)
    if codec == _DOUBLE:
        if not _is_real(value):
            raise SnapshotEncodeError(f"Expected a real number, got {value!r}", name)
        return float(value)
    if not _is_integer(value):
        raise SnapshotEncodeError(f"Expected an integer, got {value!r}", name)
    width = _UINT if _is_code(codec) else codec
    low, high = _RANGES[width]
    value = int(value)
    if not low <= value <= high:
        raise SnapshotEncodeError(f"{value} does not fit the {width} range [{low}, {high}]", name)
    return value


def _decode(codec: Any, name: str, value: Any) -> Any:
    if _is_code(codec):
        try:
            return codec.from_code(value)
        except UnknownCodeError as e:
            raise SnapshotDecodeError(str(e), name) from e
    if codec == _BOOL:
        if not isinstance(value, bool):
            raise SnapshotDecodeError(f"Expected a boolean, got {value!r}", name)
        return value
    if codec == _DOUBLE:
        if not _is_real(value):
            raise SnapshotDecodeError(f"Expected a real number, got {value!r}", name)
        return float(value)
    if not _is_integer(value):
        raise SnapshotDecodeError(f"Expected an integer, got {value!r}", name)
    value = int(value)
    low, high = _RANGES[codec]
    if not low <= value <= high:
        raise SnapshotDecodeError(f"{value} does not fit the {codec} range", name)
    return value


def _flat_property(group: str, attribute: str) -> property:
    def fget(self: RenderStateDescriptor) -> Any:
        return getattr(getattr(self, group), attribute)

    def fset(self: RenderStateDescriptor, value: Any):
        setattr(getattr(self, group), attribute, value)

    return property(fget, fset, doc=f"Alias of `{group}.{attribute}`")


@dataclass
class RenderStateDescriptor(A_Serializable, A_Clonable):
    """
    Complete fixed-function pipeline state

    A default instance reproduces the conventional GL defaults. Fields are
    grouped (`blend`, `depth`, `stencil`, `rasterizer`, `scissor`,
    `viewport`, `clear`) and every field is also reachable under its flat
    name, e.g. `blending_enabled` or `clear_depth`
    """
    blend: BlendState = field(default_factory=BlendState)
    depth: DepthState = field(default_factory=DepthState)
    stencil: StencilState = field(default_factory=StencilState)
    rasterizer: RasterizerState = field(default_factory=RasterizerState)
    scissor: ScissorState = field(default_factory=ScissorState)
    viewport: Viewport = field(default_factory=Viewport)
    clear: ClearState = field(default_factory=ClearState)

    @classmethod
    def default(cls) -> RenderStateDescriptor:
        return cls()

    @property
    def clear_color(self) -> Tuple[float, float, float, float]:
        clear = self.clear
        return clear.red, clear.green, clear.blue, clear.alpha

    @clear_color.setter
    def clear_color(self, color: Union[Srgba, Tuple[float, float, float, float]]):
        self.clear.color = color

    def copy(self, *, deep: bool = False) -> RenderStateDescriptor:
        """
        Return an independent copy. Sub-states are always duplicated so
        the copy never shares mutable state with this descriptor
        """
        return RenderStateDescriptor(
            **{f.name: replace(getattr(self, f.name)) for f in fields(self)}
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        Flat mapping of every field. Enumerations are given as their native codes
        """
        return {
            name: _encode(codec, name, getattr(getattr(self, group), attribute))
            for name, group, attribute, codec in _FIELDS
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RenderStateDescriptor:
        missing = [name for name in FIELD_NAMES if name not in data]
        if missing:
            raise SnapshotDecodeError(
                f"Render state snapshot is missing {len(missing)} field(s)", missing[0])
        unknown = set(data) - set(FIELD_NAMES)
        if unknown:
            _LOG.debug("Ignoring unknown snapshot fields %s", sorted(unknown))

        descriptor = cls()
        for name, group, attribute, codec in _FIELDS:
            setattr(getattr(descriptor, group), attribute,
                    _decode(codec, name, data[name]))
        return descriptor

    def to_bytes(self) -> bytes:
        """
        Big-endian binary snapshot: magic, then every field in table order
        """
        stream = BytesIO()
        stream.write(SNAPSHOT_MAGIC)
        for name, group, attribute, codec in _FIELDS:
            value = _encode(codec, name, getattr(getattr(self, group), attribute))
            writer = write_uint32 if _is_code(codec) else _WRITERS[codec]
            writer(stream, value)
        data = stream.getvalue()
        _LOG.debug("Encoded render state snapshot (%d bytes)", len(data))
        return data

    @classmethod
    def from_bytes(cls, data: Union[BinaryIO, bytes, bytearray], *args: VariadicArgs, **kwargs: VariadicKwargs) -> RenderStateDescriptor:
        if isinstance(data, (bytes, bytearray)):
            data = BytesIO(bytes(data))

        magic = read_exact(data, len(SNAPSHOT_MAGIC))
        if magic != SNAPSHOT_MAGIC:
            raise SnapshotDecodeError(
                f"Bad render state snapshot magic {magic!r}")

        descriptor = cls()
        for name, group, attribute, codec in _FIELDS:
            reader = read_uint32 if _is_code(codec) else _READERS[codec]
            try:
                raw = reader(data)
            except SnapshotDecodeError as e:
                raise SnapshotDecodeError(str(e), name) from e
            setattr(getattr(descriptor, group), attribute,
                    _decode(codec, name, raw))
        _LOG.debug("Decoded render state snapshot")
        return descriptor


for _name, _group, _attribute, _codec in _FIELDS:
    setattr(RenderStateDescriptor, _name, _flat_property(_group, _attribute))
del _name, _group, _attribute, _codec
