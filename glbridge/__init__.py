"""
glbridge: double precision math types and GPU render state for a
single precision rendering engine.
"""

from glbridge.config import BridgeConfig, ColorPolicy, get_config, reset_config, resolve_config
from glbridge.errors import (GLBridgeError, NonFiniteColorError, ParameterLengthMismatch,
                             SingularMatrixError, SnapshotDecodeError, SnapshotEncodeError,
                             UnknownCodeError)
from glbridge.log import configure_logging, get_logger
from glbridge.utils import precision
from glbridge.utils.gl import (BlendEquation, BlendFactor, BlendMultiplier, BufferUsage,
                               BufferUsageHint, ClearMask, Comparison, CubeMapSide, CullFace,
                               DataType, DepthTest, DrawMode, FaceWinding, GLEnum, GLFlag,
                               PolygonMode, PrimitiveType, PROTOCOL_ENUMS, ShaderType,
                               StencilOperation, TextureFormat, TextureMagFilter,
                               TextureMinFilter, TextureWrap, WindingOrder, from_code, to_code)
from glbridge.utils.gl.color import Srgba
from glbridge.utils.gl.presentation import (BackgroundMode, BufferType, Cull, FilterMode,
                                            GeometryType, LightType, MaterialShadingModel,
                                            StereoMode, ToneMapping, Transparency, WriteMask,
                                            cull_face_to_cull, cull_to_cull_face)
from glbridge.utils.gl.renderstate import (BlendState, ClearState, DepthState, RasterizerState,
                                           RenderStateDescriptor, ScissorState, StencilState,
                                           Viewport)
from glbridge.utils.matrix import (Matrix2, Matrix3, Matrix4, frustum, ortho, perspective,
                                   rotation_matrix_from_dir_to_dir)
from glbridge.utils.types import (Angle, AxisAlignedBoundingBox, Degrees, Half, Point2, Point3,
                                  Quaternion, Radians, Vector2, Vector3, Vector4, as_radians,
                                  degrees, dot, radians, vec2, vec3, vec4)

__version__ = "0.1.0"

# Short names used by engine-side callers
Vec2 = Vector2
Vec3 = Vector3
Vec4 = Vector4
Mat2 = Matrix2
Mat3 = Matrix3
Mat4 = Matrix4
Quat = Quaternion
Point2D = Point2
Point3D = Point3
NF16 = Half
AABB = AxisAlignedBoundingBox

__all__ = [
    "__version__",
    # configuration and logging
    "BridgeConfig", "ColorPolicy", "configure_logging", "get_config", "get_logger",
    "reset_config", "resolve_config",
    # errors
    "GLBridgeError", "NonFiniteColorError", "ParameterLengthMismatch", "SingularMatrixError",
    "SnapshotDecodeError", "SnapshotEncodeError", "UnknownCodeError",
    # math
    "precision",
    "Point2", "Point3", "Vector2", "Vector3", "Vector4", "vec2", "vec3", "vec4", "dot",
    "Matrix2", "Matrix3", "Matrix4", "perspective", "frustum", "ortho",
    "rotation_matrix_from_dir_to_dir",
    "Quaternion", "Angle", "Degrees", "Radians", "as_radians", "degrees", "radians", "Half",
    "AxisAlignedBoundingBox", "Srgba",
    "Vec2", "Vec3", "Vec4", "Mat2", "Mat3", "Mat4", "Quat", "Point2D", "Point3D", "NF16", "AABB",
    # protocol-level enums
    "GLEnum", "GLFlag", "to_code", "from_code", "PROTOCOL_ENUMS",
    "BlendEquation", "BlendMultiplier", "Comparison", "CullFace", "FaceWinding",
    "StencilOperation", "PolygonMode", "TextureMinFilter", "TextureMagFilter", "TextureWrap",
    "BufferUsage", "DrawMode", "PrimitiveType", "DataType", "ShaderType", "CubeMapSide",
    "TextureFormat", "ClearMask",
    "DepthTest", "BlendFactor", "BufferUsageHint", "WindingOrder",
    # presentation-level enums
    "Cull", "cull_to_cull_face", "cull_face_to_cull", "WriteMask", "BufferType",
    "Transparency", "FilterMode", "ToneMapping", "BackgroundMode", "GeometryType",
    "MaterialShadingModel", "LightType", "StereoMode",
    # render state
    "RenderStateDescriptor", "BlendState", "DepthState", "StencilState", "RasterizerState",
    "ScissorState", "Viewport", "ClearState",
]
