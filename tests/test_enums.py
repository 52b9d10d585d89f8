"""Tests for the protocol-level and presentation-level enumerations."""

from __future__ import annotations

import numpy
import pytest

from glbridge import UnknownCodeError
from glbridge.utils.gl import (PROTOCOL_ENUMS, BlendEquation, BlendFactor, BlendMultiplier,
                               BufferUsage, ClearMask, Comparison, CubeMapSide, CullFace,
                               DataType, DepthTest, DrawMode, FaceWinding, PolygonMode,
                               PrimitiveType, ShaderType, StencilOperation, TextureFormat,
                               TextureMagFilter, TextureMinFilter, TextureWrap, from_code, to_code)
from glbridge.utils.gl.presentation import Cull, WriteMask, cull_face_to_cull, cull_to_cull_face


@pytest.mark.parametrize("member, code", [
    (BlendEquation.ADD, 0x8006),
    (BlendEquation.REVERSE_SUBTRACT, 0x800B),
    (BlendMultiplier.ZERO, 0x0000),
    (BlendMultiplier.ONE, 0x0001),
    (BlendMultiplier.SRC_ALPHA, 0x0302),
    (BlendMultiplier.ONE_MINUS_SRC_ALPHA, 0x0303),
    (Comparison.NEVER, 0x0200),
    (Comparison.LESS, 0x0201),
    (Comparison.LESS_OR_EQUAL, 0x0203),
    (Comparison.ALWAYS, 0x0207),
    (CullFace.NONE, 0),
    (CullFace.BACK, 0x0405),
    (CullFace.FRONT_AND_BACK, 0x0408),
    (FaceWinding.COUNTER_CLOCKWISE, 0x0901),
    (FaceWinding.CLOCKWISE, 0x0900),
    (StencilOperation.KEEP, 0x1E00),
    (StencilOperation.INCREMENT_WRAP, 0x8507),
    (StencilOperation.INVERT, 0x150A),
    (PolygonMode.POINT, 0x1B00),
    (PolygonMode.LINE, 0x1B01),
    (PolygonMode.FILL, 0x1B02),
    (TextureMinFilter.LINEAR_MIPMAP_LINEAR, 0x2703),
    (TextureMagFilter.NEAREST, 0x2600),
    (TextureWrap.CLAMP_TO_EDGE, 0x812F),
    (BufferUsage.STATIC_DRAW, 0x88E4),
    (PrimitiveType.TRIANGLES, 0x0004),
    (DataType.FLOAT, 0x1406),
    (ShaderType.VERTEX, 0x8B31),
    (ShaderType.FRAGMENT, 0x8B30),
    (CubeMapSide.NEGATIVE_Z, 0x851A),
    (TextureFormat.DEPTH24_STENCIL8, 0x88F0),
])
def test_codes_match_native_constants(member, code: int) -> None:
    assert member.to_code() == code
    assert to_code(member) == code
    assert type(member).from_code(code) is member
    assert from_code(type(member), code) is member


@pytest.mark.parametrize("enum", PROTOCOL_ENUMS, ids=lambda e: e.__name__)
def test_every_member_round_trips_through_its_code(enum) -> None:
    for member in enum:
        assert enum.from_code(member.to_code()) is member


def test_unknown_code_is_rejected() -> None:
    with pytest.raises(UnknownCodeError) as excinfo:
        Comparison.from_code(0x9999)
    assert excinfo.value.code == 0x9999
    assert excinfo.value.enum == "Comparison"
    with pytest.raises(ValueError):
        CullFace.from_code(1)


def test_gl_spellings_are_aliases() -> None:
    assert Comparison.LEQUAL is Comparison.LESS_OR_EQUAL
    assert Comparison.GEQUAL is Comparison.GREATER_OR_EQUAL
    assert FaceWinding.CCW is FaceWinding.COUNTER_CLOCKWISE


def test_compatibility_names() -> None:
    assert DepthTest is Comparison
    assert BlendFactor is BlendMultiplier


def test_data_type_sizes() -> None:
    assert DataType.FLOAT.byte_size == 4
    assert DataType.HALF_FLOAT.byte_size == 2
    assert DataType.DOUBLE.byte_size == 8
    assert DataType.UNSIGNED_BYTE.byte_size == 1


def test_draw_mode_maps_to_buffer_usage() -> None:
    assert DrawMode.STATIC.to_buffer_usage() is BufferUsage.STATIC_DRAW
    assert DrawMode.STREAM.to_buffer_usage() is BufferUsage.STREAM_DRAW


def test_clear_mask_combines_bits() -> None:
    mask = ClearMask.COLOR | ClearMask.DEPTH
    assert mask.to_code() == 0x4100
    assert ClearMask.from_code(0x4500) == ClearMask.COLOR | ClearMask.DEPTH | ClearMask.STENCIL
    assert ClearMask.from_code(0) == ClearMask(0)
    with pytest.raises(UnknownCodeError):
        ClearMask.from_code(0x0001)


def test_presentation_cull_is_not_a_protocol_value() -> None:
    assert not isinstance(Cull.BACK, int)
    assert Cull.BACK != CullFace.BACK
    with pytest.raises(TypeError):
        to_code(Cull.BACK)


def test_cull_maps_to_cull_face_explicitly() -> None:
    assert cull_to_cull_face(Cull.BACK) is CullFace.BACK
    assert cull_to_cull_face(Cull.NONE) is CullFace.NONE
    for mode in Cull:
        assert cull_face_to_cull(cull_to_cull_face(mode)) is mode


def test_write_mask_flags() -> None:
    assert WriteMask.COLOR | WriteMask.DEPTH | WriteMask.STENCIL == WriteMask.ALL
    assert WriteMask.DEPTH in WriteMask.ALL
    assert WriteMask.STENCIL not in WriteMask.COLOR | WriteMask.DEPTH


@pytest.mark.parametrize("code", [None, 515.0, 515.9, "515", b"\x02\x03", True, False])
def test_non_integer_codes_are_rejected(code) -> None:
    with pytest.raises(UnknownCodeError) as excinfo:
        Comparison.from_code(code)
    assert excinfo.value.code is code
    assert "Comparison" in str(excinfo.value)
    with pytest.raises(UnknownCodeError):
        ClearMask.from_code(code)


def test_integral_codes_of_other_types_are_accepted() -> None:
    assert Comparison.from_code(numpy.uint32(0x0203)) is Comparison.LESS_OR_EQUAL
    assert ClearMask.from_code(numpy.int64(0x4000)) == ClearMask.COLOR
