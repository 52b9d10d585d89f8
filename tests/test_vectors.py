"""Tests for points and vectors."""

from __future__ import annotations

from math import pi

import pytest

from glbridge import ParameterLengthMismatch
from glbridge.utils.types import Point2, Point3, Radians, Vector2, Vector3, Vector4, dot, vec3


def test_length_is_euclidean() -> None:
    assert Vector2(3, 4).length() == pytest.approx(5.0)
    assert Vector3(1, 2, 2).length() == pytest.approx(3.0)
    assert Vector4(1, 1, 1, 1).length_squared() == 4.0


def test_normalize_of_zero_vector_is_zero() -> None:
    assert Vector3.zero.normalize() == Vector3.zero
    assert Vector2(0, 0).normalize() == Vector2(0, 0)


def test_normalize_produces_unit_length() -> None:
    assert Vector3(3, 0, 0).normalize() == Vector3.unit_x
    assert Vector2(3, 4).normalize().length() == pytest.approx(1.0)


def test_cross_is_right_handed() -> None:
    assert Vector3.unit_x.cross(Vector3.unit_y) == Vector3.unit_z
    assert Vector3.unit_y.cross(Vector3.unit_x) == -Vector3.unit_z


def test_dot_product() -> None:
    assert vec3(1, 2, 3).dot(vec3(4, 5, 6)) == 32.0
    assert dot(Vector2(1, 0), Vector2(0, 1)) == 0.0


def test_dot_rejects_mismatched_dimensions() -> None:
    with pytest.raises(TypeError):
        Vector3(1, 2, 3).dot(Vector2(1, 2))


def test_lerp_midpoint() -> None:
    result = Vector3(1, 0, 0).lerp(Vector3(10, 0, 0), 0.5)
    assert result.x == 5.5


def test_lerp_endpoints_are_exact() -> None:
    a = Vector3(0.1, 0.2, 0.3)
    b = Vector3(7.7, -1.3, 2.9)
    assert a.lerp(b, 0.0) == a
    assert a.lerp(b, 1.0) == b


def test_lerp_extrapolates_outside_unit_interval() -> None:
    assert Vector2(0, 0).lerp(Vector2(10, 0), 2.0) == Vector2(20, 0)
    assert Vector2(0, 0).lerp(Vector2(10, 0), -1.0) == Vector2(-10, 0)


def test_distance_to() -> None:
    assert Vector3(1, 1, 1).distance_to(Vector3(1, 4, 5)) == pytest.approx(5.0)


def test_operators_return_new_vectors() -> None:
    a = Vector2(1, 2)
    b = Vector2(3, 4)
    assert a + b == Vector2(4, 6)
    assert b - a == Vector2(2, 2)
    assert a * 2 == Vector2(2, 4)
    assert 2 * a == Vector2(2, 4)
    assert a * b == Vector2(3, 8)
    assert b / 2 == Vector2(1.5, 2)
    assert a == Vector2(1, 2)


def test_divide_by_zero_raises() -> None:
    with pytest.raises(ZeroDivisionError):
        Vector2(1, 1) / 0


def test_componentwise_min_max() -> None:
    a = Vector3(1, 5, 3)
    b = Vector3(4, 2, 6)
    assert a.min(b) == Vector3(1, 2, 3)
    assert a.max(b) == Vector3(4, 5, 6)


def test_angle_between_vectors() -> None:
    angle = Vector3.unit_x.angle(Vector3.unit_y)
    assert isinstance(angle, Radians)
    assert angle.value == pytest.approx(pi / 2)
    assert Vector3.zero.angle(Vector3.unit_x) == Radians(0)


def test_reflect_and_project() -> None:
    assert Vector3(1, -1, 0).reflect(Vector3.unit_y) == Vector3(1, 1, 0)
    assert Vector3(2, 3, 0).project(Vector3.unit_x) == Vector3(2, 0, 0)
    assert Vector3(2, 3, 0).project(Vector3.zero) == Vector3.zero


def test_extend_and_truncate() -> None:
    assert Vector2(1, 2).extend(3) == Vector3(1, 2, 3)
    assert Vector3(1, 2, 3).extend(1) == Vector4(1, 2, 3, 1)
    assert Vector4(1, 2, 3, 4).truncate() == Vector3(1, 2, 3)


def test_indexing_and_iteration() -> None:
    v = Vector4(1, 2, 3, 4)
    assert v[3] == 4.0
    assert list(v) == [1.0, 2.0, 3.0, 4.0]
    assert len(v) == 4
    with pytest.raises(IndexError):
        v[4]


def test_from_components_checks_length() -> None:
    assert Vector3.from_components([1, 2, 3]) == Vector3(1, 2, 3)
    with pytest.raises(ParameterLengthMismatch) as excinfo:
        Vector3.from_components([1, 2])
    assert excinfo.value.expected == 3
    assert excinfo.value.actual == 2


def test_fields_are_doubles() -> None:
    v = Vector3(1, 2, 3)
    assert all(type(c) is float for c in v.components)


def test_vectors_and_points_are_distinct() -> None:
    assert Vector2(1, 2) != Point2(1, 2)
    assert Vector3(1, 2, 3) != Vector2(1, 2)


def test_point_affine_arithmetic() -> None:
    a = Point3(1, 2, 3)
    b = Point3(0, 0, 1)
    assert a - b == Vector3(1, 2, 2)
    assert b + Vector3(1, 2, 2) == a
    assert a - Vector3(1, 2, 3) == Point3.origin
    assert Point2(5, 5) - Point2(2, 1) == Vector2(3, 4)


def test_points_cannot_be_added() -> None:
    with pytest.raises(TypeError):
        Point3(1, 2, 3) + Point3(1, 2, 3)


def test_point_vector_conversion_is_explicit() -> None:
    assert Point3(1, 2, 3).to_vector() == Vector3(1, 2, 3)
    assert Vector2(1, 2).to_point() == Point2(1, 2)


def test_is_close_uses_tolerance() -> None:
    assert Vector2(0, 0).is_close(Vector2(1e-9, 0))
    assert not Vector2(0, 0).is_close(Vector2(1e-3, 0))
    assert Vector2(0, 0).is_close(Vector2(1e-3, 0), tolerance=1e-2)


@pytest.mark.parametrize("vector", [
    Vector3(1e-200, 0, 0),
    Vector3(3e-200, 4e-200, 0),
    Vector3(1e200, 1e200, 0),
    Vector4(1e200, -1e200, 1e200, 1e200),
    Vector2(1e-310, 0),
])
def test_normalize_extreme_magnitudes(vector) -> None:
    assert vector.length() > 0.0
    assert vector.length() != float("inf")
    assert abs(vector.normalize().length() - 1.0) < 1e-12


def test_lerp_interior_matches_reference_formula_closely() -> None:
    a = Vector3(0.1, 0.2, 0.3)
    b = Vector3(7.7, -1.3, 2.9)
    for t in (0.25, 0.5, 0.75, 0.1):
        reference = a.add(b.sub(a).scale(t))
        assert a.lerp(b, t).is_close(reference, 1e-12)


def test_perpendicular_is_quarter_turn() -> None:
    assert Vector2(1, 0).perpendicular() == Vector2(0, 1)
    assert Vector2(2, 3).perpendicular() == Vector2(-3, 2)
    assert Vector2(2, 3).perpendicular().dot(Vector2(2, 3)) == 0.0
