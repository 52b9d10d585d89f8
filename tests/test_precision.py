"""Tests for the double/single precision boundary."""

from __future__ import annotations

import numpy
import pytest

from glbridge.utils import precision
from glbridge.utils.types import Point3, Vector2, Vector3, Vector4


@pytest.mark.parametrize("value", [0.0, 1.0, -3.0, 0.5, 0.25, 1024.0, -0.125])
def test_round_trip_is_exact_for_representable_values(value: float) -> None:
    assert precision.round_trip(value) == value
    assert precision.is_single_exact(value)


@pytest.mark.parametrize("value", [0.1, 1.0 / 3.0, 123.456])
def test_round_trip_stays_within_single_tolerance(value: float) -> None:
    result = precision.round_trip(value)
    assert not precision.is_single_exact(value)
    assert abs(result - value) <= precision.single_tolerance(value)


def test_narrowing_produces_single_precision() -> None:
    assert isinstance(precision.to_single(0.1), numpy.float32)
    assert precision.to_single_array([1.0, 2.0]).dtype == numpy.float32


def test_widening_returns_python_float() -> None:
    widened = precision.to_double(numpy.float32(2.5))
    assert type(widened) is float
    assert widened == 2.5


def test_vector_native_forms_are_single_precision() -> None:
    assert Vector2(1, 2).to_native().dtype == numpy.float32
    assert Vector3(1, 2, 3).to_native().dtype == numpy.float32
    assert Vector4(1, 2, 3, 4).to_native().dtype == numpy.float32
    assert Point3(1, 2, 3).to_native().dtype == numpy.float32


def test_native_round_trip_keeps_representable_components() -> None:
    vector = Vector3(1.5, 2.25, -4.0)
    assert Vector3.from_native(vector.to_native()) == vector


def test_native_round_trip_of_inexact_components_is_close() -> None:
    vector = Vector3(0.1, 0.2, 0.3)
    widened = Vector3.from_native(vector.to_native())
    assert widened != vector
    assert widened.is_close(vector, precision.single_tolerance(1.0))


def test_half_precision_narrowing() -> None:
    assert isinstance(precision.to_half(0.5), numpy.float16)


def test_to_double_tuple_flattens_native_arrays() -> None:
    values = precision.to_double_tuple(numpy.array([[1, 2], [3, 4]], dtype=numpy.float32))
    assert values == (1.0, 2.0, 3.0, 4.0)
    assert all(type(v) is float for v in values)
    assert precision.to_double_tuple([0.5, 0.25]) == (0.5, 0.25)
    assert precision.to_double_tuple(numpy.float32(0.1)) == (float(numpy.float32(0.1)),)
