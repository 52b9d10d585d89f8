"""
Conversion between the double precision host boundary and the single
precision values the native engine consumes.

Narrowing is a plain IEEE cast with round-to-nearest, no custom policy.
Widening never fails. A double -> single -> double round trip is exact
only for values single precision can represent (integers within range,
halves, quarters, ...); anything else comes back within one unit in the
last place of single precision.
"""

from typing import Iterable, Tuple

import numpy

SINGLE = numpy.float32
HALF = numpy.float16

SINGLE_EPSILON: float = float(numpy.finfo(numpy.float32).eps)


def to_single(value: float) -> numpy.float32:
    return numpy.float32(value)


def to_double(value) -> float:
    return float(value)


def round_trip(value: float) -> float:
    """
    Return `value` after narrowing to single precision and widening back
    """
    return float(numpy.float32(value))


def single_tolerance(value: float) -> float:
    """
    The largest error a round trip of `value` may introduce
    """
    return SINGLE_EPSILON * max(abs(float(value)), 1.0)


def is_single_exact(value: float) -> bool:
    return round_trip(value) == float(value)


def to_single_array(values: Iterable[float]) -> numpy.ndarray:
    return numpy.array(list(values), dtype=numpy.float32)


def to_double_tuple(values: Iterable) -> Tuple[float, ...]:
    return tuple(float(v) for v in numpy.asarray(values).reshape(-1))


def to_half(value: float) -> numpy.float16:
    return numpy.float16(value)
