from math import acos, cos, hypot, pi, sin, tan
import sys
from functools import total_ordering
from typing import Iterable, Iterator, Optional, Tuple, Union

import numpy
from pyrr import Vector3 as _PyrrVector3
from pyrr import Vector4 as _PyrrVector4
from pyrr import Quaternion as _PyrrQuaternion

from glbridge.config import get_config
from glbridge.utils import Numeric, as_float_list, clamp, classproperty, components_close
from glbridge.utils import precision


class _FlatRecord():
    """
    Base for values that cross the host boundary as individually named
    double precision fields
    """
    _fields: Tuple[str, ...] = ()

    @classmethod
    def _make(cls, values: Iterable[float]):
        return cls(*values)

    @classmethod
    def from_components(cls, values: Iterable[Numeric]):
        """
        Build an instance from an ordered sequence of components
        """
        return cls._make(as_float_list(values, len(cls._fields), cls.__name__))

    @property
    def components(self) -> Tuple[float, ...]:
        return tuple(getattr(self, name) for name in self._fields)

    def to_native(self) -> numpy.ndarray:
        """
        Return the single precision form consumed by the engine
        """
        return precision.to_single_array(self.components)

    @classmethod
    def from_native(cls, native):
        """
        Widen a single precision engine value back to the boundary type
        """
        return cls.from_components(precision.to_double_tuple(native))

    def is_close(self, other: "_FlatRecord", tolerance: Optional[float] = None) -> bool:
        if not isinstance(other, type(self)):
            return False
        if tolerance is None:
            tolerance = get_config().tolerance
        return components_close(self.components, other.components, tolerance)

    def __iter__(self) -> Iterator[float]:
        return iter(self.components)

    def __len__(self) -> int:
        return len(self._fields)

    def __getitem__(self, index: int) -> float:
        size = len(self._fields)
        if index not in range(size):
            raise IndexError(
                f"Index into {self.__class__.__name__} is out of range ([0-{size - 1}])")
        return getattr(self, self._fields[index])

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.components == other.components

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={getattr(self, name)!r}" for name in self._fields)
        return f"{self.__class__.__name__}({fields})"


# -- Points -- #

class Point2(_FlatRecord):
    """
    A position in 2D space. Points carry no magnitude; subtracting two
    points yields the Vector2 between them
    """
    _fields = ("x", "y")

    def __init__(self, x: float = 0, y: float = 0):
        self.x = float(x)
        self.y = float(y)

    @classproperty
    def origin(cls) -> "Point2":
        return cls(0, 0)

    def to_vector(self) -> "Vector2":
        return Vector2(self.x, self.y)

    def __add__(self, other: "Vector2") -> "Point2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return Point2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Union["Point2", "Vector2"]) -> Union["Vector2", "Point2"]:
        if isinstance(other, Point2):
            return Vector2(self.x - other.x, self.y - other.y)
        if isinstance(other, Vector2):
            return Point2(self.x - other.x, self.y - other.y)
        return NotImplemented


class Point3(_FlatRecord):
    """
    A position in 3D space. Points carry no magnitude; subtracting two
    points yields the Vector3 between them
    """
    _fields = ("x", "y", "z")

    def __init__(self, x: float = 0, y: float = 0, z: float = 0):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    @classproperty
    def origin(cls) -> "Point3":
        return cls(0, 0, 0)

    def to_vector(self) -> "Vector3":
        return Vector3(self.x, self.y, self.z)

    def __add__(self, other: "Vector3") -> "Point3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return Point3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Union["Point3", "Vector3"]) -> Union["Vector3", "Point3"]:
        if isinstance(other, Point3):
            return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, Vector3):
            return Point3(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented


# -- Vectors -- #

class _Vector(_FlatRecord):
    """
    Algebra shared by Vector2, Vector3 and Vector4. Every operation
    returns a new vector
    """

    def _check(self, other: object, operation: str):
        if not isinstance(other, type(self)):
            raise TypeError(
                f"Can't {operation} {type(other).__name__} with {type(self).__name__}")

    def length_squared(self) -> float:
        return sum(c*c for c in self.components)

    def length(self) -> float:
        """
        Returns the euclidean length, computed without intermediate overflow or underflow
        """
        return hypot(*self.components)

    def normalize(self):
        """
        Returns this vector scaled to a length of 1

        A vector of length exactly 0 normalizes to the zero vector instead
        of dividing by zero
        """
        length = self.length()
        if length == 0.0:
            return self._make(0.0 for _ in self._fields)
        return self._make(c / length for c in self.components)

    def dot(self, other) -> float:
        """
        Returns the dot product of this vector and `other`
        """
        self._check(other, "dot")
        return sum(a*b for a, b in zip(self.components, other.components))

    def lerp(self, other, t: float):
        """
        Interpolates from this vector to `other` by `t`

        `t` is not clamped, values outside [0, 1] extrapolate. Computed as
        `a*(1 - t) + b*t`, which keeps both endpoints exact but may differ from
        `a + (b - a)*t` in the last bit for interior `t`
        """
        self._check(other, "lerp")
        t = float(t)
        return self._make(
            a*(1.0 - t) + b*t for a, b in zip(self.components, other.components)
        )

    def add(self, other):
        self._check(other, "add")
        return self._make(a + b for a, b in zip(self.components, other.components))

    def sub(self, other):
        self._check(other, "subtract")
        return self._make(a - b for a, b in zip(self.components, other.components))

    def scale(self, scale):
        """
        Scales the components of this vector by `scale`

        If `scale` is a number, scale all components uniformly with `scale`\n
        If `scale` is a vector, scale the corresponding components against `scale`
        """
        if isinstance(scale, _Vector):
            self._check(scale, "scale")
            return self._make(a * b for a, b in zip(self.components, scale.components))
        scale = float(scale)
        return self._make(c * scale for c in self.components)

    def divide(self, divisor):
        if isinstance(divisor, _Vector):
            self._check(divisor, "divide")
            return self._make(a / b for a, b in zip(self.components, divisor.components))
        divisor = float(divisor)
        return self._make(c / divisor for c in self.components)

    def negate(self):
        return self._make(-c for c in self.components)

    def distance_to(self, other) -> float:
        """
        Returns the distance between this vector and `other`
        """
        return self.sub(other).length()

    def min(self, other):
        """
        Returns a vector made from the smallest components of this vector and `other`
        """
        self._check(other, "min")
        return self._make(min(a, b) for a, b in zip(self.components, other.components))

    def max(self, other):
        """
        Returns a vector made from the largest components of this vector and `other`
        """
        self._check(other, "max")
        return self._make(max(a, b) for a, b in zip(self.components, other.components))

    def __add__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other):
        if isinstance(other, (int, float)) or isinstance(other, type(self)):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, (int, float)):
            return self.scale(other)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, (int, float)) or isinstance(other, type(self)):
            return self.divide(other)
        return NotImplemented

    def __neg__(self):
        return self.negate()


class Vector2(_Vector):
    """
    Class representing a Vector of 2 doubles useful for geometric math
    """
    _fields = ("x", "y")

    def __init__(self, x: float = 0, y: float = 0):
        self.x = float(x)
        self.y = float(y)

    @classproperty
    def zero(cls) -> "Vector2":
        return cls(0, 0)

    @classproperty
    def one(cls) -> "Vector2":
        return cls(1, 1)

    @classproperty
    def unit_x(cls) -> "Vector2":
        return cls(1, 0)

    @classproperty
    def unit_y(cls) -> "Vector2":
        return cls(0, 1)

    def perpendicular(self) -> "Vector2":
        """
        Returns this vector rotated a quarter turn counter-clockwise
        """
        return Vector2(-self.y, self.x)

    def extend(self, z: float) -> "Vector3":
        return Vector3(self.x, self.y, z)

    def to_point(self) -> Point2:
        return Point2(self.x, self.y)


class Vector3(_Vector):
    """
    Class representing a Vector of 3 doubles useful for geometric math
    """
    _fields = ("x", "y", "z")

    def __init__(self, x: float = 0, y: float = 0, z: float = 0):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    @classproperty
    def zero(cls) -> "Vector3":
        return cls(0, 0, 0)

    @classproperty
    def one(cls) -> "Vector3":
        return cls(1, 1, 1)

    @classproperty
    def unit_x(cls) -> "Vector3":
        return cls(1, 0, 0)

    @classproperty
    def unit_y(cls) -> "Vector3":
        return cls(0, 1, 0)

    @classproperty
    def unit_z(cls) -> "Vector3":
        return cls(0, 0, 1)

    def cross(self, other: "Vector3") -> "Vector3":
        """
        Returns the right-handed cross product of this Vector3 and `other`
        """
        self._check(other, "cross")
        return Vector3(
            self.y*other.z - self.z*other.y,
            self.z*other.x - self.x*other.z,
            self.x*other.y - self.y*other.x
        )

    def angle(self, to: "Vector3") -> "Radians":
        """
        Returns the unsigned angle between this Vector3 and `to`
        """
        denominator = self.length() * to.length()
        if denominator == 0.0:
            return Radians(0.0)
        cosine = clamp(self.dot(to) / denominator, -1.0, 1.0)
        return Radians(acos(cosine))

    def reflect(self, normal: "Vector3") -> "Vector3":
        """
        Reflects this Vector3 off the plane defined by `normal`
        """
        factor = -2.0 * normal.dot(self)
        return Vector3(
            factor*normal.x + self.x,
            factor*normal.y + self.y,
            factor*normal.z + self.z
        )

    def project(self, onto: "Vector3") -> "Vector3":
        """
        Returns this Vector3 projected onto `onto`
        """
        sqrMag = onto.length_squared()
        if sqrMag < sys.float_info.epsilon:
            return Vector3.zero
        return onto.scale(self.dot(onto) / sqrMag)

    def extend(self, w: float) -> "Vector4":
        return Vector4(self.x, self.y, self.z, w)

    def to_point(self) -> Point3:
        return Point3(self.x, self.y, self.z)

    def to_native(self) -> _PyrrVector3:
        return _PyrrVector3(precision.to_single_array(self.components), dtype=precision.SINGLE)


class Vector4(_Vector):
    """
    Class representing a Vector of 4 doubles useful for geometric math
    """
    _fields = ("x", "y", "z", "w")

    def __init__(self, x: float = 0, y: float = 0, z: float = 0, w: float = 0):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)
        self.w = float(w)

    @classproperty
    def zero(cls) -> "Vector4":
        return cls(0, 0, 0, 0)

    @classproperty
    def one(cls) -> "Vector4":
        return cls(1, 1, 1, 1)

    @classproperty
    def unit_x(cls) -> "Vector4":
        return cls(1, 0, 0, 0)

    @classproperty
    def unit_y(cls) -> "Vector4":
        return cls(0, 1, 0, 0)

    @classproperty
    def unit_z(cls) -> "Vector4":
        return cls(0, 0, 1, 0)

    @classproperty
    def unit_w(cls) -> "Vector4":
        return cls(0, 0, 0, 1)

    def truncate(self) -> Vector3:
        """
        Drops the w component
        """
        return Vector3(self.x, self.y, self.z)

    def to_native(self) -> _PyrrVector4:
        return _PyrrVector4(precision.to_single_array(self.components), dtype=precision.SINGLE)


def vec2(x: float, y: float) -> Vector2:
    return Vector2(x, y)


def vec3(x: float, y: float, z: float) -> Vector3:
    return Vector3(x, y, z)


def vec4(x: float, y: float, z: float, w: float) -> Vector4:
    return Vector4(x, y, z, w)


def dot(a: _Vector, b: _Vector) -> float:
    return a.dot(b)


# -- Angles -- #

@total_ordering
class _Angle():
    """
    A scalar tagged with its unit. Arithmetic and comparison only work
    between angles of the same unit; converting is always explicit
    """
    symbol = ""

    def __init__(self, value: float = 0):
        self.value = float(value)

    def _same_unit(self, other: object, operation: str):
        if not isinstance(other, type(self)):
            raise TypeError(
                f"Can't {operation} {type(other).__name__} and {type(self).__name__}, convert explicitly")

    def to_native(self) -> numpy.float32:
        return precision.to_single(self.value)

    def __add__(self, other):
        self._same_unit(other, "add")
        return type(self)(self.value + other.value)

    def __sub__(self, other):
        self._same_unit(other, "subtract")
        return type(self)(self.value - other.value)

    def __mul__(self, other: Numeric):
        if not isinstance(other, (int, float)):
            return NotImplemented
        return type(self)(self.value * other)

    __rmul__ = __mul__

    def __truediv__(self, other):
        if isinstance(other, _Angle):
            self._same_unit(other, "divide")
            return self.value / other.value
        if not isinstance(other, (int, float)):
            return NotImplemented
        return type(self)(self.value / other)

    def __neg__(self):
        return type(self)(-self.value)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value == other.value

    def __lt__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value < other.value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.value))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.value!r})"

    def __str__(self) -> str:
        return f"{self.value}{self.symbol}"


class Degrees(_Angle):
    symbol = "°"

    @classproperty
    def full_turn(cls) -> "Degrees":
        return cls(360)

    def to_radians(self) -> "Radians":
        return Radians(self.value * pi / 180.0)

    def normalized(self) -> "Degrees":
        """
        Returns this angle wrapped into [0, 360)
        """
        return Degrees(self.value - 360.0 * (self.value // 360.0))


class Radians(_Angle):
    symbol = " rad"

    @classproperty
    def full_turn(cls) -> "Radians":
        return cls(2.0 * pi)

    def to_degrees(self) -> Degrees:
        return Degrees(self.value * 180.0 / pi)

    def normalized(self) -> "Radians":
        """
        Returns this angle wrapped into [0, 2pi)
        """
        turn = 2.0 * pi
        return Radians(self.value - turn * (self.value // turn))

    def sin(self) -> float:
        return sin(self.value)

    def cos(self) -> float:
        return cos(self.value)

    def tan(self) -> float:
        return tan(self.value)


Angle = Union[Degrees, Radians]


def as_radians(angle: Angle) -> Radians:
    """
    Accepts either unit and returns Radians. Bare numbers are rejected
    """
    if isinstance(angle, Radians):
        return angle
    if isinstance(angle, Degrees):
        return angle.to_radians()
    raise TypeError(
        f"Expected Degrees or Radians, got {type(angle).__name__}")


def radians(angle: Degrees) -> Radians:
    if not isinstance(angle, Degrees):
        raise TypeError(f"Expected Degrees, got {type(angle).__name__}")
    return angle.to_radians()


def degrees(angle: Radians) -> Degrees:
    if not isinstance(angle, Radians):
        raise TypeError(f"Expected Radians, got {type(angle).__name__}")
    return angle.to_degrees()


class Half():
    """
    A half precision scalar carried as a double at the boundary
    """

    def __init__(self, value: float = 0):
        self.value = float(value)

    def to_native(self) -> numpy.float16:
        return precision.to_half(self.value)

    @classmethod
    def from_native(cls, native) -> "Half":
        return cls(float(native))

    def quantized(self) -> "Half":
        """
        Returns the value the engine will actually see
        """
        return Half(float(self.to_native()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Half):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(("Half", self.value))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.value!r})"


# -- Rotation -- #

class Quaternion(_FlatRecord):
    """
    Class representing a quaternion rotation

    Components are stored exactly as given; nothing here forces the
    quaternion to unit length. Use `is_unit` to check and `normalize`
    to obtain a unit copy
    """
    _fields = ("x", "y", "z", "w")

    def __init__(self, x: float = 0, y: float = 0, z: float = 0, w: float = 1):
        self.w = float(w)
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    @classmethod
    def identity(cls) -> "Quaternion":
        return cls(0, 0, 0, 1)

    @classmethod
    def from_axis_angle(cls, axis: Vector3, angle: Angle) -> "Quaternion":
        """
        Creates a rotation of `angle` around `axis`
        """
        if axis.length_squared() == 0.0:
            return cls.identity()
        half = as_radians(angle).value * 0.5
        axis = axis.normalize().scale(sin(half))
        return cls(axis.x, axis.y, axis.z, cos(half))

    @classmethod
    def from_to_rotation(cls, _from: Vector3, _to: Vector3) -> "Quaternion":
        """
        Creates the shortest rotation taking `_from` onto `_to`
        """
        axis = _from.cross(_to)
        angle = _from.angle(_to)
        if angle.to_degrees().value >= 179.9196:
            rcross = _from.cross(Vector3.unit_x)
            axis = rcross.cross(_from)
            if axis.length_squared() < 1e-6:
                axis = Vector3.unit_y
        return cls.from_axis_angle(axis, angle)

    @property
    def xyz(self) -> Vector3:
        return Vector3(self.x, self.y, self.z)

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return hypot(*self.components)

    def is_unit(self, tolerance: Optional[float] = None) -> bool:
        if tolerance is None:
            tolerance = get_config().tolerance
        return abs(self.length() - 1.0) <= tolerance

    def normalize(self) -> "Quaternion":
        """
        Returns a unit length copy. The zero quaternion stays zero
        """
        length = self.length()
        if length == 0.0:
            return Quaternion(0, 0, 0, 0)
        return Quaternion(self.x / length, self.y / length, self.z / length, self.w / length)

    def conjugate(self) -> "Quaternion":
        return Quaternion(-self.x, -self.y, -self.z, self.w)

    def inverse(self) -> "Quaternion":
        """
        Returns the multiplicative inverse. The zero quaternion stays zero
        """
        sqrLen = self.length_squared()
        if sqrLen == 0.0:
            return Quaternion(0, 0, 0, 0)
        i = 1.0 / sqrLen
        return Quaternion(-self.x * i, -self.y * i, -self.z * i, self.w * i)

    def dot(self, other: "Quaternion") -> float:
        """
        Returns the dot product of this Quaternion and `other`
        """
        if not isinstance(other, Quaternion):
            raise TypeError(
                f"Can't dot {type(other).__name__} with Quaternion")
        return self.x*other.x + self.y*other.y + self.z*other.z + self.w*other.w

    def mul(self, other: "Quaternion") -> "Quaternion":
        """
        Returns the Hamilton product, the rotation `other` followed by this one
        """
        if not isinstance(other, Quaternion):
            raise TypeError(
                f"Can't combine Quaternion with {type(other).__name__}")
        return Quaternion(
            self.w*other.x + self.x*other.w + self.y*other.z - self.z*other.y,
            self.w*other.y + self.y*other.w + self.z*other.x - self.x*other.z,
            self.w*other.z + self.z*other.w + self.x*other.y - self.y*other.x,
            self.w*other.w - self.x*other.x - self.y*other.y - self.z*other.z
        )

    def rotate(self, vector: Vector3) -> Vector3:
        """
        Rotates `vector` by this Quaternion
        """
        x = self.x * 2
        y = self.y * 2
        z = self.z * 2
        xx = self.x * x
        yy = self.y * y
        zz = self.z * z
        xy = self.x * y
        xz = self.x * z
        yz = self.y * z
        wx = self.w * x
        wy = self.w * y
        wz = self.w * z
        return Vector3(
            (1 - (yy + zz))*vector.x + (xy - wz)*vector.y + (xz + wy)*vector.z,
            (xy + wz)*vector.x + (1 - (xx + zz))*vector.y + (yz - wx)*vector.z,
            (xz - wy)*vector.x + (yz + wx)*vector.y + (1 - (xx + yy))*vector.z
        )

    def slerp(self, other: "Quaternion", t: float) -> "Quaternion":
        """
        Spherical interpolation from this Quaternion to `other`
        """
        cosHalfAngle = self.dot(other)
        if cosHalfAngle < 0.0:
            other = Quaternion(-other.x, -other.y, -other.z, -other.w)
            cosHalfAngle = -cosHalfAngle

        if cosHalfAngle > 0.9995:
            blendA = 1.0 - t
            blendB = t
        else:
            halfAngle = acos(cosHalfAngle)
            sinHalfAngle = sin(halfAngle)
            blendA = sin(halfAngle*(1.0 - t)) / sinHalfAngle
            blendB = sin(halfAngle*t) / sinHalfAngle

        return Quaternion(
            self.x*blendA + other.x*blendB,
            self.y*blendA + other.y*blendB,
            self.z*blendA + other.z*blendB,
            self.w*blendA + other.w*blendB
        ).normalize()

    def to_native(self) -> _PyrrQuaternion:
        return _PyrrQuaternion(precision.to_single_array(self.components), dtype=precision.SINGLE)

    def __mul__(self, other: Union["Quaternion", Vector3]) -> Union["Quaternion", Vector3]:
        if isinstance(other, Quaternion):
            return self.mul(other)
        if isinstance(other, Vector3):
            return self.rotate(other)
        return NotImplemented


# -- Bounds -- #

class AxisAlignedBoundingBox(_FlatRecord):
    """
    An axis aligned box given by its minimum and maximum corners
    """
    _fields = ("min_x", "min_y", "min_z", "max_x", "max_y", "max_z")

    def __init__(
        self,
        min_x: float = 0,
        min_y: float = 0,
        min_z: float = 0,
        max_x: float = 0,
        max_y: float = 0,
        max_z: float = 0
    ):
        self.min_x = float(min_x)
        self.min_y = float(min_y)
        self.min_z = float(min_z)
        self.max_x = float(max_x)
        self.max_y = float(max_y)
        self.max_z = float(max_z)

    @classmethod
    def from_points(cls, points: Iterable[Point3]) -> "AxisAlignedBoundingBox":
        points = list(points)
        if not points:
            raise ValueError("Can't bound an empty set of points")
        return cls(
            min(p.x for p in points),
            min(p.y for p in points),
            min(p.z for p in points),
            max(p.x for p in points),
            max(p.y for p in points),
            max(p.z for p in points)
        )

    @property
    def minimum(self) -> Point3:
        return Point3(self.min_x, self.min_y, self.min_z)

    @property
    def maximum(self) -> Point3:
        return Point3(self.max_x, self.max_y, self.max_z)

    def contains(self, x: float, y: float, z: float) -> bool:
        return (
            self.min_x <= x <= self.max_x and
            self.min_y <= y <= self.max_y and
            self.min_z <= z <= self.max_z
        )

    def center(self) -> Point3:
        return Point3(
            (self.min_x + self.max_x) * 0.5,
            (self.min_y + self.max_y) * 0.5,
            (self.min_z + self.max_z) * 0.5
        )

    def size(self) -> Vector3:
        return self.maximum - self.minimum

    def merge(self, other: "AxisAlignedBoundingBox") -> "AxisAlignedBoundingBox":
        """
        Returns the smallest box enclosing both this box and `other`
        """
        return AxisAlignedBoundingBox(
            min(self.min_x, other.min_x),
            min(self.min_y, other.min_y),
            min(self.min_z, other.min_z),
            max(self.max_x, other.max_x),
            max(self.max_y, other.max_y),
            max(self.max_z, other.max_z)
        )
