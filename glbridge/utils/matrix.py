"""
Square matrices stored as a flat column-major list of doubles.

Column ``i`` of an N x N matrix occupies ``data[i*N:i*N + N]``. The native
form is the GL-ready pyrr layout, where native row ``i`` holds logical
column ``i``, so flattening a native matrix reproduces ``data``.
"""

from typing import Iterable, List, Optional, Union

import numpy
from pyrr import Matrix33, Matrix44, matrix44

from glbridge.config import get_config
from glbridge.errors import SingularMatrixError
from glbridge.log import get_logger
from glbridge.utils import Numeric, as_float_list, components_close
from glbridge.utils import precision
from glbridge.utils.types import Angle, Quaternion, Vector2, Vector3, Vector4, Point3, as_radians

_LOG = get_logger("matrix")


class _Matrix():
    _size = 0
    _vector = Vector2

    def __init__(self, data: Optional[Iterable[Numeric]] = None):
        count = self._size * self._size
        if data is None:
            self._data = [0.0] * count
        else:
            self._data = as_float_list(data, count, self.__class__.__name__)

    @classmethod
    def identity(cls):
        """
        Returns the identity matrix, independent of any existing instance
        """
        return cls(numpy.identity(cls._size).reshape(-1))

    @classmethod
    def zero(cls):
        return cls()

    @classmethod
    def _from_array(cls, array: numpy.ndarray):
        # `array` is indexed [row, column]
        return cls(numpy.asarray(array, dtype=float).T.reshape(-1))

    @classmethod
    def from_columns(cls, *columns):
        if len(columns) != cls._size:
            raise ValueError(
                f"{cls.__name__} needs {cls._size} columns, got {len(columns)}")
        data: List[float] = []
        for column in columns:
            data.extend(column)
        return cls(data)

    @property
    def data(self) -> List[float]:
        """
        A copy of the column-major components
        """
        return list(self._data)

    @property
    def size(self) -> int:
        return self._size

    def _as_array(self) -> numpy.ndarray:
        return numpy.array(self._data, dtype=float).reshape(self._size, self._size).T

    def _check(self, other: object, operation: str):
        if not isinstance(other, type(self)):
            raise TypeError(
                f"Can't {operation} {type(other).__name__} with {type(self).__name__}")

    def column(self, index: int):
        if index not in range(self._size):
            raise IndexError(
                f"Column of {self.__class__.__name__} is out of range ([0-{self._size - 1}])")
        start = index * self._size
        return self._vector(*self._data[start:start + self._size])

    def row(self, index: int):
        if index not in range(self._size):
            raise IndexError(
                f"Row of {self.__class__.__name__} is out of range ([0-{self._size - 1}])")
        return self._vector(*self._data[index::self._size])

    def element(self, row: int, column: int) -> float:
        return self.column(column)[row]

    def transpose(self):
        return self._from_array(self._as_array().T)

    def determinant(self) -> float:
        return float(numpy.linalg.det(self._as_array()))

    def inverse(self):
        """
        Returns the inverse matrix, raising SingularMatrixError when there is none
        """
        if self.determinant() == 0.0:
            _LOG.debug("Refusing to invert singular %s", self.__class__.__name__)
            raise SingularMatrixError(self.__class__.__name__)
        try:
            return self._from_array(numpy.linalg.inv(self._as_array()))
        except numpy.linalg.LinAlgError as e:
            raise SingularMatrixError(self.__class__.__name__) from e

    def mul(self, other):
        """
        Returns the matrix product `self @ other`
        """
        self._check(other, "multiply")
        return self._from_array(self._as_array() @ other._as_array())

    def transform(self, vector):
        """
        Returns `vector` transformed by this matrix
        """
        if not isinstance(vector, self._vector):
            raise TypeError(
                f"{self.__class__.__name__} transforms {self._vector.__name__}, got {type(vector).__name__}")
        result = self._as_array() @ numpy.array(vector.components, dtype=float)
        return self._vector(*(float(c) for c in result))

    def scale(self, factor: float):
        factor = float(factor)
        return type(self)(c * factor for c in self._data)

    def is_close(self, other, tolerance: Optional[float] = None) -> bool:
        if not isinstance(other, type(self)):
            return False
        if tolerance is None:
            tolerance = get_config().tolerance
        return components_close(self._data, other._data, tolerance)

    def to_native(self) -> numpy.ndarray:
        return precision.to_single_array(self._data).reshape(self._size, self._size)

    @classmethod
    def from_native(cls, native):
        return cls(precision.to_double_tuple(native))

    def __matmul__(self, other):
        if isinstance(other, type(self)):
            return self.mul(other)
        if isinstance(other, self._vector):
            return self.transform(other)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, (int, float)):
            return self.scale(other)
        return self.__matmul__(other)

    def __rmul__(self, other):
        if isinstance(other, (int, float)):
            return self.scale(other)
        return NotImplemented

    def __getitem__(self, index: int):
        return self.column(index)

    def __iter__(self):
        return (self.column(i) for i in range(self._size))

    def __len__(self) -> int:
        return self._size

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._data == other._data

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._data!r})"


class Matrix2(_Matrix):
    """
    2x2 matrix, 4 column-major components
    """
    _size = 2
    _vector = Vector2


class Matrix3(_Matrix):
    """
    3x3 matrix, 9 column-major components
    """
    _size = 3
    _vector = Vector3

    @classmethod
    def from_quaternion(cls, quat: Quaternion) -> "Matrix3":
        """
        Returns the rotation matrix of `quat`, which is used as given
        """
        x, y, z, w = quat.x, quat.y, quat.z, quat.w
        return cls.from_columns(
            (1 - 2*(y*y + z*z), 2*(x*y + w*z), 2*(x*z - w*y)),
            (2*(x*y - w*z), 1 - 2*(x*x + z*z), 2*(y*z + w*x)),
            (2*(x*z + w*y), 2*(y*z - w*x), 1 - 2*(x*x + y*y))
        )

    def to_native(self) -> Matrix33:
        return Matrix33(super().to_native(), dtype=precision.SINGLE)


class Matrix4(_Matrix):
    """
    4x4 matrix, 16 column-major components
    """
    _size = 4
    _vector = Vector4

    @classmethod
    def from_translation(cls, translation: Vector3) -> "Matrix4":
        return cls.from_native(
            matrix44.create_from_translation(list(translation.components), dtype=float))

    @classmethod
    def from_scale(cls, scale: Union[Vector3, float]) -> "Matrix4":
        if not isinstance(scale, Vector3):
            scale = Vector3(scale, scale, scale)
        return cls.from_native(
            matrix44.create_from_scale(list(scale.components), dtype=float))

    @classmethod
    def from_quaternion(cls, quat: Quaternion) -> "Matrix4":
        rotation = Matrix3.from_quaternion(quat)
        return cls.from_columns(
            rotation.column(0).extend(0),
            rotation.column(1).extend(0),
            rotation.column(2).extend(0),
            Vector4.unit_w
        )

    def transform_point(self, point: Point3) -> Point3:
        """
        Transforms `point` (w = 1), dividing by the resulting w when it is not 0 or 1
        """
        result = self.transform(Vector4(point.x, point.y, point.z, 1.0))
        if result.w in (0.0, 1.0):
            return Point3(result.x, result.y, result.z)
        return Point3(result.x / result.w, result.y / result.w, result.z / result.w)

    def transform_vector(self, vector: Vector3) -> Vector3:
        """
        Transforms direction `vector` (w = 0), ignoring translation
        """
        return self.transform(vector.extend(0.0)).truncate()

    def to_native(self) -> Matrix44:
        return Matrix44(super().to_native(), dtype=precision.SINGLE)


def perspective(fovy: Angle, aspect: float, near: float, far: float) -> Matrix4:
    """
    OpenGL perspective projection for a vertical field of view `fovy`
    """
    fovy_degrees = as_radians(fovy).to_degrees().value
    return Matrix4.from_native(
        matrix44.create_perspective_projection(fovy_degrees, aspect, near, far, dtype=float))


def frustum(left: float, right: float, bottom: float, top: float, near: float, far: float) -> Matrix4:
    return Matrix4.from_native(
        matrix44.create_perspective_projection_from_bounds(left, right, bottom, top, near, far, dtype=float))


def ortho(left: float, right: float, bottom: float, top: float, near: float, far: float) -> Matrix4:
    return Matrix4.from_native(
        matrix44.create_orthogonal_projection(left, right, bottom, top, near, far, dtype=float))


def rotation_matrix_from_dir_to_dir(a: Vector3, b: Vector3) -> Matrix3:
    """
    Returns the rotation taking direction `a` onto direction `b`
    """
    return Matrix3.from_quaternion(Quaternion.from_to_rotation(a, b))
