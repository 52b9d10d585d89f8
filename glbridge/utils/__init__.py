from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, BinaryIO, Callable, Iterable, List, Optional, Union

from glbridge.errors import ParameterLengthMismatch


class classproperty(property):
    def __get__(self, __obj: Any, __type: type | None = None) -> Any:
        return classmethod(self.fget).__get__(None, __type)() # type: ignore


Numeric = Union[int, float]
VariadicArgs = Any
VariadicKwargs = Any

clamp: Callable[[Numeric, Numeric, Numeric],
                Numeric] = lambda x, min, max: min if x < min else max if x > max else x
clamp01: Callable[[Numeric], Numeric] = lambda x: clamp(x, 0, 1)


def as_float_list(values: Iterable[Numeric], expected: int, owner: str) -> List[float]:
    """
    Return `values` as a list of floats, requiring exactly `expected` items

    Raises ParameterLengthMismatch instead of truncating or padding
    """
    data = [float(v) for v in values]
    if len(data) != expected:
        raise ParameterLengthMismatch(owner, expected, len(data))
    return data


def components_close(a: Iterable[float], b: Iterable[float], tolerance: float) -> bool:
    return all(abs(x - y) <= tolerance for x, y in zip(a, b))


class A_Serializable(ABC):
    """
    Interface that ensures compatibility with generic object streaming
    """
    @classmethod
    @abstractmethod
    def from_bytes(cls, data: BinaryIO, *args: VariadicArgs, **
                   kwargs: VariadicKwargs) -> Optional[A_Serializable]: ...

    @abstractmethod
    def to_bytes(self) -> bytes: ...


class A_Clonable(ABC):
    """
    Interface that ensures this object supports deep copying
    """
    @abstractmethod
    def copy(self, *, deep: bool = False) -> A_Clonable: ...
