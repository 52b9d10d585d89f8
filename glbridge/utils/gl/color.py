from math import isfinite
from typing import Optional, Tuple, Union

import numpy

from glbridge.config import ColorPolicy, get_config
from glbridge.errors import NonFiniteColorError
from glbridge.log import get_logger
from glbridge.utils import classproperty, clamp01
from glbridge.utils.types import _FlatRecord

_LOG = get_logger("color")


class Srgba(_FlatRecord):
    """
    Class representing a normalized sRGBA color as four doubles

    Components are nominally in [0, 1] but are stored as given
    """
    _fields = ("r", "g", "b", "a")

    def __init__(self, r: float = 0, g: float = 0, b: float = 0, a: float = 1.0):
        self.r = float(r)
        self.g = float(g)
        self.b = float(b)
        self.a = float(a)

    @classproperty
    def black(cls) -> "Srgba":
        return cls(0.0, 0.0, 0.0, 1.0)

    @classproperty
    def white(cls) -> "Srgba":
        return cls(1.0, 1.0, 1.0, 1.0)

    @classproperty
    def transparent(cls) -> "Srgba":
        return cls(0.0, 0.0, 0.0, 0.0)

    @classmethod
    def from_rgba8(cls, red: int, green: int, blue: int, alpha: int = 255) -> "Srgba":
        return cls(red / 255, green / 255, blue / 255, alpha / 255)

    @classmethod
    def from_hex(cls, rgba: str) -> "Srgba":
        """
        Parse `#RRGGBBAA` or `#RRGGBB` (alpha defaults to opaque)
        """
        rgba = rgba.replace("#", "", 1)
        rgba = rgba.replace("0x", "", 1)
        if len(rgba) == 8:
            value = int(rgba, 16)
        elif len(rgba) == 6:
            value = (int(rgba, 16) << 8) | 0xFF
        else:
            raise ValueError(f"{rgba!r} is not an RGB or RGBA hex color")
        return cls.from_rgba8(
            (value >> 24) & 0xFF,
            (value >> 16) & 0xFF,
            (value >> 8) & 0xFF,
            value & 0xFF
        )

    def is_in_range(self) -> bool:
        return all(0.0 <= c <= 1.0 for c in self.components)

    def to_rgba8(self, policy: Optional[Union[ColorPolicy, str]] = None) -> Tuple[int, int, int, int]:
        """
        Convert each channel to an 8 bit integer as `int(component * 255)`

        Under the default truncate policy out-of-range components are not
        clamped, so results may fall outside [0, 255]. The clamp policy must
        be chosen explicitly, by argument or by GLBRIDGE_COLOR_POLICY

        Channels that are infinite or NaN, or too large to scale to a finite
        value, raise NonFiniteColorError under either policy
        """
        for name, c in zip(self._fields, self.components):
            if not isfinite(c * 255):
                raise NonFiniteColorError(name, c)

        if policy is None:
            policy = get_config().color_policy
        policy = ColorPolicy(policy)

        components = self.components
        if not self.is_in_range():
            if policy is ColorPolicy.CLAMP:
                components = tuple(clamp01(c) for c in components)
            else:
                _LOG.warning(
                    "%r has components outside [0, 1]; converting without clamping", self)
        red, green, blue, alpha = (int(c * 255) for c in components)
        return red, green, blue, alpha

    def to_hex(self) -> str:
        """
        Pack as `#RRGGBBAA`. Each channel is masked to 8 bits
        """
        red, green, blue, alpha = self.to_rgba8()
        value = ((red & 0xFF) << 24) | ((green & 0xFF) << 16) | ((blue & 0xFF) << 8) | (alpha & 0xFF)
        return f"#{value:08X}"

    def to_native(self) -> numpy.ndarray:
        return numpy.array(self.components, dtype=numpy.float32)

    def lerp(self, other: "Srgba", t: float) -> "Srgba":
        t = float(t)
        return Srgba(*(a*(1.0 - t) + b*t for a, b in zip(self.components, other.components)))

    def inverse(self, preserveAlpha: bool = True) -> "Srgba":
        return Srgba(
            1.0 - self.r,
            1.0 - self.g,
            1.0 - self.b,
            self.a if preserveAlpha else 1.0 - self.a
        )

    def __str__(self) -> str:
        return self.__repr__()
