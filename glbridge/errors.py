"""
Exceptions raised by glbridge.

Every failure is reported synchronously by the call that caused it.
"""

from typing import Optional


class GLBridgeError(Exception):
    """
    Base class of every error raised by this package
    """


class ParameterLengthMismatch(GLBridgeError, ValueError):
    """
    A flat component sequence does not have the length its type requires
    """

    def __init__(self, owner: str, expected: int, actual: int):
        self.owner = owner
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{owner} data must have {expected} elements, got {actual}")


class UnknownCodeError(GLBridgeError, ValueError):
    """
    A native numeric code has no variant in the requested enumeration
    """

    def __init__(self, enum: str, code: object):
        self.enum = enum
        self.code = code
        if isinstance(code, int) and not isinstance(code, bool):
            super().__init__(f"{code:#06x} is not a valid {enum} code")
        else:
            super().__init__(f"{code!r} is not an integer {enum} code")


class SingularMatrixError(GLBridgeError, ArithmeticError):
    def __init__(self, owner: str):
        self.owner = owner
        super().__init__(f"{owner} is singular and cannot be inverted")


class SnapshotDecodeError(GLBridgeError, ValueError):
    """
    A serialized render state snapshot is malformed
    """

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        if field is not None:
            message = f"{message} (field {field!r})"
        super().__init__(message)


class NonFiniteColorError(GLBridgeError, ValueError):
    """
    A color channel is infinite or NaN and has no 8-bit value
    """

    def __init__(self, channel: str, value: float):
        self.channel = channel
        self.value = value
        super().__init__(f"Color channel {channel!r} is not finite ({value!r})")


class SnapshotEncodeError(GLBridgeError, ValueError):
    """
    A render state field holds a value its snapshot encoding cannot carry
    """

    def __init__(self, message: str, field: str):
        self.field = field
        super().__init__(f"{message} (field {field!r})")
