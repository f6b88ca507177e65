"""Exception types raised by the GCD routines."""

from __future__ import annotations


class GcdError(Exception):
    """Base class for GCD errors."""


class Int64RangeError(GcdError, ValueError):
    """An argument does not fit in a signed 64-bit integer."""

    def __init__(self, name: str, value: int) -> None:
        self.name = name
        self.value = value
        super().__init__(
            f"Argument '{name}' = {value} is outside the signed 64-bit range"
        )


class Int64OverflowError(GcdError, OverflowError):
    """The greatest common divisor is 2**63 and cannot be returned as int64."""

    def __init__(self, a: int, b: int) -> None:
        self.a = a
        self.b = b
        super().__init__(
            f"gcd({a}, {b}) = 2**63 does not fit in a signed 64-bit integer"
        )
