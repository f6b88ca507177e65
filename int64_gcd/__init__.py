"""int64-gcd - Greatest common divisor of signed 64-bit integers."""

from int64_gcd.core.errors import GcdError, Int64OverflowError, Int64RangeError
from int64_gcd.core.gcd import are_coprime, euclid_steps, gcd
from int64_gcd.core.types import (
    CaseOutcome,
    ConformanceReport,
    GcdCase,
)

__version__ = "0.1.0"

__all__ = [
    "CaseOutcome",
    "ConformanceReport",
    "GcdCase",
    "GcdError",
    "Int64OverflowError",
    "Int64RangeError",
    "are_coprime",
    "euclid_steps",
    "gcd",
]
