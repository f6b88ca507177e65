"""Core modules for int64-gcd.

Primary modules:
- gcd: The GCD routine and helpers (gcd, are_coprime, euclid_steps)
- types: Type definitions (GcdCase, CaseOutcome, ConformanceReport, etc.)
- errors: Exceptions raised for out-of-range arguments and results
"""

from int64_gcd.core.errors import GcdError, Int64OverflowError, Int64RangeError
from int64_gcd.core.gcd import are_coprime, check_int64, euclid_steps, gcd
from int64_gcd.core.types import (
    INT64_MAX,
    INT64_MIN,
    CaseOutcome,
    CaseStatus,
    ConformanceReport,
    GcdCase,
)

__all__ = [
    # Types
    "INT64_MAX",
    "INT64_MIN",
    "CaseOutcome",
    "CaseStatus",
    "ConformanceReport",
    "GcdCase",
    # Errors
    "GcdError",
    "Int64OverflowError",
    "Int64RangeError",
    # Functions
    "are_coprime",
    "check_int64",
    "euclid_steps",
    "gcd",
]
