"""Conformance harness for GCD implementations."""

from int64_gcd.harness.harness import (
    DEFAULT_CASES,
    EXPECTED_OUTPUT,
    ConformanceHarness,
    HarnessConfig,
    main,
)

__all__ = [
    "DEFAULT_CASES",
    "EXPECTED_OUTPUT",
    "ConformanceHarness",
    "HarnessConfig",
    "main",
]
