"""Pytest configuration and fixtures for int64-gcd tests."""

from __future__ import annotations

import io

import pytest

from int64_gcd.harness.harness import ConformanceHarness, HarnessConfig


@pytest.fixture
def output() -> io.StringIO:
    """In-memory stream standing in for standard output."""
    return io.StringIO()


@pytest.fixture
def harness() -> ConformanceHarness:
    """Create a harness running the standard cases against int64_gcd.gcd."""
    return ConformanceHarness()


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove harness environment variables for the duration of a test."""
    monkeypatch.delenv("INT64_GCD_LOG_LEVEL", raising=False)
    return monkeypatch


@pytest.fixture
def single_case_config() -> HarnessConfig:
    """Config with one case whose expected value is 6."""
    return HarnessConfig(cases=[{"a": 54, "b": 24, "expected": 6}])
