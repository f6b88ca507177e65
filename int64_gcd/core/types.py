"""Core type definitions for int64-gcd."""

from __future__ import annotations

from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

Int64 = Annotated[int, Field(strict=True, ge=INT64_MIN, le=INT64_MAX)]


class CaseStatus(str, Enum):
    """Status of a single conformance case."""

    PASSED = "passed"
    FAILED = "failed"
    ERROR = "error"


class GcdCase(BaseModel):
    """One conformance scenario: gcd(a, b) must equal expected."""

    model_config = ConfigDict(frozen=True)

    a: Int64
    b: Int64
    expected: Int64

    @property
    def args(self) -> tuple[int, int]:
        """Arguments passed to the function under test."""
        return self.a, self.b

    def __str__(self) -> str:
        return f"gcd({self.a}, {self.b}) = {self.expected}"


class CaseOutcome(BaseModel):
    """Result of running one conformance case."""

    case: GcdCase
    status: CaseStatus = CaseStatus.PASSED
    actual: int | None = None
    message: str = ""

    @property
    def line(self) -> str:
        """Decimal line printed for this case, empty if the call raised."""
        if self.actual is None:
            return ""
        return f"{self.actual}\n"

    @classmethod
    def passed(cls, case: GcdCase, actual: int) -> CaseOutcome:
        """Create a passed outcome."""
        return cls(case=case, status=CaseStatus.PASSED, actual=actual)

    @classmethod
    def failed(cls, case: GcdCase, actual: int) -> CaseOutcome:
        """Create a failed outcome for a wrong result."""
        return cls(
            case=case,
            status=CaseStatus.FAILED,
            actual=actual,
            message=f"gcd({case.a}, {case.b}): expected {case.expected}, got {actual}",
        )

    @classmethod
    def error(cls, case: GcdCase, message: str) -> CaseOutcome:
        """Create an error outcome for a call that raised."""
        return cls(case=case, status=CaseStatus.ERROR, message=message)


class ConformanceReport(BaseModel):
    """Result of a full harness run."""

    status: CaseStatus = CaseStatus.PASSED
    exit_code: int = 0
    stdout: str = ""
    outcomes: list[CaseOutcome] = Field(default_factory=list)

    @property
    def failures(self) -> list[CaseOutcome]:
        """Outcomes that did not pass."""
        return [o for o in self.outcomes if o.status != CaseStatus.PASSED]

    @classmethod
    def success(cls, stdout: str, outcomes: list[CaseOutcome]) -> ConformanceReport:
        """Create a report where every case passed."""
        return cls(
            status=CaseStatus.PASSED,
            exit_code=0,
            stdout=stdout,
            outcomes=outcomes,
        )

    @classmethod
    def error(
        cls,
        stdout: str,
        outcomes: list[CaseOutcome],
    ) -> ConformanceReport:
        """Create a report with at least one failed or errored case."""
        errored = any(o.status == CaseStatus.ERROR for o in outcomes)
        return cls(
            status=CaseStatus.ERROR if errored else CaseStatus.FAILED,
            exit_code=1,
            stdout=stdout,
            outcomes=outcomes,
        )

    def __str__(self) -> str:
        passed = len(self.outcomes) - len(self.failures)
        return f"{passed}/{len(self.outcomes)} cases passed"
