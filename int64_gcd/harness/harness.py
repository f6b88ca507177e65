"""Conformance harness for GCD implementations.

Runs a GCD function against a fixed list of argument pairs and prints one
decimal result per line, in order.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Callable
from typing import TextIO

from pydantic import BaseModel, Field, ValidationError, field_validator

from int64_gcd.core.gcd import gcd
from int64_gcd.core.types import CaseOutcome, CaseStatus, ConformanceReport, GcdCase

logger = logging.getLogger(__name__)

GcdFunc = Callable[[int, int], int]

LOG_LEVEL_ENV = "INT64_GCD_LOG_LEVEL"

DEFAULT_CASES: list[GcdCase] = [
    GcdCase(a=0, b=0, expected=0),
    GcdCase(a=17, b=31, expected=1),
    GcdCase(a=37, b=11, expected=1),
    GcdCase(a=10, b=5, expected=5),
    GcdCase(a=54, b=24, expected=6),
    GcdCase(a=123456, b=789012, expected=12),
    GcdCase(a=0, b=28, expected=28),
    GcdCase(a=42, b=42, expected=42),
]

EXPECTED_OUTPUT = "0\n1\n1\n5\n6\n12\n28\n42\n"


class HarnessConfig(BaseModel):
    """Configuration for the conformance harness."""

    # Cases run in order; output lines follow the same order
    cases: list[GcdCase] = Field(default_factory=lambda: list(DEFAULT_CASES))

    # Root logger level used by main()
    log_level: str = Field(
        default_factory=lambda: os.environ.get(LOG_LEVEL_ENV, "WARNING"),
        validate_default=True,
    )

    # Stop at the first case that does not pass
    stop_on_error: bool = False

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level '{value}'")
        return level


class ConformanceHarness:
    """Invokes a GCD function with fixed pairs and checks the printed results."""

    def __init__(
        self,
        func: GcdFunc = gcd,
        config: HarnessConfig | None = None,
    ) -> None:
        """
        Initialize the harness.

        Args:
            func: The GCD function under test
            config: Harness configuration (defaults to the eight standard cases)
        """
        self.func = func
        self.config = config or HarnessConfig()

    @property
    def expected_output(self) -> str:
        """Output a correct implementation prints for the configured cases."""
        return "".join(f"{case.expected}\n" for case in self.config.cases)

    def run_case(self, case: GcdCase) -> CaseOutcome:
        """
        Run a single case.

        Exceptions raised by the function under test are reported as an
        error outcome rather than propagated.
        """
        try:
            actual = self.func(case.a, case.b)
        except Exception as e:
            logger.warning("gcd(%d, %d) raised %s: %s", case.a, case.b, type(e).__name__, e)
            return CaseOutcome.error(case, f"{type(e).__name__}: {e}")

        if isinstance(actual, bool) or not isinstance(actual, int):
            return CaseOutcome.error(
                case,
                f"gcd({case.a}, {case.b}) returned {type(actual).__name__}, expected int",
            )

        if actual != case.expected:
            logger.warning("gcd(%d, %d): expected %d, got %d", case.a, case.b, case.expected, actual)
            return CaseOutcome.failed(case, actual)

        return CaseOutcome.passed(case, actual)

    def run(self, stream: TextIO | None = None) -> ConformanceReport:
        """
        Run every configured case in order.

        Args:
            stream: Where result lines are written (defaults to sys.stdout)

        Returns:
            ConformanceReport with the printed text and per-case outcomes
        """
        out = stream if stream is not None else sys.stdout
        outcomes: list[CaseOutcome] = []
        lines: list[str] = []

        for case in self.config.cases:
            outcome = self.run_case(case)
            outcomes.append(outcome)

            if outcome.line:
                out.write(outcome.line)
                lines.append(outcome.line)

            if outcome.status != CaseStatus.PASSED and self.config.stop_on_error:
                logger.info("Stopping after first failure: %s", outcome.message)
                break

        out.flush()
        stdout = "".join(lines)

        if all(o.status == CaseStatus.PASSED for o in outcomes):
            report = ConformanceReport.success(stdout=stdout, outcomes=outcomes)
        else:
            report = ConformanceReport.error(stdout=stdout, outcomes=outcomes)

        logger.info("Conformance run finished: %s", report)
        return report


def main() -> int:
    """Run the standard cases against int64_gcd.gcd on standard output."""
    try:
        config = HarnessConfig()
    except ValidationError as e:
        print(f"Invalid harness configuration: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=config.log_level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    report = ConformanceHarness(gcd, config).run()
    return report.exit_code


if __name__ == "__main__":
    sys.exit(main())
