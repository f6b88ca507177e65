"""Greatest common divisor of signed 64-bit integers.

Provides: gcd, are_coprime, euclid_steps
"""

from __future__ import annotations

import logging
import operator

from int64_gcd.core.errors import Int64OverflowError, Int64RangeError
from int64_gcd.core.types import INT64_MAX, INT64_MIN

logger = logging.getLogger(__name__)


def check_int64(value: int, name: str) -> int:
    """
    Validate that a value is an integer within the signed 64-bit range.

    Args:
        value: The value to check (anything implementing ``__index__``)
        name: Argument name used in error messages

    Returns:
        The value as a plain ``int``

    Raises:
        TypeError: If value is not an integer (``bool`` is rejected)
        Int64RangeError: If value is outside ``[INT64_MIN, INT64_MAX]``
    """
    if isinstance(value, bool):
        raise TypeError(f"Argument '{name}' must be an integer, not bool")
    try:
        number = operator.index(value)
    except TypeError:
        raise TypeError(
            f"Argument '{name}' must be an integer, not {type(value).__name__}"
        ) from None

    if not INT64_MIN <= number <= INT64_MAX:
        raise Int64RangeError(name, number)
    return number


def gcd(a: int, b: int) -> int:
    """
    Return the greatest common divisor of two signed 64-bit integers.

    The result is always non-negative. ``gcd(0, 0)`` is 0, and
    ``gcd(a, 0)`` is ``abs(a)``.

    Raises:
        TypeError: If an argument is not an integer
        Int64RangeError: If an argument is outside the signed 64-bit range
        Int64OverflowError: If the result is 2**63 (only for INT64_MIN
            paired with 0 or with itself)
    """
    x = abs(check_int64(a, "a"))
    y = abs(check_int64(b, "b"))

    # 0 mod 0 is undefined
    if x == 0 and y == 0:
        return 0

    while y != 0:
        x, y = y, x % y

    if x > INT64_MAX:
        raise Int64OverflowError(a, b)

    logger.debug("gcd(%d, %d) = %d", a, b, x)
    return x


def are_coprime(a: int, b: int) -> bool:
    """Check whether two integers are coprime (their GCD is 1)."""
    return gcd(a, b) == 1


def euclid_steps(a: int, b: int) -> list[tuple[int, int]]:
    """
    List the pairs visited by the Euclidean algorithm on ``abs(a), abs(b)``.

    The first pair is the starting pair and the last one is ``(g, 0)``
    where ``g`` is the GCD. ``len(steps) - 1`` modulo operations were done.
    The starting pair holds 2**63 when an argument is INT64_MIN.

    Raises:
        Int64OverflowError: Under the same conditions as ``gcd``
    """
    x = abs(check_int64(a, "a"))
    y = abs(check_int64(b, "b"))

    steps = [(x, y)]
    while y != 0:
        x, y = y, x % y
        steps.append((x, y))

    if x > INT64_MAX:
        raise Int64OverflowError(a, b)
    return steps
