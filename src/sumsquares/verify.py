"""Closed-form checks for the accumulated total."""

from __future__ import annotations

from .core import SumSquaresError


class VerificationError(SumSquaresError):
    pass


def closed_form(n: int) -> int:
    """Return ``n * (n + 1) * (2n + 1) / 6``, or 0 for an empty range."""

    if n <= 0:
        return 0
    return n * (n + 1) * (2 * n + 1) // 6


def check(n: int, total: int) -> None:
    expected = closed_form(n)
    if total != expected:
        raise VerificationError(f"sum of squares 1..{n} is {total}, closed form gives {expected}")

