"""Squaring and ranged accumulation."""

from __future__ import annotations

import logging
from typing import Iterator

logger = logging.getLogger(__name__)


class SumSquaresError(RuntimeError):
    pass


class SumOverflowError(SumSquaresError, OverflowError):
    """Raised when a value leaves the signed range of the configured width.

    ``bound`` is the N of the summation, or ``None`` when a lone square overflowed.
    """

    def __init__(self, width: int, value: int, bound: int | None = None) -> None:
        message = f"value {value} does not fit in a signed {width}-bit integer"
        if bound is not None:
            message += f" (bound={bound})"
        super().__init__(message)
        self.width = width
        self.value = value
        self.bound = bound


def signed_range(width: int) -> tuple[int, int]:
    """Return the inclusive ``(min, max)`` of a two's complement integer of *width* bits."""

    _require_int(width, "width")
    if width < 2:
        raise ValueError(f"width must be at least 2 bits, got {width}")
    limit = 1 << (width - 1)
    return -limit, limit - 1


def _require_int(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return value


def _limits(width: int | None) -> tuple[int, int] | None:
    return None if width is None else signed_range(width)


def _check(value: int, limits: tuple[int, int] | None, width: int | None, bound: int | None) -> int:
    if limits is not None and not limits[0] <= value <= limits[1]:
        raise SumOverflowError(width, value, bound)
    return value


def square(x: int, width: int | None = None) -> int:
    _require_int(x, "x")
    return _check(x * x, _limits(width), width, None)


def iter_partial_sums(n: int, width: int | None = None) -> Iterator[tuple[int, int]]:
    """Yield ``(i, total)`` after folding each ``square(i)`` for ``i`` in ``1..=n``.

    Arguments are validated before the iterator is returned. Nothing is
    yielded when *n* is zero or negative. With *width* set, the square and the
    running total are both checked after every term.
    """

    _require_int(n, "n")
    return _partial_sums(n, width, _limits(width))


def _partial_sums(n: int, width: int | None, limits: tuple[int, int] | None) -> Iterator[tuple[int, int]]:
    total = 0
    for i in range(1, n + 1):
        value = _check(square(i), limits, width, n)
        total = _check(total + value, limits, width, n)
        yield i, total


def sum_squares(n: int, width: int | None = None) -> int:
    """Return the sum of ``i * i`` for ``i`` from 1 to *n* inclusive."""

    total = 0
    for _, partial in iter_partial_sums(n, width):
        total = partial
    logger.debug("sum_squares(%d) = %d (width=%s)", n, total, width)
    return total
