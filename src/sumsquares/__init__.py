"""sumsquares public package exports."""

from .config import SumSquaresSettings, load_config, load_settings
from .core import SumOverflowError, SumSquaresError, iter_partial_sums, square, sum_squares
from .verify import VerificationError, closed_form

__all__ = [
    "SumOverflowError",
    "SumSquaresError",
    "SumSquaresSettings",
    "VerificationError",
    "closed_form",
    "iter_partial_sums",
    "load_config",
    "load_settings",
    "square",
    "sum_squares",
]
