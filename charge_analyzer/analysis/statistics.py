"""Descriptive statistics of charge measurements.

Functions
---------
compute_mean
    Arithmetic mean.
compute_standard_deviation
    Sample standard deviation around a given mean (divisor ``n - 1``).
compute_standard_error_of_mean
    ``mean / sqrt(n)``, the error figure reported next to the mean.
compute_standard_error
    Conventional ``std / sqrt(n)``; selected with ``sem_formula="std"``.
summarize_charges
    All of the above for one MeasurementSet.

Notes
-----
``compute_standard_error_of_mean`` divides the *mean* by ``sqrt(n)``. This is the
figure the charge reports have always printed and it is kept as the default.
The conventional standard error is available separately and must be asked for.
"""

from __future__ import annotations

from typing import Sequence, Union

import numpy as np

from charge_analyzer.models.frames import MeasurementSet
from charge_analyzer.models.results import ChargeStatistics


ArrayLike = Union[Sequence[float], np.ndarray]

SEM_FORMULAS = ("mean", "std")


class InsufficientDataError(ValueError):
    """Raised when a statistic is requested on too few values."""

    def __init__(self, quantity: str, n: int, required: int):
        self.quantity = quantity
        self.n = int(n)
        self.required = int(required)
        super().__init__(f"insufficient data for {quantity}: n={n}, need at least {required}")


def _as_1d(data: ArrayLike) -> np.ndarray:
    x = np.asarray(data, dtype=np.float64)
    if x.ndim != 1:
        raise ValueError(f"data must be 1D, got shape {x.shape}")
    return x


def compute_mean(data: ArrayLike) -> float:
    """Return ``sum(data) / n``.

    >>> compute_mean([1.0, 2.0, 3.0])
    2.0
    """
    x = _as_1d(data)
    if x.size == 0:
        raise InsufficientDataError("mean", 0, 1)
    return float(np.sum(x) / x.size)


def compute_standard_deviation(data: ArrayLike, mean: float) -> float:
    r"""Return the sample standard deviation of ``data`` around ``mean``.

    .. math:: \sigma = \sqrt{\frac{\sum_i (x_i - \bar x)^2}{n - 1}}
    """
    x = _as_1d(data)
    n = int(x.size)
    if n <= 1:
        raise InsufficientDataError("standard deviation", n, 2)
    ss = float(np.sum((x - float(mean)) ** 2))
    return float(np.sqrt(ss / (n - 1)))


def compute_standard_error_of_mean(mean: float, n: int) -> float:
    """Return ``mean / sqrt(n)``."""
    n = int(n)
    if n <= 0:
        raise InsufficientDataError("standard error of the mean", n, 1)
    return float(mean) / float(np.sqrt(n))


def compute_standard_error(std: float, n: int) -> float:
    """Return the conventional standard error ``std / sqrt(n)``."""
    n = int(n)
    if n <= 0:
        raise InsufficientDataError("standard error", n, 1)
    return float(std) / float(np.sqrt(n))


def summarize_charges(mset: MeasurementSet, *, sem_formula: str = "mean") -> ChargeStatistics:
    """Compute mean, standard deviation and standard error for one file.

    Parameters
    ----------
    mset:
        Validated measurement set.
    sem_formula:
        ``"mean"`` (default) reports ``mean / sqrt(n)``; ``"std"`` reports ``std / sqrt(n)``.

    Raises
    ------
    InsufficientDataError
        If the set holds fewer than two values.
    """
    if sem_formula not in SEM_FORMULAS:
        raise ValueError(f"sem_formula must be one of {SEM_FORMULAS}, got {sem_formula!r}")

    x = mset.values
    n = int(x.size)
    mean = compute_mean(x)
    std = compute_standard_deviation(x, mean)
    if sem_formula == "std":
        sem = compute_standard_error(std, n)
    else:
        sem = compute_standard_error_of_mean(mean, n)

    return ChargeStatistics(
        source_path=mset.source_path,
        n=n,
        mean=mean,
        std=std,
        sem=sem,
        sem_formula=sem_formula,
    )
