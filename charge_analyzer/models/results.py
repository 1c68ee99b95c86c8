from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ChargeStatistics:
    """Descriptive statistics computed from a single MeasurementSet.

    Attributes
    ----------
    source_path:
        File the values were read from.
    n:
        Number of accepted values.
    mean, std:
        Mean and sample standard deviation (divisor ``n - 1``), in coulomb.
    sem:
        Standard error of the mean. With ``sem_formula == "mean"`` this is
        ``mean / sqrt(n)``; with ``"std"`` it is ``std / sqrt(n)``.
    """

    source_path: Path
    n: int
    mean: float
    std: float
    sem: float
    sem_formula: str = "mean"
