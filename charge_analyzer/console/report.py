"""Text and table rendering of per-file charge statistics."""

from __future__ import annotations

from typing import Iterable, Tuple

import pandas as pd

from charge_analyzer.models.frames import MeasurementSet
from charge_analyzer.models.results import ChargeStatistics


UNIT = "C"

SUMMARY_COLUMNS = ("file", "n", "n_rejected", "mean_C", "std_C", "sem_C", "sem_formula")


def format_statistics(stats: ChargeStatistics, label: str | None = None) -> str:
    """
    Render one result block::

        File read from: drops.dat
            The computed mean is:
                (1.6e-19 +/- 2e-20)C
            The computed standard deviation is:
                3e-20C
    """
    name = label if label is not None else str(stats.source_path)
    return "\n".join(
        [
            f"File read from: {name}",
            "    The computed mean is:",
            f"        ({stats.mean:g} +/- {stats.sem:g}){UNIT}",
            "    The computed standard deviation is:",
            f"        {stats.std:g}{UNIT}",
        ]
    )


def summary_frame(results: Iterable[Tuple[MeasurementSet, ChargeStatistics]]) -> pd.DataFrame:
    """One row per analyzed file."""
    rows = [
        {
            "file": str(mset.source_path),
            "n": stats.n,
            "n_rejected": mset.n_rejected,
            "mean_C": stats.mean,
            "std_C": stats.std,
            "sem_C": stats.sem,
            "sem_formula": stats.sem_formula,
        }
        for mset, stats in results
    ]
    return pd.DataFrame(rows, columns=list(SUMMARY_COLUMNS))
