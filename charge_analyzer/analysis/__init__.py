"""Analysis package.

Design principle:
  - Ingest produces validated :class:`~charge_analyzer.models.frames.MeasurementSet` objects.
  - Analysis consumes the accepted values and produces descriptive statistics.

All functions are pure: inputs are never modified and nothing is read or written.
Degenerate inputs (too few values) raise :class:`InsufficientDataError`.
"""

from .statistics import (
    InsufficientDataError,
    compute_mean,
    compute_standard_deviation,
    compute_standard_error,
    compute_standard_error_of_mean,
    summarize_charges,
)

__all__ = [
    "InsufficientDataError",
    "compute_mean",
    "compute_standard_deviation",
    "compute_standard_error",
    "compute_standard_error_of_mean",
    "summarize_charges",
]
