"""Charge Analyzer -- Python tooling for per-file statistics of charge measurements.

Designed for oil-drop style experiments where each acquisition file holds one
charge value per line.

This package provides tools for:
- Ingesting charge text files with line-level validation (corrupt lines are skipped)
- Computing mean, sample standard deviation and standard error of the mean
- Driving the analysis from the command line, interactively or with file arguments
- Exporting a per-file summary table and optional histogram figures

Key principles:
- No silent repair: rejected lines are reported and recorded, never coerced
- No synthetic data: degenerate inputs raise instead of producing NaN
- Full traceability: every rejection carries its file line number and reason

Main subpackages:
- analysis: Statistics over accepted charge values
- console: Prompting, yes/no parsing, console log view and result formatting
- ingest: Charge file reader
- models: Data models (MeasurementSet, RejectedLine, ChargeStatistics)
- presentation: Histogram figures
"""

__all__ = []
