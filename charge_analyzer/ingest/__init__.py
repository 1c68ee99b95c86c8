"""Ingest package - charge file reader.

This package handles:
- Opening charge measurement text files (one value per line)
- Line-level validation: blank, unparseable, trailing content, negative, non-finite
- Reporting each rejected line as it is found

Key classes:
- ChargeFileReader: Reads one file into a MeasurementSet
- ChargeReaderConfig: Encoding policy for the reader

Design principle:
- Readers produce validated MeasurementSet objects
- Unopenable files raise ChargeFileOpenError; the caller decides whether to stop
- Rejected lines are recorded, never repaired
"""
from .readers_charge import (
    ChargeFileOpenError,
    ChargeFileReader,
    ChargeReaderConfig,
    load_charges,
    parse_charge_line,
)

__all__ = [
    "ChargeFileOpenError",
    "ChargeFileReader",
    "ChargeReaderConfig",
    "load_charges",
    "parse_charge_line",
]
