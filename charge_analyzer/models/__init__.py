from .frames import MeasurementSet, RejectedLine
from .results import ChargeStatistics

__all__ = [
    "MeasurementSet",
    "RejectedLine",
    "ChargeStatistics",
]
