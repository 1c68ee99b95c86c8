from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

import numpy as np


@dataclass(frozen=True)
class RejectedLine:
    """One input line that failed validation.

    ``line_no`` is 1-based; ``text`` is the raw line without its newline.
    """
    line_no: int
    text: str
    reason: str


@dataclass(frozen=True)
class MeasurementSet:
    """
    In-memory representation of one charge file after line validation.

    Notes
    - 'values' only holds accepted lines, in file order, with no gaps.
    - values are always float64, finite and non-negative.
    """
    source_path: Path
    values: np.ndarray
    n_lines: int = 0
    rejected: Tuple[RejectedLine, ...] = ()
    warnings: Tuple[str, ...] = ()

    @property
    def n_values(self) -> int:
        return int(self.values.size)

    @property
    def n_rejected(self) -> int:
        return len(self.rejected)
