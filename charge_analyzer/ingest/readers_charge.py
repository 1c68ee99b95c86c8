from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple
import math
import re

import numpy as np

from charge_analyzer.models.frames import MeasurementSet, RejectedLine


# Leading decimal literal: 12, 12., 12.5, .5, 1e-19, +3.0E+2
_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", flags=re.ASCII)

REASON_BLANK = "blank"
REASON_UNPARSEABLE = "unparseable"
REASON_TRAILING = "trailing content"
REASON_NEGATIVE = "negative"
REASON_NONFINITE = "non-finite"


class ChargeFileOpenError(OSError):
    """Raised when a charge file cannot be opened for reading."""

    def __init__(self, path: Path, reason: str = ""):
        self.path = Path(path)
        self.reason = reason
        msg = f"Could not open file: {path}."
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


@dataclass(frozen=True)
class ChargeReaderConfig:
    """
    Reader configuration for charge text files.

    encoding / errors:
      Passed to ``open``. With ``errors="replace"`` undecodable bytes become U+FFFD,
      so the affected line fails validation instead of aborting the whole file.
    """
    encoding: str = "utf-8"
    errors: str = "replace"


def parse_charge_line(line: str) -> Tuple[Optional[float], Optional[str]]:
    """
    Validate one raw line.

    Returns ``(value, None)`` for an accepted line and ``(None, reason)`` otherwise.

    Examples
    --------
    >>> parse_charge_line("   7.0   \\n")
    (7.0, None)
    >>> parse_charge_line("12.5 foo")
    (None, 'trailing content')
    >>> parse_charge_line("-3.2")
    (None, 'negative')
    """
    s = line.strip()
    if not s:
        return None, REASON_BLANK

    m = _NUMBER.match(s)
    if m is None:
        return None, REASON_UNPARSEABLE
    if m.end() != len(s):
        return None, REASON_TRAILING

    value = float(m.group(0))
    if not math.isfinite(value):
        return None, REASON_NONFINITE
    if value < 0.0:
        return None, REASON_NEGATIVE
    # -0.0 -> 0.0
    return value + 0.0, None


class ChargeFileReader:
    """
    Reads a charge measurement file of the form::

        1.602e-19
        3.204e-19
        ...

    Each line is stripped and must hold exactly one non-negative decimal number.
    Lines failing that check are skipped, reported through ``log`` (any object with a
    ``warning(str)`` method) and recorded on the returned frame.
    """

    def __init__(self, config: Optional[ChargeReaderConfig] = None, log=None):
        self.config = config or ChargeReaderConfig()
        self.log = log

    def _open(self, p: Path):
        try:
            return open(p, "r", encoding=self.config.encoding, errors=self.config.errors)
        except OSError as exc:
            raise ChargeFileOpenError(p, exc.strerror or type(exc).__name__) from exc

    def _report(self, path: Path, rej: RejectedLine) -> str:
        msg = (
            f"File: {path} has a corrupt data point (line {rej.line_no}: {rej.reason}).\n"
            f"Skipping that data point."
        )
        if self.log is not None:
            self.log.warning(msg)
        return msg

    def read(self, path: str | Path) -> MeasurementSet:
        p = Path(path).expanduser()

        values: List[float] = []
        rejected: List[RejectedLine] = []
        warnings: List[str] = []
        n_lines = 0

        with self._open(p) as fh:
            for n_lines, raw in enumerate(fh, start=1):
                value, reason = parse_charge_line(raw)
                if reason is not None:
                    rej = RejectedLine(line_no=n_lines, text=raw.rstrip("\r\n"), reason=reason)
                    rejected.append(rej)
                    warnings.append(self._report(p, rej))
                    continue
                values.append(value)

        if rejected:
            warnings.append(f"skipped {len(rejected)} of {n_lines} lines")

        return MeasurementSet(
            source_path=p,
            values=np.asarray(values, dtype=np.float64),
            n_lines=n_lines,
            rejected=tuple(rejected),
            warnings=tuple(warnings),
        )


def load_charges(path: str | Path, log=None) -> Tuple[np.ndarray, int]:
    """Load ``path`` and return ``(values, valid_count)``."""
    mset = ChargeFileReader(log=log).read(path)
    return mset.values, mset.n_values
