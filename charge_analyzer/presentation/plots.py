"""Histogram figures of accepted charge values.

Figures are built on a bare :class:`matplotlib.figure.Figure`, so no pyplot state
or interactive backend is involved and saving works headless.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import numpy as np

from charge_analyzer.models.frames import MeasurementSet
from charge_analyzer.models.results import ChargeStatistics


def _bin_count(n: int) -> int:
    # Sturges, clipped to a readable range
    return int(np.clip(np.ceil(np.log2(max(n, 1)) + 1), 5, 60))


def build_charge_histogram(mset: MeasurementSet, stats: Optional[ChargeStatistics] = None):
    """Return a Figure with the value histogram; mean and +/- std marked when ``stats`` is given."""
    from matplotlib.figure import Figure  # late import by design

    fig = Figure(figsize=(8.0, 4.8))
    ax = fig.add_subplot(1, 1, 1)

    x = np.asarray(mset.values, dtype=np.float64)
    if x.size:
        ax.hist(x, bins=_bin_count(int(x.size)), color="tab:blue", alpha=0.8, label=f"n={x.size}")

    if stats is not None:
        ax.axvline(stats.mean, color="red", linewidth=1.5, label=f"mean={stats.mean:g} C")
        for s in (stats.mean - stats.std, stats.mean + stats.std):
            ax.axvline(s, color="red", linestyle="--", linewidth=0.8)

    ax.set_xlabel("charge (C)")
    ax.set_ylabel("count")
    ax.set_title(mset.source_path.name)
    ax.grid(True)
    if ax.get_legend_handles_labels()[0]:
        ax.legend(loc="best")
    return fig


def save_charge_histogram(
    mset: MeasurementSet,
    out_dir: str | Path,
    stats: Optional[ChargeStatistics] = None,
) -> Path:
    """Write ``<out_dir>/<file stem>_hist.png`` and return its path."""
    out = Path(out_dir).expanduser()
    out.mkdir(parents=True, exist_ok=True)
    path = out / f"{mset.source_path.stem}_hist.png"
    fig = build_charge_histogram(mset, stats)
    fig.savefig(path, dpi=100)
    return path
