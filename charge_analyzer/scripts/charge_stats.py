"""
Charge statistics driver.

Loads each charge file in turn, skips corrupt lines, and prints the mean with its
error and the sample standard deviation per file.

Examples
--------
Non-interactive::

    python -m charge_analyzer.scripts.charge_stats millikan.dat run2.dat --no-pause

Interactive (prompts for file names)::

    python -m charge_analyzer.scripts.charge_stats

Exit status: 0 on success, 1 if a file could not be opened (remaining files are not
processed), 2 if a file had too few valid values or no file was given.
"""

from __future__ import annotations

import argparse
import codecs
import sys
from pathlib import Path
from typing import Callable, List, Optional, Sequence, TextIO, Tuple

from charge_analyzer.analysis.statistics import SEM_FORMULAS, InsufficientDataError, summarize_charges
from charge_analyzer.console.log_view import ConsoleLog
from charge_analyzer.console.prompts import prompt_filenames
from charge_analyzer.console.report import format_statistics, summary_frame
from charge_analyzer.ingest.readers_charge import ChargeFileOpenError, ChargeFileReader, ChargeReaderConfig
from charge_analyzer.models.frames import MeasurementSet
from charge_analyzer.models.results import ChargeStatistics


EXIT_OK = 0
EXIT_OPEN_FAILED = 1
EXIT_INSUFFICIENT = 2


def _encoding(name: str) -> str:
    try:
        codecs.lookup(name)
    except LookupError:
        raise argparse.ArgumentTypeError(f"unknown encoding: {name!r}") from None
    return name


def _wait_for_ack(read_line: Callable[[], str], out: TextIO) -> None:
    print("Press any key to exit...", file=out)
    try:
        read_line()
    except EOFError:
        return


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    read_line: Callable[[], str] = input,
    out: Optional[TextIO] = None,
) -> int:
    import textwrap

    p = argparse.ArgumentParser(
        prog="python -m charge_analyzer.scripts.charge_stats",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description=textwrap.dedent(
            """\
            Compute mean, standard deviation and standard error of the mean of
            charge measurements, one file at a time.

            Each file holds one non-negative number per line. Lines that are blank,
            unparseable, negative or followed by extra text are skipped with a notice.
            With no FILE arguments the program asks for file names interactively.
            """
        ),
    )
    p.add_argument("files", nargs="*", metavar="FILE", help="Charge data files, processed in order")
    p.add_argument(
        "--sem",
        choices=SEM_FORMULAS,
        default="mean",
        help="Error reported next to the mean: 'mean' = mean/sqrt(n) (default), 'std' = std/sqrt(n)",
    )
    p.add_argument("--encoding", type=_encoding, default="utf-8", help="Text encoding of the input files (default: utf-8)")
    p.add_argument("--out-csv", default=None, help="Write a per-file summary table to this CSV path")
    p.add_argument("--plot-dir", default=None, help="Write one histogram PNG per file into this directory")
    p.add_argument("--no-pause", action="store_true", help="Do not wait for a key press before exiting")

    ns = p.parse_args(list(argv) if argv is not None else None)

    out = out if out is not None else sys.stdout
    log = ConsoleLog(out)

    def finish(status: int) -> int:
        if not ns.no_pause:
            _wait_for_ack(read_line, out)
        return status

    files: List[str] = list(ns.files)
    if not files:
        print("Welcome to the charge calculator!", file=out)
        files = prompt_filenames(read_line, out)
    if not files:
        log.error("no files to analyze")
        return finish(EXIT_INSUFFICIENT)

    reader = ChargeFileReader(ChargeReaderConfig(encoding=ns.encoding), log=log)
    results: List[Tuple[MeasurementSet, ChargeStatistics]] = []
    status = EXIT_OK

    for name in files:
        try:
            mset = reader.read(name)
        except ChargeFileOpenError as exc:
            print(f"Could not open file: {name}.", file=out)
            if exc.reason:
                log.error(exc.reason)
            print("Exiting...", file=out)
            return finish(EXIT_OPEN_FAILED)

        try:
            stats = summarize_charges(mset, sem_formula=ns.sem)
        except InsufficientDataError as exc:
            log.error(f"{name}: {exc} ({mset.n_rejected} of {mset.n_lines} lines skipped)")
            status = EXIT_INSUFFICIENT
            continue

        print(format_statistics(stats, label=name), file=out)
        results.append((mset, stats))

        if ns.plot_dir:
            from charge_analyzer.presentation.plots import save_charge_histogram

            png = save_charge_histogram(mset, ns.plot_dir, stats)
            log.info(f"wrote: {png}")

    if ns.out_csv:
        out_csv = Path(ns.out_csv).expanduser()
        out_csv.parent.mkdir(parents=True, exist_ok=True)
        summary_frame(results).to_csv(out_csv, index=False)
        log.info(f"wrote: {out_csv}")

    return finish(status)


if __name__ == "__main__":
    raise SystemExit(main())
