"""Console package - terminal collaborators of the charge statistics driver.

This package provides:
1. ConsoleLog: leveled log sink writing to a text stream
2. Yes/no answer parsing and the interactive filename prompt loop
3. Text rendering of per-file results

Entry point for the full program:
    python -m charge_analyzer.scripts.charge_stats
"""
