"""Ledger analytics: period summaries, rollups and net worth series."""

__version__ = "0.1.0"
