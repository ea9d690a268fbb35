"""Replay of a computer club's daily event log, with an event report and per-table revenue."""

__version__ = "0.1.0"