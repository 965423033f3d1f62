"""Simulatore di ledger per scommesse sportive."""

__version__ = "0.1.0"
