"""Modulo report."""

from .results_report import ResultsReport

__all__ = ["ResultsReport"]
