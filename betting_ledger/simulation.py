"""Esecuzione completa di una simulazione: feed -> ledger -> report."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union
import logging

from .betting.betting_system import BettingSystem
from .data.feeds import read_matches, read_operations
from .reporting.results_report import ResultsReport

logger = logging.getLogger(__name__)


@dataclass
class SimulationResult:
    """Risultati della simulazione."""
    system: BettingSystem
    report: ResultsReport
    operations: int
    output_path: Optional[Path] = None


class BettingSimulation:
    """Carica le partite, riesegue le operazioni e scrive il report."""

    def __init__(self,
                 player_data: Union[str, Path],
                 match_data: Union[str, Path],
                 results: Optional[Union[str, Path]] = None):
        self.player_data = Path(player_data)
        self.match_data = Path(match_data)
        self.results = Path(results) if results is not None else None

    def run(self) -> SimulationResult:
        """
        Esegue la simulazione.

        Un errore di I/O o una riga non valida interrompe l'esecuzione prima
        della scrittura del report.

        Raises:
            OSError: se un file non può essere letto o scritto
            FeedError: se un feed contiene righe non valide
        """
        system = BettingSystem()

        for match in read_matches(self.match_data):
            system.add_match(match.match_id, match.rate_a, match.rate_b, match.result)

        operations = system.replay(read_operations(self.player_data))

        report = ResultsReport(system)
        if self.results is not None:
            report.write(self.results)

        return SimulationResult(system, report, operations, self.results)
