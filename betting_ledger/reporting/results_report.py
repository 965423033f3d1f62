"""Generazione del report finale dei conti."""

from pathlib import Path
from typing import Union
import logging

import pandas as pd

from ..betting.betting_system import BettingSystem

logger = logging.getLogger(__name__)


class ResultsReport:
    """Report dei giocatori e della variazione di saldo del casinò."""

    def __init__(self, system: BettingSystem):
        self.system = system

    def generate_text(self) -> str:
        """
        Genera il report testuale in tre sezioni.

        Nella sezione dei giocatori irregolari compare solo il primo
        giocatore con saldo negativo.
        """
        lines = ["Legitimate Players:"]
        for player in self.system.players.values():
            lines.append(f"{player.player_id} {player.balance} {player.win_rate()}")
        lines.append("")

        lines.append("Illegitimate Players:")
        offender = self.system.first_illegitimate_player()
        if offender is not None:
            lines.append(f"{offender.player_id} BET null null null {offender.balance}")
        lines.append("")

        lines.append("Casino Balance Change:")
        lines.append(str(self.system.casino_balance))

        return "\n".join(lines) + "\n"

    def write(self, output_path: Union[str, Path]):
        """Scrive il report testuale su file."""
        path = Path(output_path)
        if path.parent != Path("."):
            path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.generate_text(), encoding="utf-8")
        logger.info(f"Report scritto in {path}")

    def to_dataframe(self) -> pd.DataFrame:
        """Tabella dei giocatori con saldo e statistiche."""
        rows = [
            {
                "player_id": p.player_id,
                "balance": p.balance,
                "total_bets": p.total_bets,
                "won_bets": p.won_bets,
                "win_rate": float(p.win_rate()),
                "legitimate": p.is_legitimate,
            }
            for p in self.system.players.values()
        ]
        return pd.DataFrame(rows, columns=[
            "player_id", "balance", "total_bets", "won_bets", "win_rate", "legitimate"
        ])

    def export_to_csv(self, path: Union[str, Path]):
        """Esporta la tabella dei giocatori in CSV."""
        self.to_dataframe().to_csv(path, index=False)
        logger.info(f"Giocatori esportati in {path}")
