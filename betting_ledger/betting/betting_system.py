"""Ledger delle scommesse e motore di regolamento."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional
import logging

from .match import Match, Side
from .operations import Operation, OperationType
from .player import Player

logger = logging.getLogger(__name__)


class BetOutcome(str, Enum):
    WON = "WON"
    LOST = "LOST"


class SettlementStatus(str, Enum):
    SETTLED = "SETTLED"
    INVALID_REFERENCE = "INVALID_REFERENCE"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"


@dataclass
class BetSettlement:
    """Esito di una richiesta di scommessa."""

    player_id: str
    match_id: str
    side: Side
    bet_size: float
    status: SettlementStatus
    outcome: Optional[BetOutcome] = None
    casino_delta: int = 0
    balance_after: Optional[int] = None

    @property
    def settled(self) -> bool:
        return self.status == SettlementStatus.SETTLED


class BettingSystem:
    """
    Ledger che possiede giocatori, partite e saldo del casinò.

    Il saldo del casinò si muove solo sulle scommesse vinte dai giocatori:
    le perdite non vengono contabilizzate.
    """

    def __init__(self):
        self.players: Dict[str, Player] = {}
        self.matches: Dict[str, Match] = {}
        self.casino_balance: int = 0
        self.history: List[BetSettlement] = []

    def add_player(self, player_id: str) -> Player:
        """Ritorna il giocatore, creandolo con saldo zero al primo riferimento."""
        player = self.players.get(player_id)
        if player is None:
            player = Player(player_id)
            self.players[player_id] = player
            logger.debug(f"Nuovo giocatore: {player_id}")
        return player

    def add_match(self, match_id: str, rate_a: float, rate_b: float,
                  result: Optional[Side]) -> Match:
        """Registra una partita (sostituisce un eventuale duplicato)."""
        match = Match(match_id, rate_a, rate_b, result)
        self.matches[match_id] = match
        return match

    def deposit(self, player_id: str, amount: int):
        self.add_player(player_id).deposit(amount)

    def withdraw(self, player_id: str, amount: int) -> bool:
        return self.add_player(player_id).withdraw(amount)

    def process_bet(self, player_id: str, match_id: str, side: Side,
                    bet_size: float) -> BetSettlement:
        """
        Valida e regola una scommessa.

        Nessuna modifica di stato se il giocatore o la partita non esistono,
        oppure se la puntata supera il saldo attuale del giocatore.

        Args:
            player_id: ID del giocatore
            match_id: ID della partita
            side: Lato su cui si punta
            bet_size: Importo della puntata

        Returns:
            BetSettlement con stato ed esito
        """
        player = self.players.get(player_id)
        match = self.matches.get(match_id)

        if player is None or match is None:
            logger.warning(f"Riferimento non valido: giocatore {player_id}, partita {match_id}")
            return self._record(BetSettlement(
                player_id, match_id, side, bet_size, SettlementStatus.INVALID_REFERENCE
            ))

        if bet_size > player.balance:
            logger.warning(
                f"Operazione illegale: saldo insufficiente per {player_id} "
                f"(puntata {bet_size}, saldo {player.balance})"
            )
            return self._record(BetSettlement(
                player_id, match_id, side, bet_size, SettlementStatus.INSUFFICIENT_FUNDS,
                balance_after=player.balance
            ))

        outcome = BetOutcome.WON if match.is_winner(side) else BetOutcome.LOST
        player.settle_bet(bet_size, outcome == BetOutcome.WON)
        delta = self._book_casino(outcome, match, side, bet_size)

        logger.info(
            f"Scommessa regolata: {player_id} su {match_id} ({side.value}) "
            f"{outcome.value} - saldo {player.balance}"
        )
        return self._record(BetSettlement(
            player_id, match_id, side, bet_size, SettlementStatus.SETTLED,
            outcome=outcome, casino_delta=delta, balance_after=player.balance
        ))

    def _book_casino(self, outcome: BetOutcome, match: Match, side: Side,
                     bet_size: float) -> int:
        """Aggiorna il saldo del casinò secondo l'esito; ritorna la variazione effettiva."""
        if outcome == BetOutcome.LOST:
            return 0

        before = self.casino_balance
        # Accumulatore intero: troncamento dopo la somma
        self.casino_balance = int(before + bet_size * (match.odds_for(side) - 1))
        return self.casino_balance - before

    def _record(self, settlement: BetSettlement) -> BetSettlement:
        self.history.append(settlement)
        return settlement

    def apply(self, operation: Operation) -> Optional[BetSettlement]:
        """Esegue una singola operazione del feed."""
        if operation.operation == OperationType.DEPOSIT:
            self.deposit(operation.player_id, int(operation.amount))
            return None

        if operation.operation == OperationType.WITHDRAW:
            if not self.withdraw(operation.player_id, int(operation.amount)):
                logger.info(
                    f"Prelievo rifiutato per {operation.player_id}: "
                    f"importo {int(operation.amount)} oltre il saldo"
                )
            return None

        # Anche chi punta soltanto compare nel report
        self.add_player(operation.player_id)
        return self.process_bet(
            operation.player_id, operation.match_id, operation.side, operation.amount
        )

    def replay(self, operations: Iterable[Operation]) -> int:
        """Esegue le operazioni in ordine di input; ritorna quante ne ha eseguite."""
        count = 0
        for operation in operations:
            self.apply(operation)
            count += 1
        logger.info(f"Eseguite {count} operazioni, saldo casinò {self.casino_balance}")
        return count

    def first_illegitimate_player(self) -> Optional[Player]:
        """Primo giocatore (in ordine di inserimento) con saldo negativo."""
        return next((p for p in self.players.values() if not p.is_legitimate), None)

    def get_statistics(self) -> Dict:
        """Ritorna statistiche del ledger."""
        settled = [s for s in self.history if s.settled]
        wins = sum(1 for s in settled if s.outcome == BetOutcome.WON)

        return {
            "players": len(self.players),
            "matches": len(self.matches),
            "total_bets": len(settled),
            "rejected_bets": len(self.history) - len(settled),
            "wins": wins,
            "losses": len(settled) - wins,
            "total_staked": sum(s.bet_size for s in settled),
            "casino_balance": self.casino_balance,
        }
