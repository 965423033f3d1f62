"""Conto giocatore: saldo e statistiche delle scommesse."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

WIN_RATE_PRECISION = Decimal("0.01")


@dataclass
class Player:
    """Conto di un giocatore nel ledger."""

    player_id: str
    balance: int = 0  # Può andare in negativo (conto irregolare)
    total_bets: int = 0
    won_bets: int = 0

    def deposit(self, amount: int):
        """Accredita un deposito sul saldo."""
        self.balance += amount

    def withdraw(self, amount: int) -> bool:
        """
        Preleva dal saldo se i fondi sono sufficienti.

        Returns:
            True se il prelievo è stato eseguito, False altrimenti
            (saldo invariato)
        """
        if amount <= self.balance:
            self.balance -= amount
            return True
        return False

    def settle_bet(self, amount: float, won: bool):
        """
        Registra l'esito di una scommessa.

        La puntata viene applicata senza controllare il saldo: il controllo
        dei fondi spetta al motore di regolamento. L'importo è troncato
        verso lo zero prima di toccare il saldo.

        Args:
            amount: Importo della puntata
            won: Se la scommessa è stata vinta
        """
        self.total_bets += 1
        if won:
            self.won_bets += 1
            self.balance += int(amount)
        else:
            self.balance -= int(amount)

    def win_rate(self) -> Decimal:
        """Percentuale di vittorie arrotondata a due decimali (0 se nessuna scommessa)."""
        if self.total_bets == 0:
            return Decimal(0)
        rate = Decimal(self.won_bets) / Decimal(self.total_bets)
        return rate.quantize(WIN_RATE_PRECISION, rounding=ROUND_HALF_UP)

    @property
    def is_legitimate(self) -> bool:
        return self.balance >= 0
