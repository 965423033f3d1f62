"""Partite e lati di scommessa."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

DRAW = "DRAW"


class Side(str, Enum):
    """Lato su cui si può puntare."""

    A = "A"
    B = "B"

    @classmethod
    def parse(cls, value: str) -> "Side":
        """Converte un token del feed in Side (ValueError se non è A o B)."""
        token = value.strip().upper()
        try:
            return cls(token)
        except ValueError:
            raise ValueError(f"Lato non valido: {value!r} (attesi A o B)") from None


def parse_result(value: str) -> Optional[Side]:
    """Converte il risultato di una partita: A, B oppure DRAW (nessun vincitore)."""
    if value.strip().upper() == DRAW:
        return None
    return Side.parse(value)


@dataclass(frozen=True)
class Match:
    """Quote e risultato di una partita (immutabile)."""

    match_id: str
    rate_a: float
    rate_b: float
    result: Optional[Side] = None  # None = pareggio / nessun vincitore

    def odds_for(self, side: Side) -> float:
        """Quota per il lato indicato."""
        return self.rate_a if side == Side.A else self.rate_b

    def outcome(self) -> Optional[Side]:
        return self.result

    def is_winner(self, side: Side) -> bool:
        return self.result == side
