"""Operazioni dei giocatori lette dal feed."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .match import Side


class OperationType(str, Enum):
    DEPOSIT = "DEPOSIT"
    WITHDRAW = "WITHDRAW"
    BET = "BET"


@dataclass(frozen=True)
class Operation:
    """Una riga del feed operazioni, già validata."""

    player_id: str
    operation: OperationType
    amount: float  # Intero per DEPOSIT/WITHDRAW, decimale per BET
    match_id: Optional[str] = None
    side: Optional[Side] = None
