"""Modulo per conti, partite e regolamento delle scommesse."""

from .betting_system import BetOutcome, BetSettlement, BettingSystem, SettlementStatus
from .match import Match, Side
from .operations import Operation, OperationType
from .player import Player

__all__ = [
    "BettingSystem",
    "BetSettlement",
    "BetOutcome",
    "SettlementStatus",
    "Match",
    "Side",
    "Operation",
    "OperationType",
    "Player",
]
