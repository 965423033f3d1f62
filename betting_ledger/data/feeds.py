"""Lettura dei feed operazioni e partite."""

from pathlib import Path
from typing import List, Sequence, Union
import logging
import math

import pandas as pd

from ..betting.match import Match, Side, parse_result
from ..betting.operations import Operation, OperationType

logger = logging.getLogger(__name__)

OPERATION_COLUMNS = ["player_id", "operation", "match_id", "amount", "side"]
MATCH_COLUMNS = ["match_id", "rate_a", "rate_b", "result"]


class FeedError(ValueError):
    """Riga del feed non valida."""

    def __init__(self, message: str, source: str = "<feed>", line: int = 0):
        self.source = source
        self.line = line
        super().__init__(f"{source}:{line}: {message}")


def parse_operation(fields: Sequence[str], source: str = "<feed>", line: int = 0) -> Operation:
    """
    Converte una riga già divisa del feed operazioni.

    Formato: player_id,operation,match_id_o_vuoto,importo,lato_opzionale

    Raises:
        FeedError: se la riga non è valida
    """
    fields = [str(f).strip() for f in fields]
    if not 4 <= len(fields) <= len(OPERATION_COLUMNS):
        raise FeedError(f"attesi 4 o 5 campi, trovati {len(fields)}", source, line)
    fields += [""] * (len(OPERATION_COLUMNS) - len(fields))

    player_id, op_name, match_id, amount, side = fields
    if not player_id:
        raise FeedError("ID giocatore mancante", source, line)

    try:
        operation = OperationType(op_name.upper())
    except ValueError:
        raise FeedError(f"operazione sconosciuta: {op_name!r}", source, line) from None

    try:
        if operation == OperationType.BET:
            if not match_id:
                raise FeedError("ID partita mancante per BET", source, line)
            size = float(amount)
            if not math.isfinite(size) or size <= 0:
                raise FeedError(f"importo della puntata non valido: {amount!r}", source, line)
            return Operation(player_id, operation, size,
                             match_id=match_id, side=Side.parse(side))

        value = int(amount)
        if value < 0:
            raise FeedError(f"importo negativo: {amount!r}", source, line)
        return Operation(player_id, operation, value)
    except FeedError:
        raise
    except ValueError as e:
        raise FeedError(str(e), source, line) from e


def parse_match(fields: Sequence[str], source: str = "<feed>", line: int = 0) -> Match:
    """
    Converte una riga già divisa del feed partite.

    Formato: match_id,quota_a,quota_b,risultato (A, B o DRAW)
    """
    fields = [str(f).strip() for f in fields]
    if len(fields) != len(MATCH_COLUMNS):
        raise FeedError(f"attesi {len(MATCH_COLUMNS)} campi, trovati {len(fields)}", source, line)

    match_id, rate_a, rate_b, result = fields
    try:
        match = Match(match_id, float(rate_a), float(rate_b), parse_result(result))
    except ValueError as e:
        raise FeedError(str(e), source, line) from e

    if not all(math.isfinite(r) and r > 0 for r in (match.rate_a, match.rate_b)):
        raise FeedError("le quote devono essere positive", source, line)
    return match


def _read_rows(path: Union[str, Path], columns: List[str]) -> pd.DataFrame:
    """Legge un file separato da virgole senza intestazione, tutto come stringhe."""
    try:
        df = pd.read_csv(
            path,
            header=None,
            names=columns,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            on_bad_lines="error",
        )
    except pd.errors.EmptyDataError:
        return pd.DataFrame(columns=columns)
    except pd.errors.ParserError as e:
        raise FeedError(f"troppi campi: {e}", str(path)) from e

    # Se la prima riga ha più campi delle colonne, pandas usa quelli in eccesso come indice
    if not isinstance(df.index, pd.RangeIndex):
        raise FeedError(f"troppi campi: attesi al massimo {len(columns)}", str(path), 1)
    return df.fillna("")


def read_operations(path: Union[str, Path]) -> List[Operation]:
    """Legge il feed delle operazioni dei giocatori."""
    df = _read_rows(path, OPERATION_COLUMNS)
    operations = [
        parse_operation(row, str(path), line)
        for line, row in enumerate(df.itertuples(index=False, name=None), start=1)
    ]
    logger.info(f"Caricate {len(operations)} operazioni da {path}")
    return operations


def read_matches(path: Union[str, Path]) -> List[Match]:
    """Legge il feed delle partite."""
    df = _read_rows(path, MATCH_COLUMNS)
    matches = [
        parse_match(row, str(path), line)
        for line, row in enumerate(df.itertuples(index=False, name=None), start=1)
    ]
    logger.info(f"Caricate {len(matches)} partite da {path}")
    return matches
