"""Deterministic selection of the proceeding that represents a case's current state.

Selection rule:
 1. Only active proceedings compete; with none active, the first proceeding wins.
 2. Most recent ``dataHoraUltimaDistribuicao`` first. A proceeding with a
    distribution date always ranks above one without.
 3. Ties go to the higher degree ordinal (G2 over G1).
 4. Remaining ties keep the original list order.

The result is derived on every call and is never stored on the record.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional, Sequence, Tuple

from lawsuits.errors import InvalidInputError
from lawsuits.ingest.schemas import ProceedingRaw


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """ISO-8601 timestamp as an aware datetime; None when absent or unparsable."""
    if not value:
        return None
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def recency(proceeding: ProceedingRaw) -> Optional[datetime]:
    return parse_timestamp(proceeding.data_hora_ultima_distribuicao)


def _rank(proceeding: ProceedingRaw) -> Tuple[int, float, int]:
    ts = recency(proceeding)
    has_signal = 0 if ts is not None else 1
    newest_first = -ts.timestamp() if ts is not None else 0.0
    return (has_signal, newest_first, -proceeding.grau.numero)


def select_current(proceedings: Optional[Sequence[ProceedingRaw]]) -> ProceedingRaw:
    if not proceedings:
        raise InvalidInputError("Empty proceedings list")

    active = [p for p in proceedings if p.ativo is True]
    if not active:
        return proceedings[0]

    # sorted() is stable, so equal ranks keep their original order
    return sorted(active, key=_rank)[0]
