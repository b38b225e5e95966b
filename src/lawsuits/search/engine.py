import re
import logging
from typing import Iterator, List, Optional, Sequence

from lawsuits.ingest.schemas import LawsuitRaw
from lawsuits.mapping.views import LawsuitSummary

logger = logging.getLogger(__name__)

DEGREE_SHORTHAND = re.compile(r'^[Gg]\d+$')


def detect_degree_shorthand(query: Optional[str]) -> Optional[str]:
    """Return the degree (upper-cased) when the free text is exactly ``G<digits>``."""
    if not query:
        return None
    text = query.strip()
    return text.upper() if DEGREE_SHORTHAND.match(text) else None


def _searchable_text(lawsuit: LawsuitRaw) -> Iterator[str]:
    yield lawsuit.numero_processo
    yield lawsuit.sigla_tribunal
    for p in lawsuit.tramitacoes:
        for party in p.partes:
            if party.nome:
                yield party.nome
        for c in p.classe:
            if c.descricao:
                yield c.descricao
        for s in p.assunto:
            if s.descricao:
                yield s.descricao


def matches_text(lawsuit: LawsuitRaw, needle: str) -> bool:
    return any(needle in field.lower() for field in _searchable_text(lawsuit))


def search(records: Sequence[LawsuitRaw], text_query: Optional[str] = None,
           tribunal: Optional[str] = None) -> List[LawsuitRaw]:
    """Filter raw records by free text and tribunal, keeping dataset order.

    The degree filter is not applied here: it must run on the derived current
    degree, see :func:`filter_by_degree`.
    """
    filtered = list(records)

    needle = (text_query or '').strip().lower()
    if needle:
        filtered = [r for r in filtered if matches_text(r, needle)]

    tribunal_upper = (tribunal or '').strip().upper()
    if tribunal_upper:
        filtered = [r for r in filtered if r.sigla_tribunal.upper() == tribunal_upper]

    logger.debug("search q=%r tribunal=%r -> %d of %d", text_query, tribunal, len(filtered), len(records))
    return filtered


def filter_by_degree(summaries: Sequence[LawsuitSummary], degree: Optional[str]) -> List[LawsuitSummary]:
    wanted = (degree or '').strip().upper()
    if not wanted:
        return list(summaries)
    return [s for s in summaries if s.grau_atual.upper() == wanted]
