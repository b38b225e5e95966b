"""Normalization of raw lawsuit records into summary and detail views.

Both mappers are pure. Missing optional structures degrade to ``None`` or an
empty list; the only fatal condition is a case without proceedings, which the
proceeding selector rejects.
"""
from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from lawsuits.ingest.schemas import CourtRaw, LawsuitRaw, PartyRaw, ProceedingRaw
from lawsuits.mapping.views import (
    CurrentProceeding,
    LastMovementDetail,
    LastMovementSummary,
    LawsuitDetail,
    LawsuitSummary,
    PartiesSummary,
    PartyDetail,
    Representative,
)
from lawsuits.rules.proceeding_selector import select_current

MAX_REPRESENTATIVES_PER_PARTY = 5

ROLE_ACTIVE = 'ativo'
ROLE_PASSIVE = 'passivo'


def clean_text(value: Optional[str]) -> Optional[str]:
    """Trimmed text, or None when empty after trimming."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def normalize_role(polo: Optional[str]) -> str:
    """Lowercase role; anything other than ativo/passivo falls back to ativo."""
    normalized = (polo or '').strip().lower()
    return normalized if normalized in (ROLE_ACTIVE, ROLE_PASSIVE) else ROLE_ACTIVE


def collect_parties(proceedings: Sequence[ProceedingRaw]) -> List[PartyRaw]:
    """Parties of every proceeding, in proceeding order."""
    return [party for p in proceedings for party in p.partes]


def _names_for_role(parties: Iterable[PartyRaw], role: str) -> List[str]:
    names = []
    for party in parties:
        if (party.polo or '').strip().lower() != role:
            continue
        name = clean_text(party.nome)
        if name:
            names.append(name)
    return names


def _descriptions(entries) -> List[str]:
    return [d for d in (clean_text(e.descricao) for e in entries) if d]


def _first_description(entries) -> Optional[str]:
    return clean_text(entries[0].descricao) if entries else None


def _court_name(court: Optional[CourtRaw]) -> Optional[str]:
    return clean_text(court.nome) if court is not None else None


def last_movement_court(proceeding: ProceedingRaw) -> Optional[str]:
    movement = proceeding.ultimo_movimento
    if movement is None or not movement.orgao_julgador:
        return None
    return _court_name(movement.orgao_julgador[0])


def resolve_court(proceeding: ProceedingRaw) -> Optional[str]:
    """Judging court: last movement's first court, else the proceeding's own."""
    return last_movement_court(proceeding) or _court_name(proceeding.orgao_julgador)


def movement_code(code) -> Optional[str]:
    if code is None:
        return None
    return clean_text(str(code))


def _map_party(party: PartyRaw) -> Optional[PartyDetail]:
    name = clean_text(party.nome)
    if name is None:
        return None
    representatives = []
    # Cap applies to the raw list; blank names inside the cap are then dropped
    for rep in party.representantes[:MAX_REPRESENTATIVES_PER_PARTY]:
        rep_name = clean_text(rep.nome)
        if rep_name is not None:
            representatives.append(Representative(nome=rep_name, tipo=clean_text(rep.tipo_representacao)))
    return PartyDetail(
        nome=name,
        polo=normalize_role(party.polo),
        tipo_parte=clean_text(party.tipo_parte) or clean_text(party.tipo_pessoa),
        representantes=representatives,
    )


def to_summary(lawsuit: LawsuitRaw) -> LawsuitSummary:
    current = select_current(lawsuit.tramitacoes)
    parties = collect_parties(lawsuit.tramitacoes)

    movement = current.ultimo_movimento
    movement_summary = None
    if movement is not None:
        movement_summary = LastMovementSummary(
            data_hora=clean_text(movement.data_hora),
            descricao=clean_text(movement.descricao),
            orgao_julgador=last_movement_court(current),
        )

    return LawsuitSummary(
        numero_processo=lawsuit.numero_processo,
        sigla_tribunal=lawsuit.sigla_tribunal,
        grau_atual=current.grau.sigla,
        classe_principal=_first_description(current.classe),
        assunto_principal=_first_description(current.assunto),
        ultimo_movimento=movement_summary,
        partes_resumo=PartiesSummary(
            ativo=_names_for_role(parties, ROLE_ACTIVE),
            passivo=_names_for_role(parties, ROLE_PASSIVE),
        ),
    )


def to_detail(lawsuit: LawsuitRaw) -> LawsuitDetail:
    current = select_current(lawsuit.tramitacoes)
    parties = collect_parties(lawsuit.tramitacoes)
    court = resolve_court(current)

    movement = current.ultimo_movimento
    movement_detail = None
    if movement is not None:
        movement_detail = LastMovementDetail(
            data=clean_text(movement.data_hora),
            descricao=clean_text(movement.descricao),
            orgao_julgador=court,
            codigo=movement_code(movement.codigo),
        )

    return LawsuitDetail(
        numero_processo=lawsuit.numero_processo,
        sigla_tribunal=lawsuit.sigla_tribunal,
        nivel_sigilo=lawsuit.nivel_sigilo,
        tramitacao_atual=CurrentProceeding(
            grau=current.grau.sigla,
            orgao_julgador=court,
            classes=_descriptions(current.classe),
            assuntos=_descriptions(current.assunto),
            data_distribuicao=clean_text(current.data_hora_ultima_distribuicao),
            data_autuacao=clean_text(current.data_hora_ajuizamento),
        ),
        partes=[d for d in (_map_party(p) for p in parties) if d is not None],
        ultimo_movimento=movement_detail,
    )
