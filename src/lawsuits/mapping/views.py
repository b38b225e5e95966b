"""Output shapes of the list (summary) and detail endpoints.

Attributes are snake_case; ``model_dump(by_alias=True)`` yields the camelCase
keys clients consume (``numeroProcesso``, ``grauAtual``...).
"""
from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class View(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True)


class LastMovementSummary(View):
    data_hora: Optional[str] = None
    descricao: Optional[str] = None
    orgao_julgador: Optional[str] = None


class PartiesSummary(View):
    ativo: List[str] = []
    passivo: List[str] = []


class LawsuitSummary(View):
    numero_processo: str
    sigla_tribunal: str
    grau_atual: str
    classe_principal: Optional[str] = None
    assunto_principal: Optional[str] = None
    ultimo_movimento: Optional[LastMovementSummary] = None
    partes_resumo: PartiesSummary


class CurrentProceeding(View):
    grau: str
    orgao_julgador: Optional[str] = None
    classes: List[str] = []
    assuntos: List[str] = []
    data_distribuicao: Optional[str] = None
    data_autuacao: Optional[str] = None


class Representative(View):
    nome: str
    tipo: Optional[str] = None


class PartyDetail(View):
    nome: str
    polo: Literal['ativo', 'passivo']
    tipo_parte: Optional[str] = None
    representantes: List[Representative] = []


class LastMovementDetail(View):
    data: Optional[str] = None
    descricao: Optional[str] = None
    orgao_julgador: Optional[str] = None
    codigo: Optional[str] = None


class LawsuitDetail(View):
    numero_processo: str
    sigla_tribunal: str
    nivel_sigilo: int
    tramitacao_atual: CurrentProceeding
    partes: List[PartyDetail] = []
    ultimo_movimento: Optional[LastMovementDetail] = None
