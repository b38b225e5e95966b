"""Raw lawsuit schemas as they appear in the source JSON document.

The document uses camelCase keys (``numeroProcesso``, ``tramitacoes``...);
models expose snake_case attributes and accept either spelling. Every model is
frozen and every list is stored as a tuple so a loaded dataset cannot be
mutated after start-up.

The degree of a proceeding comes in two shapes: a structured object
``{sigla, nome, numero}`` and, in legacy records, a bare acronym such as
``"G2"``. Both are converted once, here, into :class:`Degree`.
"""
from __future__ import annotations

import re
from typing import Any, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

DEGREE_ACRONYM_PATTERN = re.compile(r"[Gg](\d+)")


class RawModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
        str_strip_whitespace=True,
    )


class Degree(RawModel):
    sigla: str = ""
    nome: Optional[str] = None
    numero: int = 0


def degree_ordinal(sigla: Optional[str], numero: Any = None) -> int:
    """Ordinal rank of a degree: structured number first, then ``G<digits>``, else 0."""
    if numero is not None and not isinstance(numero, bool):
        try:
            return int(numero)
        except (TypeError, ValueError):
            pass
    if sigla:
        match = DEGREE_ACRONYM_PATTERN.fullmatch(sigla.strip())
        if match:
            return int(match.group(1))
    return 0


def to_degree(value: Any) -> Degree:
    if isinstance(value, Degree):
        return value
    if isinstance(value, str):
        sigla = value.strip()
        return Degree(sigla=sigla, numero=degree_ordinal(sigla))
    if isinstance(value, dict):
        sigla = str(value.get("sigla") or "").strip()
        return Degree(
            sigla=sigla,
            nome=value.get("nome"),
            numero=degree_ordinal(sigla, value.get("numero")),
        )
    return Degree()


class ClassRaw(RawModel):
    codigo: Optional[Union[int, str]] = None
    descricao: Optional[str] = None


class SubjectRaw(RawModel):
    codigo: Optional[Union[int, str]] = None
    descricao: Optional[str] = None
    hierarquia: Optional[str] = None


class CourtRaw(RawModel):
    id: Optional[Union[int, str]] = None
    nome: Optional[str] = None


class LastMovementRaw(RawModel):
    data_hora: Optional[str] = None
    descricao: Optional[str] = None
    codigo: Optional[Union[int, str]] = None
    orgao_julgador: Tuple[CourtRaw, ...] = ()

    @field_validator("orgao_julgador", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return () if value is None else value


class RepresentativeRaw(RawModel):
    nome: Optional[str] = None
    tipo_representacao: Optional[str] = None


class PartyRaw(RawModel):
    polo: Optional[str] = None
    nome: Optional[str] = None
    tipo_parte: Optional[str] = None
    tipo_pessoa: Optional[str] = None
    representantes: Tuple[RepresentativeRaw, ...] = ()

    @field_validator("representantes", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return () if value is None else value


class ProceedingRaw(RawModel):
    grau: Degree = Field(default_factory=Degree)
    ativo: bool = False
    data_hora_ultima_distribuicao: Optional[str] = None
    data_hora_ajuizamento: Optional[str] = None
    classe: Tuple[ClassRaw, ...] = ()
    assunto: Tuple[SubjectRaw, ...] = ()
    orgao_julgador: Optional[CourtRaw] = None
    ultimo_movimento: Optional[LastMovementRaw] = None
    partes: Tuple[PartyRaw, ...] = ()

    @field_validator("grau", mode="before")
    @classmethod
    def _canonical_degree(cls, value):
        return to_degree(value)

    @field_validator("classe", "assunto", "partes", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return () if value is None else value


class LawsuitRaw(RawModel):
    numero_processo: str = Field(min_length=1)
    sigla_tribunal: str = ""
    nivel_sigilo: int = 0
    tramitacoes: Tuple[ProceedingRaw, ...] = Field(min_length=1)


class LawsuitsDocument(RawModel):
    content: Tuple[LawsuitRaw, ...] = ()


__all__ = [
    'Degree', 'ClassRaw', 'SubjectRaw', 'CourtRaw', 'LastMovementRaw',
    'RepresentativeRaw', 'PartyRaw', 'ProceedingRaw', 'LawsuitRaw',
    'LawsuitsDocument', 'degree_ordinal', 'to_degree',
]
