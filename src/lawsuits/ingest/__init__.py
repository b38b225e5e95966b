"""Ingestion of the raw lawsuit document."""

from lawsuits.ingest.loader import load_dataset, parse_document
from lawsuits.ingest.schemas import (
    ClassRaw,
    CourtRaw,
    Degree,
    LastMovementRaw,
    LawsuitRaw,
    LawsuitsDocument,
    PartyRaw,
    ProceedingRaw,
    RepresentativeRaw,
    SubjectRaw,
    degree_ordinal,
    to_degree,
)

__all__ = [
    "load_dataset",
    "parse_document",
    "ClassRaw",
    "CourtRaw",
    "Degree",
    "LastMovementRaw",
    "LawsuitRaw",
    "LawsuitsDocument",
    "PartyRaw",
    "ProceedingRaw",
    "RepresentativeRaw",
    "SubjectRaw",
    "degree_ordinal",
    "to_degree",
]
