import os
import json
import logging
from typing import Any, Dict, Tuple

from pydantic import ValidationError

from lawsuits.errors import DatasetLoadError
from lawsuits.ingest.schemas import LawsuitRaw, LawsuitsDocument

logger = logging.getLogger(__name__)


def _read_json(path: str) -> Any:
    try:
        with open(os.path.abspath(path), 'r', encoding='utf-8') as f:
            return json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise DatasetLoadError(f"Error loading JSON file: {path}. {e}") from e


def _describe(ve: ValidationError, limit: int = 3) -> str:
    parts = []
    for err in ve.errors()[:limit]:
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc}: {err.get('msg')}")
    more = ve.error_count() - limit
    if more > 0:
        parts.append(f"... and {more} more")
    return "; ".join(parts)


def parse_document(data: Any, source: str = "<memory>") -> Tuple[LawsuitRaw, ...]:
    """Validate a parsed ``{"content": [...]}`` document into frozen records.

    Records without proceedings and repeated case numbers are rejected here,
    so the rest of the application can rely on every case having at least one
    proceeding and a unique number.
    """
    if not isinstance(data, dict):
        raise DatasetLoadError(f"Invalid dataset in {source}: expected a JSON object with 'content'")
    if "content" not in data:
        logger.warning("Dataset %s has no 'content' key, loading zero lawsuits", source)
    try:
        document = LawsuitsDocument.model_validate(data)
    except ValidationError as ve:
        raise DatasetLoadError(f"Invalid dataset in {source}: {_describe(ve)}") from ve

    # Case numbers key both the detail lookup and the pagination cursor
    seen: Dict[str, int] = {}
    for idx, lawsuit in enumerate(document.content):
        if lawsuit.numero_processo in seen:
            raise DatasetLoadError(
                f"Invalid dataset in {source}: duplicate case number {lawsuit.numero_processo} "
                f"at positions {seen[lawsuit.numero_processo]} and {idx}"
            )
        seen[lawsuit.numero_processo] = idx
    return document.content


def load_dataset(path: str) -> Tuple[LawsuitRaw, ...]:
    """Load the lawsuit dataset once; raises DatasetLoadError on any failure."""
    records = parse_document(_read_json(path), source=path)
    logger.info(f"[ingest] Loaded {len(records)} lawsuits from {path}")
    return records
