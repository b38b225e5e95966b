import logging
from typing import Optional

from flask import current_app
from pydantic import ValidationError

from lawsuits.api import config
from lawsuits.repository import LawsuitRepository
from lawsuits.service import LawsuitService

logger = logging.getLogger("api")

EXTENSION_KEY = "lawsuits"


def load_repository(path: Optional[str] = None) -> LawsuitRepository:
    """Load the dataset from disk. Errors propagate so the app never starts half-ready."""
    data_path = path or config.DATA_PATH
    repository = LawsuitRepository.from_file(data_path)
    logger.info(f"[api] Dataset ready: {len(repository)} lawsuits from {data_path}")
    return repository


def get_service() -> LawsuitService:
    return current_app.extensions[EXTENSION_KEY]


def validation_message(ve: ValidationError) -> str:
    parts = []
    for err in ve.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "query"
        parts.append(f"{loc}: {err.get('msg')}")
    return "; ".join(parts)
