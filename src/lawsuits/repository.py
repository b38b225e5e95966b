from typing import Dict, Iterable, List, Optional, Tuple

from lawsuits.errors import DatasetLoadError
from lawsuits.ingest.loader import load_dataset
from lawsuits.ingest.schemas import LawsuitRaw
from lawsuits.search.engine import search


class LawsuitRepository:
    """Read-only access to the lawsuit dataset loaded at start-up."""

    def __init__(self, lawsuits: Iterable[LawsuitRaw]):
        self._lawsuits: Tuple[LawsuitRaw, ...] = tuple(lawsuits)
        self._by_number: Dict[str, LawsuitRaw] = {}
        for lawsuit in self._lawsuits:
            if lawsuit.numero_processo in self._by_number:
                raise DatasetLoadError(f"Duplicate case number {lawsuit.numero_processo}")
            self._by_number[lawsuit.numero_processo] = lawsuit

    @classmethod
    def from_file(cls, path: str) -> "LawsuitRepository":
        return cls(load_dataset(path))

    def __len__(self) -> int:
        return len(self._lawsuits)

    def find_all(self) -> Tuple[LawsuitRaw, ...]:
        return self._lawsuits

    def find_by_case_number(self, numero_processo: str) -> Optional[LawsuitRaw]:
        return self._by_number.get(numero_processo)

    def search(self, query: Optional[str] = None, tribunal: Optional[str] = None) -> List[LawsuitRaw]:
        return search(self._lawsuits, query, tribunal)
