import logging
from typing import Optional

from lawsuits.errors import NotFoundError
from lawsuits.mapping.mapper import to_detail, to_summary
from lawsuits.mapping.views import LawsuitDetail, LawsuitSummary
from lawsuits.pagination.cursor import DEFAULT_LIMIT, Page, paginate
from lawsuits.repository import LawsuitRepository
from lawsuits.search.engine import detect_degree_shorthand, filter_by_degree

logger = logging.getLogger(__name__)


class LawsuitService:
    """Composes search, normalization, degree filtering and pagination."""

    def __init__(self, repository: LawsuitRepository):
        self.repository = repository

    def find_all(
        self,
        q: Optional[str] = None,
        tribunal: Optional[str] = None,
        grau: Optional[str] = None,
        cursor: Optional[str] = None,
        limit: Optional[int] = DEFAULT_LIMIT,
    ) -> Page[LawsuitSummary]:
        """Paginated summaries matching the filters.

        A free-text query of the form ``G<digits>`` is read as a degree filter
        and skipped by the text search. The degree filter runs on the derived
        current degree, after normalization; an explicit ``grau`` wins over
        the shorthand.
        """
        shorthand = detect_degree_shorthand(q)
        text_query = None if shorthand else q
        degree = grau if grau and grau.strip() else shorthand

        matches = self.repository.search(text_query, tribunal)
        summaries = [to_summary(lawsuit) for lawsuit in matches]
        if degree:
            summaries = filter_by_degree(summaries, degree)

        page = paginate(summaries, cursor, limit)
        logger.debug(
            "find_all q=%r tribunal=%r grau=%r -> %d matches, %d on page",
            q, tribunal, degree, len(summaries), len(page.items),
        )
        return page

    def find_by_case_number(self, numero_processo: str) -> LawsuitDetail:
        lawsuit = self.repository.find_by_case_number(numero_processo)
        if lawsuit is None:
            raise NotFoundError(f"Lawsuit with number {numero_processo} not found")
        return to_detail(lawsuit)
