from lawsuits.mapping.mapper import (
    MAX_REPRESENTATIVES_PER_PARTY,
    clean_text,
    normalize_role,
    to_detail,
    to_summary,
)
from lawsuits.mapping.views import LawsuitDetail, LawsuitSummary

__all__ = [
    'MAX_REPRESENTATIVES_PER_PARTY',
    'clean_text',
    'normalize_role',
    'to_detail',
    'to_summary',
    'LawsuitDetail',
    'LawsuitSummary',
]
