"""Application queries package."""

from .get_glossary_term_query import GetGlossaryTermQuery, GetGlossaryTermQueryHandler
from .get_glossary_terms_query import GetGlossaryTermMatrixQuery, GetGlossaryTermMatrixQueryHandler, GetGlossaryTermsQuery, GetGlossaryTermsQueryHandler

__all__ = [
    "GetGlossaryTermsQuery",
    "GetGlossaryTermsQueryHandler",
    "GetGlossaryTermQuery",
    "GetGlossaryTermQueryHandler",
    "GetGlossaryTermMatrixQuery",
    "GetGlossaryTermMatrixQueryHandler",
]
