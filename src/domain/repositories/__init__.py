"""Domain repositories package.

Contains the abstract repository interface for the glossary store.
Implementations are in src/integration/repositories/.
"""

from .glossary_term_repository import BulkRemoveResult, GlossaryTermRepository, StoreError, StoreUnavailable

__all__: list[str] = [
    "GlossaryTermRepository",
    "BulkRemoveResult",
    "StoreError",
    "StoreUnavailable",
]
