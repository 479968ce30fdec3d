"""Domain entities package.

Contains the aggregate roots of the glossary domain.
"""

from .glossary_term import GlossaryTerm, GlossaryTermState

__all__ = [
    "GlossaryTerm",
    "GlossaryTermState",
]
