"""Glossary terms API controller.

Provides endpoints for:
- Listing terms and the term matrix
- Getting one term by name
- Saving a term by hand
- Importing a CSV sheet
- Clearing the whole glossary
"""

import logging
from typing import Optional, Union

from classy_fastapi.decorators import delete, get, post
from fastapi import Depends, File, HTTPException, Query, UploadFile, status
from neuroglia.dependency_injection import ServiceProviderBase
from neuroglia.mapping import Mapper
from neuroglia.mediation import Mediator
from neuroglia.mvc import ControllerBase
from pydantic import BaseModel, Field

from api.dependencies import get_current_user
from application.commands import ClearGlossaryCommand, DefinitionInput, ImportGlossaryCommand, SaveGlossaryTermCommand
from application.queries import GetGlossaryTermMatrixQuery, GetGlossaryTermQuery, GetGlossaryTermsQuery

log = logging.getLogger(__name__)

# ============================================================================
# REQUEST MODELS
# ============================================================================


class DefinitionRequest(BaseModel):
    """One definition of a manual save."""

    text: str = Field(..., description="Definition text")
    tags: Union[str, list[str]] = Field(default_factory=list, description="Tags as a list or a comma-separated string")


class SaveTermRequest(BaseModel):
    """Request to create or extend a glossary term."""

    term: str = Field(..., description="Term name (exact, case-sensitive)")
    note: Optional[str] = Field(default=None, description="Note stored on the term (replaces the current one)")
    definitions: list[DefinitionRequest] = Field(default_factory=list, description="Definitions to merge")

    class Config:
        json_schema_extra = {
            "example": {
                "term": "Cat",
                "note": "Household animal",
                "definitions": [
                    {"text": "A feline", "tags": "pet,animal"},
                    {"text": "A small domesticated carnivore", "tags": ["zoology"]},
                ],
            }
        }


# ============================================================================
# CONTROLLER
# ============================================================================


class TermsController(ControllerBase):
    """Controller for glossary term operations."""

    def __init__(
        self,
        service_provider: ServiceProviderBase,
        mediator: Mediator,
        mapper: Mapper,
    ) -> None:
        super().__init__(service_provider, mediator, mapper)

    # =========================================================================
    # READ OPERATIONS
    # =========================================================================

    @get("/")
    async def get_terms(
        self,
        tag: Optional[str] = Query(default=None, description="Only terms having a definition with this tag"),
        user: dict = Depends(get_current_user),
    ):
        """Get all glossary terms with their definitions."""
        query = GetGlossaryTermsQuery(tag=tag, user_info=user)
        result = await self.mediator.execute_async(query)
        return self.process(result)

    @get("/matrix")
    async def get_term_matrix(
        self,
        user: dict = Depends(get_current_user),
    ):
        """Get the term matrix.

        One row per term with its definition count and distinct tag count.
        """
        query = GetGlossaryTermMatrixQuery(user_info=user)
        result = await self.mediator.execute_async(query)
        return self.process(result)

    @get("/{term}")
    async def get_term(
        self,
        term: str,
        user: dict = Depends(get_current_user),
    ):
        """Get a single term by its exact name."""
        query = GetGlossaryTermQuery(term=term, user_info=user)
        result = await self.mediator.execute_async(query)
        return self.process(result)

    # =========================================================================
    # WRITE OPERATIONS
    # =========================================================================

    @post("/")
    async def save_term(
        self,
        request: SaveTermRequest,
        user: dict = Depends(get_current_user),
    ):
        """Create a term, or merge definitions into an existing one.

        A definition whose text already exists only adds its new tags.
        """
        command = SaveGlossaryTermCommand(
            term=request.term,
            note=request.note,
            definitions=[DefinitionInput(text=d.text, tags=d.tags) for d in request.definitions],
            user_info=user,
        )
        result = await self.mediator.execute_async(command)
        return self.process(result)

    @post("/import")
    async def import_terms(
        self,
        file: UploadFile = File(..., description="CSV file: header row, then one row per term"),
        user: dict = Depends(get_current_user),
    ):
        """Import a CSV sheet.

        Columns are recognized from their headers (term/name, note, definition/def, tag...).
        New definitions record the file name as their origin.
        """
        try:
            content = await file.read()
        except Exception as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Failed to read file: {e}")

        command = ImportGlossaryCommand(
            content=content,
            origin=file.filename or "upload.csv",
            user_info=user,
        )
        result = await self.mediator.execute_async(command)
        return self.process(result)

    @delete("/")
    async def clear_terms(
        self,
        confirm: bool = Query(default=False, description="Must be true to delete every term"),
        user: dict = Depends(get_current_user),
    ):
        """Delete every glossary term.

        Irreversible. Requires ``confirm=true``.
        """
        if not confirm:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Add confirm=true to delete all glossary terms",
            )
        command = ClearGlossaryCommand(confirmed=True, user_info=user)
        result = await self.mediator.execute_async(command)
        return self.process(result)
