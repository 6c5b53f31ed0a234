"""Search API endpoints."""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from ..core.exceptions import ValidationError
from ..core.schemas.notes import NoteResponse
from ..core.services import NoteService
from ..middleware.auth import get_current_user_id
from ..middleware.rate_limit import enforce_rate_limit
from .dependencies import get_note_service

router = APIRouter(prefix="/search", tags=["search"], dependencies=[Depends(enforce_rate_limit)])


@router.get("", response_model=List[NoteResponse])
async def search_notes(
    q: str = Query("", description="Search terms; a note matches if any term appears"),
    current_user_id: UUID = Depends(get_current_user_id),
    note_service: NoteService = Depends(get_note_service),
):
    """Search the caller's notes by title and content."""
    if not q.strip():
        raise ValidationError("q", "query parameter is required")
    return await note_service.search_notes(current_user_id, q)
