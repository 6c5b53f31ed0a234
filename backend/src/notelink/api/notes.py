"""Notes API endpoints."""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from ..core.schemas.notes import NoteCreate, NoteResponse, NoteUpdate, ShareRequest
from ..core.services import NoteService
from ..middleware.auth import get_current_user_id
from ..middleware.rate_limit import enforce_rate_limit
from .dependencies import get_note_service

router = APIRouter(prefix="/notes", tags=["notes"], dependencies=[Depends(enforce_rate_limit)])


@router.get("", response_model=List[NoteResponse])
async def list_notes(
    current_user_id: UUID = Depends(get_current_user_id),
    note_service: NoteService = Depends(get_note_service),
):
    """List the caller's notes, most recently updated first."""
    return await note_service.list_notes(current_user_id)


@router.post("", response_model=NoteResponse, status_code=status.HTTP_201_CREATED)
async def create_note(
    request: NoteCreate,
    current_user_id: UUID = Depends(get_current_user_id),
    note_service: NoteService = Depends(get_note_service),
):
    """Create a new note."""
    return await note_service.create_note(request.title, request.content, current_user_id)


@router.get("/{note_id}", response_model=NoteResponse)
async def get_note(
    note_id: UUID,
    current_user_id: UUID = Depends(get_current_user_id),
    note_service: NoteService = Depends(get_note_service),
):
    """Get a specific note."""
    return await note_service.get_note(note_id, current_user_id)


@router.put("/{note_id}", response_model=NoteResponse)
async def update_note(
    note_id: UUID,
    request: NoteUpdate,
    current_user_id: UUID = Depends(get_current_user_id),
    note_service: NoteService = Depends(get_note_service),
):
    """Replace title and content of a note."""
    return await note_service.update_note(
        note_id, current_user_id, request.title, request.content
    )


@router.delete("/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_note(
    note_id: UUID,
    current_user_id: UUID = Depends(get_current_user_id),
    note_service: NoteService = Depends(get_note_service),
):
    """Delete a note."""
    await note_service.delete_note(note_id, current_user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{note_id}/share", response_model=NoteResponse, status_code=status.HTTP_201_CREATED
)
async def share_note(
    note_id: UUID,
    request: ShareRequest,
    current_user_id: UUID = Depends(get_current_user_id),
    note_service: NoteService = Depends(get_note_service),
):
    """Give another user an independent copy of a note."""
    return await note_service.share_note(note_id, current_user_id, request.target_user_id)
