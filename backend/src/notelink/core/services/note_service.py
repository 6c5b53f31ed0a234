"""Note service implementation."""

from datetime import datetime, timedelta, timezone
from typing import List, Optional
from uuid import UUID

from ..exceptions import NotFoundError
from ..logging import get_logger
from ..models.note import Note
from ..repositories.interfaces import INoteRepository
from ..schemas.notes import NoteResponse
from .interfaces import INoteService

logger = get_logger("services.notes")


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class NoteService(INoteService):
    """Note access with ownership enforced on every operation.

    The caller supplies an owner id that was already verified from a
    bearer token; this service never looks at tokens.
    """

    def __init__(self, note_repo: INoteRepository):
        self.note_repo = note_repo

    async def list_notes(self, owner_id: UUID) -> List[NoteResponse]:
        """List all notes of the owner."""
        notes = await self.note_repo.list_user_notes(owner_id)
        return [self._note_to_response(note) for note in notes]

    async def get_note(self, note_id: UUID, owner_id: UUID) -> NoteResponse:
        """Get note by ID.

        A note owned by someone else is reported exactly like a missing one.
        """
        note = await self._get_owned(note_id, owner_id)
        return self._note_to_response(note)

    async def create_note(self, title: str, content: str, owner_id: UUID) -> NoteResponse:
        """Create new note."""
        now = self._now()
        note = await self.note_repo.create_note(
            {
                "owner_id": owner_id,
                "title": title,
                "content": content,
                "shared": False,
                "created_at": now,
                "updated_at": now,
            }
        )
        return self._note_to_response(note)

    async def update_note(
        self, note_id: UUID, owner_id: UUID, title: str, content: str
    ) -> NoteResponse:
        """Replace title and content of an owned note."""
        note = await self._get_owned(note_id, owner_id)

        updated = await self.note_repo.update_note(
            note_id,
            owner_id,
            {
                "title": title,
                "content": content,
                "updated_at": self._now(after=note.updated_at),
            },
        )
        # deleted between the check and the write
        if updated is None:
            raise NotFoundError()

        return self._note_to_response(updated)

    async def delete_note(self, note_id: UUID, owner_id: UUID) -> None:
        """Delete an owned note. No tombstone is kept."""
        if not await self.note_repo.delete_note(note_id, owner_id):
            raise NotFoundError()

    async def share_note(
        self, note_id: UUID, owner_id: UUID, target_user_id: UUID
    ) -> NoteResponse:
        """Copy an owned note to another user.

        The copy is a new record with its own id, owned by the target and
        flagged as shared. Nothing links it back to the source, so later
        edits to either note never reach the other. The read and the insert
        are separate storage calls; if the source is deleted in between,
        the copy still succeeds with the data that was read.
        """
        source = await self._get_owned(note_id, owner_id)

        now = self._now()
        copy = await self.note_repo.create_note(
            {
                "owner_id": target_user_id,
                "title": source.title,
                "content": source.content,
                "shared": True,
                "created_at": now,
                "updated_at": now,
            }
        )
        logger.info(
            "Note shared",
            extra={"note_id": str(note_id), "copy_id": str(copy.id), "target_user_id": str(target_user_id)},
        )
        return self._note_to_response(copy)

    async def search_notes(self, owner_id: UUID, query: str) -> List[NoteResponse]:
        """Search the owner's notes. The query is passed to storage as-is."""
        notes = await self.note_repo.search_notes(owner_id, query)
        return [self._note_to_response(note) for note in notes]

    async def _get_owned(self, note_id: UUID, owner_id: UUID) -> Note:
        note = await self.note_repo.get_by_id_and_user(note_id, owner_id)
        if not note:
            raise NotFoundError()
        return note

    @staticmethod
    def _now(after: Optional[datetime] = None) -> datetime:
        """Current UTC time, strictly later than ``after`` when given."""
        now = datetime.now(timezone.utc)
        if after is not None:
            floor = _as_utc(after) + timedelta(microseconds=1)
            if now < floor:
                return floor
        return now

    @staticmethod
    def _note_to_response(note: Note) -> NoteResponse:
        """Convert note model to response."""
        return NoteResponse.model_validate(note)
