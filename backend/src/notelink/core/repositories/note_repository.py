"""Note repository for database operations."""

import logging
from typing import Any, Dict, List, Optional
from uuid import UUID

from sqlalchemy import and_, desc, or_, select

from ..models.note import Note
from .base import SQLRepository, storage_operation
from .interfaces import INoteRepository

logger = logging.getLogger(__name__)

LIKE_ESCAPE = "\\"


def _like_pattern(term: str) -> str:
    """Wrap a search term for a contains-match with LIKE wildcards escaped."""
    escaped = (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


class NoteRepository(SQLRepository, INoteRepository):
    """Repository for note database operations.

    Every query is filtered by owner; there is no unscoped lookup.
    """

    @storage_operation("create_note")
    async def create_note(self, note_data: Dict[str, Any]) -> Note:
        """Insert new note."""
        note = Note(**note_data)
        self.session.add(note)
        await self.session.commit()
        await self.session.refresh(note)
        return note

    @storage_operation("get_note")
    async def get_by_id_and_user(self, note_id: UUID, user_id: UUID) -> Optional[Note]:
        """Get note by ID if owned by user."""
        stmt = select(Note).where(and_(Note.id == note_id, Note.owner_id == user_id))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    @storage_operation("update_note")
    async def update_note(
        self, note_id: UUID, user_id: UUID, update_data: Dict[str, Any]
    ) -> Optional[Note]:
        """Update note if owned by user."""
        stmt = select(Note).where(and_(Note.id == note_id, Note.owner_id == user_id))
        note = (await self.session.execute(stmt)).scalar_one_or_none()
        if not note:
            return None

        for key, value in update_data.items():
            setattr(note, key, value)

        await self.session.commit()
        await self.session.refresh(note)
        return note

    @storage_operation("delete_note")
    async def delete_note(self, note_id: UUID, user_id: UUID) -> bool:
        """Delete note if owned by user."""
        stmt = select(Note).where(and_(Note.id == note_id, Note.owner_id == user_id))
        note = (await self.session.execute(stmt)).scalar_one_or_none()
        if not note:
            logger.warning(f"Note {note_id} not found or not owned by user {user_id}")
            return False

        await self.session.delete(note)
        await self.session.commit()
        return True

    @storage_operation("list_notes")
    async def list_user_notes(self, user_id: UUID) -> List[Note]:
        """List all notes owned by user, most recently updated first."""
        stmt = (
            select(Note)
            .where(Note.owner_id == user_id)
            .order_by(desc(Note.updated_at), Note.id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    @storage_operation("search_notes")
    async def search_notes(self, user_id: UUID, query: str) -> List[Note]:
        """Search the user's notes by title or content.

        The query is split on whitespace; a note matches when any term
        appears in its title or content, ignoring case. Phrase ("...") and
        negation (-term) syntax is not supported: quotes and dashes are
        matched literally as part of a term.
        """
        terms = query.split()
        if not terms:
            return []

        term_conditions = []
        for term in terms:
            pattern = _like_pattern(term)
            term_conditions.append(
                or_(
                    Note.title.ilike(pattern, escape=LIKE_ESCAPE),
                    Note.content.ilike(pattern, escape=LIKE_ESCAPE),
                )
            )

        stmt = (
            select(Note)
            .where(and_(Note.owner_id == user_id, or_(*term_conditions)))
            .order_by(desc(Note.updated_at), Note.id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
