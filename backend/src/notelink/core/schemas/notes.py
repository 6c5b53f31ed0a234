"""
Note management schemas.
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class NoteCreate(BaseModel):
    """Note creation request schema."""

    title: str = Field(description="Note title")
    content: str = Field(description="Note content")

    model_config = ConfigDict(
        json_schema_extra={"example": {"title": "Groceries", "content": "milk, eggs"}}
    )


class NoteUpdate(BaseModel):
    """Note update request. Title and content are both replaced."""

    title: str = Field(description="New note title")
    content: str = Field(description="New note content")


class ShareRequest(BaseModel):
    """Copy a note to another user."""

    target_user_id: uuid.UUID = Field(description="User who receives the copy")


class NoteResponse(BaseModel):
    """Full note record."""

    id: uuid.UUID
    owner_id: uuid.UUID
    title: str
    content: str
    shared: bool = Field(description="True when the note is a copy shared by another user")
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
