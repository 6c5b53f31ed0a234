# Declarative base shared by every table
import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BaseModel(DeclarativeBase):
    """UUID primary key plus creation and update times.

    ``uuid.UUID`` annotations map to SQLAlchemy's ``Uuid`` type: native on
    PostgreSQL, 32-character hex on SQLite.
    """

    __abstract__ = True

    type_annotation_map = {
        datetime: DateTime(timezone=True),
    }

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)

    # the defaults cover plain inserts; the note service sets both explicitly
    created_at: Mapped[datetime] = mapped_column(default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(default=utcnow)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.id}>"
