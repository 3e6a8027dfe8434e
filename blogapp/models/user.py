"""User ORM — registered blog users.

Invariants:
    - id is UUID primary key (client-side default)
    - username is indexed but NOT unique (duplicates are accepted)
    - password is stored as given and compared by equality at login
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from blogapp.db.base import Base


class User(Base):
    """User entity — referenced by posts (author) and comments (user)."""
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    username: Mapped[str] = mapped_column(
        String(100), nullable=False, index=True,
    )
    password: Mapped[str] = mapped_column(String(200), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
