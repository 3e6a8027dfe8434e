"""BlogPost ORM — aggregate root owning its ordered comment sequence.

Invariants:
    - likes starts at 0 and only ever increases
    - comments loaded ordered by position (insertion order = display order)
    - author_id references users.id; the post does not own its author

Design Decisions:
    - Comments in their own table with cascade delete-orphan: owned like an
      embedded array, but each row can be updated atomically
    - lazy="selectin" on comments: a post list loads all comments in one extra query
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Text, Integer, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from blogapp.db.base import Base


class BlogPost(Base):
    """Blog post authored by a user."""
    __tablename__ = "blog_posts"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    author_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("users.id"), nullable=False,
    )
    likes: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    comments: Mapped[list["Comment"]] = relationship(
        "Comment", back_populates="post",
        cascade="all, delete-orphan", lazy="selectin",
        order_by="Comment.position",
    )
