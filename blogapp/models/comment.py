"""Comment ORM — one entry in a post's comment sequence.

Invariants:
    - Always belongs to a BlogPost (post_id FK)
    - position is 0-based, assigned as max(position) + 1, unique per post
    - Comments are never deleted or reordered, so a position never changes owner
    - id is stable from creation and can address the comment instead of position
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Text, Integer, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from blogapp.db.base import Base


class Comment(Base):
    """Comment entity — owned by its post."""
    __tablename__ = "comments"
    __table_args__ = (
        UniqueConstraint("post_id", "position", name="uq_comments_post_position"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    post_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("blog_posts.id", ondelete="CASCADE"),
        nullable=False,
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    user_id: Mapped[uuid.UUID] = mapped_column(
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

    post: Mapped["BlogPost"] = relationship(
        "BlogPost", back_populates="comments",
    )
