"""Blog Service — posts, likes, and the per-post comment sequence.

Invariants:
    - New posts start with likes=0 and no comments
    - Like counters change only through store-side `likes = likes + 1` updates
    - Comments are appended at max(position) + 1 and never removed or reordered
    - Every mutation returns the post re-read from the store

Design Decisions:
    - Counter increments are single UPDATE statements, so concurrent likes never
      lose an increment; rowcount == 0 means the target does not exist
    - Position collisions between concurrent appends hit the unique
      (post_id, position) constraint and surface as ConcurrencyError
    - The session is expunged before re-reading so the returned post reflects
      the committed row values, not stale identity-map state
"""

import logging
from uuid import UUID

from sqlalchemy import select, update, func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from blogapp.core.errors import (
    ConcurrencyError, InvalidInputError, ResourceNotFoundError,
)
from blogapp.models.blog_post import BlogPost
from blogapp.models.comment import Comment
from blogapp.services.user_service import UserService

logger = logging.getLogger(__name__)

# Comment.position is a 32-bit INTEGER column
MAX_COMMENT_POSITION = 2**31 - 1


def _require_text(value: str, field: str) -> None:
    if not value.strip():
        raise InvalidInputError(f"{field} cannot be blank", field)


class BlogService:
    """Post CRUD plus like and comment mutations."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.users = UserService(db)

    async def list_posts(self) -> list[BlogPost]:
        result = await self.db.execute(
            select(BlogPost).order_by(BlogPost.created_at, BlogPost.id),
        )
        return list(result.scalars().all())

    async def list_feed(self) -> tuple[list[BlogPost], dict[UUID, str]]:
        """All posts plus one multi-get of every author and commenter name."""
        posts = await self.list_posts()
        user_ids = {p.author_id for p in posts}
        user_ids.update(c.user_id for p in posts for c in p.comments)
        names = await self.users.resolve_names(user_ids)
        return posts, names

    async def get_post(self, post_id: UUID) -> BlogPost:
        result = await self.db.execute(
            select(BlogPost).where(BlogPost.id == post_id),
        )
        post = result.scalar_one_or_none()
        if not post:
            logger.warning("Post not found", extra={"post_id": post_id})
            raise ResourceNotFoundError("BlogPost", str(post_id))
        return post

    async def create_post(self, title: str, content: str, author_id: UUID) -> BlogPost:
        _require_text(title, "title")
        _require_text(content, "content")
        await self.users.get_user(author_id)
        post = BlogPost(
            title=title, content=content, author_id=author_id,
            likes=0, comments=[],
        )
        self.db.add(post)
        await self.db.commit()
        logger.info(
            f"Post '{title}' created",
            extra={"post_id": post.id, "user_id": author_id},
        )
        return post

    async def like_post(self, post_id: UUID) -> BlogPost:
        result = await self.db.execute(
            update(BlogPost)
            .where(BlogPost.id == post_id)
            .values(likes=BlogPost.likes + 1)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            logger.warning("Like on missing post", extra={"post_id": post_id})
            raise ResourceNotFoundError("BlogPost", str(post_id))
        await self.db.commit()
        logger.info("Post liked", extra={"post_id": post_id})
        return await self._reload(post_id)

    async def add_comment(self, post_id: UUID, content: str, user_id: UUID) -> BlogPost:
        _require_text(content, "content")
        await self.get_post(post_id)
        await self.users.get_user(user_id)
        position = await self.db.scalar(
            select(func.coalesce(func.max(Comment.position), -1) + 1)
            .where(Comment.post_id == post_id)
        )
        self.db.add(Comment(
            post_id=post_id, position=position,
            content=content, user_id=user_id, likes=0,
        ))
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise ConcurrencyError(
                f"Comment position {position} on post '{post_id}' was taken "
                "by a concurrent comment; retry the request",
            )
        logger.info(
            "Comment added",
            extra={"post_id": post_id, "user_id": user_id, "comment_index": position},
        )
        return await self._reload(post_id)

    async def like_comment(self, post_id: UUID, index: int) -> BlogPost:
        """Increment the comment at `index` in the post's sequence."""
        await self.get_post(post_id)
        if not 0 <= index <= MAX_COMMENT_POSITION:
            logger.warning(
                "Like on out-of-range comment index",
                extra={"post_id": post_id, "comment_index": index},
            )
            raise ResourceNotFoundError("Comment", f"{post_id}[{index}]")
        result = await self.db.execute(
            update(Comment)
            .where(Comment.post_id == post_id)
            .where(Comment.position == index)
            .values(likes=Comment.likes + 1)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            logger.warning(
                "Like on missing comment index",
                extra={"post_id": post_id, "comment_index": index},
            )
            raise ResourceNotFoundError("Comment", f"{post_id}[{index}]")
        await self.db.commit()
        logger.info(
            "Comment liked", extra={"post_id": post_id, "comment_index": index},
        )
        return await self._reload(post_id)

    async def like_comment_by_id(self, post_id: UUID, comment_id: UUID) -> BlogPost:
        """Increment a comment addressed by its stable id."""
        await self.get_post(post_id)
        result = await self.db.execute(
            update(Comment)
            .where(Comment.post_id == post_id)
            .where(Comment.id == comment_id)
            .values(likes=Comment.likes + 1)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            logger.warning("Like on missing comment", extra={"post_id": post_id})
            raise ResourceNotFoundError("Comment", str(comment_id))
        await self.db.commit()
        logger.info("Comment liked", extra={"post_id": post_id})
        return await self._reload(post_id)

    async def _reload(self, post_id: UUID) -> BlogPost:
        self.db.expunge_all()
        return await self.get_post(post_id)
