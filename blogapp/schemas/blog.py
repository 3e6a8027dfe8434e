"""Blog Schemas — post and comment payloads for the /blogs endpoints.

Invariants:
    - PostResponse.comments keeps the post's comment order
    - author / user are ids; the feed variants add the resolved display names
    - CommentCreate accepts the browser's camelCase "userId" key

Design Decisions:
    - from_model() classmethods map ORM column names (author_id, user_id)
      onto the wire names (author, user) in one place
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class PostCreate(BaseModel):
    """Post creation body."""
    title: str = Field(min_length=1, max_length=500)
    content: str = Field(min_length=1, max_length=50_000)
    author: UUID


class CommentCreate(BaseModel):
    """Comment creation body."""
    model_config = ConfigDict(populate_by_name=True)

    content: str = Field(min_length=1, max_length=5_000)
    user_id: UUID = Field(alias="userId")


class CommentResponse(BaseModel):
    id: UUID
    content: str
    user: UUID
    likes: int

    @classmethod
    def from_model(cls, comment) -> "CommentResponse":
        return cls(
            id=comment.id,
            content=comment.content,
            user=comment.user_id,
            likes=comment.likes,
        )


class PostResponse(BaseModel):
    """Post response with embedded comments in sequence order."""
    id: UUID
    title: str
    content: str
    author: UUID
    likes: int
    comments: list[CommentResponse]
    created_at: datetime

    @classmethod
    def from_model(cls, post) -> "PostResponse":
        return cls(
            id=post.id,
            title=post.title,
            content=post.content,
            author=post.author_id,
            likes=post.likes,
            comments=[CommentResponse.from_model(c) for c in post.comments],
            created_at=post.created_at,
        )


# --- Denormalized feed --------------------------------------------------------

class FeedCommentResponse(CommentResponse):
    user_name: str | None = None


class FeedPostResponse(PostResponse):
    """Post with author and commenter display names already resolved."""
    author_name: str | None = None
    comments: list[FeedCommentResponse]

    @classmethod
    def from_model_with_names(
        cls, post, names: dict[UUID, str],
    ) -> "FeedPostResponse":
        return cls(
            id=post.id,
            title=post.title,
            content=post.content,
            author=post.author_id,
            author_name=names.get(post.author_id),
            likes=post.likes,
            comments=[
                FeedCommentResponse(
                    id=c.id,
                    content=c.content,
                    user=c.user_id,
                    user_name=names.get(c.user_id),
                    likes=c.likes,
                )
                for c in post.comments
            ],
            created_at=post.created_at,
        )
