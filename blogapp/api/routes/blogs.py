"""Blog Routes — /blogs resource: posts, likes, comments, and the batched feed.

Invariants:
    - Every mutation answers with the full updated post
    - Comment likes addressed by position (/comment/like/{index}) or by stable id
    - /blogs/feed returns the same posts as /blogs/ plus resolved display names
    - /blogs and /blogs/ serve the same list and create operations

Design Decisions:
    - /feed declared before any /{post_id} GET so it is never parsed as an id
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from blogapp.infrastructure.database import get_db
from blogapp.schemas.blog import (
    CommentCreate, FeedPostResponse, PostCreate, PostResponse,
)
from blogapp.services.blog_service import BlogService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/blogs", tags=["blogs"])


@router.get("", response_model=list[PostResponse], include_in_schema=False)
@router.get("/", response_model=list[PostResponse])
async def list_posts(db: AsyncSession = Depends(get_db)):
    """List all posts with embedded comments."""
    posts = await BlogService(db).list_posts()
    return [PostResponse.from_model(p) for p in posts]


@router.get("/feed", response_model=list[FeedPostResponse])
async def list_feed(db: AsyncSession = Depends(get_db)):
    """List all posts with author and commenter names resolved server-side."""
    posts, names = await BlogService(db).list_feed()
    return [FeedPostResponse.from_model_with_names(p, names) for p in posts]


@router.post(
    "", response_model=PostResponse,
    status_code=status.HTTP_201_CREATED, include_in_schema=False,
)
@router.post(
    "/", response_model=PostResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_post(body: PostCreate, db: AsyncSession = Depends(get_db)):
    post = await BlogService(db).create_post(body.title, body.content, body.author)
    return PostResponse.from_model(post)


@router.put("/like/{post_id}", response_model=PostResponse)
async def like_post(post_id: UUID, db: AsyncSession = Depends(get_db)):
    """Add one like. Repeat calls keep counting."""
    post = await BlogService(db).like_post(post_id)
    return PostResponse.from_model(post)


@router.post("/{post_id}/comment", response_model=PostResponse)
async def add_comment(
    post_id: UUID, body: CommentCreate, db: AsyncSession = Depends(get_db),
):
    """Append a comment to the post's sequence."""
    post = await BlogService(db).add_comment(post_id, body.content, body.user_id)
    return PostResponse.from_model(post)


@router.put("/{post_id}/comment/like/{index}", response_model=PostResponse)
async def like_comment(
    post_id: UUID, index: int, db: AsyncSession = Depends(get_db),
):
    """Like the comment at a 0-based position."""
    post = await BlogService(db).like_comment(post_id, index)
    return PostResponse.from_model(post)


@router.put("/{post_id}/comments/{comment_id}/like", response_model=PostResponse)
async def like_comment_by_id(
    post_id: UUID, comment_id: UUID, db: AsyncSession = Depends(get_db),
):
    post = await BlogService(db).like_comment_by_id(post_id, comment_id)
    return PostResponse.from_model(post)
