"""Blog Page Renderer — the page's fetch, resolve, and interaction logic.

Invariants:
    - Every refresh re-fetches the full post list and rebuilds every card
    - Default mode resolves names N+1 style: one user fetch per post author,
      then one per comment; batched mode reads /blogs/feed instead, same cards
    - Likes and comments are gated on RenderState; gated clicks never hit the API
    - UI operations never raise on fetch failure: they log, record a message, and stop
    - Nothing is retried

Design Decisions:
    - Author and commenter fetches run concurrently with asyncio.gather; one
      failure aborts the whole refresh and the previous cards stay in place
"""

import asyncio
import logging

import httpx

from blogapp.client.api_client import ApiRequestError, BlogApiClient
from blogapp.core.post_view import PostCard, build_post_cards
from blogapp.core.render_state import RenderState

logger = logging.getLogger(__name__)

_FETCH_ERRORS = (ApiRequestError, httpx.HTTPError)

LOGIN_FAILED = "Failed to login. Try again."
POST_FAILED = "Failed to create blog post. Please try again."
LOGIN_REQUIRED = "Please login first."


class BlogPageRenderer:
    """One instance per page load; discard it to model a reload."""

    def __init__(self, api: BlogApiClient, batched: bool = False):
        self.api = api
        self.batched = batched
        self.state = RenderState()
        self.cards: list[PostCard] = []
        self.greeting: str | None = None
        self.validation_message: str | None = None
        self.post_validation_message: str | None = None

    async def load(self) -> list[PostCard]:
        return await self.refresh()

    async def refresh(self) -> list[PostCard]:
        try:
            if self.batched:
                posts = await self.api.list_feed()
            else:
                posts = await self._fetch_and_resolve()
        except _FETCH_ERRORS as e:
            logger.error(f"Error fetching content: {e}")
            return self.cards
        self.cards = build_post_cards(posts, self.state)
        return self.cards

    async def _fetch_and_resolve(self) -> list[dict]:
        posts = await self.api.list_posts()
        await asyncio.gather(*(self._resolve_author(p) for p in posts))
        await asyncio.gather(*(
            self._resolve_commenter(c) for p in posts for c in p["comments"]
        ))
        return posts

    async def _resolve_author(self, post: dict) -> None:
        author = await self.api.get_user(post["author"])
        post["author_name"] = author["name"]

    async def _resolve_commenter(self, comment: dict) -> None:
        user = await self.api.get_user(comment["user"])
        comment["user_name"] = user["name"]

    # --- interactions --------------------------------------------------------

    async def login(self, username: str, password: str) -> bool:
        try:
            user = await self.api.login(username, password)
        except _FETCH_ERRORS as e:
            logger.error(f"Login failed: {e}")
            self.validation_message = LOGIN_FAILED
            return False
        self.state.log_in(str(user["id"]), user["name"])
        self.greeting = f"Hello, {self.state.user_name}"
        self.validation_message = None
        logger.info("Login successful", extra={"user_id": user["id"]})
        await self.refresh()
        return True

    async def submit_post(self, title: str, content: str) -> bool:
        if not self.state.logged_in:
            self.post_validation_message = LOGIN_REQUIRED
            return False
        try:
            await self.api.create_post(title, content, self.state.user_id)
        except _FETCH_ERRORS as e:
            logger.error(f"Error creating post: {e}")
            self.post_validation_message = POST_FAILED
            return False
        self.post_validation_message = None
        await self.refresh()
        return True

    async def submit_comment(self, post_id: str, content: str) -> bool:
        if not self.state.logged_in:
            logger.info("Please login to submit a comment")
            return False
        try:
            await self.api.add_comment(post_id, content, self.state.user_id)
        except _FETCH_ERRORS as e:
            logger.error(f"Error submitting comment: {e}", extra={"post_id": post_id})
            return False
        await self.refresh()
        return True

    async def click_post_like(self, post_id: str) -> bool:
        if not self.state.can_like_post(post_id):
            return False
        try:
            await self.api.like_post(post_id)
        except _FETCH_ERRORS as e:
            logger.error(f"Error liking post: {e}", extra={"post_id": post_id})
            return False
        self.state.mark_post_liked(post_id)
        await self.refresh()
        return True

    async def click_comment_like(self, post_id: str, index: int) -> bool:
        if not self.state.can_like_comment(post_id, index):
            return False
        try:
            await self.api.like_comment(post_id, index)
        except _FETCH_ERRORS as e:
            logger.error(
                f"Error liking comment: {e}",
                extra={"post_id": post_id, "comment_index": index},
            )
            return False
        self.state.mark_comment_liked(post_id, index)
        await self.refresh()
        return True
