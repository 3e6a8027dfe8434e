"""Render State — per-page UI state owned by the client renderer.

Invariants:
    - Starts LOGGED_OUT; log_in() is the only transition (no logout)
    - A post or comment can be marked liked at most once per state instance
    - Like and comment gating is client-side only; the API never sees this state

Design Decisions:
    - Liked sets keyed by id / (post id, index) rather than flags on fetched
      objects: a refresh rebuilds every card, the state must survive it
"""

from dataclasses import dataclass, field

from blogapp.core.domain_types import PageState


@dataclass
class RenderState:
    """Page-lifetime state. A new instance models a page reload."""
    page_state: PageState = PageState.LOGGED_OUT
    user_id: str | None = None
    user_name: str | None = None
    liked_posts: set[str] = field(default_factory=set)
    liked_comments: set[tuple[str, int]] = field(default_factory=set)

    @property
    def logged_in(self) -> bool:
        return self.page_state is PageState.LOGGED_IN

    def log_in(self, user_id: str, user_name: str) -> None:
        self.page_state = PageState.LOGGED_IN
        self.user_id = user_id
        self.user_name = user_name

    def can_like_post(self, post_id: str) -> bool:
        return self.logged_in and post_id not in self.liked_posts

    def can_like_comment(self, post_id: str, index: int) -> bool:
        return self.logged_in and (post_id, index) not in self.liked_comments

    def mark_post_liked(self, post_id: str) -> None:
        self.liked_posts.add(post_id)

    def mark_comment_liked(self, post_id: str, index: int) -> None:
        self.liked_comments.add((post_id, index))
