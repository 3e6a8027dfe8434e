"""Post View — pure card building from denormalized post payloads.

Invariants:
    - Input posts already carry author_name and per-comment user_name
    - Comment order and index follow the post's comment sequence exactly
    - Cards are rebuilt in full on every call (no incremental patching)
"""

from dataclasses import dataclass, field

from blogapp.core.render_state import RenderState


@dataclass(frozen=True)
class CommentItem:
    index: int
    id: str
    user_name: str | None
    content: str
    likes: int
    liked: bool
    like_enabled: bool

    @property
    def text(self) -> str:
        return f"{self.user_name} : {self.content}"


@dataclass(frozen=True)
class PostCard:
    id: str
    title: str
    content: str
    author_name: str | None
    likes: int
    liked: bool
    like_enabled: bool
    show_comment_form: bool
    comments: list[CommentItem] = field(default_factory=list)

    @property
    def author_label(self) -> str:
        return f"Author: {self.author_name}"


def build_post_cards(posts: list[dict], state: RenderState) -> list[PostCard]:
    """Build one card per post, gated by the page's login and liked state."""
    return [_build_card(post, state) for post in posts]


def _build_card(post: dict, state: RenderState) -> PostCard:
    post_id = str(post["id"])
    comments = [
        CommentItem(
            index=index,
            id=str(comment["id"]),
            user_name=comment.get("user_name"),
            content=comment["content"],
            likes=comment["likes"],
            liked=(post_id, index) in state.liked_comments,
            like_enabled=state.can_like_comment(post_id, index),
        )
        for index, comment in enumerate(post.get("comments", []))
    ]
    return PostCard(
        id=post_id,
        title=post["title"],
        content=post["content"],
        author_name=post.get("author_name"),
        likes=post["likes"],
        liked=post_id in state.liked_posts,
        like_enabled=state.can_like_post(post_id),
        show_comment_form=state.logged_in,
        comments=comments,
    )
