"""Tests for build_post_cards — pure card building, no IO."""

from blogapp.core.post_view import build_post_cards
from blogapp.core.render_state import RenderState


def _post(post_id="p1", comments=None):
    return {
        "id": post_id,
        "title": "Hello",
        "content": "World",
        "author": "u1",
        "author_name": "Alice",
        "likes": 3,
        "comments": comments or [],
    }


def _comment(comment_id, content, user_name="Bob", likes=0):
    return {
        "id": comment_id, "content": content, "user": "u2",
        "user_name": user_name, "likes": likes,
    }


def test_logged_out_cards_hide_form_and_disable_likes():
    [card] = build_post_cards([_post(comments=[_comment("c0", "hi")])], RenderState())
    assert card.author_label == "Author: Alice"
    assert card.likes == 3
    assert not card.show_comment_form
    assert not card.like_enabled
    assert not card.comments[0].like_enabled


def test_logged_in_cards_show_form_and_enable_likes():
    state = RenderState()
    state.log_in("u1", "Alice")
    [card] = build_post_cards([_post(comments=[_comment("c0", "hi")])], state)
    assert card.show_comment_form
    assert card.like_enabled
    assert card.comments[0].like_enabled


def test_comment_order_and_index_preserved():
    comments = [_comment("c0", "first"), _comment("c1", "second"), _comment("c2", "third")]
    [card] = build_post_cards([_post(comments=comments)], RenderState())
    assert [c.index for c in card.comments] == [0, 1, 2]
    assert [c.text for c in card.comments] == [
        "Bob : first", "Bob : second", "Bob : third",
    ]


def test_liked_items_flagged_and_disabled():
    state = RenderState()
    state.log_in("u1", "Alice")
    state.mark_post_liked("p1")
    state.mark_comment_liked("p1", 1)
    comments = [_comment("c0", "a"), _comment("c1", "b")]
    [card] = build_post_cards([_post(comments=comments)], state)
    assert card.liked and not card.like_enabled
    assert not card.comments[0].liked and card.comments[0].like_enabled
    assert card.comments[1].liked and not card.comments[1].like_enabled


def test_no_posts_no_cards():
    assert build_post_cards([], RenderState()) == []
