"""Tests for RenderState — the page's login and liked gating."""

from blogapp.core.domain_types import PageState
from blogapp.core.render_state import RenderState


def test_initial_state_is_logged_out():
    state = RenderState()
    assert state.page_state is PageState.LOGGED_OUT
    assert not state.logged_in
    assert state.user_id is None


def test_log_in_transitions_and_records_user():
    state = RenderState()
    state.log_in("u1", "Alice")
    assert state.page_state is PageState.LOGGED_IN
    assert state.user_id == "u1"
    assert state.user_name == "Alice"


def test_likes_inert_while_logged_out():
    state = RenderState()
    assert not state.can_like_post("p1")
    assert not state.can_like_comment("p1", 0)


def test_post_like_allowed_once():
    state = RenderState()
    state.log_in("u1", "Alice")
    assert state.can_like_post("p1")
    state.mark_post_liked("p1")
    assert not state.can_like_post("p1")
    assert state.can_like_post("p2")


def test_comment_like_keyed_by_post_and_index():
    state = RenderState()
    state.log_in("u1", "Alice")
    state.mark_comment_liked("p1", 0)
    assert not state.can_like_comment("p1", 0)
    assert state.can_like_comment("p1", 1)
    assert state.can_like_comment("p2", 0)


def test_fresh_state_models_reload():
    state = RenderState()
    state.log_in("u1", "Alice")
    state.mark_post_liked("p1")
    reloaded = RenderState()
    assert not reloaded.logged_in
    assert reloaded.liked_posts == set()
