"""BlogApiClient — endpoint coverage not exercised by the page renderer.

Invariants:
    - Registration and listing go through /users/
    - Comment likes by stable id return the full updated post
    - Unknown targets raise ApiRequestError with the envelope's status
"""

from uuid import uuid4

import pytest

from blogapp.client.api_client import ApiRequestError, BlogApiClient


@pytest.fixture
def api(client):
    return BlogApiClient(client)


async def test_create_then_list_users(api):
    carol = await api.create_user("Carol", "carol", "secret")
    assert carol["name"] == "Carol"
    assert "password" not in carol

    users = await api.list_users()
    assert [u["id"] for u in users] == [carol["id"]]


async def test_create_user_rejects_missing_name(api):
    with pytest.raises(ApiRequestError) as exc_info:
        await api.create_user("", "carol", "secret")
    assert exc_info.value.status_code == 400


async def test_like_comment_by_id(api, post, bob):
    commented = await api.add_comment(post["id"], "Nice post", bob["id"])
    comment_id = commented["comments"][0]["id"]

    liked = await api.like_comment_by_id(post["id"], comment_id)
    assert liked["comments"][0]["likes"] == 1
    assert liked["likes"] == 0


async def test_like_unknown_comment_by_id_raises(api, post):
    with pytest.raises(ApiRequestError) as exc_info:
        await api.like_comment_by_id(post["id"], str(uuid4()))
    assert exc_info.value.status_code == 404
