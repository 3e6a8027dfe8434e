"""Blogs API — post creation, listing, likes, and the batched feed.

Invariants:
    - New posts start with likes=0 and no comments
    - likePost is monotonic: N calls add exactly N, with no per-caller dedup
    - The feed lists the same posts as /blogs/ with names resolved
"""

from uuid import uuid4


async def test_create_post_initializes_likes_and_comments(client, alice):
    res = await client.post(
        "/blogs/",
        json={"title": "Hello", "content": "World", "author": alice["id"]},
    )
    assert res.status_code == 201
    body = res.json()
    assert body["likes"] == 0
    assert body["comments"] == []
    assert body["author"] == alice["id"]
    assert body["title"] == "Hello"
    assert body["content"] == "World"


async def test_create_post_for_unknown_author_returns_404(client):
    res = await client.post(
        "/blogs/", json={"title": "T", "content": "C", "author": str(uuid4())},
    )
    assert res.status_code == 404


async def test_create_post_with_malformed_author_returns_400(client):
    res = await client.post(
        "/blogs/", json={"title": "T", "content": "C", "author": "abc"},
    )
    assert res.status_code == 400


async def test_list_posts_in_creation_order(client, alice):
    for title in ("First", "Second", "Third"):
        await client.post(
            "/blogs/", json={"title": title, "content": "x", "author": alice["id"]},
        )
    res = await client.get("/blogs/")
    assert res.status_code == 200
    assert [p["title"] for p in res.json()] == ["First", "Second", "Third"]


async def test_list_posts_is_stable_across_requests(client, alice, post):
    await client.post(
        "/blogs/", json={"title": "Other", "content": "x", "author": alice["id"]},
    )
    first = await client.get("/blogs/")
    second = await client.get("/blogs/")
    assert [p["id"] for p in first.json()] == [p["id"] for p in second.json()]


async def test_like_post_increments_by_one(client, post):
    res = await client.put(f"/blogs/like/{post['id']}")
    assert res.status_code == 200
    assert res.json()["likes"] == 1


async def test_like_post_n_times_adds_exactly_n(client, post):
    for _ in range(5):
        res = await client.put(f"/blogs/like/{post['id']}")
    assert res.json()["likes"] == 5

    listed = (await client.get("/blogs/")).json()
    assert listed[0]["likes"] == 5


async def test_like_unknown_post_returns_404(client):
    res = await client.put(f"/blogs/like/{uuid4()}")
    assert res.status_code == 404
    assert res.json()["error"]["context"]["resource_type"] == "BlogPost"


async def test_like_malformed_post_id_returns_400(client):
    res = await client.put("/blogs/like/123")
    assert res.status_code == 400


async def test_feed_resolves_author_and_commenter_names(client, post, bob):
    await client.post(
        f"/blogs/{post['id']}/comment",
        json={"content": "Nice post", "userId": bob["id"]},
    )
    res = await client.get("/blogs/feed")
    assert res.status_code == 200
    [entry] = res.json()
    assert entry["id"] == post["id"]
    assert entry["author_name"] == "Alice"
    assert entry["comments"][0]["user_name"] == "Bob"
    assert entry["comments"][0]["content"] == "Nice post"


async def test_feed_matches_plain_listing(client, post, bob):
    await client.post(
        f"/blogs/{post['id']}/comment",
        json={"content": "Nice post", "userId": bob["id"]},
    )
    plain = (await client.get("/blogs/")).json()
    feed = (await client.get("/blogs/feed")).json()
    assert [p["id"] for p in feed] == [p["id"] for p in plain]
    assert [c["id"] for c in feed[0]["comments"]] == [
        c["id"] for c in plain[0]["comments"]
    ]


async def test_create_post_with_blank_title_returns_400(client, alice):
    res = await client.post(
        "/blogs/", json={"title": "   ", "content": "x", "author": alice["id"]},
    )
    assert res.status_code == 400
    assert res.json()["error"]["message"] == "title cannot be blank"
