"""Tests for the post endpoints through the HTTP layer."""

from sqlalchemy import func, select

from socialapp.models import Like, Notification, Post
from tests.conftest import auth_headers, make_token


def _count(db, model) -> int:
    return db.scalar(select(func.count()).select_from(model))


def test_create_post_returns_envelope(client, db, make_user):
    alice = make_user("alice")

    response = client.post(
        "/api/v1/posts",
        json={"content": "hello", "image": None},
        headers=auth_headers(alice),
    )

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["post"]["author_id"] == alice.id
    assert body["post"]["content"] == "hello"
    assert "error" not in body


def test_create_post_signed_out_is_no_content(client, db):
    response = client.post("/api/v1/posts", json={"content": "hello"})

    assert response.status_code == 204
    assert _count(db, Post) == 0


def test_unsynced_principal_is_treated_as_signed_out(client, db):
    headers = {"Authorization": f"Bearer {make_token('ext_never_synced')}"}

    response = client.post("/api/v1/posts", json={"content": "hello"}, headers=headers)

    assert response.status_code == 204
    assert _count(db, Post) == 0


def test_invalid_token_is_treated_as_signed_out(client, db):
    headers = {"Authorization": "Bearer not-a-real-token"}

    response = client.post("/api/v1/posts", json={"content": "hello"}, headers=headers)

    assert response.status_code == 204


def test_feed_is_cached_until_a_write(client, cache, make_user):
    alice = make_user("alice")
    client.post("/api/v1/posts", json={"content": "first"}, headers=auth_headers(alice))

    feed = client.get("/api/v1/posts")
    assert feed.status_code == 200
    assert [p["content"] for p in feed.json()] == ["first"]
    assert cache.get("/") == feed.json()

    client.post("/api/v1/posts", json={"content": "second"}, headers=auth_headers(alice))
    assert cache.get("/") is None

    feed = client.get("/api/v1/posts")
    assert [p["content"] for p in feed.json()] == ["second", "first"]


def test_feed_served_from_cache(client, cache):
    cache.set("/", [{"id": "cached"}])

    response = client.get("/api/v1/posts")

    assert response.json() == [{"id": "cached"}]


def test_feed_shape(client, make_user):
    alice = make_user("alice")
    bob = make_user("bob")
    created = client.post("/api/v1/posts", json={"content": "hello"}, headers=auth_headers(alice))
    post_id = created.json()["post"]["id"]
    client.post(f"/api/v1/posts/{post_id}/like", headers=auth_headers(bob))
    client.post(f"/api/v1/posts/{post_id}/comments", json={"content": "hey"}, headers=auth_headers(bob))

    item = client.get("/api/v1/posts").json()[0]

    assert item["author"] == {"id": alice.id, "name": "Alice", "image": None, "username": "alice"}
    assert item["likes"] == [{"user_id": bob.id}]
    assert item["counts"] == {"likes": 1, "comments": 1}
    assert item["comments"][0]["content"] == "hey"
    assert item["comments"][0]["author"]["username"] == "bob"


def test_feed_storage_error_is_500_with_message(client, monkeypatch):
    from socialapp.crud import crud_post

    def boom(*args, **kwargs):
        raise RuntimeError("connection lost")

    monkeypatch.setattr(crud_post, "get_feed", boom)

    response = client.get("/api/v1/posts")

    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to fetch posts: connection lost"


def test_delete_post_status_codes(client, db, make_user):
    alice = make_user("alice")
    bob = make_user("bob")
    created = client.post("/api/v1/posts", json={"content": "hello"}, headers=auth_headers(alice))
    post_id = created.json()["post"]["id"]

    signed_out = client.delete(f"/api/v1/posts/{post_id}")
    assert signed_out.status_code == 401
    assert signed_out.json() == {"success": False, "error": "Unauthorized", "error_kind": "unauthorized"}

    forbidden = client.delete(f"/api/v1/posts/{post_id}", headers=auth_headers(bob))
    assert forbidden.status_code == 403
    assert forbidden.json()["error"] == "Unauthorized - no delete permission"

    missing = client.delete("/api/v1/posts/does-not-exist", headers=auth_headers(alice))
    assert missing.status_code == 404
    assert missing.json()["error"] == "Post not found"

    deleted = client.delete(f"/api/v1/posts/{post_id}", headers=auth_headers(alice))
    assert deleted.status_code == 200
    assert deleted.json() == {"success": True}
    assert _count(db, Post) == 0


def test_toggle_like_endpoint(client, db, make_user):
    alice = make_user("alice")
    bob = make_user("bob")
    created = client.post("/api/v1/posts", json={"content": "hello"}, headers=auth_headers(alice))
    post_id = created.json()["post"]["id"]

    liked = client.post(f"/api/v1/posts/{post_id}/like", headers=auth_headers(bob))
    assert liked.status_code == 200
    assert liked.json() == {"success": True}
    assert _count(db, Like) == 1
    assert _count(db, Notification) == 1

    client.post(f"/api/v1/posts/{post_id}/like", headers=auth_headers(bob))
    assert _count(db, Like) == 0

    missing = client.post("/api/v1/posts/does-not-exist/like", headers=auth_headers(bob))
    assert missing.status_code == 404
    assert missing.json()["error"] == "Failed to toggle like"


def test_create_comment_endpoint(client, make_user):
    alice = make_user("alice")
    bob = make_user("bob")
    created = client.post("/api/v1/posts", json={"content": "hello"}, headers=auth_headers(alice))
    post_id = created.json()["post"]["id"]

    empty = client.post(f"/api/v1/posts/{post_id}/comments", json={"content": ""}, headers=auth_headers(bob))
    assert empty.status_code == 400
    assert empty.json()["error"] == "Content is required"
    assert empty.json()["error_kind"] == "invalid_input"

    comment = client.post(f"/api/v1/posts/{post_id}/comments", json={"content": "nice!"}, headers=auth_headers(bob))
    assert comment.status_code == 201
    assert comment.json()["comment"]["content"] == "nice!"
    assert comment.json()["comment"]["post_id"] == post_id

    signed_out = client.post(f"/api/v1/posts/{post_id}/comments", json={"content": "hi"})
    assert signed_out.status_code == 204


def test_write_during_feed_read_does_not_cache_stale_page(client, cache, make_user, monkeypatch):
    from socialapp.services.post_service import PostService

    alice = make_user("alice")
    original_get_posts = PostService.get_posts
    writes = []

    def read_then_write(self, db, **kwargs):
        posts = original_get_posts(self, db, **kwargs)
        if not writes:
            writes.append(self.create_post(db, user_id=alice.id, content="late"))
        return posts

    monkeypatch.setattr(PostService, "get_posts", read_then_write)

    assert client.get("/api/v1/posts").json() == []
    assert cache.get("/") is None

    feed = client.get("/api/v1/posts").json()
    assert [p["content"] for p in feed] == ["late"]
    assert cache.get("/") == feed
