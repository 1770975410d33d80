"""Tests for identity-provider principals and local user sync."""

from datetime import datetime, timedelta
from unittest.mock import patch

from jose import jwt

from socialapp.crud import crud_user
from socialapp.services import identity_service
from socialapp.services.identity_service import (
    FirebaseIdentityProvider,
    JWTIdentityProvider,
    Principal,
    resolve_current_user_id,
    sync_user,
)
from tests.conftest import TEST_JWT_KEY, make_token


class TestJWTIdentityProvider:

    def test_maps_claims_to_principal(self):
        token = make_token(
            "user_123",
            username="ada",
            first_name="Ada",
            last_name="Lovelace",
            image_url="https://img.example.com/ada.png",
            email="ada@example.com",
        )

        principal = JWTIdentityProvider().verify(token)

        assert principal == Principal(
            external_id="user_123",
            username="ada",
            first_name="Ada",
            last_name="Lovelace",
            image_url="https://img.example.com/ada.png",
            email="ada@example.com",
        )

    def test_expired_token_is_rejected(self):
        token = jwt.encode(
            {"sub": "user_123", "exp": datetime.utcnow() - timedelta(minutes=5)},
            TEST_JWT_KEY,
            algorithm="HS256",
        )
        assert JWTIdentityProvider().verify(token) is None

    def test_wrong_signature_is_rejected(self):
        token = jwt.encode({"sub": "user_123"}, "some-other-key", algorithm="HS256")
        assert JWTIdentityProvider().verify(token) is None

    def test_token_without_subject_is_rejected(self):
        token = jwt.encode({"email": "x@example.com"}, TEST_JWT_KEY, algorithm="HS256")
        assert JWTIdentityProvider().verify(token) is None


class TestFirebaseIdentityProvider:

    def test_maps_firebase_claims(self):
        claims = {
            "uid": "fb_1",
            "name": "Grace Hopper",
            "picture": "https://img.example.com/grace.png",
            "email": "grace@example.com",
        }
        with patch.object(identity_service.firebase_auth_service, "verify_id_token", return_value=claims):
            principal = FirebaseIdentityProvider().verify("token")

        assert principal.external_id == "fb_1"
        assert principal.first_name == "Grace"
        assert principal.last_name == "Hopper"
        assert principal.email == "grace@example.com"

    def test_unverified_token_is_rejected(self):
        with patch.object(identity_service.firebase_auth_service, "verify_id_token", return_value=None):
            assert FirebaseIdentityProvider().verify("token") is None


class TestSyncUser:

    def test_creates_user_on_first_sight(self, db):
        principal = Principal(
            external_id="user_1",
            username=None,
            first_name="Ada",
            last_name=None,
            email="ada@example.com",
        )

        user = sync_user(db, principal)

        assert user.external_id == "user_1"
        assert user.username == "ada"
        assert user.name == "Ada"
        assert user.email == "ada@example.com"

    def test_existing_user_is_returned_unchanged(self, db, make_user):
        alice = make_user("alice")
        principal = Principal(external_id=alice.external_id, username="renamed", email="new@example.com")

        user = sync_user(db, principal)

        assert user.id == alice.id
        assert user.username == "alice"

    def test_taken_username_gets_external_id_suffix(self, db):
        first = sync_user(db, Principal(external_id="ext_1", username="ada", email="ada@a.com"))
        second = sync_user(db, Principal(external_id="ext_2", username="ada", email="ada@b.com"))

        assert first.username == "ada"
        assert second.id != first.id
        assert second.username == "ada_ext_2"
        assert second.email == "ada@b.com"
        assert resolve_current_user_id(db, Principal(external_id="ext_2")) == second.id

    def test_taken_email_falls_back_to_placeholder(self, db):
        sync_user(db, Principal(external_id="ext_1", username="ada", email="ada@example.com"))
        second = sync_user(db, Principal(external_id="ext_2", username="grace", email="ada@example.com"))

        assert second.username == "grace"
        assert second.email == "ext_2@users.invalid"

    def test_resolve_current_user_id(self, db, make_user):
        alice = make_user("alice")

        assert resolve_current_user_id(db, None) is None
        assert resolve_current_user_id(db, Principal(external_id="unknown")) is None
        assert resolve_current_user_id(db, Principal(external_id=alice.external_id)) == alice.id


def test_session_endpoint_syncs_user(client, db):
    token = make_token("user_9", username="neo", first_name="Thomas", last_name="Anderson", email="neo@example.com")

    response = client.get("/api/v1/users/session", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 200
    assert response.json() == {
        "id": "user_9",
        "username": "neo",
        "first_name": "Thomas",
        "last_name": "Anderson",
        "image_url": None,
        "email": "neo@example.com",
    }
    user = crud_user.get_by_external_id(db, "user_9")
    assert user is not None
    assert user.name == "Thomas Anderson"


def test_session_endpoint_with_taken_username(client, make_user):
    make_user("neo")
    token = make_token("user_9", username="neo", email="neo@matrix.example.com")
    headers = {"Authorization": f"Bearer {token}"}

    response = client.get("/api/v1/users/session", headers=headers)

    assert response.status_code == 200
    assert client.post("/api/v1/posts", json={"content": "hi"}, headers=headers).status_code == 201


def test_session_endpoint_signed_out(client):
    response = client.get("/api/v1/users/session")

    assert response.status_code == 200
    assert response.json() is None


def test_synced_user_can_post(client):
    headers = {"Authorization": f"Bearer {make_token('user_9', username='neo', email='neo@example.com')}"}

    assert client.post("/api/v1/posts", json={"content": "hi"}, headers=headers).status_code == 204

    client.get("/api/v1/users/session", headers=headers)

    assert client.post("/api/v1/posts", json={"content": "hi"}, headers=headers).status_code == 201


def test_missing_signing_key_treats_token_as_unverified(monkeypatch):
    from socialapp.config import settings

    monkeypatch.setattr(settings, "IDENTITY_JWT_KEY", None)

    assert JWTIdentityProvider().verify(make_token("user_123")) is None


def test_missing_signing_key_does_not_fail_requests(client, monkeypatch):
    from socialapp.config import settings

    monkeypatch.setattr(settings, "IDENTITY_JWT_KEY", None)
    headers = {"Authorization": f"Bearer {make_token('user_123')}"}

    assert client.post("/api/v1/posts", json={"content": "hi"}, headers=headers).status_code == 204
    assert client.get("/api/v1/users/session", headers=headers).json() is None
