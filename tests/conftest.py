"""Shared fixtures: in-memory database, API client and signed-in users."""

import os
from datetime import datetime, timedelta
from typing import Callable, Dict

TEST_JWT_KEY = "test-identity-signing-key"

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["DEBUG"] = "false"
os.environ["AUTH_PROVIDER"] = "jwt"
os.environ["IDENTITY_JWT_KEY"] = TEST_JWT_KEY
os.environ["IDENTITY_JWT_ALGORITHM"] = "HS256"

import pytest
from fastapi.testclient import TestClient
from jose import jwt
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from socialapp.api import deps
from socialapp.crud import crud_user
from socialapp.database import Base
from socialapp.main import app
from socialapp.models.user import User
from socialapp.services.cache import PageCache, get_page_cache
from socialapp.services.post_service import PostService
import socialapp.models  # registers every model on Base.metadata


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def db(engine) -> Session:
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def cache() -> PageCache:
    return PageCache()


@pytest.fixture()
def service(cache) -> PostService:
    return PostService(cache=cache)


@pytest.fixture()
def client(db, cache):
    def _get_db():
        yield db

    app.dependency_overrides[deps.get_db] = _get_db
    app.dependency_overrides[get_page_cache] = lambda: cache
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def make_token(external_id: str, **claims) -> str:
    payload = {
        "sub": external_id,
        "exp": datetime.utcnow() + timedelta(hours=1),
        **claims,
    }
    return jwt.encode(payload, TEST_JWT_KEY, algorithm="HS256")


def auth_headers(user: User) -> Dict[str, str]:
    return {"Authorization": f"Bearer {make_token(user.external_id)}"}


@pytest.fixture()
def make_user(db) -> Callable[[str], User]:
    def _make_user(username: str) -> User:
        return crud_user.create_from_identity(
            db,
            external_id=f"ext_{username}",
            email=f"{username}@example.com",
            username=username,
            name=username.title(),
        )

    return _make_user
