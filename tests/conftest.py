"""
MLS ProAdmin API - Test Configuration and Fixtures
"""
import os
from typing import Callable, Dict, Generator, Optional

import pytest
from fastapi.testclient import TestClient

# Set testing environment before the app reads its configuration
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_LEVEL"] = "WARNING"

from app import app  # noqa: E402
from core.database import SessionLocal, engine  # noqa: E402
from models.base import Base  # noqa: E402
from utils.entities import USER  # noqa: E402
from utils.entity_store import EntityStore  # noqa: E402

SUPER_ADMIN_ID = "user-001"


@pytest.fixture(autouse=True)
def reset_database() -> Generator[None, None, None]:
    """Give every test empty tables."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def store() -> Generator[EntityStore, None, None]:
    """Entity store on its own session"""
    db = SessionLocal()
    try:
        yield EntityStore(db)
    finally:
        db.close()


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """Test client; entering it runs the startup seeding"""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_user(store: EntityStore) -> Callable[..., Dict[str, str]]:
    """Insert a user directly and return its record"""

    def _make_user(user_id: str, role: str, username: Optional[str] = None, password: str = "password123"):
        return store.create(
            USER,
            {
                "id": user_id,
                "username": username or user_id,
                "password": password,
                "role": role,
                "createdAt": "2024-01-01T00:00:00+00:00",
            },
        )

    return _make_user


@pytest.fixture
def users(client: TestClient, make_user) -> Dict[str, Dict[str, str]]:
    """A small population across all three levels"""
    return {
        "admin": make_user("user-002", "Level 2", "admin_user"),
        "admin2": make_user("user-004", "Level 2", "jane.doe"),
        "normal": make_user("user-003", "Level 1", "normal_user"),
        "normal2": make_user("user-005", "Level 1", "john.smith"),
        "super2": make_user("user-007", "Level 3", "second.super"),
    }


def auth_headers(user_id: str) -> Dict[str, str]:
    return {"X-User-Id": user_id}


@pytest.fixture
def headers_for() -> Callable[[str], Dict[str, str]]:
    """Build caller headers for a user id"""
    return auth_headers


@pytest.fixture
def super_headers() -> Dict[str, str]:
    return auth_headers(SUPER_ADMIN_ID)


@pytest.fixture
def admin_headers(users) -> Dict[str, str]:
    return auth_headers(users["admin"]["id"])


@pytest.fixture
def normal_headers(users) -> Dict[str, str]:
    return auth_headers(users["normal"]["id"])
