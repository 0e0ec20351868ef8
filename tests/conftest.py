import os
import tempfile
from typing import Dict, Generator, List, Union

import pytest
from fastapi.testclient import TestClient

# Set test environment variables FIRST
_default_db_dir = tempfile.mkdtemp()
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_default_db_dir, 'app.db')}"
os.environ["GOOGLE_CLIENT_ID"] = "test-client-id.apps.googleusercontent.com"
os.environ["JWT_ACCESS_SECRET"] = "test-user-access-secret"
os.environ["JWT_ADMIN_ACCESS_SECRET"] = "test-admin-access-secret"

from sqlalchemy import select  # noqa: E402

from database.database import DatabaseManager, get_db  # noqa: E402
from integrations.google_identity import GoogleIdentity  # noqa: E402
from models.user import User  # noqa: E402
from utils.dependencies import get_google_verifier  # noqa: E402
from utils.errors import VerificationError  # noqa: E402


class FakeVerifier:
    """Stands in for Google: known tokens map to identities, anything else fails."""

    def __init__(self, identities: Dict[str, Union[GoogleIdentity, Exception]]):
        self.identities = identities
        self.calls: List[str] = []

    async def verify(self, raw_token: str) -> GoogleIdentity:
        self.calls.append(raw_token)
        result = self.identities.get(raw_token)
        if result is None:
            raise VerificationError()
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture(scope="function")
def setup_test_db(tmp_path) -> Generator[DatabaseManager, None, None]:
    """A DatabaseManager on a fresh SQLite file for each test."""
    manager = DatabaseManager(f"sqlite:///{tmp_path / 'test.db'}")
    yield manager


@pytest.fixture(scope="function")
def fake_verifier() -> FakeVerifier:
    return FakeVerifier(
        {
            "valid-token-alice": GoogleIdentity(
                sub="google-sub-alice",
                email="alice@example.com",
                name="Alice Example",
            ),
            "valid-token-bob": GoogleIdentity(
                sub="google-sub-bob",
                email="bob@example.com",
                name="Bob Example",
            ),
        }
    )


@pytest.fixture(scope="function")
def client(setup_test_db, fake_verifier) -> Generator[TestClient, None, None]:
    """Create a test client backed by the fresh database and fake verifier."""
    from main import app

    async def override_get_db():
        async for session in setup_test_db.get_session():
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_google_verifier] = lambda: fake_verifier

    with TestClient(app) as c:
        c.portal.call(setup_test_db.create_tables)
        yield c
        c.portal.call(setup_test_db.close)

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def users_by_google_id(client, setup_test_db):
    """Look up stored users on the client's event loop."""

    def lookup(google_id: str) -> List[User]:
        async def query():
            async with setup_test_db.async_session_factory() as session:
                result = await session.execute(select(User).where(User.google_id == google_id))
                return list(result.scalars().all())

        return client.portal.call(query)

    return lookup


def _set_cookie_headers(response, name: str) -> List[str]:
    return [
        header
        for header in response.headers.get_list("set-cookie")
        if header.startswith(f"{name}=")
    ]


def _cookie_attributes(header: str) -> Dict[str, str]:
    attributes = {}
    for part in header.split(";")[1:]:
        key, _, value = part.strip().partition("=")
        attributes[key.lower()] = value.lower()
    return attributes


@pytest.fixture
def set_cookie_headers():
    """Raw Set-Cookie headers on a response for one cookie name."""
    return _set_cookie_headers


@pytest.fixture
def cookie_attributes():
    """Attributes of a Set-Cookie header, lower-cased, without the name=value pair."""
    return _cookie_attributes
