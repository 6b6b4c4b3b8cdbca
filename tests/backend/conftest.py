import os
import uuid

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("JWT_SECRET", "test-secret")

from wordbank.core.db import Database
from wordbank.core.security import hash_password
from wordbank.main import app
from wordbank.models.user import User
from wordbank.services.word_store import WordSetRepository


TEST_DB_URL = "sqlite://:memory:"


@pytest_asyncio.fixture
async def database():
    """
    Open a clean in-memory SQLite database for every test.
    Tables are created from scratch and the connection is closed afterwards.
    """
    db = Database.from_url(TEST_DB_URL)
    await db.open(generate_schemas=True)
    yield db
    await db.close()


@pytest_asyncio.fixture
async def repo(database):
    return WordSetRepository(database)


@pytest_asyncio.fixture
async def client(database):
    """
    Provide an HTTPX AsyncClient bound to the FastAPI app with a fresh DB.
    Startup events are not run; the test database is attached directly.
    """
    app.state.database = database
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        yield async_client
    app.state.database = None


@pytest_asyncio.fixture
async def create_admin(database):
    """
    Factory fixture to create admin users directly via ORM for privileged endpoints.
    """

    async def _create_admin(password: str = "AdminPass!23") -> tuple[User, str]:
        user = await User.create(
            username=f"admin_{uuid.uuid4().hex[:6]}",
            password_hash=hash_password(password),
            role="admin",
        )
        return user, password

    return _create_admin


@pytest_asyncio.fixture
async def create_user(database):
    """
    Factory fixture to create regular users directly.
    """

    async def _create_user(password: str = "UserPass!23") -> tuple[User, str]:
        user = await User.create(
            username=f"user_{uuid.uuid4().hex[:6]}",
            password_hash=hash_password(password),
            role="user",
        )
        return user, password

    return _create_user


@pytest_asyncio.fixture
async def auth_header_factory(client):
    """
    Helper fixture to obtain Authorization headers via the login endpoint.
    """

    async def _get_headers(username: str, password: str) -> dict[str, str]:
        resp = await client.post(
            "/api/login",
            json={"username": username, "password": password},
        )
        assert resp.status_code == 200, resp.text
        token = resp.json()["token"]
        return {"Authorization": f"Bearer {token}"}

    return _get_headers


@pytest_asyncio.fixture
async def user_headers(create_user, auth_header_factory):
    user, password = await create_user()
    return await auth_header_factory(user.username, password)


@pytest_asyncio.fixture
async def admin_headers(create_admin, auth_header_factory):
    admin, password = await create_admin()
    return await auth_header_factory(admin.username, password)
