"""
Pytest configuration and shared fixtures.
"""
import copy

import httpx
import pytest
import pytest_asyncio

from devroster.db.connection import init_db, close_db, get_db_session
from devroster.main import app


SAMPLE_DEVELOPER = {
    "name": "Ada Lovelace",
    "position": "Backend Engineer",
    "location": "London",
    "experienceYears": 7,
    "imageUrl": "https://example.com/ada.png",
    "skills": {
        "communicative": 80,
        "efficient": 60,
        "immaculate": 75,
        "problemsolver": 90,
        "timely": 70,
        "tinker": 85,
    },
}


@pytest.fixture
def developer_payload():
    """A valid create body (no id)"""
    return copy.deepcopy(SAMPLE_DEVELOPER)


@pytest_asyncio.fixture
async def database(tmp_path):
    """
    Fresh SQLite database for one test.

    The file lives in pytest's tmp_path, so tests never touch ./devroster.db.
    """
    await init_db(f"sqlite+aiosqlite:///{tmp_path / 'devroster_test.db'}")
    yield
    await close_db()


@pytest_asyncio.fixture
async def db_session(database):
    """Database session that commits when the test is done with it"""
    sessions = get_db_session()
    session = await sessions.__anext__()
    yield session
    try:
        await sessions.__anext__()
    except StopAsyncIteration:
        pass


@pytest_asyncio.fixture
async def client(database):
    """HTTP client talking to the app in-process"""
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as http_client:
        yield http_client
