import os
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import AsyncIterator

# Admin credentials are read when podsurvey.auth.identity is first imported,
# which may happen while test modules are collected.
os.environ.setdefault("ADMIN_EMAIL", "admin@example.com")
os.environ.setdefault("ADMIN_PASSWORD", "correct-horse")
sys.path.append(str(Path(__file__).resolve().parents[1]))

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from asgi_lifespan import LifespanManager

from podsurvey.schemas import SurveyRecord

ADMIN_EMAIL = os.environ["ADMIN_EMAIL"]
ADMIN_PASSWORD = os.environ["ADMIN_PASSWORD"]

BASE_TIME = datetime(2026, 1, 1, tzinfo=timezone.utc)


def make_record(
    index: int,
    topics=("Technology",),
    podcast_formats=("Interview",),
    name=None,
    description="",
    suggested_guest=None,
) -> SurveyRecord:
    """Build an in-memory record; higher index means newer."""
    return SurveyRecord(
        id=f"id-{index}",
        name=f"Person {index}" if name is None else name,
        topics=tuple(topics),
        description=description,
        podcast_formats=tuple(podcast_formats),
        suggested_guest=suggested_guest,
        created_at=BASE_TIME + timedelta(minutes=index),
    )


@pytest.fixture
def records():
    """Twelve records, seven of them about Technology."""
    items = []
    for i in range(12):
        topics = ("Technology", "Science") if i < 7 else ("Business",)
        formats = ("Interview",) if i % 2 == 0 else ("Comedy", "Debate")
        items.append(make_record(i, topics=topics, podcast_formats=formats))
    return items


@pytest.fixture(scope="session")
def test_db_url(tmp_path_factory: pytest.TempPathFactory) -> str:
    db_path = tmp_path_factory.mktemp("db") / "test.db"
    return f"sqlite+aiosqlite:///{db_path}"


@pytest.fixture(scope="session")
def app(test_db_url: str):
    # Ensure env is set before importing the app
    os.environ["DATABASE_URL"] = test_db_url
    os.environ["APP_DEBUG"] = "true"
    from podsurvey.main import app as litestar_app
    return litestar_app


@pytest_asyncio.fixture()
async def client(app) -> AsyncIterator[AsyncClient]:
    async with LifespanManager(app):
        # The database file is shared by the whole session; start each test empty.
        store = app.state.survey_store
        await store.delete_by_ids([record.id for record in await store.list()])
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
            yield ac


@pytest_asyncio.fixture()
async def admin_client(client: AsyncClient) -> AsyncClient:
    """Client holding a signed-in admin session cookie."""
    resp = await client.post(
        "/login?admin",
        data={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD},
    )
    assert resp.status_code == 303
    assert "session_id" in resp.cookies
    return client
