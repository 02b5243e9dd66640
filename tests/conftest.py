import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import NullPool

from core.db import create_engine
from web import create_app
from wiki.services.page import PageStore


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def engine(tmp_path):
    # NullPool: TestClient and anyio tests run on different event loops
    return create_engine(f"sqlite+aiosqlite:///{tmp_path / 'wiki.db'}", poolclass=NullPool)


@pytest.fixture
def app(engine):
    return create_app(engine)


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client


@pytest.fixture
async def store(engine):
    store = PageStore(engine)
    await store.ensure_schema()
    yield store
    await store.dispose()


def save(client, title, markdown, new_page="yes", page_id=""):
    return client.post(
        "/save",
        data={"id": page_id, "title": title, "markdown": markdown, "newPage": new_page},
        follow_redirects=False,
    )
