import asyncio
from typing import Callable, Optional

import httpx
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

import kanbanify.models  # noqa: F401
from kanbanify.client.api import ApiClient
from kanbanify.client.storage import LocalStorage
from kanbanify.client.store import BoardStore
from kanbanify.database import Base, get_db
from kanbanify.main import app

TEST_DATABASE_URL = "sqlite://"
engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

TEST_BASE_URL = "http://testserver/api"


async def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(autouse=True)
def db_session() -> Session:
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client() -> TestClient:
    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


class FlakyTransport(httpx.AsyncBaseTransport):
    """Routes requests to the app, failing or dropping those matching ``fail_when`` or ``disconnect_when``."""

    def __init__(self):
        self._inner = httpx.ASGITransport(app=app)
        self.fail_when: Optional[Callable[[httpx.Request], bool]] = None
        self.disconnect_when: Optional[Callable[[httpx.Request], bool]] = None
        # seconds to hold requests that go through to the app
        self.delay = 0.0
        self.requests = []

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        self.requests.append((request.method, request.url.path))
        await asyncio.sleep(0)
        if self.disconnect_when is not None and self.disconnect_when(request):
            raise httpx.ConnectError("Connection refused", request=request)
        if self.fail_when is not None and self.fail_when(request):
            return httpx.Response(500, json={"error": "Simulated failure"})
        if self.delay:
            await asyncio.sleep(self.delay)
        return await self._inner.handle_async_request(request)


@pytest.fixture
def transport() -> FlakyTransport:
    return FlakyTransport()


@pytest.fixture
def storage() -> LocalStorage:
    return LocalStorage()


@pytest_asyncio.fixture
async def api(transport: FlakyTransport):
    app.dependency_overrides[get_db] = override_get_db
    api_client = ApiClient(TEST_BASE_URL, transport=transport)
    try:
        yield api_client
    finally:
        await api_client.aclose()
        app.dependency_overrides.clear()


@pytest.fixture
def store(api: ApiClient, storage: LocalStorage) -> BoardStore:
    return BoardStore(api, storage)
