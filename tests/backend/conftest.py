import os

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from tortoise import Tortoise


TEST_DB_URL = "sqlite://:memory:"
os.environ["DATABASE_URL"] = TEST_DB_URL

from resumehub.core import db as db_module  # noqa: E402
from resumehub.main import app  # noqa: E402
from resumehub.services.account_repository import AccountRepository  # noqa: E402
from resumehub.services.account_service import AccountService  # noqa: E402
from resumehub.services.artifact_store import ArtifactStore  # noqa: E402

db_module.DB_URL = TEST_DB_URL
db_module.TORTOISE_ORM["connections"]["default"] = TEST_DB_URL


@pytest_asyncio.fixture
async def db():
    """
    Initialize a clean in-memory SQLite database for every test.
    Tables are recreated from scratch, so ids start at 1.
    """
    await Tortoise.init(config=db_module.TORTOISE_ORM)
    await Tortoise.generate_schemas()
    yield
    await Tortoise.close_connections()


@pytest.fixture
def store(tmp_path):
    return ArtifactStore(tmp_path / "uploads")


@pytest.fixture
def repository(db):
    return AccountRepository()


@pytest.fixture
def service(repository, store):
    return AccountService(repository, store)


@pytest.fixture
def jwt_service(repository, store):
    return AccountService(repository, store, auth_mode="jwt")


def _client_for(service):
    app.state.accounts = service
    transport = ASGITransport(app=app)
    return AsyncClient(transport=transport, base_url="http://testserver")


@pytest_asyncio.fixture
async def client(service):
    """
    Provide an HTTPX AsyncClient bound to the FastAPI app with a fresh DB
    and a per-test upload directory (startup hooks are not run).
    """
    async with _client_for(service) as async_client:
        yield async_client


@pytest_asyncio.fixture
async def jwt_client(jwt_service):
    """Same as client, with signed bearer tokens required for writes."""
    async with _client_for(jwt_service) as async_client:
        yield async_client

