"""Pytest configuration and fixtures."""

import itertools

import mongomock
import pytest
from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError

from bloodconnect.config import Settings
from bloodconnect.server import create_app

TEST_SECRET = "test-signing-secret"


class AsyncCursor:
    """Awaitable ``to_list`` over a mongomock cursor, shaped like motor's."""

    def __init__(self, cursor):
        self._cursor = cursor

    async def to_list(self, length=None):
        if length is None:
            return list(self._cursor)
        return list(itertools.islice(self._cursor, length))


class AsyncCollection:
    """Coroutine facade over a mongomock collection, shaped like motor's."""

    def __init__(self, collection):
        self._collection = collection

    async def insert_one(self, document):
        return self._collection.insert_one(document)

    async def find_one(self, *args, **kwargs):
        return self._collection.find_one(*args, **kwargs)

    def find(self, *args, **kwargs):
        return AsyncCursor(self._collection.find(*args, **kwargs))

    async def create_index(self, *args, **kwargs):
        return self._collection.create_index(*args, **kwargs)


class AsyncDatabase:
    def __init__(self, database):
        self._database = database

    def __getitem__(self, name):
        return AsyncCollection(self._database[name])


class UnreachableCollection:
    """Collection whose every query fails as if the server were down."""

    async def create_index(self, *args, **kwargs):
        return None

    async def insert_one(self, document):
        raise ServerSelectionTimeoutError("mongo unreachable")

    async def find_one(self, *args, **kwargs):
        raise ServerSelectionTimeoutError("mongo unreachable")

    def find(self, *args, **kwargs):
        raise ServerSelectionTimeoutError("mongo unreachable")


class UnreachableDatabase:
    def __getitem__(self, name):
        return UnreachableCollection()


@pytest.fixture
def mongo():
    """In-memory MongoDB database, inspected directly by tests."""
    return mongomock.MongoClient()["bloodconnect_test"]


@pytest.fixture
def public_dir(tmp_path):
    public = tmp_path / "public"
    public.mkdir()
    (public / "index.html").write_text("<h1>BloodConnect</h1>")
    return public


@pytest.fixture
def settings(public_dir):
    return Settings(
        _env_file=None,
        JWT_SECRET=TEST_SECRET,
        BCRYPT_ROUNDS=4,
        PUBLIC_DIR=str(public_dir),
    )


@pytest.fixture
def app(settings, mongo):
    return create_app(settings, db=AsyncDatabase(mongo))


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client


@pytest.fixture
def unreachable_client(settings):
    app = create_app(settings, db=UnreachableDatabase())
    with TestClient(app) as client:
        yield client


@pytest.fixture
def tokens(app):
    return app.state.tokens


@pytest.fixture
def donor_payload():
    return {
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "phone": "555-0100",
        "bloodGroup": "O+",
        "location": "Metropolis",
        "password": "s3cret-pass",
    }


@pytest.fixture
def hospital_payload():
    return {
        "hospitalName": "Metropolis General",
        "email": "admin@metrogeneral.org",
        "phone": "555-0200",
        "address": "1 Main St",
        "city": "Metropolis",
        "blood": [{"type": "O+", "units": 12}, {"type": "A-", "units": 0}],
        "password": "hospital-pass",
    }


@pytest.fixture
def register_donor(client, donor_payload):
    def _register(**overrides):
        response = client.post("/api/donors/register", json={**donor_payload, **overrides})
        assert response.status_code == 200, response.json()
        return response.json()["token"]
    return _register


@pytest.fixture
def register_hospital(client, hospital_payload):
    def _register(**overrides):
        response = client.post("/register-hospital", json={**hospital_payload, **overrides})
        assert response.status_code == 201, response.json()
        return response.json()["token"]
    return _register
