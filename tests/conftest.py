"""
pytest configuration and fixtures for the records backend
The document store is replaced by an in-memory fake that speaks the same
async collection API and returns real PyMongo result objects.
"""

import pytest
import pytest_asyncio
import httpx
from bson import ObjectId
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult

from records_backend.app import create_app
from records_backend.config.settings import Settings


class FakeCursor:
    def __init__(self, documents):
        self._documents = documents

    async def to_list(self, length=None):
        documents = [dict(document) for document in self._documents]
        return documents if length is None else documents[:length]


class FakeCollection:
    """Dict-backed stand-in for an async MongoDB collection, keyed by _id"""

    def __init__(self):
        self.documents = {}
        self.fail_with = None

    def _check(self):
        if self.fail_with is not None:
            raise self.fail_with

    def find(self, query):
        self._check()
        assert query == {}, "only unfiltered finds are supported"
        return FakeCursor(list(self.documents.values()))

    async def find_one(self, query):
        self._check()
        document = self.documents.get(query["_id"])
        return dict(document) if document is not None else None

    async def insert_one(self, document):
        self._check()
        # pymongo sets _id on the passed document
        document.setdefault("_id", ObjectId())
        self.documents[document["_id"]] = dict(document)
        return InsertOneResult(document["_id"], True)

    async def update_one(self, query, update):
        self._check()
        document = self.documents.get(query["_id"])
        if document is None:
            return UpdateResult({"n": 0, "nModified": 0, "ok": 1.0}, True)

        changes = update["$set"]
        modified = any(key not in document or document[key] != value for key, value in changes.items())
        document.update(changes)
        return UpdateResult({"n": 1, "nModified": 1 if modified else 0, "ok": 1.0}, True)

    async def delete_one(self, query):
        self._check()
        removed = self.documents.pop(query["_id"], None)
        return DeleteResult({"n": 0 if removed is None else 1, "ok": 1.0}, True)


class FakeDocumentStore:
    def __init__(self):
        self.collections = {}
        self.connected = False
        self.closed = False

    async def connect(self):
        self.connected = True

    def collection(self, name):
        return self.collections.setdefault(name, FakeCollection())

    async def ping(self):
        return self.connected

    async def close(self):
        self.closed = True


@pytest.fixture
def store():
    return FakeDocumentStore()


@pytest.fixture
def records_collection(store):
    return store.collection("records")


@pytest.fixture
def settings(tmp_path):
    return Settings(database_url="mongodb://fake-host:27017", static_dir=str(tmp_path))


@pytest.fixture
def production_settings(tmp_path):
    (tmp_path / "index.html").write_text("<html><body>client entry</body></html>")
    (tmp_path / "styles.css").write_text("body { margin: 0; }")
    return Settings(env="production", database_url="mongodb://fake-host:27017", static_dir=str(tmp_path))


async def _serve(app):
    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as http:
            yield http


@pytest_asyncio.fixture
async def client(settings, store):
    """HTTP client bound to a development-mode API app"""
    app = create_app(settings, store=store)
    async for http in _serve(app):
        yield http


@pytest_asyncio.fixture
async def production_client(production_settings, store):
    """HTTP client bound to a production-mode app serving the web client too"""
    app = create_app(production_settings, store=store)
    async for http in _serve(app):
        yield http
