# backend/tests/conftest.py
# Collection Mongo en mémoire (API motor minimale) + fixtures app/client.

import copy

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError

from geojson_api.core.settings import Settings
from geojson_api.db.mongodb import MongoStore, StoreState
from geojson_api.main import create_app


def _matches(doc, query):
    for key, expected in query.items():
        if key == "$or":
            if not any(_matches(doc, sub) for sub in expected):
                return False
        elif key not in doc or doc[key] != expected:
            return False
    return True


class _Cursor:
    def __init__(self, docs):
        self.docs = docs

    async def to_list(self, length=None):
        return self.docs if length is None else self.docs[:length]


class _Result:
    def __init__(self, **kwargs):
        self.__dict__.update(kwargs)


class FakeDatabase:
    def __init__(self, collection):
        self.collection = collection

    async def command(self, name):
        self.collection._maybe_fail()
        return {"ok": 1.0}


class FakeCollection:
    """Sous-ensemble async de AsyncIOMotorCollection, stockage en mémoire."""

    def __init__(self, docs=None):
        self.docs = [copy.deepcopy(d) for d in (docs or [])]
        self.calls = []
        self.fail = False
        self.database = FakeDatabase(self)

    def _maybe_fail(self):
        if self.fail:
            raise ServerSelectionTimeoutError("localhost:27017: connection refused")

    def find(self, query):
        self.calls.append(("find", query))
        self._maybe_fail()
        return _Cursor([copy.deepcopy(d) for d in self.docs if _matches(d, query)])

    async def find_one(self, query):
        self.calls.append(("find_one", query))
        self._maybe_fail()
        for d in self.docs:
            if _matches(d, query):
                return copy.deepcopy(d)
        return None

    async def insert_one(self, document):
        self.calls.append(("insert_one", document))
        self._maybe_fail()
        stored = copy.deepcopy(document)
        stored.setdefault("_id", ObjectId())
        self.docs.append(stored)
        return _Result(inserted_id=stored["_id"])

    async def find_one_and_update(self, query, update, return_document=None):
        self.calls.append(("find_one_and_update", query))
        self._maybe_fail()
        for d in self.docs:
            if _matches(d, query):
                d.update(copy.deepcopy(update["$set"]))
                return copy.deepcopy(d)
        return None

    async def delete_one(self, query):
        self.calls.append(("delete_one", query))
        self._maybe_fail()
        for i, d in enumerate(self.docs):
            if _matches(d, query):
                del self.docs[i]
                return _Result(deleted_count=1)
        return _Result(deleted_count=0)


FRANCE_ID = ObjectId("64a000000000000000000001")
USA_ID = ObjectId("64a000000000000000000002")

SEED_DOCS = [
    {"_id": FRANCE_ID, "country_name": "France", "cca3_code": "FRA",
     "geometry": {"type": "Point", "coordinates": [2.35, 48.85]}},
    {"_id": USA_ID, "country_name": "United States of America", "cca3_code": "USA",
     "geometry": {"type": "Point", "coordinates": [-77.03, 38.90]}},
]


def make_ready_store(collection):
    store = MongoStore("mongodb://fake", "geojsonDB", "geojsonCollection")
    store._collection = collection
    store.state = StoreState.READY
    return store


@pytest.fixture
def settings(tmp_path):
    return Settings(log_dir=str(tmp_path / "logs"))


@pytest.fixture
def collection():
    return FakeCollection(SEED_DOCS)


@pytest.fixture
def store(collection):
    return make_ready_store(collection)


@pytest.fixture
def client(settings, store):
    app = create_app(settings=settings, store=store)
    with TestClient(app) as c:
        yield c
