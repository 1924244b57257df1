# backend/tests/test_app_lifecycle.py
import asyncio

import pytest
from fastapi.testclient import TestClient

from conftest import FakeCollection
from geojson_api.core.errors import StoreFailureError
from geojson_api.core.settings import Settings
from geojson_api.db.mongodb import MongoStore, StoreState
from geojson_api.main import create_app


@pytest.fixture
def pending_store():
    store = MongoStore("mongodb://fake", "geojsonDB", "geojsonCollection")
    store._collection = FakeCollection()  # jamais utilisée tant que non prête
    return store


@pytest.mark.parametrize(
    "method,path",
    [
        ("get", "/geojson"),
        ("get", "/geojson/USA"),
        ("post", "/geojson"),
        ("put", "/geojson/USA"),
        ("delete", "/geojson/USA"),
    ],
)
def test_requests_before_connection_are_rejected(settings, pending_store, method, path):
    app = create_app(settings=settings, store=pending_store)
    client = TestClient(app)  # sans lifespan : la connexion n'est jamais ouverte
    kwargs = {"json": {"a": 1}} if method in ("post", "put") else {}
    r = getattr(client, method)(path, **kwargs)
    assert r.status_code == 500
    assert r.json() == {"error": "Database not initialized"}
    assert pending_store._collection.calls == []


def test_fail_fast_startup_raises(settings, pending_store, monkeypatch):
    async def boom(self):
        self.state = StoreState.FAILED
        raise StoreFailureError("connect", RuntimeError("no server"))

    monkeypatch.setattr(MongoStore, "connect", boom)
    app = create_app(settings=settings, store=pending_store)
    with pytest.raises(StoreFailureError):
        with TestClient(app):
            pass


def test_background_connection_failure_keeps_serving(tmp_path, pending_store, monkeypatch):
    async def boom(self):
        self.state = StoreState.FAILED
        raise StoreFailureError("connect", RuntimeError("no server"))

    monkeypatch.setattr(MongoStore, "connect", boom)
    settings = Settings(log_dir=str(tmp_path), mongodb_fail_fast=False)
    app = create_app(settings=settings, store=pending_store)
    with TestClient(app) as client:
        assert client.get("/ping").status_code == 200
        r = client.get("/geojson")
    assert r.status_code == 500
    assert r.json() == {"error": "Database not initialized"}


def test_shutdown_closes_store(settings, store):
    app = create_app(settings=settings, store=store)
    with TestClient(app):
        assert store.is_ready
    assert store.state is StoreState.CLOSED


def test_ping(client):
    assert client.get("/ping").json() == {"status": "ok", "message": "pong"}


def test_health_ok(client):
    r = client.get("/health")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "ok"
    assert body["checks"] == {"database": "ok"}
    assert body["version"] == "0.1.0"


def test_health_degraded(client, collection):
    collection.fail = True
    r = client.get("/health")
    assert r.status_code == 503
    assert r.json()["checks"]["database"].startswith("error:")


def test_body_too_large(tmp_path, store):
    settings = Settings(log_dir=str(tmp_path), one_mb=10, max_body_mb=1)
    app = create_app(settings=settings, store=store)
    with TestClient(app) as client:
        r = client.post("/geojson", json={"country_name": "Far too long"})
    assert r.status_code == 413
    assert "error" in r.json()


def test_shutdown_cancels_pending_background_connection(tmp_path, pending_store, monkeypatch):
    events = []

    async def slow_connect(self):
        try:
            await asyncio.sleep(3600)
        except asyncio.CancelledError:
            events.append("cancelled")
            raise

    monkeypatch.setattr(MongoStore, "connect", slow_connect)
    settings = Settings(log_dir=str(tmp_path), mongodb_fail_fast=False)
    app = create_app(settings=settings, store=pending_store)
    with TestClient(app) as client:
        assert client.get("/geojson").status_code == 500

    assert events == ["cancelled"]
    assert pending_store.state is StoreState.CLOSED
