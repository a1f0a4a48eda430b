"""
Unit tests using FastAPI TestClient (no separate server needed).
"""

import pytest
from fastapi.testclient import TestClient

from hoverdict.core.store import DictionaryStore
from hoverdict.server.deps import get_store
from hoverdict.server.main import app, init_store


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestHover:
    def test_hover_found(self, client):
        r = client.post("/api/hover", json={"line": "the cat sat", "character": 5})
        assert r.status_code == 200
        contents = r.json()["contents"]
        assert contents["kind"] == "markdown"
        assert contents["value"].startswith("_cat_")
    
    def test_hover_phrase(self, client):
        r = client.post("/api/hover", json={"line": "helloWorld", "character": 7})
        assert r.status_code == 200
        assert r.json()["contents"]["value"].startswith("_hello World_")
    
    def test_hover_no_content(self, client):
        r = client.post("/api/hover", json={"line": "zzyzx qqq", "character": 2})
        assert r.status_code == 200
        assert r.json() is None
    
    def test_hover_bad_request(self, client):
        r = client.post("/api/hover", json={"line": "cat"})
        assert r.status_code == 422


class TestResolve:
    def test_resolve_candidates(self, client):
        r = client.get("/api/resolve", params={"text": "helloWorld", "offset": 5})
        assert r.status_code == 200
        candidates = r.json()["candidates"]
        assert [c["strategy"] for c in candidates] == ["exact", "normalized", "subtoken"]
        assert [c["found"] for c in candidates] == [False, True, True]
        assert candidates[2]["display"] == "World"
    
    def test_resolve_empty(self, client):
        r = client.get("/api/resolve", params={"text": ""})
        assert r.json() == {"candidates": []}


class TestWords:
    def test_get_word(self, client):
        r = client.get("/api/words/Cat")
        assert r.status_code == 200
        data = r.json()
        assert data["phonetic"] == "kæt"
        assert data["translation"] == "猫"
        assert data["markdown"].startswith("_Cat_")
    
    def test_word_not_found(self, client):
        r = client.get("/api/words/nonexistent")
        assert r.status_code == 404
    
    def test_store_info(self, client, dataset):
        r = client.get("/api/store")
        data = r.json()
        assert data["initialized"] is True
        assert data["size"] == 6
        assert data["path"] == str(dataset)


def test_root():
    r = TestClient(app).get("/")
    assert r.json()["name"] == "hoverdict API"


def test_init_store_uses_cached_dataset(dataset, monkeypatch):
    fresh = DictionaryStore()
    monkeypatch.setattr("hoverdict.server.main.get_store", lambda: fresh)
    
    store = init_store(dataset.parent)
    
    assert store is fresh
    assert store.initialized
    assert store.lookup("world") is not None


def test_lifespan_loads_store_before_serving(dataset, monkeypatch):
    fresh = DictionaryStore()
    monkeypatch.setattr("hoverdict.server.main.ensure_dataset", lambda storage_dir: dataset)
    monkeypatch.setattr("hoverdict.server.main.get_store", lambda: fresh)
    app.dependency_overrides[get_store] = lambda: fresh
    
    try:
        with TestClient(app) as c:
            assert fresh.initialized
            r = c.get("/api/words/cat")
            assert r.status_code == 200
            assert r.json()["phonetic"] == "kæt"
            assert c.get("/api/store").json()["size"] == 6
    finally:
        app.dependency_overrides.clear()
