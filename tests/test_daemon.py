"""Tests for the classification daemon."""

import importlib

import pytest
from fastapi.testclient import TestClient

from compressible import daemon
from compressible.mime_db import COMPRESSIBLE_TYPES


@pytest.fixture
def client():
    with TestClient(daemon.app) as c:
        yield c


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ok"
        assert body["known_types"] == len(COMPRESSIBLE_TYPES)


class TestSingleLookup:
    def test_compressible_type(self, client):
        response = client.get("/compressible", params={"content_type": "text/html; charset=utf-8"})
        assert response.status_code == 200
        assert response.json() == {
            "content_type": "text/html; charset=utf-8",
            "essence": "text/html",
            "compressible": True,
            "reason": "exact",
        }

    def test_incompressible_type(self, client):
        response = client.get("/compressible", params={"content_type": "image/png"})
        assert response.json()["compressible"] is False
        assert response.json()["reason"] == "incompressible"

    def test_invalid_type(self, client):
        response = client.get("/compressible", params={"content_type": "garbage"})
        assert response.status_code == 200
        assert response.json()["essence"] is None
        assert response.json()["reason"] == "invalid"

    def test_missing_parameter(self, client):
        response = client.get("/compressible")
        assert response.status_code == 422


class TestBatch:
    def test_preserves_order(self, client):
        types = ["application/vnd.example+json", "video/mp4", "text/x-new", "application/x-unknown"]
        response = client.post("/classify", json={"content_types": types})
        assert response.status_code == 200
        body = response.json()
        assert [r["content_type"] for r in body] == types
        assert [r["compressible"] for r in body] == [True, False, True, False]
        assert [r["reason"] for r in body] == ["suffix", "incompressible", "prefix", "unknown"]

    def test_empty_batch_rejected(self, client):
        response = client.post("/classify", json={"content_types": []})
        assert response.status_code == 422

    def test_batch_limit(self, client, monkeypatch):
        monkeypatch.setattr(daemon, "MAX_BATCH", 2)
        response = client.post("/classify", json={"content_types": ["text/plain"] * 3})
        assert response.status_code == 413
        assert "exceeds limit of 2" in response.json()["detail"]


class TestLogLevel:
    def test_resolve_known_levels(self):
        assert daemon.resolve_log_level("debug") == "DEBUG"
        assert daemon.resolve_log_level(" warning ") == "WARNING"
        assert daemon.resolve_log_level("ERROR") == "ERROR"

    def test_resolve_falls_back_to_info(self):
        assert daemon.resolve_log_level("verbose") == "INFO"
        assert daemon.resolve_log_level("") == "INFO"
        assert daemon.resolve_log_level(None) == "INFO"

    def test_invalid_env_value_does_not_break_import(self, monkeypatch):
        monkeypatch.setenv("COMPRESSIBLE_LOG_LEVEL", "verbose")
        try:
            reloaded = importlib.reload(daemon)
            assert reloaded.LOG_LEVEL == "INFO"
        finally:
            monkeypatch.undo()
            importlib.reload(daemon)
