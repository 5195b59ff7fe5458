"""
Tests for the HTTP API.
"""

import base64

import pytest
from fastapi.testclient import TestClient

from gif_effects import __version__
from gif_effects.api import ENV_VAR, app


@pytest.fixture
def client():
    return TestClient(app)


class TestMetadata:
    """Tests for the non-rendering endpoints."""

    def test_health(self, client):
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "version": __version__}

    def test_favicon(self, client):
        assert client.get("/favicon.ico").status_code == 204

    def test_effects_list(self, client):
        data = client.get("/api/effects").json()
        names = [effect["name"] for effect in data["effects"]]
        assert data["total"] == 6
        assert "countdown" in names
        banner = next(effect for effect in data["effects"] if effect["name"] == "led-banner")
        assert banner["defaults"]["text"] == "Hello World!"
        assert banner["defaults"]["width"] == 800


class TestRenderGif:
    """Tests for GET /api/effects/{effect}."""

    def test_returns_gif(self, client):
        response = client.get("/api/effects/typing-text", params={"text": "HI", "width": 300})
        assert response.status_code == 200
        assert response.headers["content-type"] == "image/gif"
        assert response.headers["content-disposition"] == "inline"
        assert response.content[:6] == b"GIF89a"

    def test_camel_case_path(self, client):
        response = client.get("/api/effects/ledBanner", params={"text": "HI", "frames": 2})
        assert response.status_code == 200

    def test_not_cached_by_default(self, client, monkeypatch):
        monkeypatch.delenv(ENV_VAR, raising=False)
        response = client.get("/api/effects/flashing-text", params={"frames": 2})
        assert response.headers["cache-control"] == "no-store"

    def test_cached_in_production(self, client, monkeypatch):
        monkeypatch.setenv(ENV_VAR, "production")
        response = client.get("/api/effects/flashing-text", params={"frames": 2})
        assert response.headers["cache-control"] == "public, max-age=3600"

    def test_unknown_effect(self, client):
        response = client.get("/api/effects/sparkles")
        assert response.status_code == 400
        assert "Unknown effect" in response.json()["error"]

    def test_out_of_range_numbers_clamped(self, client):
        response = client.get(
            "/api/effects/countdown", params={"gmt": "1e12", "delay": "1e9", "frames": 2}
        )
        assert response.status_code == 200

    def test_bad_date(self, client):
        response = client.get("/api/effects/countdown", params={"date": "soon"})
        assert response.status_code == 400
        assert "Invalid date" in response.json()["error"]


class TestRenderBase64:
    """Tests for POST /api/effects/{effect}."""

    def test_returns_base64(self, client):
        response = client.post("/api/effects/led_banner", json={"text": "HI", "frames": 2})
        assert response.status_code == 200
        data = response.json()
        assert data["effect"] == "led-banner"
        assert base64.b64decode(data["image"])[:6] == b"GIF89a"

    def test_empty_body_uses_defaults(self, client):
        response = client.post("/api/effects/typing-text")
        assert response.status_code == 200

    def test_unknown_effect(self, client):
        response = client.post("/api/effects/sparkles", json={})
        assert response.status_code == 400
