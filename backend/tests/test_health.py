# backend/tests/test_health.py
from datetime import datetime

from fastapi.testclient import TestClient
from app.main import app

client = TestClient(app)


def test_health():
    """Basic health endpoint returns status ok."""
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_api_status():
    """Status endpoint advertises version, endpoints and a UTC timestamp."""
    resp = client.get("/api/status")
    assert resp.status_code == 200
    data = resp.json()

    assert data["status"] == "ok"
    assert data["message"] == "Portfolio Server API is running"
    assert data["version"] == "1.0.0"
    assert data["endpoints"]["contact"] == "/api/contact"
    assert datetime.fromisoformat(data["timestamp"]).tzinfo is not None


def test_api_status_rejects_post():
    resp = client.post("/api/status")
    assert resp.status_code == 405
    assert resp.json() == {"success": False, "message": "Method not allowed"}


def test_unknown_route_is_404():
    resp = client.get("/api/nope")
    assert resp.status_code == 404
