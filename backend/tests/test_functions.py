import pytest
from fastapi.testclient import TestClient

from app.core.settings import Settings, get_settings
from app.functions.contact import app as contact_app
from app.functions.status import app as status_app
from app.routers.contact import get_transport_factory
from conftest import make_settings

VALID = {"name": "Jo", "email": "jo@example.com", "message": "Hello there"}


@pytest.fixture
def contact_client(transport):
    contact_app.dependency_overrides[get_settings] = lambda: make_settings()
    contact_app.dependency_overrides[get_transport_factory] = lambda: transport
    yield TestClient(contact_app)
    contact_app.dependency_overrides.clear()


@pytest.mark.parametrize("path", ["/", "/api/contact"])
def test_contact_function_sends(contact_client, transport, path):
    resp = contact_client.post(path, json=VALID)
    assert resp.status_code == 200
    assert resp.json()["success"] is True
    # same verify-then-send behaviour as the routed handler
    assert transport.verified == 1
    assert len(transport.sent) == 1


def test_contact_function_validation(contact_client):
    resp = contact_client.post("/", json={"name": "", "email": "bad", "message": "hi"})
    assert resp.status_code == 400
    assert len(resp.json()["errors"]) == 3


def test_contact_function_method_gate(contact_client):
    resp = contact_client.get("/")
    assert resp.status_code == 405
    assert resp.json() == {"success": False, "message": "Method not allowed"}

    preflight = contact_client.options("/", headers={"Origin": "http://localhost:5173"})
    assert preflight.status_code == 200
    assert preflight.content == b""
    assert preflight.headers["access-control-allow-origin"] == "http://localhost:5173"


def test_contact_function_missing_config(contact_client, transport):
    contact_app.dependency_overrides[get_settings] = lambda: Settings(_env_file=None)
    resp = contact_client.post("/", json=VALID)
    assert resp.status_code == 500
    assert "SMTP_HOST, SMTP_USER, SMTP_PASSWORD, CONTACT_EMAIL" in resp.json()["message"]
    assert transport.built == []


def test_status_function():
    client = TestClient(status_app)
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"

    assert client.post("/").status_code == 405
    assert client.options("/").status_code == 200
