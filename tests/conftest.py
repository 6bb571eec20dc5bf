import uuid

import mongomock
import pytest
from fastapi.testclient import TestClient

from config import Settings
from main import create_app

ADMIN_KEY = "test-admin-key"


@pytest.fixture
def settings():
    return Settings(
        database_name=f"storefront_test_{uuid.uuid4().hex[:8]}",
        admin_key=ADMIN_KEY,
        seed_catalog=False,
    )


@pytest.fixture
def app(settings):
    return create_app(settings, client_factory=mongomock.MongoClient)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def store(client, app):
    return app.state.store


@pytest.fixture
def admin_headers():
    return {"X-Admin-Key": ADMIN_KEY}


@pytest.fixture
def make_product(client, admin_headers):
    def _make(**fields):
        body = {"name": "Test Chair", "price": 1000}
        body.update(fields)
        resp = client.post("/api/admin/products", json=body, headers=admin_headers)
        assert resp.status_code == 201, resp.text
        return resp.json()["id"]
    return _make


@pytest.fixture
def place_order(client):
    def _place(items, **customer):
        body = {
            "customer_name": "Ada Lovelace",
            "customer_email": "ada@example.com",
            "customer_phone": "+44 20 7946 0000",
            "customer_address": "12 St James's Square, London",
            "items": items,
        }
        body.update(customer)
        return client.post("/api/orders", json=body)
    return _place
