"""
Tests for the product catalog API.
"""

import pytest
from fastapi.testclient import TestClient

from product_catalog.api import dependencies
from product_catalog.api.app import app
from product_catalog.config import Settings
from product_catalog.entities import Product
from product_catalog.handlers import ProductHandler


@pytest.fixture
def client(service):
    """Create a test client wired to the in-memory service fixture."""
    app.state.product_handler = ProductHandler(product_service=service)
    yield TestClient(app)
    del app.state.product_handler


def _create(client, name="Chair", price=80.0, category="Furniture"):
    response = client.post("/products", json={"name": name, "price": price, "category": category})
    assert response.status_code == 201
    return response.json()


def test_root(client):
    """Test root endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Product Catalog API"


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "store_healthy": True, "cache_healthy": True}


def test_health_reports_store_outage(client, store):
    store.unavailable = True
    response = client.get("/health")
    assert response.status_code == 503


def test_create_and_get(client, store):
    created = _create(client)
    assert created["id"]

    first = client.get(f"/products/{created['id']}")
    second = client.get(f"/products/{created['id']}")

    assert first.status_code == 200
    assert second.json() == created
    assert store.calls["find_by_id"] == 1


def test_get_missing_returns_404(client):
    response = client.get("/products/missing")
    assert response.status_code == 404


def test_create_rejects_negative_price(client):
    response = client.post("/products", json={"name": "Chair", "price": -1, "category": "Furniture"})
    assert response.status_code == 422


def test_list_and_category(client):
    _create(client, "Keyboard", 75.0, "Accessories")
    _create(client, "Monitor", 300.0, "Displays")

    everything = client.get("/products").json()
    accessories = client.get("/products/category/Accessories").json()

    assert everything["count"] == 2
    assert accessories["count"] == 1
    assert accessories["products"][0]["name"] == "Keyboard"


def test_update(client):
    created = _create(client)

    response = client.put(f"/products/{created['id']}", json={"name": "Armchair"})

    assert response.status_code == 200
    assert response.json() == {**created, "name": "Armchair"}
    assert client.get(f"/products/{created['id']}").json()["name"] == "Armchair"


def test_update_missing_returns_404(client):
    response = client.put("/products/missing", json={"price": 10})
    assert response.status_code == 404


def test_delete(client):
    created = _create(client)

    assert client.delete(f"/products/{created['id']}").status_code == 204
    assert client.get(f"/products/{created['id']}").status_code == 404
    assert client.delete(f"/products/{created['id']}").status_code == 404


def test_store_outage_returns_503(client, store):
    store.unavailable = True
    response = client.get("/products/p1")
    assert response.status_code == 503


def test_stats_and_clear_cache(client):
    created = _create(client)
    client.get(f"/products/{created['id']}")
    client.get(f"/products/{created['id']}")

    stats = client.get("/stats").json()
    assert stats["cache_name"] == "products"
    assert stats["hits"] == 1
    assert stats["misses"] == 1

    cleared = client.delete("/cache").json()
    assert cleared["deleted_count"] == 1


def test_negative_price_saved_through_service_is_readable(client, service):
    refund = service.create(Product(name="Refund voucher", price=-5.0, category="Credits"))

    response = client.get(f"/products/{refund.id}")

    assert response.status_code == 200
    assert response.json()["price"] == -5.0


def test_lifespan_wires_handler(monkeypatch):
    monkeypatch.setattr(dependencies, "settings", Settings(store_backend="memory", cache_backend="memory"))

    with TestClient(app) as client:
        assert client.get("/health").status_code == 200
        created = _create(client)
        assert client.get(f"/products/{created['id']}").json() == created
        assert isinstance(app.state.product_handler, ProductHandler)
        assert not hasattr(app.state, "product_service")

    assert not hasattr(app.state, "product_handler")
