from fastapi.testclient import TestClient

from product_common.memory import InMemoryProductStore

from create_service.app import create_app

store = InMemoryProductStore()
client = TestClient(create_app(repository=store))


def test_health():
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.text == "Create service OK"


def test_create_product():
    resp = client.post(
        "/products",
        json={"name": "Widget", "price": 9.99, "description": "A fine widget", "stock": 3},
    )
    assert resp.status_code == 201
    product = resp.json()
    assert product["name"] == "Widget"
    assert product["price"] == 9.99
    assert product["stock"] == 3
    assert len(product["id"]) == 24
    assert any(p.id == product["id"] for p in store.find_all())


def test_create_product_invalid_json():
    resp = client.post("/products", content="{not json", headers={"Content-Type": "application/json"})
    assert resp.status_code == 400
    assert resp.json()["detail"].startswith("invalid json")


def test_create_product_wrong_type():
    resp = client.post("/products", json={"name": "Widget", "stock": "many"})
    assert resp.status_code == 400


def test_create_product_wrong_method():
    resp = client.get("/products")
    assert resp.status_code == 405


def test_create_product_store_error():
    failing = TestClient(create_app(repository=InMemoryProductStore(fail_with="write failed")))
    resp = failing.post("/products", json={"name": "Widget", "price": 1.0})
    assert resp.status_code == 500
    assert resp.json()["detail"] == "create error: write failed"


def test_create_product_string_price():
    resp = client.post("/products", json={"name": "W", "price": "9.99"})
    assert resp.status_code == 400


def test_create_product_string_stock():
    resp = client.post("/products", json={"name": "W", "stock": "3"})
    assert resp.status_code == 400


def test_create_product_boolean_stock():
    resp = client.post("/products", json={"name": "W", "stock": True})
    assert resp.status_code == 400


def test_create_product_stock_beyond_int64():
    resp = client.post("/products", json={"name": "W", "stock": 2**70})
    assert resp.status_code == 400
    assert resp.json()["detail"].startswith("invalid json")


def test_create_product_integer_price():
    resp = client.post("/products", json={"name": "W", "price": 10, "stock": 2**63 - 1})
    assert resp.status_code == 201
    assert resp.json()["price"] == 10.0
    assert resp.json()["stock"] == 2**63 - 1
