from database import PRODUCTS


def test_list_products_empty(client):
    resp = client.get("/api/products")
    assert resp.status_code == 200
    assert resp.json() == []


def test_create_then_get_returns_fields(client, make_product):
    product_id = make_product(name="Onyx Nightstand", price=65000, category="Bedroom")
    resp = client.get(f"/api/products/{product_id}")
    assert resp.status_code == 200
    body = resp.json()
    assert body["id"] == product_id
    assert body["name"] == "Onyx Nightstand"
    assert body["price"] == 65000
    assert body["category"] == "Bedroom"
    assert body["additional_images"] == []


def test_ids_are_fresh_and_never_reused(client, make_product, admin_headers):
    first = make_product(name="A")
    second = make_product(name="B")
    assert isinstance(first, int)
    assert second != first
    client.delete(f"/api/admin/products/{second}", headers=admin_headers)
    third = make_product(name="C")
    assert third not in (first, second)


def test_list_products_in_storage_order(client, make_product):
    ids = [make_product(name=name) for name in ("Lamp", "Vase", "Desk")]
    listed = client.get("/api/products").json()
    assert [p["id"] for p in listed] == ids


def test_get_unknown_product_is_404(client):
    resp = client.get("/api/products/4242")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Product not found"}


def test_get_malformed_id_is_400(client):
    resp = client.get("/api/products/not-a-number")
    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid ID format"}


def test_create_requires_name_and_price(client, admin_headers):
    resp = client.post("/api/admin/products", json={"price": 10}, headers=admin_headers)
    assert resp.status_code == 400
    assert resp.json() == {"error": "name is required"}

    resp = client.post("/api/admin/products", json={"name": "Chair"}, headers=admin_headers)
    assert resp.status_code == 400
    assert resp.json() == {"error": "price is required"}


def test_create_accepts_negative_price_and_any_category(client, make_product):
    product_id = make_product(price=-5, category="Spaceship")
    body = client.get(f"/api/products/{product_id}").json()
    assert body["price"] == -5
    assert body["category"] == "Spaceship"


def test_additional_images_stored_delimited_exposed_as_list(client, store, make_product):
    images = ["https://img.example/a.jpg", "https://img.example/b.jpg"]
    product_id = make_product(additional_images=images)

    raw = store[PRODUCTS].find_one({"_id": product_id})
    assert raw["additional_images"] == "https://img.example/a.jpg,https://img.example/b.jpg"

    body = client.get(f"/api/products/{product_id}").json()
    assert body["additional_images"] == images


def test_additional_images_accepts_delimited_string(client, make_product):
    product_id = make_product(additional_images="https://img.example/a.jpg, https://img.example/b.jpg")
    body = client.get(f"/api/products/{product_id}").json()
    assert body["additional_images"] == ["https://img.example/a.jpg", "https://img.example/b.jpg"]


def test_update_replaces_all_fields(client, make_product, admin_headers):
    product_id = make_product(description="Old copy", materials="Oak")
    resp = client.put(
        f"/api/admin/products/{product_id}",
        json={"name": "Renamed Chair", "price": 1200},
        headers=admin_headers,
    )
    assert resp.status_code == 200
    assert resp.json() == {"success": True}

    body = client.get(f"/api/products/{product_id}").json()
    assert body["name"] == "Renamed Chair"
    assert body["price"] == 1200
    assert body["description"] is None
    assert body["materials"] is None


def test_update_unknown_product_is_404(client, admin_headers):
    resp = client.put("/api/admin/products/999", json={"name": "Ghost", "price": 1}, headers=admin_headers)
    assert resp.status_code == 404


def test_delete_then_get_is_404(client, make_product, admin_headers):
    product_id = make_product()
    resp = client.delete(f"/api/admin/products/{product_id}", headers=admin_headers)
    assert resp.status_code == 200
    assert resp.json() == {"success": True}
    assert client.get(f"/api/products/{product_id}").status_code == 404


def test_delete_unknown_product_is_404(client, admin_headers):
    assert client.delete("/api/admin/products/31337", headers=admin_headers).status_code == 404


def test_ids_outside_the_sequence_are_404(client, admin_headers):
    for product_id in ("0", "-3", "99999999999999999999"):
        resp = client.get(f"/api/products/{product_id}")
        assert resp.status_code == 404
        assert resp.json() == {"error": "Product not found"}
    resp = client.delete("/api/admin/products/99999999999999999999", headers=admin_headers)
    assert resp.status_code == 404
    resp = client.put("/api/admin/products/99999999999999999999",
                      json={"name": "Ghost", "price": 1}, headers=admin_headers)
    assert resp.status_code == 404


def test_create_rejects_nan_price(client, admin_headers):
    resp = client.post(
        "/api/admin/products",
        content='{"name": "X", "price": NaN}',
        headers={**admin_headers, "Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    assert client.get("/api/products").json() == []
