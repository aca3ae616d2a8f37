"""HTTP tests for /api/v1/products, including the end-to-end catalog scenario."""

import pytest

CATEGORIES = "/api/v1/categories"
PRODUCTS = "/api/v1/products"


@pytest.fixture
def fruits_id(client):
    response = client.post(CATEGORIES, json={"name": "Fruits", "description": "Fresh fruits and citrus"})
    assert response.status_code == 201
    return client.get(CATEGORIES).json()[0]["idCategory"]


def _payload(id_category, **overrides):
    payload = {
        "name": "Banana Box",
        "description": "A box of bananas",
        "totalQuantity": 10,
        "price": 5.5,
        "idCategory": id_category,
    }
    payload.update(overrides)
    return payload


def _only_product_id(client):
    products = client.get(PRODUCTS).json()
    assert len(products) == 1
    return products[0]["idProduct"]


def test_catalog_scenario(client):
    response = client.post(CATEGORIES, json={"name": "Fruits", "description": "Fresh fruits and citrus"})
    assert response.status_code == 201
    response = client.post(CATEGORIES, json={"name": "Fruits", "description": "Fresh fruits and citrus"})
    assert response.status_code == 409
    fruits_id = client.get(CATEGORIES).json()[0]["idCategory"]

    response = client.post(PRODUCTS, json=_payload(fruits_id))
    assert response.status_code == 201
    assert response.json() == {"message": "Product created successfully"}
    product_id = _only_product_id(client)

    product = client.get(f"{PRODUCTS}/{product_id}").json()
    for key, value in _payload(fruits_id).items():
        assert product[key] == value

    response = client.put(f"{PRODUCTS}/{product_id}", json={"totalQuantity": 20})
    assert response.status_code == 200
    assert response.json() == {"message": "Product updated successfully"}
    updated = client.get(f"{PRODUCTS}/{product_id}").json()
    assert updated == {**product, "totalQuantity": 20}

    response = client.delete(f"{PRODUCTS}/{product_id}")
    assert response.status_code == 200
    assert response.json() == {"message": "Product deleted successfully"}
    assert client.get(f"{PRODUCTS}/{product_id}").status_code == 404


class TestCreate:

    def test_unknown_category_writes_nothing(self, client, product_store):
        response = client.post(PRODUCTS, json=_payload(999))
        assert response.status_code == 400
        assert response.json()["message"] == (
            "The specified product category does not exist. Please verify the entered data."
        )
        assert product_store.find_all() == []

    def test_duplicate_name(self, client, fruits_id):
        client.post(PRODUCTS, json=_payload(fruits_id))
        response = client.post(PRODUCTS, json=_payload(fruits_id, description="Another box of bananas"))
        assert response.status_code == 409
        assert response.json()["message"] == "Product name already exists. Please choose another name."

    @pytest.mark.parametrize(
        "overrides, message",
        [
            ({"name": "Box"}, "Product name must be between 4 and 50 characters"),
            ({"description": "Bananas"}, "Product description must be at least 10 characters"),
            ({"totalQuantity": -1}, "Total quantity cannot be negative"),
            ({"price": 0.99}, "Price must be a positive value"),
            ({"idCategory": None}, "Category cannot be null"),
        ],
    )
    def test_field_validation(self, client, fruits_id, overrides, message):
        response = client.post(PRODUCTS, json=_payload(fruits_id, **overrides))
        assert response.status_code == 400
        assert response.json() == {"message": message}

    def test_first_violation_only(self, client, fruits_id):
        response = client.post(PRODUCTS, json=_payload(fruits_id, name="Box", price=0))
        assert response.json() == {"message": "Product name must be between 4 and 50 characters"}


class TestUpdate:

    def test_unknown_category(self, client, fruits_id):
        client.post(PRODUCTS, json=_payload(fruits_id))
        product_id = _only_product_id(client)
        response = client.put(f"{PRODUCTS}/{product_id}", json={"idCategory": 999})
        assert response.status_code == 400
        assert client.get(f"{PRODUCTS}/{product_id}").json()["idCategory"] == fruits_id

    def test_rename_conflict(self, client, fruits_id):
        client.post(PRODUCTS, json=_payload(fruits_id))
        client.post(PRODUCTS, json=_payload(fruits_id, name="Apple Crate"))
        apple_id = [p for p in client.get(PRODUCTS).json() if p["name"] == "Apple Crate"][0]["idProduct"]
        response = client.put(f"{PRODUCTS}/{apple_id}", json={"name": "Banana Box"})
        assert response.status_code == 409

    def test_update_missing(self, client):
        response = client.put(f"{PRODUCTS}/77", json={"price": 3})
        assert response.status_code == 404
        assert response.json() == {"message": "Product does not exist"}

    def test_invalid_field(self, client, fruits_id):
        client.post(PRODUCTS, json=_payload(fruits_id))
        product_id = _only_product_id(client)
        response = client.put(f"{PRODUCTS}/{product_id}", json={"price": 0})
        assert response.status_code == 400
        assert response.json() == {"message": "Price must be a positive value"}


class TestReadAndDelete:

    def test_product_keeps_category_after_category_delete(self, client, fruits_id):
        client.post(PRODUCTS, json=_payload(fruits_id))
        product_id = _only_product_id(client)
        assert client.delete(f"{CATEGORIES}/{fruits_id}").status_code == 200
        product = client.get(f"{PRODUCTS}/{product_id}").json()
        assert product["idCategory"] == fruits_id
        assert product["categoryName"] is None

    def test_delete_missing(self, client):
        response = client.delete(f"{PRODUCTS}/5")
        assert response.status_code == 404


def _raw_json(client, method, url, body):
    # Sent as text since NaN and 1e999 are not accepted by the JSON encoder of the client.
    return client.request(method, url, content=body, headers={"Content-Type": "application/json"})


def _raw_payload(id_category, price="5.5", quantity="10"):
    return (
        '{"name": "Banana Box", "description": "A box of bananas", '
        f'"totalQuantity": {quantity}, "price": {price}, "idCategory": {id_category}}}'
    )


class TestNumericLimits:

    @pytest.mark.parametrize("price", ["NaN", "1e999", "-1e999"])
    def test_create_rejects_non_finite_price(self, client, fruits_id, product_store, price):
        response = _raw_json(client, "POST", PRODUCTS, _raw_payload(fruits_id, price=price))
        assert response.status_code == 400
        assert response.json() == {"message": "Price must be a positive value"}
        assert product_store.find_all() == []

    @pytest.mark.parametrize("price", ["NaN", "1e999"])
    def test_update_rejects_non_finite_price(self, client, fruits_id, price):
        client.post(PRODUCTS, json=_payload(fruits_id))
        product_id = _only_product_id(client)
        response = _raw_json(client, "PUT", f"{PRODUCTS}/{product_id}", f'{{"price": {price}}}')
        assert response.status_code == 400
        assert response.json() == {"message": "Price must be a positive value"}
        assert client.get(f"{PRODUCTS}/{product_id}").json()["price"] == 5.5

    @pytest.mark.parametrize("quantity", ["2147483648", "99999999999999999999999"])
    def test_create_rejects_oversized_quantity(self, client, fruits_id, product_store, quantity):
        response = _raw_json(client, "POST", PRODUCTS, _raw_payload(fruits_id, quantity=quantity))
        assert response.status_code == 400
        assert response.json() == {"message": "Total quantity cannot exceed 2147483647"}
        assert product_store.find_all() == []

    def test_update_rejects_oversized_quantity(self, client, fruits_id):
        client.post(PRODUCTS, json=_payload(fruits_id))
        product_id = _only_product_id(client)
        response = client.put(f"{PRODUCTS}/{product_id}", json={"totalQuantity": 10**23})
        assert response.status_code == 400
        assert response.json() == {"message": "Total quantity cannot exceed 2147483647"}
        assert client.get(f"{PRODUCTS}/{product_id}").json()["totalQuantity"] == 10

    def test_largest_quantity_is_stored(self, client, fruits_id):
        response = client.post(PRODUCTS, json=_payload(fruits_id, totalQuantity=2147483647))
        assert response.status_code == 201
        assert client.get(PRODUCTS).json()[0]["totalQuantity"] == 2147483647
