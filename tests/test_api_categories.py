"""HTTP tests for /api/v1/categories."""

BASE = "/api/v1/categories"


def _create(client, name="Fruits", description="Fresh fruits and citrus"):
    return client.post(BASE, json={"name": name, "description": description})


def _id_of(client, name):
    for category in client.get(BASE).json():
        if category["name"] == name:
            return category["idCategory"]
    raise AssertionError(f"category {name!r} not listed")


class TestCreate:

    def test_created(self, client):
        response = _create(client)
        assert response.status_code == 201
        assert response.json() == {"message": "Category created successfully"}

    def test_duplicate_name(self, client):
        _create(client)
        response = _create(client, description="Some other description")
        assert response.status_code == 409
        assert response.json()["message"] == "Category name already exists. Please choose another name."

    def test_name_boundaries(self, client):
        assert _create(client, name="Abcd").status_code == 201
        response = _create(client, name="Abc")
        assert response.status_code == 400
        assert response.json() == {"message": "Category name must be between 4 and 50 characters"}

    def test_description_boundaries(self, client):
        assert _create(client, name="Tenner", description="0123456789").status_code == 201
        response = _create(client, name="Niner", description="012345678")
        assert response.status_code == 400
        assert response.json()["message"] == "Category description must be at least 10 characters"

    def test_missing_body_fields(self, client):
        response = client.post(BASE, json={})
        assert response.status_code == 400
        assert response.json() == {"message": "The category name is required"}


class TestRead:

    def test_list_and_get(self, client):
        _create(client)
        listed = client.get(BASE).json()
        assert listed == [
            {"idCategory": listed[0]["idCategory"], "name": "Fruits", "description": "Fresh fruits and citrus"}
        ]
        response = client.get(f"{BASE}/{listed[0]['idCategory']}")
        assert response.status_code == 200
        assert response.json() == listed[0]

    def test_get_missing(self, client):
        response = client.get(f"{BASE}/999")
        assert response.status_code == 404
        assert response.json() == {"message": "Category does not exist"}


class TestUpdate:

    def test_partial_update(self, client):
        _create(client)
        category_id = _id_of(client, "Fruits")
        response = client.put(f"{BASE}/{category_id}", json={"description": "Citrus and berries"})
        assert response.status_code == 200
        assert response.json() == {"message": "Category updated successfully"}
        category = client.get(f"{BASE}/{category_id}").json()
        assert category["name"] == "Fruits"
        assert category["description"] == "Citrus and berries"

    def test_empty_patch_keeps_values(self, client):
        _create(client)
        category_id = _id_of(client, "Fruits")
        before = client.get(f"{BASE}/{category_id}").json()
        assert client.put(f"{BASE}/{category_id}", json={}).status_code == 200
        assert client.get(f"{BASE}/{category_id}").json() == before

    def test_rename_to_own_name_is_allowed(self, client):
        _create(client)
        category_id = _id_of(client, "Fruits")
        assert client.put(f"{BASE}/{category_id}", json={"name": "Fruits"}).status_code == 200

    def test_rename_conflict(self, client):
        _create(client)
        _create(client, name="Vegetables", description="Fresh vegetables")
        category_id = _id_of(client, "Vegetables")
        response = client.put(f"{BASE}/{category_id}", json={"name": "Fruits"})
        assert response.status_code == 409

    def test_update_missing(self, client):
        response = client.put(f"{BASE}/404", json={"name": "Anything"})
        assert response.status_code == 404
        assert response.json() == {"message": "Category does not exist"}

    def test_invalid_field(self, client):
        _create(client)
        category_id = _id_of(client, "Fruits")
        response = client.put(f"{BASE}/{category_id}", json={"name": "Abc"})
        assert response.status_code == 400


class TestDelete:

    def test_delete_then_absent(self, client):
        _create(client)
        category_id = _id_of(client, "Fruits")
        response = client.delete(f"{BASE}/{category_id}")
        assert response.status_code == 200
        assert response.json() == {"message": "Category deleted successfully"}
        assert client.get(f"{BASE}/{category_id}").status_code == 404
        assert client.delete(f"{BASE}/{category_id}").status_code == 404
