BASE = "/api/v1/colleges"


def test_create_and_get_college(client):
    response = client.post(f"{BASE}/", json={"name": "Tech U", "address": "1 Main St"})
    assert response.status_code == 201
    created = response.json()
    assert created == {"id": 1, "name": "Tech U", "address": "1 Main St"}

    response = client.get(f"{BASE}/1")
    assert response.status_code == 200
    assert response.json() == created


def test_get_missing_college(client):
    response = client.get(f"{BASE}/99")
    assert response.status_code == 404
    body = response.json()
    assert body["message"] == "College not found with ID: 99"
    assert body["status_code"] == 404
    assert body["details"] == "uri=/api/v1/colleges/99"


def test_id_beyond_integer_range_is_not_found(client):
    url = f"{BASE}/99999999999999999999"
    for response in (
        client.get(url),
        client.patch(url, json={"name": "Tech Institute"}),
        client.delete(url),
    ):
        assert response.status_code == 404
        assert response.json()["message"] == "College not found with ID: 99999999999999999999"


def test_batch_create_and_list(client):
    payload = [
        {"name": "North College", "address": "10 North Rd"},
        {"name": "South College", "address": "20 South Rd"},
    ]
    response = client.post(f"{BASE}/batch", json=payload)
    assert response.status_code == 201
    assert [c["name"] for c in response.json()] == ["North College", "South College"]

    listed = client.get(f"{BASE}/").json()
    assert [c["id"] for c in listed] == [1, 2]


def test_batch_with_invalid_item_stores_nothing(client):
    payload = [
        {"name": "North College", "address": "10 North Rd"},
        {"name": "S", "address": "20 South Rd"},
    ]
    response = client.post(f"{BASE}/batch", json=payload)
    assert response.status_code == 400
    assert response.json() == {"1.name": "College name must be between 2 and 100 characters"}
    assert client.get(f"{BASE}/").json() == []


def test_lookup_by_name_and_address(client, college):
    assert client.get(f"{BASE}/name/Tech U").json()["id"] == college["id"]
    assert client.get(f"{BASE}/address/1 Main St").json()["id"] == college["id"]

    response = client.get(f"{BASE}/name/Nowhere U")
    assert response.status_code == 404
    assert response.json()["message"] == "College not found with name: Nowhere U"


def test_lookup_by_name_returns_first_match(client):
    client.post(f"{BASE}/", json={"name": "Twin", "address": "1 First St"})
    client.post(f"{BASE}/", json={"name": "Twin", "address": "2 Second St"})
    assert client.get(f"{BASE}/name/Twin").json()["address"] == "1 First St"


def test_update_replaces_all_fields(client, college):
    response = client.put(
        f"{BASE}/{college['id']}", json={"name": "Tech University", "address": "2 Side St"}
    )
    assert response.status_code == 200
    assert response.json() == {"id": college["id"], "name": "Tech University", "address": "2 Side St"}


def test_update_requires_every_field(client, college):
    response = client.put(f"{BASE}/{college['id']}", json={"name": "Tech University"})
    assert response.status_code == 400
    assert "address" in response.json()


def test_update_missing_college(client):
    response = client.put(f"{BASE}/5", json={"name": "Tech University", "address": "2 Side St"})
    assert response.status_code == 404


def test_patch_only_changes_non_empty_fields(client, college):
    response = client.patch(f"{BASE}/{college['id']}", json={"name": "", "address": "9 New Ave"})
    assert response.status_code == 200
    assert response.json() == {"id": college["id"], "name": "Tech U", "address": "9 New Ave"}

    response = client.patch(f"{BASE}/{college['id']}", json={"name": "Tech Institute"})
    assert response.json() == {"id": college["id"], "name": "Tech Institute", "address": "9 New Ave"}


def test_patch_validates_supplied_values(client, college):
    response = client.patch(f"{BASE}/{college['id']}", json={"address": "x"})
    assert response.status_code == 400
    assert response.json() == {"address": "College address must be between 5 and 255 characters"}


def test_patch_rejects_whitespace_only_values(client, college):
    response = client.patch(f"{BASE}/{college['id']}", json={"name": "   "})
    assert response.status_code == 400
    assert response.json() == {"name": "College name is required"}
    assert client.get(f"{BASE}/{college['id']}").json() == college


def test_delete_returns_removed_college(client, college):
    response = client.delete(f"{BASE}/{college['id']}")
    assert response.status_code == 200
    assert response.json() == college
    assert client.get(f"{BASE}/{college['id']}").status_code == 404


def test_delete_missing_college(client):
    response = client.delete(f"{BASE}/3")
    assert response.status_code == 404
    assert response.json()["message"] == "College not found with ID: 3"


def test_delete_rejected_while_departments_exist(client, college, department):
    response = client.delete(f"{BASE}/{college['id']}")
    assert response.status_code == 409
    assert "1 departments" in response.json()["message"]
    assert client.get(f"{BASE}/{college['id']}").status_code == 200

    assert client.delete(f"/api/v1/departments/{department['id']}").status_code == 200
    assert client.delete(f"{BASE}/{college['id']}").status_code == 200
