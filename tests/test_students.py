BASE = "/api/v1/students"


def _student(department, name="Ada Lovelace", email="ada@example.com"):
    return {"name": name, "email": email, "department": {"id": department["id"]}}


def test_create_student_with_full_department_chain(client, college, department):
    response = client.post(f"{BASE}/", json=_student(department))
    assert response.status_code == 201
    body = response.json()
    assert body["email"] == "ada@example.com"
    assert body["department"]["id"] == department["id"]
    assert body["department"]["college"] == college
    assert client.get(f"{BASE}/{body['id']}").json() == body


def test_duplicate_email_conflicts(client, department):
    first = client.post(f"{BASE}/", json=_student(department))
    assert first.status_code == 201

    second = client.post(f"{BASE}/", json=_student(department, name="Ada Byron"))
    assert second.status_code == 409
    assert second.json()["message"] == "Student already exists with email: ada@example.com"

    listed = client.get(f"{BASE}/").json()
    assert [s["id"] for s in listed] == [first.json()["id"]]


def test_invalid_email_is_rejected(client, department):
    response = client.post(f"{BASE}/", json=_student(department, email="not-an-email"))
    assert response.status_code == 400
    assert "email" in response.json()


def test_unknown_department(client):
    response = client.post(
        f"{BASE}/", json={"name": "Ada Lovelace", "email": "ada@example.com", "department": {"id": 12}}
    )
    assert response.status_code == 404
    assert response.json()["message"] == "Department not found with ID: 12 for student Ada Lovelace"


def test_missing_department(client):
    response = client.post(f"{BASE}/", json={"name": "Ada Lovelace", "email": "ada@example.com"})
    assert response.status_code == 400
    assert response.json()["message"] == "Student must be associated with a valid Department ID."


def test_batch_with_unknown_department_stores_nothing(client, department):
    payload = [
        _student(department),
        _student(department, name="Grace Hopper", email="grace@example.com"),
        {"name": "Nobody", "email": "nobody@example.com", "department": {"id": 500}},
    ]
    response = client.post(f"{BASE}/batch", json=payload)
    assert response.status_code == 404
    assert client.get(f"{BASE}/").json() == []


def test_batch_with_repeated_email_stores_nothing(client, department):
    payload = [_student(department), _student(department, name="Ada Again")]
    response = client.post(f"{BASE}/batch", json=payload)
    assert response.status_code == 409
    assert client.get(f"{BASE}/").json() == []


def test_lookups(client, department):
    created = client.post(f"{BASE}/", json=_student(department)).json()
    assert client.get(f"{BASE}/email/ada@example.com").json() == created
    assert client.get(f"{BASE}/name/Ada Lovelace").json() == created
    response = client.get(f"{BASE}/email/missing@example.com")
    assert response.status_code == 404
    assert response.json()["message"] == "Student not found with email: missing@example.com"


def test_email_is_stored_as_submitted(client, department):
    created = client.post(f"{BASE}/", json=_student(department, email="Ada@Example.COM")).json()
    assert created["email"] == "Ada@Example.COM"
    response = client.get(f"{BASE}/email/Ada@Example.COM")
    assert response.status_code == 200
    assert response.json() == created

    response = client.patch(f"{BASE}/{created['id']}", json={"email": "Ada@Lovelace.ORG"})
    assert response.json()["email"] == "Ada@Lovelace.ORG"


def test_display_name_form_is_not_an_email(client, department):
    response = client.post(f"{BASE}/", json=_student(department, email="Ada <ada@example.com>"))
    assert response.status_code == 400
    assert "email" in response.json()


def test_list_by_department(client, department):
    created = client.post(f"{BASE}/", json=_student(department)).json()
    assert client.get(f"{BASE}/department/{department['id']}").json() == [created]
    assert client.get(f"{BASE}/department/999").json() == []


def test_patch_email_only(client, department):
    created = client.post(f"{BASE}/", json=_student(department)).json()
    response = client.patch(f"{BASE}/{created['id']}", json={"email": "ada@lovelace.org", "name": ""})
    assert response.status_code == 200
    body = response.json()
    assert body["email"] == "ada@lovelace.org"
    assert body["name"] == "Ada Lovelace"
    assert body["department"] == created["department"]


def test_patch_to_taken_email_conflicts(client, department):
    client.post(f"{BASE}/", json=_student(department))
    other = client.post(f"{BASE}/", json=_student(department, name="Grace Hopper", email="grace@example.com")).json()
    response = client.patch(f"{BASE}/{other['id']}", json={"email": "ada@example.com"})
    assert response.status_code == 409
    assert client.get(f"{BASE}/{other['id']}").json()["email"] == "grace@example.com"


def test_update_requires_department(client, department):
    created = client.post(f"{BASE}/", json=_student(department)).json()
    response = client.put(
        f"{BASE}/{created['id']}", json={"name": "Ada King", "email": "ada@example.com", "department": {"id": None}}
    )
    assert response.status_code == 400
    assert response.json()["message"] == (
        "Student must be associated with a valid Department ID during update."
    )


def test_update_student(client, college, department):
    created = client.post(f"{BASE}/", json=_student(department)).json()
    other = client.post(
        "/api/v1/departments/", json={"name": "Maths", "code": "MA01", "college": {"id": college["id"]}}
    ).json()
    response = client.put(f"{BASE}/{created['id']}", json=_student(other, name="Ada King"))
    assert response.status_code == 200
    assert response.json()["name"] == "Ada King"
    assert response.json()["department"]["code"] == "MA01"


def test_delete_student(client, department):
    created = client.post(f"{BASE}/", json=_student(department)).json()
    response = client.delete(f"{BASE}/{created['id']}")
    assert response.status_code == 200
    assert response.json() == created
    response = client.get(f"{BASE}/{created['id']}")
    assert response.status_code == 404
    assert client.delete(f"{BASE}/{created['id']}").status_code == 404
