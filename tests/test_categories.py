def test_list_categories_sorted_by_name(client, author):
    _, headers = author
    for name in ("Travel", "Art", "Food"):
        client.post("/categories", json={"name": name}, headers=headers)

    resp = client.get("/categories")

    assert resp.status_code == 200
    assert [c["name"] for c in resp.get_json()["data"]] == ["Art", "Food", "Travel"]


def test_create_category(client, author):
    _, headers = author
    resp = client.post("/categories", json={"name": " Science ", "description": "Labs"}, headers=headers)

    assert resp.status_code == 201
    data = resp.get_json()["data"]
    assert data["name"] == "Science"
    assert data["description"] == "Labs"


def test_create_category_requires_auth(client):
    assert client.post("/categories", json={"name": "Nope"}).status_code == 401


def test_create_category_requires_name(client, author):
    _, headers = author
    resp = client.post("/categories", json={"name": "  "}, headers=headers)

    assert resp.status_code == 400
    assert resp.get_json()["errors"] == [{"field": "name", "message": "Category name is required"}]


def test_category_names_are_unique(client, author, category):
    _, headers = author
    resp = client.post("/categories", json={"name": "Tech"}, headers=headers)

    assert resp.status_code == 400
    assert resp.get_json()["errors"][0]["message"] == "Category already exists"
