from conftest import register_user

ITEMS = [
    {"name": "Ghee", "amount": "3 tbsp", "recipeId": "recipe-1"},
    {"name": "Saffron", "amount": "pinch"},
]


def test_add_and_list_items(client, auth_headers):
    resp = client.post("/api/shopping-list", json={"items": ITEMS}, headers=auth_headers)
    assert resp.status_code == 201
    created = resp.json()
    assert [i["item"] for i in created] == ["Ghee", "Saffron"]
    assert created[0]["recipeId"] == "recipe-1"
    assert created[0]["completed"] is False

    items = client.get("/api/shopping-list", headers=auth_headers).json()
    assert {i["item"] for i in items} == {"Ghee", "Saffron"}


def test_add_requires_items_array(client, auth_headers):
    for payload in ({}, {"items": "ghee"}, {"items": None}):
        resp = client.post("/api/shopping-list", json=payload, headers=auth_headers)
        assert resp.status_code == 400
        assert resp.json()["detail"] == "Items array is required"


def test_toggle_and_delete_item(client, auth_headers):
    created = client.post("/api/shopping-list", json={"items": ITEMS}, headers=auth_headers).json()
    item_id = created[0]["id"]

    resp = client.put(f"/api/shopping-list/{item_id}", json={"completed": True}, headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json()["completed"] is True

    assert client.delete(f"/api/shopping-list/{item_id}", headers=auth_headers).status_code == 200
    items = client.get("/api/shopping-list", headers=auth_headers).json()
    assert [i["item"] for i in items] == ["Saffron"]


def test_clear_list(client, auth_headers):
    client.post("/api/shopping-list", json={"items": ITEMS}, headers=auth_headers)
    resp = client.delete("/api/shopping-list", headers=auth_headers)
    assert resp.status_code == 200
    assert client.get("/api/shopping-list", headers=auth_headers).json() == []


def test_items_are_scoped_to_owner(client, auth_headers):
    created = client.post("/api/shopping-list", json={"items": ITEMS}, headers=auth_headers).json()
    item_id = created[0]["id"]
    _, other_headers = register_user(client)

    assert client.get("/api/shopping-list", headers=other_headers).json() == []
    resp = client.put(f"/api/shopping-list/{item_id}", json={"completed": True}, headers=other_headers)
    assert resp.status_code == 404
    assert client.delete(f"/api/shopping-list/{item_id}", headers=other_headers).status_code == 404

    client.delete("/api/shopping-list", headers=other_headers)
    assert len(client.get("/api/shopping-list", headers=auth_headers).json()) == 2


def test_requires_auth(client):
    assert client.get("/api/shopping-list").status_code == 401
