from conftest import register_user
from test_recipes import NEW_RECIPE


def test_list_own_recipes(client, user_and_headers):
    user, headers = user_and_headers
    client.post("/api/recipes", json=NEW_RECIPE, headers=headers)
    client.post("/api/recipes", json={**NEW_RECIPE, "title": "Green Shakshuka"}, headers=headers)

    resp = client.get(f"/api/users/{user['id']}/recipes", headers=headers)
    assert resp.status_code == 200
    recipes = resp.json()
    assert [r["title"] for r in recipes] == ["Green Shakshuka", "Shakshuka"]
    assert recipes[0]["_count"] == {"likes": 0, "savedBy": 0, "comments": 0}


def test_cannot_list_someone_elses_recipes(client, user_and_headers):
    user, _ = user_and_headers
    _, other_headers = register_user(client)
    resp = client.get(f"/api/users/{user['id']}/recipes", headers=other_headers)
    assert resp.status_code == 403
    assert resp.json()["detail"] == "Access denied"


def test_requires_auth(client, user_and_headers):
    user, _ = user_and_headers
    assert client.get(f"/api/users/{user['id']}/recipes").status_code == 401
