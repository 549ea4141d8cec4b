# tests/test_categories.py

from __future__ import annotations

from .helpers import create_category, create_task, login, signup

DEFAULT_NAMES = {"work", "personal", "health", "urgent"}


def test_new_user_gets_default_categories(client) -> None:
    signup(client, "alice@example.com")

    response = client.get("/api/categories")

    assert response.status_code == 200
    categories = response.json()
    assert {c["name"] for c in categories} == DEFAULT_NAMES
    work = next(c for c in categories if c["name"] == "work")
    assert work["emoji"] == "💼"
    assert work["color"] == "bg-blue-100 text-blue-700"


def test_repeated_logins_do_not_duplicate_defaults(client) -> None:
    signup(client, "alice@example.com")
    login(client, "alice@example.com")
    login(client, "alice@example.com")

    assert len(client.get("/api/categories").json()) == 4


def test_defaults_not_recreated_after_user_deletes_them(client) -> None:
    signup(client, "alice@example.com")
    for category in client.get("/api/categories").json():
        assert client.delete(f"/api/categories/{category['id']}").status_code == 204

    login(client, "alice@example.com")

    assert client.get("/api/categories").json() == []


def test_categories_require_auth(client) -> None:
    assert client.get("/api/categories").status_code == 401
    assert client.post("/api/categories", json={"name": "x", "emoji": "x", "color": "x"}).status_code == 401


def test_create_category_lists_newest_first(client) -> None:
    user = signup(client, "alice@example.com")

    created = create_category(client, name="errands")

    assert created["userId"] == user["id"]
    assert created["name"] == "errands"
    assert client.get("/api/categories").json()[0]["id"] == created["id"]


def test_create_category_validation(client) -> None:
    signup(client, "alice@example.com")

    response = client.post("/api/categories", json={"name": "", "emoji": "🛒"})

    assert response.status_code == 400
    fields = {f["field"] for f in response.json()["error"]["details"]["fields"]}
    assert fields == {"name", "color"}


def test_partial_update_keeps_other_fields(client) -> None:
    signup(client, "alice@example.com")
    category = create_category(client, name="errands", emoji="🛒")

    response = client.patch(f"/api/categories/{category['id']}", json={"name": "shopping"})

    assert response.status_code == 200
    assert response.json()["name"] == "shopping"
    assert response.json()["emoji"] == "🛒"


def test_update_rejects_null_for_required_field(client) -> None:
    signup(client, "alice@example.com")
    category = create_category(client)

    response = client.patch(f"/api/categories/{category['id']}", json={"name": None})

    assert response.status_code == 400


def test_update_unknown_category_is_404(client) -> None:
    signup(client, "alice@example.com")

    response = client.patch("/api/categories/does-not-exist", json={"name": "x"})

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NotFound"


def test_delete_category_clears_task_reference(client) -> None:
    signup(client, "alice@example.com")
    category = create_category(client)
    task = create_task(client, categoryId=category["id"])
    assert task["category"]["name"] == "errands"

    assert client.delete(f"/api/categories/{category['id']}").status_code == 204

    tasks = client.get("/api/tasks").json()
    assert [t["id"] for t in tasks] == [task["id"]]
    assert tasks[0]["categoryId"] is None
    assert tasks[0]["category"] is None


def test_delete_unknown_category_is_404(client) -> None:
    signup(client, "alice@example.com")

    assert client.delete("/api/categories/does-not-exist").status_code == 404


def test_other_users_category_is_not_found(make_client) -> None:
    alice, bob = make_client(), make_client()
    signup(alice, "alice@example.com")
    signup(bob, "bob@example.com")
    category = create_category(alice)

    assert category["id"] not in {c["id"] for c in bob.get("/api/categories").json()}
    assert bob.patch(f"/api/categories/{category['id']}", json={"name": "mine"}).status_code == 404
    assert bob.delete(f"/api/categories/{category['id']}").status_code == 404

    # Not-owned and not-existing look the same from the outside
    missing = bob.delete("/api/categories/does-not-exist")
    not_owned = bob.delete(f"/api/categories/{category['id']}")
    assert missing.json()["error"]["message"] == not_owned.json()["error"]["message"]

    assert alice.get("/api/categories").json()[0]["name"] == "errands"
