# tests/helpers.py

from __future__ import annotations

from fastapi.testclient import TestClient


def register(client: TestClient, email: str, password: str = "secret1", **extra):
    return client.post("/api/register", json={"email": email, "password": password, **extra})


def login(client: TestClient, email: str, password: str = "secret1"):
    return client.post("/api/login", json={"email": email, "password": password})


def signup(client: TestClient, email: str, password: str = "secret1") -> dict:
    """Register and log the client in; returns the user payload."""
    assert register(client, email, password).status_code == 201
    response = login(client, email, password)
    assert response.status_code == 200
    return response.json()["user"]


def create_task(client: TestClient, **fields) -> dict:
    body = {"text": "Buy milk", "date": "2024-05-01", **fields}
    response = client.post("/api/tasks", json=body)
    assert response.status_code == 201, response.text
    return response.json()


def create_category(client: TestClient, name: str = "errands", emoji: str = "🛒", color: str = "bg-yellow-100") -> dict:
    response = client.post("/api/categories", json={"name": name, "emoji": emoji, "color": color})
    assert response.status_code == 201, response.text
    return response.json()
