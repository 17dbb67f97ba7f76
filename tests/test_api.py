"""Tests for the grocery list API routes."""

import httpx
import pytest
from fastapi.testclient import TestClient

from grocerylist.config import get_settings
from grocerylist.connectors.enhancement import EnhancementConnector
from grocerylist.main import app
from grocerylist.routers.grocery_list import get_enhancement_connector


@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def request_body():
    return {
        "ingredients": [
            {"name": "Tomato", "quantity": 2, "unit": "medium"},
            {"name": "Garlic (paste or whole)", "quantity": 1, "unit": "clove"},
            {"name": "Tomatoes", "quantity": "1", "unit": "medium"},
            {"name": "Garlic", "quantity": 2, "unit": "cloves"},
            {"name": "Salt", "quantity": 0, "unit": "to taste"},
            {"name": "", "quantity": 1, "unit": "cup"},
        ],
        "recipe_ids": ["1", "6"],
    }


def _override_remote(enabled_settings, handler):
    app.dependency_overrides[get_settings] = lambda: enabled_settings
    app.dependency_overrides[get_enhancement_connector] = lambda: EnhancementConnector(
        settings=enabled_settings, transport=httpx.MockTransport(handler)
    )


class TestCreateGroceryList:
    """Tests for POST /api/v1/grocery-list."""

    def test_consolidates(self, client, request_body):
        response = client.post("/api/v1/grocery-list", json=request_body)
        assert response.status_code == 200

        data = response.json()
        assert data["source"] == "local"
        assert data["error"] is None
        assert data["lines"] == ["3 cloves Garlic", "Salt", "3 medium Tomato"]
        assert data["items"][0] == {
            "name": "Garlic",
            "quantity": 3.0,
            "unit": "cloves",
            "display": "3 cloves Garlic",
        }

    def test_empty(self, client):
        response = client.post("/api/v1/grocery-list", json={"ingredients": []})
        assert response.status_code == 200
        assert response.json()["items"] == []

    def test_invalid_body(self, client):
        response = client.post("/api/v1/grocery-list", json={"ingredients": "tomato"})
        assert response.status_code == 422


class TestCreateEnhancedGroceryList:
    """Tests for POST /api/v1/grocery-list/enhanced."""

    def test_remote_list_returned(self, client, request_body, enabled_settings):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(
                200,
                json={
                    "ingredients": [
                        {"name": "Tomatoes", "quantity": 3, "unit": "medium"},
                        {"name": "Garlic", "quantity": 3, "unit": "cloves"},
                    ]
                },
            )

        _override_remote(enabled_settings, handler)
        response = client.post("/api/v1/grocery-list/enhanced", json=request_body)

        assert response.status_code == 200
        data = response.json()
        assert data["source"] == "remote"
        assert data["error"] is None
        assert data["lines"] == ["3 cloves Garlic", "3 medium Tomatoes"]
        assert len(seen) == 1

    def test_remote_failure_keeps_local(self, client, request_body, enabled_settings):
        _override_remote(enabled_settings, lambda request: httpx.Response(500))

        response = client.post("/api/v1/grocery-list/enhanced", json=request_body)

        assert response.status_code == 200
        data = response.json()
        assert data["source"] == "local"
        assert data["lines"] == ["3 cloves Garlic", "Salt", "3 medium Tomato"]
        assert data["error"]["type"] == "server_error"
        assert data["error"]["status_code"] == 500
        assert data["error"]["message"]

    def test_disabled(self, client, request_body, disabled_settings):
        app.dependency_overrides[get_settings] = lambda: disabled_settings

        response = client.post("/api/v1/grocery-list/enhanced", json=request_body)

        data = response.json()
        assert data["source"] == "local"
        assert data["error"]["type"] == "disabled"
