"""
Tests de la API HTTP de recetas (FastAPI TestClient sobre un data dir temporal).
"""

import json

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_recipe_source
from api.main import app
from rizzipes_core.store import FileRecipeSource


SOUP = {
    "name": "Soup",
    "ingredients": [
        {"id": "salt", "name": "Salt", "unit": "g"},
        {"id": "water", "name": "Water", "unit": "ml"},
    ],
    "supplies": [{"id": "pot", "name": "Pot"}],
    "steps": [
        {
            "name": "Season",
            "text": "Add {{useIngredients:salt}} of salt to the {{ingredients:water}} in the {{useSupplies:pot}}.{{supplies:ghost}}",
            "useIngredients": [
                {"belongsToId": "salt", "amount": 2},
                {"belongsToId": "water", "amount": 500},
            ],
            "useSupplies": [{"belongsToId": "pot", "amount": 1}],
        }
    ],
}


@pytest.fixture
def client(tmp_path):
    """Cliente HTTP con la fuente de recetas apuntando a un directorio temporal."""
    recipes = tmp_path / "recipes"
    recipes.mkdir()
    (recipes / "index.json").write_text(
        json.dumps({"recipes": [{"id": "soup", "name": "Soup"}]}), encoding="utf-8"
    )
    (recipes / "soup.json").write_text(json.dumps(SOUP), encoding="utf-8")

    app.dependency_overrides[get_recipe_source] = lambda: FileRecipeSource(tmp_path)
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def test_health(client):
    assert client.get("/").json()["status"] == "ok"
    assert client.get("/health").json()["service"] == "rizzipes-api"


def test_list_recipes(client):
    response = client.get("/api/v1/recipes")
    assert response.status_code == 200
    assert response.json() == {"recipes": [{"id": "soup", "name": "Soup"}]}


def test_get_recipe_scaled(client):
    response = client.get("/api/v1/recipes/soup", params={"portions": "3"})
    assert response.status_code == 200
    body = response.json()

    assert body["name"] == "Soup"
    assert body["portions"] == 3
    assert body["supplies"] == [{"id": "pot", "name": "Pot"}]

    salt = next(i for i in body["ingredients"] if i["id"] == "salt")
    assert salt["total_amount"] == 6
    assert salt["display"] == "6 g Salt"

    segments = body["steps"][0]["segments"]
    assert [s["type"] for s in segments] == [
        "text",
        "use_ingredient",
        "text",
        "ingredient",
        "text",
        "use_supply",
        "text",
        "text",
    ]
    assert segments[1] == {"type": "use_ingredient", "text": "6 g Salt", "ref_id": "salt"}
    assert segments[3]["text"] == "Water"
    assert segments[5]["text"] == "1 Pot"
    # {{supplies:ghost}} se omite: quedan el literal previo y el final vacío
    assert segments[6]["text"] == "."
    assert segments[7]["text"] == ""


@pytest.mark.parametrize("portions", [None, "abc", "0", "-1"])
def test_get_recipe_invalid_portions_fall_back_to_default(client, portions):
    params = {"portions": portions} if portions is not None else {}
    response = client.get("/api/v1/recipes/soup", params=params)
    assert response.status_code == 200
    assert response.json()["portions"] == 1


def test_get_recipe_not_found(client):
    response = client.get("/api/v1/recipes/ghost")
    assert response.status_code == 404
    assert "ghost" in response.json()["detail"]


def test_get_recipe_markdown(client):
    response = client.get("/api/v1/recipes/soup/markdown", params={"portions": "2", "mode": "completo"})
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/markdown")
    assert "# Soup" in response.text
    assert "- 4 g Salt" in response.text
    assert "<u>4 g Salt</u>" in response.text


def test_get_recipe_markdown_not_found(client):
    response = client.get("/api/v1/recipes/ghost/markdown")
    assert response.status_code == 404
    assert response.text == "# Recipe not found\n\n"


@pytest.mark.parametrize("index_content", ["{not json", "[]"])
def test_list_recipes_with_broken_index(client, tmp_path, index_content):
    (tmp_path / "recipes" / "index.json").write_text(index_content, encoding="utf-8")

    response = client.get("/api/v1/recipes")

    assert response.status_code == 200
    assert response.json() == {"recipes": [{"id": "soup", "name": "Soup"}]}
