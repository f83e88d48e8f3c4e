"""
Tests del engine: porciones, carga y render de la página de receta.
"""

import pytest

from rizzipes_core.config import get_settings
from rizzipes_core.engine import load_recipe, parse_portions, render_recipe_page
from rizzipes_core.store import RecipeNotFoundError


class InMemorySource:
    """Fuente de recetas en memoria (implementa RecipeSource)."""

    def __init__(self, recipes):
        self.recipes = recipes

    def list_recipes(self):
        return [{"id": rid, "name": data["name"]} for rid, data in self.recipes.items()]

    def get_recipe_data(self, recipe_id):
        try:
            return self.recipes[recipe_id]
        except KeyError as e:
            raise RecipeNotFoundError(recipe_id) from e


@pytest.fixture
def source():
    return InMemorySource(
        {
            "soup": {
                "name": "Soup",
                "ingredients": [{"id": "salt", "name": "Salt", "unit": "g"}],
                "supplies": [],
                "steps": [
                    {
                        "name": "Season",
                        "text": "Add {{useIngredients:salt}} of salt.",
                        "useIngredients": [{"belongsToId": "salt", "amount": 2}],
                    }
                ],
            }
        }
    )


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("3", 3),
        (" 4 ", 4),
        (5, 5),
        (None, 1),
        ("", 1),
        ("abc", 1),
        ("2.5", 1),
        ("0", 1),
        ("-2", 1),
        (True, 1),
    ],
)
def test_parse_portions(raw, expected):
    assert parse_portions(raw, default=1) == expected


def test_parse_portions_uses_settings_default(monkeypatch):
    monkeypatch.setenv("RIZZIPES_DEFAULT_PORTIONS", "2")
    get_settings.cache_clear()
    try:
        assert parse_portions(None) == 2
        assert parse_portions("x") == 2
    finally:
        get_settings.cache_clear()


def test_load_recipe(source):
    recipe = load_recipe(source, "soup", 3)
    assert recipe.name == "Soup"
    assert recipe.portions == 3
    assert recipe.get_ingredient_by_id("salt").total_amount == 6


def test_load_recipe_missing(source):
    with pytest.raises(RecipeNotFoundError):
        load_recipe(source, "ghost", 1)


def test_render_recipe_page(source):
    result = render_recipe_page(source, "soup", 3, "completo")
    assert result["found"] is True
    assert result["recipe"].name == "Soup"
    assert "Add <u>6 g Salt</u> of salt." in result["markdown"]


def test_render_recipe_page_falls_back_to_not_found(source):
    result = render_recipe_page(source, "ghost", 1, "simple")
    assert result["found"] is False
    assert result["recipe"].name == "Recipe not found"
    assert result["recipe"].steps == []
    assert result["markdown"] == "# Recipe not found\n\n"


def test_render_recipe_page_with_custom_renderer(source):
    class NameOnlyRenderer:
        def render_markdown(self, recipe, profile):
            return f"{recipe.name} ({profile.id})"

    result = render_recipe_page(source, "soup", 2, "simple", renderer=NameOnlyRenderer())
    assert result["markdown"] == "Soup (simple_v1)"
