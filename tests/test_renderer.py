"""
Tests del renderer Markdown y de los perfiles.
"""

import pytest

from rizzipes_core.domains.recipes.builder import RecipeFactory
from rizzipes_core.domains.recipes.models import make_not_found_recipe
from rizzipes_core.domains.recipes.profiles import COMPLETO_V1, SIMPLE_V1, get_profile
from rizzipes_core.domains.recipes.renderer import (
    RecipeRenderer,
    format_ingredient,
    render_step_text,
)


@pytest.fixture
def recipe():
    data = {
        "name": "Pasta",
        "ingredients": [
            {"id": "pasta", "name": "Spaghetti", "unit": "g"},
            {"id": "salt", "name": "Salt", "unit": "g"},
        ],
        "supplies": [{"id": "pot", "name": "Pot"}],
        "steps": [
            {
                "name": "Boil",
                "text": "Salt the water with {{useIngredients:salt}} in the {{supplies:pot}}.",
                "useIngredients": [{"belongsToId": "salt", "amount": 5}],
                "useSupplies": [{"belongsToId": "pot", "amount": 1}],
            },
            {
                "name": "Cook",
                "text": "Cook {{useIngredients:pasta}} until al dente.",
                "useIngredients": [{"belongsToId": "pasta", "amount": 100}],
            },
        ],
    }
    return RecipeFactory().create(data, 2)


def test_format_ingredient(recipe):
    assert format_ingredient(recipe.get_ingredient_by_id("pasta")) == "200 g Spaghetti"


def test_render_step_text_underlines_references(recipe):
    text = render_step_text(recipe.steps[0])
    assert text == "Salt the water with <u>10 g Salt</u> in the <u>Pot</u>."


def test_render_step_text_plain(recipe):
    text = render_step_text(recipe.steps[1], highlight=None)
    assert text == "Cook 200 g Spaghetti until al dente."


def test_render_step_text_custom_highlight(recipe):
    text = render_step_text(recipe.steps[1], highlight=lambda s: f"**{s}**")
    assert text == "Cook **200 g Spaghetti** until al dente."


def test_render_markdown_full_profile(recipe):
    md = RecipeRenderer().render_markdown(recipe, COMPLETO_V1)

    assert md.startswith("# Pasta\n")
    assert "**Portions**: 2" in md
    assert "## Supplies" in md
    assert "- Pot" in md
    assert "## Ingredients" in md
    assert "- 200 g Spaghetti" in md
    assert "- 10 g Salt" in md
    assert "### 1: Boil" in md
    assert "### 2: Cook" in md
    assert "Cook <u>200 g Spaghetti</u> until al dente." in md
    # Orden de secciones
    assert md.index("## Supplies") < md.index("## Ingredients") < md.index("## Steps")


def test_render_markdown_simple_profile(recipe):
    md = RecipeRenderer().render_markdown(recipe, SIMPLE_V1)
    assert "## Supplies" not in md
    assert "Portions" not in md
    assert "## Ingredients" in md
    assert "## Steps" in md


def test_render_markdown_follows_portions(recipe):
    renderer = RecipeRenderer()
    recipe.portions = 1
    assert "- 100 g Spaghetti" in renderer.render_markdown(recipe)
    recipe.portions = 3
    assert "- 300 g Spaghetti" in renderer.render_markdown(recipe)


def test_render_not_found_recipe():
    md = RecipeRenderer().render_markdown(make_not_found_recipe())
    assert md == "# Recipe not found\n\n"


def test_get_profile():
    assert get_profile("simple") is SIMPLE_V1
    assert get_profile("completo") is COMPLETO_V1
    assert get_profile("otro") is COMPLETO_V1
