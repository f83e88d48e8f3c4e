from __future__ import annotations

"""
rizzipes_core.engine
====================

Orquestador de alto nivel: fuente de datos → grafo → render.

Este módulo expone una API interna y estable para que la CLI y la API HTTP
no hablen directo con el store ni con las factories:

- `parse_portions`: interpreta las porciones pedidas (con fallback al default)
- `load_recipe`: busca el registro y construye la `Recipe`
- `render_recipe_page`: igual que `load_recipe`, pero nunca falla por receta
  inexistente: devuelve la receta vacía "not found" y lo indica en `found`
"""

import logging
from typing import Any, Optional, TypedDict

from .config import get_settings
from .core.abstractions import RecipeDocumentRenderer, RecipeSource
from .domains.recipes.builder import RecipeFactory, StepFactory
from .domains.recipes.models import Recipe, make_not_found_recipe
from .domains.recipes.profiles import get_profile
from .domains.recipes.renderer import RecipeRenderer
from .store import RecipeNotFoundError

logger = logging.getLogger(__name__)


class RecipePageResult(TypedDict):
    """Resultado de renderizar la página de una receta."""

    recipe: Recipe
    """Grafo construido (o la receta vacía si no se encontró)."""

    found: bool
    """False si se usó la receta de fallback."""

    markdown: str
    """Markdown final según el perfil pedido."""


def parse_portions(raw: Any, default: Optional[int] = None) -> int:
    """
    Interpreta un valor de porciones venido de afuera (query string, CLI...).

    Valores ausentes, no numéricos o menores a 1 devuelven `default`
    (por defecto `Settings.default_portions`).
    """
    if default is None:
        default = get_settings().default_portions

    if raw is None or isinstance(raw, bool):
        return default
    try:
        portions = int(str(raw).strip())
    except ValueError:
        return default
    return portions if portions > 0 else default


def build_recipe_factory() -> RecipeFactory:
    return RecipeFactory(StepFactory())


def load_recipe(source: RecipeSource, recipe_id: str, portions: int) -> Recipe:
    """
    Construye la `Recipe` pedida con las porciones indicadas.

    Raises
    ------
    RecipeNotFoundError
        Si la fuente no tiene la receta.
    """
    recipe_data = source.get_recipe_data(recipe_id)
    return build_recipe_factory().create(recipe_data, portions)


def render_recipe_page(
    source: RecipeSource,
    recipe_id: str,
    portions: int,
    mode: Optional[str] = None,
    renderer: Optional[RecipeDocumentRenderer] = None,
) -> RecipePageResult:
    """
    Construye y renderiza una receta a Markdown.

    Si la receta no existe se renderiza `make_not_found_recipe()` y
    `found` queda en False; el llamador decide cómo reportarlo.
    """
    profile = get_profile(mode or get_settings().default_mode)

    try:
        recipe = load_recipe(source, recipe_id, portions)
        found = True
    except RecipeNotFoundError as e:
        logger.warning(f"{e}. Se usa la receta vacía.")
        recipe = make_not_found_recipe()
        found = False

    markdown = (renderer or RecipeRenderer()).render_markdown(recipe, profile)
    return {"recipe": recipe, "found": found, "markdown": markdown}
