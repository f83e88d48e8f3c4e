"""
Abstracciones (Protocols) entre el core y sus colaboradores.

El core (grafo de recetas + templates) no sabe de dónde vienen los datos ni
cómo se muestran. Estos protocols definen esas dos costuras:

- `RecipeSource`: entrega registros crudos de recetas (filesystem, HTTP...)
- `RecipeDocumentRenderer`: convierte una `Recipe` a un formato de salida
"""

from __future__ import annotations

from typing import Any, List, Mapping, Protocol

from ..domains.recipes.models import Recipe
from ..domains.recipes.profiles import RecipeProfile


class RecipeSource(Protocol):
    """
    Fuente de registros crudos de recetas.

    Las implementaciones devuelven el JSON ya decodificado; el core se encarga
    de construir el grafo.
    """

    def list_recipes(self) -> List[Mapping[str, Any]]:
        """
        Devuelve el índice de recetas disponibles.

        Returns:
            Lista de registros ``{"id": ..., "name": ...}``.
        """
        ...

    def get_recipe_data(self, recipe_id: str) -> Mapping[str, Any]:
        """
        Devuelve el registro crudo de una receta.

        Raises:
            RecipeNotFoundError: si la receta no existe o no se puede leer.
        """
        ...


class RecipeDocumentRenderer(Protocol):
    """Interfaz para renderizar recetas a un documento de texto."""

    def render_markdown(self, recipe: Recipe, profile: RecipeProfile) -> str:
        ...
