"""
Builder del grafo de recetas.

Convierte el registro crudo de una receta (el JSON ya decodificado) en el
grafo de dominio: `Recipe` → `Ingredient` / `Supply` / `Step` → `Use`.

Formato del registro::

    {
        "name": "Soup",
        "ingredients": [{"id": "salt", "name": "Salt", "unit": "g"}],
        "supplies": [{"id": "pot", "name": "Pot"}],
        "steps": [
            {
                "name": "Season",
                "text": "Add {{useIngredients:salt}} of salt.",
                "useIngredients": [{"belongsToId": "salt", "amount": 2}],
                "useSupplies": [{"belongsToId": "pot", "amount": 1}]
            }
        ]
    }

Las referencias a ids inexistentes se descartan (con warning en el log); no
se valida nada más del registro.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterable, List, Mapping, TypeVar

from .models import Ingredient, Recipe, Step, Supply, Use

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _index_by_id(items: Iterable[T], get_key: Callable[[T], str]) -> Dict[str, T]:
    """Indexa por id. Con ids duplicados gana el último."""
    index: Dict[str, T] = {}
    for item in items:
        index[get_key(item)] = item
    return index


class StepFactory:
    """
    Construye un `Step` y sus usos locales.

    Cada `Use` creado se registra también en el ingrediente/insumo dueño, de
    modo que el mismo objeto queda compartido entre el paso y el dueño.
    """

    def create(
        self,
        step_data: Mapping[str, Any],
        ingredient_index: Mapping[str, Ingredient],
        supply_index: Mapping[str, Supply],
    ) -> Step:
        name = str(step_data.get("name", ""))

        use_ingredients: List[Use[Ingredient]] = []
        for use_data in step_data.get("useIngredients") or []:
            belongs_to_id = use_data.get("belongsToId")
            ingredient = ingredient_index.get(belongs_to_id)
            if ingredient is None:
                logger.warning(f"Paso '{name}': ingrediente '{belongs_to_id}' no existe, se descarta el uso")
                continue
            use_ingredient: Use[Ingredient] = Use(use_data.get("amount") or 0, ingredient)
            ingredient.add_use(use_ingredient)
            use_ingredients.append(use_ingredient)

        use_supplies: List[Use[Supply]] = []
        for use_data in step_data.get("useSupplies") or []:
            belongs_to_id = use_data.get("belongsToId")
            supply = supply_index.get(belongs_to_id)
            if supply is None:
                logger.warning(f"Paso '{name}': insumo '{belongs_to_id}' no existe, se descarta el uso")
                continue
            use_supply: Use[Supply] = Use(use_data.get("amount") or 0, supply)
            supply.add_use(use_supply)
            use_supplies.append(use_supply)

        return Step(name, str(step_data.get("text", "")), use_ingredients, use_supplies)


class RecipeFactory:
    """
    Construye una `Recipe` completa a partir de su registro crudo.

    Flujo:
    ------
    1) Ingredientes e insumos, indexados por id.
    2) Pasos (vía `StepFactory`), enlazando los usos con sus dueños.
    3) `Recipe` (asigna la back-reference de cada paso).
    4) Porciones iniciales propagadas a los usos de ingredientes.
    """

    def __init__(self, step_factory: StepFactory | None = None) -> None:
        self._step_factory = step_factory or StepFactory()

    def create(self, recipe_data: Mapping[str, Any], portions: int = 1) -> Recipe:
        ingredients = [
            Ingredient(
                id=str(ing.get("id", "")),
                name=str(ing.get("name", "")),
                unit=str(ing.get("unit") or ""),
            )
            for ing in recipe_data.get("ingredients") or []
        ]
        ingredient_index = _index_by_id(ingredients, lambda ingredient: ingredient.id)

        supplies = [
            Supply(id=str(sup.get("id", "")), name=str(sup.get("name", "")))
            for sup in recipe_data.get("supplies") or []
        ]
        supply_index = _index_by_id(supplies, lambda supply: supply.id)

        steps = [
            self._step_factory.create(step_data, ingredient_index, supply_index)
            for step_data in recipe_data.get("steps") or []
        ]

        recipe = Recipe(str(recipe_data.get("name", "")), ingredients, supplies, steps)
        recipe.portions = portions

        logger.debug(f"Receta construida: {recipe!r} ({portions} porciones)")
        return recipe
