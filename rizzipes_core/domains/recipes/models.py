"""
Modelos de dominio para recetas.

Grafo de objetos:

- `Recipe` es dueña de sus `Ingredient`, `Supply` y `Step`.
- Cada `Use` vincula una cantidad con su dueño (ingrediente o insumo) y es
  compartido: lo referencian tanto el dueño (uso global) como el `Step` que
  lo creó (uso local del paso).
- Cada `Step` conoce a su `Recipe` (back-reference asignada una sola vez por
  el constructor de `Recipe`).

Las porciones solo escalan ingredientes; los insumos (equipamiento) nunca se
escalan.

Las entidades usan igualdad por identidad: el grafo tiene ciclos y comparar
por valor recorrería las back-references.
"""

from __future__ import annotations

from typing import Callable, Dict, Generic, List, Optional, TypeVar, Union

from .templates import TemplateKind, TemplateParser

NOT_FOUND_NAME = "Recipe not found"

Owner = TypeVar("Owner")


def format_amount(amount: float) -> str:
    """Formatea una cantidad sin decimales cuando es un número entero (6.0 -> "6")."""
    if isinstance(amount, float) and amount.is_integer():
        return str(int(amount))
    return str(amount)


class Use(Generic[Owner]):
    """
    Cantidad de un ingrediente o insumo usada en un paso.

    `amount` y `belongs_to` son de solo lectura; `portions` es el factor de
    escala que `Recipe.portions` actualiza (solo para ingredientes).
    """

    def __init__(self, amount: float, belongs_to: Owner, portions: int = 1) -> None:
        self._amount = amount
        self._belongs_to = belongs_to
        self.portions = portions

    @property
    def amount(self) -> float:
        return self._amount

    @property
    def belongs_to(self) -> Owner:
        return self._belongs_to

    @property
    def scaled_amount(self) -> float:
        return self._amount * self.portions

    def __str__(self) -> str:
        unit = getattr(self._belongs_to, "unit", "")
        parts = [format_amount(self.scaled_amount), unit, self._belongs_to.name]
        return " ".join(p for p in parts if p)

    def __repr__(self) -> str:
        return f"Use(amount={self._amount!r}, belongs_to={self._belongs_to.id!r}, portions={self.portions!r})"


class Ingredient:
    """Ingrediente de la receta. Su cantidad total es la suma de sus usos escalados."""

    def __init__(self, id: str, name: str, unit: str, uses: Optional[List[Use[Ingredient]]] = None) -> None:
        self._id = id
        self._name = name
        self._unit = unit
        self._uses: List[Use[Ingredient]] = list(uses) if uses else []

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def unit(self) -> str:
        return self._unit

    @property
    def uses(self) -> List[Use[Ingredient]]:
        return list(self._uses)

    @property
    def total_amount(self) -> float:
        return sum(use.amount * use.portions for use in self._uses)

    def add_use(self, use: Use[Ingredient]) -> None:
        self._uses.append(use)

    def set_portions(self, portions: int) -> None:
        for use in self._uses:
            use.portions = portions

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"Ingredient(id={self._id!r}, name={self._name!r}, unit={self._unit!r})"


class Supply:
    """Insumo/equipamiento (olla, sartén...). No tiene unidad ni se escala por porciones."""

    def __init__(self, id: str, name: str, uses: Optional[List[Use[Supply]]] = None) -> None:
        self._id = id
        self._name = name
        self._uses: List[Use[Supply]] = list(uses) if uses else []

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def uses(self) -> List[Use[Supply]]:
        return list(self._uses)

    def add_use(self, use: Use[Supply]) -> None:
        self._uses.append(use)

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"Supply(id={self._id!r}, name={self._name!r})"


Reference = Union[Ingredient, Supply, Use]
"""Entidad a la que resuelve un template dentro del texto de un paso."""

TextSegment = Union[str, Reference]
"""Elemento del texto resuelto: literal o referencia."""


class Step:
    """
    Paso de la receta.

    `raw_text` puede contener templates ``{{kind:id}}``. `resolved_text()` los
    reemplaza por las entidades correspondientes cada vez que se llama, de modo
    que el resultado siempre refleja las porciones actuales.
    """

    def __init__(
        self,
        name: str,
        raw_text: str,
        use_ingredients: Optional[List[Use[Ingredient]]] = None,
        use_supplies: Optional[List[Use[Supply]]] = None,
    ) -> None:
        self._name = name
        self._raw_text = raw_text
        self._use_ingredients: List[Use[Ingredient]] = list(use_ingredients) if use_ingredients else []
        self._use_supplies: List[Use[Supply]] = list(use_supplies) if use_supplies else []
        self._recipe: Optional[Recipe] = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def raw_text(self) -> str:
        return self._raw_text

    @property
    def use_ingredients(self) -> List[Use[Ingredient]]:
        return list(self._use_ingredients)

    @property
    def use_supplies(self) -> List[Use[Supply]]:
        return list(self._use_supplies)

    @property
    def recipe(self) -> Optional[Recipe]:
        return self._recipe

    @recipe.setter
    def recipe(self, value: Recipe) -> None:
        if self._recipe is not None and self._recipe is not value:
            raise RuntimeError(f"El paso '{self._name}' ya pertenece a la receta '{self._recipe.name}'")
        self._recipe = value

    def get_use_ingredient_by_id(self, ingredient_id: str) -> Optional[Use[Ingredient]]:
        for use in self._use_ingredients:
            if use.belongs_to.id == ingredient_id:
                return use
        return None

    def get_use_supply_by_id(self, supply_id: str) -> Optional[Use[Supply]]:
        for use in self._use_supplies:
            if use.belongs_to.id == supply_id:
                return use
        return None

    def resolved_text(self) -> List[TextSegment]:
        """
        Devuelve el texto como secuencia de literales y referencias, en orden.

        Los templates cuyo id no existe se omiten del resultado (nunca fallan).
        Un texto sin templates devuelve ``[raw_text]``.

        Raises
        ------
        RuntimeError
            Si el paso todavía no fue asignado a una receta.
        ParseError
            Si un match del escaneo no parsea (inconsistencia interna).
        """
        recipe = self._recipe
        if recipe is None:
            raise RuntimeError(f"El paso '{self._name}' no tiene receta asignada")

        resolvers: Dict[TemplateKind, Callable[[str], Optional[Reference]]] = {
            TemplateKind.INGREDIENTS: recipe.get_ingredient_by_id,
            TemplateKind.SUPPLIES: recipe.get_supply_by_id,
            TemplateKind.USE_INGREDIENTS: self.get_use_ingredient_by_id,
            TemplateKind.USE_SUPPLIES: self.get_use_supply_by_id,
        }

        parser = TemplateParser()
        segments: List[TextSegment] = []
        last_end = 0

        for match in parser.finditer(self._raw_text):
            segments.append(self._raw_text[last_end:match.start()])
            last_end = match.end()

            template = parser.parse(match.group(0))
            reference = resolvers[template.kind](template.id)
            if reference is not None:
                segments.append(reference)

        segments.append(self._raw_text[last_end:])
        return segments

    def __repr__(self) -> str:
        return f"Step(name={self._name!r})"


class Recipe:
    """
    Receta completa: ingredientes, insumos y pasos ordenados.

    Al construirse se asigna como receta de cada paso. Asignar `portions`
    propaga el factor a todos los usos de ingredientes.
    """

    def __init__(
        self,
        name: str,
        ingredients: List[Ingredient],
        supplies: List[Supply],
        steps: List[Step],
    ) -> None:
        self._name = name
        self._ingredients = list(ingredients)
        self._supplies = list(supplies)
        self._steps = list(steps)
        self._portions = 1

        for step in self._steps:
            step.recipe = self

    @property
    def name(self) -> str:
        return self._name

    @property
    def ingredients(self) -> List[Ingredient]:
        return list(self._ingredients)

    @property
    def supplies(self) -> List[Supply]:
        return list(self._supplies)

    @property
    def steps(self) -> List[Step]:
        return list(self._steps)

    @property
    def portions(self) -> int:
        return self._portions

    @portions.setter
    def portions(self, portions: int) -> None:
        self._portions = portions
        for ingredient in self._ingredients:
            ingredient.set_portions(portions)

    def get_ingredient_by_id(self, ingredient_id: str) -> Optional[Ingredient]:
        for ingredient in self._ingredients:
            if ingredient.id == ingredient_id:
                return ingredient
        return None

    def get_supply_by_id(self, supply_id: str) -> Optional[Supply]:
        for supply in self._supplies:
            if supply.id == supply_id:
                return supply
        return None

    def __repr__(self) -> str:
        return (
            f"Recipe(name={self._name!r}, ingredients={len(self._ingredients)}, "
            f"supplies={len(self._supplies)}, steps={len(self._steps)})"
        )


def make_not_found_recipe() -> Recipe:
    """Receta vacía usada cuando la receta pedida no existe (evita casos None al renderizar)."""
    return Recipe(NOT_FOUND_NAME, [], [], [])
