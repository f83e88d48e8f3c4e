"""
Dominio de recetas.

Este módulo contiene toda la lógica de recetas:
- Modelos del grafo (Recipe, Ingredient, Supply, Step, Use)
- Parser de templates inline ``{{kind:id}}``
- Factories que construyen el grafo desde el JSON crudo
- Renderer a Markdown y perfiles de presentación
"""

from .builder import RecipeFactory, StepFactory
from .models import (
    NOT_FOUND_NAME,
    Ingredient,
    Recipe,
    Step,
    Supply,
    Use,
    make_not_found_recipe,
)
from .templates import ParseError, Template, TemplateKind, TemplateParser

__all__ = [
    "NOT_FOUND_NAME",
    "Ingredient",
    "ParseError",
    "Recipe",
    "RecipeFactory",
    "Step",
    "StepFactory",
    "Supply",
    "Template",
    "TemplateKind",
    "TemplateParser",
    "Use",
    "make_not_found_recipe",
]
