"""
Renderer de recetas a Markdown.

Equivale a la página de receta: título, lista de insumos, lista de
ingredientes con sus totales y pasos numerados con las referencias
resaltadas. Todo se calcula desde el grafo en el momento del render, así que
cambiar `recipe.portions` y volver a renderizar alcanza para ver las nuevas
cantidades.
"""

from __future__ import annotations

from typing import Callable, List, Optional

from .models import Ingredient, Recipe, Step, format_amount
from .profiles import COMPLETO_V1, RecipeProfile


def underline(text: str) -> str:
    return f"<u>{text}</u>"


def format_ingredient(ingredient: Ingredient) -> str:
    """Formatea un ingrediente con su cantidad total: "6 g Salt"."""
    parts = [format_amount(ingredient.total_amount), ingredient.unit, ingredient.name]
    return " ".join(p for p in parts if p)


def render_step_text(step: Step, highlight: Optional[Callable[[str], str]] = underline) -> str:
    """
    Une el texto resuelto de un paso en un único string.

    Cada referencia se convierte con `str()` y, si se indica, se envuelve con
    `highlight`. Con ``highlight=None`` devuelve texto plano.
    """
    out: List[str] = []
    for segment in step.resolved_text():
        if isinstance(segment, str):
            out.append(segment)
            continue
        text = str(segment)
        out.append(highlight(text) if highlight else text)
    return "".join(out)


class RecipeRenderer:
    """Renderiza una `Recipe` a Markdown según un `RecipeProfile`."""

    def render_markdown(self, recipe: Recipe, profile: RecipeProfile = COMPLETO_V1) -> str:
        def title(key: str, fallback: str) -> str:
            t = (profile.titles.get(key, "") or "").strip()
            return t if t else fallback

        lines: List[str] = []
        lines.append(f"# {recipe.name}\n\n")

        # PORCIONES
        if "portions" in profile.show and (recipe.ingredients or recipe.steps):
            lines.append(f"**{title('portions', 'Portions')}**: {recipe.portions}\n\n")

        # INSUMOS
        if "supplies" in profile.show and recipe.supplies:
            lines.append(f"## {title('supplies', 'Supplies')}\n\n")
            for supply in recipe.supplies:
                lines.append(f"- {supply.name}\n")
            lines.append("\n")

        # INGREDIENTES
        if "ingredients" in profile.show and recipe.ingredients:
            lines.append(f"## {title('ingredients', 'Ingredients')}\n\n")
            for ingredient in recipe.ingredients:
                lines.append(f"- {format_ingredient(ingredient)}\n")
            lines.append("\n")

        # PASOS
        if "steps" in profile.show and recipe.steps:
            lines.append(f"## {title('steps', 'Steps')}\n\n")
            for index, step in enumerate(recipe.steps, start=1):
                lines.append(f"### {index}: {step.name}\n\n")
                text = render_step_text(step).strip()
                if text:
                    lines.append(f"{text}\n\n")

        return "".join(lines)
