"""
Endpoints de recetas.

Este módulo maneja:
- GET /api/v1/recipes: índice de recetas
- GET /api/v1/recipes/{recipe_id}: receta escalada, con el texto de los pasos resuelto
- GET /api/v1/recipes/{recipe_id}/markdown: receta renderizada a Markdown
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import PlainTextResponse

from rizzipes_core.core.abstractions import RecipeSource
from rizzipes_core.domains.recipes.models import Ingredient, Recipe, Step, Supply, Use
from rizzipes_core.domains.recipes.renderer import format_ingredient
from rizzipes_core.engine import load_recipe, parse_portions, render_recipe_page
from rizzipes_core.store import RecipeNotFoundError

from ..dependencies import get_recipe_source
from ..models.requests import (
    IngredientResponse,
    RecipeIndexItemResponse,
    RecipeIndexResponse,
    RecipeMode,
    RecipeResponse,
    SegmentType,
    StepResponse,
    StepSegmentResponse,
    SupplyResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/recipes", tags=["recipes"])


def _segments_to_response(step: Step) -> List[StepSegmentResponse]:
    """Convierte el texto resuelto de un paso a segmentos serializables."""
    segments: List[StepSegmentResponse] = []
    for segment in step.resolved_text():
        if isinstance(segment, str):
            segments.append(StepSegmentResponse(type=SegmentType.TEXT, text=segment))
        elif isinstance(segment, Use):
            owner = segment.belongs_to
            seg_type = SegmentType.USE_INGREDIENT if isinstance(owner, Ingredient) else SegmentType.USE_SUPPLY
            segments.append(StepSegmentResponse(type=seg_type, text=str(segment), ref_id=owner.id))
        elif isinstance(segment, Ingredient):
            segments.append(StepSegmentResponse(type=SegmentType.INGREDIENT, text=str(segment), ref_id=segment.id))
        elif isinstance(segment, Supply):
            segments.append(StepSegmentResponse(type=SegmentType.SUPPLY, text=str(segment), ref_id=segment.id))
    return segments


def recipe_to_response(recipe_id: str, recipe: Recipe) -> RecipeResponse:
    return RecipeResponse(
        id=recipe_id,
        name=recipe.name,
        portions=recipe.portions,
        supplies=[SupplyResponse(id=s.id, name=s.name) for s in recipe.supplies],
        ingredients=[
            IngredientResponse(
                id=i.id,
                name=i.name,
                unit=i.unit,
                total_amount=i.total_amount,
                display=format_ingredient(i),
            )
            for i in recipe.ingredients
        ],
        steps=[StepResponse(name=step.name, segments=_segments_to_response(step)) for step in recipe.steps],
    )


@router.get("", response_model=RecipeIndexResponse)
async def list_recipes(source: RecipeSource = Depends(get_recipe_source)):
    """
    Lista las recetas disponibles.

    Returns:
        RecipeIndexResponse con id y nombre de cada receta
    """
    items = source.list_recipes()
    return RecipeIndexResponse(
        recipes=[RecipeIndexItemResponse(id=str(item["id"]), name=str(item["name"])) for item in items]
    )


@router.get("/{recipe_id}", response_model=RecipeResponse)
async def get_recipe(
    recipe_id: str,
    portions: Optional[str] = Query(default=None, description="Porciones (default: 1)"),
    source: RecipeSource = Depends(get_recipe_source),
):
    """
    Devuelve la receta escalada a `portions`.

    Un valor de `portions` ausente o inválido usa el default en lugar de
    fallar con 422.

    Raises:
        404: Si la receta no existe
    """
    n_portions = parse_portions(portions)
    try:
        recipe = load_recipe(source, recipe_id, n_portions)
    except RecipeNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e

    return recipe_to_response(recipe_id, recipe)


@router.get("/{recipe_id}/markdown", response_class=PlainTextResponse)
async def get_recipe_markdown(
    recipe_id: str,
    portions: Optional[str] = Query(default=None, description="Porciones (default: 1)"),
    mode: Optional[RecipeMode] = Query(default=None, description="Perfil de render"),
    source: RecipeSource = Depends(get_recipe_source),
):
    """
    Devuelve la receta renderizada a Markdown.

    Si la receta no existe, responde 404 con el Markdown de la receta vacía
    ("Recipe not found") como cuerpo.
    """
    result = render_recipe_page(
        source,
        recipe_id,
        parse_portions(portions),
        mode.value if mode else None,
    )
    status_code = 200 if result["found"] else 404
    return PlainTextResponse(result["markdown"], status_code=status_code, media_type="text/markdown")
