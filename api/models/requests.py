"""
Modelos de request/response para la API.

Estos modelos definen la estructura de los datos que entran y salen por HTTP.
La respuesta de una receta es una vista serializable del grafo de dominio: el
texto de cada paso ya viene resuelto en segmentos.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class RecipeMode(str, Enum):
    """Perfil de render del documento Markdown."""

    SIMPLE = "simple"
    COMPLETO = "completo"


class SegmentType(str, Enum):
    """Tipo de segmento dentro del texto resuelto de un paso."""

    TEXT = "text"
    INGREDIENT = "ingredient"
    SUPPLY = "supply"
    USE_INGREDIENT = "use_ingredient"
    USE_SUPPLY = "use_supply"


class RecipeIndexItemResponse(BaseModel):
    """Entrada del índice de recetas."""

    id: str = Field(..., description="Id de la receta (usado en la URL)")
    name: str = Field(..., description="Nombre visible de la receta")


class RecipeIndexResponse(BaseModel):
    """Índice de recetas disponibles."""

    recipes: List[RecipeIndexItemResponse] = Field(default_factory=list)


class IngredientResponse(BaseModel):
    """Ingrediente con su cantidad total para las porciones actuales."""

    id: str
    name: str
    unit: str
    total_amount: float = Field(..., description="Suma de los usos escalados por porciones")
    display: str = Field(..., description="Ej: '6 g Salt'")


class SupplyResponse(BaseModel):
    """Insumo/equipamiento (no se escala)."""

    id: str
    name: str


class StepSegmentResponse(BaseModel):
    """Segmento del texto de un paso: literal o referencia resuelta."""

    type: SegmentType
    text: str = Field(..., description="Texto a mostrar (literal o referencia formateada)")
    ref_id: Optional[str] = Field(
        default=None,
        description="Id del ingrediente/insumo referenciado (None para literales)",
    )


class StepResponse(BaseModel):
    """Paso con su texto resuelto."""

    name: str
    segments: List[StepSegmentResponse] = Field(default_factory=list)


class RecipeResponse(BaseModel):
    """Receta construida y escalada."""

    id: str = Field(..., description="Id pedido")
    name: str
    portions: int
    supplies: List[SupplyResponse] = Field(default_factory=list)
    ingredients: List[IngredientResponse] = Field(default_factory=list)
    steps: List[StepResponse] = Field(default_factory=list)
