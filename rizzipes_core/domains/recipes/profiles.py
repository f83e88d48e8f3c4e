"""
Perfiles de presentación para el render de recetas.

Un perfil controla *qué* secciones de una `Recipe` se muestran y con qué
títulos, sin tocar el modelo de dominio.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Literal

# Modo general del documento
Mode = Literal["simple", "completo"]


@dataclass(frozen=True)
class RecipeProfile:
    """
    Define un perfil de render para una receta.

    Attributes
    ----------
    id:
        Identificador estable del perfil (útil para logging y tests).
    mode:
        Modo principal del perfil: "simple" | "completo".
    label:
        Etiqueta humana del perfil.
    show:
        Secciones a renderizar, alineadas con `RecipeRenderer.render_markdown`:
        "portions", "supplies", "ingredients", "steps".
    titles:
        Mapeo de clave de sección → título.
    """

    id: str
    mode: Mode
    label: str
    show: List[str]
    titles: Dict[str, str]


# ============================================================
# Perfiles predefinidos
# ============================================================

SIMPLE_V1 = RecipeProfile(
    id="simple_v1",
    mode="simple",
    label="Simple (solo ingredientes y pasos)",
    show=[
        "ingredients",
        "steps",
    ],
    titles={
        "ingredients": "Ingredients",
        "steps": "Steps",
    },
)

COMPLETO_V1 = RecipeProfile(
    id="completo_v1",
    mode="completo",
    label="Completo",
    show=[
        "portions",
        "supplies",
        "ingredients",
        "steps",
    ],
    titles={
        "portions": "Portions",
        "supplies": "Supplies",
        "ingredients": "Ingredients",
        "steps": "Steps",
    },
)


def get_profile(mode: str) -> RecipeProfile:
    """
    Devuelve el perfil por defecto para un `mode`.

    Cualquier valor distinto de "simple" devuelve el perfil completo.
    """
    return SIMPLE_V1 if mode == "simple" else COMPLETO_V1
