"""
Dependencias de FastAPI.

Este módulo proporciona dependencias reutilizables para las rutas:
- La fuente de recetas configurada (`get_recipe_source`)

En tests se reemplaza con `app.dependency_overrides[get_recipe_source]`.
"""

import logging

from rizzipes_core.config import get_settings
from rizzipes_core.core.abstractions import RecipeSource
from rizzipes_core.store import FileRecipeSource

logger = logging.getLogger(__name__)


def get_recipe_source() -> RecipeSource:
    """
    Dependencia de FastAPI que devuelve la fuente de recetas.

    Usa `Settings.data_dir` (RIZZIPES_DATA_DIR).
    """
    settings = get_settings()
    logger.debug(f"Fuente de recetas: {settings.data_dir}")
    return FileRecipeSource(settings.data_dir)
