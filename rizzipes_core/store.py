from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List

"""
rizzipes_core.store
===================

Fuente de recetas basada en filesystem (data/ → registros crudos).

Responsabilidad
----------------
Este módulo se encarga exclusivamente de:

- Leer el índice de recetas (`<data_dir>/recipes/index.json`)
- Leer el registro crudo de una receta (`<data_dir>/recipes/<id>.json`)
- Señalar recetas inexistentes con `RecipeNotFoundError`

NO hace:
---------
- Construcción del grafo (eso es `RecipeFactory`)
- Validación del contenido de la receta
- Render

Diseño
------
- Simple: filesystem como fuente de verdad
- Sin índice explícito, el índice se arma escaneando los `.json` del directorio
- Tolerante a errores en el índice: archivos rotos no rompen el listado
"""

logger = logging.getLogger(__name__)

INDEX_FILE = "index.json"

# Los ids se usan para armar rutas: nada de "../" ni separadores
_RECIPE_ID_RE = re.compile(r"^[a-z0-9][a-z0-9\-]*$")


class RecipeNotFoundError(LookupError):
    """La receta pedida no existe (o su archivo no se puede leer)."""

    def __init__(self, recipe_id: str, reason: str = "no existe") -> None:
        super().__init__(f"Receta '{recipe_id}' no encontrada: {reason}")
        self.recipe_id = recipe_id
        self.reason = reason


@dataclass
class RecipeIndexItem:
    """Entrada del índice de recetas."""

    id: str
    name: str

    def to_dict(self) -> Dict[str, str]:
        return {"id": self.id, "name": self.name}


def is_valid_recipe_id(recipe_id: str) -> bool:
    return bool(_RECIPE_ID_RE.match(recipe_id or ""))


class FileRecipeSource:
    """
    Implementa `RecipeSource` sobre un directorio local.

    Layout esperado::

        <data_dir>/recipes/index.json      {"recipes": [{"id": ..., "name": ...}]}
        <data_dir>/recipes/<id>.json       registro crudo de la receta
    """

    def __init__(self, data_dir: Path | str) -> None:
        self.recipes_dir = Path(data_dir) / "recipes"

    def list_index(self) -> List[RecipeIndexItem]:
        index_path = self.recipes_dir / INDEX_FILE
        if not index_path.exists():
            return self._discover_index()

        try:
            data = json.loads(index_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Índice ilegible {index_path}, se escanea el directorio: {e}")
            return self._discover_index()

        entries = data.get("recipes") if isinstance(data, dict) else None
        if not isinstance(entries, list):
            logger.warning(f"Índice sin lista 'recipes' en {index_path}, se escanea el directorio")
            return self._discover_index()

        items: List[RecipeIndexItem] = []
        for entry in entries:
            recipe_id = entry.get("id") if isinstance(entry, dict) else None
            if not isinstance(recipe_id, str) or not is_valid_recipe_id(recipe_id):
                logger.warning(f"Entrada inválida en el índice, se ignora: {entry!r}")
                continue
            items.append(RecipeIndexItem(id=recipe_id, name=str(entry.get("name") or recipe_id)))
        return items

    def list_recipes(self) -> List[Dict[str, Any]]:
        return [item.to_dict() for item in self.list_index()]

    def get_recipe_data(self, recipe_id: str) -> Dict[str, Any]:
        if not is_valid_recipe_id(recipe_id):
            logger.warning(f"Id de receta inválido: {recipe_id!r}")
            raise RecipeNotFoundError(recipe_id, "id inválido")

        path = self.recipes_dir / f"{recipe_id}.json"
        if not path.is_file():
            logger.warning(f"Receta no encontrada: {path}")
            raise RecipeNotFoundError(recipe_id)

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"No se pudo leer la receta {path}: {e}")
            raise RecipeNotFoundError(recipe_id, f"archivo ilegible ({e})") from e

        if not isinstance(data, dict):
            raise RecipeNotFoundError(recipe_id, "el archivo no contiene un objeto JSON")
        return data

    def _discover_index(self) -> List[RecipeIndexItem]:
        """Arma el índice escaneando `<id>.json`, en orden estable por id."""
        if not self.recipes_dir.exists():
            return []

        items: List[RecipeIndexItem] = []
        for path in sorted(self.recipes_dir.glob("*.json")):
            if path.name == INDEX_FILE or not is_valid_recipe_id(path.stem):
                continue
            try:
                data = json.loads(path.read_text(encoding="utf-8"))
            except (OSError, json.JSONDecodeError) as e:
                logger.warning(f"Se ignora {path} en el índice: {e}")
                continue
            name = data.get("name") if isinstance(data, dict) else None
            items.append(RecipeIndexItem(id=path.stem, name=str(name or path.stem)))
        return items
