"""
Parser de templates inline para el texto de los pasos.

Un template es un token con la forma ``{{kind:id}}`` embebido en el texto de
un paso, por ejemplo::

    "Agregá {{useIngredients:salt}} y revolvé en la {{supplies:pan}}."

Este módulo define:
- `TemplateKind`: los cuatro tipos de entidad referenciables
- `Template`: la forma parseada de un token
- `TemplateParser`: parsea un token y expone el patrón para escanear textos
- `ParseError`: el token no respeta la gramática
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator


class TemplateKind(str, Enum):
    """Tipo de entidad a la que apunta un template."""

    INGREDIENTS = "ingredients"
    SUPPLIES = "supplies"
    USE_INGREDIENTS = "useIngredients"
    USE_SUPPLIES = "useSupplies"


# Formato de cable: {{(useIngredients|ingredients|useSupplies|supplies):[a-z-]+}}
TEMPLATE_PATTERN: re.Pattern[str] = re.compile(
    r"\{\{(useIngredients|ingredients|useSupplies|supplies):[a-z\-]+\}\}"
)


class ParseError(ValueError):
    """El string no cumple la gramática ``{{kind:id}}``."""


@dataclass(frozen=True)
class Template:
    """
    Token parseado.

    Attributes
    ----------
    kind:
        Tipo de entidad referenciada.
    id:
        Identificador de la entidad (ingrediente o insumo) dentro de la receta.
    """

    kind: TemplateKind
    id: str

    def __str__(self) -> str:
        return "{{" + f"{self.kind.value}:{self.id}" + "}}"


class TemplateParser:
    """
    Parser de tokens ``{{kind:id}}``.

    El mismo patrón que valida un token es el que se usa para buscar todos los
    tokens de un texto, así el escaneo y el parseo no pueden divergir.
    """

    @property
    def pattern(self) -> re.Pattern[str]:
        return TEMPLATE_PATTERN

    def finditer(self, text: str) -> Iterator[re.Match[str]]:
        """Devuelve todas las ocurrencias (no solapadas) de tokens en `text`."""
        return self.pattern.finditer(text)

    def parse(self, template_string: str) -> Template:
        """
        Parsea un token completo a `Template`.

        Raises
        ------
        ParseError
            Si `template_string` no es exactamente un token válido.
        """
        if not self.pattern.fullmatch(template_string):
            raise ParseError(f"Se esperaba un template '{{{{kind:id}}}}', se recibió '{template_string}'")

        kind, template_id = template_string[2:-2].split(":", 1)
        return Template(kind=TemplateKind(kind), id=template_id)
