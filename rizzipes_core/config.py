# rizzipes_core/config.py
from dataclasses import dataclass
from functools import lru_cache
import os

from dotenv import load_dotenv

"""
rizzipes_core.config
====================

Gestión centralizada de configuración de la aplicación.

Este módulo define:
- La estructura de configuración (`Settings`)
- El mecanismo para cargar variables desde entorno (.env)
- Un acceso único y cacheado a la configuración (`get_settings`)

Convenciones
------------
- Las variables de entorno se cargan desde un archivo `.env` si existe.
- Los defaults están pensados para desarrollo local.
- Valores inválidos (ej. porciones no numéricas) caen al default, no fallan acá.
"""

# Cargar variables de entorno desde .env (si existe)
load_dotenv()


@dataclass
class Settings:
    """
    Contenedor tipado de configuración global de la aplicación.

    Attributes
    ----------
    data_dir:
        Directorio base de datos. Las recetas viven en
        `<data_dir>/recipes/index.json` y `<data_dir>/recipes/<id>.json`.
    default_portions:
        Porciones usadas cuando el pedido no trae un valor válido.
    default_mode:
        Perfil de render por defecto ("simple" | "completo").
    environment:
        Nombre del ambiente (solo informativo, se loguea al iniciar la API).
    log_level:
        Nivel de logging raíz para API y CLI.
    cors_origins:
        Orígenes permitidos por CORS en la API.
    """

    data_dir: str = "data"
    default_portions: int = 1
    default_mode: str = "completo"

    environment: str = "local"
    log_level: str = "INFO"
    cors_origins: tuple = ("http://localhost:3000", "http://localhost:3001")


def _int_env(name: str, default: int) -> int:
    try:
        value = int(os.getenv(name, ""))
    except ValueError:
        return default
    return value if value > 0 else default


@lru_cache
def get_settings() -> Settings:
    """
    Devuelve una instancia única y cacheada de `Settings`.

    Variables de entorno utilizadas
    -------------------------------
    - RIZZIPES_DATA_DIR (default: "data")
    - RIZZIPES_DEFAULT_PORTIONS (default: 1)
    - RIZZIPES_PROFILE (default: "completo")
    - ENVIRONMENT (default: "local")
    - LOG_LEVEL (default: "INFO")
    - CORS_ORIGINS (default: "http://localhost:3000,http://localhost:3001")

    Notas
    -----
    En tests, usar `get_settings.cache_clear()` después de tocar el entorno.
    """
    cors_origins_str = os.getenv("CORS_ORIGINS", "http://localhost:3000,http://localhost:3001")
    return Settings(
        data_dir=os.getenv("RIZZIPES_DATA_DIR", "data"),
        default_portions=_int_env("RIZZIPES_DEFAULT_PORTIONS", 1),
        default_mode=os.getenv("RIZZIPES_PROFILE", "completo"),
        environment=os.getenv("ENVIRONMENT", "local"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        cors_origins=tuple(origin.strip() for origin in cors_origins_str.split(",") if origin.strip()),
    )
