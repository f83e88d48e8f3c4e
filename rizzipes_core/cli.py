"""
rizzipes_core.cli
=================

CLI mínima sobre el engine:

    python -m rizzipes_core.cli list
    python -m rizzipes_core.cli render <id> [--portions N] [--mode simple|completo] [--output FILE]

`render` imprime (o guarda) el Markdown de la receta escalada a N porciones.
Si la receta no existe se imprime la receta vacía "Recipe not found" y el
proceso termina con código 1.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from .config import get_settings
from .engine import parse_portions, render_recipe_page
from .store import FileRecipeSource


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="rizzipes", description="Render de recetas escaladas por porciones")
    parser.add_argument("--data-dir", default=None, help="Override de RIZZIPES_DATA_DIR")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="Lista las recetas disponibles")

    render = sub.add_parser("render", help="Renderiza una receta a Markdown")
    render.add_argument("recipe_id", help="Id de la receta (nombre del archivo sin .json)")
    render.add_argument("--portions", default=None, help="Cantidad de porciones (default: 1)")
    render.add_argument("--mode", choices=["simple", "completo"], default=None)
    render.add_argument("--output", default=None, help="Archivo de salida (default: stdout)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Ejecuta la CLI.

    Returns
    -------
    int
        0 si todo salió bien, 1 si la receta pedida no existe.
    """
    args = build_parser().parse_args(argv)
    settings = get_settings()

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    source = FileRecipeSource(args.data_dir or settings.data_dir)

    if args.command == "list":
        for item in source.list_index():
            print(f"{item.id}\t{item.name}")
        return 0

    portions = parse_portions(args.portions, settings.default_portions)
    result = render_recipe_page(source, args.recipe_id, portions, args.mode)

    if args.output:
        out_path = Path(args.output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(result["markdown"], encoding="utf-8")
        print(f"✅ Receta generada en: {out_path.resolve()}")
    else:
        print(result["markdown"], end="")

    return 0 if result["found"] else 1


if __name__ == "__main__":
    raise SystemExit(main())
