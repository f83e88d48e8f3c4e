"""
Tests de la CLI (list / render) sobre el directorio de datos del repo.
"""

from pathlib import Path

from rizzipes_core.cli import main

DATA_DIR = str(Path(__file__).resolve().parent.parent / "data")


def test_list(capsys):
    assert main(["--data-dir", DATA_DIR, "list"]) == 0
    out = capsys.readouterr().out
    assert "tomato-soup\tTomato soup" in out
    assert "pancakes\tPancakes" in out


def test_render_scaled(capsys):
    assert main(["--data-dir", DATA_DIR, "render", "pancakes", "--portions", "2"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("# Pancakes")
    assert "- 120 g Flour" in out
    assert "- 1 pc Egg" in out
    assert "<u>1 Frying pan</u>" in out


def test_render_invalid_portions_uses_default(capsys):
    assert main(["--data-dir", DATA_DIR, "render", "pancakes", "--portions", "many"]) == 0
    assert "- 60 g Flour" in capsys.readouterr().out


def test_render_to_file(tmp_path):
    out_file = tmp_path / "out" / "soup.md"
    assert main(["--data-dir", DATA_DIR, "render", "tomato-soup", "--mode", "simple", "--output", str(out_file)]) == 0
    md = out_file.read_text(encoding="utf-8")
    assert md.startswith("# Tomato soup")
    assert "## Supplies" not in md
    assert "<u>0.5 pc Onion</u>" in md


def test_render_missing_recipe(capsys):
    assert main(["--data-dir", DATA_DIR, "render", "ghost"]) == 1
    assert "# Recipe not found" in capsys.readouterr().out


def test_list_with_broken_index(tmp_path, capsys):
    recipes = tmp_path / "recipes"
    recipes.mkdir()
    (recipes / "index.json").write_text("{not json", encoding="utf-8")
    (recipes / "tea.json").write_text('{"name": "Tea"}', encoding="utf-8")

    assert main(["--data-dir", str(tmp_path), "list"]) == 0
    assert "tea\tTea" in capsys.readouterr().out
