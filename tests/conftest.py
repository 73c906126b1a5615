from __future__ import annotations

import logging
from pathlib import Path
import sys

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from recipebox.domain import Recipe  # noqa: E402


@pytest.fixture()
def temp_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path


@pytest.fixture()
def tea() -> Recipe:
    return Recipe(
        title="Tea",
        ingredients=("Water", "Tea bag"),
        cooking_time=5,
        instructions="Boil water.",
    )


@pytest.fixture()
def sample_recipes() -> list[Recipe]:
    return [
        Recipe(title="Pasta", ingredients=("Spaghetti", "Tomato"), cooking_time="20", instructions="Boil."),
        Recipe(title="Soup", ingredients=("Carrot", "Onion"), cooking_time=45, instructions="Simmer."),
        Recipe(title="Pasta salad", ingredients=("Fusilli", "Feta"), cooking_time="15", instructions="Mix."),
        Recipe(title="Pancakes", ingredients=("Milk", "Flour", "Egg"), cooking_time=30, instructions="Fry."),
    ]


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
