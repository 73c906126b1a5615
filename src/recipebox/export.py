from __future__ import annotations

import logging
import os
from pathlib import Path
import re
import tempfile

from .domain import Recipe
from .errors import ExportWriteError

logger = logging.getLogger(__name__)

BULLET = "•"
FALLBACK_FILENAME = "recept"
MAX_FILENAME_STEM = 120

_UNSAFE_CHARS_RE = re.compile(r'[\x00-\x1f\x7f<>:"/\\|?*]')
_RESERVED_NAMES = {
    "CON",
    "PRN",
    "AUX",
    "NUL",
    *(f"COM{i}" for i in range(1, 10)),
    *(f"LPT{i}" for i in range(1, 10)),
}


def format_cooking_time(recipe: Recipe) -> str:
    return f"Koktid: {recipe.cooking_time_text} minuter"


def render_recipe_text(recipe: Recipe) -> str:
    lines = [f"Titel: {recipe.title}", format_cooking_time(recipe), ""]
    lines.append("Ingredienser:")
    for ingredient in recipe.ingredients:
        lines.append(f"{BULLET} {ingredient}")
    lines.append("")
    lines.append("Instruktioner:")
    lines.append(recipe.instructions)
    return "\n".join(lines) + "\n"


def safe_filename(title: str) -> str:
    stem = _UNSAFE_CHARS_RE.sub("_", title)
    stem = stem.strip(" .")[:MAX_FILENAME_STEM].rstrip(" .")
    if not stem:
        stem = FALLBACK_FILENAME
    if stem.upper() in _RESERVED_NAMES:
        stem = f"_{stem}"
    return f"{stem}.txt"


def export_recipe(recipe: Recipe, export_dir: Path) -> Path:
    """Write ``recipe`` as text into ``export_dir`` and return the file path.

    The file is written next to its destination first and moved into place,
    so a failed write never leaves a partial file under the final name. An
    existing export with the same name is overwritten.
    """

    target = Path(export_dir) / safe_filename(recipe.title)
    content = render_recipe_text(recipe)
    tmp_name: str | None = None
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=target.parent, prefix=".export-", suffix=".tmp")
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(content)
        os.replace(tmp_name, target)
    except (OSError, UnicodeError) as exc:
        if tmp_name is not None:
            _discard(Path(tmp_name))
        logger.error("Failed to export recipe %r to %s: %s", recipe.title, target, exc)
        raise ExportWriteError(f"Kunde inte spara receptet: {target}") from exc

    logger.info("Exported recipe %r to %s", recipe.title, target)
    return target


def _discard(path: Path) -> None:
    try:
        path.unlink()
    except FileNotFoundError:
        pass
    except OSError as exc:
        logger.warning("Could not remove temporary export file %s: %s", path, exc)
