from __future__ import annotations

from ..config import EffectiveConfig
from .app import RecipeboxApp


def run_tui(cfg: EffectiveConfig) -> int:
    app = RecipeboxApp(cfg)
    app.run()
    return 0


__all__ = ["run_tui", "RecipeboxApp"]
