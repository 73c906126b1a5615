from __future__ import annotations

import logging

from .domain import Recipe
from .search import filter_recipes
from .store import RecipeStore

logger = logging.getLogger(__name__)


class RecipeSession:
    """Recipes and search state for one application run.

    The canonical store holds every recipe. The view store holds the
    recipes matching the current query and is rebuilt after every change,
    so positions shown on screen always refer to ``view``.
    """

    def __init__(self) -> None:
        self.store = RecipeStore()
        self.view = RecipeStore()
        self.query = ""

    @property
    def visible(self) -> tuple[Recipe, ...]:
        return self.view.recipes

    def add(self, recipe: Recipe) -> None:
        self.store.add(recipe)
        logger.debug("Added recipe %s (%s)", recipe.recipe_id, recipe.title)
        self.refresh()

    def set_query(self, query: str) -> None:
        self.query = query
        self.refresh()

    def remove(self, recipe_id: str) -> Recipe:
        removed = self.store.remove(recipe_id)
        logger.debug("Removed recipe %s (%s)", removed.recipe_id, removed.title)
        self.refresh()
        return removed

    def remove_visible(self, position: int) -> Recipe:
        target = self.view.get_at(position)
        return self.remove(target.recipe_id)

    def refresh(self) -> None:
        self.view.replace_all(filter_recipes(self.store, self.query))
