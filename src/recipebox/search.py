from __future__ import annotations

from collections.abc import Iterable

from .domain import Recipe


def recipe_matches(recipe: Recipe, query: str) -> bool:
    q = query.lower()
    if q in recipe.title.lower():
        return True
    if any(q in ingredient.lower() for ingredient in recipe.ingredients):
        return True
    return q in recipe.cooking_time_text.lower()


def filter_recipes(recipes: Iterable[Recipe], query: str) -> list[Recipe]:
    items = list(recipes)
    if not query.strip():
        return items
    return [recipe for recipe in items if recipe_matches(recipe, query)]
