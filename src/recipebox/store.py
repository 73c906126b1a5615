from __future__ import annotations

from collections.abc import Iterable, Iterator

from .domain import Recipe
from .errors import OutOfRangeError, UnknownRecipeError


class RecipeStore:
    """Ordered in-memory recipe collection addressed by position or id."""

    def __init__(self, recipes: Iterable[Recipe] = ()) -> None:
        self._recipes: list[Recipe] = list(recipes)

    def __len__(self) -> int:
        return len(self._recipes)

    def __iter__(self) -> Iterator[Recipe]:
        return iter(tuple(self._recipes))

    @property
    def recipes(self) -> tuple[Recipe, ...]:
        return tuple(self._recipes)

    def add(self, recipe: Recipe) -> None:
        self._recipes.append(recipe)

    def get_at(self, position: int) -> Recipe:
        self._check_position(position)
        return self._recipes[position]

    def get(self, recipe_id: str) -> Recipe:
        return self._recipes[self._index_of(recipe_id)]

    def remove_at(self, position: int) -> Recipe:
        self._check_position(position)
        return self._recipes.pop(position)

    def remove(self, recipe_id: str) -> Recipe:
        return self._recipes.pop(self._index_of(recipe_id))

    def replace_all(self, recipes: Iterable[Recipe]) -> None:
        self._recipes = list(recipes)

    def _check_position(self, position: int) -> None:
        if position < 0 or position >= len(self._recipes):
            raise OutOfRangeError(
                f"Position {position} out of range for {len(self._recipes)} recipes"
            )

    def _index_of(self, recipe_id: str) -> int:
        for idx, recipe in enumerate(self._recipes):
            if recipe.recipe_id == recipe_id:
                return idx
        raise UnknownRecipeError(f"No recipe with id {recipe_id!r}")
