from __future__ import annotations

from dataclasses import dataclass, field
import uuid

from ..errors import OutOfRangeError, ValidationError


def new_recipe_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class Recipe:
    title: str
    ingredients: tuple[str, ...] = ()
    cooking_time: str | int | float = ""
    instructions: str = ""
    recipe_id: str = field(default_factory=new_recipe_id)

    @property
    def cooking_time_text(self) -> str:
        return str(self.cooking_time)


@dataclass
class RecipeDraft:
    """Form state for a recipe that has not been created yet."""

    title: str = ""
    ingredients: list[str] = field(default_factory=list)
    cooking_time: str = ""
    instructions: str = ""

    def add_ingredient(self, text: str) -> bool:
        if not text.strip():
            return False
        self.ingredients.append(text)
        return True

    def remove_ingredient(self, position: int) -> str:
        if position < 0 or position >= len(self.ingredients):
            raise OutOfRangeError(f"No ingredient at position {position}")
        return self.ingredients.pop(position)

    def build(self) -> Recipe:
        title = self.title.strip()
        if not title:
            raise ValidationError("Receptet behöver en rubrik.")
        return Recipe(
            title=title,
            ingredients=tuple(self.ingredients),
            cooking_time=self.cooking_time,
            instructions=self.instructions,
        )
