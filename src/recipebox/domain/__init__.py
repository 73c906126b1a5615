from .models import Recipe, RecipeDraft, new_recipe_id

__all__ = [
    "Recipe",
    "RecipeDraft",
    "new_recipe_id",
]
