from .add_recipe import AddRecipeScreen
from .details import RecipeDetailsScreen
from .home import HomeScreen

__all__ = [
    "AddRecipeScreen",
    "HomeScreen",
    "RecipeDetailsScreen",
]
