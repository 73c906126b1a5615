from __future__ import annotations

import pytest

from recipebox.domain import Recipe
from recipebox.errors import OutOfRangeError, UnknownRecipeError
from recipebox.session import RecipeSession


def _session(recipes: list[Recipe]) -> RecipeSession:
    session = RecipeSession()
    for recipe in recipes:
        session.add(recipe)
    return session


def test_new_session_is_empty() -> None:
    session = RecipeSession()
    assert session.visible == ()
    assert len(session.store) == 0
    assert session.query == ""


def test_add_shows_recipe_in_view(sample_recipes: list[Recipe]) -> None:
    session = _session(sample_recipes)
    assert session.visible == tuple(sample_recipes)


def test_query_filters_view_not_store(sample_recipes: list[Recipe]) -> None:
    session = _session(sample_recipes)
    session.set_query("pasta")
    assert [r.title for r in session.visible] == ["Pasta", "Pasta salad"]
    assert len(session.store) == 4


def test_added_recipe_respects_active_query(sample_recipes: list[Recipe]) -> None:
    session = _session(sample_recipes)
    session.set_query("pasta")
    session.add(Recipe(title="Pasta bake"))
    session.add(Recipe(title="Salad"))
    assert [r.title for r in session.visible] == ["Pasta", "Pasta salad", "Pasta bake"]


def test_remove_visible_maps_filtered_position_to_canonical(sample_recipes: list[Recipe]) -> None:
    session = _session(sample_recipes)
    session.set_query("pasta")
    removed = session.remove_visible(1)
    assert removed.title == "Pasta salad"
    assert [r.title for r in session.store] == ["Pasta", "Soup", "Pancakes"]
    assert [r.title for r in session.visible] == ["Pasta"]


def test_remove_visible_with_duplicate_titles() -> None:
    first = Recipe(title="Tea", cooking_time=3)
    second = Recipe(title="Tea", cooking_time=5)
    session = _session([first, second])
    session.set_query("5")
    session.remove_visible(0)
    assert session.store.recipes == (first,)


def test_remove_visible_out_of_range(sample_recipes: list[Recipe]) -> None:
    session = _session(sample_recipes)
    session.set_query("soup")
    with pytest.raises(OutOfRangeError):
        session.remove_visible(1)
    assert len(session.store) == 4


def test_clearing_query_restores_full_view(sample_recipes: list[Recipe]) -> None:
    session = _session(sample_recipes)
    session.set_query("soup")
    session.set_query("")
    assert session.visible == tuple(sample_recipes)


def test_remove_by_id(sample_recipes: list[Recipe]) -> None:
    session = _session(sample_recipes)
    session.remove(sample_recipes[0].recipe_id)
    assert sample_recipes[0] not in session.visible
    with pytest.raises(UnknownRecipeError):
        session.remove(sample_recipes[0].recipe_id)
