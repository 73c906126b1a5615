from __future__ import annotations

from ...domain import Recipe
from ..textual import ListItem, ListView


async def clear_list(list_view: ListView) -> None:
    await list_view.clear()


def list_view_index(list_view: ListView, item: ListItem) -> int | None:
    try:
        return list(list_view.children).index(item)
    except ValueError:
        return None


def current_index(list_view: ListView) -> int | None:
    index = getattr(list_view, "index", None)
    if isinstance(index, int) and index >= 0:
        return index

    item = getattr(list_view, "highlighted_child", None)
    if item is not None:
        return list_view_index(list_view, item)
    return None


def highlighted_recipe(list_view: ListView) -> Recipe | None:
    item = getattr(list_view, "highlighted_child", None)
    if item is None:
        return None
    return getattr(item, "recipe", None)
